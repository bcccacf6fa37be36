"""
Entity extraction for non-similarity messages.

Scans lower-cased text for genre keywords, language keywords, and coarse
intent keywords. Evaluation order is fixed so results are deterministic.
"""
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..interaction.intent_types import IntentType
from ..models import MediaType
from ..vocabulary import (
    LANGUAGES,
    MOVIE_GENRES,
    TOP_RATED_KEYWORDS,
    TRENDING_KEYWORDS,
    TV_GENRES,
)


@dataclass(frozen=True)
class ExtractedEntities:
    """Entities found in one message."""
    genre_ids: Tuple[int, ...]
    language: Optional[str]
    intent: Optional[IntentType]


class EntityExtractor:
    """
    Extracts genre ids, language code and coarse intent from a message.

    Known quirks, kept for compatibility:
    - Language: last match in table declaration order wins, so
      "malayalam" also matches "malay" and resolves to "ms".
    - Intent: TOP_RATED is assigned after TRENDING and overwrites it.
    """

    def extract(self, text: str, media_type: MediaType) -> ExtractedEntities:
        """
        :param text: Lower-cased message
        :param media_type: Detected media type (selects the genre table)
        :return: ExtractedEntities
        """
        return ExtractedEntities(
            genre_ids=tuple(self._extract_genres(text, media_type)),
            language=self._extract_language(text),
            intent=self._classify_intent(text),
        )

    def _extract_genres(self, text: str, media_type: MediaType) -> List[int]:
        table = TV_GENRES if media_type is MediaType.TV else MOVIE_GENRES
        return [genre_id for keyword, genre_id in table if keyword in text]

    def _extract_language(self, text: str) -> Optional[str]:
        language = None
        for keyword, code in LANGUAGES:
            if keyword in text:
                language = code
        return language

    def _classify_intent(self, text: str) -> Optional[IntentType]:
        intent = None
        if any(keyword in text for keyword in TRENDING_KEYWORDS):
            intent = IntentType.TRENDING
        if any(keyword in text for keyword in TOP_RATED_KEYWORDS):
            intent = IntentType.TOP_RATED
        return intent
