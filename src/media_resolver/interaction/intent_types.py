"""
Intent types for message classification.

Defines the possible intents a chat message can resolve to.
"""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Tuple

from ..models import ConceptEntry, MediaType


class IntentType(Enum):
    """Types of resolved intents."""
    SIMILAR_TO = auto()
    TRENDING = auto()
    TOP_RATED = auto()
    DISCOVER = auto()
    KEYWORD_FALLBACK = auto()
    UNRESOLVED = auto()


@dataclass(frozen=True)
class ParsedIntent:
    """
    Tagged result of classifying one message.

    ``intent_type`` selects the active variant; only the fields relevant to
    that variant are populated:

    - SIMILAR_TO: ``title`` (raw query) and, on a curated hit, ``concept``
    - TRENDING / TOP_RATED / DISCOVER: ``genre_ids`` and ``language``
    - KEYWORD_FALLBACK: ``residual_text`` plus any ``genre_ids``/``language``
    - UNRESOLVED: nothing

    ``media_type`` is the detected type and may still be NEUTRAL.
    """
    intent_type: IntentType
    media_type: MediaType
    title: Optional[str] = None
    concept: Optional[ConceptEntry] = None
    genre_ids: Tuple[int, ...] = ()
    language: Optional[str] = None
    residual_text: str = ""

    @property
    def target_media_type(self) -> MediaType:
        return self.media_type.resolve()

    @classmethod
    def similar_to(
        cls,
        title: str,
        media_type: MediaType,
        concept: Optional[ConceptEntry] = None,
    ) -> "ParsedIntent":
        return cls(IntentType.SIMILAR_TO, media_type, title=title, concept=concept)

    @classmethod
    def unresolved(cls, media_type: MediaType) -> "ParsedIntent":
        return cls(IntentType.UNRESOLVED, media_type)
