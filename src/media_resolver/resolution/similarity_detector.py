"""
Detection of "like X" / "similar to X" requests.
"""
import re
from dataclasses import dataclass
from typing import Optional, Tuple

from ..canonicalizer import normalize_title, strip_trailing_type_words
from ..vocabulary import SIMILARITY_PATTERNS


@dataclass(frozen=True)
class SimilarityMatch:
    """A detected similarity request."""
    raw_query: str
    normalized_query: str


class SimilarityDetector:
    """
    Matches an ordered list of textual patterns against lower-cased text.

    The first pattern that matches wins; its first capture group is the
    candidate title phrase.
    """

    def __init__(self, patterns: Tuple[str, ...] = SIMILARITY_PATTERNS):
        self._patterns = tuple(re.compile(p) for p in patterns)

    def detect(self, text: str) -> Optional[SimilarityMatch]:
        """
        :param text: Lower-cased message
        :return: SimilarityMatch, or None when no pattern applies
        """
        for pattern in self._patterns:
            match = pattern.search(text)
            if match and match.group(1):
                raw_query = strip_trailing_type_words(match.group(1))
                return SimilarityMatch(
                    raw_query=raw_query,
                    normalized_query=normalize_title(raw_query),
                )
        return None
