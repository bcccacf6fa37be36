from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, FrozenSet, Optional, Tuple


RATING_NOT_AVAILABLE = "N/A"


class MediaType(str, Enum):
    MOVIE = "movie"
    TV = "tv"
    NEUTRAL = "neutral"

    def resolve(self) -> "MediaType":
        """Collapse NEUTRAL to MOVIE at the point a strategy is invoked."""
        return MediaType.MOVIE if self is MediaType.NEUTRAL else self


class SortKey(str, Enum):
    POPULARITY = "popularity.desc"
    VOTE_AVERAGE = "vote_average.desc"


@dataclass(frozen=True)
class ConceptEntry:
    canonical_id: int
    media_type: MediaType
    genre_ids: Tuple[int, ...]
    keyword_expression: str
    description: str


@dataclass(frozen=True)
class DiscoveryQuery:
    """
    Structured discover request against the catalog.

    Genre ids are a set (order irrelevant, de-duplicated). Keyword ids are
    OR-combined upstream. Extra filters accept a mapping and are stored as
    sorted (name, value) pairs, keeping the query hashable. ``to_params``
    renders deterministically so the same query always produces identical
    request parameters.
    """
    media_type: MediaType
    genre_ids: FrozenSet[int] = frozenset()
    language: Optional[str] = None
    sort_by: SortKey = SortKey.POPULARITY
    keyword_ids: Tuple[int, ...] = ()
    extra_filters: Tuple[Tuple[str, Any], ...] = ()

    def __post_init__(self):
        if self.media_type is MediaType.NEUTRAL:
            raise ValueError("DiscoveryQuery needs a resolved media type (movie or tv)")
        object.__setattr__(self, "genre_ids", frozenset(self.genre_ids))
        object.__setattr__(self, "keyword_ids", tuple(self.keyword_ids))
        object.__setattr__(self, "extra_filters", tuple(sorted(dict(self.extra_filters).items())))

    def to_params(self) -> Dict[str, Any]:
        params: Dict[str, Any] = {"sort_by": self.sort_by.value}
        if self.genre_ids:
            params["with_genres"] = ",".join(str(g) for g in sorted(self.genre_ids))
        if self.keyword_ids:
            params["with_keywords"] = "|".join(str(k) for k in self.keyword_ids)
        if self.language:
            params["with_original_language"] = self.language
        for name, value in self.extra_filters:
            params[name] = value
        return params


@dataclass(frozen=True)
class ResultItem:
    id: int
    title: str
    poster_path: Optional[str]
    rating: str
    year: str
    media_type: Optional[str] = None

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        result = {
            "id": self.id,
            "title": self.title,
            "poster_path": self.poster_path,
            "rating": self.rating,
            "year": self.year,
        }

        if self.media_type:
            result["media_type"] = self.media_type

        return result
