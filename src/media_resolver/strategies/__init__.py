"""
Resolution strategies, one per parsed intent variant.
"""
from .base import ResolutionStrategy, RECOMMENDATION_FAILURE_TEXT
from .discover import DiscoverStrategy, TopRatedStrategy, TrendingStrategy
from .keyword_fallback import KeywordFallbackStrategy, NO_MATCH_TEXT
from .similarity import ConceptStrategy, TitleSimilarityStrategy
from .unresolved import HELP_TEXT, UnresolvedStrategy

__all__ = [
    "ResolutionStrategy",
    "RECOMMENDATION_FAILURE_TEXT",
    "DiscoverStrategy",
    "TopRatedStrategy",
    "TrendingStrategy",
    "KeywordFallbackStrategy",
    "NO_MATCH_TEXT",
    "ConceptStrategy",
    "TitleSimilarityStrategy",
    "HELP_TEXT",
    "UnresolvedStrategy",
]
