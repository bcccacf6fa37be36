"""
Static keyword vocabularies for intent resolution.

Every table is an ordered tuple of (keyword, value) pairs. Scans iterate
them in declaration order, which matters for the language table: when two
language keywords occur in one message the one declared later wins.
"""
from typing import Tuple

GenreTable = Tuple[Tuple[str, int], ...]

# Catalog genre ids for movies
MOVIE_GENRES: GenreTable = (
    ("action", 28),
    ("adventure", 12),
    ("animation", 16),
    ("comedy", 35),
    ("crime", 80),
    ("documentary", 99),
    ("drama", 18),
    ("family", 10751),
    ("fantasy", 14),
    ("history", 36),
    ("horror", 27),
    ("music", 10402),
    ("mystery", 9648),
    ("romance", 10749),
    ("scifi", 878),
    ("science", 878),
    ("thriller", 53),
    ("war", 10752),
    ("western", 37),
)

# TV uses its own ids; several movie genres are merged (e.g. "Action & Adventure")
TV_GENRES: GenreTable = (
    ("action", 10759),
    ("adventure", 10759),
    ("animation", 16),
    ("comedy", 35),
    ("crime", 80),
    ("documentary", 99),
    ("drama", 18),
    ("family", 10751),
    ("kids", 10762),
    ("mystery", 9648),
    ("news", 10763),
    ("reality", 10764),
    ("scifi", 10765),
    ("soap", 10766),
    ("talk", 10767),
    ("war", 10768),
    ("politics", 10768),
    ("western", 37),
)

# ISO 639-1 codes, matched against ``with_original_language``
LANGUAGES: Tuple[Tuple[str, str], ...] = (
    ("telugu", "te"),
    ("tamil", "ta"),
    ("hindi", "hi"),
    ("english", "en"),
    ("kannada", "kn"),
    ("malayalam", "ml"),
    ("korean", "ko"),
    ("japanese", "ja"),
    ("malay", "ms"),
    ("chinese", "zh"),
    ("spanish", "es"),
    ("french", "fr"),
)

TRENDING_KEYWORDS: Tuple[str, ...] = ("trending", "popular", "hot")
TOP_RATED_KEYWORDS: Tuple[str, ...] = ("top", "best", "rated", "good")

TV_TYPE_KEYWORDS: Tuple[str, ...] = ("tv", "series", "show")
MOVIE_TYPE_KEYWORDS: Tuple[str, ...] = ("movie", "film")

# Ordered textual patterns for "like X" / "similar to X"
SIMILARITY_PATTERNS: Tuple[str, ...] = (
    r"(?:like|similar to)\s+(.+)",
)

EXAMPLE_QUERIES: Tuple[str, ...] = (
    "Telugu horror movies",
    "Best TV shows",
    "Movies like Inception",
)
