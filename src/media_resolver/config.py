from dataclasses import dataclass

TMDB_BASE_URL = "https://api.themoviedb.org/3"


@dataclass
class ResolverConfig:
    # Catalog
    tmdb_api_key: str
    tmdb_base_url: str = TMDB_BASE_URL
    tmdb_language: str = "en-US"

    # HTTP client
    request_timeout: float = 5.0
    max_retries: int = 3

    # Resolution
    result_limit: int = 5
    keyword_lookup_limit: int = 2

    # Logging
    log_level: str = "INFO"
