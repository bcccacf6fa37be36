"""
Configuration loader with validation.
"""
from dotenv import load_dotenv

from .config import ResolverConfig, TMDB_BASE_URL
from .config_validator import (
    get_optional_env,
    get_required_env,
    parse_float_env,
    parse_int_env,
    validate_api_key,
)
from .exceptions import ConfigurationError
from .schemas import MAX_REPLY_ITEMS

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def load_config_from_env() -> ResolverConfig:
    """
    Load configuration from environment variables with validation.

    Usage:
        config = load_config_from_env()
        app = MediaResolverApp(config)
        app.initialize()

    :return: Validated ResolverConfig instance
    :raises: ConfigurationError if required configs are missing or invalid
    """
    # Load .env file if it exists (for local development)
    load_dotenv()

    api_key = validate_api_key(
        get_required_env(
            "TMDB_API_KEY",
            description="TMDB v3 API key (get one from https://www.themoviedb.org/settings/api)",
        ),
        "TMDB_API_KEY",
    )

    log_level = get_optional_env("LOG_LEVEL", "INFO").upper()
    if log_level not in _LOG_LEVELS:
        raise ConfigurationError(
            f"LOG_LEVEL must be one of {sorted(_LOG_LEVELS)}, got {log_level!r}."
        )

    return ResolverConfig(
        tmdb_api_key=api_key,
        tmdb_base_url=get_optional_env("TMDB_BASE_URL", TMDB_BASE_URL).rstrip("/"),
        tmdb_language=get_optional_env("TMDB_LANGUAGE", "en-US"),
        request_timeout=parse_float_env("TMDB_TIMEOUT_SECONDS", 5.0, 0.1, 120.0),
        max_retries=parse_int_env("TMDB_MAX_RETRIES", 3, 1, 10),
        result_limit=parse_int_env("RESULT_LIMIT", MAX_REPLY_ITEMS, 1, MAX_REPLY_ITEMS),
        keyword_lookup_limit=parse_int_env("KEYWORD_LOOKUP_LIMIT", 2, 1, 2),
        log_level=log_level,
    )
