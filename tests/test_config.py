"""
Tests for environment-based configuration loading and validation.
"""
import pytest

from media_resolver import config_loader
from media_resolver.config import TMDB_BASE_URL
from media_resolver.config_loader import load_config_from_env
from media_resolver.config_validator import (
    _is_placeholder,
    _mask_secret,
    get_optional_env,
    get_required_env,
    validate_api_key,
    validate_range,
)
from media_resolver.exceptions import ConfigurationError

API_KEY = "a1b2c3d4e5f6a7b8c9d0"

_ENV_KEYS = (
    "TMDB_API_KEY",
    "TMDB_BASE_URL",
    "TMDB_LANGUAGE",
    "TMDB_TIMEOUT_SECONDS",
    "TMDB_MAX_RETRIES",
    "RESULT_LIMIT",
    "KEYWORD_LOOKUP_LIMIT",
    "LOG_LEVEL",
)


@pytest.fixture
def clean_env(monkeypatch):
    """Isolate tests from the host environment and any local .env file."""
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setattr(config_loader, "load_dotenv", lambda *args, **kwargs: False)
    return monkeypatch


class TestLoadConfig:
    """Tests for load_config_from_env."""

    def test_defaults(self, clean_env):
        clean_env.setenv("TMDB_API_KEY", API_KEY)

        config = load_config_from_env()

        assert config.tmdb_api_key == API_KEY
        assert config.tmdb_base_url == TMDB_BASE_URL
        assert config.tmdb_language == "en-US"
        assert config.request_timeout == 5.0
        assert config.max_retries == 3
        assert config.result_limit == 5
        assert config.keyword_lookup_limit == 2
        assert config.log_level == "INFO"

    def test_overrides(self, clean_env):
        clean_env.setenv("TMDB_API_KEY", API_KEY)
        clean_env.setenv("TMDB_BASE_URL", "http://localhost:8080/3/")
        clean_env.setenv("TMDB_LANGUAGE", "te-IN")
        clean_env.setenv("TMDB_TIMEOUT_SECONDS", "2.5")
        clean_env.setenv("TMDB_MAX_RETRIES", "1")
        clean_env.setenv("RESULT_LIMIT", "3")
        clean_env.setenv("KEYWORD_LOOKUP_LIMIT", "1")
        clean_env.setenv("LOG_LEVEL", "debug")

        config = load_config_from_env()

        assert config.tmdb_base_url == "http://localhost:8080/3"
        assert config.tmdb_language == "te-IN"
        assert config.request_timeout == 2.5
        assert config.max_retries == 1
        assert config.result_limit == 3
        assert config.keyword_lookup_limit == 1
        assert config.log_level == "DEBUG"

    def test_missing_api_key(self, clean_env):
        with pytest.raises(ConfigurationError, match="TMDB_API_KEY is required"):
            load_config_from_env()

    def test_placeholder_api_key(self, clean_env):
        clean_env.setenv("TMDB_API_KEY", "your_tmdb_api_key_here")

        with pytest.raises(ConfigurationError, match="placeholder"):
            load_config_from_env()

    def test_short_api_key(self, clean_env):
        clean_env.setenv("TMDB_API_KEY", "abc123")

        with pytest.raises(ConfigurationError, match="too short"):
            load_config_from_env()

    @pytest.mark.parametrize(
        "key, value",
        [
            ("RESULT_LIMIT", "6"),
            ("RESULT_LIMIT", "0"),
            ("KEYWORD_LOOKUP_LIMIT", "3"),
            ("TMDB_MAX_RETRIES", "0"),
            ("TMDB_TIMEOUT_SECONDS", "0"),
            ("RESULT_LIMIT", "five"),
            ("TMDB_TIMEOUT_SECONDS", "fast"),
            ("LOG_LEVEL", "LOUD"),
        ],
    )
    def test_invalid_values(self, clean_env, key, value):
        clean_env.setenv("TMDB_API_KEY", API_KEY)
        clean_env.setenv(key, value)

        with pytest.raises(ConfigurationError):
            load_config_from_env()


class TestValidator:
    """Tests for config_validator helpers."""

    def test_get_required_env(self, monkeypatch):
        monkeypatch.setenv("SOME_KEY", "value")

        assert get_required_env("SOME_KEY") == "value"

    def test_get_required_env_missing(self, monkeypatch):
        monkeypatch.delenv("SOME_KEY", raising=False)

        with pytest.raises(ConfigurationError):
            get_required_env("SOME_KEY", description="Some key")

    def test_optional_placeholder_warns_and_defaults(self, monkeypatch):
        monkeypatch.setenv("SOME_KEY", "changeme")

        with pytest.warns(UserWarning):
            assert get_optional_env("SOME_KEY", "fallback") == "fallback"

    def test_validate_api_key(self):
        assert validate_api_key(API_KEY, "TMDB_API_KEY") == API_KEY

        with pytest.raises(ConfigurationError):
            validate_api_key("", "TMDB_API_KEY")

    def test_validate_api_key_rejects_whitespace(self):
        with pytest.raises(ConfigurationError, match="whitespace"):
            validate_api_key("a1b2c3d4 e5f6a7b8c9d0", "TMDB_API_KEY")

    def test_validate_range(self):
        assert validate_range(3, "N", 1, 5) == 3

        with pytest.raises(ConfigurationError, match="N must be between 1 and 5"):
            validate_range(9, "N", 1, 5)

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("your_key", True),
            ("PLACEHOLDER", True),
            ("xxx-xxx", True),
            ("", False),
            (API_KEY, False),
        ],
    )
    def test_is_placeholder(self, value, expected):
        assert _is_placeholder(value) is expected

    def test_mask_secret(self):
        assert _mask_secret(API_KEY) == "a1b2...c9d0"
        assert _mask_secret("short") == "***"
