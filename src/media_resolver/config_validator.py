"""
Environment readers that fail early with actionable messages.

Secrets never appear in full in an error message; see ``_mask_secret``.
"""
import os
import warnings
from typing import Optional

from .exceptions import ConfigurationError

_PLACEHOLDER_MARKERS = ("your_", "placeholder", "changeme", "xxx", "replace", "todo")


def get_required_env(key: str, description: str = None) -> str:
    """
    Read a mandatory setting.

    :param key: Environment variable name
    :param description: Shown in the error when the variable is missing
    :return: The raw value
    :raises: ConfigurationError if unset, empty, or a template placeholder
    """
    value = os.getenv(key)

    if not value:
        hint = f" ({description})" if description else ""
        raise ConfigurationError(
            f"{key} is required but not set{hint}.\n"
            f"Export it in the shell or add {key}=... to a .env file "
            f"in the working directory (.env.example lists every setting)."
        )

    if _is_placeholder(value):
        raise ConfigurationError(
            f"{key} still holds the placeholder from .env.example "
            f"({_mask_secret(value)}). Replace it with a real value."
        )

    return value


def get_optional_env(key: str, default: Optional[str] = None) -> Optional[str]:
    """Read a setting with a default; a placeholder value warns and yields the default."""
    value = os.getenv(key, default)

    if value and _is_placeholder(value):
        warnings.warn(f"{key} looks like a placeholder; falling back to {default!r}.", UserWarning)
        return default

    return value


def validate_api_key(key: str, key_name: str, min_length: int = 16) -> str:
    """
    Sanity-check a catalog credential before any request is made.

    :param key: Credential value
    :param key_name: Variable name used in messages
    :param min_length: Shortest plausible credential
    :return: The credential, unchanged
    :raises: ConfigurationError if empty, a placeholder, too short, or containing whitespace
    """
    if not key:
        raise ConfigurationError(f"{key_name} is empty.")

    if _is_placeholder(key):
        raise ConfigurationError(f"{key_name} looks like a placeholder, not a real API key.")

    if len(key) < min_length:
        raise ConfigurationError(
            f"{key_name} is too short: {len(key)} chars, expected at least {min_length}."
        )

    if any(ch.isspace() for ch in key):
        raise ConfigurationError(f"{key_name} contains whitespace ({_mask_secret(key)}).")

    return key


def parse_int_env(key: str, default: int, minimum: int, maximum: int) -> int:
    """Read an integer setting and check it lies in ``[minimum, maximum]``."""
    raw = get_optional_env(key, str(default))
    try:
        value = int(raw)
    except (TypeError, ValueError):
        raise ConfigurationError(f"{key} must be an integer, got {raw!r}.")
    return validate_range(value, key, minimum, maximum)


def parse_float_env(key: str, default: float, minimum: float, maximum: float) -> float:
    """Read a float setting and check it lies in ``[minimum, maximum]``."""
    raw = get_optional_env(key, str(default))
    try:
        value = float(raw)
    except (TypeError, ValueError):
        raise ConfigurationError(f"{key} must be a number, got {raw!r}.")
    return validate_range(value, key, minimum, maximum)


def validate_range(value, name: str, minimum, maximum):
    if not minimum <= value <= maximum:
        raise ConfigurationError(
            f"{name} must be between {minimum} and {maximum}, got {value}."
        )
    return value


def _is_placeholder(value: str) -> bool:
    if not value:
        return False
    lowered = value.lower()
    return any(marker in lowered for marker in _PLACEHOLDER_MARKERS)


def _mask_secret(secret: str, show_chars: int = 4) -> str:
    """Keep ``show_chars`` at each end of a secret; short secrets are fully hidden."""
    if not secret or len(secret) <= show_chars * 2:
        return "***"
    return f"{secret[:show_chars]}...{secret[-show_chars:]}"
