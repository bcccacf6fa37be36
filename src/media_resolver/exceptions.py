from typing import Optional


class MediaResolverError(Exception):
    """Base exception for the media resolver."""


class ConfigurationError(MediaResolverError):
    """Raised when required configuration is missing or invalid."""


class ServiceNotInitializedError(MediaResolverError):
    """Raised when the resolver is used before initialization."""


class CatalogError(MediaResolverError):
    """Raised when a catalog call fails (transport, status, or payload)."""

    def __init__(self, message: str, path: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.path = path
        self.status_code = status_code
