"""
Public application facade for the media resolver.

This is the single stable entry point for the library.
All internal structure can change freely, but this API remains stable.
"""
import asyncio
import logging
from typing import Optional

from .catalog.catalog_client import CatalogClient
from .catalog.tmdb_client import TMDBCatalogClient
from .config import ResolverConfig
from .exceptions import ServiceNotInitializedError
from .schemas import ResolverReply
from .service import MediaResolverService

logger = logging.getLogger(__name__)


class MediaResolverApp:
    """
    Public application facade.

    All dependency wiring is encapsulated here.

    Usage:
        config = load_config_from_env()
        app = MediaResolverApp(config)
        app.initialize()
        reply = app.resolve_blocking("Telugu horror movies")
    """

    def __init__(self, config: ResolverConfig, catalog: Optional[CatalogClient] = None):
        """
        :param config: ResolverConfig instance
        :param catalog: Optional catalog override (defaults to TMDB built from config)
        """
        self._config = config
        self._catalog = catalog
        self._service: Optional[MediaResolverService] = None

    @property
    def is_initialized(self) -> bool:
        return self._service is not None

    def initialize(self) -> None:
        """
        Build the catalog client and the resolver service.

        Call this once before resolving. Repeated calls are no-ops.
        """
        if self._service:
            return

        if self._catalog is None:
            self._catalog = TMDBCatalogClient(
                api_key=self._config.tmdb_api_key,
                base_url=self._config.tmdb_base_url,
                language=self._config.tmdb_language,
                timeout=self._config.request_timeout,
                max_retries=self._config.max_retries,
            )

        self._service = MediaResolverService(
            catalog=self._catalog,
            result_limit=self._config.result_limit,
            keyword_lookup_limit=self._config.keyword_lookup_limit,
        )
        logger.info(f"Media resolver initialized (catalog: {type(self._catalog).__name__})")

    async def resolve(self, message: str) -> ResolverReply:
        """
        Resolve a chat message.

        :param message: Raw user message
        :return: ResolverReply with text and at most five items
        :raises: ServiceNotInitializedError if initialize() has not been called
        """
        if not self._service:
            raise ServiceNotInitializedError("Resolver not initialized. Call initialize() first.")

        return await self._service.resolve(message)

    def resolve_blocking(self, message: str) -> ResolverReply:
        """Synchronous wrapper for callers without an event loop (Flask, CLI)."""
        return asyncio.run(self.resolve(message))
