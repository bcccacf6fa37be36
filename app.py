#!/usr/bin/env python3
"""
Flask REST API for the media resolver.

Uses environment variables (or a local .env file) for configuration.
"""
import logging
import os
from typing import Optional

from media_resolver.app import MediaResolverApp
from media_resolver.config_loader import load_config_from_env
from media_resolver.exceptions import ConfigurationError
from media_resolver.web import create_app

# Setup logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler()]
)
logger = logging.getLogger(__name__)


def _initialize_resolver_from_env() -> Optional[MediaResolverApp]:
    """Initialize the resolver from environment variables."""
    try:
        config = load_config_from_env()
        resolver = MediaResolverApp(config)
        resolver.initialize()
        logger.info("Resolver initialized successfully from environment variables")
        return resolver
    except ConfigurationError as e:
        logger.error(f"Failed to initialize resolver: {e}")
        return None


app = create_app(_initialize_resolver_from_env())


if __name__ == "__main__":
    port = int(os.getenv("PORT", 7860))
    # Disable debug mode for production
    app.run(host="0.0.0.0", port=port, debug=False)
