"""
Media resolver: turns a free-text chat message into a catalog query and a
short reply with up to five normalized movie/TV results.
"""
from .app import MediaResolverApp
from .config import ResolverConfig
from .config_loader import load_config_from_env
from .models import MediaType, ResultItem
from .schemas import ResolverReply
from .service import MediaResolverService

__all__ = [
    "MediaResolverApp",
    "ResolverConfig",
    "load_config_from_env",
    "MediaType",
    "ResultItem",
    "ResolverReply",
    "MediaResolverService",
]
