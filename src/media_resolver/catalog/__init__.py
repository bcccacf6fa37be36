"""
External catalog access.

Strategies depend only on the CatalogClient protocol; TMDBCatalogClient is
the production implementation.
"""
from .catalog_client import CatalogClient
from .records import CatalogRecord, KeywordRecord
from .tmdb_client import TMDBCatalogClient

__all__ = ["CatalogClient", "CatalogRecord", "KeywordRecord", "TMDBCatalogClient"]
