from typing import Any, Dict, List, Protocol

from ..models import MediaType


class CatalogClient(Protocol):
    """Protocol for the external movie/TV catalog used by the strategies."""

    async def search(self, media_type: MediaType, query: str) -> List[Dict[str, Any]]:
        ...

    async def discover(self, media_type: MediaType, params: Dict[str, Any]) -> List[Dict[str, Any]]:
        ...

    async def trending(self, media_type: MediaType, window: str = "week") -> List[Dict[str, Any]]:
        ...

    async def recommendations(self, media_type: MediaType, catalog_id: int) -> List[Dict[str, Any]]:
        ...

    async def keyword_search(self, query: str) -> List[Dict[str, Any]]:
        ...
