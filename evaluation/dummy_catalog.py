from typing import Any, Dict, List

from media_resolver.models import MediaType


class DummyCatalog:
    """Dummy catalog for routing evaluation; counts calls and returns nothing."""

    def __init__(self):
        self.calls = 0

    async def search(self, media_type: MediaType, query: str) -> List[Dict[str, Any]]:
        self.calls += 1
        return []

    async def discover(self, media_type: MediaType, params: Dict[str, Any]) -> List[Dict[str, Any]]:
        self.calls += 1
        return []

    async def trending(self, media_type: MediaType, window: str = "week") -> List[Dict[str, Any]]:
        self.calls += 1
        return []

    async def recommendations(self, media_type: MediaType, catalog_id: int) -> List[Dict[str, Any]]:
        self.calls += 1
        return []

    async def keyword_search(self, query: str) -> List[Dict[str, Any]]:
        self.calls += 1
        return []
