"""
TMDB catalog client.
- Async httpx client, one short-lived connection per request.
- Handles 429 with exponential backoff and Retry-After.
- No in-module caching; memoization belongs to the fronting proxy.
"""
import asyncio
import logging
from typing import Any, Dict, List, Optional

import httpx

from ..config import TMDB_BASE_URL
from ..exceptions import CatalogError
from ..models import MediaType

logger = logging.getLogger(__name__)

MAX_BACKOFF_SECONDS = 30.0
TRENDING_WINDOWS = ("day", "week")


class TMDBCatalogClient:
    """
    Catalog client for TMDB v3.

    Every method returns the payload's ``results`` array (empty when the
    field is missing) and raises CatalogError on any failure.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = TMDB_BASE_URL,
        language: str = "en-US",
        timeout: float = 5.0,
        max_retries: int = 3,
        backoff_base: float = 1.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        if max_retries < 1:
            raise ValueError(f"max_retries must be at least 1, got {max_retries}")

        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._language = language
        self._timeout = timeout
        self._max_retries = max_retries
        self._backoff_base = backoff_base
        self._transport = transport

    # ----------------------------
    # Catalog operations
    # ----------------------------
    async def search(self, media_type: MediaType, query: str) -> List[Dict[str, Any]]:
        payload = await self._get(
            f"/search/{_type_segment(media_type)}",
            {"query": query, "include_adult": False},
        )
        return _results(payload)

    async def discover(self, media_type: MediaType, params: Dict[str, Any]) -> List[Dict[str, Any]]:
        query = {"include_adult": False, "page": 1}
        query.update(params)
        payload = await self._get(f"/discover/{_type_segment(media_type)}", query)
        return _results(payload)

    async def trending(self, media_type: MediaType, window: str = "week") -> List[Dict[str, Any]]:
        if window not in TRENDING_WINDOWS:
            raise ValueError(f"Unknown trending window '{window}'. Must be one of: {TRENDING_WINDOWS}")
        payload = await self._get(f"/trending/{_type_segment(media_type)}/{window}")
        return _results(payload)

    async def recommendations(self, media_type: MediaType, catalog_id: int) -> List[Dict[str, Any]]:
        payload = await self._get(f"/{_type_segment(media_type)}/{int(catalog_id)}/recommendations")
        return _results(payload)

    async def keyword_search(self, query: str) -> List[Dict[str, Any]]:
        payload = await self._get("/search/keyword", {"query": query})
        return _results(payload)

    # ----------------------------
    # HTTP plumbing
    # ----------------------------
    async def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        query: Dict[str, Any] = {"api_key": self._api_key, "language": self._language}
        if params:
            query.update({key: value for key, value in params.items() if value is not None})

        url = f"{self._base_url}{path}"
        delay = self._backoff_base

        for attempt in range(1, self._max_retries + 1):
            logger.debug(f"TMDB GET {path} (attempt {attempt}/{self._max_retries})")
            try:
                async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                    resp = await client.get(url, params=query)
            except httpx.HTTPError as e:
                raise CatalogError(f"TMDB request to {path} failed: {e}", path) from e

            if resp.status_code == 429 and attempt < self._max_retries:
                wait = _retry_after_seconds(resp, delay)
                logger.warning(
                    f"TMDB rate limited on {path}, attempt {attempt}/{self._max_retries}, sleeping {wait}s"
                )
                await asyncio.sleep(wait)
                delay = min(delay * 2, MAX_BACKOFF_SECONDS)
                continue

            try:
                resp.raise_for_status()
            except httpx.HTTPStatusError as e:
                raise CatalogError(
                    f"TMDB {path} returned HTTP {resp.status_code}", path, resp.status_code
                ) from e

            try:
                payload = resp.json()
            except ValueError as e:
                raise CatalogError(f"TMDB {path} returned an undecodable body", path, resp.status_code) from e

            if not isinstance(payload, dict):
                raise CatalogError(f"TMDB {path} returned an unexpected payload", path, resp.status_code)
            return payload

        raise CatalogError(f"TMDB {path} failed after {self._max_retries} attempts", path)


def _type_segment(media_type: MediaType) -> str:
    media_type = MediaType(media_type).resolve()
    return media_type.value


def _results(payload: Dict[str, Any]) -> List[Dict[str, Any]]:
    results = payload.get("results") or []
    return [record for record in results if isinstance(record, dict)]


def _retry_after_seconds(resp: httpx.Response, fallback: float) -> float:
    header = resp.headers.get("Retry-After")
    if header:
        try:
            return min(max(float(header), 0.0), MAX_BACKOFF_SECONDS)
        except ValueError:
            pass
    return fallback
