"""
Free-text fallback: resolve themes to catalog keyword ids, then discover.
"""
import asyncio
import logging
import re
from typing import List, Optional

from pydantic import ValidationError

from ..catalog.catalog_client import CatalogClient
from ..catalog.records import KeywordRecord
from ..exceptions import CatalogError
from ..interaction.intent_types import ParsedIntent
from ..models import DiscoveryQuery, SortKey
from ..result_normalizer import ResultNormalizer
from ..schemas import StrategyOutcome
from .base import ResolutionStrategy

logger = logging.getLogger(__name__)

NO_MATCH_TEXT = "I couldn't find matches for those themes."
MAX_KEYWORD_LOOKUPS = 2

_CONCEPT_SEPARATORS = re.compile(r",|\band\b")


class KeywordFallbackStrategy(ResolutionStrategy):
    """
    Looks up up to two themes concurrently, then issues one discover call.

    A lookup that fails or finds nothing contributes nothing and never
    affects the other lookup. Keyword ids are OR-combined and unioned with
    any genre/language filters.
    """

    name = "keyword_fallback"

    def __init__(
        self,
        catalog: CatalogClient,
        normalizer: ResultNormalizer,
        lookup_limit: int = MAX_KEYWORD_LOOKUPS,
    ):
        super().__init__(catalog, normalizer)
        if not 1 <= lookup_limit <= MAX_KEYWORD_LOOKUPS:
            raise ValueError(
                f"lookup_limit must be between 1 and {MAX_KEYWORD_LOOKUPS}, got {lookup_limit}"
            )
        self.lookup_limit = lookup_limit

    def split_concepts(self, text: str) -> List[str]:
        parts = [part.strip() for part in _CONCEPT_SEPARATORS.split(text)]
        return [part for part in parts if part][: self.lookup_limit]

    async def _run(self, intent: ParsedIntent) -> StrategyOutcome:
        concepts = self.split_concepts(intent.residual_text)
        keyword_ids = await self._lookup_keywords(concepts)

        if not keyword_ids and not intent.genre_ids:
            logger.debug(f"No keyword ids for {concepts}")
            return StrategyOutcome.success(self.name, NO_MATCH_TEXT)

        query = DiscoveryQuery(
            media_type=intent.target_media_type,
            genre_ids=intent.genre_ids,
            language=intent.language,
            sort_by=SortKey.POPULARITY,
            keyword_ids=keyword_ids,
        )
        params = query.to_params()
        logger.debug(f"keyword discover {query.media_type.value}: {params}")

        records = await self._catalog.discover(query.media_type, params)
        items = self._normalizer.normalize(records, query.media_type)
        if not items:
            return StrategyOutcome.success(self.name, NO_MATCH_TEXT)

        return StrategyOutcome.success(
            self.name, f'Here are top matches for "{", ".join(concepts)}" 👇', items
        )

    async def _lookup_keywords(self, concepts: List[str]) -> List[int]:
        results = await asyncio.gather(
            *(self._lookup_keyword(concept) for concept in concepts),
            return_exceptions=True,
        )

        keyword_ids: List[int] = []
        for concept, result in zip(concepts, results):
            if isinstance(result, BaseException):
                logger.warning(f"Keyword lookup for '{concept}' failed: {result!r}")
                continue
            if result is not None and result not in keyword_ids:
                keyword_ids.append(result)
        return keyword_ids

    async def _lookup_keyword(self, concept: str) -> Optional[int]:
        try:
            hits = await self._catalog.keyword_search(concept)
        except CatalogError as e:
            logger.warning(f"Keyword lookup for '{concept}' failed: {e}")
            return None

        if not hits:
            return None

        try:
            return KeywordRecord.model_validate(hits[0]).id
        except ValidationError:
            logger.debug(f"Malformed keyword record for '{concept}'")
            return None
