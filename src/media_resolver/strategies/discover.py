"""
Structured discovery strategies: genre/language discover, top-rated, trending.
"""
import logging

from ..exceptions import CatalogError
from ..interaction.intent_types import ParsedIntent
from ..models import DiscoveryQuery, SortKey
from ..schemas import StrategyOutcome
from .base import ResolutionStrategy, listing_label

logger = logging.getLogger(__name__)


class DiscoverStrategy(ResolutionStrategy):
    """Discover by extracted genres and language, most popular first."""

    name = "discover"
    failure_text = "Sorry, something went wrong while searching."

    def build_query(self, intent: ParsedIntent) -> DiscoveryQuery:
        return DiscoveryQuery(
            media_type=intent.target_media_type,
            genre_ids=intent.genre_ids,
            language=intent.language,
            sort_by=SortKey.POPULARITY,
        )

    async def _run(self, intent: ParsedIntent) -> StrategyOutcome:
        return await self._discover(self.build_query(intent))

    async def _discover(self, query: DiscoveryQuery) -> StrategyOutcome:
        params = query.to_params()
        logger.debug(f"{self.name} discover {query.media_type.value}: {params}")

        records = await self._catalog.discover(query.media_type, params)
        items = self._normalizer.normalize(records, query.media_type)

        label = listing_label(query.media_type)
        if not items:
            return StrategyOutcome.success(self.name, f"I couldn't find any {label} matching that.")
        return StrategyOutcome.success(self.name, f"Here are some {label} for you 👇", items)


class TopRatedStrategy(DiscoverStrategy):
    """Discover sorted by rating, restricted to titles with enough votes."""

    name = "top_rated"
    MIN_VOTE_COUNT = 200

    def build_query(self, intent: ParsedIntent) -> DiscoveryQuery:
        return DiscoveryQuery(
            media_type=intent.target_media_type,
            genre_ids=intent.genre_ids,
            language=intent.language,
            sort_by=SortKey.VOTE_AVERAGE,
            extra_filters={"vote_count.gte": self.MIN_VOTE_COUNT},
        )


class TrendingStrategy(DiscoverStrategy):
    """
    This week's trending titles.

    The trending endpoint cannot filter by language, so a language request
    is redirected to a popularity-sorted discover with only that filter.
    """

    name = "trending"
    failure_text = "Sorry, couldn't fetch trending content."
    WINDOW = "week"

    def build_query(self, intent: ParsedIntent) -> DiscoveryQuery:
        return DiscoveryQuery(
            media_type=intent.target_media_type,
            language=intent.language,
            sort_by=SortKey.POPULARITY,
        )

    async def _run(self, intent: ParsedIntent) -> StrategyOutcome:
        if intent.language:
            # Redirected requests fail like a plain discover
            try:
                return await self._discover(self.build_query(intent))
            except CatalogError as e:
                logger.warning(f"trending strategy: discover call to {e.path} failed: {e}")
                return StrategyOutcome.failure(self.name, DiscoverStrategy.failure_text, str(e))

        media_type = intent.target_media_type
        records = await self._catalog.trending(media_type, self.WINDOW)
        items = self._normalizer.normalize(records, media_type)

        label = listing_label(media_type)
        if not items:
            return StrategyOutcome.success(self.name, f"I couldn't find any trending {label} right now.")
        return StrategyOutcome.success(self.name, f"Here are the top trending {label} right now 🔥", items)
