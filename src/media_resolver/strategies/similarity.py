"""
"Like X" strategies: curated concept discover and live title similarity.
"""
import logging

from ..canonicalizer import normalize_title
from ..catalog.records import CatalogRecord
from ..interaction.intent_types import ParsedIntent
from ..models import DiscoveryQuery, MediaType, SortKey
from ..schemas import StrategyOutcome
from .base import ResolutionStrategy, plural_label, singular_label

logger = logging.getLogger(__name__)


class ConceptStrategy(ResolutionStrategy):
    """
    Discover by a curated concept's genres instead of a live recommendation.

    The source title itself is removed from the results.
    """

    name = "concept"
    MIN_VOTE_AVERAGE = 6

    def build_query(self, intent: ParsedIntent) -> DiscoveryQuery:
        concept = intent.concept
        if concept is None:
            raise ValueError("ConceptStrategy needs an intent with a concept")

        if intent.media_type is MediaType.NEUTRAL:
            media_type = concept.media_type
        else:
            media_type = intent.media_type

        return DiscoveryQuery(
            media_type=media_type,
            genre_ids=concept.genre_ids,
            sort_by=SortKey.POPULARITY,
            extra_filters={"vote_average.gte": self.MIN_VOTE_AVERAGE},
        )

    async def _run(self, intent: ParsedIntent) -> StrategyOutcome:
        query = self.build_query(intent)
        params = query.to_params()
        logger.debug(f"concept discover {query.media_type.value}: {params}")

        records = await self._catalog.discover(query.media_type, params)
        items = self._normalizer.normalize(records, query.media_type, exclude_title=intent.title)

        label = plural_label(query.media_type)
        if not items:
            return StrategyOutcome.success(
                self.name, f"I couldn't find any {label} similar to {intent.title}."
            )
        return StrategyOutcome.success(
            self.name,
            f"Since you liked {intent.title} ({intent.concept.description}),\n"
            f"here are similar {label} you might enjoy 👇",
            items,
        )


class TitleSimilarityStrategy(ResolutionStrategy):
    """
    Search the catalog for the title, then fetch recommendations for the top hit.

    At most two sequential catalog calls.
    """

    name = "title_similarity"

    async def _run(self, intent: ParsedIntent) -> StrategyOutcome:
        media_type = intent.target_media_type
        query = intent.title or ""

        if not normalize_title(query):
            return self._not_found(query, media_type)

        hits = await self._catalog.search(media_type, query)
        if not hits:
            return self._not_found(query, media_type)

        anchor = CatalogRecord.model_validate(hits[0])
        logger.debug(f"Similarity anchor for '{query}': {anchor.display_title} ({anchor.id})")

        records = await self._catalog.recommendations(media_type, anchor.id)
        items = self._normalizer.normalize(records, media_type)

        label = plural_label(media_type)
        if not items:
            return StrategyOutcome.success(
                self.name, f'I couldn\'t find any {label} similar to "{anchor.display_title}".'
            )
        return StrategyOutcome.success(
            self.name, f'Here are some {label} similar to "{anchor.display_title}" 👇', items
        )

    def _not_found(self, query: str, media_type: MediaType) -> StrategyOutcome:
        return StrategyOutcome.success(
            self.name, f'I couldn\'t find any {singular_label(media_type)} named "{query}".'
        )
