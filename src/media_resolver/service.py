import logging
from time import time
from typing import Optional

from .catalog.catalog_client import CatalogClient
from .interaction.intent_router import IntentRouter
from .interaction.intent_types import IntentType, ParsedIntent
from .result_normalizer import ResultNormalizer
from .schemas import MAX_REPLY_ITEMS, ResolverReply, StrategyOutcome
from .strategies import (
    ConceptStrategy,
    DiscoverStrategy,
    KeywordFallbackStrategy,
    RECOMMENDATION_FAILURE_TEXT,
    TitleSimilarityStrategy,
    TopRatedStrategy,
    TrendingStrategy,
    UnresolvedStrategy,
)
from .strategies.keyword_fallback import MAX_KEYWORD_LOOKUPS

logger = logging.getLogger(__name__)


class MediaResolverService:
    """
    Resolves one chat message into a reply with at most five catalog items.
    The ONLY entry point of the resolution core.
    """

    def __init__(
        self,
        catalog: CatalogClient,
        result_limit: int = MAX_REPLY_ITEMS,
        keyword_lookup_limit: int = MAX_KEYWORD_LOOKUPS,
        router: Optional[IntentRouter] = None,
    ):
        """
        Composition root.
        Strategies are stateless and created once per service.
        """
        self._router = router or IntentRouter()

        normalizer = ResultNormalizer(limit=result_limit)
        self._concept = ConceptStrategy(catalog, normalizer)
        self._title_similarity = TitleSimilarityStrategy(catalog, normalizer)
        self._strategies = {
            IntentType.TRENDING: TrendingStrategy(catalog, normalizer),
            IntentType.TOP_RATED: TopRatedStrategy(catalog, normalizer),
            IntentType.DISCOVER: DiscoverStrategy(catalog, normalizer),
            IntentType.KEYWORD_FALLBACK: KeywordFallbackStrategy(
                catalog, normalizer, lookup_limit=keyword_lookup_limit
            ),
            IntentType.UNRESOLVED: UnresolvedStrategy(),
        }

    def classify(self, message: str) -> ParsedIntent:
        """Classify a message without touching the catalog."""
        return self._router.route(message)

    def select_strategy(self, intent: ParsedIntent):
        if intent.intent_type is IntentType.SIMILAR_TO:
            return self._concept if intent.concept else self._title_similarity
        return self._strategies[intent.intent_type]

    async def resolve(self, message: str) -> ResolverReply:
        """
        Resolve a message. Never raises: every path yields a well-formed reply.
        """
        start_time = time()

        try:
            intent = self.classify(message)
            strategy = self.select_strategy(intent)
            outcome: StrategyOutcome = await strategy.execute(intent)
        except Exception:
            logger.exception("Resolution failed outside strategy boundary")
            return ResolverReply(text=RECOMMENDATION_FAILURE_TEXT, items=[])

        latency_ms = int((time() - start_time) * 1000)
        logger.info(
            f"Resolved - intent: {intent.intent_type.name}, strategy: {outcome.strategy}, "
            f"items: {len(outcome.items)}, latency: {latency_ms}ms"
        )
        if not outcome.succeeded:
            logger.debug(f"Strategy {outcome.strategy} reported: {outcome.failure_reason}")

        return outcome.to_reply()
