"""
Core abstraction for resolution strategies.

A strategy turns one ParsedIntent into catalog calls and a StrategyOutcome.
Catalog failures are contained here so callers never observe a raised fault.
"""
import logging
from abc import ABC, abstractmethod

from ..catalog.catalog_client import CatalogClient
from ..exceptions import CatalogError
from ..interaction.intent_types import ParsedIntent
from ..models import MediaType
from ..result_normalizer import ResultNormalizer
from ..schemas import StrategyOutcome

logger = logging.getLogger(__name__)

RECOMMENDATION_FAILURE_TEXT = "Sorry, I had trouble finding recommendations."


class ResolutionStrategy(ABC):
    """
    Base class for catalog-backed strategies.

    Subclasses implement ``_run``; ``execute`` converts any failure into a
    StrategyOutcome carrying the strategy's fixed ``failure_text``.
    Strategies hold no per-request state and are safe to share.
    """

    name: str = "base"
    failure_text: str = RECOMMENDATION_FAILURE_TEXT

    def __init__(self, catalog: CatalogClient, normalizer: ResultNormalizer):
        self._catalog = catalog
        self._normalizer = normalizer

    async def execute(self, intent: ParsedIntent) -> StrategyOutcome:
        try:
            return await self._run(intent)
        except CatalogError as e:
            logger.warning(f"{self.name} strategy: catalog call to {e.path} failed: {e}")
            return StrategyOutcome.failure(self.name, self.failure_text, str(e))
        except Exception as e:
            logger.exception(f"{self.name} strategy failed unexpectedly")
            return StrategyOutcome.failure(self.name, self.failure_text, f"{type(e).__name__}: {e}")

    @abstractmethod
    async def _run(self, intent: ParsedIntent) -> StrategyOutcome:
        """
        Issue catalog calls for the intent and shape the outcome.

        :param intent: Classified message
        :return: StrategyOutcome
        """
        pass


def plural_label(media_type: MediaType) -> str:
    return "shows" if media_type is MediaType.TV else "movies"


def listing_label(media_type: MediaType) -> str:
    return "TV shows" if media_type is MediaType.TV else "movies"


def singular_label(media_type: MediaType) -> str:
    return "series" if media_type is MediaType.TV else "movie"
