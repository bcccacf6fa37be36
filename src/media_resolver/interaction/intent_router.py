"""
Deterministic intent router for chat messages.

Routes a message to exactly one intent without any model calls.
"""
import logging

from ..canonicalizer import strip_type_words, to_scan_text
from ..models import MediaType
from ..resolution.concept_resolver import ConceptResolver
from ..resolution.entity_extractor import EntityExtractor
from ..resolution.similarity_detector import SimilarityDetector
from .intent_types import IntentType, ParsedIntent
from .media_type_detector import MediaTypeDetector

logger = logging.getLogger(__name__)

MIN_KEYWORD_TEXT_LENGTH = 3


class IntentRouter:
    """
    Deterministic intent router.

    Priority order, first applicable wins:
    1. "like X" / "similar to X" (concept hit or live title similarity)
    2. TRENDING keyword
    3. TOP_RATED keyword
    4. DISCOVER when a genre or language was found, or the type is TV
    5. KEYWORD_FALLBACK when the type-stripped text is longer than 2 chars
    6. UNRESOLVED
    """

    def __init__(
        self,
        media_type_detector: MediaTypeDetector = None,
        similarity_detector: SimilarityDetector = None,
        concept_resolver: ConceptResolver = None,
        entity_extractor: EntityExtractor = None,
    ):
        self._media_type_detector = media_type_detector or MediaTypeDetector()
        self._similarity_detector = similarity_detector or SimilarityDetector()
        self._concept_resolver = concept_resolver or ConceptResolver()
        self._entity_extractor = entity_extractor or EntityExtractor()

    def route(self, message: str) -> ParsedIntent:
        """
        Route a message to a parsed intent.

        :param message: Raw user message
        :return: ParsedIntent with exactly one active variant
        """
        text = to_scan_text(message)

        # Detected once; NEUTRAL survives until a strategy resolves it
        media_type = self._media_type_detector.detect(text)

        similar = self._similarity_detector.detect(text)
        if similar:
            concept = self._concept_resolver.resolve(similar.normalized_query)
            logger.debug(
                f"Similarity request for '{similar.raw_query}' "
                f"(concept hit: {concept is not None})"
            )
            return ParsedIntent.similar_to(similar.raw_query, media_type, concept)

        entities = self._entity_extractor.extract(text, media_type)
        logger.debug(
            f"Entities - type: {media_type.value}, genres: {entities.genre_ids}, "
            f"language: {entities.language}, intent: {entities.intent}"
        )

        if entities.intent in (IntentType.TRENDING, IntentType.TOP_RATED):
            return ParsedIntent(
                entities.intent,
                media_type,
                genre_ids=entities.genre_ids,
                language=entities.language,
            )

        if entities.genre_ids or entities.language or media_type is MediaType.TV:
            return ParsedIntent(
                IntentType.DISCOVER,
                media_type,
                genre_ids=entities.genre_ids,
                language=entities.language,
            )

        residual = strip_type_words(text)
        if len(residual) >= MIN_KEYWORD_TEXT_LENGTH:
            return ParsedIntent(
                IntentType.KEYWORD_FALLBACK,
                media_type,
                genre_ids=entities.genre_ids,
                language=entities.language,
                residual_text=residual,
            )

        return ParsedIntent.unresolved(media_type)
