"""
Resolution layer: turns lower-cased message text into structured signals.

Key components:
- SimilarityDetector: "like X" / "similar to X" patterns
- ConceptResolver: exact lookup in the curated concept table
- EntityExtractor: genres, language and coarse intent
"""
from .similarity_detector import SimilarityDetector, SimilarityMatch
from .concept_resolver import ConceptResolver
from .entity_extractor import EntityExtractor, ExtractedEntities

__all__ = [
    "SimilarityDetector",
    "SimilarityMatch",
    "ConceptResolver",
    "EntityExtractor",
    "ExtractedEntities",
]
