"""
Interaction layer for message classification.

Sits between the transport (HTTP/CLI) and the resolver service, providing
deterministic classification without model calls. ``IntentRouter`` lives in
``media_resolver.interaction.intent_router``.
"""
from .intent_types import IntentType, ParsedIntent
from .media_type_detector import MediaTypeDetector

__all__ = ["IntentType", "ParsedIntent", "MediaTypeDetector"]
