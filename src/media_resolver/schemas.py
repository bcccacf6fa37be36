from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .models import ResultItem

MAX_REPLY_ITEMS = 5


@dataclass
class ResolverReply:
    text: str
    items: List[ResultItem] = field(default_factory=list)

    def __post_init__(self):
        if len(self.items) > MAX_REPLY_ITEMS:
            raise ValueError(
                f"A reply carries at most {MAX_REPLY_ITEMS} items, got {len(self.items)}"
            )

    def to_dict(self) -> dict:
        return {
            "text": self.text,
            "items": [item.to_dict() for item in self.items],
        }


@dataclass(frozen=True)
class StrategyOutcome:
    """
    Result of running one strategy: success with items, or failure with a reason.

    Failures still carry user-facing text; ``failure_reason`` is diagnostic
    only and never reaches the reply.
    """
    strategy: str
    text: str
    items: Tuple[ResultItem, ...] = ()
    failure_reason: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.failure_reason is None

    @classmethod
    def success(cls, strategy: str, text: str, items=()) -> "StrategyOutcome":
        return cls(strategy=strategy, text=text, items=tuple(items))

    @classmethod
    def failure(cls, strategy: str, text: str, reason: str) -> "StrategyOutcome":
        return cls(strategy=strategy, text=text, failure_reason=reason)

    def to_reply(self) -> ResolverReply:
        return ResolverReply(text=self.text, items=list(self.items))
