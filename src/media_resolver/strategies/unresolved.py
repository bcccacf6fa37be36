from ..interaction.intent_types import ParsedIntent
from ..schemas import StrategyOutcome
from ..vocabulary import EXAMPLE_QUERIES

HELP_TEXT = "I didn't quite catch that. Try asking for:\n" + "\n".join(
    f"• {example}" for example in EXAMPLE_QUERIES
)


class UnresolvedStrategy:
    """Fixed help reply for messages that match no rule. Makes no catalog calls."""

    name = "unresolved"

    async def execute(self, intent: ParsedIntent) -> StrategyOutcome:
        return StrategyOutcome.failure(self.name, HELP_TEXT, "no recognizable request")
