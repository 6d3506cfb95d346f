"""Round context."""

from typing_extensions import Annotated
from pydantic import BaseModel, Field

from pursuit_engine.data import default_rules
from pursuit_engine.data.models import RuleSet


class RoundContext(BaseModel):
    """Where the game stands in its rounds."""

    model_config = {"frozen": True}

    rounds_remaining: Annotated[int, Field(ge=0)]

    @classmethod
    def from_round(
        cls, current_round: int, rules: RuleSet = default_rules
    ) -> "RoundContext":
        """Context for the given (0-based) round of a game."""
        if not 0 <= current_round <= rules.total_rounds:
            raise ValueError(
                f"Round {current_round} outside of [0, {rules.total_rounds}]"
            )
        return cls(rounds_remaining=rules.total_rounds - current_round)

    def allows_double_move(self, rules: RuleSet = default_rules) -> bool:
        """Whether enough rounds remain to play both legs of a double move."""
        return self.rounds_remaining >= rules.double_move_min_rounds
