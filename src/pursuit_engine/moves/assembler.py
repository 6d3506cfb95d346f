"""Legal move sets, assembled from the enumerators."""

import logging
from collections.abc import Set

from pydantic import BaseModel

from pursuit_engine.board.graph import BoardGraph
from pursuit_engine.data import default_rules
from pursuit_engine.data.models import Colour, RuleSet
from pursuit_engine.moves.double import double_moves
from pursuit_engine.moves.filters import blocked_for, tracker_locations
from pursuit_engine.moves.models import Move, PassMove
from pursuit_engine.moves.single import single_moves
from pursuit_engine.state.players import Roster
from pursuit_engine.state.rounds import RoundContext

logger = logging.getLogger(__name__)


def with_pass_fallback(colour: Colour, moves: Set[Move]) -> frozenset[Move]:
    """Return the moves as they are, or a lone pass move if there are none."""
    if len(moves) == 0:
        logger.debug(f"{colour.name} has no legal moves, offering a pass")
        return frozenset([PassMove(colour=colour)])
    return frozenset(moves)


class MoveGenerator(BaseModel):
    """Computes legal moves on a fixed board, under fixed rules.

    Holds no state between calls; one generator may serve any number of
    games played on the same board.
    """

    board: BoardGraph
    rules: RuleSet = default_rules

    def check_roster(self, roster: Roster) -> None:
        """Ensure every player stands on the board."""
        for player in roster.players:
            if player.location not in self.board:
                raise ValueError(
                    f"{player.colour.name} is at location {player.location}, "
                    f"which is not on board {self.board.name!r}"
                )

    def legal_moves(
        self,
        colour: Colour,
        roster: Roster,
        rounds: RoundContext | int,
    ) -> frozenset[Move]:
        """Get every legal move for the player with the given colour.

        The result holds ticket moves and (for the fugitive) double moves,
        or exactly one pass move if neither exist.
        """
        player = roster.get_player(colour)
        self.check_roster(roster)
        if not isinstance(rounds, RoundContext):
            rounds = RoundContext(rounds_remaining=rounds)

        blocked = blocked_for(player, tracker_locations(roster), self.rules)
        singles = single_moves(player, self.board, blocked, rules=self.rules)
        doubles = double_moves(player, self.board, blocked, rounds, rules=self.rules)
        res = with_pass_fallback(colour, singles | doubles)
        logger.debug(
            f"{colour.name} at {player.location}: {len(singles)} single, "
            f"{len(doubles)} double moves"
        )
        return res


def compute_legal_moves(
    colour: Colour,
    roster: Roster,
    board: BoardGraph,
    rounds: RoundContext | int,
    *,
    rules: RuleSet = default_rules,
) -> frozenset[Move]:
    """Get every legal move for a player (thin wrapper)."""
    return MoveGenerator(board=board, rules=rules).legal_moves(colour, roster, rounds)
