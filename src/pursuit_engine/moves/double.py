"""Double move combinations (fugitive only)."""

import logging
from collections import Counter

from pursuit_engine.board.graph import BoardGraph
from pursuit_engine.data import default_rules
from pursuit_engine.data.models import Location, RuleSet, TicketType
from pursuit_engine.moves.filters import can_afford
from pursuit_engine.moves.models import DoubleMove
from pursuit_engine.moves.single import single_moves
from pursuit_engine.state.players import PlayerState
from pursuit_engine.state.rounds import RoundContext

logger = logging.getLogger(__name__)


def can_double_move(
    player: PlayerState, rounds: RoundContext, rules: RuleSet = default_rules
) -> bool:
    """Whether the player may make a double move at all this turn."""
    if not player.is_fugitive:
        return False
    if player.count(TicketType.DOUBLE) < 1:
        logger.debug(f"{player.colour.name} has no double move tickets")
        return False
    if not rounds.allows_double_move(rules):
        logger.debug(
            f"{rounds.rounds_remaining} rounds left, "
            f"need {rules.double_move_min_rounds} for a double move"
        )
        return False
    return True


def double_moves(
    player: PlayerState,
    board: BoardGraph,
    blocked: frozenset[Location],
    rounds: RoundContext,
    *,
    rules: RuleSet = default_rules,
) -> frozenset[DoubleMove]:
    """Get every double move for the player.

    Both legs are checked against the same `blocked` locations, since trackers
    stay put while the fugitive makes both legs. The second leg is enumerated
    with the first leg's ticket already spent.
    """
    if not can_double_move(player, rounds, rules):
        return frozenset()

    inventory = Counter(player.tickets)
    res: set[DoubleMove] = set()
    for first in single_moves(player, board, blocked, rules=rules):
        seconds = single_moves(
            player,
            board,
            blocked,
            origin=first.destination,
            inventory=inventory - first.tickets,
            rules=rules,
        )
        for second in seconds:
            move = DoubleMove(colour=player.colour, first=first, second=second)
            if can_afford(move.tickets, inventory):
                res.add(move)
    return frozenset(res)
