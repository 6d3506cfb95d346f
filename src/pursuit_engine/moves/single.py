"""Single-leg move enumeration."""

from collections.abc import Mapping

from pursuit_engine.board.graph import BoardGraph
from pursuit_engine.data import default_rules
from pursuit_engine.data.models import Location, RuleSet, TicketType
from pursuit_engine.moves.filters import can_afford, is_unoccupied, ticket_options
from pursuit_engine.moves.models import TicketMove
from pursuit_engine.state.players import PlayerState


def single_moves(
    player: PlayerState,
    board: BoardGraph,
    blocked: frozenset[Location],
    *,
    origin: Location | None = None,
    inventory: Mapping[TicketType, int] | None = None,
    rules: RuleSet = default_rules,
) -> frozenset[TicketMove]:
    """Get every (ticket, destination) move one edge away.

    `origin` and `inventory` default to the player's own location and tickets.
    Parallel edges and secret tickets may yield the same move more than once;
    those collapse in the returned set.
    """
    if origin is None:
        origin = player.location
    if inventory is None:
        inventory = player.tickets

    res: set[TicketMove] = set()
    for destination, transport in board.edges_from(origin):
        if not is_unoccupied(destination, blocked):
            continue
        for ticket in ticket_options(player, transport.ticket, rules):
            move = TicketMove(
                colour=player.colour, ticket=ticket, destination=destination
            )
            if can_afford(move.tickets, inventory):
                res.add(move)
    return frozenset(res)
