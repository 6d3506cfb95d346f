"""Legal move generation for a fugitive-and-trackers transport board game."""

from pursuit_engine.board.graph import BoardGraph, Edge, load_board
from pursuit_engine.data import default_rules, load_rules
from pursuit_engine.data.models import Colour, Role, RuleSet, TicketType, Transport
from pursuit_engine.moves.assembler import MoveGenerator, compute_legal_moves
from pursuit_engine.moves.models import DoubleMove, Move, PassMove, TicketMove
from pursuit_engine.state.players import PlayerState, Roster
from pursuit_engine.state.rounds import RoundContext

__all__ = [
    "BoardGraph",
    "Colour",
    "DoubleMove",
    "Edge",
    "Move",
    "MoveGenerator",
    "PassMove",
    "PlayerState",
    "RoundContext",
    "Roster",
    "Role",
    "RuleSet",
    "TicketMove",
    "TicketType",
    "Transport",
    "compute_legal_moves",
    "default_rules",
    "load_board",
    "load_rules",
]
