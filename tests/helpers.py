"""Shared test helpers."""

from pathlib import Path

from pursuit_engine import (
    BoardGraph,
    Colour,
    DoubleMove,
    PassMove,
    PlayerState,
    Role,
    TicketMove,
    TicketType,
    load_board,
)

TAXI = TicketType.TAXI
BUS = TicketType.BUS
UNDERGROUND = TicketType.UNDERGROUND
SECRET = TicketType.SECRET
DOUBLE = TicketType.DOUBLE

BLACK = Colour.BLACK
BLUE = Colour.BLUE
GREEN = Colour.GREEN
RED = Colour.RED

DATA_PATH = Path(__file__).parent / "data"


def london() -> BoardGraph:
    """Load the London board excerpt."""
    return load_board(DATA_PATH / "london_excerpt.yaml")


def make_tickets(
    taxi: int, bus: int, underground: int, double: int, secret: int
) -> dict[TicketType, int]:
    """Ticket inventory, in the usual argument order."""
    return {
        TAXI: taxi,
        BUS: bus,
        UNDERGROUND: underground,
        DOUBLE: double,
        SECRET: secret,
    }


def fugitive(location: int, tickets: dict[TicketType, int]) -> PlayerState:
    return PlayerState(
        colour=BLACK, role=Role.FUGITIVE, location=location, tickets=tickets
    )


def tracker(
    colour: Colour, location: int, tickets: dict[TicketType, int] | None = None
) -> PlayerState:
    if tickets is None:
        return PlayerState.starting(colour, Role.TRACKER, location)
    return PlayerState(
        colour=colour, role=Role.TRACKER, location=location, tickets=tickets
    )


def ticket(colour: Colour, ticket_type: TicketType, destination: int) -> TicketMove:
    return TicketMove(colour=colour, ticket=ticket_type, destination=destination)


def x2(
    colour: Colour,
    first: TicketType,
    intermediate: int,
    second: TicketType,
    final: int,
) -> DoubleMove:
    return DoubleMove.of(colour, first, intermediate, second, final)


def pass_move(colour: Colour) -> PassMove:
    return PassMove(colour=colour)
