"""Data models."""

from enum import Enum

from typing_extensions import Annotated
from pydantic import BaseModel, Field, NonNegativeInt, field_validator

Location = int
"""Board location (node number)."""


class TicketType(str, Enum):
    """Ticket type."""

    TAXI = "TAXI"
    BUS = "BUS"
    UNDERGROUND = "UNDERGROUND"
    SECRET = "SECRET"  # stands in for any transport, hides which one
    DOUBLE = "DOUBLE"  # spent once per double move, never per leg


class Transport(str, Enum):
    """Transport type of a board edge."""

    TAXI = "TAXI"
    BUS = "BUS"
    UNDERGROUND = "UNDERGROUND"
    FERRY = "FERRY"

    @property
    def ticket(self) -> TicketType:
        """Ticket required to ride this transport."""
        return _TRANSPORT_TICKETS[self]


_TRANSPORT_TICKETS: dict[Transport, TicketType] = {
    Transport.TAXI: TicketType.TAXI,
    Transport.BUS: TicketType.BUS,
    Transport.UNDERGROUND: TicketType.UNDERGROUND,
    Transport.FERRY: TicketType.SECRET,
}


class Colour(str, Enum):
    """Player colour (identity)."""

    BLACK = "BLACK"
    BLUE = "BLUE"
    GREEN = "GREEN"
    RED = "RED"
    WHITE = "WHITE"
    YELLOW = "YELLOW"


class Role(str, Enum):
    """Player role."""

    FUGITIVE = "FUGITIVE"
    TRACKER = "TRACKER"


Tickets = dict[TicketType, NonNegativeInt]


class RuleSet(BaseModel):
    """Game rules that affect which moves are legal."""

    name: str = "standard"
    total_rounds: Annotated[int, Field(ge=0)] = 24
    double_move_min_rounds: Annotated[int, Field(ge=1)] = 2
    fugitive_tickets: Tickets = {}
    tracker_tickets: Tickets = {}
    fugitive_only_tickets: list[TicketType] = [TicketType.SECRET, TicketType.DOUBLE]
    fugitive_blocked_by_trackers: Annotated[
        bool, Field(description="Trackers' locations are off limits to the fugitive.")
    ] = True

    def starting_tickets(self, role: Role) -> Tickets:
        """Starting ticket inventory for a role."""
        if role == Role.FUGITIVE:
            return dict(self.fugitive_tickets)
        return dict(self.tracker_tickets)

    @field_validator("fugitive_only_tickets", mode="after")
    @classmethod
    def _chk_fugitive_only(cls, v: list[TicketType]) -> list[TicketType]:
        """Ensure trackers keep at least one ticket type to travel with."""
        travel = {tr.ticket for tr in Transport}
        if travel <= set(v):
            raise ValueError(f"Trackers could never move with rules: {v}")
        return v
