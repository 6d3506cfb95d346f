"""Move variants."""

from collections import Counter
from typing import Literal, Union

from typing_extensions import Annotated
from pydantic import BaseModel, Field, TypeAdapter, model_validator

from pursuit_engine.data.models import Colour, Location, TicketType


class TicketMove(BaseModel):
    """Move along one edge, spending one ticket."""

    model_config = {"frozen": True}

    kind: Literal["ticket"] = "ticket"
    colour: Colour
    ticket: TicketType
    destination: Location

    @property
    def tickets(self) -> Counter[TicketType]:
        """Tickets spent by this move."""
        return Counter({self.ticket: 1})

    def __str__(self) -> str:
        return f"{self.colour.name}-{self.ticket.name}->{self.destination}"


class DoubleMove(BaseModel):
    """Two ticket moves in a row, made by the fugitive in a single turn."""

    model_config = {"frozen": True}

    kind: Literal["double"] = "double"
    colour: Colour
    first: TicketMove
    second: TicketMove

    @model_validator(mode="after")
    def _chk_legs(self) -> "DoubleMove":
        """Ensure both legs belong to the mover."""
        if self.first.colour != self.colour or self.second.colour != self.colour:
            raise ValueError(f"Both legs of a double move must be {self.colour.name}")
        return self

    @classmethod
    def of(
        cls,
        colour: Colour,
        first_ticket: TicketType,
        intermediate: Location,
        second_ticket: TicketType,
        final: Location,
    ) -> "DoubleMove":
        """Create a double move from its two (ticket, destination) legs."""
        return cls(
            colour=colour,
            first=TicketMove(
                colour=colour, ticket=first_ticket, destination=intermediate
            ),
            second=TicketMove(
                colour=colour, ticket=second_ticket, destination=final
            ),
        )

    @property
    def destination(self) -> Location:
        """Final destination."""
        return self.second.destination

    @property
    def tickets(self) -> Counter[TicketType]:
        """Tickets spent by this move, including the double move ticket."""
        return self.first.tickets + self.second.tickets + Counter([TicketType.DOUBLE])

    def __str__(self) -> str:
        return (
            f"{self.colour.name}-x2-{self.first.ticket.name}->{self.first.destination}"
            f"-{self.second.ticket.name}->{self.second.destination}"
        )


class PassMove(BaseModel):
    """No move at all; only offered when nothing else is legal."""

    model_config = {"frozen": True}

    kind: Literal["pass"] = "pass"
    colour: Colour

    @property
    def destination(self) -> None:
        """Passing goes nowhere."""
        return None

    @property
    def tickets(self) -> Counter[TicketType]:
        """Passing spends nothing."""
        return Counter()

    def __str__(self) -> str:
        return f"{self.colour.name}-pass"


Move = Annotated[Union[TicketMove, DoubleMove, PassMove], Field(discriminator="kind")]

move_set_adapter = TypeAdapter(frozenset[Move])
"""Validates and serialises move sets, e.g. `move_set_adapter.dump_json(moves)`."""
