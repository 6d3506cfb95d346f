"""Players and the roster."""

from collections import Counter

from pydantic import BaseModel, field_validator

from pursuit_engine.data import default_rules
from pursuit_engine.data.models import (
    Colour,
    Location,
    Role,
    RuleSet,
    TicketType,
    Tickets,
)


class PlayerState(BaseModel):
    """Snapshot of a single player."""

    model_config = {"frozen": True}

    colour: Colour
    role: Role
    location: Location
    tickets: Tickets = {}

    @property
    def is_fugitive(self) -> bool:
        """Whether this player is the fugitive."""
        return self.role == Role.FUGITIVE

    def count(self, ticket: TicketType) -> int:
        """Number of tickets of a type (0 if missing)."""
        return self.tickets.get(ticket, 0)

    @classmethod
    def starting(
        cls,
        colour: Colour,
        role: Role,
        location: Location,
        rules: RuleSet = default_rules,
    ) -> "PlayerState":
        """Create a player holding the starting tickets for their role."""
        return cls(
            colour=colour,
            role=role,
            location=location,
            tickets=rules.starting_tickets(role),
        )


class Roster(BaseModel):
    """All players of one game."""

    model_config = {"frozen": True}

    players: list[PlayerState]

    @field_validator("players", mode="after")
    @classmethod
    def _chk_players(cls, v: list[PlayerState]) -> list[PlayerState]:
        """Ensure colours are unique and there is exactly one fugitive."""
        colours = Counter(p.colour for p in v)
        dupes = [c.name for c, n in colours.items() if n > 1]
        if dupes:
            raise ValueError(f"Duplicate player colours: {dupes}")
        n_fugitives = sum(p.is_fugitive for p in v)
        if n_fugitives != 1:
            raise ValueError(f"Expected exactly 1 fugitive, got: {n_fugitives}")
        return v

    @property
    def fugitive(self) -> PlayerState:
        """The fugitive."""
        return next(p for p in self.players if p.is_fugitive)

    @property
    def trackers(self) -> list[PlayerState]:
        """All trackers, in roster order."""
        return [p for p in self.players if not p.is_fugitive]

    @property
    def colours(self) -> list[Colour]:
        """Player colours, in roster order."""
        return [p.colour for p in self.players]

    def get_player(self, colour: Colour) -> PlayerState:
        """Get a player by colour."""
        for player in self.players:
            if player.colour == colour:
                return player
        raise ValueError(f"No player with colour {colour.name} in the roster.")

    def __getitem__(self, colour: Colour) -> PlayerState:
        """Get a player by colour (dict style)."""
        try:
            return self.get_player(colour)
        except ValueError as ve:
            raise KeyError(colour) from ve
