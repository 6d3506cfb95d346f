"""Occupancy index and move filters.

Each filter is a plain predicate over one candidate, so the enumerators
only combine them.
"""

from collections import Counter
from collections.abc import Iterable, Mapping

from pursuit_engine.data import default_rules
from pursuit_engine.data.models import Location, RuleSet, TicketType
from pursuit_engine.state.players import PlayerState, Roster


def tracker_locations(roster: Roster) -> frozenset[Location]:
    """Locations currently held by trackers (never the fugitive's)."""
    return frozenset(p.location for p in roster.trackers)


def blocked_for(
    player: PlayerState,
    occupied: frozenset[Location],
    rules: RuleSet = default_rules,
) -> frozenset[Location]:
    """Locations the given player may not move onto."""
    if player.is_fugitive and not rules.fugitive_blocked_by_trackers:
        return frozenset()
    return occupied


def is_unoccupied(destination: Location, blocked: frozenset[Location]) -> bool:
    """Whether the destination is free to move onto."""
    return destination not in blocked


def can_afford(
    tickets: Counter[TicketType], inventory: Mapping[TicketType, int]
) -> bool:
    """Whether the inventory holds every ticket spent, as many times as spent."""
    return all(inventory.get(t, 0) >= n for t, n in tickets.items())


def may_spend(
    player: PlayerState, ticket: TicketType, rules: RuleSet = default_rules
) -> bool:
    """Whether the player's role allows spending this ticket type."""
    return player.is_fugitive or ticket not in rules.fugitive_only_tickets


def ticket_options(
    player: PlayerState, required: TicketType, rules: RuleSet = default_rules
) -> Iterable[TicketType]:
    """Tickets that could pay for an edge needing `required`.

    The fugitive may always pay with a secret ticket instead.
    """
    options = [required]
    if player.is_fugitive and required != TicketType.SECRET:
        options.append(TicketType.SECRET)
    return [t for t in options if may_spend(player, t, rules)]
