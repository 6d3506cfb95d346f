"""Transport graph of the board."""

from functools import cached_property
from pathlib import Path
from typing import Any

from pydantic import BaseModel, model_validator
from pydantic_yaml import parse_yaml_file_as

from pursuit_engine.data.models import Location, Transport

Link = tuple[Location, Transport]
"""Destination reached from some location, and the transport used."""


class Edge(BaseModel):
    """Undirected edge between two locations."""

    model_config = {"frozen": True}

    a: Location
    b: Location
    transport: Transport

    @model_validator(mode="after")
    def _chk_not_loop(self) -> "Edge":
        """Edges must join two different locations."""
        if self.a == self.b:
            raise ValueError(f"Edge loops back onto location {self.a}")
        return self

    def other_end(self, location: Location) -> Location:
        """Get the location at the other end of this edge."""
        if location == self.a:
            return self.b
        if location == self.b:
            return self.a
        raise ValueError(f"Location {location} is not on edge {self!r}")


class BoardGraph(BaseModel):
    """Multigraph of locations joined by transport edges.

    Parallel edges (e.g. taxi and bus between the same two locations)
    are kept separate, one per transport.
    """

    name: str = "board"
    locations: list[Location] = []
    edges: list[Edge] = []

    @model_validator(mode="before")
    @classmethod
    def _set_locations(cls, data: Any) -> Any:
        """Derive locations from the edges if none are given."""
        if isinstance(data, dict) and not data.get("locations"):
            found: set[Location] = set()
            for edge in data.get("edges", []):
                if isinstance(edge, Edge):
                    found.update((edge.a, edge.b))
                elif isinstance(edge, dict):
                    found.update((edge["a"], edge["b"]))
            return {**data, "locations": sorted(found)}
        return data

    @model_validator(mode="after")
    def _chk_edges(self) -> "BoardGraph":
        """Ensure every edge joins known locations."""
        known = set(self.locations)
        for edge in self.edges:
            missing = {edge.a, edge.b} - known
            if missing:
                raise ValueError(f"Edge {edge!r} uses unknown locations: {missing}")
        return self

    @cached_property
    def adjacency(self) -> dict[Location, tuple[Link, ...]]:
        """Incident links for every location."""
        res: dict[Location, list[Link]] = {loc: [] for loc in self.locations}
        for edge in self.edges:
            res[edge.a].append((edge.b, edge.transport))
            res[edge.b].append((edge.a, edge.transport))
        return {loc: tuple(links) for loc, links in res.items()}

    def __contains__(self, location: object) -> bool:
        return location in self.adjacency

    def edges_from(self, location: Location) -> tuple[Link, ...]:
        """Get (destination, transport) pairs for edges touching a location."""
        try:
            return self.adjacency[location]
        except KeyError as ke:
            raise ValueError(f"Unknown location: {location}") from ke

    def neighbours(self, location: Location) -> set[Location]:
        """Locations one edge away, by any transport."""
        return {dest for dest, _ in self.edges_from(location)}


class YamlBoard(BaseModel):
    """Board definition in YAML.

    Edges are grouped per transport, as `[a, b]` pairs.
    """

    name: str
    locations: list[Location] = []
    routes: dict[Transport, list[tuple[Location, Location]]] = {}

    def to_board(self) -> BoardGraph:
        """Convert to proper board graph."""
        edges = [
            Edge(a=a, b=b, transport=transport)
            for transport, pairs in self.routes.items()
            for a, b in pairs
        ]
        return BoardGraph(name=self.name, locations=self.locations, edges=edges)


def load_board(path: Path | str) -> BoardGraph:
    """Load a board graph from a YAML file."""
    raw = parse_yaml_file_as(YamlBoard, path)
    return raw.to_board()
