"""Immutable domain models for the city map engine.

All models are frozen dataclasses with slots. They carry no display
state: rendering collaborators consume them to draw highlights.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True, slots=True)
class Node:
    """A city on the map.

    Attributes:
        name: Unique, case-sensitive city name
        x: Horizontal map coordinate
        y: Vertical map coordinate
    """

    name: str
    x: int
    y: int

    def distance_to(self, other: Node) -> float:
        """Return the Euclidean distance to another city."""
        return math.hypot(self.x - other.x, self.y - other.y)


@dataclass(frozen=True, slots=True, eq=False)
class Edge:
    """One direction of travel along a road, ``u -> v``.

    The weight is the Euclidean distance between both cities and is
    computed once, at construction.

    Two edges compare equal when they join the same unordered pair of
    city names with the same weight, so ``A -> B == B -> A``.
    """

    u: Node
    v: Node
    weight: float = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "weight", self.u.distance_to(self.v))

    @property
    def endpoints(self) -> frozenset[str]:
        """Unordered pair of city names joined by this road."""
        return frozenset((self.u.name, self.v.name))

    @property
    def is_loop(self) -> bool:
        return self.u.name == self.v.name

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.endpoints == other.endpoints and self.weight == other.weight

    def __hash__(self) -> int:
        return hash((self.endpoints, self.weight))

    def __repr__(self) -> str:
        return f"Edge({self.u.name!r} -> {self.v.name!r}, {self.weight:.2f})"


@dataclass(frozen=True, slots=True)
class ShortestPathResult:
    """Result of a shortest-path query.

    Attributes:
        edges: Ordered edges from start to end
        distance: Total distance; ``inf`` when the end was never reached
    """

    edges: tuple[Edge, ...] = field(default_factory=tuple)
    distance: float = math.inf

    @property
    def is_empty(self) -> bool:
        """Check if the path contains no edge."""
        return len(self.edges) == 0

    @property
    def is_reachable(self) -> bool:
        """Check if the end city was reached."""
        return not math.isinf(self.distance)

    @property
    def num_edges(self) -> int:
        return len(self.edges)

    @property
    def cities(self) -> tuple[str, ...]:
        """City names along the path, start and end included."""
        if not self.edges:
            return ()
        return (self.edges[0].u.name,) + tuple(edge.v.name for edge in self.edges)


@dataclass(frozen=True, slots=True)
class SpanningTreeResult:
    """Result of a minimum spanning tree query.

    Attributes:
        edges: Tree edges, in the order they were added
        total_weight: Sum of the tree edge weights
        root: City the tree was grown from (None for an empty graph)
    """

    edges: tuple[Edge, ...] = field(default_factory=tuple)
    total_weight: float = 0.0
    root: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return len(self.edges) == 0

    @property
    def num_edges(self) -> int:
        return len(self.edges)

    @property
    def cities(self) -> frozenset[str]:
        """Names of the cities covered by the tree."""
        names = {edge.v.name for edge in self.edges}
        if self.root is not None:
            names.add(self.root)
        return frozenset(names)
