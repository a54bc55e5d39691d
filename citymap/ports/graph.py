"""Graph ports - Abstractions for graph loading and queries.

These protocols define the contracts between the map service and the
graph adapters: where the city graph comes from, and how the shortest
path and minimum spanning tree are computed over it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import Node, ShortestPathResult, SpanningTreeResult
    from ..graph.store import CityGraph


class GraphRepositoryPort(Protocol):
    """Port for loading the city graph.

    Implementations: adapters/graph/bay_area_repository.py,
    adapters/graph/csv_repository.py
    """

    def load(self) -> CityGraph:
        """Load the city graph.

        Returns:
            The populated graph. Repeated calls return the same graph.
        """
        ...

    def get_city(self, name: str) -> Optional[Node]:
        """Get a city by name.

        Args:
            name: The city name to look up (e.g., 'San Jose').

        Returns:
            The city, or None if not found.
        """
        ...

    def list_cities(self) -> Sequence[Node]:
        """List all cities, sorted by name."""
        ...


class ShortestPathSolverPort(Protocol):
    """Port for shortest-path computation.

    Implementation: adapters/graph/dijkstra_solver.py
    """

    def solve(self, graph: CityGraph, start: str, end: str) -> ShortestPathResult:
        """Find the shortest path between two cities.

        Args:
            graph: The city graph.
            start: Departure city name.
            end: Arrival city name.

        Returns:
            ShortestPathResult with edges and total distance.
        """
        ...


class SpanningTreeSolverPort(Protocol):
    """Port for minimum spanning tree computation.

    Implementation: adapters/graph/prim_solver.py
    """

    def solve(self, graph: CityGraph) -> SpanningTreeResult:
        """Compute a minimum spanning tree of the graph."""
        ...
