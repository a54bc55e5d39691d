"""Dijkstra shortest-path solver adapter.

Wraps graph/dijkstra.py with:
- Input validation (strict mode)
- Typed errors for unknown cities and unreachable destinations
- Logging
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ...domain.errors import CityNotFoundError, NoRouteFoundError
from ...domain.models import ShortestPathResult
from ...graph.dijkstra import dijkstra
from ...graph.store import CityGraph


@dataclass
class DijkstraPathSolver:
    """Shortest-path solver using Dijkstra's algorithm.

    Implements ShortestPathSolverPort.
    """

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def solve(self, graph: CityGraph, start: str, end: str) -> ShortestPathResult:
        """Find the shortest path between two cities.

        Args:
            graph: The city graph.
            start: Departure city name.
            end: Arrival city name.

        Returns:
            ShortestPathResult with edges and total distance. When
            ``start == end`` the result is empty with distance 0.

        Raises:
            CityNotFoundError: If start or end is not in the graph.
            NoRouteFoundError: If no path exists.
        """
        self._logger.debug("Solving route", extra={"start": start, "end": end})

        for name in (start, end):
            if name not in graph:
                raise CityNotFoundError(f"City not in graph: {name}", city=name)

        result = dijkstra(graph, start, end)

        if not result.is_reachable:
            self._logger.warning("No route found", extra={"start": start, "end": end})
            raise NoRouteFoundError(
                f"No path from {start} to {end}",
                start=start,
                end=end,
            )

        self._logger.info(
            "Route found",
            extra={
                "start": start,
                "end": end,
                "roads": result.num_edges,
                "distance": result.distance,
            },
        )
        return result

    def solve_safe(self, graph: CityGraph, start: str, end: str) -> ShortestPathResult:
        """Find the shortest path, returning a degenerate result on failure.

        Unknown or unreachable cities give an empty path with an
        infinite distance instead of raising.
        """
        return dijkstra(graph, start, end)
