"""Map service - Query orchestration for callers.

The service loads the graph once through its repository and answers
read-only queries. It owns no display or selection state: callers pass
city names in and receive immutable results back.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from ..adapters.graph import (
    BayAreaGraphRepository,
    CSVGraphRepository,
    DijkstraPathSolver,
    PrimTreeSolver,
)
from ..config import AppConfig, get_config
from ..domain.errors import ConfigurationError
from ..domain.models import Edge, Node, ShortestPathResult, SpanningTreeResult
from ..graph.store import CityGraph
from ..ports.graph import (
    GraphRepositoryPort,
    ShortestPathSolverPort,
    SpanningTreeSolverPort,
)


@dataclass
class MapService:
    """Main service for city map queries.

    Attributes:
        graph_repository: Source of the city graph
        path_solver: Computes shortest paths
        tree_solver: Computes minimum spanning trees
    """

    graph_repository: GraphRepositoryPort
    path_solver: ShortestPathSolverPort
    tree_solver: SpanningTreeSolverPort

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    @property
    def graph(self) -> CityGraph:
        return self.graph_repository.load()

    def city_names(self) -> List[str]:
        """City names in lexicographic order."""
        return self.graph.city_names()

    def cities(self) -> Sequence[Node]:
        return self.graph_repository.list_cities()

    def roads(self) -> List[Edge]:
        """Every road once, for drawing the map."""
        return self.graph.all_edges()

    def route(self, start: str, end: str) -> ShortestPathResult:
        """Shortest path between two cities.

        Raises:
            CityNotFoundError: If either city is unknown.
            NoRouteFoundError: If the cities are not connected.
        """
        self._logger.info("Computing route", extra={"start": start, "end": end})
        return self.path_solver.solve(self.graph, start, end)

    def route_safe(self, start: str, end: str) -> ShortestPathResult:
        """Shortest path that never raises.

        Unknown or unreachable cities give an empty path with an
        infinite distance.
        """
        solve_safe = getattr(self.path_solver, "solve_safe", None)
        if solve_safe is not None:
            return solve_safe(self.graph, start, end)
        return self.graph.shortest_path(start, end)

    def spanning_tree(self) -> SpanningTreeResult:
        self._logger.info("Computing spanning tree")
        return self.tree_solver.solve(self.graph)


def build_map_service(config: Optional[AppConfig] = None) -> MapService:
    """Create a MapService with the default adapters.

    Args:
        config: Optional configuration override.

    Raises:
        ConfigurationError: If the configured graph source is unknown.
    """
    config = config or get_config()
    graph_config = config.graph

    repository: GraphRepositoryPort
    if graph_config.source == "bay_area":
        repository = BayAreaGraphRepository(dedupe_roads=graph_config.dedupe_roads)
    elif graph_config.source == "csv":
        repository = CSVGraphRepository(graph_config)
    else:
        raise ConfigurationError(
            f"Unknown graph source: {graph_config.source!r}",
            setting_name="graph.source",
        )

    return MapService(
        graph_repository=repository,
        path_solver=DijkstraPathSolver(),
        tree_solver=PrimTreeSolver(),
    )
