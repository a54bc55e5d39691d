"""CSV Graph Repository adapter.

Loads the city graph from two CSV files:
- cities.csv with columns ``name,x,y``
- roads.csv with columns ``from_city,to_city``

Road weights are not stored: they are derived from city positions.
"""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from typing import Optional, Sequence

from ...config import GraphConfig, get_config
from ...domain.errors import GraphLoadError
from ...domain.models import Node
from ...graph.store import CityGraph


@dataclass
class CSVGraphRepository:
    """Graph repository that loads from CSV files.

    This adapter implements GraphRepositoryPort. The graph is loaded on
    first use and cached.

    Attributes:
        config: Graph configuration (paths, file names)
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    _logger: logging.Logger = field(init=False, repr=False)

    _graph: Optional[CityGraph] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self) -> CityGraph:
        """Load the city graph from CSV files.

        Returns:
            The populated city graph.

        Raises:
            GraphLoadError: If a file is missing or malformed.
        """
        if self._graph is not None:
            return self._graph

        self._logger.debug(
            "Loading graph",
            extra={
                "cities_path": str(self.config.cities_path),
                "roads_path": str(self.config.roads_path),
            },
        )

        graph = CityGraph(dedupe_roads=self.config.dedupe_roads)
        self._load_cities(graph)
        self._load_roads(graph)

        self._graph = graph
        self._logger.info(
            "Graph loaded",
            extra={"cities": len(graph), "roads": graph.edge_count()},
        )
        return graph

    def _load_cities(self, graph: CityGraph) -> None:
        path = self.config.cities_path
        try:
            with path.open(newline="", encoding="utf-8") as f:
                reader = csv.DictReader(f)
                for row in reader:
                    name = (row.get("name") or "").strip()
                    if not name:
                        continue
                    x = int((row.get("x") or "").strip())
                    y = int((row.get("y") or "").strip())
                    graph.add_node(name, x, y)
        except (OSError, ValueError, csv.Error) as e:
            raise GraphLoadError(
                f"Failed to load cities: {path}",
                file_path=str(path),
                cause=e,
            )

    def _load_roads(self, graph: CityGraph) -> None:
        path = self.config.roads_path
        try:
            with path.open(newline="", encoding="utf-8") as f:
                reader = csv.DictReader(f)
                for row in reader:
                    u_name = (row.get("from_city") or "").strip()
                    v_name = (row.get("to_city") or "").strip()
                    if not u_name or not v_name:
                        continue
                    if u_name not in graph or v_name not in graph:
                        self._logger.debug(
                            "Skipping road with unknown city",
                            extra={"from_city": u_name, "to_city": v_name},
                        )
                        continue
                    graph.add_edge(u_name, v_name)
        except (OSError, ValueError, csv.Error) as e:
            raise GraphLoadError(
                f"Failed to load roads: {path}",
                file_path=str(path),
                cause=e,
            )

    def get_city(self, name: str) -> Optional[Node]:
        return self.load().get_node(name)

    def list_cities(self) -> Sequence[Node]:
        graph = self.load()
        return [graph.get_node(name) for name in graph.city_names()]  # type: ignore[misc]

    def clear_cache(self) -> None:
        """Drop the cached graph so the next load re-reads the files."""
        self._graph = None
        self._logger.debug("Graph cache cleared")
