"""Repository serving the built-in Bay Area map."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Sequence

from ...domain.models import Node
from ...graph.bay_area import build_bay_area_map
from ...graph.store import CityGraph


@dataclass
class BayAreaGraphRepository:
    """GraphRepositoryPort backed by the literal Bay Area dataset."""

    dedupe_roads: bool = False
    _logger: logging.Logger = field(init=False, repr=False)
    _graph: Optional[CityGraph] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self) -> CityGraph:
        if self._graph is None:
            self._graph = build_bay_area_map(dedupe_roads=self.dedupe_roads)
            self._logger.info(
                "Graph built",
                extra={"cities": len(self._graph), "roads": self._graph.edge_count()},
            )
        return self._graph

    def get_city(self, name: str) -> Optional[Node]:
        return self.load().get_node(name)

    def list_cities(self) -> Sequence[Node]:
        graph = self.load()
        return [graph.get_node(name) for name in graph.city_names()]  # type: ignore[misc]
