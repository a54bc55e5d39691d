"""In-memory city graph.

This module defines the CityGraph store: cities keyed by name and an
adjacency list of directed road records. Each undirected road is stored
as two records, ``u -> v`` in ``u``'s list and ``v -> u`` in ``v``'s.

The store is insert-only. It is meant to be built once and then queried;
concurrent readers are safe only after every write has completed.
"""

from __future__ import annotations

from typing import Dict, Iterator, List, Optional, Sequence

from ..domain.models import Edge, Node, ShortestPathResult, SpanningTreeResult
from .dijkstra import dijkstra
from .prim import prim


class CityGraph:
    """Undirected, Euclidean-weighted graph of cities.

    Invalid input never raises: duplicate cities are ignored and roads
    naming an unknown city are not created.

    Args:
        dedupe_roads: When True, a second ``add_edge`` between the same
            pair of cities is ignored. By default repeated calls create
            parallel roads.
    """

    def __init__(self, dedupe_roads: bool = False) -> None:
        self.dedupe_roads = dedupe_roads
        self._nodes: Dict[str, Node] = {}
        self._adjacency: Dict[str, List[Edge]] = {}

    def add_node(self, name: str, x: int, y: int) -> None:
        """Insert a city; first write wins."""
        if name in self._nodes:
            return
        self._nodes[name] = Node(name, x, y)
        self._adjacency[name] = []

    def add_edge(self, u_name: str, v_name: str) -> None:
        """Connect two existing cities with a road in both directions."""
        u = self._nodes.get(u_name)
        v = self._nodes.get(v_name)
        if u is None or v is None:
            return
        if self.dedupe_roads and self.has_edge(u_name, v_name):
            return
        self._adjacency[u_name].append(Edge(u, v))
        self._adjacency[v_name].append(Edge(v, u))

    def has_edge(self, u_name: str, v_name: str) -> bool:
        return any(edge.v.name == v_name for edge in self._adjacency.get(u_name, ()))

    def get_node(self, name: str) -> Optional[Node]:
        return self._nodes.get(name)

    def neighbors(self, name: str) -> Sequence[Edge]:
        """Outgoing road records of a city (empty for unknown names)."""
        return tuple(self._adjacency.get(name, ()))

    def city_names(self) -> List[str]:
        """All city names in lexicographic order."""
        return sorted(self._nodes)

    def all_nodes(self) -> List[Node]:
        return list(self._nodes.values())

    def all_edges(self) -> List[Edge]:
        """Every undirected road exactly once.

        Of the two records making up a road, only the one leaving the
        lexicographically smaller city is kept. A loop road stores both
        of its records in the same list, so every other one is kept.
        """
        edges: List[Edge] = []
        for name in sorted(self._adjacency):
            keep_loop = True
            for edge in self._adjacency[name]:
                if edge.is_loop:
                    if keep_loop:
                        edges.append(edge)
                    keep_loop = not keep_loop
                elif edge.u.name < edge.v.name:
                    edges.append(edge)
        return edges

    def edge_count(self) -> int:
        """Number of undirected roads."""
        return len(self.all_edges())

    def shortest_path(self, start: str, end: str) -> ShortestPathResult:
        return dijkstra(self, start, end)

    def minimum_spanning_tree(self) -> SpanningTreeResult:
        return prim(self)

    def __contains__(self, name: object) -> bool:
        return name in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[str]:
        return iter(self._nodes)

    def __repr__(self) -> str:
        return f"CityGraph(cities={len(self._nodes)}, roads={self.edge_count()})"
