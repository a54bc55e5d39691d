"""Top-level package for the city map engine.

Stores cities and the roads between them, and answers two queries over
that graph: the shortest path between two cities (Dijkstra) and the
minimum spanning tree (Prim). Rendering is left to callers, which
consume the returned edges and totals.
"""

from .domain.models import Edge, Node, ShortestPathResult, SpanningTreeResult
from .graph import CityGraph, build_bay_area_map, dijkstra, prim

__all__ = [
    "CityGraph",
    "Node",
    "Edge",
    "ShortestPathResult",
    "SpanningTreeResult",
    "dijkstra",
    "prim",
    "build_bay_area_map",
]
