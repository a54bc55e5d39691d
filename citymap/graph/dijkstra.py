"""Shortest-path computation using Dijkstra's algorithm.

The frontier is a binary heap (``heapq``) with lazy deletion, giving
O((V + E) log V) per query.
"""

from __future__ import annotations

import heapq
import math
from typing import TYPE_CHECKING, Dict, List, Set, Tuple

from ..domain.models import Edge, ShortestPathResult

if TYPE_CHECKING:
    from .store import CityGraph


def dijkstra(graph: CityGraph, start: str, end: str) -> ShortestPathResult:
    """Compute the shortest path between two cities.

    Parameters
    ----------
    graph:
        City graph to search.
    start:
        Name of the departure city.
    end:
        Name of the arrival city.

    Returns
    -------
    ShortestPathResult
        The edges from ``start`` to ``end`` in travel order and the
        total distance. If ``start`` or ``end`` is unknown, or ``end`` is
        unreachable, the path is empty and the distance is ``inf``. If
        ``start == end`` for a known city, the path is empty and the
        distance is 0.
    """
    if start not in graph:
        return ShortestPathResult()

    distances: Dict[str, float] = {name: math.inf for name in graph}
    distances[start] = 0.0
    previous: Dict[str, Edge] = {}

    heap: List[Tuple[float, str]] = [(0.0, start)]
    visited: Set[str] = set()

    while heap:
        current_distance, u = heapq.heappop(heap)

        if u in visited:
            continue

        visited.add(u)

        if u == end:
            break

        for edge in graph.neighbors(u):
            v = edge.v.name
            if v in visited:
                continue
            new_distance = current_distance + edge.weight
            if new_distance < distances[v]:
                distances[v] = new_distance
                previous[v] = edge
                heapq.heappush(heap, (new_distance, v))

    path: List[Edge] = []
    current = end
    while current in previous:
        edge = previous[current]
        path.append(edge)
        current = edge.u.name

    path.reverse()
    return ShortestPathResult(edges=tuple(path), distance=distances.get(end, math.inf))
