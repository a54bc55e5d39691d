"""Minimum spanning tree computation using Prim's algorithm."""

from __future__ import annotations

import heapq
import itertools
from typing import TYPE_CHECKING, List, Optional, Set, Tuple

from ..domain.models import Edge, SpanningTreeResult

if TYPE_CHECKING:
    from .store import CityGraph


def prim(graph: CityGraph, root: Optional[str] = None) -> SpanningTreeResult:
    """Grow a minimum spanning tree from ``root``.

    Parameters
    ----------
    graph:
        City graph to span.
    root:
        City to start from. Defaults to the lexicographically first
        city name, so the result is deterministic.

    Returns
    -------
    SpanningTreeResult
        Tree edges in insertion order and their total weight. On a
        disconnected graph only the root's component is spanned; on an
        empty graph, or with an unknown root, the tree is empty.
    """
    names = graph.city_names()
    if not names:
        return SpanningTreeResult()

    if root is None:
        root = names[0]
    elif root not in graph:
        return SpanningTreeResult(root=root)

    tree: List[Edge] = []
    total_weight = 0.0
    visited: Set[str] = {root}

    # The counter breaks weight ties without comparing Edge objects.
    counter = itertools.count()
    heap: List[Tuple[float, int, Edge]] = []
    for edge in graph.neighbors(root):
        heapq.heappush(heap, (edge.weight, next(counter), edge))

    while heap and len(visited) < len(graph):
        weight, _, edge = heapq.heappop(heap)
        neighbor = edge.v.name
        if neighbor in visited:
            continue

        visited.add(neighbor)
        tree.append(edge)
        total_weight += weight

        for next_edge in graph.neighbors(neighbor):
            if next_edge.v.name not in visited:
                heapq.heappush(heap, (next_edge.weight, next(counter), next_edge))

    return SpanningTreeResult(edges=tuple(tree), total_weight=total_weight, root=root)
