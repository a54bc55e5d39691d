"""Prim minimum spanning tree solver adapter."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ...domain.models import SpanningTreeResult
from ...graph.prim import prim
from ...graph.store import CityGraph


@dataclass
class PrimTreeSolver:
    """Minimum spanning tree solver using Prim's algorithm.

    Implements SpanningTreeSolverPort. The tree is rooted at the
    lexicographically first city. A disconnected graph yields a tree
    over the root's component only; this is logged, not raised.
    """

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def solve(self, graph: CityGraph) -> SpanningTreeResult:
        result = prim(graph)

        if len(result.cities) < len(graph):
            self._logger.warning(
                "Spanning tree does not reach every city",
                extra={
                    "root": result.root,
                    "reached": len(result.cities),
                    "cities": len(graph),
                },
            )

        self._logger.info(
            "Spanning tree computed",
            extra={"roads": result.num_edges, "total_weight": result.total_weight},
        )
        return result
