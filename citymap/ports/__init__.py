"""Ports layer - Abstract interfaces (Protocols) for the engine.

Ports define the contracts between the map service and the graph
adapters, so that data sources and solvers can be swapped in tests.
"""

from .graph import GraphRepositoryPort, ShortestPathSolverPort, SpanningTreeSolverPort

__all__ = [
    "GraphRepositoryPort",
    "ShortestPathSolverPort",
    "SpanningTreeSolverPort",
]
