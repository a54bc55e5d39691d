"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- BayAreaGraphRepository: Serves the built-in Bay Area map
- CSVGraphRepository: Loads the graph from CSV files
- DijkstraPathSolver: Finds shortest paths using Dijkstra's algorithm
- PrimTreeSolver: Computes minimum spanning trees using Prim's algorithm
"""

from .bay_area_repository import BayAreaGraphRepository
from .csv_repository import CSVGraphRepository
from .dijkstra_solver import DijkstraPathSolver
from .prim_solver import PrimTreeSolver

__all__ = [
    "BayAreaGraphRepository",
    "CSVGraphRepository",
    "DijkstraPathSolver",
    "PrimTreeSolver",
]
