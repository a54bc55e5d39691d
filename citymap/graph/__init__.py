"""Graph engine for the city map.

This subpackage contains the insert-only city graph store and the
path-finding and spanning-tree algorithms that run on top of it.
"""

from .bay_area import build_bay_area_map
from .dijkstra import dijkstra
from .prim import prim
from .store import CityGraph

__all__ = ["CityGraph", "dijkstra", "prim", "build_bay_area_map"]
