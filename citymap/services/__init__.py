"""Services layer - Application orchestration.

Available services:
- MapService: Shortest-path and spanning-tree queries over the city map
"""

from .map_service import MapService, build_map_service

__all__ = ["MapService", "build_map_service"]
