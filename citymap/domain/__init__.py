"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the engine. No external dependencies.
"""

from .errors import (
    CityMapError,
    CityNotFoundError,
    ConfigurationError,
    GraphLoadError,
    NoRouteFoundError,
)
from .models import Edge, Node, ShortestPathResult, SpanningTreeResult

__all__ = [
    # Models
    "Node",
    "Edge",
    "ShortestPathResult",
    "SpanningTreeResult",
    # Errors
    "CityMapError",
    "GraphLoadError",
    "CityNotFoundError",
    "NoRouteFoundError",
    "ConfigurationError",
]
