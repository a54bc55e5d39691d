"""Typed domain errors for the city map engine.

The graph engine itself never raises: it returns empty or partial
results. These errors are raised by the adapters and services that
offer strict variants of the queries, and by graph loading.

All errors inherit from CityMapError and can optionally wrap a root
cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class CityMapError(Exception):
    """Base error for the city map domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class GraphLoadError(CityMapError):
    """Graph data could not be loaded.

    Attributes:
        file_path: Path to the data file if relevant
    """

    file_path: Optional[str] = None


@dataclass
class CityNotFoundError(CityMapError):
    """City name not present in the graph.

    Attributes:
        city: The name that was looked up
    """

    city: str = ""


@dataclass
class NoRouteFoundError(CityMapError):
    """No path exists between the requested cities."""

    start: str = ""
    end: str = ""


@dataclass
class ConfigurationError(CityMapError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
    """

    setting_name: str = ""
