"""Centralized configuration using Pydantic Settings.

Configuration can be overridden via environment variables:
- CITYMAP_GRAPH_SOURCE=csv
- CITYMAP_GRAPH_DATA_DIR=/path/to/data
- CITYMAP_GRAPH_DEDUPE_ROADS=true
- CITYMAP_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal, get_args

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LOG_LEVELS = get_args(LogLevel)


class GraphConfig(BaseSettings):
    """Graph data configuration.

    Environment variables prefixed with CITYMAP_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="CITYMAP_GRAPH_")

    source: Literal["bay_area", "csv"] = "bay_area"
    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent / "data"
    )
    cities_file: str = "cities.csv"
    roads_file: str = "roads.csv"
    dedupe_roads: bool = False

    @property
    def cities_path(self) -> Path:
        """Full path to the cities CSV file."""
        return self.data_dir / self.cities_file

    @property
    def roads_path(self) -> Path:
        """Full path to the roads CSV file."""
        return self.data_dir / self.roads_file


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with CITYMAP_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="CITYMAP_LOG_")

    level: LogLevel = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.graph.source)
        print(config.observability.level)

    Environment variables prefixed with CITYMAP_.
    """

    model_config = SettingsConfigDict(env_prefix="CITYMAP_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()
