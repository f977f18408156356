"""Centralized configuration using Pydantic Settings.

This module is the single source of truth for the demo travel network,
console wording and logging setup.

Configuration can be overridden via environment variables:
- RP_GRAPH_LOCATIONS='["A", "B", "C"]'
- RP_GRAPH_EDGES='[["A", "B", 4], ["B", "C", 2.5]]'
- RP_CONSOLE_DISTANCE_UNIT=km
- RP_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from typing import List, Tuple, Union

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

Edge = Tuple[str, str, Union[int, float]]

DEMO_LOCATIONS: List[str] = ["Boston", "Seattle", "Denver", "Miami", "Dallas", "Atlanta"]

DEMO_EDGES: List[Edge] = [
    ("Boston", "Denver", 1950),
    ("Boston", "Miami", 1250),
    ("Seattle", "Denver", 1300),
    ("Seattle", "Dallas", 2100),
    ("Denver", "Miami", 1720),
    ("Denver", "Atlanta", 1400),
    ("Miami", "Dallas", 1100),
    ("Dallas", "Atlanta", 780),
    ("Seattle", "Boston", 2480),
]


class GraphConfig(BaseSettings):
    """Travel network definition.

    Environment variables prefixed with RP_GRAPH_. List values are
    given as JSON.
    """

    model_config = SettingsConfigDict(env_prefix="RP_GRAPH_")

    locations: List[str] = Field(default_factory=lambda: list(DEMO_LOCATIONS))
    edges: List[Edge] = Field(default_factory=lambda: list(DEMO_EDGES))


class ConsoleConfig(BaseSettings):
    """Interactive console wording.

    Environment variables prefixed with RP_CONSOLE_.
    """

    model_config = SettingsConfigDict(env_prefix="RP_CONSOLE_")

    distance_unit: str = "miles"
    start_prompt: str = "Enter start location: "
    destination_prompt: str = "Enter destination location: "


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with RP_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="RP_LOG_")

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

    Sub-configurations can be accessed via attributes:

        config = get_config()
        print(config.graph.locations)
        print(config.console.distance_unit)

    Environment variables prefixed with RP_.
    """

    model_config = SettingsConfigDict(env_prefix="RP_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    console: ConsoleConfig = Field(default_factory=ConsoleConfig)
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
