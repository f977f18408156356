"""Demo graph repository adapter.

Builds the travel network from the configured location list and edge
triples, and caches the resulting engine.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Sequence

from ...config import GraphConfig, get_config
from ...domain.errors import (
    ConfigurationError,
    DuplicateLocationError,
    InvalidCostError,
)
from ...graph.engine import ShortestPathEngine


@dataclass
class DemoGraphRepository:
    """Graph repository backed by configuration.

    This adapter implements GraphRepositoryPort.

    Attributes:
        config: Graph configuration (locations and edges)
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached data
    _engine: Optional[ShortestPathEngine] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self) -> ShortestPathEngine:
        """Build the travel network from configuration.

        Returns:
            The engine holding every configured location and edge.

        Raises:
            ConfigurationError: If the configured graph is inconsistent.
        """
        if self._engine is not None:
            return self._engine

        try:
            engine = ShortestPathEngine(self.config.locations)
        except (DuplicateLocationError, ValueError) as e:
            raise ConfigurationError(
                "Invalid location list",
                setting_name="locations",
                expected_type="unique non-empty names",
                cause=e,
            )

        for from_name, to_name, cost in self.config.edges:
            try:
                stored = engine.connect(from_name, to_name, cost)
            except InvalidCostError as e:
                raise ConfigurationError(
                    f"Invalid edge {from_name} - {to_name}",
                    setting_name="edges",
                    expected_type="non-negative finite cost",
                    cause=e,
                )
            if not stored:
                raise ConfigurationError(
                    f"Edge {from_name} - {to_name} must join two different configured locations",
                    setting_name="edges",
                )

        self._engine = engine
        self._logger.info(
            "Graph loaded",
            extra={"nodes": engine.size, "edges": len(self.config.edges)},
        )
        return engine

    def list_locations(self) -> Sequence[str]:
        """List all location names in index order."""
        return list(self.load().locations)

    def clear_cache(self) -> None:
        """Drop the cached engine so the next load() rebuilds it."""
        self._engine = None
        self._logger.debug("Graph cache cleared")
