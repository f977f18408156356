"""Matrix route solver adapter.

This adapter wraps ShortestPathEngine.shortest_path and adds logging
plus a non-raising variant for callers that prefer an empty result.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ...domain.models import RouteResult
from ...graph.engine import ShortestPathEngine


@dataclass
class MatrixRouteSolver:
    """Route solver using the dense-matrix Dijkstra engine.

    This adapter implements RouteSolverPort.
    """

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def solve(
        self,
        engine: ShortestPathEngine,
        origin: str,
        destination: str,
    ) -> RouteResult:
        """Find the shortest path between two locations.

        Args:
            engine: The travel network.
            origin: Starting location name.
            destination: Target location name.

        Returns:
            RouteResult with path and total cost.

        Raises:
            LocationNotFoundError: If origin or destination is not in the graph.
            NoRouteFoundError: If no path exists.
        """
        route = engine.shortest_path(origin, destination)

        self._logger.info(
            "Route found",
            extra={
                "origin": origin,
                "destination": destination,
                "stops": route.num_stops,
                "total_cost": route.total_cost,
            },
        )
        return route

    def solve_safe(
        self,
        engine: ShortestPathEngine,
        origin: str,
        destination: str,
    ) -> RouteResult:
        """Find the shortest path, returning an empty result on failure."""
        return engine.shortest_path_safe(origin, destination)
