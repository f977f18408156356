"""Route planner service - Main orchestrator.

Ties the graph repository and the route solver together for the
console front-end and for library callers.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from ..domain.errors import LocationNotFoundError, NoRouteFoundError
from ..domain.models import Connection, RouteResult
from ..ports.graph import GraphRepositoryPort, RouteSolverPort


@dataclass
class RoutePlannerService:
    """Main service for planning routes between locations.

    Attributes:
        graph_repository: Builds the travel network
        route_solver: Computes shortest paths
    """

    graph_repository: GraphRepositoryPort
    route_solver: RouteSolverPort

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def connections(self) -> List[Connection]:
        """Return the connection listing of the loaded graph."""
        return self.graph_repository.load().connections()

    def plan(self, origin: str, destination: str) -> RouteResult:
        """Plan the cheapest route from ``origin`` to ``destination``.

        Args:
            origin: Starting location name.
            destination: Target location name.

        Returns:
            RouteResult with the computed route.

        Raises:
            LocationNotFoundError: If either name is not in the graph.
            NoRouteFoundError: If no path exists between the locations.
            ConfigurationError: If the configured graph is invalid.
        """
        self._logger.debug(
            "Planning route",
            extra={"origin": origin, "destination": destination},
        )
        engine = self.graph_repository.load()
        return self.route_solver.solve(engine, origin, destination)

    def plan_safe(
        self, origin: str, destination: str
    ) -> Tuple[Optional[RouteResult], Optional[str]]:
        """Plan a route, returning an error message instead of raising.

        Returns:
            Tuple of (RouteResult or None, error message or None).
        """
        try:
            return self.plan(origin, destination), None
        except LocationNotFoundError as e:
            return None, f"Unknown location: {e.location}"
        except NoRouteFoundError as e:
            return None, f"No path found between {e.origin} and {e.destination}"
