"""Graph ports - Abstractions for graph loading and routing.

These protocols define the contracts for building the travel network
and computing shortest paths over it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import RouteResult
    from ..graph.engine import ShortestPathEngine


class GraphRepositoryPort(Protocol):
    """Port for obtaining the travel network.

    Implementation: adapters/graph/demo_repository.py

    The repository is responsible for building and caching the engine
    that holds the locations and their connections.
    """

    def load(self) -> ShortestPathEngine:
        """Build (or return the cached) travel network.

        Returns:
            An engine holding every location and edge.
        """
        ...

    def list_locations(self) -> Sequence[str]:
        """List all location names in index order."""
        ...


class RouteSolverPort(Protocol):
    """Port for route computation.

    Implementation: adapters/graph/matrix_solver.py
    """

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
        """
        ...
