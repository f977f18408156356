"""Shortest-path computation over a dense cost matrix.

The travel network is small and static: a fixed, ordered list of
location names and a symmetric N x N matrix of travel costs. Queries
run Dijkstra's algorithm with a linear scan for the closest unvisited
location, which is O(N^2) per query and only meant for small graphs.
"""

from __future__ import annotations

import logging
import math
import threading
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from ..domain.errors import (
    DuplicateLocationError,
    InvalidCostError,
    LocationNotFoundError,
    NoRouteFoundError,
)
from ..domain.models import UNREACHABLE, Connection, RouteResult

CostMatrix = Tuple[Tuple[float, ...], ...]


class ShortestPathEngine:
    """Undirected weighted graph of named locations.

    Parameters
    ----------
    locations:
        Unique location names. The position of a name in this sequence
        is its matrix index and never changes.

    Raises
    ------
    DuplicateLocationError
        If a name appears more than once.
    ValueError
        If a name is empty or not a string.
    """

    def __init__(self, locations: Iterable[str]) -> None:
        self._logger = logging.getLogger(__name__)
        self._lock = threading.RLock()

        names: List[str] = []
        index: Dict[str, int] = {}
        for name in locations:
            if not isinstance(name, str) or not name:
                raise ValueError(f"Location names must be non-empty strings, got {name!r}")
            if name in index:
                raise DuplicateLocationError(
                    f"Duplicate location: {name}",
                    location=name,
                )
            index[name] = len(names)
            names.append(name)

        self._locations: Tuple[str, ...] = tuple(names)
        self._index = index

        size = len(names)
        self._matrix: List[List[float]] = [[UNREACHABLE] * size for _ in range(size)]
        for i in range(size):
            self._matrix[i][i] = 0

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def __len__(self) -> int:
        return len(self._locations)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(locations={list(self._locations)!r})"

    @property
    def locations(self) -> Tuple[str, ...]:
        """Location names in index order."""
        return self._locations

    @property
    def size(self) -> int:
        return len(self._locations)

    def index_of(self, name: str) -> int:
        """Return the matrix index of ``name``.

        Raises
        ------
        LocationNotFoundError
            If ``name`` is not one of the graph's locations.
        """
        try:
            return self._index[name]
        except KeyError:
            raise LocationNotFoundError(
                f"Unknown location: {name}",
                location=name,
            ) from None

    def connect(self, from_name: str, to_name: str, cost: float) -> bool:
        """Set the travel cost between two locations in both directions.

        A later call for the same pair overwrites the earlier cost.

        Parameters
        ----------
        from_name, to_name:
            Endpoints of the edge.
        cost:
            Non-negative, finite travel cost.

        Returns
        -------
        bool
            ``True`` if the edge was stored. ``False`` if an endpoint is
            unknown or both endpoints are the same location; the matrix
            is left untouched in that case.

        Raises
        ------
        InvalidCostError
            If ``cost`` is negative, NaN or infinite.
        """
        if isinstance(cost, bool) or not isinstance(cost, (int, float)):
            raise InvalidCostError(f"Edge cost must be a number, got {cost!r}", cost=None)
        if not math.isfinite(cost) or cost < 0:
            raise InvalidCostError(
                f"Edge cost must be finite and non-negative, got {cost}",
                cost=cost,
            )

        from_idx = self._index.get(from_name)
        to_idx = self._index.get(to_name)
        if from_idx is None or to_idx is None:
            self._logger.warning(
                "Ignoring edge with unknown endpoint",
                extra={"from_location": from_name, "to_location": to_name},
            )
            return False
        if from_idx == to_idx:
            self._logger.warning(
                "Ignoring self-loop",
                extra={"from_location": from_name},
            )
            return False

        with self._lock:
            self._matrix[from_idx][to_idx] = cost
            self._matrix[to_idx][from_idx] = cost
        return True

    def cost(self, from_name: str, to_name: str) -> float:
        """Direct edge cost between two locations, or ``UNREACHABLE``."""
        return self._matrix[self.index_of(from_name)][self.index_of(to_name)]

    def snapshot(self) -> CostMatrix:
        """Return an immutable copy of the cost matrix."""
        with self._lock:
            return tuple(tuple(row) for row in self._matrix)

    def connections(self) -> List[Connection]:
        """List every finite matrix entry, row by row in index order.

        The diagonal is included, so every location lists itself with
        a cost of 0 ahead of or among its neighbours.
        """
        matrix = self.snapshot()
        return [
            Connection(location=name, neighbor=self._locations[j], cost=matrix[i][j])
            for i, name in enumerate(self._locations)
            for j in range(len(self._locations))
            if matrix[i][j] < UNREACHABLE
        ]

    def shortest_path(self, origin: str, destination: str) -> RouteResult:
        """Compute the cheapest route between two locations.

        Parameters
        ----------
        origin:
            Name of the starting location.
        destination:
            Name of the target location.

        Returns
        -------
        RouteResult
            The location names from ``origin`` to ``destination``
            (inclusive) and the total cost.

        Raises
        ------
        LocationNotFoundError
            If either name is not in the graph.
        NoRouteFoundError
            If ``destination`` cannot be reached from ``origin``.
        """
        start = self.index_of(origin)
        end = self.index_of(destination)

        self._logger.debug(
            "Computing shortest path",
            extra={"origin": origin, "destination": destination},
        )

        dist, parent = _relax_all(self.snapshot(), start)

        if dist[end] == UNREACHABLE:
            self._logger.warning(
                "No route found",
                extra={"origin": origin, "destination": destination},
            )
            raise NoRouteFoundError(
                f"No path from {origin} to {destination}",
                origin=origin,
                destination=destination,
            )

        path: List[str] = []
        at: Optional[int] = end
        while at is not None:
            path.append(self._locations[at])
            at = parent[at]
        path.reverse()

        return RouteResult(path=tuple(path), total_cost=dist[end])

    def shortest_path_safe(self, origin: str, destination: str) -> RouteResult:
        """Like shortest_path(), but returns an empty result on failure."""
        if origin not in self._index or destination not in self._index:
            return RouteResult.unreachable()
        try:
            return self.shortest_path(origin, destination)
        except NoRouteFoundError:
            return RouteResult.unreachable()


def _closest_unvisited(dist: Sequence[float], visited: Sequence[bool]) -> Optional[int]:
    # strict < keeps the lowest index on ties and skips unreached nodes
    best = UNREACHABLE
    best_idx: Optional[int] = None
    for i, d in enumerate(dist):
        if not visited[i] and d < best:
            best = d
            best_idx = i
    return best_idx


def _relax_all(
    matrix: CostMatrix, start: int
) -> Tuple[List[float], List[Optional[int]]]:
    """Run the relaxation loop from ``start`` over a matrix snapshot."""
    size = len(matrix)
    dist: List[float] = [UNREACHABLE] * size
    parent: List[Optional[int]] = [None] * size
    visited = [False] * size
    dist[start] = 0

    for _ in range(size - 1):
        current = _closest_unvisited(dist, visited)
        if current is None:
            break

        visited[current] = True
        row = matrix[current]
        for neighbor in range(size):
            weight = row[neighbor]
            if visited[neighbor] or weight == UNREACHABLE:
                continue
            candidate = dist[current] + weight
            if candidate < dist[neighbor]:
                dist[neighbor] = candidate
                parent[neighbor] = current

    return dist, parent
