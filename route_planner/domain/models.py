"""Immutable domain models for the route planner.

All models are frozen dataclasses with slots. They carry no behaviour
beyond a few convenience properties and have no external dependencies.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

# Distance of a location that has not been reached (yet).
UNREACHABLE = math.inf


@dataclass(frozen=True, slots=True)
class Connection:
    """One finite entry of the cost matrix, seen from ``location``.

    Attributes:
        location: Location the row belongs to
        neighbor: Location at the other end of the edge
        cost: Travel cost between the two
    """

    location: str
    neighbor: str
    cost: float


@dataclass(frozen=True, slots=True)
class RouteResult:
    """Result of a shortest-path query.

    Attributes:
        path: Ordered tuple of location names from origin to destination
        total_cost: Sum of the edge costs along ``path``
    """

    path: tuple[str, ...]
    total_cost: float

    @classmethod
    def unreachable(cls) -> RouteResult:
        """Return the empty result used when no route exists."""
        return cls(path=(), total_cost=UNREACHABLE)

    @property
    def is_empty(self) -> bool:
        """Check if no route was found."""
        return len(self.path) == 0

    @property
    def is_reachable(self) -> bool:
        return not self.is_empty and math.isfinite(self.total_cost)

    @property
    def num_stops(self) -> int:
        """Return the number of locations on the route."""
        return len(self.path)

    @property
    def origin(self) -> str | None:
        return self.path[0] if self.path else None

    @property
    def destination(self) -> str | None:
        return self.path[-1] if self.path else None
