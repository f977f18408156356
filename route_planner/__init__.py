"""Top-level package for the route planner.

Computes cheapest routes between named locations of a small, static,
undirected travel network held in a dense cost matrix.
"""

from .domain import (
    UNREACHABLE,
    Connection,
    DuplicateLocationError,
    InvalidCostError,
    LocationNotFoundError,
    NoRouteFoundError,
    RoutePlannerError,
    RouteResult,
)
from .graph import ShortestPathEngine

__all__ = [
    "UNREACHABLE",
    "Connection",
    "RouteResult",
    "ShortestPathEngine",
    "RoutePlannerError",
    "LocationNotFoundError",
    "NoRouteFoundError",
    "DuplicateLocationError",
    "InvalidCostError",
]
