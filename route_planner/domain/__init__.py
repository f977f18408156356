"""Domain layer - Core result models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    DuplicateLocationError,
    InvalidCostError,
    LocationNotFoundError,
    NoRouteFoundError,
    RoutePlannerError,
)
from .models import UNREACHABLE, Connection, RouteResult

__all__ = [
    # Models
    "UNREACHABLE",
    "Connection",
    "RouteResult",
    # Errors
    "RoutePlannerError",
    "LocationNotFoundError",
    "NoRouteFoundError",
    "DuplicateLocationError",
    "InvalidCostError",
    "ConfigurationError",
]
