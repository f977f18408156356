"""Typed domain errors for the route planner.

Lookups that the matrix cannot answer are reported through these
errors before any index is used, instead of degrading into an invalid
matrix access.

All errors inherit from RoutePlannerError and can optionally wrap a
root cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class RoutePlannerError(Exception):
    """Base error for the route planner domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class LocationNotFoundError(RoutePlannerError):
    """Location name is not part of the graph.

    Attributes:
        location: The name that was looked up
    """

    location: str = ""


@dataclass
class NoRouteFoundError(RoutePlannerError):
    """No path exists between the requested locations.

    Attributes:
        origin: Origin location name
        destination: Destination location name
    """

    origin: str = ""
    destination: str = ""


@dataclass
class DuplicateLocationError(RoutePlannerError):
    """The same location name was given twice at construction.

    Attributes:
        location: The repeated name
    """

    location: str = ""


@dataclass
class InvalidCostError(RoutePlannerError):
    """Edge cost is negative or not a finite number.

    Attributes:
        cost: The rejected value
    """

    cost: Optional[float] = None


@dataclass
class ConfigurationError(RoutePlannerError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
