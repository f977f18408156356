"""Services layer - Application orchestration.

Available services:
- RoutePlannerService: Plans routes over the configured travel network
"""

from .route_planner import RoutePlannerService

__all__ = ["RoutePlannerService"]
