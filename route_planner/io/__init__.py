"""Input/output helpers for the interactive console."""

from .console import format_cost, read_query, render_connections, render_route

__all__ = ["format_cost", "read_query", "render_connections", "render_route"]
