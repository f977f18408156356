"""Console rendering and input for the interactive route planner."""

from __future__ import annotations

from itertools import groupby
from typing import Callable, Iterable, List, Tuple

from ..domain.models import Connection, RouteResult

InputFn = Callable[[str], str]


def format_cost(cost: float) -> str:
    """Render a cost, dropping the fraction of whole floats."""
    if isinstance(cost, float) and cost.is_integer():
        return str(int(cost))
    return str(cost)


def render_connections(locations: Iterable[str], connections: Iterable[Connection]) -> str:
    """Render the connection listing, one line per location.

    Locations without any entry still get a line of their own.
    """
    by_location = {
        name: list(entries)
        for name, entries in groupby(connections, key=lambda c: c.location)
    }
    lines: List[str] = ["Travel Map Connections:"]
    for name in locations:
        cells = "".join(
            f"{c.neighbor}({format_cost(c.cost)}) " for c in by_location.get(name, [])
        )
        lines.append(f"{name}: {cells}")
    return "\n".join(lines) + "\n\n"


def render_route(origin: str, destination: str, route: RouteResult, unit: str) -> str:
    path = "".join(f"{name} -> " for name in route.path)
    return (
        f"Shortest path from {origin} to {destination}:\n"
        f"{path}\n"
        f"Total travel cost: {format_cost(route.total_cost)} {unit}\n"
    )


def _first_token(raw: str) -> str:
    tokens = raw.split()
    if not tokens:
        raise ValueError("Expected a location name")
    return tokens[0]


def read_query(
    input_fn: InputFn,
    start_prompt: str,
    destination_prompt: str,
) -> Tuple[str, str]:
    """Prompt for the origin and destination names.

    Only the first whitespace-delimited token of each answer is used.

    Raises:
        ValueError: If an answer is blank.
        EOFError: If input ends before both names are read.
    """
    origin = _first_token(input_fn(start_prompt))
    destination = _first_token(input_fn(destination_prompt))
    return origin, destination
