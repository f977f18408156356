"""Interactive console entry point.

Prints the travel network, asks for an origin and a destination, and
prints the cheapest route between them.
"""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from .config import AppConfig, get_config
from .container import Container
from .domain.errors import ConfigurationError, LocationNotFoundError, NoRouteFoundError
from .io.console import InputFn, read_query, render_connections, render_route
from .logging_setup import configure_logging
from .services import RoutePlannerService


def main(
    input_fn: InputFn = input,
    output: Optional[TextIO] = None,
    config: Optional[AppConfig] = None,
) -> int:
    """Run one interactive query and return the process exit code."""
    out = output or sys.stdout
    config = config or get_config()
    configure_logging(config.observability)

    planner: RoutePlannerService = Container.create_default(config).resolve(
        RoutePlannerService
    )

    try:
        engine = planner.graph_repository.load()
    except ConfigurationError as e:
        print(f"Error: {e}", file=out)
        return 1

    out.write(render_connections(engine.locations, engine.connections()))

    try:
        origin, destination = read_query(
            input_fn,
            config.console.start_prompt,
            config.console.destination_prompt,
        )
    except EOFError:
        print("\nError: input ended before both locations were given", file=out)
        return 1
    except ValueError as e:
        print(f"Error: {e}", file=out)
        return 1

    try:
        route = planner.plan(origin, destination)
    except (LocationNotFoundError, NoRouteFoundError) as e:
        print(f"Error: {e}", file=out)
        return 1

    out.write(render_route(origin, destination, route, config.console.distance_unit))
    return 0


if __name__ == "__main__":
    sys.exit(main())
