"""Property checks against brute-force enumeration on small graphs."""

import itertools
import math
import random

import pytest

from route_planner.config import DEMO_EDGES, DEMO_LOCATIONS
from route_planner.domain.errors import NoRouteFoundError
from route_planner.graph.engine import ShortestPathEngine


def build(locations, edges):
    engine = ShortestPathEngine(locations)
    for a, b, cost in edges:
        engine.connect(a, b, cost)
    return engine


def brute_force_cost(locations, edges, origin, destination):
    """Cheapest simple path cost by trying every path, or inf."""
    neighbours = {name: {} for name in locations}
    for a, b, cost in edges:
        neighbours[a][b] = cost
        neighbours[b][a] = cost

    best = math.inf
    stack = [(origin, 0, {origin})]
    while stack:
        node, cost, seen = stack.pop()
        if node == destination:
            best = min(best, cost)
            continue
        for nxt, weight in neighbours[node].items():
            if nxt not in seen:
                stack.append((nxt, cost + weight, seen | {nxt}))
    return best


def path_cost(engine, path):
    return sum(engine.cost(a, b) for a, b in zip(path, path[1:]))


def random_graph(seed, size=6, density=0.5):
    rng = random.Random(seed)
    locations = [f"L{i}" for i in range(size)]
    edges = [
        (a, b, rng.randint(1, 50))
        for a, b in itertools.combinations(locations, 2)
        if rng.random() < density
    ]
    return locations, edges


@pytest.fixture
def demo_engine():
    return build(DEMO_LOCATIONS, DEMO_EDGES)


def test_demo_boston_to_atlanta(demo_engine):
    route = demo_engine.shortest_path("Boston", "Atlanta")

    assert route.path == ("Boston", "Miami", "Dallas", "Atlanta")
    assert route.total_cost == 3130


def test_demo_matches_brute_force_for_every_pair(demo_engine):
    for origin, destination in itertools.product(DEMO_LOCATIONS, repeat=2):
        route = demo_engine.shortest_path(origin, destination)
        expected = brute_force_cost(DEMO_LOCATIONS, DEMO_EDGES, origin, destination)
        assert route.total_cost == expected


def test_demo_costs_are_symmetric(demo_engine):
    for origin, destination in itertools.combinations(DEMO_LOCATIONS, 2):
        there = demo_engine.shortest_path(origin, destination).total_cost
        back = demo_engine.shortest_path(destination, origin).total_cost
        assert there == back


def test_every_location_reaches_itself_at_zero_cost(demo_engine):
    for name in DEMO_LOCATIONS:
        route = demo_engine.shortest_path(name, name)
        assert route.path == (name,)
        assert route.total_cost == 0


@pytest.mark.parametrize("seed", range(20))
def test_random_graphs_match_brute_force(seed):
    locations, edges = random_graph(seed)
    engine = build(locations, edges)

    for origin, destination in itertools.combinations(locations, 2):
        expected = brute_force_cost(locations, edges, origin, destination)
        if math.isinf(expected):
            with pytest.raises(NoRouteFoundError):
                engine.shortest_path(origin, destination)
            continue

        route = engine.shortest_path(origin, destination)
        assert route.total_cost == expected
        assert route.path[0] == origin
        assert route.path[-1] == destination
        # the reported path really costs what the engine claims
        assert path_cost(engine, route.path) == route.total_cost
        assert len(set(route.path)) == len(route.path)


def test_unreachable_cost_is_never_zero_or_negative():
    engine = build(["A", "B", "C", "D"], [("A", "B", 1), ("C", "D", 1)])

    route = engine.shortest_path_safe("A", "D")

    assert route.total_cost > 0
    assert math.isinf(route.total_cost)
