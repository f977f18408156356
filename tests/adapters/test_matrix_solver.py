"""Tests for the matrix route solver adapter."""

import math

import pytest

from route_planner.adapters.graph import MatrixRouteSolver
from route_planner.domain.errors import LocationNotFoundError, NoRouteFoundError
from route_planner.graph.engine import ShortestPathEngine


@pytest.fixture
def engine():
    engine = ShortestPathEngine(["A", "B", "C", "Island"])
    engine.connect("A", "B", 2)
    engine.connect("B", "C", 3)
    engine.connect("A", "C", 9)
    return engine


def test_solve_returns_route(engine):
    route = MatrixRouteSolver().solve(engine, "A", "C")

    assert route.path == ("A", "B", "C")
    assert route.total_cost == 5
    assert route.num_stops == 3
    assert route.origin == "A"
    assert route.destination == "C"


def test_solve_logs_found_route(engine, caplog):
    with caplog.at_level("INFO", logger="route_planner.adapters.graph.matrix_solver"):
        MatrixRouteSolver().solve(engine, "A", "C")

    assert "Route found" in caplog.text


def test_solve_raises_for_unknown_location(engine):
    with pytest.raises(LocationNotFoundError):
        MatrixRouteSolver().solve(engine, "A", "Nowhere")


def test_solve_raises_when_unreachable(engine):
    with pytest.raises(NoRouteFoundError):
        MatrixRouteSolver().solve(engine, "A", "Island")


def test_solve_safe_returns_empty_result(engine):
    solver = MatrixRouteSolver()

    for destination in ("Island", "Nowhere"):
        route = solver.solve_safe(engine, "A", destination)
        assert route.is_empty
        assert math.isinf(route.total_cost)
