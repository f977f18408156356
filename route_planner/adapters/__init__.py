"""Adapters layer - Concrete implementations of the ports."""

from .graph import DemoGraphRepository, MatrixRouteSolver

__all__ = ["DemoGraphRepository", "MatrixRouteSolver"]
