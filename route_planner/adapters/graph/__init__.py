"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- DemoGraphRepository: Builds the graph from configuration
- MatrixRouteSolver: Finds shortest paths over the cost matrix
"""

from .demo_repository import DemoGraphRepository
from .matrix_solver import MatrixRouteSolver

__all__ = ["DemoGraphRepository", "MatrixRouteSolver"]
