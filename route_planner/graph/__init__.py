"""Graph representation and path-finding for the travel network.

This subpackage holds the dense cost-matrix engine used to answer
shortest-path queries between named locations.
"""

from .engine import CostMatrix, ShortestPathEngine

__all__ = ["CostMatrix", "ShortestPathEngine"]
