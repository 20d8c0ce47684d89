"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- AStarRouteSolver: Finds cheapest paths using the A* algorithm
"""

from .astar_solver import AStarRouteSolver

__all__ = ["AStarRouteSolver"]
