"""Graph container, A* search and heuristics.

This subpackage contains the in-memory weighted undirected graph and
the path-finding algorithm that runs on top of it.
"""

from .astar import astar, path_cost, reconstruct_path
from .heuristics import (
    euclidean_heuristic,
    geodesic_heuristic,
    manhattan_heuristic,
    zero_heuristic,
)
from .weighted_graph import WeightedGraph, edge_key

__all__ = [
    "WeightedGraph",
    "edge_key",
    "astar",
    "path_cost",
    "reconstruct_path",
    "zero_heuristic",
    "manhattan_heuristic",
    "euclidean_heuristic",
    "geodesic_heuristic",
]
