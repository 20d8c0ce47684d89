"""Weighted undirected graphs and A* shortest-path search.

The package is split the same way as the rest of the project:

- ``domain``: typed errors and immutable result models
- ``graph``: the graph container, the A* search and heuristics
- ``ports``: protocols the search and solvers are written against
- ``adapters``: configured, logging entry points built on the core

Typical use:

    graph = WeightedGraph()
    for v in (1, 2, 3):
        graph.add_vertex(v)
    graph.add_edge(1, 2, 10)
    graph.add_edge(2, 3, 5)

    result = AStarRouteSolver().search(graph, 1, 3)
    if result.found:
        print(result.path, result.cost)
"""

from .adapters.graph import AStarRouteSolver
from .domain import (
    DuplicateVertexError,
    NotFound,
    PathResult,
    UnknownVertexError,
)
from .graph import WeightedGraph, astar, zero_heuristic

__all__ = [
    "AStarRouteSolver",
    "DuplicateVertexError",
    "NotFound",
    "PathResult",
    "UnknownVertexError",
    "WeightedGraph",
    "astar",
    "zero_heuristic",
]
