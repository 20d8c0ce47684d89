"""Graph ports - Abstractions for graph reads and route solving.

These protocols define what the A* search needs from a graph and what a
route solver offers to its callers. ``WeightedGraph`` satisfies
``GraphPort`` structurally; any other container exposing the same
read-only operations can be searched too.
"""

from __future__ import annotations

from typing import (
    TYPE_CHECKING,
    AbstractSet,
    Callable,
    Hashable,
    Optional,
    Protocol,
    TypeVar,
)

if TYPE_CHECKING:
    from ..domain.models import PathResult, SearchResult

V = TypeVar("V", bound=Hashable)

# (vertex, goal) -> non-negative estimate of the remaining cost
Heuristic = Callable[[V, V], float]


class GraphPort(Protocol[V]):
    """Read-only view of a weighted undirected graph.

    Implementation: graph/weighted_graph.py (WeightedGraph)
    """

    def __contains__(self, vertex: object) -> bool:
        """Return True if the vertex is part of the graph."""
        ...

    def neighbors(self, vertex: V) -> AbstractSet[V]:
        """Return the vertices adjacent to ``vertex``."""
        ...

    def get_edge_weight(self, v: V, u: V) -> Optional[float]:
        """Return the weight of the edge between ``v`` and ``u``, if any."""
        ...


class RouteSolverPort(Protocol[V]):
    """Port for route computation.

    Implementation: adapters/graph/astar_solver.py (AStarRouteSolver)
    """

    def search(
        self,
        graph: GraphPort[V],
        start: V,
        goal: V,
        heuristic: Optional[Heuristic[V]] = None,
    ) -> SearchResult[V]:
        """Find the cheapest path, returning ``NotFound`` when there is none.

        Args:
            graph: The graph to search.
            start: Start vertex.
            goal: Goal vertex.
            heuristic: Optional override of the solver's heuristic.

        Returns:
            PathResult on success, NotFound otherwise.
        """
        ...

    def solve(
        self,
        graph: GraphPort[V],
        start: V,
        goal: V,
        heuristic: Optional[Heuristic[V]] = None,
    ) -> PathResult[V]:
        """Find the cheapest path, raising when there is none.

        Returns:
            PathResult with the path and its cost.
        """
        ...
