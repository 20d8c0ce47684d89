"""A* Route Solver adapter.

This adapter wraps graph/astar.py and adds:
- Configuration injection (tie-break and stale-entry policy)
- A default heuristic per solver
- Logging
- An exception-raising variant for callers who treat "no route" as an error
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Hashable, Optional, TypeVar

from ...config import SearchConfig, get_config
from ...domain.errors import NoRouteFoundError
from ...domain.models import PathResult, SearchResult
from ...graph.astar import astar
from ...graph.heuristics import zero_heuristic
from ...ports.graph import GraphPort, Heuristic

V = TypeVar("V", bound=Hashable)


@dataclass
class AStarRouteSolver:
    """Route solver using the A* algorithm.

    This adapter implements RouteSolverPort.

    Attributes:
        config: Search configuration (tie-break, stale entries)
        heuristic: Heuristic used when a call doesn't pass its own
    """

    config: SearchConfig = field(default_factory=lambda: get_config().search)
    heuristic: Heuristic[Any] = zero_heuristic
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def search(
        self,
        graph: GraphPort[V],
        start: V,
        goal: V,
        heuristic: Optional[Heuristic[V]] = None,
    ) -> SearchResult[V]:
        """Find the cheapest path between two vertices.

        Args:
            graph: The graph to search.
            start: Start vertex.
            goal: Goal vertex.
            heuristic: Optional override of the solver's heuristic.

        Returns:
            PathResult with the path and its cost, or NotFound if the goal
            is unreachable.

        Raises:
            UnknownVertexError: If start or goal is not in the graph.
        """
        self._logger.debug(
            "Searching route",
            extra={"start": start, "goal": goal, "tie_break": self.config.tie_break},
        )

        result = astar(
            graph,
            start,
            goal,
            heuristic or self.heuristic,
            tie_break=self.config.tie_break,
            skip_stale=self.config.skip_stale_entries,
        )

        if not result.found:
            self._logger.warning(
                "No route found",
                extra={"start": start, "goal": goal, "expanded": result.expanded},
            )
            return result

        self._logger.info(
            "Route found",
            extra={
                "start": start,
                "goal": goal,
                "stops": result.num_stops,
                "cost": result.cost,
                "expanded": result.expanded,
            },
        )
        return result

    def solve(
        self,
        graph: GraphPort[V],
        start: V,
        goal: V,
        heuristic: Optional[Heuristic[V]] = None,
    ) -> PathResult[V]:
        """Find the cheapest path, raising if there is none.

        Like search(), but an unreachable goal is reported as an error.

        Raises:
            UnknownVertexError: If start or goal is not in the graph.
            NoRouteFoundError: If no path exists.
        """
        result = self.search(graph, start, goal, heuristic)
        if not isinstance(result, PathResult):
            raise NoRouteFoundError(
                f"No path from {start!r} to {goal!r}",
                start=start,
                goal=goal,
            )
        return result
