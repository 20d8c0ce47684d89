"""Shortest-path computation using the A* algorithm.

The search is a best-first expansion ordered by ``cost so far +
heuristic(vertex, goal)``. With an admissible heuristic (one that never
overestimates the remaining cost) the returned path is a cheapest one.
Admissibility is not checked: an overestimating heuristic silently
returns a possibly more expensive path.

All bookkeeping (frontier, predecessors, costs) is local to one call.
"""

from __future__ import annotations

import heapq
import itertools
import logging
from typing import (
    Dict,
    Hashable,
    Iterator,
    List,
    Mapping,
    Optional,
    Sequence,
    Tuple,
    TypeVar,
)

from ..domain.errors import ConfigurationError, MissingEdgeError, UnknownVertexError
from ..domain.models import FrontierEntry, NotFound, PathResult, SearchResult
from ..ports.graph import GraphPort, Heuristic
from .heuristics import zero_heuristic

V = TypeVar("V", bound=Hashable)

logger = logging.getLogger(__name__)

TIE_BREAKS = ("fifo", "lifo")


def _sequence(tie_break: str) -> Iterator[int]:
    """Counter deciding the order of entries with equal priority."""
    if tie_break == "fifo":
        return itertools.count()
    if tie_break == "lifo":
        return itertools.count(0, -1)
    raise ConfigurationError(
        f"Unsupported tie-break policy: {tie_break!r}",
        setting_name="tie_break",
        expected_type=" | ".join(TIE_BREAKS),
    )


def astar(
    graph: GraphPort[V],
    start: V,
    goal: V,
    heuristic: Heuristic[V] = zero_heuristic,
    *,
    tie_break: str = "fifo",
    skip_stale: bool = True,
) -> SearchResult[V]:
    """Find the cheapest path from ``start`` to ``goal``.

    Parameters
    ----------
    graph:
        Graph to search. It is only read, never modified.
    start:
        Identifier of the start vertex.
    goal:
        Identifier of the goal vertex.
    heuristic:
        ``(vertex, goal) -> estimate`` of the remaining cost. Defaults to
        the constant zero, which turns the search into Dijkstra.
    tie_break:
        ``"fifo"`` pops entries of equal priority in insertion order,
        ``"lifo"`` in reverse insertion order. This decides which of
        several equally cheap paths is returned.
    skip_stale:
        Skip frontier entries whose cost was improved after they were
        pushed. Disabling it re-expands them; the result is the same but
        more vertices are expanded.

    Returns
    -------
    PathResult or NotFound
        The path from ``start`` to ``goal`` (inclusive) and its cost, or
        ``NotFound`` if the goal is unreachable.

    Raises
    ------
    UnknownVertexError
        If ``start`` or ``goal`` is not in the graph.
    ConfigurationError
        If ``tie_break`` is not a supported policy.
    """
    if start not in graph:
        raise UnknownVertexError(f"Start vertex not in graph: {start!r}", vertex=start)
    if goal not in graph:
        raise UnknownVertexError(f"Goal vertex not in graph: {goal!r}", vertex=goal)

    sequence = _sequence(tie_break)
    frontier: List[FrontierEntry] = [FrontierEntry(0, next(sequence), start, 0)]
    came_from: Dict[V, Optional[V]] = {start: None}
    cost_so_far: Dict[V, float] = {start: 0}
    expanded = 0
    stale = 0

    while frontier:
        entry = heapq.heappop(frontier)
        current = entry.vertex

        # Skip outdated entries
        if skip_stale and entry.cost > cost_so_far[current]:
            stale += 1
            continue

        expanded += 1

        if current == goal:
            logger.debug(
                "A* reached goal",
                extra={"expanded": expanded, "stale_skipped": stale},
            )
            return PathResult(
                path=reconstruct_path(came_from, current),
                cost=cost_so_far[current],
                expanded=expanded,
            )

        for neighbor in graph.neighbors(current):
            new_cost = cost_so_far[current] + graph.get_edge_weight(current, neighbor)
            if neighbor not in cost_so_far or new_cost < cost_so_far[neighbor]:
                cost_so_far[neighbor] = new_cost
                came_from[neighbor] = current
                priority = new_cost + heuristic(neighbor, goal)
                heapq.heappush(
                    frontier,
                    FrontierEntry(priority, next(sequence), neighbor, new_cost),
                )

    logger.debug(
        "A* frontier exhausted",
        extra={"expanded": expanded, "stale_skipped": stale},
    )
    return NotFound(start=start, goal=goal, expanded=expanded)


def reconstruct_path(came_from: Mapping[V, Optional[V]], goal: V) -> Tuple[V, ...]:
    """Walk predecessors back from ``goal`` to the start.

    The start is the vertex whose predecessor is None.

    Returns:
        Vertices from start to goal, both inclusive.
    """
    path: List[V] = []
    current: Optional[V] = goal
    while current is not None:
        path.append(current)
        current = came_from[current]
    path.reverse()
    return tuple(path)


def path_cost(graph: GraphPort[V], path: Sequence[V]) -> float:
    """Sum the edge weights along ``path``.

    Empty and single-vertex paths cost 0.

    Raises:
        MissingEdgeError: If two consecutive vertices are not adjacent.
    """
    total: float = 0
    for v, u in zip(path, path[1:]):
        weight = graph.get_edge_weight(v, u)
        if weight is None:
            raise MissingEdgeError(
                f"No edge between {v!r} and {u!r}", source=v, target=u
            )
        total += weight
    return total
