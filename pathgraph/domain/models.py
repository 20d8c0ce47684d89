"""Immutable models produced and consumed by the path search.

All models are frozen dataclasses with slots. They carry no behavior
beyond convenience properties and have no external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, Hashable, Tuple, TypeVar, Union

V = TypeVar("V", bound=Hashable)


@dataclass(frozen=True, slots=True)
class GeoLocation:
    """GPS coordinates representing a geographic location."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        """Validate coordinate ranges."""
        if not -90 <= self.latitude <= 90:
            raise ValueError(
                f"Latitude must be between -90 and 90, got {self.latitude}"
            )
        if not -180 <= self.longitude <= 180:
            raise ValueError(
                f"Longitude must be between -180 and 180, got {self.longitude}"
            )


@dataclass(frozen=True, slots=True, order=True)
class FrontierEntry:
    """A vertex waiting in the A* frontier.

    Entries compare on ``(priority, sequence)`` only, so vertices never
    need to be orderable.

    Attributes:
        priority: Cost so far plus the heuristic estimate to the goal
        sequence: Tie-break counter for entries of equal priority
        vertex: The vertex to expand
        cost: Cost so far when the entry was pushed
    """

    priority: float
    sequence: int
    vertex: Any = field(compare=False)
    cost: float = field(compare=False)


@dataclass(frozen=True, slots=True)
class PathResult(Generic[V]):
    """A path found by the search.

    Attributes:
        path: Vertices from start to goal, both inclusive
        cost: Sum of the edge weights along the path
        expanded: Number of frontier pops that were not skipped as stale,
            including the final pop of the goal
    """

    path: Tuple[V, ...]
    cost: float
    expanded: int = 0

    @property
    def found(self) -> bool:
        return True

    @property
    def start(self) -> V:
        """Return the first vertex of the path."""
        return self.path[0]

    @property
    def goal(self) -> V:
        """Return the last vertex of the path."""
        return self.path[-1]

    @property
    def num_stops(self) -> int:
        """Return the number of vertices on the path."""
        return len(self.path)


@dataclass(frozen=True, slots=True)
class NotFound(Generic[V]):
    """The frontier was exhausted before reaching the goal.

    Attributes:
        start: Start vertex of the search
        goal: Goal vertex that could not be reached
        expanded: Number of frontier pops that were not skipped as stale
    """

    start: V
    goal: V
    expanded: int = 0

    @property
    def found(self) -> bool:
        return False


SearchResult = Union[PathResult[V], NotFound[V]]
