"""Heuristics for the A* search.

A heuristic is a ``(vertex, goal) -> estimate`` callable. The factories
below build admissible heuristics from vertex positions, as long as the
edge weights are at least the corresponding distance (for example road
lengths against straight-line distances). Vertices without a known
position estimate 0, which keeps the heuristic admissible.
"""

from __future__ import annotations

import math
from typing import Hashable, Mapping, Tuple, TypeVar

from geopy.distance import geodesic

from ..domain.models import GeoLocation
from ..ports.graph import Heuristic

V = TypeVar("V", bound=Hashable)

Point = Tuple[float, float]


def zero_heuristic(vertex: object, goal: object) -> float:
    """Constant zero estimate. A* with it behaves like Dijkstra."""
    return 0


def manhattan_heuristic(positions: Mapping[V, Point], scale: float = 1.0) -> Heuristic[V]:
    """Build a heuristic from the grid (L1) distance between positions."""

    def heuristic(vertex: V, goal: V) -> float:
        a = positions.get(vertex)
        b = positions.get(goal)
        if a is None or b is None:
            return 0.0
        return scale * (abs(a[0] - b[0]) + abs(a[1] - b[1]))

    return heuristic


def euclidean_heuristic(positions: Mapping[V, Point], scale: float = 1.0) -> Heuristic[V]:
    """Build a heuristic from the straight-line distance between positions."""

    def heuristic(vertex: V, goal: V) -> float:
        a = positions.get(vertex)
        b = positions.get(goal)
        if a is None or b is None:
            return 0.0
        return scale * math.hypot(a[0] - b[0], a[1] - b[1])

    return heuristic


def geodesic_heuristic(locations: Mapping[V, GeoLocation]) -> Heuristic[V]:
    """Build a heuristic from the geodesic distance in kilometres.

    Suitable when edge weights are travel distances in kilometres between
    places on Earth.
    """

    def heuristic(vertex: V, goal: V) -> float:
        a = locations.get(vertex)
        b = locations.get(goal)
        if a is None or b is None:
            return 0.0
        return geodesic(
            (a.latitude, a.longitude), (b.latitude, b.longitude)
        ).km

    return heuristic
