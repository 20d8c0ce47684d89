"""Weighted undirected graph container.

Vertices are any hashable values. Each vertex owns a neighbor set and
every undirected edge stores its weight once, under a canonical key for
the unordered pair, so ``get_edge_weight(v, u) == get_edge_weight(u, v)``.

The container is not thread-safe. Concurrent reads of a graph that is no
longer being mutated are fine; mutating it while another thread reads or
searches it is undefined.
"""

from __future__ import annotations

from typing import (
    Dict,
    FrozenSet,
    Generic,
    Hashable,
    Iterator,
    Optional,
    Set,
    Tuple,
    TypeVar,
    Union,
)

from ..domain.errors import DuplicateVertexError, UnknownVertexError

V = TypeVar("V", bound=Hashable)
W = TypeVar("W")

EdgeKey = Union[Tuple[V, V], FrozenSet[V]]


def edge_key(v: V, u: V) -> EdgeKey:
    """Return the canonical key of the unordered pair ``{v, u}``.

    Comparable vertices give a sorted tuple. Vertices that only support
    equality and hashing, that are not totally ordered, or whose ordering
    raises (such as ``Decimal("NaN")``) fall back to a frozenset.
    """
    try:
        if v <= u:  # type: ignore[operator]
            return (v, u)
        if u <= v:  # type: ignore[operator]
            return (u, v)
    except Exception:
        pass
    return frozenset((v, u))


class WeightedGraph(Generic[V, W]):
    """Undirected graph with a weight on every edge.

    Example:
        graph = WeightedGraph[int, int]()
        graph.add_vertex(1)
        graph.add_vertex(2)
        graph.add_edge(1, 2, 10)
        graph.get_edge_weight(2, 1)  # 10
    """

    def __init__(self) -> None:
        self._adjacency: Dict[V, Set[V]] = {}
        self._weights: Dict[EdgeKey, W] = {}

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(vertices={len(self._adjacency)}, "
            f"edges={len(self._weights)})"
        )

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._adjacency

    def __len__(self) -> int:
        return len(self._adjacency)

    def __iter__(self) -> Iterator[V]:
        return iter(self._adjacency)

    def _require(self, vertex: V) -> Set[V]:
        try:
            return self._adjacency[vertex]
        except KeyError:
            raise UnknownVertexError(
                f"Vertex doesn't exist: {vertex!r}", vertex=vertex
            ) from None

    # --- Mutation ------------------------------------------------------------

    def add_vertex(self, vertex: V) -> None:
        """Add a vertex with no neighbors.

        Raises:
            DuplicateVertexError: If the vertex already exists.
        """
        if vertex in self._adjacency:
            raise DuplicateVertexError(
                f"Vertex already exists: {vertex!r}", vertex=vertex
            )
        self._adjacency[vertex] = set()

    def remove_vertex(self, vertex: V) -> None:
        """Remove a vertex together with every edge touching it.

        Raises:
            UnknownVertexError: If the vertex doesn't exist.
        """
        neighbors = self._require(vertex)
        keys = {other: edge_key(vertex, other) for other in neighbors}
        for other, key in keys.items():
            self._adjacency[other].discard(vertex)
            self._weights.pop(key, None)
        del self._adjacency[vertex]

    def add_edge(self, v: V, u: V, weight: W) -> None:
        """Connect ``v`` and ``u`` in both directions.

        Adding an edge that already exists replaces its weight.

        Raises:
            UnknownVertexError: If either endpoint doesn't exist.
        """
        v_neighbors = self._require(v)
        u_neighbors = self._require(u)
        key = edge_key(v, u)
        v_neighbors.add(u)
        u_neighbors.add(v)
        self._weights[key] = weight

    def remove_edge(self, v: V, u: V) -> None:
        """Disconnect ``v`` and ``u``. Removing a missing edge is a no-op.

        Raises:
            UnknownVertexError: If either endpoint doesn't exist.
        """
        v_neighbors = self._require(v)
        u_neighbors = self._require(u)
        key = edge_key(v, u)
        v_neighbors.discard(u)
        u_neighbors.discard(v)
        self._weights.pop(key, None)

    # --- Queries -------------------------------------------------------------

    def has_vertex(self, vertex: V) -> bool:
        return vertex in self._adjacency

    def get_edge_weight(self, v: V, u: V) -> Optional[W]:
        """Return the weight of the edge between ``v`` and ``u``.

        Returns:
            The weight, or None if the vertices are not adjacent.
        """
        return self._weights.get(edge_key(v, u))

    def is_adjacent(self, v: V, u: V) -> bool:
        """Check whether ``u`` is a neighbor of ``v``.

        Raises:
            UnknownVertexError: If ``v`` doesn't exist.
        """
        return u in self._require(v)

    def neighbors(self, vertex: V) -> FrozenSet[V]:
        """Return a snapshot of the vertices adjacent to ``vertex``.

        Raises:
            UnknownVertexError: If the vertex doesn't exist.
        """
        return frozenset(self._require(vertex))

    def degree(self, vertex: V) -> int:
        """Return the number of neighbors of ``vertex``.

        Raises:
            UnknownVertexError: If the vertex doesn't exist.
        """
        return len(self._require(vertex))

    def all_vertices(self) -> FrozenSet[V]:
        """Return a snapshot of every vertex. Order is not guaranteed."""
        return frozenset(self._adjacency)

    def edges(self) -> Iterator[Tuple[V, V, W]]:
        """Yield each undirected edge once as ``(v, u, weight)``."""
        seen: Set[EdgeKey] = set()
        for v, neighbors in self._adjacency.items():
            for u in neighbors:
                key = edge_key(v, u)
                if key in seen:
                    continue
                seen.add(key)
                yield v, u, self._weights[key]

    def edge_count(self) -> int:
        return len(self._weights)
