"""Unit tests for WeightedGraph."""

from dataclasses import dataclass
from decimal import Decimal

import pytest

from pathgraph.domain.errors import DuplicateVertexError, UnknownVertexError
from pathgraph.graph import WeightedGraph, edge_key


@dataclass(frozen=True)
class Place:
    """Hashable vertex that cannot be ordered."""

    name: str


def test_add_edge_is_symmetric(small_graph):
    assert small_graph.is_adjacent(1, 2)
    assert small_graph.is_adjacent(2, 1)
    assert small_graph.get_edge_weight(1, 2) == 10
    assert small_graph.get_edge_weight(2, 1) == 10


def test_add_edge_overwrites_weight(small_graph):
    small_graph.add_edge(2, 1, 7)

    assert small_graph.get_edge_weight(1, 2) == 7
    assert small_graph.edge_count() == 4


def test_add_edge_unknown_endpoint_raises(small_graph):
    with pytest.raises(UnknownVertexError) as excinfo:
        small_graph.add_edge(1, 99, 3)

    assert excinfo.value.vertex == 99
    assert 99 not in small_graph.neighbors(1)


def test_add_vertex_duplicate_leaves_graph_unchanged(small_graph):
    neighbors_before = small_graph.neighbors(1)

    with pytest.raises(DuplicateVertexError) as excinfo:
        small_graph.add_vertex(1)

    assert excinfo.value.vertex == 1
    assert small_graph.neighbors(1) == neighbors_before
    assert small_graph.get_edge_weight(1, 2) == 10
    assert len(small_graph) == 5


def test_remove_vertex_leaves_no_dangling_edges(small_graph):
    small_graph.remove_vertex(3)

    assert 3 not in small_graph
    assert 3 not in small_graph.all_vertices()
    for v in small_graph.all_vertices():
        assert 3 not in small_graph.neighbors(v)
    assert small_graph.get_edge_weight(2, 3) is None
    assert small_graph.get_edge_weight(3, 4) is None
    assert small_graph.edge_count() == 1


def test_remove_vertex_then_re_add_has_no_old_weights(small_graph):
    small_graph.remove_vertex(3)
    small_graph.add_vertex(3)

    assert small_graph.neighbors(3) == frozenset()
    assert small_graph.get_edge_weight(1, 3) is None


def test_remove_vertex_with_self_loop():
    graph = WeightedGraph()
    graph.add_vertex("a")
    graph.add_edge("a", "a", 1)

    graph.remove_vertex("a")

    assert len(graph) == 0
    assert graph.edge_count() == 0


def test_remove_unknown_vertex_raises(small_graph):
    with pytest.raises(UnknownVertexError):
        small_graph.remove_vertex(42)


def test_remove_edge(small_graph):
    small_graph.remove_edge(3, 1)

    assert not small_graph.is_adjacent(1, 3)
    assert not small_graph.is_adjacent(3, 1)
    assert small_graph.get_edge_weight(1, 3) is None


def test_remove_missing_edge_is_noop(small_graph):
    small_graph.remove_edge(1, 5)

    assert small_graph.edge_count() == 4
    assert small_graph.neighbors(5) == frozenset()


def test_remove_edge_unknown_endpoint_raises(small_graph):
    with pytest.raises(UnknownVertexError):
        small_graph.remove_edge(1, 42)


def test_queries_on_unknown_vertex_raise(small_graph):
    with pytest.raises(UnknownVertexError):
        small_graph.neighbors(42)
    with pytest.raises(UnknownVertexError):
        small_graph.is_adjacent(42, 1)
    with pytest.raises(UnknownVertexError):
        small_graph.degree(42)


def test_is_adjacent_with_unknown_neighbor_is_false(small_graph):
    assert small_graph.is_adjacent(1, 42) is False


def test_get_edge_weight_is_idempotent(small_graph):
    assert small_graph.get_edge_weight(3, 4) == small_graph.get_edge_weight(3, 4) == 1
    assert small_graph.get_edge_weight(1, 4) is None
    assert small_graph.get_edge_weight(1, 4) is None


def test_neighbors_returns_snapshot(small_graph):
    neighbors = small_graph.neighbors(1)
    small_graph.add_edge(1, 5, 2)

    assert neighbors == {2, 3}
    assert small_graph.neighbors(1) == {2, 3, 5}
    assert small_graph.degree(1) == 3


def test_edges_yields_each_edge_once(small_graph):
    edges = {(frozenset((v, u)), w) for v, u, w in small_graph.edges()}

    assert len(list(small_graph.edges())) == 4
    assert edges == {
        (frozenset((1, 2)), 10),
        (frozenset((2, 3)), 5),
        (frozenset((1, 3)), 20),
        (frozenset((3, 4)), 1),
    }


def test_iteration_and_membership(small_graph):
    assert set(small_graph) == {1, 2, 3, 4, 5}
    assert small_graph.has_vertex(5)
    assert not small_graph.has_vertex(6)
    assert "vertices=5" in repr(small_graph)


def test_unorderable_vertices():
    graph = WeightedGraph()
    paris, lyon, lille = Place("paris"), Place("lyon"), Place("lille")
    for place in (paris, lyon, lille):
        graph.add_vertex(place)

    graph.add_edge(paris, lyon, 465.0)
    graph.add_edge(lille, paris, 225.0)

    assert graph.get_edge_weight(lyon, paris) == 465.0
    assert graph.get_edge_weight(paris, lille) == 225.0
    assert graph.neighbors(paris) == {lyon, lille}


def test_mixed_type_vertices():
    graph = WeightedGraph()
    graph.add_vertex(1)
    graph.add_vertex("one")
    graph.add_edge(1, "one", 3)

    assert graph.get_edge_weight("one", 1) == 3


def test_edge_key_is_canonical():
    assert edge_key(2, 1) == edge_key(1, 2) == (1, 2)
    assert edge_key(Place("a"), Place("b")) == frozenset((Place("a"), Place("b")))
    # Incomparable sets are not totally ordered
    a, b = frozenset({1}), frozenset({2})
    assert edge_key(a, b) == edge_key(b, a)


@dataclass(frozen=True)
class Stop:
    """Hashable vertex whose ordering raises something other than TypeError."""

    code: str

    def __le__(self, other):
        raise ValueError("stops have no order")


def test_vertices_with_failing_ordering_keep_weights_consistent():
    graph = WeightedGraph()
    a, b, c = Stop("a"), Stop("b"), Stop("c")
    for stop in (a, b, c):
        graph.add_vertex(stop)

    graph.add_edge(a, b, 3)
    graph.add_edge(b, c, 4)

    assert graph.is_adjacent(a, b) and graph.is_adjacent(b, a)
    assert graph.get_edge_weight(b, a) == 3
    assert edge_key(a, b) == frozenset((a, b))

    graph.remove_edge(b, a)
    assert not graph.is_adjacent(a, b)
    assert graph.get_edge_weight(a, b) is None

    graph.remove_vertex(c)
    assert graph.neighbors(b) == frozenset()
    assert graph.edge_count() == 0


def test_nan_decimal_vertex_gets_a_weight():
    graph = WeightedGraph()
    nan, one = Decimal("NaN"), Decimal("1")
    graph.add_vertex(nan)
    graph.add_vertex(one)

    graph.add_edge(nan, one, 3)

    assert graph.is_adjacent(one, nan)
    assert graph.get_edge_weight(one, nan) == 3
