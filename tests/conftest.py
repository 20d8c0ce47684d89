import pytest

from pathgraph.config import reset_config
from pathgraph.graph import WeightedGraph


@pytest.fixture(autouse=True)
def fresh_config():
    """Make sure environment overrides from one test don't leak."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def small_graph() -> WeightedGraph:
    """Vertices 1..5; 5 is isolated. Cheapest 1 -> 4 is 1-2-3-4 at 16."""
    graph: WeightedGraph = WeightedGraph()
    for v in range(1, 6):
        graph.add_vertex(v)
    graph.add_edge(1, 2, 10)
    graph.add_edge(2, 3, 5)
    graph.add_edge(1, 3, 20)
    graph.add_edge(3, 4, 1)
    return graph


@pytest.fixture
def city_graph() -> WeightedGraph:
    """Twenty cities labelled 1..20 connected by road distances."""
    graph: WeightedGraph = WeightedGraph()
    for v in range(1, 21):
        graph.add_vertex(v)
    for v, u, distance in [
        (1, 2, 71),
        (2, 3, 75),
        (3, 4, 118),
        (3, 10, 140),
        (4, 5, 111),
        (5, 6, 70),
        (6, 7, 75),
        (7, 8, 120),
        (8, 9, 146),
        (9, 10, 80),
        (10, 1, 151),
        (10, 11, 99),
        (11, 13, 211),
        (9, 12, 87),
        (8, 12, 138),
        (12, 13, 101),
        (13, 14, 90),
        (13, 15, 85),
        (15, 16, 98),
        (16, 17, 86),
        (15, 18, 142),
        (18, 19, 92),
        (19, 20, 87),
    ]:
        graph.add_edge(v, u, distance)
    return graph


@pytest.fixture
def tie_graph() -> WeightedGraph:
    """Two paths S-B-G and S-A-C-G, both costing 3.

    After A is expanded, B and C wait in the frontier with priority 2;
    B was pushed first.
    """
    graph: WeightedGraph = WeightedGraph()
    for v in "SABCG":
        graph.add_vertex(v)
    graph.add_edge("S", "A", 1)
    graph.add_edge("S", "B", 2)
    graph.add_edge("A", "C", 1)
    graph.add_edge("B", "G", 1)
    graph.add_edge("C", "G", 1)
    return graph
