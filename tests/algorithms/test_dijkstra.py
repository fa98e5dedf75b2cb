import random

import networkx as nx
import pytest

from campusnav.algorithms.dijkstra import shortest_path, shortest_path_cost
from campusnav.graph.convert import to_networkx
from campusnav.graph.labeled_graph import LabeledGraph
from campusnav.paths.path import Path


class TestShortestPath:
    def test_triangle_prefers_two_hops(self, triangle):
        path = shortest_path(triangle, "A", "C")
        assert path is not None
        assert path.cost == 2.0
        assert path.nodes_seq == ("A", "B", "C")
        assert path.steps == (("A", 0.0), ("B", 1.0), ("C", 1.0))

    def test_disconnected_returns_none(self, disconnected):
        assert shortest_path(disconnected, "A", "B") is None

    def test_direction_matters(self, triangle):
        assert shortest_path(triangle, "C", "A") is None

    def test_self_path(self, triangle):
        """Source equal to destination gives the zero-cost single-node path."""
        path = shortest_path(triangle, "A", "A")
        assert path == Path("A")
        assert path.cost == 0.0
        assert path.nodes_seq == ("A",)

    def test_self_path_isolated_node(self, disconnected):
        assert shortest_path(disconnected, "B", "B") == Path("B")

    def test_multi_label_uses_minimum(self, multi_label):
        """Parallel labels {2, 7} on A->B: relaxation uses 2."""
        path = shortest_path(multi_label, "A", "B")
        assert path is not None
        assert path.cost == 2.0
        assert [seg.cost for seg in path] == [2.0]

        # A->B->C costs 3 with the minimum label, beating the direct 5
        path = shortest_path(multi_label, "A", "C")
        assert path.nodes_seq == ("A", "B", "C")
        assert path.cost == 3.0

    def test_multi_label_minimum_after_insert_order(self):
        """The chosen weight does not depend on the order labels were added."""
        for labels in ([7.0, 2.0], [2.0, 7.0]):
            g = LabeledGraph()
            g.add_node("A")
            g.add_node("B")
            for w in labels:
                g.add_edge("A", "B", w)
            assert shortest_path(g, "A", "B").cost == 2.0

    def test_equal_cost_paths(self, square):
        path = shortest_path(square, "A", "C")
        assert path.cost == 2.0
        assert path.nodes_seq in {("A", "B", "C"), ("A", "D", "C")}

    def test_idempotent_cost(self, square):
        """Repeated searches on an unchanged graph agree on the cost."""
        costs = {shortest_path(square, "A", "C").cost for _ in range(5)}
        assert costs == {2.0}

    def test_longer_graph(self, graph6):
        path = shortest_path(graph6, "A", "F")
        assert path.nodes_seq == ("A", "B", "E", "D", "F")
        assert path.cost == 5.0
        assert path.steps[1:] == (("B", 2.0), ("E", 1.0), ("D", 1.0), ("F", 1.0))

    def test_does_not_mutate_graph(self, graph6):
        before = sorted(graph6.edges())
        shortest_path(graph6, "A", "F")
        assert sorted(graph6.edges()) == before

    def test_zero_weight_edges(self):
        g = LabeledGraph()
        for n in "ABC":
            g.add_node(n)
        g.add_edge("A", "B", 0.0)
        g.add_edge("B", "C", 0.0)
        g.add_edge("A", "C", 1.0)
        path = shortest_path(g, "A", "C")
        assert path.cost == 0.0
        assert path.nodes_seq == ("A", "B", "C")

    def test_cycle(self):
        g = LabeledGraph()
        for n in "ABCD":
            g.add_node(n)
        g.add_edge("A", "B", 1)
        g.add_edge("B", "C", 1)
        g.add_edge("C", "A", 1)
        g.add_edge("C", "D", 1)
        path = shortest_path(g, "A", "D")
        assert path.nodes_seq == ("A", "B", "C", "D")
        assert path.cost == 3

    def test_unknown_source(self, triangle):
        assert shortest_path(triangle, "Z", "A") is None

    def test_after_edge_deleted(self, triangle):
        triangle.delete_edge("B", "C", 1.0)
        path = shortest_path(triangle, "A", "C")
        assert path.nodes_seq == ("A", "C")
        assert path.cost == 5.0

    def test_after_node_deleted(self, triangle):
        triangle.delete_node("B")
        assert shortest_path(triangle, "A", "C").cost == 5.0

    def test_shortest_path_cost(self, triangle, disconnected):
        assert shortest_path_cost(triangle, "A", "C") == 2.0
        assert shortest_path_cost(disconnected, "A", "B") is None


@pytest.mark.parametrize("seed", range(10))
def test_matches_networkx(seed):
    """Costs agree with NetworkX on random multi-labeled graphs."""
    rng = random.Random(seed)
    g = LabeledGraph()
    nodes = list(range(12))
    for n in nodes:
        g.add_node(n)
    for _ in range(40):
        u, v = rng.choice(nodes), rng.choice(nodes)
        w = rng.randint(0, 20)
        if not g.edge_exists(u, v, w):
            g.add_edge(u, v, w)

    nx_graph = to_networkx(g)
    for dst in nodes:
        path = shortest_path(g, 0, dst)
        if nx.has_path(nx_graph, 0, dst):
            expected = nx.dijkstra_path_length(nx_graph, 0, dst, weight="weight")
            assert path is not None
            assert path.cost == expected
            assert path.nodes_seq[0] == 0
            assert path.end == dst
            # every step follows a real edge at its cheapest label
            for seg in path:
                assert seg.cost == g.min_label(seg.start, seg.end)
        else:
            assert path is None
