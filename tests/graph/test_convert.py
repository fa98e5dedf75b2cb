import networkx as nx
import pytest

from campusnav.graph.convert import from_networkx, to_networkx
from campusnav.graph.labeled_graph import LabeledGraph


def test_to_networkx_one_edge_per_label(multi_label):
    nx_graph = to_networkx(multi_label)
    assert isinstance(nx_graph, nx.MultiDiGraph)
    assert set(nx_graph.nodes) == {"A", "B", "C"}
    assert nx_graph.number_of_edges() == 4
    assert sorted(nx_graph["A"]["B"]) == [2.0, 7.0]
    assert nx_graph.edges["A", "B", 7.0]["weight"] == 7.0


def test_to_networkx_custom_attr(triangle):
    nx_graph = to_networkx(triangle, label_attr="distance")
    assert nx_graph.edges["A", "C", 5.0] == {"distance": 5.0}


def test_to_networkx_keeps_isolated_nodes(disconnected):
    nx_graph = to_networkx(disconnected)
    assert set(nx_graph.nodes) == {"A", "B"}
    assert nx_graph.number_of_edges() == 0


def test_round_trip(multi_label):
    g = from_networkx(to_networkx(multi_label))
    assert sorted(g.list_nodes()) == ["A", "B", "C"]
    assert sorted(g.edges()) == sorted(multi_label.edges())


def test_from_digraph_with_weights():
    nx_graph = nx.DiGraph()
    nx_graph.add_edge("A", "B", weight=3)
    nx_graph.add_edge("B", "C", weight=4)
    nx_graph.add_node("Z")
    g = from_networkx(nx_graph)
    assert isinstance(g, LabeledGraph)
    assert g.size() == 4
    assert g.labels_of("A", "B") == [3]
    assert g.list_children("Z") == []


def test_from_multidigraph_collapses_equal_labels():
    nx_graph = nx.MultiDiGraph()
    nx_graph.add_edge("A", "B", weight=1)
    nx_graph.add_edge("A", "B", weight=1)
    nx_graph.add_edge("A", "B", weight=2)
    g = from_networkx(nx_graph)
    assert g.labels_of("A", "B") == [1, 2]


def test_from_multidigraph_keys_as_labels():
    nx_graph = nx.MultiDiGraph()
    nx_graph.add_edge("A", "B", key="red")
    nx_graph.add_edge("A", "B", key="blue")
    g = from_networkx(nx_graph, label_attr=None)
    assert g.labels_of("A", "B") == ["blue", "red"]


def test_from_networkx_default_label():
    nx_graph = nx.DiGraph()
    nx_graph.add_edge("A", "B")
    g = from_networkx(nx_graph, default=1.0)
    assert g.labels_of("A", "B") == [1.0]


def test_from_networkx_missing_label():
    nx_graph = nx.DiGraph()
    nx_graph.add_edge("A", "B")
    with pytest.raises(ValueError, match="has no 'weight' attribute"):
        from_networkx(nx_graph)


def test_from_networkx_rejects_undirected():
    with pytest.raises(ValueError, match="directed"):
        from_networkx(nx.Graph())


def test_from_networkx_keys_require_multigraph():
    with pytest.raises(ValueError, match="MultiDiGraph"):
        from_networkx(nx.DiGraph(), label_attr=None)
