"""Conversion between LabeledGraph and NetworkX graphs.

A LabeledGraph maps naturally onto a ``networkx.MultiDiGraph``: each
``(parent, child, label)`` triple becomes one multi-edge whose key is the
label. The label is also stored under ``label_attr`` so NetworkX algorithms
(e.g. ``nx.dijkstra_path_length(G, u, v, weight="weight")``) can use it.
"""

from typing import Any, Hashable, Optional

import networkx as nx

from campusnav.graph.labeled_graph import LabeledGraph


def to_networkx(graph: LabeledGraph, label_attr: str = "weight") -> nx.MultiDiGraph:
    """Convert a LabeledGraph to a NetworkX MultiDiGraph.

    Args:
        graph: The LabeledGraph to convert.
        label_attr: Edge attribute name receiving each label.

    Returns:
        A MultiDiGraph with one edge per label, keyed by that label.
    """
    nx_graph = nx.MultiDiGraph()
    nx_graph.add_nodes_from(graph.list_nodes())
    for parent, child, label in graph.edges():
        nx_graph.add_edge(parent, child, key=label, **{label_attr: label})
    return nx_graph


def from_networkx(
    nx_graph: nx.DiGraph,
    label_attr: Optional[str] = "weight",
    default: Any = None,
) -> LabeledGraph:
    """Build a LabeledGraph from a NetworkX directed graph.

    Works with both ``DiGraph`` and ``MultiDiGraph``. Each edge contributes the
    value of ``label_attr`` as a label; edges without it use ``default``.
    Parallel NetworkX edges with equal labels collapse into one label.

    Args:
        nx_graph: A directed NetworkX graph.
        label_attr: Edge attribute to read labels from. If None, multi-edge
            keys are used as labels (MultiDiGraph only).
        default: Label for edges missing ``label_attr``.

    Returns:
        A new LabeledGraph.

    Raises:
        ValueError: If the graph is undirected, or an edge has no label and
            no default is given.
    """
    if not nx_graph.is_directed():
        raise ValueError("Only directed graphs can be converted.")
    if label_attr is None and not nx_graph.is_multigraph():
        raise ValueError("label_attr=None requires a MultiDiGraph (labels from keys).")

    graph: LabeledGraph[Hashable, Any] = LabeledGraph()
    for node in nx_graph.nodes:
        graph.add_node(node)

    if nx_graph.is_multigraph():
        edge_iter = (
            (u, v, key if label_attr is None else data.get(label_attr, default))
            for u, v, key, data in nx_graph.edges(keys=True, data=True)
        )
    else:
        edge_iter = (
            (u, v, data.get(label_attr, default))
            for u, v, data in nx_graph.edges(data=True)
        )

    for u, v, label in edge_iter:
        if label is None:
            raise ValueError(f"Edge '{u}' -> '{v}' has no '{label_attr}' attribute.")
        if not graph.edge_exists(u, v, label):
            graph.add_edge(u, v, label)
    return graph
