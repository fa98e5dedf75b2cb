"""Graph primitives.

This package provides the labeled directed graph `LabeledGraph` and
conversion helpers to and from NetworkX (`convert`).
"""

from campusnav.graph.convert import from_networkx, to_networkx
from campusnav.graph.labeled_graph import LabeledGraph

__all__ = ["LabeledGraph", "from_networkx", "to_networkx"]
