"""campusnav: shortest walking routes over a labeled campus graph.

Primary API:
    LabeledGraph - directed graph with multi-labeled edges
    shortest_path() - Dijkstra search between two nodes
    Path, Segment - immutable search results
    CampusMap - building-name facade over a campus walkway graph

Example:
    from campusnav import LabeledGraph, shortest_path

    g = LabeledGraph()
    for n in "ABC":
        g.add_node(n)
    g.add_edge("A", "B", 1.0)
    g.add_edge("B", "C", 1.0)
    g.add_edge("A", "C", 5.0)

    path = shortest_path(g, "A", "C")
    path.nodes_seq  # ('A', 'B', 'C')
    path.cost       # 2.0
"""

from __future__ import annotations

from campusnav import logging
from campusnav._version import __version__
from campusnav.algorithms.dijkstra import shortest_path, shortest_path_cost
from campusnav.campus.model import CampusBuilding, CampusMap, CampusPath, Point
from campusnav.exceptions import (
    CampusDataError,
    DuplicateEdgeError,
    InvariantViolation,
    NotFoundError,
)
from campusnav.graph.convert import from_networkx, to_networkx
from campusnav.graph.labeled_graph import LabeledGraph
from campusnav.paths.path import Path, Segment

__all__ = [
    # Version
    "__version__",
    # Graph
    "LabeledGraph",
    "from_networkx",
    "to_networkx",
    # Search
    "shortest_path",
    "shortest_path_cost",
    "Path",
    "Segment",
    # Campus
    "CampusMap",
    "CampusBuilding",
    "CampusPath",
    "Point",
    # Errors
    "NotFoundError",
    "DuplicateEdgeError",
    "InvariantViolation",
    "CampusDataError",
    # Utilities
    "logging",
]
