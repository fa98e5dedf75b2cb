"""Single-source, single-target shortest path search (Dijkstra).

Edge labels of the graph are read as non-negative weights. Between a pair of
nodes with several parallel labels, the smallest label is used to relax the
edge; larger parallel labels can never lead to a cheaper path.
"""

from __future__ import annotations

from heapq import heappop, heappush
from itertools import count
from typing import List, Optional, Set, Tuple

from campusnav.graph.labeled_graph import LabeledGraph, NodeT
from campusnav.logging import get_logger
from campusnav.paths.path import Cost, Path

logger = get_logger(__name__)


def shortest_path(
    graph: LabeledGraph[NodeT, Cost],
    src_node: NodeT,
    dst_node: NodeT,
) -> Optional[Path[NodeT]]:
    """
    Find a minimum-cost path from ``src_node`` to ``dst_node``.

    Partial paths are kept in a min-priority queue ordered by total cost. The
    first extracted path that ends at ``dst_node`` is a shortest one. Among
    equal-cost shortest paths, which one is returned is not specified.

    Both nodes are expected to be in the graph; validating that is up to the
    caller. An unknown ``src_node`` simply has no children.

    Args:
        graph: Graph whose labels are non-negative numeric weights.
        src_node: Start node.
        dst_node: Destination node.

    Returns:
        The shortest Path, or None if ``dst_node`` is unreachable.
    """
    tie = count()  # keeps heap entries comparable when costs are equal
    min_pq: List[Tuple[Cost, int, Path[NodeT]]] = []
    settled: Set[NodeT] = set()

    heappush(min_pq, (0.0, next(tie), Path(src_node)))

    while min_pq:
        _, _, min_path = heappop(min_pq)
        node = min_path.end

        if node == dst_node:
            logger.debug(
                f"Shortest path {src_node!r} -> {dst_node!r}: cost={min_path.cost}, "
                f"{len(min_path)} segment(s), {len(settled)} node(s) settled"
            )
            return min_path

        if node in settled:
            continue

        for child in graph.list_children(node):
            if child in settled:
                continue
            new_path = min_path.extend(child, graph.min_label(node, child))
            heappush(min_pq, (new_path.cost, next(tie), new_path))

        settled.add(node)

    logger.debug(
        f"No path {src_node!r} -> {dst_node!r} after settling {len(settled)} node(s)"
    )
    return None


def shortest_path_cost(
    graph: LabeledGraph[NodeT, Cost], src_node: NodeT, dst_node: NodeT
) -> Optional[Cost]:
    """Return the cost of the shortest path, or None if there is none."""
    path = shortest_path(graph, src_node, dst_node)
    return None if path is None else path.cost
