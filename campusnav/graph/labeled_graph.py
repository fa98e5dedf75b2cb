"""Mutable directed graph whose edges carry sets of ordered labels.

`LabeledGraph` stores unique nodes and directed edges from a parent node to a
child node. Each (parent, child) pair holds a non-empty set of labels, so
several parallel edges between the same two nodes are told apart by label,
e.g. walkways of different length between the same two points.

The graph is kept in a private ``networkx.DiGraph``: one DiGraph edge per
(parent, child) pair, with the label set in its ``labels`` attribute.
"""

from __future__ import annotations

from typing import Generic, Hashable, Iterator, List, Optional, Set, Tuple, TypeVar

import networkx as nx

from campusnav.config import GRAPH_CONFIG
from campusnav.exceptions import DuplicateEdgeError, InvariantViolation, NotFoundError
from campusnav.logging import get_logger

logger = get_logger(__name__)

NodeT = TypeVar("NodeT", bound=Hashable)
LabelT = TypeVar("LabelT")

#: Edge attribute holding the label set of a (parent, child) pair.
LABELS_ATTR = "labels"


class LabeledGraph(Generic[NodeT, LabelT]):
    """A directed graph with multi-labeled edges and strict validation.

    This class enforces:
      - No duplicate nodes; ``add_node`` on an existing node is a no-op.
      - No automatic creation of missing nodes when adding an edge.
      - No duplicate (parent, child, label) triples.
      - Removing non-existent nodes or edges raises NotFoundError.
      - Removing the last label of a pair removes the pair itself.
      - Removing a node removes every edge incident to it.

    Labels must be mutually comparable; they are only ordered when listed by
    ``labels_of``.
    """

    def __init__(
        self, node: Optional[NodeT] = None, *, check_invariants: Optional[bool] = None
    ) -> None:
        """Create an empty graph, or a graph seeded with a single node.

        Args:
            node: Optional first node.
            check_invariants: Run :meth:`check_invariants` after each mutation.
                Defaults to ``GRAPH_CONFIG.check_invariants``.
        """
        self._graph = nx.DiGraph()
        self._debug = (
            GRAPH_CONFIG.check_invariants
            if check_invariants is None
            else check_invariants
        )
        if node is not None:
            self._graph.add_node(node)
        self._after_mutation()

    def __len__(self) -> int:
        return self._graph.number_of_nodes()

    def __contains__(self, node: object) -> bool:
        try:
            return node in self._graph
        except TypeError:
            # unhashable values cannot be nodes
            return False

    def __repr__(self) -> str:
        return f"LabeledGraph(nodes={self.size()}, edges={self.edge_count()})"

    #
    # Node management
    #
    def size(self) -> int:
        """Return the number of nodes in the graph."""
        return len(self)

    def add_node(self, node: NodeT) -> bool:
        """Add a node if it is not already present.

        Args:
            node: The node to add. Must not be None.

        Returns:
            bool: True if the node was added, False if it already existed.

        Raises:
            ValueError: If ``node`` is None.
        """
        if node is None:
            raise ValueError("Node must not be None.")
        if node in self._graph:
            return False
        self._graph.add_node(node)
        self._after_mutation()
        return True

    def node_exists(self, node: NodeT) -> bool:
        """Return True if ``node`` is in the graph."""
        return node in self

    def delete_node(self, node: NodeT) -> None:
        """Remove a node together with all edges into or out of it.

        Args:
            node: The node to remove.

        Raises:
            NotFoundError: If the node does not exist in the graph.
        """
        if node not in self:
            raise NotFoundError(f"Node '{node}' does not exist.")
        incident = self._graph.out_degree(node) + self._graph.in_degree(node)
        self._graph.remove_node(node)
        if incident:
            logger.debug(f"Removed node {node!r} and {incident} incident edge(s)")
        self._after_mutation()

    def list_nodes(self) -> List[NodeT]:
        """Return a new list of all nodes. Order is not significant."""
        return list(self._graph.nodes)

    #
    # Edge management
    #
    def edge_exists(self, parent: NodeT, child: NodeT, label: LabelT) -> bool:
        """Return True if the edge ``parent -> child`` carries ``label``."""
        if parent not in self or child not in self:
            return False
        data = self._graph.succ[parent].get(child)
        return data is not None and label in data[LABELS_ATTR]

    def add_edge(self, parent: NodeT, child: NodeT, label: LabelT) -> None:
        """Add ``label`` to the edge from ``parent`` to ``child``.

        The (parent, child) entry is created on first use.

        Args:
            parent: Source node. Must exist in the graph.
            child: Target node. Must exist in the graph.
            label: Label to attach. Must not be None.

        Raises:
            NotFoundError: If either node does not exist.
            DuplicateEdgeError: If the edge already carries ``label``.
            ValueError: If ``label`` is None.
        """
        self._require_nodes(parent, child)
        if label is None:
            raise ValueError("Edge label must not be None.")
        if self.edge_exists(parent, child, label):
            raise DuplicateEdgeError(
                f"Edge '{parent}' -> '{child}' with label '{label}' already exists."
            )
        if self._graph.has_edge(parent, child):
            self._graph.succ[parent][child][LABELS_ATTR].add(label)
        else:
            self._graph.add_edge(parent, child, **{LABELS_ATTR: {label}})
        self._after_mutation()

    def delete_edge(self, parent: NodeT, child: NodeT, label: LabelT) -> None:
        """Remove ``label`` from the edge ``parent -> child``.

        When the last label goes, the (parent, child) pair is removed as well.

        Raises:
            NotFoundError: If either node does not exist, or the edge does not
                carry ``label``.
        """
        self._require_nodes(parent, child)
        if not self.edge_exists(parent, child, label):
            raise NotFoundError(
                f"No edge '{parent}' -> '{child}' with label '{label}' to remove."
            )
        labels: Set[LabelT] = self._graph.succ[parent][child][LABELS_ATTR]
        labels.discard(label)
        if not labels:
            self._graph.remove_edge(parent, child)
        self._after_mutation()

    def labels_of(self, parent: NodeT, child: NodeT) -> List[LabelT]:
        """Return the labels of ``parent -> child`` in ascending order.

        Returns:
            List[LabelT]: A new sorted list; empty if there is no such edge or
                either node is unknown.
        """
        if parent not in self:
            return []
        data = self._graph.succ[parent].get(child)
        if data is None:
            return []
        return sorted(data[LABELS_ATTR])

    def min_label(self, parent: NodeT, child: NodeT) -> LabelT:
        """Return the smallest label of ``parent -> child``.

        Raises:
            NotFoundError: If there is no edge from ``parent`` to ``child``.
        """
        if parent not in self or child not in self._graph.succ[parent]:
            raise NotFoundError(f"No edge '{parent}' -> '{child}'.")
        return min(self._graph.succ[parent][child][LABELS_ATTR])

    def list_children(self, parent: NodeT) -> List[NodeT]:
        """Return a new list of nodes ``parent`` has an edge to.

        Unknown parents and parents without outgoing edges give an empty list.
        """
        if parent not in self:
            return []
        return list(self._graph.succ[parent])

    def edges(self) -> Iterator[Tuple[NodeT, NodeT, LabelT]]:
        """Iterate over all ``(parent, child, label)`` triples."""
        for parent, child, labels in self._graph.edges(data=LABELS_ATTR):
            for label in labels:
                yield parent, child, label

    def edge_count(self) -> int:
        """Return the number of ``(parent, child, label)`` triples."""
        return sum(
            len(labels) for _, _, labels in self._graph.edges(data=LABELS_ATTR)
        )

    #
    # Consistency
    #
    def check_invariants(self) -> None:
        """Verify the node/edge representation is consistent.

        Raises:
            InvariantViolation: If a None node or label is stored, an edge
                references a missing node, or a label set is empty or missing.
        """
        nodes = self._graph.nodes
        for node in nodes:
            if node is None:
                raise InvariantViolation("Graph contains a None node.")
        for parent, children in self._graph.succ.items():
            if parent not in nodes:
                raise InvariantViolation(f"Edge parent '{parent}' is not a node.")
            for child, data in children.items():
                if child not in nodes:
                    raise InvariantViolation(f"Edge child '{child}' is not a node.")
                labels = data.get(LABELS_ATTR)
                if not isinstance(labels, set) or not labels:
                    raise InvariantViolation(
                        f"Edge '{parent}' -> '{child}' has no labels."
                    )
                if None in labels:
                    raise InvariantViolation(
                        f"Edge '{parent}' -> '{child}' has a None label."
                    )

    def _require_nodes(self, parent: NodeT, child: NodeT) -> None:
        if parent not in self:
            raise NotFoundError(f"Parent node '{parent}' does not exist.")
        if child not in self:
            raise NotFoundError(f"Child node '{child}' does not exist.")

    def _after_mutation(self) -> None:
        if self._debug:
            self.check_invariants()
