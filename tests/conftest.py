"""Global pytest configuration and shared sample graphs.

Every graph built during the test session runs the full consistency pass
after each mutation.
"""

from __future__ import annotations

import pytest

from campusnav.config import GRAPH_CONFIG
from campusnav.graph.labeled_graph import LabeledGraph


@pytest.fixture(autouse=True)
def _check_graph_invariants(monkeypatch):
    monkeypatch.setattr(GRAPH_CONFIG, "check_invariants", True)


def _graph(nodes, edges):
    g = LabeledGraph()
    for n in nodes:
        g.add_node(n)
    for parent, child, label in edges:
        g.add_edge(parent, child, label)
    return g


@pytest.fixture
def triangle():
    #       [1]      [1]
    #   A───────►B───────►C
    #   │                 ▲
    #   └─────────────────┘
    #           [5]
    return _graph("ABC", [("A", "B", 1.0), ("B", "C", 1.0), ("A", "C", 5.0)])


@pytest.fixture
def disconnected():
    return _graph("AB", [])


@pytest.fixture
def multi_label():
    #      [2, 7]     [1]
    #   A─────────►B──────►C
    #   │                  ▲
    #   └──────────────────┘
    #           [5]
    return _graph(
        "ABC",
        [("A", "B", 2.0), ("A", "B", 7.0), ("B", "C", 1.0), ("A", "C", 5.0)],
    )


@pytest.fixture
def square():
    #       [1]       [1]
    #   A───────►B───────►C
    #   │                 ▲
    #   │  [1]      [1]   │
    #   └───────►D────────┘
    #
    # Two equal-cost shortest paths from A to C.
    return _graph(
        "ABCD",
        [("A", "B", 1.0), ("B", "C", 1.0), ("A", "D", 1.0), ("D", "C", 1.0)],
    )


@pytest.fixture
def graph6():
    #   A ──2──► B ──4──► D ──1──► F
    #   │        │        ▲
    #   1        1        1
    #   ▼        ▼        │
    #   C ──3──► E ───────┘
    #   ▲                 │
    #   └───────7─────────┘   (E -> C)
    return _graph(
        "ABCDEF",
        [
            ("A", "B", 2.0),
            ("A", "C", 1.0),
            ("B", "D", 4.0),
            ("B", "E", 1.0),
            ("C", "E", 3.0),
            ("E", "D", 1.0),
            ("E", "C", 7.0),
            ("D", "F", 1.0),
        ],
    )
