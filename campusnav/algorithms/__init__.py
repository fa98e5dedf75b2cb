"""Search algorithms over LabeledGraph."""

from campusnav.algorithms.dijkstra import shortest_path, shortest_path_cost

__all__ = ["shortest_path", "shortest_path_cost"]
