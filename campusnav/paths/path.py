from __future__ import annotations

from dataclasses import dataclass, field
from functools import cached_property
from typing import Any, Generic, Hashable, Iterator, Tuple, TypeVar

NodeT = TypeVar("NodeT", bound=Hashable)

#: Numeric cost of a step or a path (e.g. walking distance).
Cost = float


@dataclass(frozen=True)
class Segment(Generic[NodeT]):
    """
    A single step of a path.

    Attributes:
        start (NodeT): Node the step leaves from.
        end (NodeT): Node the step arrives at.
        cost (Cost): Incremental cost of this step.
    """

    start: NodeT
    end: NodeT
    cost: Cost

    def __repr__(self) -> str:
        return f"Segment({self.start!r} -> {self.end!r}, cost={self.cost})"


@dataclass(frozen=True, eq=False)
class Path(Generic[NodeT]):
    """
    An immutable path from a fixed start node.

    A path always contains its start node. ``extend`` never modifies a path;
    it returns a new one with one more segment and the cost added.

    Attributes:
        start (NodeT):
            The first node of the path.
        segments (Tuple[Segment, ...]):
            Consecutive steps; the first leaves ``start`` and each following
            step leaves where the previous one arrived.
        cost (Cost):
            Total cost, the sum of segment costs.
    """

    start: NodeT
    segments: Tuple[Segment[NodeT], ...] = ()
    cost: Cost = field(default=0.0)

    def __post_init__(self) -> None:
        """
        Validate that the segments form a chain beginning at ``start``."""
        at = self.start
        for seg in self.segments:
            if seg.start != at:
                raise ValueError(
                    f"Segment {seg!r} does not continue from node {at!r}."
                )
            at = seg.end

    def extend(self, node: NodeT, cost: Cost) -> Path[NodeT]:
        """
        Return a new path with a step from the current end to ``node``.

        Args:
            node: The node to append.
            cost: Incremental cost of the new step.

        Returns:
            A new Path; this path is left unchanged.
        """
        seg = Segment(self.end, node, cost)
        return Path(self.start, self.segments + (seg,), self.cost + cost)

    @property
    def end(self) -> NodeT:
        """
        Return the last node of the path (the start for a single-node path)."""
        if not self.segments:
            return self.start
        return self.segments[-1].end

    @cached_property
    def nodes_seq(self) -> Tuple[NodeT, ...]:
        """
        Return the nodes along the path in order, start first."""
        return (self.start,) + tuple(seg.end for seg in self.segments)

    @cached_property
    def steps(self) -> Tuple[Tuple[NodeT, Cost], ...]:
        """
        Return ``(node, incremental_cost)`` pairs; the start has cost 0."""
        return ((self.start, 0.0),) + tuple(
            (seg.end, seg.cost) for seg in self.segments
        )

    def __iter__(self) -> Iterator[Segment[NodeT]]:
        """
        Iterate over the segments in order."""
        return iter(self.segments)

    def __len__(self) -> int:
        """
        Return the number of segments (0 for a single-node path)."""
        return len(self.segments)

    def __lt__(self, other: Any) -> bool:
        """
        Compare two paths by total cost only.

        Returns NotImplemented if ``other`` is not a Path.
        """
        if not isinstance(other, Path):
            return NotImplemented
        return self.cost < other.cost

    def __eq__(self, other: Any) -> bool:
        """
        Check equality of start, segments and cost."""
        if not isinstance(other, Path):
            return NotImplemented
        return (
            self.start == other.start
            and self.segments == other.segments
            and self.cost == other.cost
        )

    def __hash__(self) -> int:
        return hash((self.start, self.segments, self.cost))

    def __repr__(self) -> str:
        return f"Path({' -> '.join(repr(n) for n in self.nodes_seq)}, cost={self.cost})"
