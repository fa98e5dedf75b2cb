"""Path value types returned by the shortest-path search."""

from campusnav.paths.path import Cost, Path, Segment

__all__ = ["Cost", "Path", "Segment"]
