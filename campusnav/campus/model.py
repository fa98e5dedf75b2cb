"""Campus model: buildings, walkways, and the query facade.

`CampusMap` owns the building name tables and a LabeledGraph of walkway
points, and answers shortest-route queries by building short name.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path as FsPath
from typing import Dict, Iterable, Optional, Union

from campusnav.algorithms.dijkstra import shortest_path
from campusnav.graph.labeled_graph import LabeledGraph
from campusnav.logging import get_logger
from campusnav.paths.path import Path

logger = get_logger(__name__)


@dataclass(frozen=True)
class Point:
    """A location on the campus map, in map pixel coordinates."""

    x: float
    y: float


@dataclass(frozen=True)
class CampusBuilding:
    """A named building with the location of its entrance."""

    short_name: str
    long_name: str
    x: float
    y: float

    @property
    def location(self) -> Point:
        return Point(self.x, self.y)


@dataclass(frozen=True)
class CampusPath:
    """A directed walkway segment between two points."""

    x1: float
    y1: float
    x2: float
    y2: float
    distance: float

    @property
    def origin(self) -> Point:
        return Point(self.x1, self.y1)

    @property
    def destination(self) -> Point:
        return Point(self.x2, self.y2)


class CampusMap:
    """Buildings and walkways of one campus, queryable by building short name.

    """

    def __init__(
        self,
        buildings: Iterable[CampusBuilding],
        paths: Iterable[CampusPath],
    ) -> None:
        self._short_to_long: Dict[str, str] = {}
        self._locations: Dict[str, Point] = {}
        self._graph: LabeledGraph[Point, float] = LabeledGraph()

        for building in buildings:
            if building.short_name in self._short_to_long:
                logger.warning(
                    f"Duplicate building '{building.short_name}'; keeping the last entry"
                )
            self._short_to_long[building.short_name] = building.long_name
            self._locations[building.short_name] = building.location

        skipped = 0
        for p in paths:
            origin, destination = p.origin, p.destination
            self._graph.add_node(origin)
            self._graph.add_node(destination)
            if self._graph.edge_exists(origin, destination, p.distance):
                skipped += 1
                continue
            self._graph.add_edge(origin, destination, p.distance)

        if skipped:
            logger.debug(f"Ignored {skipped} duplicate path record(s)")
        logger.debug(
            f"Campus map ready: {len(self._short_to_long)} buildings, "
            f"{self._graph.size()} points, {self._graph.edge_count()} path segments"
        )

    @classmethod
    def from_files(
        cls,
        buildings_path: Union[str, FsPath],
        paths_path: Union[str, FsPath],
    ) -> CampusMap:
        """Build a campus map from the building and path data files."""
        from campusnav.campus.loader import load_buildings, load_paths

        return cls(load_buildings(buildings_path), load_paths(paths_path))

    @classmethod
    def from_yaml(cls, path: Union[str, FsPath]) -> CampusMap:
        """Build a campus map from a single YAML campus file."""
        from campusnav.campus.loader import load_campus_yaml

        buildings, paths = load_campus_yaml(path)
        return cls(buildings, paths)

    @property
    def graph(self) -> LabeledGraph[Point, float]:
        """LabeledGraph of walkway points with distances as labels."""
        return self._graph

    def short_name_exists(self, short_name: str) -> bool:
        """Return True if ``short_name`` names a building on this campus."""
        return short_name in self._short_to_long

    def long_name_for_short(self, short_name: str) -> str:
        """Return the long name of a building.

        Raises:
            ValueError: If the short name does not exist.
        """
        if not self.short_name_exists(short_name):
            raise ValueError(f"Unknown building '{short_name}'.")
        return self._short_to_long[short_name]

    def building_names(self) -> Dict[str, str]:
        """Return a copy of the short name to long name mapping."""
        return dict(self._short_to_long)

    def location_of(self, short_name: str) -> Point:
        """Return the entrance location of a building.

        Raises:
            ValueError: If the short name does not exist.
        """
        if not self.short_name_exists(short_name):
            raise ValueError(f"Unknown building '{short_name}'.")
        return self._locations[short_name]

    def find_shortest_path(
        self, start_short_name: str, end_short_name: str
    ) -> Optional[Path[Point]]:
        """Find the shortest walking route between two buildings.

        Args:
            start_short_name: Short name of the starting building.
            end_short_name: Short name of the destination building.

        Returns:
            The shortest Path between the building locations, or None if the
            walkways do not connect them.

        Raises:
            ValueError: If either name is empty or not a building short name.
        """
        for name in (start_short_name, end_short_name):
            if not name or not self.short_name_exists(name):
                raise ValueError(f"Unknown building '{name}'.")
        src = self._locations[start_short_name]
        dst = self._locations[end_short_name]
        return shortest_path(self._graph, src, dst)
