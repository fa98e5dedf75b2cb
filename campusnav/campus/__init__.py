"""Campus buildings, walkways and data loading."""

from campusnav.campus.loader import (
    load_buildings,
    load_campus_yaml,
    load_paths,
    parse_campus_yaml,
)
from campusnav.campus.model import CampusBuilding, CampusMap, CampusPath, Point

__all__ = [
    "CampusBuilding",
    "CampusMap",
    "CampusPath",
    "Point",
    "load_buildings",
    "load_campus_yaml",
    "load_paths",
    "parse_campus_yaml",
]
