"""Campus data loading.

Two sources are supported:

* A pair of delimited text files (tab-separated by default)::

    buildings: shortName  longName  x  y
    paths:     x1  y1  x2  y2  distance

  The first row of each file is a header and is skipped.

* A single YAML file::

    buildings:
      - {short_name: CSE, long_name: Paul G. Allen Center, x: 2259.7, y: 1715.5}
    paths:
      - {x1: 2259.7, y1: 1715.5, x2: 2315.1, y2: 1660.2, distance: 78.3}
"""

from __future__ import annotations

import csv
import json
import math
from importlib import resources
from pathlib import Path
from typing import Any, Dict, List, Sequence, Tuple, Union

import jsonschema
import yaml

from campusnav.campus.model import CampusBuilding, CampusPath
from campusnav.config import CAMPUS_CONFIG
from campusnav.exceptions import CampusDataError
from campusnav.logging import get_logger

logger = get_logger(__name__)

PathLike = Union[str, Path]

BUILDING_FIELDS = ("short_name", "long_name", "x", "y")
PATH_FIELDS = ("x1", "y1", "x2", "y2", "distance")


def _to_float(value: Any, what: str, where: str) -> float:
    if isinstance(value, bool):
        raise CampusDataError(f"{where}: {what} '{value}' is not a number")
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise CampusDataError(f"{where}: {what} '{value}' is not a number") from exc
    if not math.isfinite(number):
        raise CampusDataError(f"{where}: {what} '{value}' is not finite")
    return number


def _make_building(values: Sequence[Any], where: str) -> CampusBuilding:
    short_name, long_name, x, y = values
    short_name = str(short_name).strip() if short_name is not None else ""
    long_name = str(long_name).strip() if long_name is not None else ""
    if not short_name:
        raise CampusDataError(f"{where}: building short name is empty")
    return CampusBuilding(
        short_name=short_name,
        long_name=long_name or short_name,
        x=_to_float(x, "x", where),
        y=_to_float(y, "y", where),
    )


def _make_path(values: Sequence[Any], where: str) -> CampusPath:
    x1, y1, x2, y2, distance = (
        _to_float(v, name, where) for v, name in zip(values, PATH_FIELDS)
    )
    if distance < 0:
        raise CampusDataError(f"{where}: distance {distance} is negative")
    return CampusPath(x1=x1, y1=y1, x2=x2, y2=y2, distance=distance)


def _read_rows(path: PathLike, width: int) -> List[Tuple[str, List[str]]]:
    """Return ``(location, fields)`` for every data row of a delimited file."""
    rows: List[Tuple[str, List[str]]] = []
    with open(path, "r", encoding="utf-8", newline="") as fh:
        reader = csv.reader(fh, delimiter=CAMPUS_CONFIG.delimiter)
        for line_no, fields in enumerate(reader, start=1):
            if line_no == 1 and CAMPUS_CONFIG.has_header:
                continue
            if not fields or all(not f.strip() for f in fields):
                continue
            where = f"{path}:{line_no}"
            if len(fields) != width:
                raise CampusDataError(
                    f"{where}: expected {width} fields, found {len(fields)}"
                )
            rows.append((where, fields))
    return rows


def load_buildings(path: PathLike) -> List[CampusBuilding]:
    """Parse the buildings file.

    Raises:
        CampusDataError: On a malformed row.
        OSError: If the file cannot be read.
    """
    buildings = [
        _make_building(fields, where)
        for where, fields in _read_rows(path, len(BUILDING_FIELDS))
    ]
    logger.debug(f"Loaded {len(buildings)} buildings from {path}")
    return buildings


def load_paths(path: PathLike) -> List[CampusPath]:
    """Parse the paths file.

    Raises:
        CampusDataError: On a malformed row or a negative distance.
        OSError: If the file cannot be read.
    """
    paths = [
        _make_path(fields, where) for where, fields in _read_rows(path, len(PATH_FIELDS))
    ]
    logger.debug(f"Loaded {len(paths)} path segments from {path}")
    return paths


def _schema_location(error: jsonschema.ValidationError) -> str:
    """Render a validation error path as ``buildings[0].x``."""
    where = ""
    for part in error.absolute_path:
        if isinstance(part, int):
            where += f"[{part}]"
        elif where:
            where += f".{part}"
        else:
            where = str(part)
    return where or "top level"


def _load_schema() -> Dict[str, Any]:
    with (
        resources.files("campusnav.schemas")
        .joinpath("campus.json")
        .open("r", encoding="utf-8")
    ) as f:
        return json.load(f)


def _validate(data: Dict[str, Any], source: str) -> None:
    """Validate a loaded campus document against the packaged schema.

    Early shape checks give clearer messages than the schema for the most
    common mistakes; everything else is left to ``jsonschema``.
    """
    recognized_keys = {"buildings", "paths"}
    extra = set(data.keys()) - recognized_keys
    if extra:
        raise CampusDataError(
            f"{source}: unrecognized top-level key(s): {', '.join(sorted(map(str, extra)))}. "
            f"Allowed keys are {sorted(recognized_keys)}"
        )
    for section in sorted(recognized_keys):
        entries = data.get(section)
        if entries is None:
            continue
        if not isinstance(entries, list):
            raise CampusDataError(f"{source}: '{section}' must be a list")
        for idx, entry in enumerate(entries):
            if not isinstance(entry, dict):
                raise CampusDataError(f"{source}: {section}[{idx}] must be a mapping")

    try:
        jsonschema.validate(data, _load_schema())
    except jsonschema.ValidationError as exc:
        raise CampusDataError(
            f"{source}: {_schema_location(exc)}: {exc.message}"
        ) from exc


def parse_campus_yaml(
    yaml_str: str, source: str = "<string>"
) -> Tuple[List[CampusBuilding], List[CampusPath]]:
    """Parse a YAML campus description.

    Returns:
        Buildings and paths, in file order.

    Raises:
        CampusDataError: If the document is not a mapping, has unknown
            top-level keys, or contains malformed entries.
    """
    try:
        data = yaml.safe_load(yaml_str)
    except yaml.YAMLError as exc:
        raise CampusDataError(f"{source}: invalid YAML: {exc}") from exc
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise CampusDataError(f"{source}: top level must be a mapping")

    _validate(data, source)

    buildings = [
        _make_building(
            [entry[f] for f in BUILDING_FIELDS], f"{source}: buildings[{idx}]"
        )
        for idx, entry in enumerate(data.get("buildings") or [])
    ]
    paths = [
        _make_path([entry[f] for f in PATH_FIELDS], f"{source}: paths[{idx}]")
        for idx, entry in enumerate(data.get("paths") or [])
    ]
    return buildings, paths


def load_campus_yaml(path: PathLike) -> Tuple[List[CampusBuilding], List[CampusPath]]:
    """Read and parse a YAML campus file."""
    text = Path(path).read_text(encoding="utf-8")
    buildings, paths = parse_campus_yaml(text, source=str(path))
    logger.debug(
        f"Loaded {len(buildings)} buildings and {len(paths)} path segments from {path}"
    )
    return buildings, paths
