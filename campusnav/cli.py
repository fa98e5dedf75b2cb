"""Command-line interface for campusnav."""

from __future__ import annotations

import argparse
import logging
import sys
from importlib import resources
from pathlib import Path
from typing import Callable, List, Optional, TextIO

from campusnav.campus.model import CampusMap, Point
from campusnav.config import CAMPUS_CONFIG
from campusnav.logging import get_logger, set_global_log_level
from campusnav.paths.path import Path as RoutePath

logger = get_logger(__name__)

MENU = """Menu:
\tr to find a route
\tb to see a list of all buildings
\tm to see the menu
\tq to quit
"""


def _format_distance(value: float) -> str:
    """Return a distance with the configured number of decimals."""
    return f"{value:.{CAMPUS_CONFIG.display_precision}f}"


def _format_point(point: Point) -> str:
    precision = CAMPUS_CONFIG.display_precision
    return f"({point.x:.{precision}f}, {point.y:.{precision}f})"


def format_buildings(campus: CampusMap) -> str:
    """Return one ``SHORT: Long Name`` line per building, sorted by short name."""
    names = campus.building_names()
    return "\n".join(f"\t{short}: {names[short]}" for short in sorted(names))


def format_route(
    campus: CampusMap, start: str, end: str, path: Optional[RoutePath[Point]]
) -> str:
    """Render a route found between two buildings.

    Args:
        campus: Campus the route belongs to.
        start: Short name of the start building.
        end: Short name of the end building.
        path: The shortest path, or None when the buildings are not connected.

    Returns:
        Multi-line route description.
    """
    if path is None:
        return f"There is no path from {start} to {end}."
    lines = [
        f"Path from {campus.long_name_for_short(start)} "
        f"to {campus.long_name_for_short(end)}:"
    ]
    for seg in path:
        lines.append(
            f"\tWalk {_format_distance(seg.cost)} feet from "
            f"{_format_point(seg.start)} to {_format_point(seg.end)}"
        )
    lines.append(f"Total distance: {_format_distance(path.cost)} feet")
    return "\n".join(lines)


def _load_campus(args: argparse.Namespace) -> CampusMap:
    """Build the campus selected by the global data options."""
    if args.buildings or args.paths:
        if not (args.buildings and args.paths):
            raise ValueError("--buildings and --paths must be given together")
        logger.debug(f"Loading campus from {args.buildings} and {args.paths}")
        return CampusMap.from_files(args.buildings, args.paths)
    if args.campus:
        logger.debug(f"Loading campus from {args.campus}")
        return CampusMap.from_yaml(args.campus)
    logger.debug("Loading packaged sample campus")
    with resources.as_file(
        resources.files("campusnav.data").joinpath("sample_campus.yaml")
    ) as sample:
        return CampusMap.from_yaml(sample)


def _route(campus: CampusMap, start: str, end: str, out: TextIO) -> int:
    """Print the route between two buildings; return an exit status."""
    for name in (start, end):
        if not campus.short_name_exists(name):
            print(f"Unknown building: {name}", file=out)
            return 1
    path = campus.find_shortest_path(start, end)
    print(format_route(campus, start, end, path), file=out)
    return 0


def run_interactive(
    campus: CampusMap,
    input_fn: Optional[Callable[[str], str]] = None,
    out: Optional[TextIO] = None,
) -> None:
    """Run the prompt loop until ``q`` or end of input.

    Commands: ``r`` find a route, ``b`` list buildings, ``m`` show the menu,
    ``q`` quit. Anything else prints an error followed by the menu.
    """
    input_fn = input_fn or input
    out = out or sys.stdout
    print(MENU, file=out)
    while True:
        try:
            command = input_fn("Enter an option ('m' to see the menu): ").strip()
        except EOFError:
            print(file=out)
            return
        if command == "q":
            return
        if command == "m":
            print(MENU, file=out)
        elif command == "b":
            print("Buildings:", file=out)
            print(format_buildings(campus), file=out)
        elif command == "r":
            try:
                start = input_fn("Abbreviated name of starting building: ").strip()
                end = input_fn("Abbreviated name of ending building: ").strip()
            except EOFError:
                print(file=out)
                return
            _route(campus, start, end, out)
        elif command:
            print(f"Unknown option: {command}", file=out)
            print(MENU, file=out)
        print(file=out)


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``campusnav`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="campusnav",
        description="Find shortest walking routes between campus buildings.",
    )

    # Global options
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )
    parser.add_argument(
        "--campus",
        type=Path,
        default=None,
        help="YAML campus file (default: packaged sample campus)",
    )
    parser.add_argument(
        "--buildings", type=Path, default=None, help="Tab-separated buildings file"
    )
    parser.add_argument(
        "--paths", type=Path, default=None, help="Tab-separated paths file"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{buildings,route,interactive}",
        help="Available commands",
    )

    subparsers.add_parser("buildings", help="List all buildings")

    route_parser = subparsers.add_parser(
        "route", help="Find the shortest route between two buildings"
    )
    route_parser.add_argument("start", help="Short name of the starting building")
    route_parser.add_argument("end", help="Short name of the ending building")

    subparsers.add_parser("interactive", help="Start the interactive prompt")

    effective_args = sys.argv[1:] if argv is None else argv

    # If no arguments are provided, show help and exit cleanly
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    try:
        campus = _load_campus(args)
    except (OSError, ValueError) as exc:
        logger.error(f"Failed to load campus data: {exc}")
        raise SystemExit(1) from exc

    if args.command == "buildings":
        print("Buildings:")
        print(format_buildings(campus))
    elif args.command == "route":
        status = _route(campus, args.start, args.end, sys.stdout)
        if status:
            raise SystemExit(status)
    elif args.command == "interactive":
        run_interactive(campus)


if __name__ == "__main__":
    main()
