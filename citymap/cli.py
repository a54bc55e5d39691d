"""Command-line front-end for the city map.

Usage:
    citymap cities
    citymap roads
    citymap route "San Francisco" "Los Angeles"
    citymap mst
    citymap --data-dir ./maps route A B
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from .config import LOG_LEVELS, AppConfig, GraphConfig, get_config
from .domain.errors import CityMapError, CityNotFoundError, NoRouteFoundError
from .domain.models import Edge
from .services import MapService, build_map_service


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="citymap",
        description="Shortest paths and minimum spanning trees over a city map.",
    )
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=None,
        help="Load cities.csv and roads.csv from this directory instead of the built-in map.",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Logging level (default: CITYMAP_LOG_LEVEL or WARNING).",
    )

    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("cities", help="List city names in alphabetical order.")
    commands.add_parser("roads", help="List every road with its length.")
    route = commands.add_parser("route", help="Shortest path between two cities.")
    route.add_argument("start")
    route.add_argument("end")
    commands.add_parser("mst", help="Minimum spanning tree of the map.")
    return parser


def configure_logging(config: AppConfig, level: Optional[str] = None) -> None:
    logging.basicConfig(
        level=level or config.observability.level,
        format=config.observability.format,
    )


def format_edge(edge: Edge) -> str:
    return f"{edge.u.name} - {edge.v.name} ({edge.weight:.1f})"


def run_route(service: MapService, start: str, end: str) -> int:
    if start == end:
        print("Please select two different cities.")
        return 1
    try:
        result = service.route(start, end)
    except CityNotFoundError as e:
        print(f"Unknown city: {e.city}")
        return 1
    except NoRouteFoundError as e:
        print(f"No path found between {e.start} and {e.end}")
        return 1

    print(f"Shortest distance: {result.distance:.1f}")
    print(" -> ".join(result.cities))
    return 0


def run_mst(service: MapService) -> int:
    result = service.spanning_tree()
    print(f"MST Total Weight: {result.total_weight:.1f}")
    for edge in result.edges:
        print(format_edge(edge))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = get_config()
    except ValidationError as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        return 2
    if args.data_dir is not None:
        config = AppConfig(
            graph=GraphConfig(source="csv", data_dir=args.data_dir),
            observability=config.observability,
        )
    configure_logging(config, args.log_level)

    try:
        service = build_map_service(config)
        if args.command == "cities":
            for name in service.city_names():
                print(name)
            return 0
        if args.command == "roads":
            for edge in service.roads():
                print(format_edge(edge))
            return 0
        if args.command == "route":
            return run_route(service, args.start, args.end)
        return run_mst(service)
    except CityMapError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
