"""Command line entry point of the route planner."""

from __future__ import annotations

import sys
from pathlib import Path

from .planner import RoutePlanner
from .route_model import RouteModel

_DEFAULT_MAP = "../map.osm"


def read_file(path) -> bytes | None:
    """Return the contents of ``path``, or ``None`` if it is unreadable or empty."""
    try:
        data = Path(path).read_bytes()
    except OSError:
        return None
    return data or None


def _read_floats(stream, count: int) -> list[float]:
    values: list[float] = []
    for line in stream:
        for token in line.split():
            values.append(float(token))
            if len(values) == count:
                return values
    raise ValueError(f"expected {count} numbers on standard input")


def main(argv=None) -> int:
    """Plan a route on an OpenStreetMap file and print its length."""
    args = sys.argv[1:] if argv is None else list(argv)
    osm_file = ""
    if args:
        tokens = iter(args)
        for arg in tokens:
            if arg == "-f":
                osm_file = next(tokens, osm_file)
    else:
        print("To specify a map file use the following format: ")
        print("Usage: [executable] [-f filename.osm]")
        osm_file = _DEFAULT_MAP

    osm_data = b""
    if osm_file:
        print(f"Reading OpenStreetMap data from the following file: {osm_file}")
        data = read_file(osm_file)
        if data is None:
            print("Failed to read.")
        else:
            osm_data = data

    try:
        start_x, start_y, end_x, end_y = _read_floats(sys.stdin, 4)
        model = RouteModel(osm_data)
        planner = RoutePlanner(model, start_x, start_y, end_x, end_y)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    planner.a_star_search()
    print(f"Distance: {planner.distance:g} meters. ")
    return 0


if __name__ == "__main__":
    sys.exit(main())