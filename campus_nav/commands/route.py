# -*- coding: utf-8 -*-
"""Route command.

Builds the routing graph of a GeoJSON path network and prints the
shortest walking route between two points as a GeoJSON Feature.
"""

import argparse
import logging
from pathlib import Path

from campus_nav.errors import InvalidCoordinateError
from campus_nav.geojson import route_to_geojson
from campus_nav.io import load_router
from campus_nav.validation import parse_lat_lon

logger = logging.getLogger(__name__)


def route(args: list[str]) -> int:
    """Entry point for the route command."""
    parser = argparse.ArgumentParser(
        prog="campus_nav route",
        description="Compute the shortest walking route over a GeoJSON path network",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  campus_nav route -i paths.geojson --start=-35.0010,-71.2300 --end=-35.0040,-71.2270
  campus_nav route -i paths.geojson --start=LAT,LON --end=LAT,LON -o route.geojson

Output:
  A GeoJSON Feature with a LineString geometry (longitude, latitude) and
  the properties `status` and `distance_m`.

Notes:
  - Pass negative coordinates as --start=LAT,LON / --end=LAT,LON
  - Start and end are snapped to the nearest node of the path network
  - Exit status is 1 when no route exists between the two points; the
    output file is then left untouched
""",
    )

    parser.add_argument(
        "-i",
        "--input-file",
        type=Path,
        required=True,
        help="GeoJSON file with LineString path features",
    )
    parser.add_argument(
        "-s",
        "--start",
        required=True,
        help="Start point as LAT,LON",
    )
    parser.add_argument(
        "-e",
        "--end",
        required=True,
        help="End point as LAT,LON",
    )
    parser.add_argument(
        "-o",
        "--output-file",
        type=Path,
        default=None,
        help="Output GeoJSON file path (prints to stdout if not specified)",
    )
    parser.add_argument(
        "--minify",
        action="store_true",
        help="Omit indentation in the output",
    )

    parsed_args = parser.parse_args(args)

    if not parsed_args.input_file.exists():
        logger.error("Error: Input file not found: %s", parsed_args.input_file)
        return 1

    try:
        start = parse_lat_lon(parsed_args.start)
        end = parse_lat_lon(parsed_args.end)
    except InvalidCoordinateError:
        logger.exception("Invalid coordinate")
        return 1

    try:
        router = load_router(parsed_args.input_file)
        result = router.route(start, end)

        if not result.found:
            logger.error("No route found (%s)", result.status.value)
            if parsed_args.output_file is None:
                print(route_to_geojson(result, minify=parsed_args.minify))  # noqa: T201
            return 1

        output = route_to_geojson(
            result,
            output_path=parsed_args.output_file,
            minify=parsed_args.minify,
        )

    except Exception:
        logger.exception("Unknown Problem ...")
        return 1

    if parsed_args.output_file is None:
        print(output)  # noqa: T201
    else:
        logger.info("Route written to %s", parsed_args.output_file)

    return 0
