# -*- coding: utf-8 -*-
"""GeoJSON export for routes and footprints.

Routes become LineString features and footprints Polygon features, built
with the ``geojson`` library and serialized with ``orjson``. Coordinates
follow RFC 7946 axis order (longitude, latitude).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING
from typing import Any

import orjson
from geojson import Feature
from geojson import FeatureCollection
from geojson import LineString
from geojson import Point
from geojson import Polygon

from campus_nav.constants import GEOJSON_DISTANCE_PRECISION
from campus_nav.constants import JSON_ENCODING

if TYPE_CHECKING:
    from pathlib import Path

    from campus_nav.footprints import Footprint
    from campus_nav.routing.models import RouteResult

logger = logging.getLogger(__name__)


def route_to_feature(result: RouteResult) -> Feature:
    """Convert a route to a GeoJSON Feature.

    A found route with two or more points is a LineString; a single-point
    route (start and end on the same node) is a Point; a missing route has
    no geometry.
    """
    properties: dict[str, Any] = {
        "type": "route",
        "status": result.status.value,
        "distance_m": round(result.distance_m, GEOJSON_DISTANCE_PRECISION),
    }

    coordinates = [point.as_tuple() for point in result.points]
    match len(coordinates):
        case 0:
            geometry = None
        case 1:
            geometry = Point(coordinates[0])
        case _:
            geometry = LineString(coordinates)

    return Feature(geometry=geometry, properties=properties)


def footprint_to_feature(footprint: Footprint) -> Feature:
    """Convert a footprint to a GeoJSON Polygon Feature (closed ring)."""
    ring = [point.as_tuple() for point in footprint.ring]
    if ring and ring[0] != ring[-1]:
        ring.append(ring[0])

    properties: dict[str, Any] = dict(footprint.properties)
    properties["name"] = footprint.name
    properties["is_building"] = footprint.is_building
    if (centroid := footprint.centroid) is not None:
        properties["centroid"] = list(centroid.as_tuple())

    return Feature(geometry=Polygon([ring]), properties=properties)


def footprints_to_geojson(footprints: Iterable[Footprint]) -> FeatureCollection:
    return FeatureCollection([footprint_to_feature(fp) for fp in footprints])


def dumps(obj: Any, *, minify: bool = False) -> str:
    """Serialize a GeoJSON object to text."""
    opts = 0 if minify else orjson.OPT_INDENT_2
    return orjson.dumps(obj, option=opts).decode(JSON_ENCODING)


def route_to_geojson(
    result: RouteResult,
    output_path: Path | None = None,
    *,
    minify: bool = False,
) -> str:
    """Serialize a route Feature, optionally writing it to ``output_path``.

    Returns:
        GeoJSON string
    """
    json_str = dumps(route_to_feature(result), minify=minify)

    if output_path:
        output_path.write_text(json_str, encoding=JSON_ENCODING)
        logger.debug("Route written to %s", output_path)

    return json_str
