# -*- coding: utf-8 -*-
"""Pytest configuration and fixtures.

Provides small campus-like feature collections: a walkable path network
and a set of building footprints, as dictionaries and as files on disk.
"""

from __future__ import annotations

import logging
from pathlib import Path

import orjson
import pytest

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


# =============================================================================
# Path network
# =============================================================================

# (lon, lat) positions, RFC 7946 order
WEST = [-71.2300, -35.0000]
MIDDLE = [-71.2290, -35.0000]
EAST = [-71.2280, -35.0000]
SOUTH_EAST = [-71.2280, -35.0010]
FAR_SOUTH_WEST = [-71.2300, -35.0020]
FAR_SOUTH_EAST = [-71.2280, -35.0020]
ISLAND_A = [-71.2200, -35.0100]
ISLAND_B = [-71.2190, -35.0100]


def line_feature(*coordinates: list[float], **properties) -> dict:
    return {
        "type": "Feature",
        "geometry": {"type": "LineString", "coordinates": list(coordinates)},
        "properties": properties,
    }


def square(min_lon: float, min_lat: float, max_lon: float, max_lat: float) -> list:
    """Closed outer ring of an axis-aligned rectangle."""
    return [
        [min_lon, min_lat],
        [max_lon, min_lat],
        [max_lon, max_lat],
        [min_lon, max_lat],
        [min_lon, min_lat],
    ]


@pytest.fixture
def campus_paths() -> dict:
    """Path network with a short and a long route, plus an isolated path.

    8 distinct coordinates, 7 segments.
    """
    return {
        "type": "FeatureCollection",
        "features": [
            line_feature(WEST, MIDDLE, EAST, name="Main walk"),
            line_feature(EAST, SOUTH_EAST),
            line_feature(WEST, FAR_SOUTH_WEST, FAR_SOUTH_EAST, SOUTH_EAST),
            line_feature(ISLAND_A, ISLAND_B, name="Island"),
            {
                "type": "Feature",
                "geometry": {"type": "Point", "coordinates": WEST},
                "properties": {"name": "Bus stop"},
            },
            {
                "type": "Feature",
                "geometry": {
                    "type": "Polygon",
                    "coordinates": [square(-71.23, -35.0008, -71.229, -35.0002)],
                },
                "properties": {"building": "yes"},
            },
        ],
    }


# =============================================================================
# Footprints
# =============================================================================


@pytest.fixture
def campus_zones() -> dict:
    """Footprints: two buildings, a parking lot and a two-part building."""
    return {
        "type": "FeatureCollection",
        "features": [
            {
                "type": "Feature",
                "geometry": {
                    "type": "Polygon",
                    "coordinates": [square(-71.2300, -35.0008, -71.2290, -35.0002)],
                },
                "properties": {"building": "yes", "name": "Library"},
            },
            {
                "type": "Feature",
                "geometry": {
                    "type": "Polygon",
                    "coordinates": [square(-71.2289, -35.0008, -71.2281, -35.0002)],
                },
                "properties": {"building": "yes", "name": "  "},
            },
            {
                "type": "Feature",
                "geometry": {
                    "type": "Polygon",
                    "coordinates": [square(-71.2300, -35.0030, -71.2280, -35.0022)],
                },
                "properties": {"amenity": "parking", "name": "Parking"},
            },
            {
                "type": "Feature",
                "geometry": {
                    "type": "MultiPolygon",
                    "coordinates": [
                        [square(-71.2270, -35.0005, -71.2265, -35.0000)],
                        [square(-71.2260, -35.0005, -71.2255, -35.0000)],
                    ],
                },
                "properties": {"building": "yes"},
            },
            line_feature(WEST, MIDDLE),
        ],
    }


# =============================================================================
# Files
# =============================================================================


def _write(path: Path, document: dict) -> Path:
    path.write_bytes(orjson.dumps(document))
    return path


@pytest.fixture
def paths_file(tmp_path: Path, campus_paths: dict) -> Path:
    return _write(tmp_path / "campus_paths.geojson", campus_paths)


@pytest.fixture
def zones_file(tmp_path: Path, campus_zones: dict) -> Path:
    return _write(tmp_path / "campus_zones.geojson", campus_zones)
