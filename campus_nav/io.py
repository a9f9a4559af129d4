# -*- coding: utf-8 -*-
"""File I/O operations for campus data.

The functions in this module are thin wrappers around CampusNavInterface:

    from campus_nav.io import load_router

    router = load_router(Path("campus_paths.geojson"))
"""

from pathlib import Path

from campus_nav.constants import NODE_KEY_PRECISION
from campus_nav.features.models import GeometryRecord
from campus_nav.footprints import FootprintIndex
from campus_nav.interface import CampusNavInterface
from campus_nav.interface import OfflineRouter

__all__ = [
    "load_footprints",
    "load_router",
    "read_feature_collection",
]


def read_feature_collection(path: Path) -> list[GeometryRecord]:
    """Read a GeoJSON feature collection file.

    Args:
        path: Path to the .geojson file

    Returns:
        List of parsed geometry records (malformed features dropped)

    Raises:
        FileNotFoundError: If the file doesn't exist
    """
    return CampusNavInterface.load_records(path)


def load_router(
    path: Path,
    *,
    precision: int = NODE_KEY_PRECISION,
) -> OfflineRouter:
    """Load a path network and build its router.

    Args:
        path: Path to a GeoJSON file of LineString paths
        precision: Decimal places used for node keys

    Returns:
        Router over the file's path network
    """
    return CampusNavInterface.load_router(path, precision=precision)


def load_footprints(path: Path) -> FootprintIndex:
    """Load building footprints from a GeoJSON file."""
    return CampusNavInterface.load_footprints(path)
