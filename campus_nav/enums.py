# -*- coding: utf-8 -*-
"""Enumerations used by the campus_nav library.

This module contains the geometry kinds understood by the feature parser,
the outcome of a route query, and the severity of parse issues.
"""

from enum import Enum


class GeometryKind(str, Enum):
    """GeoJSON geometry kinds handled by the engine.

    Attributes:
        LINE_STRING: A walkable path, consumed by the routing graph builder
        POLYGON: A single footprint (outer ring only)
        MULTI_POLYGON: Several footprints sharing the same properties
        IGNORED: Any other geometry type; dropped by the parser
    """

    LINE_STRING = "LineString"
    POLYGON = "Polygon"
    MULTI_POLYGON = "MultiPolygon"
    IGNORED = "ignored"

    @classmethod
    def from_geojson_type(cls, value: object) -> "GeometryKind":
        """Map a GeoJSON ``geometry.type`` value to a kind.

        Args:
            value: Raw ``type`` value from the document (any JSON scalar)

        Returns:
            The matching GeometryKind, or IGNORED if unsupported
        """
        mapping = {
            cls.LINE_STRING.value: cls.LINE_STRING,
            cls.POLYGON.value: cls.POLYGON,
            cls.MULTI_POLYGON.value: cls.MULTI_POLYGON,
        }
        if not isinstance(value, str):
            return cls.IGNORED
        return mapping.get(value, cls.IGNORED)

    @property
    def is_areal(self) -> bool:
        """True for kinds whose rings describe closed footprints."""
        return self in (GeometryKind.POLYGON, GeometryKind.MULTI_POLYGON)


class RouteStatus(str, Enum):
    """Outcome of a shortest-path query.

    Attributes:
        FOUND: A path was found
        NO_DATA: The graph has no nodes, so nothing could be anchored
        UNREACHABLE: Start and end anchor to different connected components
    """

    FOUND = "found"
    NO_DATA = "no_data"
    UNREACHABLE = "unreachable"


class Severity(str, Enum):
    """Severity level for parse issues.

    Attributes:
        ERROR: The whole document could not be used
        WARNING: A single feature was dropped
    """

    ERROR = "error"
    WARNING = "warning"
