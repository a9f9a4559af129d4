# -*- coding: utf-8 -*-
"""Constants used throughout the campus_nav library.

This module centralizes all constant values to ensure consistency
and avoid magic numbers/strings scattered across the codebase.
"""

# -----------------------------------------------------------------------------
# File Encodings
# -----------------------------------------------------------------------------

#: Encoding used for JSON / GeoJSON files
JSON_ENCODING = "utf-8"

# -----------------------------------------------------------------------------
# Geodesy
# -----------------------------------------------------------------------------

#: Sphere radius used by the haversine distance (WGS84 equatorial radius, meters)
EARTH_RADIUS_M: float = 6_378_137.0

# -----------------------------------------------------------------------------
# Precision
# -----------------------------------------------------------------------------

#: Decimal precision for GeoJSON coordinates (WGS84)
GEOJSON_COORDINATE_PRECISION: int = 7

#: Decimal places used when deriving a node key from its coordinates.
#: Two coordinates that round to the same key are the same graph node.
NODE_KEY_PRECISION: int = 7

#: Decimal precision for distances reported in GeoJSON output (meters)
GEOJSON_DISTANCE_PRECISION: int = 2

# -----------------------------------------------------------------------------
# Point-in-Polygon
# -----------------------------------------------------------------------------

#: Latitude nudge applied when a ray passes exactly through a vertex latitude
RAY_CAST_EPSILON: float = 1e-8

#: Minimum number of vertices for a ring to enclose any area
MIN_RING_VERTICES: int = 3

# -----------------------------------------------------------------------------
# Footprints
# -----------------------------------------------------------------------------

#: Property key / value marking a footprint as a building
BUILDING_PROPERTY: str = "building"
BUILDING_PROPERTY_VALUE: str = "yes"

#: Property key holding the display name of a footprint
NAME_PROPERTY: str = "name"

#: Label used for buildings without a name (followed by a 1-based counter)
UNNAMED_BUILDING_LABEL: str = "Building"
