# -*- coding: utf-8 -*-
"""Campus Navigation Library.

An offline spatial engine for campus maps: shortest walking routes over a
GeoJSON path network and point-in-polygon hit-testing of building
footprints.

Usage:
    # Build a router from a path network
    from campus_nav import load_router
    router = load_router(Path("campus_paths.geojson"))

    path = router.shortest_path(
        GeoPoint(latitude=-35.0010, longitude=-71.2300),
        GeoPoint(latitude=-35.0040, longitude=-71.2270),
    )

    # Find the building under a tap
    from campus_nav import load_footprints
    building = load_footprints(Path("campus_zones.geojson")).hit_test(tap)
"""

__version__ = "0.1.0"

# Constants
from campus_nav.constants import EARTH_RADIUS_M
from campus_nav.constants import JSON_ENCODING
from campus_nav.constants import NODE_KEY_PRECISION
from campus_nav.constants import RAY_CAST_EPSILON

# Enums
from campus_nav.enums import GeometryKind
from campus_nav.enums import RouteStatus
from campus_nav.enums import Severity

# Errors
from campus_nav.errors import CampusNavException
from campus_nav.errors import FeatureLocation
from campus_nav.errors import FeatureParseIssue
from campus_nav.errors import GraphFrozenError
from campus_nav.errors import InvalidCoordinateError
from campus_nav.features.models import GeometryRecord
from campus_nav.features.parser import GeoJSONFeatureParser
from campus_nav.features.parser import parse_feature_collection
from campus_nav.footprints import Footprint
from campus_nav.footprints import FootprintIndex
from campus_nav.geo_utils import GeoPoint
from campus_nav.geo_utils import distance
from campus_nav.geo_utils import path_length
from campus_nav.interface import CampusNavInterface
from campus_nav.interface import OfflineRouter
from campus_nav.io import load_footprints
from campus_nav.io import load_router
from campus_nav.io import read_feature_collection
from campus_nav.polygon import point_in_polygon
from campus_nav.routing.builder import build_routing_graph
from campus_nav.routing.dijkstra import DijkstraSolver
from campus_nav.routing.models import RouteResult
from campus_nav.routing.models import RoutingGraph

__all__ = [
    # Constants
    "EARTH_RADIUS_M",
    "JSON_ENCODING",
    "NODE_KEY_PRECISION",
    "RAY_CAST_EPSILON",
    # Errors
    "CampusNavException",
    # I/O
    "CampusNavInterface",
    # Routing
    "DijkstraSolver",
    "FeatureLocation",
    "FeatureParseIssue",
    # Footprints
    "Footprint",
    "FootprintIndex",
    # Parsing
    "GeoJSONFeatureParser",
    # Geometry
    "GeoPoint",
    # Enums
    "GeometryKind",
    "GeometryRecord",
    "GraphFrozenError",
    "InvalidCoordinateError",
    "OfflineRouter",
    "RouteResult",
    "RouteStatus",
    "RoutingGraph",
    "Severity",
    "build_routing_graph",
    "distance",
    "load_footprints",
    "load_router",
    "parse_feature_collection",
    "path_length",
    "point_in_polygon",
    "read_feature_collection",
]
