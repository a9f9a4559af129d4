# -*- coding: utf-8 -*-
"""Unified interface for the campus_nav engine.

This module provides the primary entry point used by a UI layer:

1. A feature collection (file, text or dict) is parsed to records
2. LineString records are turned into a frozen routing graph, once
3. An :class:`OfflineRouter` answers path queries against that graph
4. Polygon records become a :class:`FootprintIndex` for tap hit-testing

Example:
    router = CampusNavInterface.load_router(Path("campus_paths.geojson"))
    zones = CampusNavInterface.load_footprints(Path("campus_zones.geojson"))

    building = zones.hit_test(tap)
    if building is not None:
        path = router.route_to_footprint(current_location, building)
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from campus_nav.constants import NODE_KEY_PRECISION
from campus_nav.enums import RouteStatus
from campus_nav.features.models import GeometryRecord
from campus_nav.features.parser import GeoJSONFeatureParser
from campus_nav.footprints import Footprint
from campus_nav.footprints import FootprintIndex
from campus_nav.geo_utils import GeoPoint
from campus_nav.polygon import point_in_polygon
from campus_nav.routing.builder import build_routing_graph
from campus_nav.routing.dijkstra import DijkstraSolver
from campus_nav.routing.models import Node
from campus_nav.routing.models import RouteResult
from campus_nav.routing.models import RoutingGraph

logger = logging.getLogger(__name__)

#: Anything a router or footprint index can be built from
FeatureSource = dict[str, Any] | str | bytes | Sequence[GeometryRecord]


class OfflineRouter:
    """Shortest-path engine over one walkable path network.

    The graph is built once, at construction, and is read-only afterwards.
    A router is safe to query from several threads at once.
    """

    def __init__(self, graph: RoutingGraph) -> None:
        self._graph = graph.freeze()
        self._solver = DijkstraSolver(self._graph)

    def __repr__(self) -> str:
        return f"OfflineRouter({self._graph!r})"

    @classmethod
    def from_records(
        cls,
        records: Sequence[GeometryRecord],
        *,
        precision: int = NODE_KEY_PRECISION,
    ) -> OfflineRouter:
        return cls(build_routing_graph(records, precision=precision))

    @property
    def graph(self) -> RoutingGraph:
        return self._graph

    @property
    def node_count(self) -> int:
        return len(self._graph)

    @property
    def edge_count(self) -> int:
        return self._graph.edge_count

    def nearest_node(self, point: GeoPoint) -> Node | None:
        return self._solver.nearest_node(point)

    def route(self, start: GeoPoint, end: GeoPoint) -> RouteResult:
        """Shortest path with its status and length, see ``DijkstraSolver``."""
        return self._solver.route(start, end)

    def shortest_path(self, start: GeoPoint, end: GeoPoint) -> list[GeoPoint] | None:
        """Shortest path between two points, or None when there is none."""
        return self._solver.shortest_path(start, end)

    def route_to_footprint(self, start: GeoPoint, footprint: Footprint) -> RouteResult:
        """Route from ``start`` to the centroid of a footprint."""
        if (destination := footprint.centroid) is None:
            logger.warning("Footprint `%s` has an empty outline", footprint.name)
            return RouteResult.not_found(RouteStatus.NO_DATA)
        return self.route(start, destination)

    @staticmethod
    def point_in_polygon(point: GeoPoint, ring: Sequence[GeoPoint]) -> bool:
        """Ray-casting containment test, usable without any graph."""
        return point_in_polygon(point, ring)


class CampusNavInterface:
    """Unified interface for loading campus data.

    - Reading: File/Text → Parser → GeometryRecord list
    - Routing: records → RoutingGraph → OfflineRouter
    - Hit-testing: records → FootprintIndex
    """

    @classmethod
    def load_records(cls, path: Path) -> list[GeometryRecord]:
        """Parse a GeoJSON file into records.

        Raises:
            FileNotFoundError: If the file doesn't exist
        """
        parser = GeoJSONFeatureParser()
        records = parser.parse_file(path)
        if parser.errors:
            logger.warning(
                "%d issue(s) while reading %s", len(parser.errors), path.name
            )
        return records

    @classmethod
    def to_records(cls, source: FeatureSource) -> list[GeometryRecord]:
        """Normalize any supported source to a list of records."""
        parser = GeoJSONFeatureParser()
        match source:
            case str() | bytes():
                return parser.parse_string(source)
            case dict():
                return parser.parse_dict(source)
            case _:
                return list(source)

    @classmethod
    def build_router(
        cls,
        source: FeatureSource,
        *,
        precision: int = NODE_KEY_PRECISION,
    ) -> OfflineRouter:
        """Build a router from a feature collection's LineString features."""
        return OfflineRouter.from_records(cls.to_records(source), precision=precision)

    @classmethod
    def build_footprints(cls, source: FeatureSource) -> FootprintIndex:
        return FootprintIndex.from_records(cls.to_records(source))

    @classmethod
    def load_router(
        cls,
        path: Path,
        *,
        precision: int = NODE_KEY_PRECISION,
    ) -> OfflineRouter:
        """Load a path network file and build its router."""
        return OfflineRouter.from_records(cls.load_records(path), precision=precision)

    @classmethod
    def load_footprints(cls, path: Path) -> FootprintIndex:
        """Load a footprint file and index its polygons."""
        return FootprintIndex.from_records(cls.load_records(path))
