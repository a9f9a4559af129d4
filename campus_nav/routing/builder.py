# -*- coding: utf-8 -*-
"""Build a routing graph from LineString features.

Node identity is derived from coordinates, so paths from different
features that share an endpoint collapse into a single junction node and
the order in which features are visited doesn't change the graph.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from campus_nav.constants import NODE_KEY_PRECISION
from campus_nav.enums import GeometryKind
from campus_nav.features.models import GeometryRecord
from campus_nav.geo_utils import GeoPoint
from campus_nav.routing.models import Node
from campus_nav.routing.models import RoutingGraph

logger = logging.getLogger(__name__)


def node_key(point: GeoPoint, precision: int = NODE_KEY_PRECISION) -> str:
    """Deterministic ``"lat,lon"`` key of a point at fixed precision."""
    return f"{point.latitude:.{precision}f},{point.longitude:.{precision}f}"


def add_polyline(
    graph: RoutingGraph,
    points: Iterable[GeoPoint],
    *,
    precision: int = NODE_KEY_PRECISION,
) -> int:
    """Add a walkable polyline to ``graph``.

    Consecutive points are joined by a bidirectional edge pair. Repeated
    consecutive points (same key) don't produce self-loops.

    Returns:
        Number of segments added
    """
    segments = 0
    previous: Node | None = None
    for point in points:
        current = graph.add_node(node_key(point, precision), point)
        if previous is not None and previous.key != current.key:
            graph.add_edge(previous, current)
            segments += 1
        previous = current
    return segments


def build_routing_graph(
    records: Iterable[GeometryRecord],
    *,
    precision: int = NODE_KEY_PRECISION,
) -> RoutingGraph:
    """Build a frozen routing graph from parsed geometry records.

    Only LineString records are used; every other kind contributes
    nothing, as do empty coordinate arrays.

    Args:
        records: Parsed records (typically a whole feature collection)
        precision: Decimal places used for node keys

    Returns:
        The read-only routing graph
    """
    graph = RoutingGraph()
    line_count = 0
    segment_count = 0

    for record in records:
        match record.kind:
            case GeometryKind.LINE_STRING:
                line_count += 1
                for ring in record.rings:
                    segment_count += add_polyline(graph, ring, precision=precision)

            case GeometryKind.POLYGON | GeometryKind.MULTI_POLYGON | GeometryKind.IGNORED:
                continue

    logger.info(
        "Routing graph built with %d nodes and %d segments from %d paths.",
        len(graph),
        segment_count,
        line_count,
    )
    return graph.freeze()
