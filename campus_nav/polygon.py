# -*- coding: utf-8 -*-
"""Point-in-polygon classification by ray casting (even-odd rule).

A horizontal ray is cast from the query point towards increasing longitude
and the ring edges it crosses are counted; an odd count means the point is
inside. Longitude is the x axis and latitude the y axis.

When the query latitude equals the latitude of an edge endpoint the query is
nudged by ``RAY_CAST_EPSILON`` so a ray through a vertex is counted once.
Points within epsilon of a vertex latitude may therefore be misclassified;
behavior on self-intersecting rings is unspecified.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from campus_nav.constants import MIN_RING_VERTICES
from campus_nav.constants import RAY_CAST_EPSILON
from campus_nav.geo_utils import GeoPoint


def ray_crosses_segment(
    point: GeoPoint,
    a: GeoPoint,
    b: GeoPoint,
    *,
    epsilon: float = RAY_CAST_EPSILON,
) -> bool:
    """Check whether the eastward ray from ``point`` crosses segment ``a-b``.

    Args:
        point: Origin of the ray
        a: First vertex of the segment
        b: Second vertex of the segment
        epsilon: Latitude nudge used when the ray hits a vertex latitude

    Returns:
        True if the ray crosses the segment
    """
    # Ensure `a` is the lower vertex
    if a.latitude > b.latitude:
        a, b = b, a

    px, py = point.longitude, point.latitude
    ax, ay = a.longitude, a.latitude
    bx, by = b.longitude, b.latitude

    if py in (ay, by):
        py += epsilon

    # Above, below or to the right of the segment's bounding box
    if py > by or py < ay or px >= max(ax, bx):
        return False

    # Left of the bounding box, the ray must cross
    if px < min(ax, bx):
        return True

    # Inside the bounding box: compare the slope of the edge with the slope
    # from `a` to the query point
    edge_slope = (by - ay) / (bx - ax) if ax != bx else math.inf
    point_slope = (py - ay) / (px - ax) if ax != px else math.inf
    return point_slope >= edge_slope


def point_in_polygon(
    point: GeoPoint,
    ring: Sequence[GeoPoint],
    *,
    epsilon: float = RAY_CAST_EPSILON,
) -> bool:
    """Check if a point lies inside a ring of vertices.

    The ring is implicitly closed (the last vertex connects back to the
    first); an explicitly repeated closing vertex is harmless.

    Args:
        point: The point to classify
        ring: Ordered vertices of a simple polygon (convex or concave)
        epsilon: Latitude nudge, see :func:`ray_crosses_segment`

    Returns:
        True if the point is inside the polygon, False otherwise
    """
    if len(ring) < MIN_RING_VERTICES:
        return False

    crossings = 0
    for i, a in enumerate(ring):
        b = ring[(i + 1) % len(ring)]
        if ray_crosses_segment(point, a, b, epsilon=epsilon):
            crossings += 1

    return crossings % 2 == 1
