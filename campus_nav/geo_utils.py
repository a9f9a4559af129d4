# -*- coding: utf-8 -*-
"""Geometry primitives: geographic points and the distance metric.

Every distance computed by the library (edge weights, nearest-node search,
route length) goes through :func:`distance`, so the metric stays consistent
and Dijkstra can rely on the triangle inequality.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from numbers import Real
from typing import Any

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import ValidationError
from pydantic import field_validator
from pydantic_extra_types.coordinate import Latitude  # noqa: TC002
from pydantic_extra_types.coordinate import Longitude  # noqa: TC002

from campus_nav.constants import EARTH_RADIUS_M
from campus_nav.constants import GEOJSON_COORDINATE_PRECISION
from campus_nav.errors import InvalidCoordinateError


class GeoPoint(BaseModel):
    """A WGS84 latitude/longitude pair.

    Immutable and hashable; two points are equal when their coordinates are.
    """

    model_config = ConfigDict(frozen=True)

    latitude: Latitude
    longitude: Longitude

    @field_validator("latitude", "longitude", mode="after")
    @classmethod
    def as_float(cls, value: float) -> float:
        """Store coordinates as plain floats whatever the input number type."""
        return float(value)

    def __str__(self) -> str:
        return f"({self.latitude}, {self.longitude})"

    def as_tuple(self) -> tuple[float, float]:
        """Return ``(longitude, latitude)``, the RFC 7946 axis order."""
        return (
            round(self.longitude, GEOJSON_COORDINATE_PRECISION),
            round(self.latitude, GEOJSON_COORDINATE_PRECISION),
        )

    @classmethod
    def from_geojson(cls, coordinate: Any) -> GeoPoint:
        """Build a point from a GeoJSON position (``[lon, lat, ...]``).

        Extra dimensions (elevation) are ignored.

        Args:
            coordinate: Raw position taken from a ``coordinates`` array

        Returns:
            The parsed point

        Raises:
            InvalidCoordinateError: If the position is not a sequence of at
                least two numbers, or is out of the WGS84 range
        """
        if not isinstance(coordinate, (list, tuple)) or len(coordinate) < 2:  # noqa: PLR2004
            raise InvalidCoordinateError(f"Invalid GeoJSON position: {coordinate!r}")

        lon, lat = coordinate[0], coordinate[1]
        for value in (lon, lat):
            if isinstance(value, bool) or not isinstance(value, Real):
                raise InvalidCoordinateError(
                    f"Non-numeric GeoJSON position: {coordinate!r}"
                )
            if not math.isfinite(value):
                raise InvalidCoordinateError(
                    f"Non-finite GeoJSON position: {coordinate!r}"
                )

        try:
            return cls(latitude=lat, longitude=lon)
        except ValidationError as e:
            raise InvalidCoordinateError(
                f"Out of range GeoJSON position: {coordinate!r}"
            ) from e


def distance(a: GeoPoint, b: GeoPoint, *, radius: float = EARTH_RADIUS_M) -> float:
    """Great-circle distance in meters using the haversine formula."""
    lat1, lon1 = math.radians(a.latitude), math.radians(a.longitude)
    lat2, lon2 = math.radians(b.latitude), math.radians(b.longitude)
    dlat = lat2 - lat1
    dlon = lon2 - lon1
    h = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
    # Rounding can push h marginally above 1 for antipodal points
    return 2 * radius * math.asin(math.sqrt(min(1.0, h)))


def path_length(points: Sequence[GeoPoint]) -> float:
    """Sum of the distances between consecutive points (0 for < 2 points)."""
    return sum(distance(a, b) for a, b in zip(points, points[1:]))


def ring_centroid(ring: Sequence[GeoPoint]) -> GeoPoint | None:
    """Vertex average of a ring.

    This is not the area centroid; it is the point the map uses as the
    routing destination of a footprint.

    Returns:
        The average point, or None for an empty ring
    """
    if not ring:
        return None
    return GeoPoint(
        latitude=sum(p.latitude for p in ring) / len(ring),
        longitude=sum(p.longitude for p in ring) / len(ring),
    )
