# -*- coding: utf-8 -*-
"""Typed geometry records extracted from a GeoJSON feature collection.

A record keeps only what the engine needs from a feature: its geometry
kind, its coordinate rings and its flat property map.
"""

from __future__ import annotations

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

from campus_nav.enums import GeometryKind
from campus_nav.geo_utils import GeoPoint

#: Scalar property values carried over from the source feature
PropertyValue = str | bool | int | float | None


class GeometryRecord(BaseModel):
    """One parsed feature.

    Attributes:
        kind: Geometry kind of the source feature
        rings: One point sequence for LineString and Polygon (outer ring),
            one per sub-polygon outer ring for MultiPolygon
        properties: Scalar properties of the source feature
        feature_index: Position of the feature in the source document
    """

    model_config = ConfigDict(frozen=True)

    kind: GeometryKind
    rings: list[list[GeoPoint]] = Field(default_factory=list)
    properties: dict[str, PropertyValue] = Field(default_factory=dict)
    feature_index: int = 0

    @property
    def point_count(self) -> int:
        """Total number of points over all rings."""
        return sum(len(ring) for ring in self.rings)

    def get_property(self, key: str, default: PropertyValue = None) -> PropertyValue:
        return self.properties.get(key, default)
