# -*- coding: utf-8 -*-
"""Building footprints and tap hit-testing.

Polygon and MultiPolygon features become :class:`Footprint` objects (one
per outer ring). Footprints tagged ``building=yes`` are hit-testable and
routable; a building without a ``name`` property gets a numbered label so
the UI always has something to show.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from collections.abc import Iterator

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

from campus_nav.constants import BUILDING_PROPERTY
from campus_nav.constants import BUILDING_PROPERTY_VALUE
from campus_nav.constants import NAME_PROPERTY
from campus_nav.constants import UNNAMED_BUILDING_LABEL
from campus_nav.features.models import GeometryRecord  # noqa: TC001
from campus_nav.features.models import PropertyValue  # noqa: TC001
from campus_nav.geo_utils import GeoPoint
from campus_nav.geo_utils import ring_centroid
from campus_nav.polygon import point_in_polygon

logger = logging.getLogger(__name__)


class Footprint(BaseModel):
    """The outline of an area on the map.

    Attributes:
        name: Display name (None for unnamed non-building areas)
        ring: Outer ring of the outline
        properties: Properties of the source feature
        is_building: True when the source feature is tagged ``building=yes``
        feature_index: Position of the source feature in its collection
    """

    model_config = ConfigDict(frozen=True)

    name: str | None = None
    ring: list[GeoPoint] = Field(default_factory=list)
    properties: dict[str, PropertyValue] = Field(default_factory=dict)
    is_building: bool = False
    feature_index: int = 0

    @property
    def centroid(self) -> GeoPoint | None:
        """Vertex average of the ring, used as the routing destination."""
        return ring_centroid(self.ring)

    def contains(self, point: GeoPoint) -> bool:
        return point_in_polygon(point, self.ring)


class FootprintIndex:
    """Ordered collection of footprints with point lookup."""

    def __init__(self, footprints: Iterable[Footprint] = ()) -> None:
        self._footprints: list[Footprint] = list(footprints)

    def __len__(self) -> int:
        return len(self._footprints)

    def __iter__(self) -> Iterator[Footprint]:
        return iter(self._footprints)

    @property
    def buildings(self) -> list[Footprint]:
        return [fp for fp in self._footprints if fp.is_building]

    @classmethod
    def from_records(
        cls,
        records: Iterable[GeometryRecord],
        *,
        unnamed_label: str = UNNAMED_BUILDING_LABEL,
    ) -> FootprintIndex:
        """Build an index from parsed geometry records.

        Non-areal records are skipped. Unnamed buildings are labelled
        ``"<unnamed_label> N"`` with N counting unnamed building features in
        document order; every ring of a MultiPolygon shares its label.
        """
        footprints: list[Footprint] = []
        unnamed_counter = 1

        for record in records:
            if not record.kind.is_areal:
                continue

            is_building = (
                record.get_property(BUILDING_PROPERTY) == BUILDING_PROPERTY_VALUE
            )

            name = record.get_property(NAME_PROPERTY)
            if not isinstance(name, str) or not name.strip():
                name = None

            if is_building and name is None:
                name = f"{unnamed_label} {unnamed_counter}"
                unnamed_counter += 1

            footprints.extend(
                Footprint(
                    name=name,
                    ring=ring,
                    properties=record.properties,
                    is_building=is_building,
                    feature_index=record.feature_index,
                )
                for ring in record.rings
            )

        logger.debug("Indexed %d footprints", len(footprints))
        return cls(footprints)

    def hit_test(
        self,
        point: GeoPoint,
        *,
        buildings_only: bool = True,
    ) -> Footprint | None:
        """Return the first footprint containing ``point``.

        Args:
            point: Tapped location
            buildings_only: Ignore footprints not tagged as buildings

        Returns:
            The matching footprint, or None if the tap hit nothing
        """
        for footprint in self._footprints:
            if buildings_only and not footprint.is_building:
                continue
            if footprint.contains(point):
                return footprint
        return None

    def find(self, name: str) -> Footprint | None:
        """Return the first footprint with the given display name."""
        for footprint in self._footprints:
            if footprint.name == name:
                return footprint
        return None
