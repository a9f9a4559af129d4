# -*- coding: utf-8 -*-
"""Parser for GeoJSON feature collections.

The parser turns a feature collection (file, text or already-decoded
dictionary) into a list of :class:`GeometryRecord`. It never fails on bad
content: a malformed feature is dropped and reported in ``errors``, an
unsupported geometry type is skipped silently, and a document without a
``features`` array simply yields no records.
"""

import logging
from pathlib import Path
from typing import Any

import orjson

from campus_nav.enums import GeometryKind
from campus_nav.enums import Severity
from campus_nav.errors import FeatureLocation
from campus_nav.errors import FeatureParseIssue
from campus_nav.errors import InvalidCoordinateError
from campus_nav.features.models import GeometryRecord
from campus_nav.features.models import PropertyValue
from campus_nav.geo_utils import GeoPoint

logger = logging.getLogger(__name__)


class MalformedFeatureError(Exception):
    """Raised internally when a feature cannot be turned into a record."""


class GeoJSONFeatureParser:
    """Parser for GeoJSON feature collections.

    Errors are collected rather than thrown, allowing partial parsing
    of malformed documents.

    Attributes:
        errors: List of parsing errors and warnings encountered
    """

    def __init__(self) -> None:
        """Initialize a new parser with empty error list."""
        self.errors: list[FeatureParseIssue] = []
        self._source: str = "<dict>"

    def _add_issue(
        self,
        severity: Severity,
        message: str,
        index: int | None = None,
    ) -> None:
        issue = FeatureParseIssue(
            severity=severity,
            message=message,
            location=FeatureLocation(source=self._source, index=index),
        )
        self.errors.append(issue)
        logger.warning("%s", issue)

    def _add_error(self, message: str, index: int | None = None) -> None:
        """Add an error to the error list."""
        self._add_issue(Severity.ERROR, message, index)

    def _add_warning(self, message: str, index: int | None = None) -> None:
        """Add a warning to the error list."""
        self._add_issue(Severity.WARNING, message, index)

    # -------------------------------------------------------------------------
    # Entry points
    # -------------------------------------------------------------------------

    def parse_file(self, path: Path) -> list[GeometryRecord]:
        """Parse a GeoJSON file.

        Args:
            path: Path to the .geojson / .json file

        Returns:
            List of parsed geometry records

        Raises:
            FileNotFoundError: If the file doesn't exist
        """
        return self.parse_string(path.read_bytes(), source=str(path))

    def parse_string(
        self,
        data: str | bytes,
        source: str = "<string>",
    ) -> list[GeometryRecord]:
        """Parse a feature collection from its JSON text.

        Args:
            data: GeoJSON document as text or bytes
            source: Source identifier for error messages

        Returns:
            List of parsed geometry records (empty if the text isn't JSON)
        """
        self._source = source
        try:
            document = orjson.loads(data)
        except orjson.JSONDecodeError as e:
            self._add_error(f"Invalid JSON: {e}")
            return []

        return self.parse_dict(document, source=source)

    def parse_dict(
        self,
        document: Any,
        source: str = "<dict>",
    ) -> list[GeometryRecord]:
        """Parse an already-decoded feature collection.

        Args:
            document: Decoded GeoJSON document
            source: Source identifier for error messages

        Returns:
            List of parsed geometry records
        """
        self._source = source

        if not isinstance(document, dict):
            self._add_warning("Document is not a JSON object")
            return []

        features = document.get("features")
        if features is None:
            logger.debug("No `features` array in %s", source)
            return []

        if not isinstance(features, (list, tuple)):
            self._add_warning("`features` is not an array")
            return []

        records: list[GeometryRecord] = []
        for index, feature in enumerate(features):
            if (record := self.parse_feature(feature, index)) is not None:
                records.append(record)

        logger.debug(
            "Parsed %d of %d features from %s", len(records), len(features), source
        )
        return records

    def parse_feature(self, feature: Any, index: int = 0) -> GeometryRecord | None:
        """Parse a single feature.

        Args:
            feature: Decoded GeoJSON feature
            index: Position of the feature in its collection

        Returns:
            The geometry record, or None if the feature was dropped
        """
        try:
            if not isinstance(feature, dict):
                raise MalformedFeatureError("Feature is not a JSON object")

            geometry = feature.get("geometry")
            if not isinstance(geometry, dict):
                raise MalformedFeatureError("Feature has no geometry")

            raw_type = geometry.get("type")
            if not isinstance(raw_type, str):
                raise MalformedFeatureError("Geometry has no type")

            kind = GeometryKind.from_geojson_type(raw_type)
            if kind is GeometryKind.IGNORED:
                logger.debug("Ignoring `%s` geometry (feature %d)", raw_type, index)
                return None

            coordinates = geometry.get("coordinates")
            if not isinstance(coordinates, list):
                raise MalformedFeatureError(f"{kind.value} has no coordinates")

            rings = self._extract_rings(kind, coordinates)

        except (MalformedFeatureError, InvalidCoordinateError) as e:
            self._add_warning(f"Skipping feature: {e}", index)
            return None

        return GeometryRecord(
            kind=kind,
            rings=rings,
            properties=self._extract_properties(feature.get("properties")),
            feature_index=index,
        )

    # -------------------------------------------------------------------------
    # Geometry helpers
    # -------------------------------------------------------------------------

    @staticmethod
    def _parse_positions(positions: list[Any]) -> list[GeoPoint]:
        return [GeoPoint.from_geojson(position) for position in positions]

    @classmethod
    def _outer_ring(cls, polygon: Any) -> list[GeoPoint]:
        """Return the outer ring of polygon coordinates, ignoring holes."""
        if not isinstance(polygon, list) or not polygon:
            raise MalformedFeatureError("Polygon has no outer ring")

        outer = polygon[0]
        if not isinstance(outer, list):
            raise MalformedFeatureError("Polygon outer ring is not an array")

        return cls._parse_positions(outer)

    @classmethod
    def _extract_rings(
        cls,
        kind: GeometryKind,
        coordinates: list[Any],
    ) -> list[list[GeoPoint]]:
        match kind:
            case GeometryKind.LINE_STRING:
                return [cls._parse_positions(coordinates)]

            case GeometryKind.POLYGON:
                return [cls._outer_ring(coordinates)]

            case GeometryKind.MULTI_POLYGON:
                return [cls._outer_ring(polygon) for polygon in coordinates]

            case _:
                raise MalformedFeatureError(f"Unsupported geometry: {kind.value}")

    @staticmethod
    def _extract_properties(raw: Any) -> dict[str, PropertyValue]:
        """Keep the scalar properties of a feature; nested values are dropped."""
        if not isinstance(raw, dict):
            return {}

        return {
            str(key): value
            for key, value in raw.items()
            if value is None or isinstance(value, (str, bool, int, float))
        }


def parse_feature_collection(
    document: dict[str, Any] | str | bytes,
    *,
    source: str | None = None,
) -> list[GeometryRecord]:
    """Parse a feature collection given as text, bytes or a decoded dict.

    Issues are logged and otherwise discarded; use
    :class:`GeoJSONFeatureParser` directly to inspect them.
    """
    parser = GeoJSONFeatureParser()
    if isinstance(document, (str, bytes)):
        return parser.parse_string(document, source=source or "<string>")
    return parser.parse_dict(document, source=source or "<dict>")
