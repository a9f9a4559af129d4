# -*- coding: utf-8 -*-
"""Validation utilities for user-supplied coordinates.

Command line tools take points as ``"LAT,LON"`` text; these helpers turn
that text into a :class:`GeoPoint` or explain why they can't.
"""

import re
from re import Pattern

from pydantic import ValidationError

from campus_nav.errors import InvalidCoordinateError
from campus_nav.geo_utils import GeoPoint

# Two decimal numbers separated by a comma, optional surrounding whitespace
LAT_LON_PATTERN: Pattern[str] = re.compile(
    r"^\s*([+-]?\d+(?:\.\d*)?|[+-]?\.\d+)\s*,\s*([+-]?\d+(?:\.\d*)?|[+-]?\.\d+)\s*$"
)


def is_valid_lat_lon(text: str) -> bool:
    """Check if ``text`` is a valid ``"LAT,LON"`` pair within WGS84 range.

    Args:
        text: Text to validate

    Returns:
        True if valid, False otherwise
    """
    try:
        parse_lat_lon(text)
    except InvalidCoordinateError:
        return False
    return True


def parse_lat_lon(text: str) -> GeoPoint:
    """Parse a ``"LAT,LON"`` pair.

    Args:
        text: Latitude and longitude in decimal degrees, comma separated

    Returns:
        The parsed point

    Raises:
        InvalidCoordinateError: If the text is malformed or out of range
    """
    if (match := LAT_LON_PATTERN.match(text)) is None:
        raise InvalidCoordinateError(f"Invalid coordinate (expected LAT,LON): {text!r}")

    try:
        return GeoPoint(latitude=float(match[1]), longitude=float(match[2]))
    except ValidationError as e:
        raise InvalidCoordinateError(f"Coordinate out of range: {text!r}") from e
