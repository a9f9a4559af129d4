# -*- coding: utf-8 -*-
"""GeoJSON feature collection parsing."""

from campus_nav.features.models import GeometryRecord
from campus_nav.features.parser import GeoJSONFeatureParser
from campus_nav.features.parser import parse_feature_collection

__all__ = [
    "GeoJSONFeatureParser",
    "GeometryRecord",
    "parse_feature_collection",
]
