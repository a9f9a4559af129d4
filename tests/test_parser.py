# -*- coding: utf-8 -*-
"""Tests for the GeoJSON feature parser."""

from pathlib import Path

import orjson
import pytest

from campus_nav.enums import GeometryKind
from campus_nav.enums import Severity
from campus_nav.features.parser import GeoJSONFeatureParser
from campus_nav.features.parser import parse_feature_collection
from campus_nav.geo_utils import GeoPoint
from tests.conftest import EAST
from tests.conftest import MIDDLE
from tests.conftest import WEST
from tests.conftest import line_feature
from tests.conftest import square


def feature_collection(*features) -> dict:
    return {"type": "FeatureCollection", "features": list(features)}


def polygon_feature(*rings, **properties) -> dict:
    return {
        "type": "Feature",
        "geometry": {"type": "Polygon", "coordinates": list(rings)},
        "properties": properties,
    }


class TestParseDict:
    """Tests for GeoJSONFeatureParser.parse_dict."""

    def test_line_string(self):
        parser = GeoJSONFeatureParser()
        records = parser.parse_dict(
            feature_collection(line_feature(WEST, MIDDLE, EAST, name="Main walk"))
        )

        assert len(records) == 1
        record = records[0]
        assert record.kind is GeometryKind.LINE_STRING
        assert len(record.rings) == 1
        assert record.rings[0][0] == GeoPoint(latitude=WEST[1], longitude=WEST[0])
        assert record.point_count == 3
        assert record.properties == {"name": "Main walk"}
        assert parser.errors == []

    def test_polygon_keeps_outer_ring_only(self):
        outer = square(0, 0, 10, 10)
        hole = square(2, 2, 4, 4)
        records = GeoJSONFeatureParser().parse_dict(
            feature_collection(polygon_feature(outer, hole, building="yes"))
        )

        assert len(records) == 1
        assert records[0].kind is GeometryKind.POLYGON
        assert len(records[0].rings) == 1
        assert len(records[0].rings[0]) == len(outer)

    def test_multi_polygon_one_ring_per_polygon(self):
        feature = {
            "type": "Feature",
            "geometry": {
                "type": "MultiPolygon",
                "coordinates": [
                    [square(0, 0, 1, 1), square(0.2, 0.2, 0.4, 0.4)],
                    [square(5, 5, 6, 6)],
                ],
            },
        }
        records = GeoJSONFeatureParser().parse_dict(feature_collection(feature))

        assert len(records) == 1
        assert records[0].kind is GeometryKind.MULTI_POLYGON
        assert len(records[0].rings) == 2
        assert records[0].rings[1][0] == GeoPoint(latitude=5, longitude=5)

    def test_feature_index(self, campus_paths):
        records = GeoJSONFeatureParser().parse_dict(campus_paths)
        assert [r.feature_index for r in records] == [0, 1, 2, 3, 5]

    def test_missing_features(self):
        parser = GeoJSONFeatureParser()
        assert parser.parse_dict({"type": "FeatureCollection"}) == []
        assert parser.errors == []

    def test_features_as_tuple(self):
        parser = GeoJSONFeatureParser()
        records = parser.parse_dict(
            {"features": (line_feature(WEST, MIDDLE), line_feature(MIDDLE, EAST))}
        )
        assert [r.feature_index for r in records] == [0, 1]
        assert parser.errors == []

    @pytest.mark.parametrize("document", [{"features": {}}, {"features": "x"}, []])
    def test_invalid_features(self, document):
        parser = GeoJSONFeatureParser()
        assert parser.parse_dict(document) == []
        assert len(parser.errors) == 1
        assert parser.errors[0].severity is Severity.WARNING

    def test_unsupported_geometry_silently_ignored(self):
        parser = GeoJSONFeatureParser()
        records = parser.parse_dict(
            feature_collection(
                {"type": "Feature", "geometry": {"type": "Point", "coordinates": WEST}},
                {
                    "type": "Feature",
                    "geometry": {
                        "type": "MultiLineString",
                        "coordinates": [[WEST, EAST]],
                    },
                },
            )
        )
        assert records == []
        assert parser.errors == []

    @pytest.mark.parametrize(
        "bad_feature",
        [
            None,
            "Feature",
            {"type": "Feature"},
            {"type": "Feature", "geometry": None},
            {"type": "Feature", "geometry": {"coordinates": [WEST, EAST]}},
            {"type": "Feature", "geometry": {"type": 7, "coordinates": [WEST, EAST]}},
            {"type": "Feature", "geometry": {"type": "LineString"}},
            {"type": "Feature", "geometry": {"type": "LineString", "coordinates": 3}},
            line_feature(WEST, "oops"),
            line_feature(WEST, [200.0, 0.0]),
            line_feature(WEST, [0.0]),
            polygon_feature(),
            polygon_feature("not a ring"),
            {
                "type": "Feature",
                "geometry": {"type": "MultiPolygon", "coordinates": [[], []]},
            },
        ],
    )
    def test_malformed_feature_dropped(self, bad_feature):
        parser = GeoJSONFeatureParser()
        records = parser.parse_dict(
            feature_collection(
                line_feature(WEST, MIDDLE),
                bad_feature,
                line_feature(MIDDLE, EAST),
            ),
            source="paths.geojson",
        )

        assert [r.feature_index for r in records] == [0, 2]
        assert len(parser.errors) == 1
        issue = parser.errors[0]
        assert issue.severity is Severity.WARNING
        assert issue.location.source == "paths.geojson"
        assert issue.location.index == 1

    def test_empty_line_string_kept(self):
        records = GeoJSONFeatureParser().parse_dict(
            feature_collection(line_feature())
        )
        assert len(records) == 1
        assert records[0].rings == [[]]

    def test_three_dimensional_positions(self):
        records = GeoJSONFeatureParser().parse_dict(
            feature_collection(line_feature([1.0, 2.0, 100.0], [3.0, 4.0, 110.0]))
        )
        assert records[0].rings[0] == [
            GeoPoint(latitude=2.0, longitude=1.0),
            GeoPoint(latitude=4.0, longitude=3.0),
        ]


class TestProperties:
    """Tests for property extraction."""

    def test_scalars_kept_nested_dropped(self):
        feature = line_feature(
            WEST,
            EAST,
            name="Main walk",
            building="yes",
            covered=True,
            floors=2,
            width=1.5,
            note=None,
            tags=["a", "b"],
            extra={"k": "v"},
        )
        records = GeoJSONFeatureParser().parse_dict(feature_collection(feature))
        assert records[0].properties == {
            "name": "Main walk",
            "building": "yes",
            "covered": True,
            "floors": 2,
            "width": 1.5,
            "note": None,
        }

    @pytest.mark.parametrize("properties", [None, "x", [1, 2]])
    def test_non_object_properties(self, properties):
        feature = line_feature(WEST, EAST)
        feature["properties"] = properties
        records = GeoJSONFeatureParser().parse_dict(feature_collection(feature))
        assert records[0].properties == {}

    def test_get_property(self):
        records = GeoJSONFeatureParser().parse_dict(
            feature_collection(line_feature(WEST, EAST, name="Main walk"))
        )
        assert records[0].get_property("name") == "Main walk"
        assert records[0].get_property("missing") is None
        assert records[0].get_property("missing", "x") == "x"


class TestParseString:
    """Tests for text and file input."""

    def test_parse_string(self, campus_paths):
        text = orjson.dumps(campus_paths).decode("utf-8")
        records = GeoJSONFeatureParser().parse_string(text)
        assert len(records) == 5

    def test_parse_bytes(self, campus_paths):
        records = GeoJSONFeatureParser().parse_string(orjson.dumps(campus_paths))
        assert len(records) == 5

    @pytest.mark.parametrize("text", ["", "{", "not json", "{'features': []}"])
    def test_invalid_json(self, text):
        parser = GeoJSONFeatureParser()
        assert parser.parse_string(text, source="broken.geojson") == []
        assert len(parser.errors) == 1
        assert parser.errors[0].severity is Severity.ERROR
        assert parser.errors[0].location.index is None

    def test_parse_file(self, paths_file):
        records = GeoJSONFeatureParser().parse_file(paths_file)
        assert len(records) == 5

    def test_parse_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            GeoJSONFeatureParser().parse_file(tmp_path / "missing.geojson")

    def test_errors_accumulate(self):
        parser = GeoJSONFeatureParser()
        parser.parse_string("nope")
        parser.parse_dict(feature_collection(None))
        assert len(parser.errors) == 2


class TestParseFeatureCollection:
    """Tests for the parse_feature_collection helper."""

    def test_accepts_dict_text_and_bytes(self, campus_paths):
        from_dict = parse_feature_collection(campus_paths)
        from_text = parse_feature_collection(orjson.dumps(campus_paths).decode())
        from_bytes = parse_feature_collection(orjson.dumps(campus_paths))
        assert from_dict == from_text == from_bytes
