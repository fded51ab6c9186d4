"""Tests for lenient record interpretation."""

import datetime

import pytest

from app.analytics.records import categorical_value, coerce_rating, parse_session_date, record_tags
from app.schemas.practice_session import SessionRecord


class TestParseSessionDate:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("2024-01-10", datetime.date(2024, 1, 10)),
            (" 2024-01-10 ", datetime.date(2024, 1, 10)),
            ("2024-01-10T18:45:00+00:00", datetime.date(2024, 1, 10)),
            (datetime.date(2024, 1, 10), datetime.date(2024, 1, 10)),
            (datetime.datetime(2024, 1, 10, 7, 30), datetime.date(2024, 1, 10)),
        ],
    )
    def test_valid(self, value, expected):
        assert parse_session_date(value) == expected

    @pytest.mark.parametrize("value", [None, "", "yesterday", "2024-13-01", "10/01/2024", 20240110])
    def test_invalid(self, value):
        assert parse_session_date(value) is None


class TestCoerceRating:
    @pytest.mark.parametrize("value", [1, 3, 5, 4.0])
    def test_valid(self, value):
        assert coerce_rating(value) == int(value)

    @pytest.mark.parametrize("value", [None, 0, 6, 2.5, "4", False, [3]])
    def test_invalid(self, value):
        assert coerce_rating(value) is None


class TestCategoricalValue:
    def test_normalised(self):
        assert categorical_value(SessionRecord(location_type=" Course "), "location_type") == "course"

    def test_blank_is_absent(self):
        assert categorical_value(SessionRecord(big_miss="  "), "big_miss") is None

    def test_unknown_field_is_absent(self):
        assert categorical_value(SessionRecord(), "weather") is None


class TestRecordTags:
    def test_distinct_in_order(self):
        record = SessionRecord(tags=["Putting", "", "Driver", "Putting"])
        assert record_tags(record) == ["Putting", "Driver"]

    def test_non_string_labels_dropped(self):
        assert record_tags(SessionRecord(tags=["Driver", 7, None])) == ["Driver"]

    @pytest.mark.parametrize("value", [None, "Driver", 7, {"Driver": 1}])
    def test_non_list_gives_no_tags(self, value):
        assert record_tags(SessionRecord(tags=value)) == []
