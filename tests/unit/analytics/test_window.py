"""Tests for the filter / window stage.

Pure unit tests on in-memory :class:`SessionRecord` lists.
"""

import datetime

import pytest
from pydantic import ValidationError

from app.analytics.window import (
    DEFAULT_WINDOW_CONFIG,
    WindowConfig,
    apply_window,
    filter_sessions,
    parse_window,
    select_sessions,
    sort_chronologically,
)
from app.schemas.practice_session import SessionRecord


def _rec(id, date, **kwargs) -> SessionRecord:
    return SessionRecord(id=id, session_date=date, **kwargs)


def _ids(records):
    return [r.id for r in records]


# ======================================================================
# parse_window / WindowConfig
# ======================================================================


class TestParseWindow:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (None, "all"),
            ("all", "all"),
            ("ALL", "all"),
            ("", "all"),
            (5, 5),
            ("5", 5),
            ("last 2", 2),
            ("Last 10", 10),
        ],
    )
    def test_valid(self, value, expected):
        assert parse_window(value) == expected

    @pytest.mark.parametrize("value", [0, -3, "0", "last", "ten", "-1", True, "2.5"])
    def test_invalid(self, value):
        with pytest.raises(ValueError):
            parse_window(value)


class TestWindowConfig:
    def test_defaults(self):
        cfg = WindowConfig()
        assert cfg.filter_field == "location_type"
        assert cfg.filter_value is None
        assert cfg.window == "all"
        assert cfg.rank_by == "tags"
        assert cfg.filter_active is False

    def test_window_string_parsed(self):
        assert WindowConfig(window="last 3").window == 3

    def test_invalid_window_rejected(self):
        with pytest.raises(ValidationError):
            WindowConfig(window=0)

    def test_invalid_rank_by_rejected(self):
        with pytest.raises(ValidationError):
            WindowConfig(rank_by="location_type")

    @pytest.mark.parametrize("value, active", [(None, False), ("all", False), ("All", False), ("range", True)])
    def test_filter_active(self, value, active):
        assert WindowConfig(filter_value=value).filter_active is active

    def test_default_config_singleton(self):
        assert DEFAULT_WINDOW_CONFIG.window == "all"


# ======================================================================
# filter_sessions
# ======================================================================


class TestFilterSessions:
    RECORDS = [
        _rec(1, "2024-01-01", location_type="range"),
        _rec(2, "2024-01-02", location_type="Sim"),
        _rec(3, "2024-01-03", location_type=None),
        _rec(4, "2024-01-04", location_type="RANGE "),
    ]

    def test_case_insensitive_match(self):
        assert _ids(filter_sessions(self.RECORDS, "location_type", "Range")) == [1, 4]

    def test_all_disables_filter(self):
        assert _ids(filter_sessions(self.RECORDS, "location_type", "all")) == [1, 2, 3, 4]

    def test_none_disables_filter(self):
        assert _ids(filter_sessions(self.RECORDS, "location_type", None)) == [1, 2, 3, 4]

    def test_absent_value_never_matches(self):
        assert _ids(filter_sessions(self.RECORDS, "location_type", "sim")) == [2]

    def test_value_not_in_data_gives_empty(self):
        assert filter_sessions(self.RECORDS, "location_type", "course") == []

    def test_unknown_attribute_gives_empty(self):
        assert filter_sessions(self.RECORDS, "weather", "sunny") == []

    def test_empty_input(self):
        assert filter_sessions([], "location_type", "range") == []

    def test_big_miss_filter(self):
        records = [_rec(1, "2024-01-01", big_miss="Left"), _rec(2, "2024-01-02", big_miss="right")]
        assert _ids(filter_sessions(records, "big_miss", "left")) == [1]


# ======================================================================
# sort_chronologically
# ======================================================================


class TestSortChronologically:
    def test_ascending_regardless_of_input_order(self):
        records = [_rec(1, "2024-03-01"), _rec(2, "2024-01-01"), _rec(3, "2024-02-01")]
        assert _ids(sort_chronologically(records)) == [2, 3, 1]

    def test_ties_keep_incoming_order(self):
        records = [_rec(1, "2024-01-05"), _rec(2, "2024-01-01"), _rec(3, "2024-01-05"), _rec(4, "2024-01-05")]
        assert _ids(sort_chronologically(records)) == [2, 1, 3, 4]

    def test_undated_placed_last(self):
        records = [_rec(1, "garbage"), _rec(2, "2024-02-01"), _rec(3, None), _rec(4, "2024-01-01")]
        assert _ids(sort_chronologically(records)) == [4, 2, 1, 3]

    def test_mixed_date_types(self):
        records = [_rec(1, datetime.date(2024, 2, 1)), _rec(2, "2024-01-15T09:00:00Z")]
        assert _ids(sort_chronologically(records)) == [2, 1]

    def test_does_not_mutate_input(self):
        records = [_rec(1, "2024-03-01"), _rec(2, "2024-01-01")]
        sort_chronologically(records)
        assert _ids(records) == [1, 2]


# ======================================================================
# apply_window
# ======================================================================


class TestApplyWindow:
    SORTED = [_rec(1, "2024-01-01"), _rec(2, "2024-01-02"), _rec(3, "2024-01-03")]

    def test_last_two_keeps_most_recent(self):
        assert _ids(apply_window(self.SORTED, 2)) == [2, 3]

    def test_all_keeps_everything(self):
        assert _ids(apply_window(self.SORTED, "all")) == [1, 2, 3]

    def test_window_larger_than_sequence(self):
        assert _ids(apply_window(self.SORTED, 10)) == [1, 2, 3]

    def test_idempotent(self):
        once = apply_window(self.SORTED, 2)
        assert _ids(apply_window(once, 2)) == _ids(once)

    def test_window_equal_to_length_unchanged(self):
        assert _ids(apply_window(self.SORTED, 3)) == [1, 2, 3]

    def test_fitting_sequence_keeps_undated(self):
        records = sort_chronologically([_rec(1, "2024-01-01"), _rec(2, "bad")])
        assert _ids(apply_window(records, 5)) == [1, 2]
        assert _ids(apply_window(records, 2)) == [1, 2]

    def test_idempotent_with_undated(self):
        records = self.SORTED + [_rec(4, None)]
        once = apply_window(records, 4)
        assert _ids(once) == [1, 2, 3, 4]
        assert _ids(apply_window(once, 4)) == _ids(once)

    def test_trimming_never_keeps_undated_over_dated(self):
        records = self.SORTED + [_rec(4, None)]
        assert _ids(apply_window(records, "all")) == [1, 2, 3, 4]
        assert _ids(apply_window(records, 2)) == [2, 3]
        assert _ids(apply_window(apply_window(records, 2), 2)) == [2, 3]

    def test_empty(self):
        assert apply_window([], 3) == []


# ======================================================================
# select_sessions
# ======================================================================


class TestSelectSessions:
    def test_filter_then_window(self):
        records = [
            _rec(1, "2024-01-04", location_type="range"),
            _rec(2, "2024-01-01", location_type="range"),
            _rec(3, "2024-01-05", location_type="sim"),
            _rec(4, "2024-01-03", location_type="range"),
        ]
        cfg = WindowConfig(filter_value="range", window=2)
        assert _ids(select_sessions(records, cfg)) == [4, 1]

    def test_default_config(self):
        records = [_rec(1, "2024-01-02"), _rec(2, "2024-01-01")]
        assert _ids(select_sessions(records)) == [2, 1]

    def test_empty_input(self):
        assert select_sessions([], WindowConfig(window=3)) == []
