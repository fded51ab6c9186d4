"""Tests for practice session request schemas."""

import datetime

import pytest
from pydantic import ValidationError

from app.schemas.practice_session import (
    BIG_MISS_TYPES,
    FOCUS_TAGS,
    LOCATION_TYPES,
    BigMiss,
    LocationType,
    PracticeSessionCreate,
    PracticeSessionUpdate,
    SessionRecord,
)


class TestConstants:
    def test_location_types(self):
        assert LOCATION_TYPES == ["sim", "range", "course"]

    def test_big_miss_types(self):
        assert BIG_MISS_TYPES == ["left", "right", "thin", "fat", "heel", "toe", "none"]

    def test_focus_tags_unique(self):
        assert len(FOCUS_TAGS) == len(set(FOCUS_TAGS)) == 17


class TestPracticeSessionCreate:
    def test_minimal(self):
        data = PracticeSessionCreate(session_date="2024-05-01")
        assert data.session_date == datetime.date(2024, 5, 1)
        assert data.face_control_rating is None
        assert data.tags is None

    def test_form_blank_values(self):
        data = PracticeSessionCreate(session_date="2024-05-01", location_type="", big_miss="",
                                     contact_rating="")
        assert data.location_type is None
        assert data.big_miss is None
        assert data.contact_rating is None

    def test_enums_case_insensitive(self):
        data = PracticeSessionCreate(session_date="2024-05-01", location_type="Range", big_miss="TOE")
        assert data.location_type is LocationType.RANGE
        assert data.big_miss is BigMiss.TOE

    @pytest.mark.parametrize("rating", [0, 6, -2])
    def test_rating_out_of_range(self, rating):
        with pytest.raises(ValidationError):
            PracticeSessionCreate(session_date="2024-05-01", confidence_rating=rating)

    def test_unknown_location(self):
        with pytest.raises(ValidationError):
            PracticeSessionCreate(session_date="2024-05-01", location_type="garage")

    def test_missing_date(self):
        with pytest.raises(ValidationError):
            PracticeSessionCreate()

    def test_tags_deduplicated(self):
        data = PracticeSessionCreate(session_date="2024-05-01", tags=["Driver", " Driver", "", "Putting"])
        assert data.tags == ["Driver", "Putting"]


class TestPracticeSessionUpdate:
    def test_only_sent_fields(self):
        data = PracticeSessionUpdate(notes="windy")
        assert data.model_dump(exclude_unset=True) == {"notes": "windy"}

    def test_rating_validated(self):
        with pytest.raises(ValidationError):
            PracticeSessionUpdate(contact_rating=7)

    def test_form_blank_values_clear_fields(self):
        data = PracticeSessionUpdate(location_type="", big_miss=" ", confidence_rating="")
        assert data.model_dump(exclude_unset=True) == {
            "location_type": None,
            "big_miss": None,
            "confidence_rating": None,
        }

    def test_enums_case_insensitive(self):
        data = PracticeSessionUpdate(location_type="Course", big_miss="Heel")
        assert data.location_type is LocationType.COURSE
        assert data.big_miss is BigMiss.HEEL


class TestSessionRecord:
    def test_keeps_raw_values(self):
        record = SessionRecord(session_date="not a date", face_control_rating=42)
        assert record.session_date == "not a date"
        assert record.face_control_rating == 42

    def test_keeps_raw_tags(self):
        record = SessionRecord(session_date="2024-05-01", tags=["Driver", 7])
        assert record.tags == ["Driver", 7]

    def test_frozen(self):
        record = SessionRecord(session_date="2024-05-01")
        with pytest.raises(ValidationError):
            record.session_date = "2024-05-02"
