"""
Practice session schemas.

Two families live here:

- **API models** (``PracticeSessionCreate`` / ``Update`` / ``Response``) —
  strict, validated at the HTTP boundary (ratings 1-5, known enums).
- **Engine input** (:class:`SessionRecord`) — a lenient snapshot of whatever
  the record store returned.  The analytics engine never trusts it: bad
  ratings and unparseable dates degrade to "absent" instead of raising.
"""

import datetime
from enum import Enum
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Canonical focus-category universe.  Order matters: it breaks ties when
# ranking under-practiced areas.
FOCUS_TAGS: list[str] = [
    "Driver",
    "Fairway Woods",
    "Hybrids",
    "Long Irons",
    "Mid Irons",
    "Short Irons",
    "Wedges",
    "Putting",
    "Chipping",
    "Bunker",
    "Range",
    "Simulator",
    "On-Course",
    "Lesson",
    "Fitness / Mobility",
    "Mental Game",
    "Notes / Review",
]

RATING_FIELDS = ["face_control_rating", "contact_rating", "confidence_rating", ]

RATING_MIN = 1
RATING_MAX = 5


class LocationType(str, Enum):
    SIM = "sim"
    RANGE = "range"
    COURSE = "course"


class BigMiss(str, Enum):
    LEFT = "left"
    RIGHT = "right"
    THIN = "thin"
    FAT = "fat"
    HEEL = "heel"
    TOE = "toe"
    NONE = "none"


LOCATION_TYPES = [loc.value for loc in LocationType]
BIG_MISS_TYPES = [miss.value for miss in BigMiss]


def _blank_to_none(value: Any) -> Any:
    # HTML selects submit "" for "Select one".
    if isinstance(value, str) and not value.strip():
        return None
    return value


def _normalise_tags(value: Optional[list[str]]) -> Optional[list[str]]:
    if value is None:
        return None
    seen: list[str] = []
    for tag in value:
        tag = tag.strip()
        if tag and tag not in seen:
            seen.append(tag)
    return seen


class PracticeSessionCreate(BaseModel):
    """Schema for logging a practice session."""

    session_date: datetime.date = Field(..., description="Calendar date of the session")
    location_type: Optional[LocationType] = Field(None, description="sim, range or course")
    clubs_focus: Optional[str] = Field(None, max_length=200)
    main_goal: Optional[str] = Field(None, max_length=500)
    big_miss: Optional[BigMiss] = Field(None, description="Dominant miss pattern for the session")
    face_control_rating: Optional[int] = Field(None, ge=RATING_MIN, le=RATING_MAX)
    contact_rating: Optional[int] = Field(None, ge=RATING_MIN, le=RATING_MAX)
    confidence_rating: Optional[int] = Field(None, ge=RATING_MIN, le=RATING_MAX)
    tags: Optional[list[str]] = Field(None, description="Focus categories practised (see FOCUS_TAGS)")
    notes: Optional[str] = Field(None, max_length=2000)

    @field_validator("location_type", "big_miss", mode="before")
    @classmethod
    def _enum_blank(cls, value: Any) -> Any:
        value = _blank_to_none(value)
        return value.lower() if isinstance(value, str) else value

    @field_validator("face_control_rating", "contact_rating", "confidence_rating", mode="before")
    @classmethod
    def _rating_blank(cls, value: Any) -> Any:
        return _blank_to_none(value)

    @field_validator("tags")
    @classmethod
    def _dedupe_tags(cls, value: Optional[list[str]]) -> Optional[list[str]]:
        return _normalise_tags(value)


class PracticeSessionUpdate(BaseModel):
    """Schema for updating a practice session.  Only sent fields change."""

    session_date: Optional[datetime.date] = None
    location_type: Optional[LocationType] = None
    clubs_focus: Optional[str] = Field(None, max_length=200)
    main_goal: Optional[str] = Field(None, max_length=500)
    big_miss: Optional[BigMiss] = None
    face_control_rating: Optional[int] = Field(None, ge=RATING_MIN, le=RATING_MAX)
    contact_rating: Optional[int] = Field(None, ge=RATING_MIN, le=RATING_MAX)
    confidence_rating: Optional[int] = Field(None, ge=RATING_MIN, le=RATING_MAX)
    tags: Optional[list[str]] = None
    notes: Optional[str] = Field(None, max_length=2000)

    @field_validator("location_type", "big_miss", mode="before")
    @classmethod
    def _enum_blank(cls, value: Any) -> Any:
        value = _blank_to_none(value)
        return value.lower() if isinstance(value, str) else value

    @field_validator("face_control_rating", "contact_rating", "confidence_rating", mode="before")
    @classmethod
    def _rating_blank(cls, value: Any) -> Any:
        return _blank_to_none(value)

    @field_validator("tags")
    @classmethod
    def _dedupe_tags(cls, value: Optional[list[str]]) -> Optional[list[str]]:
        return _normalise_tags(value)


class PracticeSessionResponse(BaseModel):
    """Schema for practice session in API responses."""

    id: int
    session_date: datetime.date
    location_type: Optional[str]
    clubs_focus: Optional[str]
    main_goal: Optional[str]
    big_miss: Optional[str]
    face_control_rating: Optional[int]
    contact_rating: Optional[int]
    confidence_rating: Optional[int]
    tags: list[str]
    notes: Optional[str]
    created_at: datetime.datetime
    updated_at: datetime.datetime

    class Config:
        from_attributes = True


class SessionRecord(BaseModel):
    """Immutable snapshot of one stored session, as seen by the analytics engine.

    Values are kept raw.  ``session_date`` may be a ``date``, an ISO string
    or garbage; ratings may be missing or out of range.  Interpretation
    happens in :mod:`app.analytics.records`.
    """

    model_config = ConfigDict(frozen=True, from_attributes=True, extra="ignore")

    id: Optional[Union[int, str]] = None
    session_date: Any = None
    location_type: Optional[str] = None
    clubs_focus: Optional[str] = None
    main_goal: Optional[str] = None
    big_miss: Optional[str] = None
    face_control_rating: Any = None
    contact_rating: Any = None
    confidence_rating: Any = None
    tags: Any = None
    notes: Optional[str] = None
