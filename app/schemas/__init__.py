"""Pydantic schemas for request/response validation."""

from app.schemas.practice_session import (
    FOCUS_TAGS,
    BigMiss,
    LocationType,
    PracticeSessionCreate,
    PracticeSessionResponse,
    PracticeSessionUpdate,
    SessionRecord,
)
from app.schemas.dashboard import (
    CategoryCount,
    DashboardResponse,
    FocusSuggestion,
    RatingAverage,
    RatingAverages,
    RatingPoint,
)

__all__ = [
    "FOCUS_TAGS",
    "BigMiss",
    "LocationType",
    "PracticeSessionCreate",
    "PracticeSessionResponse",
    "PracticeSessionUpdate",
    "SessionRecord",
    "CategoryCount",
    "DashboardResponse",
    "FocusSuggestion",
    "RatingAverage",
    "RatingAverages",
    "RatingPoint",
]
