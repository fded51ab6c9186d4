"""
Dashboard schemas.

The dashboard is the structured output of the session analytics engine.
"No data" and "zero" are kept distinct throughout:

- a :class:`RatingAverage` with no present ratings has ``value=None`` and
  ``status="no_data"``, never ``0.0``;
- a :class:`FocusSuggestion` with ``count=0`` is a legitimate result
  ("No sessions yet"), flagged by ``has_sessions=False``;
- a :class:`RatingPoint` carries ``None`` for a missing rating so a chart
  can gap the point instead of plotting a false zero.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, Field


class RatingAverage(BaseModel):
    """Average of one rating attribute over the selected sessions."""

    value: Optional[float] = Field(None, description="Mean rounded to 2 decimals (None if no data)")
    status: str = Field(..., description="One of: ok, no_data")
    sample_size: int = Field(..., ge=0, description="Number of sessions with a valid rating")


class RatingAverages(BaseModel):
    """Per-rating averages."""

    face_control_rating: RatingAverage
    contact_rating: RatingAverage
    confidence_rating: RatingAverage


class CategoryCount(BaseModel):
    """One row of a categorical frequency table."""

    label: str
    count: int = Field(..., ge=0)


class FocusSuggestion(BaseModel):
    """An under-practiced focus category."""

    tag: str
    count: int = Field(..., ge=0)
    has_sessions: bool = Field(..., description="False when the category was never tagged")
    note: str = Field(..., description="Human-readable volume note")


class RatingPoint(BaseModel):
    """One plotted point of the rating trend chart."""

    date: Optional[str] = Field(None, description="ISO date, None for undated sessions")
    face_control_rating: Optional[int] = None
    contact_rating: Optional[int] = None
    confidence_rating: Optional[int] = None


class DashboardResponse(BaseModel):
    """Complete dashboard returned by the analytics endpoint.

    Every section is computed from the same filtered and windowed session
    sequence, so averages and the plotted series always agree.
    """

    total_count: int = Field(..., ge=0, description="Sessions after filtering/windowing")
    recent_count: int = Field(..., ge=0, description="Sessions in the trailing 30 days")
    averages: RatingAverages
    top_miss: Optional[CategoryCount] = Field(None, description="Most frequent big miss (None if no data)")
    rank_by: str = Field(..., description="Categorical attribute used for category_counts")
    category_counts: list[CategoryCount] = Field(default_factory=list,
                                                 description="Frequency table in first-appearance order")
    top_tags: list[CategoryCount] = Field(default_factory=list, description="Most practiced focus areas")
    focus_suggestions: list[FocusSuggestion] = Field(default_factory=list,
                                                     description="Least practiced focus areas")
    rating_series: list[RatingPoint] = Field(default_factory=list)
    category_chart: list[CategoryCount] = Field(default_factory=list,
                                                description="category_counts sorted by count, descending")
    window: str = Field(..., description="'all' or the trailing session count applied")
    filter_field: Optional[str] = None
    filter_value: Optional[str] = None
    as_of: datetime.date
