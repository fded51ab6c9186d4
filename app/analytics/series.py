"""Chart-series projection: reshapes selected sessions into plottable points."""

from __future__ import annotations

from typing import Iterable

from app.analytics.ranking import rank_descending
from app.analytics.records import record_date, record_rating
from app.schemas.dashboard import CategoryCount, RatingPoint
from app.schemas.practice_session import SessionRecord


def rating_series(records: Iterable[SessionRecord]) -> list[RatingPoint]:
    """One point per session, same order.  Missing ratings stay ``None``."""
    points: list[RatingPoint] = []
    for record in records:
        d = record_date(record)
        points.append(RatingPoint(date=d.isoformat() if d else None,
                                  face_control_rating=record_rating(record, "face_control_rating"),
                                  contact_rating=record_rating(record, "contact_rating"),
                                  confidence_rating=record_rating(record, "confidence_rating"), ))
    return points


def category_bars(table: dict[str, int]) -> list[CategoryCount]:
    """Bar-chart rows: the whole frequency table, most frequent first."""
    return rank_descending(table)
