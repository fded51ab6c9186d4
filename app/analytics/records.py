"""
Lenient interpretation of raw session records.

The record store hands the engine whatever it has.  These helpers turn raw
field values into either a usable value or ``None`` (absent), so a single
malformed field never aborts aggregation of the rest of the sequence.
"""

from __future__ import annotations

import datetime
from typing import Any, Optional

from loguru import logger

from app.schemas.practice_session import RATING_MAX, RATING_MIN, SessionRecord


def parse_session_date(value: Any) -> Optional[datetime.date]:
    """Return the calendar date of *value*, or ``None`` if it is unusable.

    Accepts ``date`` / ``datetime`` objects and ISO strings; for timestamps
    such as ``"2024-03-01T08:30:00Z"`` only the date part is used.
    """
    if value is None:
        return None
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return datetime.date.fromisoformat(text[:10])
        except ValueError:
            return None
    return None


def record_date(record: SessionRecord) -> Optional[datetime.date]:
    return parse_session_date(record.session_date)


def coerce_rating(value: Any) -> Optional[int]:
    """Return *value* as a 1-5 rating, or ``None`` if absent or invalid."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, float):
        if not value.is_integer():
            return None
        value = int(value)
    if not isinstance(value, int):
        return None
    if RATING_MIN <= value <= RATING_MAX:
        return value
    return None


def record_rating(record: SessionRecord, field: str, warn: bool = False) -> Optional[int]:
    raw = getattr(record, field, None)
    rating = coerce_rating(raw)
    if warn and rating is None and raw is not None:
        logger.warning(f"Session {record.id}: ignoring invalid {field}={raw!r}")
    return rating


def categorical_value(record: SessionRecord, field: str) -> Optional[str]:
    """Lower-cased, stripped attribute value; ``None`` when missing or blank."""
    raw = getattr(record, field, None)
    if raw is None:
        return None
    text = str(raw).strip().lower()
    return text or None


def record_tags(record: SessionRecord) -> list[str]:
    """Distinct non-blank tags of a record, in their stored order.

    Anything that is not a list of strings contributes nothing.
    """
    raw = record.tags
    if not isinstance(raw, (list, tuple)):
        return []
    tags: list[str] = []
    for tag in raw:
        if not isinstance(tag, str):
            continue
        tag = tag.strip()
        if tag and tag not in tags:
            tags.append(tag)
    return tags
