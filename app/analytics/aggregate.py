"""
Aggregator — scalar KPIs and categorical frequency tables.

All functions take an already selected sequence (see
:func:`app.analytics.window.select_sessions`) and never mutate it.

Absent is not zero
------------------
A rating that is missing or invalid does not contribute to the numerator
*or* the denominator of its average.  When no session in the sequence has
a valid value, the average is reported as ``no_data`` with ``value=None``.
"""

from __future__ import annotations

import datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Literal, Optional, Sequence

from loguru import logger

from app.analytics.records import categorical_value, record_date, record_rating, record_tags
from app.schemas.dashboard import CategoryCount, RatingAverage, RatingAverages
from app.schemas.practice_session import RATING_FIELDS, SessionRecord

# Business rule, not a setting.
RECENT_WINDOW_DAYS = 30

CategorySource = Literal["tags", "big_miss"]


def round_half_away(value: float, places: int = 2) -> float:
    """Round half away from zero (``2.675 -> 2.68``), unlike :func:`round`."""
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


# ======================================================================
# Counts
# ======================================================================


def count_recent(records: Iterable[SessionRecord], as_of: datetime.date | datetime.datetime,
                 days: int = RECENT_WINDOW_DAYS) -> int:
    """Count sessions dated within the trailing *days* window ending at *as_of* (inclusive).

    Undated and future-dated sessions are not recent.
    """
    ref = as_of.date() if isinstance(as_of, datetime.datetime) else as_of
    start = ref - datetime.timedelta(days=days)
    recent = 0
    for record in records:
        d = record_date(record)
        if d is not None and start <= d <= ref:
            recent += 1
    return recent


# ======================================================================
# Rating averages
# ======================================================================


def average_rating(records: Iterable[SessionRecord], field: str) -> RatingAverage:
    """Mean of the valid values of *field*, rounded to 2 decimals."""
    total = 0
    present = 0
    for record in records:
        rating = record_rating(record, field, warn=True)
        if rating is None:
            continue
        total += rating
        present += 1

    if present == 0:
        return RatingAverage(value=None, status="no_data", sample_size=0)

    return RatingAverage(value=round_half_away(total / present), status="ok", sample_size=present)


def average_ratings(records: Sequence[SessionRecord]) -> RatingAverages:
    return RatingAverages(**{field: average_rating(records, field) for field in RATING_FIELDS})


# ======================================================================
# Frequency tables
# ======================================================================


def frequency_table(records: Iterable[SessionRecord], source: CategorySource = "tags") -> dict[str, int]:
    """Count occurrences per distinct value, in order of first appearance.

    ``tags``: each record counts once per distinct tag it carries.
    ``big_miss``: the single value, lower-cased; blank values are skipped.
    """
    counts: dict[str, int] = {}
    for record in records:
        if source == "tags":
            labels = record_tags(record)
        elif source == "big_miss":
            miss = categorical_value(record, "big_miss")
            labels = [miss] if miss is not None else []
        else:
            raise ValueError(f"Unknown category source: {source!r}")

        for label in labels:
            counts[label] = counts.get(label, 0) + 1

    logger.debug(f"Frequency table over {source}: {len(counts)} distinct value(s)")
    return counts


def table_rows(table: dict[str, int]) -> list[CategoryCount]:
    return [CategoryCount(label=label, count=count) for label, count in table.items()]


def top_value(table: dict[str, int]) -> Optional[CategoryCount]:
    """Most frequent entry; ties go to the first one encountered."""
    best: Optional[CategoryCount] = None
    for label, count in table.items():
        if best is None or count > best.count:
            best = CategoryCount(label=label, count=count)
    return best
