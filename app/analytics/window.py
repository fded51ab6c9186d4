"""
Filter / window stage.

Restricts the raw record set before aggregation:

1. **Filter** — keep records whose categorical attribute matches a value
   (case-insensitive).  ``"all"`` or no value disables filtering.
2. **Order** — ascending by session date, oldest first, regardless of the
   incoming order.  Python's sort is stable, so same-day sessions keep the
   store's order.  Undated records go last.
3. **Window** — keep the last N sessions, or everything for ``"all"``.
   When trimming, only dated sessions are kept.

Every later stage (aggregates, rankings, chart series) consumes the output
of :func:`select_sessions`, never the raw list.
"""

from __future__ import annotations

import datetime
from typing import Iterable, Literal, Optional, Union

from loguru import logger
from pydantic import BaseModel, Field, field_validator

from app.analytics.records import categorical_value, record_date
from app.schemas.practice_session import SessionRecord

FILTERABLE_FIELDS = ("location_type", "big_miss", "clubs_focus", "main_goal")

ALL = "all"

FilterField = Literal["location_type", "big_miss", "clubs_focus", "main_goal"]
RankBy = Literal["tags", "big_miss"]


def parse_window(value: Union[int, str, None]) -> Union[int, str]:
    """Normalise a window spec to a positive int or ``"all"``.

    Accepts ``None``, ``"all"``, ``7``, ``"7"`` and ``"last 7"``.

    Raises:
        ValueError: for anything else (zero, negatives, free text).
    """
    if value is None:
        return ALL
    if isinstance(value, bool):
        raise ValueError(f"Invalid window: {value!r}")
    if isinstance(value, int):
        if value <= 0:
            raise ValueError(f"Window must be a positive integer, got {value}")
        return value
    text = str(value).strip().lower()
    if text in ("", ALL):
        return ALL
    if text.startswith("last"):
        text = text[len("last"):].strip()
    if not text.isdigit() or int(text) <= 0:
        raise ValueError(f"Invalid window: {value!r} (expected 'all' or a positive integer)")
    return int(text)


class WindowConfig(BaseModel):
    """Caller-supplied selection parameters.

    These are the dashboard's interactive controls (location filter, window
    size, ranked attribute) expressed as plain values.
    """

    filter_field: Optional[FilterField] = Field("location_type", description="Attribute the filter applies to")
    filter_value: Optional[str] = Field(None, description="Value to match; None or 'all' disables filtering")
    window: Union[int, str] = Field(ALL, description="'all' or the number of most recent sessions to keep")
    rank_by: RankBy = Field("tags", description="Categorical attribute for the frequency table")

    @field_validator("window", mode="before")
    @classmethod
    def _parse_window(cls, value):
        return parse_window(value)

    @property
    def filter_active(self) -> bool:
        return (self.filter_field is not None and self.filter_value is not None
                and self.filter_value.strip().lower() not in ("", ALL))


DEFAULT_WINDOW_CONFIG = WindowConfig()


# ======================================================================
# Stages
# ======================================================================


def filter_sessions(records: Iterable[SessionRecord], field: Optional[str],
                    value: Optional[str]) -> list[SessionRecord]:
    """Keep records whose *field* equals *value*, case-insensitively."""
    records = list(records)
    if field is None or value is None or value.strip().lower() in ("", ALL):
        return records

    if field not in FILTERABLE_FIELDS:
        # Treated as absent on every record: nothing can match.
        logger.warning(f"Unknown filter attribute {field!r}; no session matches")
        return []

    wanted = value.strip().lower()
    return [r for r in records if categorical_value(r, field) == wanted]


def sort_chronologically(records: Iterable[SessionRecord]) -> list[SessionRecord]:
    """Oldest first; undated records after all dated ones, in incoming order."""
    dated: list[tuple[datetime.date, SessionRecord]] = []
    undated: list[SessionRecord] = []
    for record in records:
        d = record_date(record)
        if d is None:
            undated.append(record)
        else:
            dated.append((d, record))

    if undated:
        logger.warning(f"{len(undated)} session(s) without a valid session_date placed last")

    dated.sort(key=lambda pair: pair[0])
    return [r for _, r in dated] + undated


def apply_window(records: list[SessionRecord], window: Union[int, str]) -> list[SessionRecord]:
    """Trim a chronologically sorted sequence to its last *window* records.

    A sequence that already fits is returned unchanged, undated records
    included.  When trimming is needed, undated records have no recency and
    never displace a dated one: the result is the last *window* dated records.
    """
    if window == ALL or len(records) <= window:
        return list(records)

    dated = [r for r in records if record_date(r) is not None]
    return dated[-window:]


def select_sessions(records: Iterable[SessionRecord],
                    config: Optional[WindowConfig] = None) -> list[SessionRecord]:
    """Filter, order and window *records* according to *config*."""
    cfg = config or DEFAULT_WINDOW_CONFIG
    filtered = filter_sessions(records, cfg.filter_field, cfg.filter_value)
    ordered = sort_chronologically(filtered)
    selected = apply_window(ordered, cfg.window)
    logger.debug(f"Selected {len(selected)} of {len(filtered)} filtered sessions (window={cfg.window})")
    return selected
