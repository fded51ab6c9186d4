"""
Ranker — most practiced areas and under-practiced focus suggestions.

Top-N works on observed labels only.  Suggestions work on the **known
universe** of focus categories, so an area never tagged still shows up with
a count of 0 instead of disappearing from the data.
"""

from __future__ import annotations

from typing import Sequence

from app.analytics.aggregate import table_rows
from app.schemas.dashboard import CategoryCount, FocusSuggestion
from app.schemas.practice_session import FOCUS_TAGS

TOP_N = 3
SUGGESTION_N = 3


def rank_descending(table: dict[str, int]) -> list[CategoryCount]:
    """All table rows by descending count; ties keep first-appearance order."""
    return sorted(table_rows(table), key=lambda row: -row.count)


def top_categories(table: dict[str, int], n: int = TOP_N) -> list[CategoryCount]:
    return rank_descending(table)[:n]


def _volume_note(count: int) -> str:
    if count == 0:
        return "No sessions yet"
    return f"{count} session{'' if count == 1 else 's'} logged"


def under_practiced(table: dict[str, int], universe: Sequence[str] = FOCUS_TAGS,
                    n: int = SUGGESTION_N) -> list[FocusSuggestion]:
    """Least practiced categories of *universe*, ascending by count.

    Ties are broken by position in *universe*.  Labels outside the universe
    are ignored here even though the frequency table counts them.
    """
    base = [(tag, table.get(tag, 0)) for tag in universe]
    base.sort(key=lambda pair: pair[1])
    return [FocusSuggestion(tag=tag, count=count, has_sessions=count > 0, note=_volume_note(count))
            for tag, count in base[:n]]
