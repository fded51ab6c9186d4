"""
Practice dashboard — the analytics engine's entry point.

Pipeline
--------
1. **Filter / window** (:mod:`app.analytics.window`) — one selected,
   chronologically ordered sequence.
2. **Aggregate** (:mod:`app.analytics.aggregate`) — counts, rating averages,
   frequency tables.
3. **Rank** (:mod:`app.analytics.ranking`) — top tags, focus suggestions.
4. **Project** (:mod:`app.analytics.series`) — chart series.

Stages 2-4 all consume the sequence produced by stage 1.  The function is
pure: the reference date is a parameter, nothing is cached, and the input
records are never mutated.
"""

from __future__ import annotations

import datetime
from typing import Iterable, Optional

from loguru import logger

from app.analytics.aggregate import average_ratings, count_recent, frequency_table, table_rows, top_value
from app.analytics.ranking import top_categories, under_practiced
from app.analytics.series import category_bars, rating_series
from app.analytics.window import DEFAULT_WINDOW_CONFIG, WindowConfig, select_sessions
from app.schemas.dashboard import DashboardResponse
from app.schemas.practice_session import FOCUS_TAGS, SessionRecord


def compute_dashboard(
    records: Iterable[SessionRecord],
    as_of: datetime.date | datetime.datetime,
    config: Optional[WindowConfig] = None,
) -> DashboardResponse:
    """Compute the full practice dashboard.

    Args:
        records: Snapshot of stored sessions, in any order.  May be empty.
        as_of: Reference date for the 30-day recency count (typically today).
        config: Optional :class:`WindowConfig` (uses ``DEFAULT_WINDOW_CONFIG``
            if ``None``).

    Returns:
        :class:`DashboardResponse` built from a single selected sequence.
    """
    cfg = config or DEFAULT_WINDOW_CONFIG
    ref_date = as_of.date() if isinstance(as_of, datetime.datetime) else as_of

    selected = select_sessions(records, cfg)

    # --- Frequency tables ---
    tag_table = frequency_table(selected, "tags")
    miss_table = frequency_table(selected, "big_miss")
    ranked_table = tag_table if cfg.rank_by == "tags" else miss_table

    dashboard = DashboardResponse(
        total_count=len(selected),
        recent_count=count_recent(selected, ref_date),
        averages=average_ratings(selected),
        top_miss=top_value(miss_table),
        rank_by=cfg.rank_by,
        category_counts=table_rows(ranked_table),
        top_tags=top_categories(tag_table),
        focus_suggestions=under_practiced(tag_table, FOCUS_TAGS),
        rating_series=rating_series(selected),
        category_chart=category_bars(ranked_table),
        window=str(cfg.window),
        filter_field=cfg.filter_field if cfg.filter_active else None,
        filter_value=cfg.filter_value.strip().lower() if cfg.filter_active else None,
        as_of=ref_date,
    )

    logger.debug(f"Dashboard as of {ref_date}: total={dashboard.total_count} recent={dashboard.recent_count}")
    return dashboard
