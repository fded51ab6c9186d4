"""
Shared API dependencies.

Reusable FastAPI dependencies for dashboard parameters.
"""

from typing import Optional

from fastapi import HTTPException, Query, status

from app.analytics.window import RankBy, WindowConfig, parse_window
from app.core.config import settings


def get_window_config(
    location: Optional[str] = Query(None, description="Location filter: sim, range, course or 'all'"),
    window: Optional[str] = Query(None, description="'all' or the number of most recent sessions"),
    rank_by: RankBy = Query("tags", description="Attribute for the category table: tags or big_miss"),
) -> WindowConfig:
    """Build a :class:`WindowConfig` from dashboard query parameters."""
    try:
        parsed_window = parse_window(window if window is not None else settings.DEFAULT_WINDOW)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e), )
    return WindowConfig(filter_field="location_type", filter_value=location, window=parsed_window,
                        rank_by=rank_by, )
