"""
Analytics endpoints — practice dashboard and focus categories.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlmodel import Session

from app.analytics.window import WindowConfig
from app.api.dependencies import get_window_config
from app.db.session import get_db
from app.schemas.dashboard import DashboardResponse
from app.schemas.practice_session import FOCUS_TAGS
from app.services.analytics_service import AnalyticsService

router = APIRouter()


@router.get(
    "/dashboard",
    summary="Get practice KPIs, focus suggestions and rating trend.",
    response_model=DashboardResponse,
)
def get_dashboard(
    as_of: Optional[datetime.date] = Query(
        None, description="Reference date for the 30-day count (defaults to today)"
    ),
    config: WindowConfig = Depends(get_window_config),
    db: Session = Depends(get_db),
):
    ref_date = as_of or datetime.date.today()
    return AnalyticsService(db).dashboard(ref_date, config)


@router.get(
    "/focus-tags",
    summary="List the known focus categories.",
    response_model=list[str],
)
def get_focus_tags():
    return FOCUS_TAGS
