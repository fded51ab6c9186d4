"""
Analytics service.

Reads the current snapshot from the record store and hands it to the pure
dashboard engine.  A failed read is logged and treated as an empty
snapshot: the dashboard then reports zero sessions and "no data" averages
instead of failing the request.
"""

import datetime
from typing import Optional

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from app.analytics.dashboard import compute_dashboard
from app.analytics.window import WindowConfig
from app.db.repositories.practice_session import PracticeSessionRepository
from app.schemas.dashboard import DashboardResponse
from app.schemas.practice_session import SessionRecord


class AnalyticsService:
    """Service wiring the record store to the analytics engine."""

    def __init__(self, session: Session):
        self.repository = PracticeSessionRepository(session)

    def load_records(self) -> list[SessionRecord]:
        try:
            entries = self.repository.list_all()
        except SQLAlchemyError as e:
            logger.error(f"Could not read practice sessions, using empty snapshot: {e}")
            return []
        return [SessionRecord.model_validate(entry) for entry in entries]

    def dashboard(self, as_of: datetime.date, config: Optional[WindowConfig] = None) -> DashboardResponse:
        return compute_dashboard(self.load_records(), as_of, config)
