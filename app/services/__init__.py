"""Business logic services."""

from app.services.analytics_service import AnalyticsService
from app.services.practice_session_service import PracticeSessionService

__all__ = [
    "AnalyticsService",
    "PracticeSessionService",
]
