"""Database repositories."""

from app.db.repositories.practice_session import PracticeSessionRepository

__all__ = [
    "PracticeSessionRepository",
]
