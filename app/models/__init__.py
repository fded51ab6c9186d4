"""SQLModel database models."""

from app.models.practice_session import PracticeSession

__all__ = [
    "PracticeSession",
]
