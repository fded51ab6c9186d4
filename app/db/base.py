"""
Base database configuration.

Import all models here so ``SQLModel.metadata`` knows every table.
"""

from app.models.practice_session import PracticeSession  # noqa: F401
