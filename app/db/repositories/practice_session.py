"""
Practice session repository.

Handles database operations for :class:`PracticeSession`.
"""

from typing import Optional

from sqlmodel import Session, select

from app.models.practice_session import PracticeSession


class PracticeSessionRepository:
    """Repository for PracticeSession database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, entry: PracticeSession) -> PracticeSession:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def get_by_id(self, entry_id: int) -> Optional[PracticeSession]:
        return self.session.get(PracticeSession, entry_id)

    def list_all(self) -> list[PracticeSession]:
        """All sessions, most recent first (same-day sessions by insertion order)."""
        statement = select(PracticeSession).order_by(PracticeSession.session_date.desc(), PracticeSession.id)
        return list(self.session.exec(statement).all())

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def update(self, entry: PracticeSession) -> PracticeSession:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def delete(self, entry_id: int) -> bool:
        entry = self.get_by_id(entry_id)
        if entry:
            self.session.delete(entry)
            self.session.commit()
            return True
        return False
