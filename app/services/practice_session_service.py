"""
Practice session service.

CRUD over logged sessions.  Field validation already happened in the
request schema; this layer maps between schemas and the table model.
"""

import datetime

from fastapi import HTTPException, status
from loguru import logger
from sqlmodel import Session

from app.db.repositories.practice_session import PracticeSessionRepository
from app.models.practice_session import PracticeSession
from app.schemas.practice_session import (PracticeSessionCreate, PracticeSessionResponse, PracticeSessionUpdate, )


def _enum_value(value):
    return value.value if value is not None and hasattr(value, "value") else value


class PracticeSessionService:
    """Service for practice session business logic."""

    def __init__(self, session: Session):
        self.repository = PracticeSessionRepository(session)

    def create(self, data: PracticeSessionCreate) -> PracticeSessionResponse:
        entry = PracticeSession(session_date=data.session_date, location_type=_enum_value(data.location_type),
                                clubs_focus=data.clubs_focus, main_goal=data.main_goal,
                                big_miss=_enum_value(data.big_miss), face_control_rating=data.face_control_rating,
                                contact_rating=data.contact_rating, confidence_rating=data.confidence_rating,
                                tags=data.tags or [], notes=data.notes, )
        entry = self.repository.create(entry)
        logger.info(f"Logged practice session {entry.id} on {entry.session_date}")
        return self._to_response(entry)

    def get_by_id(self, entry_id: int) -> PracticeSessionResponse:
        return self._to_response(self._get_entry(entry_id))

    def list_all(self) -> list[PracticeSessionResponse]:
        return [self._to_response(e) for e in self.repository.list_all()]

    def update(self, entry_id: int, data: PracticeSessionUpdate) -> PracticeSessionResponse:
        entry = self._get_entry(entry_id)

        for field, value in data.model_dump(exclude_unset=True).items():
            if field == "session_date" and value is None:
                continue
            if field == "tags" and value is None:
                value = []
            setattr(entry, field, _enum_value(value))
        entry.updated_at = datetime.datetime.utcnow()

        entry = self.repository.update(entry)
        return self._to_response(entry)

    def delete(self, entry_id: int) -> None:
        self._get_entry(entry_id)
        self.repository.delete(entry_id)
        logger.info(f"Deleted practice session {entry_id}")

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get_entry(self, entry_id: int) -> PracticeSession:
        entry = self.repository.get_by_id(entry_id)
        if not entry:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Practice session not found", )
        return entry

    @staticmethod
    def _to_response(entry: PracticeSession) -> PracticeSessionResponse:
        return PracticeSessionResponse(id=entry.id, session_date=entry.session_date,
                                       location_type=entry.location_type, clubs_focus=entry.clubs_focus,
                                       main_goal=entry.main_goal, big_miss=entry.big_miss,
                                       face_control_rating=entry.face_control_rating,
                                       contact_rating=entry.contact_rating,
                                       confidence_rating=entry.confidence_rating, tags=list(entry.tags or []),
                                       notes=entry.notes, created_at=entry.created_at,
                                       updated_at=entry.updated_at, )
