"""
Practice session endpoints.

CRUD for logged practice sessions.
"""

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from app.db.session import get_db
from app.schemas.practice_session import (PracticeSessionCreate, PracticeSessionResponse, PracticeSessionUpdate, )
from app.services.practice_session_service import PracticeSessionService

router = APIRouter()


@router.post("", summary="Log a practice session.", response_model=PracticeSessionResponse,
             status_code=status.HTTP_201_CREATED, )
def create_session(data: PracticeSessionCreate, db: Session = Depends(get_db), ):
    service = PracticeSessionService(db)
    return service.create(data)


@router.get("", summary="List practice sessions, most recent first.", response_model=list[PracticeSessionResponse], )
def list_sessions(db: Session = Depends(get_db), ):
    service = PracticeSessionService(db)
    return service.list_all()


@router.get("/{session_id}", summary="Get a practice session.", response_model=PracticeSessionResponse, )
def get_session(session_id: int, db: Session = Depends(get_db), ):
    service = PracticeSessionService(db)
    return service.get_by_id(session_id)


@router.put("/{session_id}", summary="Update a practice session.", response_model=PracticeSessionResponse, )
def update_session(session_id: int, data: PracticeSessionUpdate, db: Session = Depends(get_db), ):
    service = PracticeSessionService(db)
    return service.update(session_id, data)


@router.delete("/{session_id}", summary="Delete a practice session.", status_code=status.HTTP_204_NO_CONTENT, )
def delete_session(session_id: int, db: Session = Depends(get_db), ):
    service = PracticeSessionService(db)
    service.delete(session_id)
