"""
Practice session database model.

One flat row per logged session.  Tags are stored as a JSON list.
"""

import datetime
from typing import Optional

from sqlalchemy import JSON, Column
from sqlmodel import Field, SQLModel


class PracticeSession(SQLModel, table=True):
    """A single logged golf practice session."""

    __tablename__ = "practice_sessions"

    id: Optional[int] = Field(default=None, primary_key=True)
    session_date: datetime.date = Field(nullable=False, index=True)

    location_type: Optional[str] = Field(default=None, max_length=20)
    clubs_focus: Optional[str] = Field(default=None, max_length=200)
    main_goal: Optional[str] = Field(default=None, max_length=500)
    big_miss: Optional[str] = Field(default=None, max_length=20)

    # 1-5 ratings
    face_control_rating: Optional[int] = Field(default=None)
    contact_rating: Optional[int] = Field(default=None)
    confidence_rating: Optional[int] = Field(default=None)

    tags: list = Field(default_factory=list, sa_column=Column(JSON, nullable=False), )
    notes: Optional[str] = Field(default=None, max_length=2000)

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
    updated_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
