"""
Database session management.

Provides SQLModel engine and session creation.
"""

from typing import Any, Generator

from sqlmodel import Session, create_engine

from app.core.config import settings

DATABASE_URL: str = settings.DATABASE_URL

_engine_kwargs: dict[str, Any] = {
    "echo": settings.DEBUG,  # Log SQL queries in debug mode
    "pool_pre_ping": True,  # Verify connections before using
}
if DATABASE_URL.startswith("sqlite"):
    # FastAPI serves sync endpoints from a threadpool
    _engine_kwargs["connect_args"] = {"check_same_thread": False}

engine = create_engine(DATABASE_URL, **_engine_kwargs)


def get_db() -> Generator[Session, None, None]:
    """
    Dependency for FastAPI endpoints to get database session.

    Yields:
        SQLModel Session instance
    """
    with Session(engine) as session:
        yield session
