"""
Database initialization.

Creates all tables.
"""

from loguru import logger
from sqlmodel import SQLModel

from app.db.session import engine


def init_db() -> None:
    """Create every SQLModel table that does not exist yet."""

    # Import all models so SQLModel.metadata has them
    import app.db.base  # noqa: F401

    logger.info("Creating database tables...")
    SQLModel.metadata.create_all(engine)
    logger.info("Tables created successfully")


if __name__ == "__main__":
    init_db()
