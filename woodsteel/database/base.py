"""Database base configuration for Wood & Steel."""

import os
from pathlib import Path
from typing import Generator

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

# Default database path
DEFAULT_DB_PATH = Path("data") / "woodsteel.db"

# Special path for a throwaway database
IN_MEMORY = ":memory:"


def get_db_path() -> Path | str:
    """Get database path from environment or use default.

    Returns:
        Path to database file, or ":memory:".
    """
    db_path_str = os.getenv("DATABASE_PATH")
    if db_path_str == IN_MEMORY:
        return IN_MEMORY
    if db_path_str:
        return Path(db_path_str)
    return DEFAULT_DB_PATH


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""


def get_engine(db_path: Path | str | None = None) -> Engine:
    """Create a database engine.

    Args:
        db_path: Path to the SQLite database file, or ":memory:". If None,
            uses DATABASE_PATH from env or default.

    Returns:
        SQLAlchemy engine.
    """
    if db_path is None:
        db_path = get_db_path()

    if str(db_path) == IN_MEMORY:
        return create_engine("sqlite://", echo=False)

    # Ensure directory exists
    db_path = Path(db_path)
    db_path.parent.mkdir(parents=True, exist_ok=True)

    return create_engine(f"sqlite:///{db_path}", echo=False)


def get_session(
    db_path: Path | str | None = None,
) -> Generator[Session, None, None]:
    """Get a database session.

    Args:
        db_path: Path to the SQLite database file.

    Yields:
        Database session.
    """
    engine = get_engine(db_path)
    Base.metadata.create_all(bind=engine)
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


def init_db(db_path: Path | str | None = None, engine: Engine | None = None) -> Engine:
    """Initialize the database, creating all tables.

    Args:
        db_path: Path to the SQLite database file.
        engine: Existing engine to use instead of creating one.

    Returns:
        The engine the tables were created on.
    """
    engine = engine or get_engine(db_path)
    Base.metadata.create_all(bind=engine)
    return engine
