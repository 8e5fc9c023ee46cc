"""Database session management.

Provides a session factory keyed by connection string, with the
SQLite settings needed for FastAPI's threadpool.
"""

from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import Generator

from sqlalchemy import Engine, create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from movieapi.config import DEFAULT_DATABASE_URL
from movieapi.db.schema import Base

# Module-level engine cache for connection pooling
_engine_cache: dict[str, Engine] = {}

# Module-level session factory cache
_session_factory_cache: dict[str, sessionmaker] = {}


def _sqlite_database_path(database_url: str) -> str | None:
    """Return the database file path of a SQLite URL, or None."""
    url = make_url(database_url)
    if url.get_backend_name() != "sqlite":
        return None
    return url.database or ":memory:"


def get_engine(database_url: str | None = None) -> Engine:
    """Get SQLAlchemy engine for the database.

    Engines are cached by URL so repeated calls share one pool.

    For SQLite, check_same_thread=False allows the session to be used
    from FastAPI worker threads, and in-memory databases use StaticPool
    so every session sees the same data.

    Args:
        database_url: SQLAlchemy connection string. Defaults to a local
            SQLite file.

    Returns:
        SQLAlchemy engine instance (cached).
    """
    if database_url is None:
        database_url = DEFAULT_DATABASE_URL

    if database_url in _engine_cache:
        return _engine_cache[database_url]

    kwargs: dict = {"echo": False}
    sqlite_path = _sqlite_database_path(database_url)
    if sqlite_path is not None:
        kwargs["connect_args"] = {"check_same_thread": False}
        if sqlite_path == ":memory:":
            kwargs["poolclass"] = StaticPool
        else:
            # Create parent directories only when creating a new engine
            Path(sqlite_path).parent.mkdir(parents=True, exist_ok=True)

    engine = create_engine(database_url, **kwargs)
    _engine_cache[database_url] = engine

    return engine


def _get_session_factory(database_url: str | None = None) -> sessionmaker:
    """Get cached session factory for the database."""
    if database_url is None:
        database_url = DEFAULT_DATABASE_URL

    if database_url in _session_factory_cache:
        return _session_factory_cache[database_url]

    factory = sessionmaker(bind=get_engine(database_url), expire_on_commit=False)
    _session_factory_cache[database_url] = factory

    return factory


def get_session(database_url: str | None = None) -> Session:
    """Get a database session.

    Note: Caller is responsible for closing the session.

    Args:
        database_url: SQLAlchemy connection string.

    Returns:
        SQLAlchemy Session instance.
    """
    factory = _get_session_factory(database_url)
    return factory()


@contextmanager
def get_db_session(database_url: str | None = None) -> Generator[Session, None, None]:
    """Context manager for database sessions with automatic cleanup.

    Commits on successful exit, rolls back on exception, and always
    closes the session.

    Example:
        with get_db_session() as session:
            repo.create_person(session, "Jane Doe", date(1980, 1, 1))
    """
    session = get_session(database_url)
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def init_db(database_url: str | None = None) -> None:
    """Create all tables that do not exist yet."""
    engine = get_engine(database_url)
    Base.metadata.create_all(engine)
