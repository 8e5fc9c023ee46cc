"""Shared pytest fixtures for movieapi tests."""

from datetime import date

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from movieapi.db import repo
from movieapi.db.schema import Base


@pytest.fixture
def engine():
    """Create an in-memory SQLite engine for testing."""
    engine = create_engine(
        "sqlite:///:memory:",
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    return engine


@pytest.fixture
def session(engine):
    """Create a database session for testing."""
    Session = sessionmaker(bind=engine)
    session = Session()
    yield session
    session.close()


@pytest.fixture
def people(session):
    """Four committed people with ids 1..4."""
    created = [
        repo.create_person(session, "Actor One", date(1970, 1, 1)),
        repo.create_person(session, "Actor Two", date(1975, 2, 2)),
        repo.create_person(session, "Actor Three", date(1980, 3, 3)),
        repo.create_person(session, "Actor Four", date(1985, 4, 4)),
    ]
    session.commit()
    return created
