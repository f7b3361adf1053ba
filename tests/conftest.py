"""Pytest configuration and fixtures for Parcel Tracker tests."""

import random

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, scoped_session
from sqlalchemy.pool import StaticPool

from parcel_tracker.models.base import Base
from parcel_tracker.models.parcel_status import ParcelStatus
from parcel_tracker.services.dto import Parcel
from parcel_tracker.utils.datetime_utils import format_created_at


@pytest.fixture(scope="function")
def engine():
    """Create in-memory SQLite database for testing."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture(scope="function")
def session(engine):
    """Create database session for testing."""
    Session = sessionmaker(bind=engine)
    session = Session()
    yield session
    session.close()


@pytest.fixture(scope="function")
def test_db(engine):
    """Route session_scope() to the test database.

    Service functions called without a session open their own through
    session_scope(); this swaps the global session factory for one bound
    to the in-memory engine.
    """
    session_factory = sessionmaker(bind=engine, expire_on_commit=False)
    Session = scoped_session(session_factory)

    import parcel_tracker.services.database as db_module

    original_get_session = db_module.get_session_factory
    db_module.get_session_factory = lambda: Session

    yield Session

    Session.remove()
    db_module.get_session_factory = original_get_session


@pytest.fixture
def make_parcel():
    """Build an unsaved registered parcel, like a freshly accepted shipment."""

    def _make_parcel(client=1000, address="test"):
        return Parcel(
            client=client,
            status=ParcelStatus.REGISTERED,
            address=address,
            created_at=format_created_at(),
        )

    return _make_parcel


@pytest.fixture
def random_client():
    return random.randint(1, 10_000_000)
