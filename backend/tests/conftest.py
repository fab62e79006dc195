"""
Pytest configuration and fixtures for unit and integration tests.
"""

import os

# The app engine is created at import time; keep it off the production database
os.environ.setdefault("HEALTHCALC_DATABASE_URL", "sqlite:///:memory:")

from datetime import datetime, timedelta, timezone  # noqa: E402
from uuid import uuid4  # noqa: E402

import pytest  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from healthcalc.db.database import Base  # noqa: E402

# Import models to register with Base.metadata
from healthcalc.models import calculation_record, user  # noqa: F401,E402
from healthcalc.models.user import User  # noqa: E402
from healthcalc.utils.jwt import create_access_token  # noqa: E402
from healthcalc.utils.password import hash_password  # noqa: E402


# Use test database URL from env, or default to SQLite in-memory
TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite:///:memory:")


@pytest.fixture(scope="function")
def test_engine():
    """Create a test database engine."""
    if TEST_DATABASE_URL.startswith("sqlite"):
        # SQLite in-memory for fast tests
        engine = create_engine(
            TEST_DATABASE_URL,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
            echo=False,
        )
    else:
        # Postgres for more realistic integration tests
        engine = create_engine(TEST_DATABASE_URL, echo=False)

    Base.metadata.create_all(bind=engine)

    yield engine

    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def test_db(test_engine):
    """Create a test database session."""
    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)
    session = TestSessionLocal()

    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="function")
def override_get_db(test_db):
    """Override get_db dependency for FastAPI."""

    def _get_db():
        try:
            yield test_db
        finally:
            pass  # Don't close, we'll handle it in fixture

    return _get_db


@pytest.fixture
def sample_user_id():
    """Sample user ID for tests."""
    return uuid4()


@pytest.fixture
def sample_user(test_db, sample_user_id):
    """Persisted user owning the sample_user_id."""
    user = User(
        user_id=sample_user_id,
        email="test@example.com",
        password_hash=hash_password("password123"),
        gender="male",
        age=30,
    )
    test_db.add(user)
    test_db.commit()
    return user


@pytest.fixture
def auth_headers(sample_user_id):
    """Bearer headers for sample_user_id."""
    token = create_access_token(sample_user_id)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def base_time():
    """Fixed reference time for records created in order."""
    return datetime(2024, 3, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def minutes_ago(base_time):
    """Factory: base_time shifted back by the given number of minutes."""

    def _minutes_ago(minutes):
        return base_time - timedelta(minutes=minutes)

    return _minutes_ago
