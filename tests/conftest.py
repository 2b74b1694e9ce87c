"""Pytest configuration and fixtures."""

import os
from unittest.mock import MagicMock, patch

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker

from relieftrack.database import Base, get_db
from relieftrack.main import app
from relieftrack.services.activity_log import ActivityLogService
from relieftrack.services.distribution_ledger import DistributionLedger
from relieftrack.services.household_service import HouseholdService
from relieftrack.services.inventory_service import InventoryService

# Use test database - PostgreSQL in Docker, SQLite locally
if os.getenv("DATABASE_URL"):
    # Running in Docker - use PostgreSQL test database
    SQLALCHEMY_DATABASE_URL = os.getenv("DATABASE_URL").replace(
        "/relieftrack", "/relieftrack_test"
    )
else:
    # Running locally - use SQLite
    SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"

connect_args = {"check_same_thread": False} if "sqlite" in SQLALCHEMY_DATABASE_URL else {}
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args=connect_args)

if "sqlite" in SQLALCHEMY_DATABASE_URL:

    @event.listens_for(engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        dbapi_connection.execute("PRAGMA foreign_keys = ON")

TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    if "postgresql" in SQLALCHEMY_DATABASE_URL:
        from sqlalchemy_utils import create_database, database_exists

        if not database_exists(SQLALCHEMY_DATABASE_URL):
            create_database(SQLALCHEMY_DATABASE_URL)

    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = TestingSessionLocal()

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture(autouse=True)
def mock_redis():
    """Replace the publishing Redis client; tests run without a Redis server."""
    redis_client = MagicMock()
    with patch("relieftrack.services.realtime.get_sync_redis", return_value=redis_client):
        yield redis_client


@pytest.fixture(scope="function")
def client(db):
    """Create a test client with database override."""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def activity(db):
    return ActivityLogService(db)


@pytest.fixture
def inventory(db, activity):
    return InventoryService(db, activity)


@pytest.fixture
def households(db, activity):
    return HouseholdService(db, activity)


@pytest.fixture
def ledger(db, inventory, households, activity):
    return DistributionLedger(db, inventory, households, activity)


@pytest.fixture
def rice_pack(client):
    """Seed the standard Rice Pack item (10 on hand, threshold 5)."""
    response = client.post(
        "/api/v1/inventory",
        json={"item_name": "Rice Pack", "quantity": 10, "low_stock_threshold": 5, "unit": "packs"},
    )
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def household(client):
    """Register household HH-001."""
    response = client.post(
        "/api/v1/households",
        json={
            "household_number": "HH-001",
            "head_of_family": "Maria Santos",
            "purok": "Purok 2",
            "address": "Riverside St.",
            "family_members": 5,
        },
    )
    assert response.status_code == 201
    return response.json()
