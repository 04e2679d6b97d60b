"""Pytest configuration and fixtures."""

import os

# Use test database - PostgreSQL in Docker, SQLite locally
if os.getenv("DATABASE_URL"):
    # Running in Docker - use PostgreSQL test database
    SQLALCHEMY_DATABASE_URL = os.getenv("DATABASE_URL").replace(
        "/pantry_tracker", "/pantry_tracker_test"
    )
else:
    # Running locally - use SQLite
    SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"
    os.environ["DATABASE_URL"] = SQLALCHEMY_DATABASE_URL

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from pantry_tracker.database import Base, Database, get_database  # noqa: E402
from pantry_tracker.main import app  # noqa: E402
from pantry_tracker.services.auth import Identity  # noqa: E402
from pantry_tracker.services.pantry_service import PantryEntryService  # noqa: E402
from pantry_tracker.services.pantry_store import PantryEntryStore  # noqa: E402

database = Database(SQLALCHEMY_DATABASE_URL)


class AuthHeaders(dict):
    """Dict subclass that also stores user_id and email."""

    def __init__(self, *args, user_id: int | None = None, email: str | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.user_id = user_id
        self.email = email


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    if "postgresql" in SQLALCHEMY_DATABASE_URL:
        # For PostgreSQL, create the test database
        from sqlalchemy_utils import create_database, database_exists

        # Create test database if it doesn't exist
        if not database_exists(SQLALCHEMY_DATABASE_URL):
            create_database(SQLALCHEMY_DATABASE_URL)

    database.create_all()
    yield
    database.dispose()


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = database.session()

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture(scope="function")
def client():
    """Create a test client bound to the test database."""
    app.dependency_overrides[get_database] = lambda: database
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def register(client, email: str, password: str = "testpass123", name: str = "Test User"):
    """Register a user and return auth headers for them."""
    response = client.post(
        "/api/v1/auth/register",
        json={"email": email, "password": password, "name": name},
    )
    assert response.status_code == 201
    data = response.json()
    token = data["access_token"]
    # Tests authenticate with the bearer header; drop the session cookie
    client.cookies.clear()
    return AuthHeaders(
        {"Authorization": f"Bearer {token}"}, user_id=data["user"]["id"], email=email
    )


@pytest.fixture
def auth_headers(client):
    """Create a user and return auth headers with user info."""
    return register(client, "test@example.com")


@pytest.fixture
def other_auth_headers(client):
    """Create a second, unrelated user."""
    return register(client, "other@example.com", name="Other User")


@pytest.fixture
def make_user(db):
    """Insert users directly, for store and service tests that skip HTTP."""
    from pantry_tracker.models.user import User

    def _make_user(email: str = "owner@example.com") -> Identity:
        user = User(email=email, password_hash="not-a-real-hash")
        db.add(user)
        db.commit()
        db.refresh(user)
        return Identity(user_id=user.id, email=user.email)

    return _make_user


@pytest.fixture
def store(db):
    """Entry store on the per-test session."""
    return PantryEntryStore(db)


@pytest.fixture
def service(store):
    """Entry service on the per-test store."""
    return PantryEntryService(store)


@pytest.fixture
def test_database():
    """The database handle tests run against."""
    return database
