"""Pytest configuration and fixtures."""

import os
import tempfile

import pytest

# Use test database - PostgreSQL when DATABASE_URL is set, SQLite locally
if os.getenv("DATABASE_URL"):
    SQLALCHEMY_DATABASE_URL = os.environ["DATABASE_URL"].replace("/watchlist", "/watchlist_test")
else:
    SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"

# Settings are read once at import time, so point them at test resources first
os.environ["DATABASE_URL"] = SQLALCHEMY_DATABASE_URL
os.environ["UPLOAD_DIR"] = tempfile.mkdtemp(prefix="watchlist-uploads-")
os.environ.setdefault("ENVIRONMENT", "test")

from fastapi.testclient import TestClient  # noqa: E402

from watchlist.database import Base, Database, get_db  # noqa: E402
from watchlist.main import app  # noqa: E402

test_database = Database(SQLALCHEMY_DATABASE_URL)


class AuthHeaders(dict):
    """Dict subclass that also stores the registered user's id and email."""

    def __init__(self, *args, user_id: int | None = None, email: str | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.user_id = user_id
        self.email = email


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    if "postgresql" in SQLALCHEMY_DATABASE_URL:
        from sqlalchemy_utils import create_database, database_exists

        # Create test database if it doesn't exist
        if not database_exists(SQLALCHEMY_DATABASE_URL):
            create_database(SQLALCHEMY_DATABASE_URL)

    test_database.create_all()
    yield
    test_database.dispose()


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = test_database.session()

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


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
def register_user(client):
    """Return a helper that registers a user and returns auth headers for them."""

    def _register(name: str, email: str, password: str = "testpass123") -> AuthHeaders:
        response = client.post(
            "/api/auth/register",
            json={"name": name, "email": email, "password": password},
        )
        assert response.status_code == 201
        data = response.json()
        return AuthHeaders(
            {"Authorization": f"Bearer {data['token']}"},
            user_id=data["user"]["id"],
            email=email,
        )

    return _register


@pytest.fixture
def auth_headers(register_user):
    """Create a user and return auth headers with user info."""
    return register_user("Test User", "test@example.com")


@pytest.fixture
def other_auth_headers(register_user):
    """A second, unrelated user."""
    return register_user("Other User", "other@example.com")


@pytest.fixture
def entry_payload():
    return {
        "title": "Inception",
        "type": "Movie",
        "director": "Nolan",
        "budget": "$160M",
        "location": "LA",
        "duration": "148 min",
        "yearTime": "2010",
    }
