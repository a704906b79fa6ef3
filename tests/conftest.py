"""Pytest configuration and fixtures."""

import os

# Point the app at the test database before it is imported
os.environ.setdefault("DATABASE_URL", "sqlite:///./test.db")
os.environ["SEED_SAMPLE_RECIPES"] = "false"
os.environ["SESSION_BACKEND"] = "memory"
os.environ.pop("ANTHROPIC_API_KEY", None)

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from tender.api.dependencies import get_session_store
from tender.database import Base, get_db
from tender.main import app
from tender.services.sessions import InMemorySessionStore


class AuthHeaders(dict):
    """Dict subclass that also stores user_id and email."""

    def __init__(self, *args, user_id: int | None = None, email: str | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.user_id = user_id
        self.email = email


SQLALCHEMY_DATABASE_URL = os.environ["DATABASE_URL"]

connect_args = {"check_same_thread": False} if "sqlite" in SQLALCHEMY_DATABASE_URL else {}
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args=connect_args)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    from tender import models  # noqa: F401

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


@pytest.fixture
def session_store():
    """A session store private to the test."""
    return InMemorySessionStore()


@pytest.fixture(scope="function")
def client(db, session_store):
    """Create a test client with database and session store overrides."""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_session_store] = lambda: session_store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def register(client, email="test@example.com", password="testpass123", **extra) -> AuthHeaders:
    """Register a user and return auth headers for them."""
    payload = {"email": email, "password": password, "first_name": "Test", "last_name": "User"}
    payload.update(extra)
    response = client.post("/api/v1/auth/register", json=payload)
    assert response.status_code == 201, response.text
    data = response.json()
    return AuthHeaders(
        {"Authorization": f"Bearer {data['token']}"},
        user_id=data["user"]["id"],
        email=data["user"]["email"],
    )


@pytest.fixture
def auth_headers(client):
    """Create a user and return auth headers with user info."""
    return register(client)


@pytest.fixture
def other_auth_headers(client):
    """A second, unrelated user."""
    return register(client, email="other@example.com", password="otherpass123")


def create_recipe(client, headers, **fields) -> dict:
    payload = {"name": "Test Recipe", "ingredients": ["1 onion"]}
    payload.update(fields)
    response = client.post("/api/v1/recipes", headers=headers, json=payload)
    assert response.status_code == 201, response.text
    return response.json()
