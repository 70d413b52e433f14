"""Pytest configuration and fixtures."""

import os

# Settings are cached on first import; configure the test environment first
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("STORE_BACKEND", "sql")
os.environ.setdefault("SECRET_KEY", "test-secret-key-with-at-least-32-bytes!")
os.environ.setdefault("REFRESH_TOKEN_SECRET", "test-refresh-token-secret-0123456789")
os.environ.setdefault("COOKIE_SECURE", "false")
os.environ.setdefault("BASE_URL", "http://sho.rt")

from collections.abc import Generator  # noqa: E402
from typing import Any  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402

from shortener import models  # noqa: E402, F401
from shortener.database import Base, create_db_engine, get_db  # noqa: E402
from shortener.main import app  # noqa: E402

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite:///:memory:"

# Same engine recipe as the app, so SAVEPOINTs behave on SQLite
test_engine = create_db_engine(TEST_DATABASE_URL)

# Create test session factory
TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

TEST_PASSWORD = "Str0ng!Password"


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    # Create all tables
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        # Drop all tables after test
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def client(db_session: Session) -> Generator[TestClient, Any, None]:
    """Create a test client with database session."""

    def override_get_db() -> Generator[Session, None, None]:
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


def register_user(
    client: TestClient,
    email: str = "ada@example.com",
    password: str = TEST_PASSWORD,
) -> dict[str, Any]:
    response = client.post(
        "/api/v1/auth/register",
        json={"first_name": "Ada", "last_name": "Lovelace", "email": email, "password": password},
    )
    assert response.status_code == 201, response.text
    return response.json()


def login_user(
    client: TestClient,
    email: str = "ada@example.com",
    password: str = TEST_PASSWORD,
    client_id: str | None = None,
) -> tuple[str, str]:
    """Log in and return the access token and the hex refresh secret."""
    headers = {"X-Client-Id": client_id} if client_id else {}
    response = client.post(
        "/api/v1/auth/login", json={"email": email, "password": password}, headers=headers
    )
    assert response.status_code == 200, response.text
    refresh_secret = response.cookies.get("refresh_token")
    assert refresh_secret
    return response.json()["access_token"], refresh_secret


@pytest.fixture
def access_token(client: TestClient) -> str:
    """Register the default user and return a valid access token."""
    register_user(client)
    token, _ = login_user(client)
    return token
