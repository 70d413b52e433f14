"""Tests for the shorten and redirect endpoints."""

import re

import pytest
from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from shortener import models
from shortener.config import get_settings

CODE_PATTERN = re.compile(r"^[0-9a-zA-Z]{7}$")


class TestShorten:
    """Test suite for POST /api/v1/shorten."""

    def test_shorten_and_redirect(self, client: TestClient, db_session: Session) -> None:
        """A shortened URL gets a 7-char code that redirects to the original."""
        url = "https://example.com/very/long/path"

        response = client.post("/api/v1/shorten", json={"url": url})

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert CODE_PATTERN.match(data["code"])
        assert data["url"] == url
        assert data["short_url"] == f"{get_settings().BASE_URL}/{data['code']}"
        assert data["id"]

        row = db_session.query(models.ShortUrl).filter_by(code=data["code"]).one()
        assert row.url == url
        assert row.owner_id is None

        redirect = client.get(f"/{data['code']}", follow_redirects=False)
        assert redirect.status_code == status.HTTP_302_FOUND
        assert redirect.headers["location"] == url

    def test_each_shorten_gets_its_own_code(self, client: TestClient) -> None:
        url = "https://example.com/same"
        codes = {
            client.post("/api/v1/shorten", json={"url": url}).json()["code"] for _ in range(5)
        }
        assert len(codes) == 5

    def test_empty_url(self, client: TestClient, db_session: Session) -> None:
        """An empty URL is rejected before anything is stored."""
        response = client.post("/api/v1/shorten", json={"url": ""})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        data = response.json()
        assert data["code"] == "INVALID_URL"
        assert data["message"].startswith("Invalid Url: ")
        assert db_session.query(models.ShortUrl).count() == 0

    def test_malformed_url(self, client: TestClient) -> None:
        response = client.post("/api/v1/shorten", json={"url": "not-a-url"})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {
            "code": "INVALID_URL",
            "message": "Invalid Url: Must Start With http or https",
        }


class TestRedirect:
    """Test suite for GET /{code}."""

    def test_unknown_code(self, client: TestClient) -> None:
        response = client.get("/nope123", follow_redirects=False)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        data = response.json()
        assert data["code"] == "RESOURCE_NOT_FOUND"
        assert "nope123" in data["message"]

    def test_redirect_returns_exact_url(self, client: TestClient) -> None:
        url = "https://example.com/path?q=1&r=two#section"
        code = client.post("/api/v1/shorten", json={"url": url}).json()["code"]

        response = client.get(f"/{code}", follow_redirects=False)

        assert response.headers["location"] == url

    def test_internationalised_url(self, client: TestClient) -> None:
        """The Location header is ASCII: IDNA host, percent-encoded path."""
        url = "https://münchen.example/päth"
        created = client.post("/api/v1/shorten", json={"url": url}).json()
        assert created["url"] == url

        response = client.get(f"/{created['code']}", follow_redirects=False)

        assert response.status_code == status.HTTP_302_FOUND
        assert response.headers["location"] == "https://xn--mnchen-3ya.example/p%C3%A4th"

    def test_resolve_timeout(self, client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
        code = client.post("/api/v1/shorten", json={"url": "https://example.com"}).json()["code"]
        monkeypatch.setattr(get_settings(), "RESOLVE_TIMEOUT_SECONDS", 0.0)

        response = client.get(f"/{code}", follow_redirects=False)

        assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE
        assert response.json() == {
            "code": "OPERATION_TIMEOUT",
            "message": "The service is temporarily unavailable. Please retry.",
        }


class TestShortenForCurrentUser:
    """Test suite for POST /api/v1/me/shorten."""

    def test_requires_authentication(self, client: TestClient) -> None:
        response = client.post("/api/v1/me/shorten", json={"url": "https://example.com"})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json()["code"] == "UNAUTHENTICATED"
        assert response.headers["www-authenticate"] == "Bearer"

    def test_owned_link(self, client: TestClient, db_session: Session, access_token: str) -> None:
        response = client.post(
            "/api/v1/me/shorten",
            json={"url": "https://example.com/mine"},
            headers={"Authorization": f"Bearer {access_token}"},
        )

        assert response.status_code == status.HTTP_201_CREATED
        code = response.json()["code"]
        row = db_session.query(models.ShortUrl).filter_by(code=code).one()
        user = db_session.query(models.User).one()
        assert row.owner_id == user.id
