"""Tests for main API endpoints."""

from fastapi.testclient import TestClient


def test_health_endpoint(client: TestClient) -> None:
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_request_validation_is_400(client: TestClient) -> None:
    """Malformed bodies use the common error shape."""
    response = client.post("/api/v1/shorten", json={})
    assert response.status_code == 400
    data = response.json()
    assert data["code"] == "REQUEST_VALIDATION"
    assert data["message"].startswith("url")
