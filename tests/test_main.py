"""Tests for main API endpoints."""

from fastapi import status
from fastapi.testclient import TestClient


def test_root_endpoint(client: TestClient) -> None:
    """Test root endpoint returns welcome message."""
    response = client.get("/")
    assert response.status_code == 200
    assert response.json() == {"message": "Welcome to flashdeck API"}


def test_health_endpoint(client: TestClient) -> None:
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_api_root_endpoint(client: TestClient) -> None:
    """Test API v1 root endpoint."""
    response = client.get("/api/v1/")
    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "flashdeck API v1"
    assert data["version"] == "0.1.0"
    assert data["docs"] == "/api/v1/docs"


def test_blank_owner_header_is_rejected(client: TestClient) -> None:
    """Test that a blank X-Owner-Id header is a bad request."""
    response = client.get("/api/v1/lessons", headers={"X-Owner-Id": "   "})
    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_missing_owner_header_uses_single_user_mode(client: TestClient) -> None:
    """Test that requests without X-Owner-Id act as the local owner."""
    response = client.post("/api/v1/lessons", json={"name": "Mine"})
    assert response.status_code == status.HTTP_201_CREATED
    assert response.json()["lesson"]["owner_id"] == "local"
