"""Tests for health check API endpoints."""

from __future__ import annotations

from fastapi import status
from fastapi.testclient import TestClient


class TestHealthEndpoint:
    """Tests for GET /health."""

    def test_health_returns_200(self, client: TestClient):
        """GET /health returns 200 OK."""
        response = client.get("/health")
        assert response.status_code == status.HTTP_200_OK

    def test_health_returns_status_field(self, client: TestClient):
        """GET /health reports healthy while the catalog is loaded."""
        data = client.get("/health").json()
        assert data["status"] == "healthy"

    def test_health_returns_version(self, client: TestClient, test_settings):
        """GET /health returns the configured version."""
        data = client.get("/health").json()
        assert data["version"] == test_settings.app_version

    def test_health_returns_checks(self, client: TestClient):
        """GET /health returns checks object."""
        data = client.get("/health").json()
        assert data["checks"] == {"catalog": True}


class TestLivenessEndpoint:
    """Tests for GET /health/live."""

    def test_live_returns_200(self, client: TestClient):
        """GET /health/live returns 200 OK."""
        response = client.get("/health/live")
        assert response.status_code == status.HTTP_200_OK

    def test_live_returns_alive_status(self, client: TestClient):
        """GET /health/live returns alive status."""
        response = client.get("/health/live")
        data = response.json()
        assert data["status"] == "alive"


class TestMountedApp:
    """The API is served under /api by the top-level application."""

    def test_root_and_prefixed_health(self):
        from fxmonitor.main import create_app

        with TestClient(create_app()) as client:
            root = client.get("/").json()
            assert root["health"] == "/api/health"

            response = client.get("/api/health")
            assert response.status_code == status.HTTP_200_OK

    def test_unknown_route_is_404(self, client: TestClient):
        response = client.get("/nope")
        assert response.status_code == status.HTTP_404_NOT_FOUND
