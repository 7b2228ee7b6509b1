"""API tests for system endpoints and cross-cutting responses."""

import pytest

from src.core.config import settings


@pytest.mark.api
class TestSystemRoutes:
    """Health and config endpoints."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "version": settings.app_version}

    def test_config_hidden_outside_development(self, client):
        response = client.get("/config")

        assert response.status_code == 403


@pytest.mark.api
class TestCrossCutting:
    """Trace header and problem responses for unknown routes."""

    def test_trace_id_echoed(self, client):
        response = client.get("/health", headers={"X-Trace-Id": "trace-42"})

        assert response.headers["X-Trace-Id"] == "trace-42"

    def test_unknown_route_is_problem_404(self, client):
        response = client.get("/no-such-page")

        assert response.status_code == 404
        problem = response.json()
        assert problem["type"].endswith("/errors/not-found")
        assert problem["instance"] == "/no-such-page"
