"""
Tests for the HTTP service.

Run with: pytest app/tests/test_server.py -v
"""

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

sys.path.insert(0, str(Path(__file__).parent.parent))

from strcalc import __version__
from strcalc.server import app, create_app


@pytest.fixture
def client():
    """Create a test client for the default app."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def restricted_client(monkeypatch):
    """Create a test client whose CORS list holds a single origin."""
    monkeypatch.setenv("ALLOWED_CORS_ORIGINS", "http://only.test")
    with TestClient(create_app()) as test_client:
        yield test_client


def _preflight(client, origin):
    return client.options(
        "/api/add",
        headers={
            "Origin": origin,
            "Access-Control-Request-Method": "POST",
        },
    )


class TestEndpoints:
    """Tests for server endpoints."""

    def test_health(self, client):
        """Should report healthy status and version."""
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "version": __version__}

    def test_add_success(self, client):
        """Should return the total for valid input."""
        response = client.post("/api/add", json={"numbers": "//[*][%]\n1*2%3"})
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["total"] == 6
        assert body["error"] is None

    def test_add_empty(self, client):
        """Should return zero for an empty string."""
        response = client.post("/api/add", json={"numbers": ""})
        assert response.json()["total"] == 0

    def test_add_negatives(self, client):
        """Should return a failed result listing the negatives."""
        response = client.post("/api/add", json={"numbers": "1,-2,3,-4"})
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is False
        assert body["total"] is None
        assert body["negatives"] == [-2, -4]
        assert body["error"] == "Negative numbers not allowed: -2, -4"

    def test_add_missing_body_field(self, client):
        """Should reject a body without numbers."""
        response = client.post("/api/add", json={})
        assert response.status_code == 422


class TestCorrelationId:
    """Tests for the correlation ID middleware."""

    def test_echoes_given_id(self, client):
        """Should echo the caller's correlation ID."""
        response = client.get("/health", headers={"X-Correlation-ID": "req_given"})
        assert response.headers["X-Correlation-ID"] == "req_given"

    def test_generates_id(self, client):
        """Should generate a correlation ID when none is given."""
        response = client.get("/health")
        assert response.headers["X-Correlation-ID"].startswith("req_")


class TestCors:
    """Tests for CORS origin handling."""

    def test_listed_origin_allowed(self, restricted_client):
        """Should allow a preflight from a configured origin."""
        response = _preflight(restricted_client, "http://only.test")
        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "http://only.test"

    def test_unlisted_localhost_origin_rejected(self, restricted_client):
        """Should not allow a localhost origin missing from the list."""
        response = _preflight(restricted_client, "http://localhost:9999")
        assert "access-control-allow-origin" not in response.headers

    def test_unlisted_origin_rejected(self, restricted_client):
        """Should not allow an arbitrary origin."""
        response = _preflight(restricted_client, "http://evil.test")
        assert "access-control-allow-origin" not in response.headers
