"""Integration tests for API endpoints.

Exercises the formatting, transforms and tutorial endpoints using FastAPI TestClient.
"""

import pytest
from fastapi.testclient import TestClient

from datafmt.api.app import create_app
from datafmt.config import VERSION


@pytest.fixture(scope="module")
def client():
    """Create a test client."""
    app = create_app()
    with TestClient(app) as client:
        yield client


# =============================================================================
# HEALTH CHECK
# =============================================================================


class TestHealthEndpoint:
    """Test health check endpoint."""

    def test_health_check(self, client):
        """Health endpoint returns healthy."""
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["version"] == VERSION


# =============================================================================
# FORMAT ENDPOINT
# =============================================================================


class TestFormatEndpoint:
    """Test POST /api/v1/format."""

    def test_format_simple(self, client):
        response = client.post(
            "/api/v1/format",
            json={"template": "Hello, {{user.name}}!", "data": {"user": {"name": "Ada"}}},
        )
        assert response.status_code == 200
        assert response.json() == {"result": "Hello, Ada!"}

    def test_format_transformations(self, client):
        response = client.post(
            "/api/v1/format",
            json={
                "template": "{{default(nick, 'friend')}} / {{replace(s, ['_', ' '])}}",
                "data": {"s": "in_progress"},
            },
        )
        assert response.status_code == 200
        assert response.json()["result"] == "friend / in progress"

    def test_error_marker_passed_through(self, client):
        """#ERROR is returned as ordinary text."""
        response = client.post(
            "/api/v1/format",
            json={"template": "{{bogus(x)}}", "data": {"x": 1}},
        )
        assert response.status_code == 200
        assert response.json()["result"] == "#ERROR"

    def test_missing_template_and_data(self, client):
        response = client.post("/api/v1/format", json={})
        assert response.status_code == 200
        assert response.json()["result"] == ""

    def test_null_data(self, client):
        response = client.post("/api/v1/format", json={"template": "Hi {{name}}", "data": None})
        assert response.status_code == 200
        assert response.json()["result"] == "Hi "

    def test_invalid_template_type(self, client):
        """Non-string templates are rejected by validation."""
        response = client.post("/api/v1/format", json={"template": ["x"], "data": {}})
        assert response.status_code == 422


# =============================================================================
# TRANSFORMS AND TUTORIAL
# =============================================================================


class TestReferenceEndpoints:
    """Test the read-only reference endpoints."""

    def test_list_transforms(self, client):
        response = client.get("/api/v1/transforms")
        assert response.status_code == 200
        data = response.json()
        assert [t["name"] for t in data] == ["default", "date", "replace"]
        assert all(t["description"] for t in data)

    def test_tutorial(self, client):
        response = client.get("/api/v1/tutorial")
        assert response.status_code == 200
        tutorial = response.json()["tutorial"]
        assert "{{name}}" in tutorial
        assert "#ERROR" in tutorial
