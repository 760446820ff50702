import pytest
from unittest.mock import patch
from fastapi.testclient import TestClient
from fetchaller.main import app
from fetchaller.schemas import ToolResponse

# Test client
client = TestClient(app)


class TestFetchEndpoint:
    """Integration tests for the /fetch endpoint"""

    @patch("fetchaller.api.routes.run_fetch_tool")
    def test_fetch_success(self, mock_tool):
        """Test successful fetch returns the tool response"""
        async def fake_tool(*args, **kwargs):
            return ToolResponse(text="# Example\n\nHello")

        mock_tool.side_effect = fake_tool

        response = client.post(
            "/fetch",
            json={"url": "https://example.com", "maxTokens": 100, "timeoutSeconds": 3},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["text"] == "# Example\n\nHello"
        assert data["is_error"] is False

        mock_tool.assert_called_once_with("https://example.com", max_tokens=100, timeout_seconds=3)

    def test_fetch_invalid_protocol(self):
        """Test bad schemes are rejected with 400"""
        response = client.post("/fetch", json={"url": "ftp://example.com"})

        assert response.status_code == 400
        assert "Invalid protocol" in response.json()["detail"]

    def test_fetch_invalid_url(self):
        """Test unparseable URLs are rejected with 400"""
        response = client.post("/fetch", json={"url": "not-a-url"})

        assert response.status_code == 400
        assert response.json()["detail"] == "Error: Invalid URL: not-a-url"

    def test_fetch_missing_url(self):
        """Test endpoint with missing URL"""
        response = client.post("/fetch", json={})

        assert response.status_code == 422  # Validation error

    def test_fetch_non_positive_budget(self):
        """Test endpoint rejects a zero token budget"""
        response = client.post("/fetch", json={"url": "https://example.com", "maxTokens": 0})

        assert response.status_code == 422

    @patch("fetchaller.api.routes.run_fetch_tool")
    def test_fetch_timeout_maps_to_504(self, mock_tool):
        """Test timeouts become gateway timeouts"""
        async def fake_tool(*args, **kwargs):
            return ToolResponse(text="Error: Request timed out (10s limit)", is_error=True, error_kind="timeout")

        mock_tool.side_effect = fake_tool

        response = client.post("/fetch", json={"url": "https://slow.example.com"})

        assert response.status_code == 504
        assert response.json()["detail"] == "Error: Request timed out (10s limit)"

    @patch("fetchaller.api.routes.run_fetch_tool")
    def test_fetch_upstream_error_maps_to_502(self, mock_tool):
        """Test other upstream failures become bad gateway"""
        async def fake_tool(*args, **kwargs):
            return ToolResponse(
                text="Error: HTTP 500\n\nPartial content:\noops",
                is_error=True,
                error_kind="http_error",
            )

        mock_tool.side_effect = fake_tool

        response = client.post("/fetch", json={"url": "https://broken.example.com"})

        assert response.status_code == 502
        assert "Partial content:\noops" in response.json()["detail"]


class TestHealthEndpoints:
    """Test health and utility endpoints"""

    def test_health_endpoint(self):
        """Test health check endpoint"""
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "service": "fetchaller"}

    def test_root_endpoint(self):
        """Test root endpoint"""
        response = client.get("/")
        assert response.status_code == 200
        data = response.json()
        assert data["service"] == "fetchaller"
        assert data["endpoints"]["fetch"] == "POST /fetch"
