"""
Integration tests for service status endpoints.
"""
import pytest


@pytest.mark.integration
class TestStatusEndpoints:
    """Tests for root, health and metrics endpoints."""

    def test_root(self, client):
        """Test the root liveness text."""
        response = client.get("/")
        assert response.status_code == 200
        assert response["Content-Type"].startswith("text/plain")
        assert response.content == b"License Server is running."

    def test_health(self, client):
        """Test the health endpoint."""
        response = client.get("/health/")
        assert response.json() == {"status": "healthy", "service": "license-server"}

    @pytest.mark.django_db
    def test_health_db(self, client):
        """Test the database health endpoint."""
        response = client.get("/health/db/")
        assert response.status_code == 200
        assert response.json()["database"] == "connected"

    def test_metrics(self, client):
        """Test Prometheus exposition."""
        client.get("/health/")
        response = client.get("/metrics")
        assert response.status_code == 200
        body = response.content.decode()
        assert "http_requests_total" in body
        assert "license_validations_total" in body
