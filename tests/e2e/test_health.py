"""End-to-end tests for the health endpoint."""


class TestHealthEndpoint:
    """End-to-end tests for GET /health."""

    def test_health(self, client):
        """Should report the service as healthy."""
        # Act
        response = client.get("/health")

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert "timestamp" in data
        assert "environment" in data
