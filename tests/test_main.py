"""
Tests for the main application module.
"""

import pytest
from fastapi.testclient import TestClient

from weather_proxy.main import app, create_app


class TestMainApplication:
    """Test suite for main FastAPI application configuration.

    Validates application setup, middleware configuration,
    router registration, and API documentation endpoints.
    """

    @pytest.fixture
    def client(self):
        """Create a FastAPI test client.

        Returns:
            TestClient: Configured test client for API testing
        """
        return TestClient(app)

    def test_app_creation(self):
        """Test FastAPI application initialization.

        Verifies that the application is created with correct
        metadata and documentation endpoints are properly configured
        for both Swagger UI and ReDoc interfaces.
        """
        assert app.title == "Weather Proxy API"
        assert app.version == "1.0.0"
        assert app.docs_url == "/docs"
        assert app.redoc_url == "/redoc"
        assert app.openapi_url == "/openapi.json"

    def test_middlewares_added(self):
        """Test CORS and request tracking middleware integration."""
        middleware_classes = [m.cls.__name__ for m in app.user_middleware]
        assert "CORSMiddleware" in middleware_classes
        assert "RequestTrackerMiddleware" in middleware_classes

    def test_routers_included(self, settings):
        """Test API router registration.

        Every weather route is mounted under the API prefix and as an
        unprefixed alias.
        """
        client = TestClient(create_app(settings))

        for name in ("weather", "forecast", "location", "suggestions", "health"):
            for path in (f"/api/{name}", f"/{name}"):
                assert client.get(path).status_code in (200, 400), path

    def test_prometheus_metrics_endpoint(self, client):
        """Test Prometheus metrics endpoint availability."""
        response = client.get("/prometheus-metrics")

        assert response.status_code == 200

    def test_metrics_can_be_disabled(self, settings):
        client = TestClient(create_app(settings))

        assert client.get("/prometheus-metrics").status_code == 404

    def test_settings_are_attached_to_state(self, settings):
        built = create_app(settings)

        assert built.state.settings is settings
        assert built.state.upstream_client.units == settings.openweather_units

    def test_root_lists_endpoints(self, client):
        response = client.get("/")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "Running"
        assert body["endpoints"]["weather"] == "/api/weather?city=London"

    def test_openapi_hides_aliases(self, client):
        paths = client.get("/openapi.json").json()["paths"]

        assert "/api/weather" in paths
        assert "/weather" not in paths
