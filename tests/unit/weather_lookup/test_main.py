"""Unit tests for app wiring, error handlers and lifecycle."""

from weather_lookup.exceptions import WeatherLookupException
from weather_lookup.main import app
from weather_lookup.state_managers import LocationStateManager, WeatherStateManager


class TestExceptionHandlers:
    """Tests for registered exception handlers."""

    def test_weather_lookup_exception_handler_exists(self):
        """Test that WeatherLookupException handler is registered."""
        assert WeatherLookupException in app.exception_handlers

    def test_general_exception_handler_exists(self):
        """Test that a catch-all handler is registered."""
        assert Exception in app.exception_handlers


class TestLifecycle:
    """Tests for app lifecycle events."""

    def test_app_has_routes(self):
        """Test that the API routes are registered."""
        paths = {getattr(route, "path", None) for route in app.routes}

        assert "/api/weather/search" in paths
        assert "/api/weather/unit" in paths
        assert "/api/location" in paths
        assert "/tiles/weather" in paths

    def test_lifespan_creates_state(self, test_client):
        """Test startup creates the HTTP client and state managers."""
        state = test_client.app.state

        assert not state.http_client.is_closed
        assert isinstance(state.weather_state_manager, WeatherStateManager)
        assert isinstance(state.location_state_manager, LocationStateManager)

    def test_openapi_hides_tiles(self, test_client):
        """Test HTML tile fragments are left out of the API docs."""
        schema = test_client.get("/openapi.json").json()

        assert "/api/weather/search" in schema["paths"]
        assert not any(path.startswith("/tiles/") for path in schema["paths"])


class TestHealthEndpoints:
    """Tests for health endpoints."""

    def test_health_endpoint(self, test_client):
        """Test health check endpoint returns status."""
        response = test_client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "ok"

    def test_readiness_endpoint(self, test_client):
        """Test readiness reports each check."""
        response = test_client.get("/health/ready")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ready"
        assert data["checks"] == {"http_client": True, "weather_api_key": True}
        assert data["weather_loaded"] is False

    def test_favicon(self, test_client):
        """Test favicon returns an empty icon."""
        response = test_client.get("/favicon.ico")

        assert response.status_code == 200
        assert response.content == b""
