"""Pytest configuration and shared fixtures."""

import os
from unittest.mock import AsyncMock

import httpx
import pytest
from fastapi.testclient import TestClient

# Settings are read when the app module is imported
os.environ.setdefault("WEATHER_API_KEY", "test-weather-key")

from weather_lookup.config import WEATHERAPI_CURRENT_URL, Settings  # noqa: E402
from weather_lookup.dependencies import get_http_client  # noqa: E402
from weather_lookup.main import app as fastapi_app  # noqa: E402
from weather_lookup.models.weather import WeatherSnapshot  # noqa: E402


@pytest.fixture
def make_response():
    """Factory for real httpx.Response objects bound to a weatherapi.com request."""

    def _make(status_code: int = 200, json=None, text: str | None = None) -> httpx.Response:
        request = httpx.Request("GET", WEATHERAPI_CURRENT_URL)
        if text is not None:
            return httpx.Response(status_code, text=text, request=request)
        return httpx.Response(status_code, json=json, request=request)

    return _make


@pytest.fixture
def test_client():
    """FastAPI test client with lifespan context."""
    with TestClient(fastapi_app) as client:
        yield client


@pytest.fixture
def mock_http_client():
    """Mock httpx.AsyncClient for external API calls."""
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_client.get = AsyncMock()
    mock_client.aclose = AsyncMock()
    return mock_client


@pytest.fixture
def api_client(mock_http_client):
    """Test client whose outgoing weather requests go to mock_http_client."""
    fastapi_app.dependency_overrides[get_http_client] = lambda: mock_http_client
    try:
        with TestClient(fastapi_app) as client:
            yield client
    finally:
        fastapi_app.dependency_overrides.clear()


@pytest.fixture
def mock_settings():
    """Settings instance with test values."""
    return Settings(
        api_host="0.0.0.0",
        api_port=8000,
        weather_api_key="test-weather-key",
    )


@pytest.fixture
def mock_weather_response():
    """Mock weatherapi.com current.json response."""
    return {
        "location": {
            "name": "London",
            "region": "City of London, Greater London",
            "country": "United Kingdom",
            "lat": 51.52,
            "lon": -0.11,
            "localtime": "2024-03-15 14:00",
        },
        "current": {
            "last_updated": "2024-03-15 13:45",
            "temp_c": 15.0,
            "temp_f": 59.0,
            "is_day": 1,
            "condition": {
                "text": "Partly cloudy",
                "icon": "//cdn.weatherapi.com/weather/64x64/day/116.png",
                "code": 1003,
            },
            "humidity": 72,
            "feelslike_c": 14.2,
            "feelslike_f": 57.6,
        },
    }


@pytest.fixture
def london_snapshot():
    """Snapshot matching mock_weather_response."""
    return WeatherSnapshot(
        location_name="London",
        temperature_celsius=15.0,
        feels_like_celsius=14.2,
        humidity_percent=72,
        condition_text="Partly cloudy",
    )
