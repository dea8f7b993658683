"""FastAPI dependencies that hand out the objects created in the lifespan."""

from typing import Any

import httpx
from fastapi import Request

from weather_lookup.state_managers import LocationStateManager, WeatherStateManager


def _from_app_state(request: Request, name: str) -> Any:
    """Look up a lifespan-created object on app.state.

    Raises:
        RuntimeError: If the app was started without its lifespan.
    """
    value = getattr(request.app.state, name, None)
    if value is None:
        raise RuntimeError(f"app.state.{name} is not initialized; was the app started without its lifespan?")
    return value


async def get_http_client(request: Request) -> httpx.AsyncClient:
    """Shared client for weatherapi.com requests."""
    return _from_app_state(request, "http_client")


async def get_weather_state_manager(request: Request) -> WeatherStateManager:
    """Unit and last snapshot."""
    return _from_app_state(request, "weather_state_manager")


async def get_location_state_manager(request: Request) -> LocationStateManager:
    """Last reported device location."""
    return _from_app_state(request, "location_state_manager")
