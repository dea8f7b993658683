"""Application lifespan: the shared HTTP client and the in-memory state."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from weather_lookup import __version__
from weather_lookup.config import Settings, get_settings
from weather_lookup.logging_config import get_logger, log_with_context
from weather_lookup.middleware.logging_middleware import redact_sensitive_data
from weather_lookup.state_managers import LocationStateManager, StateManager, WeatherStateManager

logger = get_logger(__name__)

# app.state attribute -> manager class
STATE_MANAGERS: dict[str, type[StateManager]] = {
    "weather_state_manager": WeatherStateManager,
    "location_state_manager": LocationStateManager,
}


async def log_provider_response(response: httpx.Response) -> None:
    """Response hook; the API key is redacted from the logged URL."""
    request = response.request
    log_with_context(
        logger,
        "info" if response.is_success else "warning",
        "Weather provider responded",
        method=request.method,
        url=redact_sensitive_data(str(request.url)),
        status_code=response.status_code,
        event_type="provider_response",
    )


def create_http_client(settings: Settings) -> httpx.AsyncClient:
    """Create the client used for every weatherapi.com call."""
    return httpx.AsyncClient(
        # Connecting and pool checkout get half the read budget
        timeout=httpx.Timeout(settings.weather_api_timeout, connect=settings.weather_api_timeout / 2),
        limits=httpx.Limits(max_keepalive_connections=5, max_connections=10),
        event_hooks={"response": [log_provider_response]},
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Create the HTTP client and state managers, and tear them down on exit."""
    settings = get_settings()
    log_with_context(
        logger,
        "info",
        "Starting Weather Lookup",
        version=__version__,
        timeout=settings.weather_api_timeout,
        event_type="app_startup",
    )

    client = create_http_client(settings)
    app.state.http_client = client

    managers: list[StateManager] = []
    for name, manager_class in STATE_MANAGERS.items():
        manager = manager_class()
        await manager.initialize()
        setattr(app.state, name, manager)
        managers.append(manager)

    try:
        yield
    except Exception as e:
        log_with_context(
            logger,
            "error",
            "Application error during lifespan",
            error=str(e),
            error_type=type(e).__name__,
            event_type="app_error",
        )
        raise
    finally:
        for manager in managers:
            await manager.cleanup()
        await client.aclose()
        log_with_context(logger, "info", "Weather Lookup stopped", event_type="app_shutdown")
