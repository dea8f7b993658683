"""Health endpoints."""

import httpx
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from weather_lookup import __version__
from weather_lookup.config import Settings, get_settings
from weather_lookup.dependencies import get_http_client, get_weather_state_manager
from weather_lookup.models import HealthResponse, ReadinessResponse, ReadinessStatus
from weather_lookup.state_managers import WeatherStateManager

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Liveness check for container healthchecks.

    For prerequisites, use `/health/ready`.
    """
    return HealthResponse(version=__version__)


@router.get("/health/ready", response_model=ReadinessResponse, responses={503: {"model": ReadinessResponse}})
async def readiness_check(
    client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
    weather_manager: WeatherStateManager = Depends(get_weather_state_manager),
):
    """Report whether lookups can be served.

    Only local prerequisites are checked, so calling this never spends
    weatherapi.com quota. Returns 503 when any check fails.
    """
    readiness = ReadinessResponse.from_checks(
        __version__,
        checks={
            "http_client": not client.is_closed,
            "weather_api_key": bool(settings.weather_api_key),
        },
        weather_loaded=await weather_manager.get_snapshot() is not None,
    )
    status_code = 200 if readiness.status is ReadinessStatus.READY else 503
    return JSONResponse(status_code=status_code, content=readiness.model_dump(mode="json"))
