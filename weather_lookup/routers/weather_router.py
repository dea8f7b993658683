"""Weather API routes with support for JSON and HTML responses."""

from typing import Literal

import httpx
from fastapi import APIRouter, Depends, Query, Request

from weather_lookup.config import Settings, get_settings
from weather_lookup.dependencies import get_http_client, get_location_state_manager, get_weather_state_manager
from weather_lookup.exceptions import LocationUnavailableException, WeatherNotLoadedException
from weather_lookup.models.weather import Coordinates, UnitResponse, UnitSelection, WeatherDisplay
from weather_lookup.services import display_service, weather_service
from weather_lookup.state_managers import LocationStateManager, WeatherStateManager
from weather_lookup.views.template_renderer import TemplateRenderer

router = APIRouter()


@router.get(
    "/search",
    response_model=WeatherDisplay,
    summary="Look up weather by city",
    responses={
        200: {
            "description": "Successful response",
            "content": {
                "application/json": {
                    "example": {
                        "location": "London",
                        "condition": "Partly cloudy",
                        "unit": "celsius",
                        "presentation": {
                            "temperature": "15.0°C",
                            "feels_like": "Feels like: 14.2°C",
                            "humidity": "Humidity: 72.0%",
                            "icon": "cloud.sun.fill",
                        },
                    }
                }
            },
        },
        404: {"description": "No matching location found"},
        502: {"description": "Weather API error"},
    },
)
async def search_weather(
    city: str = Query(..., min_length=1, description="City name"),
    client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
    weather_manager: WeatherStateManager = Depends(get_weather_state_manager),
):
    """Fetch current weather for a city and make it the displayed snapshot."""
    snapshot = await weather_service.get_weather_by_city(client, city, settings)
    return await display_service.record_snapshot(weather_manager, snapshot)


@router.get("/coordinates", response_model=WeatherDisplay, summary="Look up weather by coordinates")
async def coordinates_weather(
    lat: float = Query(..., ge=-90, le=90, description="Latitude"),
    lon: float = Query(..., ge=-180, le=180, description="Longitude"),
    client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
    weather_manager: WeatherStateManager = Depends(get_weather_state_manager),
):
    """Fetch current weather for a latitude/longitude pair."""
    snapshot = await weather_service.get_weather_by_coordinates(client, lat, lon, settings)
    return await display_service.record_snapshot(weather_manager, snapshot)


@router.get(
    "/current-location",
    response_model=WeatherDisplay,
    summary="Look up weather for the last reported device location",
    responses={409: {"description": "No device location reported yet"}},
)
async def current_location_weather(
    client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
    weather_manager: WeatherStateManager = Depends(get_weather_state_manager),
    location_manager: LocationStateManager = Depends(get_location_state_manager),
):
    """Refresh weather for the device location, as the location button does."""
    location = await location_manager.get_location()
    if location is None:
        raise LocationUnavailableException()

    snapshot = await weather_service.get_weather_by_coordinates(client, location.latitude, location.longitude, settings)
    return await display_service.record_snapshot(weather_manager, snapshot)


@router.get(
    "/current",
    summary="Get the displayed weather",
    description="""
    Re-derives the presentation from the last fetched snapshot using the
    currently selected unit. Does not call the weather provider.
    """,
    responses={404: {"description": "No weather fetched yet"}},
)
async def get_current_weather(
    request: Request,
    weather_manager: WeatherStateManager = Depends(get_weather_state_manager),
    format: Literal["json", "html"] = Query(default="json", description="Response format"),
):
    """Get the displayed weather.

    Args:
        request: FastAPI request object
        weather_manager: Weather state from dependency injection
        format: Response format - 'json' for API, 'html' for HTMX

    Returns:
        JSON with WeatherDisplay model or HTML tile fragment
    """
    if format == "html":
        return await TemplateRenderer.render_weather_tile(request, weather_manager)

    display = await display_service.current_display(weather_manager)
    if display is None:
        raise WeatherNotLoadedException()
    return display


@router.get("/unit", response_model=UnitResponse, summary="Get the selected temperature unit")
async def get_unit(weather_manager: WeatherStateManager = Depends(get_weather_state_manager)):
    """Return the selected unit and the display it produces."""
    return UnitResponse(
        unit=await weather_manager.get_unit(),
        weather=await display_service.current_display(weather_manager),
    )


@router.put("/unit", response_model=UnitResponse, summary="Select the temperature unit")
async def set_unit(
    selection: UnitSelection,
    weather_manager: WeatherStateManager = Depends(get_weather_state_manager),
):
    """Toggle between Celsius and Fahrenheit.

    The stored snapshot is re-derived in the new unit; no new fetch is made.
    """
    await weather_manager.set_unit(selection.unit)
    return UnitResponse(
        unit=selection.unit,
        weather=await display_service.current_display(weather_manager),
    )


location_router = APIRouter()


@location_router.post("", response_model=WeatherDisplay, summary="Report the device location")
async def report_location(
    location: Coordinates,
    client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
    weather_manager: WeatherStateManager = Depends(get_weather_state_manager),
    location_manager: LocationStateManager = Depends(get_location_state_manager),
):
    """Record a location update and fetch weather for it."""
    await location_manager.set_location(location)
    snapshot = await weather_service.get_weather_by_coordinates(client, location.latitude, location.longitude, settings)
    return await display_service.record_snapshot(weather_manager, snapshot)
