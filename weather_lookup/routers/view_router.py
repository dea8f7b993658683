"""Page/view routes for serving the HTML page and tile fragments."""

import httpx
from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse

from weather_lookup.config import Settings, get_settings
from weather_lookup.dependencies import get_http_client, get_weather_state_manager
from weather_lookup.models.weather import TemperatureUnit
from weather_lookup.state_managers import WeatherStateManager
from weather_lookup.views.template_renderer import TemplateRenderer

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
async def index(request: Request):
    """Render the weather page."""
    return TemplateRenderer.render_index(request)


@router.get("/tiles/weather", response_class=HTMLResponse)
async def weather_tile(
    request: Request,
    city: str | None = None,
    client: httpx.AsyncClient = Depends(get_http_client),
    weather_manager: WeatherStateManager = Depends(get_weather_state_manager),
    settings: Settings = Depends(get_settings),
):
    """Render the weather tile, searching first when a city is given."""
    if city:
        return await TemplateRenderer.render_search_tile(request, client, weather_manager, settings, city)
    return await TemplateRenderer.render_weather_tile(request, weather_manager)


@router.post("/tiles/weather/unit", response_class=HTMLResponse)
async def toggle_unit_tile(
    request: Request,
    celsius: bool = Form(default=False),
    weather_manager: WeatherStateManager = Depends(get_weather_state_manager),
):
    """Apply the unit switch (on means Celsius) and re-render the tile."""
    await weather_manager.set_unit(TemperatureUnit.CELSIUS if celsius else TemperatureUnit.FAHRENHEIT)
    return await TemplateRenderer.render_weather_tile(request, weather_manager)
