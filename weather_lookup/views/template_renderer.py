"""Template rendering utilities for HTML views."""

from pathlib import Path

import httpx
from fastapi import Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from weather_lookup.config import Settings
from weather_lookup.exceptions import WeatherLookupException
from weather_lookup.logging_config import get_logger, log_with_context
from weather_lookup.models.weather import TemperatureUnit
from weather_lookup.presentation import DEFAULT_ICON
from weather_lookup.services import display_service, weather_service
from weather_lookup.state_managers import WeatherStateManager

logger = get_logger(__name__)

TEMPLATES_DIR = Path(__file__).parent.parent / "templates"
templates = Jinja2Templates(directory=TEMPLATES_DIR)

# Emoji stand-ins for the icon identifiers in a browser
ICON_GLYPHS = {
    "sun.max.fill": "☀️",
    "cloud.sun.fill": "⛅",
    "cloud.fill": "☁️",
    "cloud.fog.fill": "\U0001f32b️",
    "cloud.rain.fill": "\U0001f327️",
    "cloud.heavyrain.fill": "\U0001f327️",
    "cloud.drizzle.fill": "\U0001f326️",
    "cloud.snow.fill": "\U0001f328️",
    "wind.snow": "\U0001f32c️",
    "cloud.sleet.fill": "\U0001f9ca",
    "cloud.hail.fill": "\U0001f9ca",
    "cloud.bolt.fill": "\U0001f329️",
    "cloud.bolt.rain.fill": "⛈️",
    "cloud.bolt.snow.fill": "⛈️",
    "moon.stars.fill": "\U0001f319",
}


class TemplateRenderer:
    """Handles rendering of Jinja2 templates for the weather page."""

    @staticmethod
    def render_index(request: Request) -> HTMLResponse:
        """Render the main weather page."""
        return templates.TemplateResponse(request, "index.html", {})

    @staticmethod
    async def render_weather_tile(
        request: Request,
        weather_manager: WeatherStateManager,
        error: str | None = None,
    ) -> HTMLResponse:
        """Render the weather tile from stored state.

        Args:
            request: FastAPI request object
            weather_manager: Weather state manager
            error: Message to show instead of stale data

        Returns:
            HTMLResponse with rendered weather tile
        """
        display = await display_service.current_display(weather_manager)
        unit = display.unit if display else await weather_manager.get_unit()
        icon = display.presentation.icon if display else DEFAULT_ICON

        return templates.TemplateResponse(
            request,
            "tiles/weather.html",
            {
                "weather": display,
                "icon": icon,
                "glyph": ICON_GLYPHS.get(icon, ICON_GLYPHS[DEFAULT_ICON]),
                "is_celsius": unit is TemperatureUnit.CELSIUS,
                "error": error,
            },
        )

    @staticmethod
    async def render_search_tile(
        request: Request,
        client: httpx.AsyncClient,
        weather_manager: WeatherStateManager,
        settings: Settings,
        city: str,
    ) -> HTMLResponse:
        """Fetch weather for a city and render the tile.

        Lookup failures are shown in the tile instead of being raised.
        """
        try:
            snapshot = await weather_service.get_weather_by_city(client, city, settings)
            await weather_manager.set_snapshot(snapshot)
        except WeatherLookupException as e:
            log_with_context(
                logger,
                "warning",
                "Failed to get weather data",
                city=city,
                error=e.message,
                error_code=e.code.value,
                event_type="weather_error",
            )
            return await TemplateRenderer.render_weather_tile(request, weather_manager, error=e.message)

        return await TemplateRenderer.render_weather_tile(request, weather_manager)
