"""Unit tests for the display service."""

from unittest.mock import patch

import pytest

from weather_lookup.models.weather import TemperatureUnit, WeatherSnapshot
from weather_lookup.services import display_service
from weather_lookup.state_managers import WeatherStateManager


@pytest.mark.asyncio
async def test_current_display_empty():
    """Test nothing is displayed before a fetch."""
    assert await display_service.current_display(WeatherStateManager()) is None


@pytest.mark.asyncio
async def test_record_snapshot(london_snapshot):
    """Test a recorded snapshot becomes the display."""
    manager = WeatherStateManager()

    display = await display_service.record_snapshot(manager, london_snapshot)

    assert display.location == "London"
    assert display.condition == "Partly cloudy"
    assert display.unit is TemperatureUnit.CELSIUS
    assert display.presentation.feels_like == "Feels like: 14.2°C"
    assert await manager.get_snapshot() == london_snapshot


@pytest.mark.asyncio
async def test_record_snapshot_uses_selected_unit(london_snapshot):
    """Test a recorded snapshot is shown in the unit already selected."""
    manager = WeatherStateManager()
    await manager.set_unit(TemperatureUnit.FAHRENHEIT)

    display = await display_service.record_snapshot(manager, london_snapshot)

    assert display.unit is TemperatureUnit.FAHRENHEIT
    assert display.presentation.temperature == "59°F"
    assert display.presentation.humidity == "Humidity: 72.0%"


@pytest.mark.asyncio
async def test_current_display_uses_given_hour():
    """Test the hour argument drives the icon fallback."""
    manager = WeatherStateManager()
    await manager.set_snapshot(WeatherSnapshot(location_name="Lima", condition_text="Garúa"))

    night = await display_service.current_display(manager, hour=23)
    day = await display_service.current_display(manager, hour=11)

    assert night.presentation.icon == "moon.stars.fill"
    assert day.presentation.icon == "cloud.fill"


@pytest.mark.asyncio
async def test_current_display_defaults_to_wall_clock():
    """Test the local hour is used when none is given."""
    manager = WeatherStateManager()
    await manager.set_snapshot(WeatherSnapshot(location_name="Lima"))

    with patch.object(display_service, "local_hour", return_value=2):
        display = await display_service.current_display(manager)

    assert display.presentation.icon == "moon.stars.fill"
