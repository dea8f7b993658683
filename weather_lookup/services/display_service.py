"""Glue between fetched snapshots, stored state and the presentation translator."""

from datetime import datetime

from weather_lookup.logging_config import get_logger, log_with_context
from weather_lookup.models.weather import WeatherDisplay, WeatherSnapshot
from weather_lookup.presentation import derive
from weather_lookup.state_managers import WeatherStateManager

logger = get_logger(__name__)


def local_hour() -> int:
    """Hour of day on the server's local wall clock."""
    return datetime.now().hour


async def current_display(manager: WeatherStateManager, hour: int | None = None) -> WeatherDisplay | None:
    """Re-derive the display from the stored snapshot and unit.

    Args:
        manager: Weather state manager
        hour: Hour of day (defaults to the local wall clock)

    Returns:
        WeatherDisplay, or None if no snapshot has been fetched yet
    """
    result = await manager.current_presentation(local_hour() if hour is None else hour)
    if result is None:
        return None

    snapshot, unit, presentation = result
    return WeatherDisplay(
        location=snapshot.location_name,
        condition=snapshot.condition_text,
        unit=unit,
        presentation=presentation,
    )


async def record_snapshot(manager: WeatherStateManager, snapshot: WeatherSnapshot) -> WeatherDisplay:
    """Store a freshly fetched snapshot and return its display in the selected unit."""
    await manager.set_snapshot(snapshot)
    unit = await manager.get_unit()
    display = WeatherDisplay(
        location=snapshot.location_name,
        condition=snapshot.condition_text,
        unit=unit,
        presentation=derive(snapshot, unit, local_hour()),
    )

    log_with_context(
        logger,
        "debug",
        "Presentation derived",
        location=display.location,
        unit=unit.value,
        icon=display.presentation.icon,
        event_type="presentation_derived",
    )
    return display
