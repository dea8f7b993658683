"""Derive display strings from a weather snapshot."""

from weather_lookup.models.weather import PresentationModel, TemperatureUnit, WeatherSnapshot
from weather_lookup.presentation.conditions import classify
from weather_lookup.presentation.units import format_temperature

PLACEHOLDER = "--"


def derive(snapshot: WeatherSnapshot, unit: TemperatureUnit, hour: int) -> PresentationModel:
    """Build the PresentationModel for a snapshot.

    Pure function of its inputs; absent readings become PLACEHOLDER.

    Args:
        snapshot: Decoded weather reading
        unit: Unit selected by the user
        hour: Local hour of day, 0-23, used for the day/night icon fallback

    Returns:
        PresentationModel with formatted temperature, feels-like, humidity and icon id
    """
    temperature = PLACEHOLDER
    if snapshot.temperature_celsius is not None:
        temperature = format_temperature(snapshot.temperature_celsius, unit)

    feels_like = PLACEHOLDER
    if snapshot.feels_like_celsius is not None:
        feels_like = f"Feels like: {format_temperature(snapshot.feels_like_celsius, unit)}"

    humidity = PLACEHOLDER
    if snapshot.humidity_percent is not None:
        humidity = f"Humidity: {snapshot.humidity_percent}%"

    return PresentationModel(
        temperature=temperature,
        feels_like=feels_like,
        humidity=humidity,
        icon=classify(snapshot.condition_text or "", hour),
    )
