"""Celsius/Fahrenheit conversion and temperature formatting."""

from decimal import ROUND_HALF_UP, Decimal

from weather_lookup.models.weather import TemperatureUnit


def to_fahrenheit(celsius: float) -> int:
    """Convert Celsius to a whole Fahrenheit degree.

    Halves round away from zero (36.5 -> 37, -0.5 -> -1), not to even.
    """
    fahrenheit = celsius * 9 / 5 + 32
    return int(Decimal(fahrenheit).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def format_temperature(celsius: float, unit: TemperatureUnit) -> str:
    """Format a Celsius reading in the selected unit.

    Celsius is shown as decoded ("15.5°C"); Fahrenheit is rounded ("60°F").
    """
    if unit is TemperatureUnit.FAHRENHEIT:
        return f"{to_fahrenheit(celsius)}°F"
    return f"{celsius}°C"
