"""Weather Lookup models"""

from weather_lookup.models.health import HealthResponse, ReadinessResponse, ReadinessStatus
from weather_lookup.models.weather import (
    Coordinates,
    PresentationModel,
    TemperatureUnit,
    UnitResponse,
    UnitSelection,
    WeatherAPIResponse,
    WeatherDisplay,
    WeatherSnapshot,
)

__all__ = [
    "ReadinessResponse",
    "ReadinessStatus",
    "HealthResponse",
    "Coordinates",
    "PresentationModel",
    "TemperatureUnit",
    "UnitResponse",
    "UnitSelection",
    "WeatherAPIResponse",
    "WeatherDisplay",
    "WeatherSnapshot",
]
