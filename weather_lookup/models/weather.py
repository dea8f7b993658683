"""Pydantic models for weather data."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class TemperatureUnit(str, Enum):
    """Unit used to display temperatures."""

    CELSIUS = "celsius"
    FAHRENHEIT = "fahrenheit"


class ConditionInfo(BaseModel):
    """Condition block from weatherapi.com."""

    text: str


class CurrentInfo(BaseModel):
    """Current conditions from weatherapi.com.

    Every field is optional; the provider omits readings it does not have.
    """

    temp_c: float | None = None
    feelslike_c: float | None = None
    humidity: float | None = None
    condition: ConditionInfo | None = None


class LocationInfo(BaseModel):
    """Location block from weatherapi.com."""

    name: str


class WeatherAPIResponse(BaseModel):
    """Raw weatherapi.com current.json response model."""

    location: LocationInfo
    current: CurrentInfo


class APIErrorInfo(BaseModel):
    """Error block from weatherapi.com."""

    code: int
    message: str


class WeatherAPIError(BaseModel):
    """Raw weatherapi.com error body, e.g. {"error": {"code": 1006, "message": "..."}}."""

    error: APIErrorInfo


class WeatherSnapshot(BaseModel):
    """One fetched weather reading for a location.

    Absent readings stay None and are never defaulted to zero or an empty
    string, so "unknown" is distinguishable from a genuine reading.
    """

    model_config = ConfigDict(frozen=True)

    location_name: str
    temperature_celsius: float | None = None
    feels_like_celsius: float | None = None
    humidity_percent: float | None = None
    condition_text: str | None = None

    @classmethod
    def from_weatherapi(cls, data: WeatherAPIResponse) -> "WeatherSnapshot":
        """Create WeatherSnapshot from weatherapi.com data.

        Args:
            data: Raw WeatherAPIResponse from weatherapi.com

        Returns:
            WeatherSnapshot with absent readings left as None
        """
        current = data.current
        return cls(
            location_name=data.location.name,
            temperature_celsius=current.temp_c,
            feels_like_celsius=current.feelslike_c,
            humidity_percent=current.humidity,
            condition_text=current.condition.text if current.condition else None,
        )


class PresentationModel(BaseModel):
    """Display strings derived from a snapshot, a unit and the hour of day."""

    model_config = ConfigDict(frozen=True)

    temperature: str
    feels_like: str
    humidity: str
    icon: str


class Coordinates(BaseModel):
    """A device location report."""

    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)

    @property
    def query(self) -> str:
        """weatherapi.com query string for these coordinates."""
        return f"{self.latitude},{self.longitude}"


class UnitSelection(BaseModel):
    """Request body for toggling the temperature unit."""

    unit: TemperatureUnit


class WeatherDisplay(BaseModel):
    """Weather response for API endpoints and UI."""

    location: str
    condition: str | None
    unit: TemperatureUnit
    presentation: PresentationModel


class UnitResponse(BaseModel):
    """Current unit plus the re-derived display, when a snapshot exists."""

    unit: TemperatureUnit
    weather: WeatherDisplay | None = None
