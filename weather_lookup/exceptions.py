"""Custom exceptions for Weather Lookup with proper HTTP status codes."""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Error codes for structured error responses."""

    # Generic errors
    WEATHER_LOOKUP_ERROR = "WEATHER_LOOKUP_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # Weather errors
    WEATHER_ERROR = "WEATHER_ERROR"
    WEATHER_API_ERROR = "WEATHER_API_ERROR"
    WEATHER_INVALID_LOCATION = "WEATHER_INVALID_LOCATION"
    WEATHER_NOT_LOADED = "WEATHER_NOT_LOADED"

    # Device location errors
    LOCATION_UNAVAILABLE = "LOCATION_UNAVAILABLE"


class WeatherLookupException(Exception):
    """Base exception for weather lookup errors with HTTP status code support.

    All custom exceptions inherit from this class so the API layer can turn
    them into structured error responses in one place.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.WEATHER_LOOKUP_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        """Initialize weather lookup exception.

        Args:
            message: Human-readable error message
            code: Error code from ErrorCode enum
            status_code: HTTP status code (default 500)
            details: Additional error context/details
        """
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class WeatherException(WeatherLookupException):
    """Weather service errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.WEATHER_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, status_code, details)


class WeatherAPIException(WeatherException):
    """Weather API request failed."""

    def __init__(self, message: str, status_code: int = 502, details: dict[str, Any] | None = None):
        super().__init__(
            message,
            code=ErrorCode.WEATHER_API_ERROR,
            status_code=status_code,
            details=details,
        )


class InvalidLocationException(WeatherException):
    """The provider could not resolve the requested location."""

    def __init__(self, message: str = "No matching location found", details: dict[str, Any] | None = None):
        super().__init__(
            message,
            code=ErrorCode.WEATHER_INVALID_LOCATION,
            status_code=404,
            details=details,
        )


class WeatherNotLoadedException(WeatherException):
    """No snapshot has been fetched yet."""

    def __init__(self, message: str = "No weather data loaded yet", details: dict[str, Any] | None = None):
        super().__init__(
            message,
            code=ErrorCode.WEATHER_NOT_LOADED,
            status_code=404,
            details=details,
        )


class LocationUnavailableException(WeatherLookupException):
    """No device location has been reported yet."""

    def __init__(self, message: str = "Fetching location...", details: dict[str, Any] | None = None):
        super().__init__(
            message,
            code=ErrorCode.LOCATION_UNAVAILABLE,
            status_code=409,
            details=details,
        )
