"""Tests for custom exception classes."""

from weather_lookup.exceptions import (
    ErrorCode,
    InvalidLocationException,
    LocationUnavailableException,
    WeatherAPIException,
    WeatherException,
    WeatherLookupException,
    WeatherNotLoadedException,
)


class TestErrorCodes:
    """Tests for ErrorCode enum."""

    def test_error_code_values(self):
        """Test that error codes compare equal to their string values."""
        assert ErrorCode.WEATHER_LOOKUP_ERROR == "WEATHER_LOOKUP_ERROR"
        assert ErrorCode.WEATHER_ERROR == "WEATHER_ERROR"
        assert ErrorCode.WEATHER_INVALID_LOCATION == "WEATHER_INVALID_LOCATION"
        assert ErrorCode.LOCATION_UNAVAILABLE == "LOCATION_UNAVAILABLE"


class TestWeatherLookupException:
    """Tests for WeatherLookupException."""

    def test_basic(self):
        """Test creating basic exception."""
        exc = WeatherLookupException(message="Test error")

        assert exc.message == "Test error"
        assert exc.code == ErrorCode.WEATHER_LOOKUP_ERROR
        assert exc.status_code == 500
        assert exc.details == {}
        assert str(exc) == "Test error"

    def test_with_details(self):
        """Test exception with details."""
        exc = WeatherLookupException(
            message="Test error", code=ErrorCode.INTERNAL_ERROR, status_code=503, details={"key": "value"}
        )

        assert exc.code == ErrorCode.INTERNAL_ERROR
        assert exc.status_code == 503
        assert exc.details["key"] == "value"


class TestWeatherExceptions:
    """Tests for weather exception subclasses."""

    def test_weather_exception(self):
        """Test WeatherException defaults."""
        exc = WeatherException("Weather failed")

        assert isinstance(exc, WeatherLookupException)
        assert exc.code == ErrorCode.WEATHER_ERROR
        assert exc.status_code == 500

    def test_weather_api_exception(self):
        """Test WeatherAPIException defaults to 502."""
        exc = WeatherAPIException("Upstream failed")

        assert isinstance(exc, WeatherException)
        assert exc.code == ErrorCode.WEATHER_API_ERROR
        assert exc.status_code == 502

    def test_invalid_location(self):
        """Test InvalidLocationException is a 404."""
        exc = InvalidLocationException(details={"query": "Atlantis"})

        assert isinstance(exc, WeatherException)
        assert exc.code == ErrorCode.WEATHER_INVALID_LOCATION
        assert exc.status_code == 404
        assert exc.details == {"query": "Atlantis"}

    def test_not_loaded(self):
        """Test WeatherNotLoadedException is a 404."""
        exc = WeatherNotLoadedException()

        assert exc.code == ErrorCode.WEATHER_NOT_LOADED
        assert exc.status_code == 404


class TestLocationUnavailableException:
    """Tests for LocationUnavailableException."""

    def test_defaults(self):
        """Test the default message matches what the UI shows while waiting."""
        exc = LocationUnavailableException()

        assert exc.message == "Fetching location..."
        assert exc.code == ErrorCode.LOCATION_UNAVAILABLE
        assert exc.status_code == 409
