"""Weather service for weatherapi.com integration."""

import httpx
from pydantic import ValidationError

from weather_lookup.config import Settings, get_settings
from weather_lookup.exceptions import InvalidLocationException, WeatherAPIException, WeatherException
from weather_lookup.logging_config import get_logger, log_with_context
from weather_lookup.models.weather import Coordinates, WeatherAPIError, WeatherAPIResponse, WeatherSnapshot

# weatherapi.com error code for an unresolvable "q" parameter
NO_MATCHING_LOCATION = 1006

logger = get_logger(__name__)


async def get_weather_by_city(client: httpx.AsyncClient, city: str, settings: Settings | None = None) -> WeatherSnapshot:
    """Get current weather for a city name.

    Args:
        client: Shared HTTP client for making requests
        city: City name as typed by the user
        settings: Settings instance (defaults to singleton)

    Returns:
        WeatherSnapshot for the resolved location

    Raises:
        InvalidLocationException: If the city is blank or unknown to the provider
        WeatherException: If the request or decoding fails
    """
    city = city.strip()
    if not city:
        raise InvalidLocationException("City name must not be empty", details={"query": city})
    return await _fetch_snapshot(client, city, settings)


async def get_weather_by_coordinates(
    client: httpx.AsyncClient,
    latitude: float,
    longitude: float,
    settings: Settings | None = None,
) -> WeatherSnapshot:
    """Get current weather for a latitude/longitude pair.

    Raises:
        InvalidLocationException: If the provider cannot resolve the coordinates
        WeatherException: If the request or decoding fails
    """
    try:
        coordinates = Coordinates(latitude=latitude, longitude=longitude)
    except ValidationError as e:
        raise InvalidLocationException(
            "Coordinates out of range",
            details={"latitude": latitude, "longitude": longitude},
        ) from e
    return await _fetch_snapshot(client, coordinates.query, settings)


async def _fetch_snapshot(client: httpx.AsyncClient, query: str, settings: Settings | None) -> WeatherSnapshot:
    """Fetch current.json for a query and decode it into a snapshot."""
    if settings is None:
        settings = get_settings()

    params = {
        "key": settings.weather_api_key,
        "q": query,
    }

    try:
        response = await client.get(settings.weather_api_url, params=params, timeout=10.0, follow_redirects=True)
        response.raise_for_status()
        data = response.json()

        api_response = WeatherAPIResponse.model_validate(data)
        snapshot = WeatherSnapshot.from_weatherapi(api_response)

    except httpx.HTTPStatusError as e:
        api_error = _parse_api_error(e.response)
        if api_error is not None and api_error.error.code == NO_MATCHING_LOCATION:
            raise InvalidLocationException(
                api_error.error.message,
                details={"query": query, "provider_code": api_error.error.code},
            ) from e
        raise WeatherAPIException(
            f"Weather API request failed (HTTP {e.response.status_code}): {e.response.text}",
            status_code=e.response.status_code,
            details={"api_response": e.response.text},
        ) from e
    except httpx.HTTPError as e:
        raise WeatherException(
            f"Failed to fetch weather data: {str(e)}",
            details={"error_type": "network_error"},
        ) from e
    except (ValidationError, ValueError) as e:
        raise WeatherException(
            f"Failed to process weather data: {str(e)}",
            details={"error_type": "parsing_error"},
        ) from e

    log_with_context(
        logger,
        "info",
        "Weather snapshot fetched",
        query=query,
        location=snapshot.location_name,
        condition=snapshot.condition_text,
        event_type="weather_fetched",
    )
    return snapshot


def _parse_api_error(response: httpx.Response) -> WeatherAPIError | None:
    """Decode a weatherapi.com error body, or None if it is not one."""
    try:
        return WeatherAPIError.model_validate(response.json())
    except (ValidationError, ValueError):
        return None
