"""Weather service for OpenWeatherMap API integration."""

import httpx
from pydantic import ValidationError

from weather_widget.config import OPENWEATHER_URL
from weather_widget.exceptions import FetchError, WeatherNetworkError, WeatherParseError
from weather_widget.logging_config import get_logger, log_with_context
from weather_widget.models.weather import CurrentWeather, WeatherReading

logger = get_logger(__name__)


async def get_current_weather(
    client: httpx.AsyncClient,
    query: str,
    api_key: str,
    base_url: str = OPENWEATHER_URL,
) -> WeatherReading:
    """Get current weather for a city from OpenWeatherMap.

    One request, no retries and no caching. Timeouts are whatever the
    shared client was configured with.

    Args:
        client: Shared HTTP client for making requests
        query: City name, sent exactly as given
        api_key: Provider credential (not checked locally)
        base_url: Current weather endpoint

    Returns:
        WeatherReading parsed from the provider payload

    Raises:
        FetchError: If the provider answers with a non-2xx status
        WeatherNetworkError: If no response was received
        WeatherParseError: If a 2xx body is not a valid weather payload
    """
    params = {"q": query, "appid": api_key}

    try:
        response = await client.get(base_url, params=params)
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        # The provider body is never shown to the user, only logged
        log_with_context(
            logger,
            "warning",
            "Weather API returned an error status",
            status_code=e.response.status_code,
            api_response=e.response.text,
            event_type="weather_fetch_failed",
        )
        raise FetchError(provider_status=e.response.status_code) from e
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        # InvalidURL is not an HTTPError, e.g. a query longer than httpx accepts
        raise WeatherNetworkError(
            f"Failed to fetch weather data: {str(e)}",
            details={"error_type": "network_error"},
        ) from e

    try:
        # json.JSONDecodeError is a ValueError
        current_weather = CurrentWeather.model_validate(response.json())
    except (ValueError, ValidationError) as e:
        raise WeatherParseError(str(e), details={"error_type": "parsing_error"}) from e

    return WeatherReading.from_openweather(current_weather)


class WeatherFetcher:
    """Fetcher bound to a client and a credential at construction time."""

    def __init__(self, client: httpx.AsyncClient, api_key: str, base_url: str = OPENWEATHER_URL):
        self._client = client
        self._api_key = api_key
        self._base_url = base_url

    async def fetch(self, query: str) -> WeatherReading:
        return await get_current_weather(self._client, query, self._api_key, self._base_url)
