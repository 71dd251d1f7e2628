"""Pytest configuration and shared fixtures."""

from unittest.mock import AsyncMock

import httpx
import pytest
from fastapi.testclient import TestClient

from weather_widget.config import OPENWEATHER_URL, Settings
from weather_widget.main import app as fastapi_app
from weather_widget.models.weather import WeatherReading


@pytest.fixture
def test_client():
    """FastAPI test client with lifespan context."""
    with TestClient(fastapi_app) as client:
        yield client
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
def mock_http_client():
    """Mock httpx.AsyncClient for external API calls."""
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_client.get = AsyncMock()
    mock_client.aclose = AsyncMock()
    return mock_client


@pytest.fixture
def mock_settings():
    """Settings instance with test values, ignoring any local .env file."""
    return Settings(
        _env_file=None,
        api_host="127.0.0.1",
        api_port=8000,
        weather_api_key="test-weather-key",
    )


@pytest.fixture
def make_response():
    """Build a real httpx.Response as returned by the provider."""

    def _make(status_code: int = 200, json=None, content: bytes | None = None) -> httpx.Response:
        request = httpx.Request("GET", OPENWEATHER_URL)
        if json is not None:
            return httpx.Response(status_code, json=json, request=request)
        return httpx.Response(status_code, content=content or b"", request=request)

    return _make


@pytest.fixture
def paris_payload():
    """Minimal OpenWeatherMap payload for Paris."""
    return {
        "name": "Paris",
        "main": {"temp": 290.5, "humidity": 60},
        "weather": [{"description": "clear sky", "id": 800}],
    }


@pytest.fixture
def mock_weather_response():
    """Full OpenWeatherMap current weather response."""
    return {
        "coord": {"lon": 4.9041, "lat": 52.3676},
        "weather": [
            {"id": 521, "main": "Rain", "description": "shower rain", "icon": "09d"},
            {"id": 701, "main": "Mist", "description": "mist", "icon": "50d"},
        ],
        "base": "stations",
        "main": {
            "temp": 284.2,
            "feels_like": 283.1,
            "temp_min": 283.0,
            "temp_max": 285.4,
            "pressure": 1013,
            "humidity": 87,
        },
        "visibility": 10000,
        "wind": {"speed": 3.5, "deg": 180},
        "clouds": {"all": 75},
        "dt": 1760870000,
        "sys": {"country": "NL", "sunrise": 1760850000, "sunset": 1760890000},
        "timezone": 7200,
        "id": 2759794,
        "name": "Amsterdam",
        "cod": 200,
    }


@pytest.fixture
def paris_reading():
    """Reading equivalent to paris_payload."""
    return WeatherReading(
        city_name="Paris",
        temperature_kelvin=290.5,
        humidity_percent=60,
        condition_text="clear sky",
        condition_code=800,
    )


@pytest.fixture
def mock_fetcher(paris_reading):
    """Fetcher double that always returns the Paris reading."""
    fetcher = AsyncMock()
    fetcher.fetch = AsyncMock(return_value=paris_reading)
    return fetcher
