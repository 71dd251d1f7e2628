"""Tests for weather and display models."""

import pytest
from pydantic import TypeAdapter, ValidationError

from weather_widget.models.display import DisplayState, ErrorState, IdleState, ShowingState
from weather_widget.models.weather import CurrentWeather, WeatherReading
from weather_widget.views.presenter import show_result


class TestCurrentWeather:
    """Tests for the provider payload model."""

    def test_ignores_unknown_fields(self, mock_weather_response):
        """Test a full provider response validates."""
        data = CurrentWeather.model_validate(mock_weather_response)

        assert data.name == "Amsterdam"
        assert data.main.humidity == 87
        assert len(data.weather) == 2

    def test_requires_weather_entry(self, paris_payload):
        """Test an empty weather list is rejected."""
        paris_payload["weather"] = []

        with pytest.raises(ValidationError):
            CurrentWeather.model_validate(paris_payload)


class TestWeatherReading:
    """Tests for WeatherReading."""

    def test_from_openweather(self, paris_payload, paris_reading):
        """Test the reading picks name, main and the first condition."""
        reading = WeatherReading.from_openweather(CurrentWeather.model_validate(paris_payload))

        assert reading == paris_reading

    def test_humidity_int_stays_int(self, paris_payload):
        """Test integer humidity is not coerced to float."""
        reading = WeatherReading.from_openweather(CurrentWeather.model_validate(paris_payload))

        assert isinstance(reading.humidity_percent, int)

    def test_reading_is_frozen(self, paris_reading):
        """Test readings cannot be mutated."""
        with pytest.raises(ValidationError):
            paris_reading.city_name = "Lyon"


class TestDisplayState:
    """Tests for the DisplayState tagged union."""

    def test_discriminator_round_trip(self, paris_reading):
        """Test states are told apart by their kind."""
        adapter = TypeAdapter(DisplayState)

        assert isinstance(adapter.validate_python({"kind": "idle"}), IdleState)
        assert isinstance(adapter.validate_python({"kind": "error", "message": "x"}), ErrorState)
        showing = adapter.validate_python({"kind": "showing", "reading": paris_reading.model_dump()})
        assert showing == ShowingState(reading=paris_reading)


def test_float_humidity_renders_without_fraction(paris_payload):
    """Test a provider humidity sent as 60.0 is shown as 60."""
    paris_payload["main"]["humidity"] = 60.0

    reading = WeatherReading.from_openweather(CurrentWeather.model_validate(paris_payload))

    assert show_result(reading).humidity.text == "Humidity: 60"
