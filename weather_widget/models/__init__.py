"""Weather Widget models"""

from weather_widget.models.base_models import ErrorResponse, HealthResponse
from weather_widget.models.display import (
    CardView,
    DisplayResponse,
    DisplayState,
    ErrorState,
    FieldView,
    IdleState,
    ShowingState,
)
from weather_widget.models.weather import CurrentWeather, WeatherReading

__all__ = [
    "CardView",
    "CurrentWeather",
    "DisplayResponse",
    "DisplayState",
    "ErrorResponse",
    "ErrorState",
    "FieldView",
    "HealthResponse",
    "IdleState",
    "ShowingState",
    "WeatherReading",
]
