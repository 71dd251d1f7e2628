"""FastAPI dependencies for dependency injection."""

from fastapi import Request

from weather_widget.events import WeatherForm
from weather_widget.services.weather_service import WeatherFetcher
from weather_widget.widget import WeatherWidget


async def get_weather_fetcher(request: Request) -> WeatherFetcher:
    fetcher: WeatherFetcher | None = getattr(request.app.state, "weather_fetcher", None)

    if fetcher is None:
        raise RuntimeError("Weather fetcher not initialized.")

    return fetcher


async def get_weather_form(request: Request) -> WeatherForm:
    """
    Get the city form event source from app state.

    Raises:
        RuntimeError: If the form is not initialized.
    """
    form: WeatherForm | None = getattr(request.app.state, "weather_form", None)

    if form is None:
        raise RuntimeError("Weather form not initialized.")

    return form


async def get_weather_widget(request: Request) -> WeatherWidget:
    """
    Get the mounted weather widget from app state.

    Raises:
        RuntimeError: If the widget is not initialized.
    """
    widget: WeatherWidget | None = getattr(request.app.state, "weather_widget", None)

    if widget is None:
        raise RuntimeError("Weather widget not initialized.")

    return widget
