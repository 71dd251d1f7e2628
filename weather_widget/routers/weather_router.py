"""Weather API routes returning JSON."""

from fastapi import APIRouter, Depends, Query

from weather_widget.dependencies import get_weather_fetcher
from weather_widget.models.base_models import ErrorResponse
from weather_widget.models.display import DisplayResponse
from weather_widget.models.weather import WeatherReading
from weather_widget.services.weather_service import WeatherFetcher
from weather_widget.views.presenter import render
from weather_widget.widget import resolve_display_state, validate_query

router = APIRouter()


@router.get(
    "/current",
    response_model=WeatherReading,
    summary="Get current weather",
    description="""
    Retrieves the current reading for a city from OpenWeatherMap.

    Errors are returned as structured JSON with the widget's error code.
    """,
    responses={
        422: {"model": ErrorResponse, "description": "Empty city"},
        502: {"model": ErrorResponse, "description": "Weather provider error or malformed payload"},
        503: {"model": ErrorResponse, "description": "Weather provider unreachable"},
    },
)
async def get_current_weather(
    city: str = Query(default="", description="City name"),
    fetcher: WeatherFetcher = Depends(get_weather_fetcher),
):
    """Get the current reading for a city."""
    validate_query(city)
    return await fetcher.fetch(city)


@router.get(
    "/display",
    response_model=DisplayResponse,
    summary="Get display state for a city",
    description="""
    Runs one submission through the widget pipeline without touching the
    page's card and returns the resulting display state and card.
    """,
)
async def get_display(
    city: str = Query(default="", description="City name"),
    fetcher: WeatherFetcher = Depends(get_weather_fetcher),
):
    state = await resolve_display_state(city, fetcher)
    return DisplayResponse(state=state, card=render(state))
