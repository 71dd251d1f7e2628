"""Application factory for creating and configuring the FastAPI app."""

from pathlib import Path

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from weather_widget import __version__
from weather_widget.core.lifespan import lifespan
from weather_widget.middleware.error_handlers import register_error_handlers
from weather_widget.routers import health_router, view_router, weather_router

STATIC_DIR = Path(__file__).parent.parent / "static"


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title="Weather Widget",
        description="""
        🌦 **Weather Widget** - current weather for any city

        - `/` - the widget page (city form and weather card)
        - `/widget/submit` - form submission, returns the card fragment
        - `/api/weather/current` - current reading as JSON
        - `/api/weather/display` - display state and card as JSON
        - `/health` - basic health check
        """,
        version=__version__,
        lifespan=lifespan,
    )

    register_error_handlers(app)

    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

    # View routes (HTML page and card fragment) - no prefix
    app.include_router(view_router.router, tags=["views"])
    app.include_router(health_router.router, tags=["health"])
    app.include_router(weather_router.router, prefix="/api/weather", tags=["weather"])

    return app
