"""Main FastAPI application entry point."""

from dotenv import find_dotenv, load_dotenv
from fastapi.responses import Response

from weather_widget.config import get_settings
from weather_widget.core.app_factory import create_app
from weather_widget.logging_config import setup_logging

# Load environment variables from the .env file in the working directory
load_dotenv(find_dotenv(usecwd=True))

settings = get_settings()
setup_logging(settings.log_level, settings.log_dir)

app = create_app()


@app.get("/favicon.ico")
async def favicon():
    """Return empty favicon to prevent 404 errors."""
    return Response(content=b"", media_type="image/x-icon")


def run() -> None:
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "weather_widget.main:app",
        host=settings.api_host,
        port=settings.api_port,
    )


if __name__ == "__main__":
    run()
