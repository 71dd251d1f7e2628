"""Application lifespan management."""

from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager
from typing import Any

import httpx
from fastapi import FastAPI

from weather_widget import __version__
from weather_widget.config import get_settings
from weather_widget.events import WeatherForm
from weather_widget.logging_config import get_logger, log_with_context
from weather_widget.middleware.logging_middleware import redact_sensitive_data
from weather_widget.services.weather_service import WeatherFetcher
from weather_widget.widget import WeatherWidget

logger = get_logger(__name__)


async def log_request(request: httpx.Request) -> None:
    """Event hook to log requests with redacted sensitive data."""
    log_with_context(
        logger,
        "info",
        "HTTP Request",
        method=request.method,
        url=redact_sensitive_data(str(request.url)),
        event_type="http_request",
    )


async def log_response(response: httpx.Response) -> None:
    """Event hook to log responses with redacted sensitive data."""
    await response.aread()
    log_with_context(
        logger,
        "info",
        "HTTP Response",
        status_code=response.status_code,
        url=redact_sensitive_data(str(response.request.url)),
        event_type="http_response",
    )


def create_http_client() -> httpx.AsyncClient:
    """Create the shared HTTP client with granular timeouts and logging hooks."""
    event_hooks: dict[str, list[Callable[..., Any]]] = {
        "request": [log_request],
        "response": [log_response],
    }
    return httpx.AsyncClient(
        timeout=httpx.Timeout(
            connect=5.0,
            read=10.0,
            write=5.0,
            pool=5.0,
        ),
        limits=httpx.Limits(
            max_keepalive_connections=5,
            max_connections=10,
            keepalive_expiry=30.0,
        ),
        follow_redirects=True,
        event_hooks=event_hooks,
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan - startup and shutdown events.

    Exceptions after yield are re-raised so cleanup still runs.
    """
    settings = get_settings()

    log_with_context(
        logger,
        "info",
        "Starting Weather Widget application",
        version=__version__,
        event_type="app_startup",
    )

    client = create_http_client()
    app.state.http_client = client

    # The credential is bound here, once, and never read again per request
    fetcher = WeatherFetcher(client, api_key=settings.weather_api_key, base_url=settings.weather_api_url)
    form = WeatherForm()
    widget = WeatherWidget(form, fetcher)
    await widget.initialize()

    app.state.weather_fetcher = fetcher
    app.state.weather_form = form
    app.state.weather_widget = widget

    try:
        yield
    except Exception as e:
        log_with_context(
            logger,
            "error",
            "Application error during lifespan",
            error=str(e),
            error_type=type(e).__name__,
            event_type="app_error",
        )
        raise
    finally:
        log_with_context(
            logger,
            "info",
            "Shutting down Weather Widget application",
            event_type="app_shutdown",
        )
        await widget.cleanup()
        await client.aclose()
        log_with_context(
            logger,
            "info",
            "HTTP client closed",
            event_type="http_client_cleanup",
        )
