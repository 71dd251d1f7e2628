"""Custom exceptions for the Weather Widget with proper HTTP status codes."""

from enum import Enum
from typing import Any

VALIDATION_MESSAGE = "Please, enter a city!"
FETCH_FAILED_MESSAGE = "Could not fetch weather data"


class ErrorCode(str, Enum):
    """Error codes for structured error responses."""

    # Generic errors
    WIDGET_ERROR = "WIDGET_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"

    # Input errors
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # Weather provider errors
    WEATHER_FETCH_ERROR = "WEATHER_FETCH_ERROR"
    WEATHER_NETWORK_ERROR = "WEATHER_NETWORK_ERROR"
    WEATHER_PARSE_ERROR = "WEATHER_PARSE_ERROR"


class WidgetException(Exception):
    """Base exception for widget errors with HTTP status code support.

    Every error that ends up on the display card derives from this class,
    so the submission pipeline only has to handle one exception type.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.WIDGET_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        """Initialize widget exception.

        Args:
            message: Human-readable error message, shown to the user verbatim
            code: Error code from ErrorCode enum
            status_code: HTTP status code (default 500)
            details: Additional error context/details
        """
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class CityValidationError(WidgetException):
    """The submitted city was empty after trimming."""

    def __init__(self, message: str = VALIDATION_MESSAGE, details: dict[str, Any] | None = None):
        super().__init__(
            message,
            code=ErrorCode.VALIDATION_ERROR,
            status_code=422,
            details=details,
        )


class FetchError(WidgetException):
    """The provider answered with a non-2xx status.

    The user-facing message is fixed; the provider status is kept in
    ``details`` for diagnostics only.
    """

    def __init__(self, provider_status: int | None = None, details: dict[str, Any] | None = None):
        details = dict(details or {})
        if provider_status is not None:
            details["provider_status"] = provider_status
        super().__init__(
            FETCH_FAILED_MESSAGE,
            code=ErrorCode.WEATHER_FETCH_ERROR,
            status_code=502,
            details=details,
        )


class WeatherNetworkError(WidgetException):
    """The request never produced a response (DNS, connect, timeout)."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(
            message,
            code=ErrorCode.WEATHER_NETWORK_ERROR,
            status_code=503,
            details=details,
        )


class WeatherParseError(WidgetException):
    """A 2xx response body could not be decoded into a reading."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(
            message,
            code=ErrorCode.WEATHER_PARSE_ERROR,
            status_code=502,
            details=details,
        )
