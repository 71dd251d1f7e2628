"""The weather widget: input handling and the submission pipeline.

The widget owns exactly one piece of mutable state, the current
DisplayState, and replaces it as a whole on every submission.
Overlapping submissions are not sequenced: whichever finishes last wins.
"""

from abc import ABC, abstractmethod

from weather_widget.events import SubmitEvent, Subscription, WeatherForm
from weather_widget.exceptions import CityValidationError, WidgetException
from weather_widget.logging_config import get_logger, log_with_context
from weather_widget.models.display import CardView, DisplayState, ErrorState, IdleState, ShowingState
from weather_widget.protocols import WeatherFetcherProtocol
from weather_widget.views.presenter import render

logger = get_logger(__name__)


class Component(ABC):
    """Base class for components with an explicit lifecycle."""

    @abstractmethod
    async def initialize(self) -> None:
        """Initialize the component (called during app startup)."""
        pass

    @abstractmethod
    async def cleanup(self) -> None:
        """Release resources (called during app shutdown)."""
        pass


def validate_query(raw: str) -> str:
    """Trim the raw city input.

    Raises:
        CityValidationError: If nothing is left after trimming
    """
    query = raw.strip()
    if not query:
        raise CityValidationError()
    return query


async def resolve_display_state(raw: str, fetcher: WeatherFetcherProtocol) -> DisplayState:
    """Run one submission through validation and fetch.

    Validation uses the trimmed value, but the fetcher receives the raw
    value as typed.

    Args:
        raw: Raw city input
        fetcher: Fetcher used for the single network round trip

    Returns:
        ShowingState on success, ErrorState otherwise
    """
    try:
        validate_query(raw)
        reading = await fetcher.fetch(raw)
    except CityValidationError as e:
        return ErrorState(message=e.message)
    except WidgetException as e:
        log_with_context(
            logger,
            "warning",
            "Failed to get weather data",
            error=e.message,
            error_code=e.code.value,
            details=e.details,
            event_type="weather_error",
        )
        return ErrorState(message=e.message)
    except Exception as e:
        log_with_context(
            logger,
            "error",
            "Unexpected error while getting weather data",
            error=str(e),
            error_type=type(e).__name__,
            event_type="weather_unexpected_error",
        )
        return ErrorState(message=str(e))

    log_with_context(
        logger,
        "info",
        "Weather reading received",
        city=reading.city_name,
        condition_code=reading.condition_code,
        event_type="weather_reading",
    )
    return ShowingState(reading=reading)


class WeatherWidget(Component):
    """City form plus weather card.

    Subscribes to the form once in initialize() and unsubscribes in
    cleanup(); the subscription is never re-bound in between.

    There is one widget per process, so its state is shared by every
    client: all browsers see the card of the most recent submission.
    """

    def __init__(self, form: WeatherForm, fetcher: WeatherFetcherProtocol):
        self._form = form
        self._fetcher = fetcher
        self._subscription: Subscription | None = None
        self._state: DisplayState = IdleState()

    @property
    def state(self) -> DisplayState:
        return self._state

    @property
    def card(self) -> CardView:
        return render(self._state)

    @property
    def is_mounted(self) -> bool:
        return self._subscription is not None

    async def initialize(self) -> None:
        if self._subscription is not None:
            return
        self._subscription = self._form.add_submit_listener(self.handle_submit)
        log_with_context(logger, "info", "Weather widget mounted", event_type="widget_mounted")

    async def cleanup(self) -> None:
        if self._subscription is not None:
            self._subscription.unsubscribe()
            self._subscription = None
        self._state = IdleState()
        log_with_context(logger, "info", "Weather widget disposed", event_type="widget_disposed")

    async def handle_submit(self, event: SubmitEvent) -> None:
        """Handle one form submission and replace the display state."""
        event.prevent_default()
        self._state = await resolve_display_state(event.city, self._fetcher)
