"""Form submission events and listener subscriptions."""

from collections.abc import Awaitable, Callable

from weather_widget.logging_config import get_logger, log_with_context

logger = get_logger(__name__)


class SubmitEvent:
    """A single submission of the city form."""

    def __init__(self, city: str):
        self.city = city
        self.default_prevented = False

    def prevent_default(self) -> None:
        """Mark the event as handled so the host skips its default navigation."""
        self.default_prevented = True


SubmitListener = Callable[[SubmitEvent], Awaitable[None]]


class Subscription:
    """Handle returned by WeatherForm.add_submit_listener."""

    def __init__(self, form: "WeatherForm", listener: SubmitListener):
        self._form = form
        self._listener = listener
        self.active = True

    def unsubscribe(self) -> None:
        """Remove the listener. Calling it again is a no-op."""
        if self.active:
            self._form._remove_listener(self._listener)
            self.active = False


class WeatherForm:
    """Event source for the city form.

    Listeners are awaited in registration order for every submission. An
    exception raised by a listener propagates out of submit() and the
    remaining listeners are not called for that submission.
    """

    def __init__(self):
        self._listeners: list[SubmitListener] = []

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def add_submit_listener(self, listener: SubmitListener) -> Subscription:
        self._listeners.append(listener)
        return Subscription(self, listener)

    def _remove_listener(self, listener: SubmitListener) -> None:
        self._listeners.remove(listener)

    async def submit(self, city: str) -> SubmitEvent:
        """Dispatch a submission to every listener.

        Args:
            city: Raw value of the city input, untrimmed

        Returns:
            The dispatched event
        """
        event = SubmitEvent(city)
        log_with_context(
            logger,
            "debug",
            "Form submitted",
            listeners=len(self._listeners),
            event_type="form_submit",
        )
        for listener in list(self._listeners):
            await listener(event)
        return event
