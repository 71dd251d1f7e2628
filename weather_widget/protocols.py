"""Protocol definitions for dependency injection."""

from typing import Protocol

from weather_widget.models.weather import WeatherReading


class WeatherFetcherProtocol(Protocol):
    """Protocol for weather fetchers.

    The widget only needs something that turns a city query into a reading,
    which keeps the network out of its tests.
    """

    async def fetch(self, query: str) -> WeatherReading:
        """Fetch the current reading for a city.

        Args:
            query: City name as submitted

        Returns:
            Parsed weather reading

        Raises:
            WidgetException: If the reading cannot be obtained
        """
        ...
