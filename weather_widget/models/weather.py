"""Pydantic models for weather data."""

from pydantic import BaseModel, ConfigDict, Field


class WeatherCondition(BaseModel):
    """Weather condition entry from OpenWeatherMap."""

    id: int
    description: str


class MainInfo(BaseModel):
    """Main weather metrics from OpenWeatherMap."""

    temp: float
    # int | float keeps the provider's own representation for display
    humidity: int | float


class CurrentWeather(BaseModel):
    """Raw OpenWeatherMap current weather payload.

    Only the fields the widget reads are declared; everything else the
    provider sends is ignored.
    """

    name: str
    main: MainInfo
    weather: list[WeatherCondition] = Field(min_length=1)


class WeatherReading(BaseModel):
    """One provider reading, alive for a single render cycle."""

    model_config = ConfigDict(frozen=True)

    city_name: str
    temperature_kelvin: float
    humidity_percent: int | float
    condition_text: str
    condition_code: int

    @classmethod
    def from_openweather(cls, data: CurrentWeather) -> "WeatherReading":
        """Create a reading from OpenWeatherMap data.

        Only the first entry of ``weather`` is consulted.
        """
        condition = data.weather[0]
        return cls(
            city_name=data.name,
            temperature_kelvin=data.main.temp,
            humidity_percent=data.main.humidity,
            condition_text=condition.description,
            condition_code=condition.id,
        )
