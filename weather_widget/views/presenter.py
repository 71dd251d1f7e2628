"""Presentation rules for the weather card."""

from decimal import ROUND_HALF_UP, Decimal

from weather_widget.models.display import CardView, DisplayState, ErrorState, FieldView, ShowingState
from weather_widget.models.weather import WeatherReading

KELVIN_OFFSET = 273.15
ONE_DECIMAL = Decimal("0.1")

UNKNOWN_GLYPH = "❔"

# Ordered (inclusive lower, exclusive upper, glyph) rules, first match wins.
# Codes 400-499 are not covered and fall through to UNKNOWN_GLYPH.
# See https://openweathermap.org/weather-conditions
CONDITION_GLYPHS: tuple[tuple[int, int, str], ...] = (
    (200, 300, "⛈"),  # thunderstorm
    (300, 400, "🌧"),  # drizzle
    (500, 600, "🌧"),  # rain
    (600, 700, "❄"),  # snow
    (700, 800, "🌫"),  # atmosphere
    (800, 801, "☀"),  # clear, exact match
    (801, 810, "☁"),  # clouds
)


def glyph_for(code: int) -> str:
    """Get emoji for a provider condition code."""
    for lower, upper, glyph in CONDITION_GLYPHS:
        if lower <= code < upper:
            return glyph
    return UNKNOWN_GLYPH


def kelvin_to_celsius(kelvin: float) -> float:
    return kelvin - KELVIN_OFFSET


def kelvin_to_display(kelvin: float) -> str:
    """Format a Kelvin temperature as Celsius with one decimal, e.g. ``26.9°C``.

    Ties round away from zero (10.25 -> 10.3, -16.25 -> -16.3). Decimal(float)
    is exact, so only true binary ties are affected.
    """
    celsius = Decimal(kelvin_to_celsius(kelvin)).quantize(ONE_DECIMAL, rounding=ROUND_HALF_UP)
    return f"{celsius}°C"


def format_humidity(humidity: int | float) -> str:
    """Format humidity, printing integral floats without a fraction (60.0 -> 60)."""
    if isinstance(humidity, float) and humidity.is_integer():
        humidity = int(humidity)
    return f"Humidity: {humidity}"


def show_result(reading: WeatherReading) -> CardView:
    """Reveal every result field and hide the error field.

    Args:
        reading: Reading to display

    Returns:
        CardView with all result fields populated
    """
    return CardView(
        visible=True,
        city=FieldView(visible=True, text=reading.city_name),
        temp=FieldView(visible=True, text=kelvin_to_display(reading.temperature_kelvin)),
        humidity=FieldView(visible=True, text=format_humidity(reading.humidity_percent)),
        desc=FieldView(visible=True, text=reading.condition_text),
        emoji=FieldView(visible=True, text=glyph_for(reading.condition_code)),
        error=FieldView(visible=False),
    )


def show_error(message: str) -> CardView:
    """Hide every result field and reveal only the error field."""
    return CardView(visible=True, error=FieldView(visible=True, text=message))


def render(state: DisplayState) -> CardView:
    """Render a display state.

    Idle hides the whole card. Any other state shows the card with either
    the result fields or the error field, never both.
    """
    if isinstance(state, ShowingState):
        return show_result(state.reading)
    if isinstance(state, ErrorState):
        return show_error(state.message)
    return CardView()
