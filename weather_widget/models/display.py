"""Display state and render output of the weather card."""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from weather_widget.models.weather import WeatherReading


class IdleState(BaseModel):
    """Nothing submitted yet; the whole card is hidden."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["idle"] = "idle"


class ShowingState(BaseModel):
    """A reading is on display."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["showing"] = "showing"
    reading: WeatherReading


class ErrorState(BaseModel):
    """An error message is on display."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["error"] = "error"
    message: str


DisplayState = Annotated[IdleState | ShowingState | ErrorState, Field(discriminator="kind")]


class FieldView(BaseModel):
    """Visibility and text of one field of the card."""

    model_config = ConfigDict(frozen=True)

    visible: bool = False
    text: str = ""


class CardView(BaseModel):
    """Everything the card template needs, computed from one DisplayState."""

    model_config = ConfigDict(frozen=True)

    visible: bool = False
    city: FieldView = FieldView()
    temp: FieldView = FieldView()
    humidity: FieldView = FieldView()
    desc: FieldView = FieldView()
    emoji: FieldView = FieldView()
    error: FieldView = FieldView()

    @property
    def result_fields(self) -> tuple[FieldView, ...]:
        return (self.city, self.temp, self.humidity, self.desc, self.emoji)


class DisplayResponse(BaseModel):
    """JSON view of a submission: the state and how it renders."""

    state: DisplayState
    card: CardView
