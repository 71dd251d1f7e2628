"""Page/view routes for serving the widget page and card fragment."""

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse

from weather_widget.dependencies import get_weather_form, get_weather_widget
from weather_widget.events import WeatherForm
from weather_widget.views.template_renderer import TemplateRenderer
from weather_widget.widget import WeatherWidget

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
async def index(request: Request, widget: WeatherWidget = Depends(get_weather_widget)):
    """Render the widget page."""
    return TemplateRenderer.render_index(request, widget.card)


@router.post("/widget/submit", response_class=HTMLResponse)
async def submit_city(
    request: Request,
    city: str = Form(default=""),
    form: WeatherForm = Depends(get_weather_form),
    widget: WeatherWidget = Depends(get_weather_widget),
):
    """Submit the city form and render the resulting card fragment.

    The card reflects the widget state after this submission's listeners
    ran; an overlapping submission that finishes later overwrites it.
    """
    await form.submit(city)
    return TemplateRenderer.render_card(request, widget.card)
