"""Template rendering utilities for HTML views."""

from pathlib import Path

from fastapi import Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from weather_widget.models.display import CardView

TEMPLATES_DIR = Path(__file__).parent.parent / "templates"
templates = Jinja2Templates(directory=TEMPLATES_DIR)


class TemplateRenderer:
    """Handles rendering of Jinja2 templates for the widget."""

    @staticmethod
    def render_index(request: Request, card: CardView) -> HTMLResponse:
        """Render the widget page with the card in its current state."""
        return templates.TemplateResponse(request, "index.html", {"card": card})

    @staticmethod
    def render_card(request: Request, card: CardView) -> HTMLResponse:
        """Render the weather card fragment.

        Args:
            request: FastAPI request object
            card: Card to render

        Returns:
            HTMLResponse with the rendered card
        """
        return templates.TemplateResponse(request, "tiles/weather_card.html", {"card": card})
