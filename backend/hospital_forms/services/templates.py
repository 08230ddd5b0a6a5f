# hospital_forms/services/templates.py
from datetime import datetime, timezone
from functools import lru_cache
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape
from markupsafe import Markup, escape

from hospital_forms.core.config import Settings
from hospital_forms.utils.formatting import format_datetime

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"


def nl2br(value) -> Markup:
    """Échappe d'abord, puis convertit les retours à la ligne en <br>."""
    text = escape("" if value is None else str(value))
    return Markup(text.replace("\r\n", "\n").replace("\n", Markup("<br>")))


@lru_cache
def get_environment() -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=select_autoescape(["html"]),
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["nl2br"] = nl2br
    return env


def render_email(name: str, settings: Settings, **context) -> str:
    template = get_environment().get_template(name if name.endswith(".html") else f"{name}.html")
    now = datetime.now(timezone.utc)
    return template.render(
        hospital={
            "name": settings.HOSPITAL_NAME,
            "address": settings.HOSPITAL_ADDRESS,
            "phone": settings.HOSPITAL_PHONE,
        },
        year=now.year,
        format_datetime=lambda dt: format_datetime(dt, settings.TIME_ZONE),
        **context,
    )
