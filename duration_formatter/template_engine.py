from __future__ import annotations

from pathlib import Path
import logging
from jinja2 import Environment, FileSystemLoader, select_autoescape

from duration_formatter.formatter import CONCISE, LONG
from duration_formatter.units import DAY_UNITS

logger = logging.getLogger("duration_formatter.template")

DEFAULT_LANG = "ru"
TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

env = Environment(
    loader=FileSystemLoader(str(TEMPLATES_DIR)),
    autoescape=select_autoescape(["html"]),
)

env.filters["duration"] = lambda value: LONG.format(value)
env.filters["duration_short"] = lambda value: CONCISE.format(value)
env.filters["duration_days"] = lambda value: LONG.format(value, DAY_UNITS)


def render_string(source: str, **ctx) -> str:
    return env.from_string(source).render(**ctx)


def render_template(name: str, *, lang: str | None = None, **ctx) -> str:
    lang = (lang or DEFAULT_LANG).split("-")[0]
    candidates = [f"{lang}/{name}", f"{DEFAULT_LANG}/{name}", name]
    for rel in candidates:
        p = TEMPLATES_DIR / rel
        if p.exists():
            logger.debug("Rendering template %s", rel)
            template = env.get_template(rel)
            return template.render(**ctx)
    raise FileNotFoundError(name)
