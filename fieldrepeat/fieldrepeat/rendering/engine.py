"""Template rendering engine."""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Any

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    Template,
    select_autoescape,
)

from ..settings import Settings, get_settings

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"


@lru_cache(maxsize=8)
def _environment(override_dir: Path | None) -> Environment:
    search_path = [str(TEMPLATES_DIR)]
    if override_dir is not None:
        search_path.insert(0, str(override_dir))

    return Environment(
        loader=FileSystemLoader(search_path),
        undefined=StrictUndefined,
        # HTML templates escape values; script templates embed via tojson
        autoescape=select_autoescape(["html"], default=False),
        trim_blocks=True,
        lstrip_blocks=True,
    )


def load_template(name: str, settings: Settings | None = None) -> Template:
    """Load a template by name.

    Templates in ``settings.templates_dir`` shadow the built-in ones.

    Args:
        name: Template file name (e.g. ``input_repeater.html``)
        settings: Settings to use (defaults to the cached settings)

    Returns:
        Compiled Jinja2 template
    """
    settings = settings or get_settings()
    return _environment(settings.templates_dir).get_template(name)


def render_template(
    name: str, context: dict[str, Any], settings: Settings | None = None
) -> str:
    """Render a template with the given context.

    Args:
        name: Template file name
        context: Template context data
        settings: Settings to use (defaults to the cached settings)

    Returns:
        Rendered text
    """
    logger.debug(f"Rendering template: {name}")

    template = load_template(name, settings)
    return template.render(**context)
