"""Repeatable select inputs."""

from __future__ import annotations

from typing import Any, Mapping

from ..core.models import Element
from ..rendering.engine import render_template
from ..settings import Settings, get_settings
from .base import REPEAT_CLASS, build_instances
from .controller import repeat_controller


def _options(
    value: str, options: Mapping[str, str], settings: Settings
) -> list[Element]:
    # call to action, then an explicit reset that stores an empty string
    opts = [
        Element(
            tag_name="option",
            attrs={"disabled": "true", "selected": "true"},
            data=settings.select_call_to_action,
        ),
        Element(
            tag_name="option",
            attrs={"value": ""},
            data=settings.select_reset_text,
        ),
    ]

    for key, text in options.items():
        opt_attrs = {"value": key}
        if key == value:
            opt_attrs["selected"] = "true"
        opts.append(Element(tag_name="option", attrs=opt_attrs, data=text))

    return opts


def select_repeater(
    field_name: str,
    record: Any,
    attrs: Mapping[str, str],
    options: Mapping[str, str],
    *,
    settings: Settings | None = None,
) -> bytes:
    """Render one ``<select>`` per stored value plus the repeat controller.

    ``options`` maps each option's value to its display text. Options render
    in the mapping's iteration order.

    Args:
        field_name: Exact attribute name of the field on ``record``
        record: Bound pydantic model or dataclass instance
        attrs: HTML attributes; ``label`` is the visible label
        options: Option value to display text

    Returns:
        Markup followed by the controller script, as bytes
    """
    settings = settings or get_settings()
    scope, instances = build_instances(field_name, record, attrs.get("label", ""))

    select_attrs = {**attrs, "class": settings.select_class}
    elements = [
        Element(
            tag_name="select",
            attrs=select_attrs,
            name=inst.name,
            label=inst.label,
            children=_options(inst.value, options, settings),
        )
        for inst in instances
    ]

    html = render_template(
        "select_repeater.html",
        {"repeat_class": REPEAT_CLASS, "scope": scope, "elements": elements},
        settings,
    )
    return html.encode("utf-8") + repeat_controller(
        field_name, record, "select", ".input-field", settings=settings
    )
