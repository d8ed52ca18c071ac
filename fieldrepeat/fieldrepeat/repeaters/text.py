"""Repeatable text-like inputs."""

from __future__ import annotations

from typing import Any, Mapping

from ..core.models import Element
from ..rendering.engine import render_template
from ..settings import Settings
from .base import REPEAT_CLASS, build_instances
from .controller import repeat_controller


def input_repeater(
    field_name: str,
    record: Any,
    attrs: Mapping[str, str],
    *,
    settings: Settings | None = None,
) -> bytes:
    """Render one ``<input>`` per stored value plus the repeat controller.

    ``field_name`` must be exactly the attribute name of the field on the
    record, otherwise ``FieldNotFoundError`` is raised::

        class Person(BaseModel):
            name: str = Field("", alias="name")

        input_repeater("name", person, {
            "label": "Name",
            "type": "text",
            "placeholder": "Enter the Name here",
        })

    Args:
        field_name: Exact attribute name of the field on ``record``
        record: Bound pydantic model or dataclass instance
        attrs: HTML attributes; ``label`` is the visible label

    Returns:
        Markup followed by the controller script, as bytes
    """
    scope, instances = build_instances(field_name, record, attrs.get("label", ""))

    elements = [
        Element(
            tag_name="input",
            attrs=dict(attrs),
            name=inst.name,
            label=inst.label,
            data=inst.value,
        )
        for inst in instances
    ]

    html = render_template(
        "input_repeater.html",
        {"repeat_class": REPEAT_CLASS, "scope": scope, "elements": elements},
        settings,
    )
    return html.encode("utf-8") + repeat_controller(
        field_name, record, "input", ".input-field", settings=settings
    )
