"""Repeatable file uploads that keep previously stored references."""

from __future__ import annotations

from typing import Any, Mapping

from ..core.models import Element
from ..rendering.engine import render_template
from ..settings import Settings, get_settings
from .base import REPEAT_CLASS, build_instances
from .controller import repeat_controller


def file_repeater(
    field_name: str,
    record: Any,
    attrs: Mapping[str, str],
    *,
    settings: Settings | None = None,
) -> bytes:
    """Render one upload block per stored file reference plus the controller.

    Each block holds the upload control, a path preview and a hidden input
    submitting the stored reference. Choosing a file (or resetting the
    preview) moves the submission name from the hidden input to the upload.

    Args:
        field_name: Exact attribute name of the field on ``record``
        record: Bound pydantic model or dataclass instance
        attrs: HTML attributes for the upload control; ``label`` is the
            visible label

    Returns:
        Markup and scripts as bytes
    """
    settings = settings or get_settings()
    scope, instances = build_instances(field_name, record, attrs.get("label", ""))

    upload_attrs = {
        k: v
        for k, v in Element(tag_name="input", attrs=dict(attrs)).html_attrs().items()
        if k not in ("class", "type")
    }

    html = render_template(
        "file_repeater.html",
        {
            "repeat_class": REPEAT_CLASS,
            "scope": scope,
            "field_name": field_name,
            "instances": instances,
            "upload_attrs": upload_attrs,
            "upload_button_text": settings.upload_button_text,
        },
        settings,
    )
    return html.encode("utf-8") + repeat_controller(
        field_name,
        record,
        "input.upload",
        f"div.file-input.{field_name}",
        settings=settings,
    )
