"""Client-side repeat controller script."""

from __future__ import annotations

from typing import Any

from ..core.fields import tag_name_from_field
from ..rendering.engine import render_template
from ..settings import Settings
from .base import REPEAT_CLASS


def repeat_controller(
    field_name: str,
    record: Any,
    input_selector: str,
    clone_selector: str,
    *,
    settings: Settings | None = None,
) -> bytes:
    """Generate the script that adds, removes and renumbers a field's clones.

    The script keeps every clone named ``<scope>.<i>`` in DOM order, gives each
    clone one ``+``/``-`` control pair and never removes the last clone.

    Args:
        field_name: Exact attribute name of the field on ``record``
        record: Bound pydantic model or dataclass instance
        input_selector: Selector of the element carrying the submission name
        clone_selector: Selector of the unit that is cloned and removed

    Returns:
        ``<script>`` block as bytes
    """
    context = {
        "scope": tag_name_from_field(field_name, record),
        "repeat_class": REPEAT_CLASS,
        "input_selector": input_selector,
        "clone_selector": clone_selector,
    }
    return render_template("repeat_controller.js", context, settings).encode("utf-8")
