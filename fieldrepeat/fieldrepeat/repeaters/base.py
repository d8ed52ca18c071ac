"""Shared instance building for the repeaters."""

from __future__ import annotations

import logging
from typing import Any

from ..core.fields import tag_name_from_field, tag_name_from_field_multi, value_from_field
from ..core.models import RepeatInstance
from ..core.values import split_values

logger = logging.getLogger(__name__)

# CSS class marking the wrapper around one field's instances.
REPEAT_CLASS = "__ponzu-repeat"


def build_instances(
    field_name: str, record: Any, label: str = ""
) -> tuple[str, list[RepeatInstance]]:
    """Resolve a field's scope and one instance per stored value.

    Args:
        field_name: Exact attribute name of the field on ``record``
        record: Bound pydantic model or dataclass instance
        label: Visible label, attached to instance 0 only

    Returns:
        Tuple of (scope, instances); at least one instance

    Raises:
        FieldNotFoundError: ``field_name`` is not a field of ``record``
    """
    scope = tag_name_from_field(field_name, record)
    values = split_values(value_from_field(field_name, record))

    instances = [
        RepeatInstance(
            index=i,
            name=tag_name_from_field_multi(field_name, i, record),
            value=value,
            label=label if i == 0 else "",
        )
        for i, value in enumerate(values)
    ]

    logger.debug(f"Field {field_name!r} scope={scope} instances={len(instances)}")
    return scope, instances
