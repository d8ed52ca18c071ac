"""Field lookup on bound records (pydantic models and dataclasses)."""

from __future__ import annotations

import dataclasses
from typing import Any

from pydantic import BaseModel

from .values import format_value, join_values


class FieldNotFoundError(LookupError):
    """Raised when a field name does not name a field on the bound record."""


def _require_field(field_name: str, record: Any) -> None:
    if isinstance(record, BaseModel):
        if field_name in type(record).model_fields:
            return
    elif dataclasses.is_dataclass(record) and not isinstance(record, type):
        if any(f.name == field_name for f in dataclasses.fields(record)):
            return
    raise FieldNotFoundError(
        f"{type(record).__name__} has no field named {field_name!r}"
    )


def tag_name_from_field(field_name: str, record: Any) -> str:
    """Return the submission/tag name for a record field.

    Pydantic fields use their alias (or serialization alias) when set,
    dataclass fields use ``metadata["json"]``; otherwise the field name.

    Args:
        field_name: Exact attribute name of the field
        record: Bound pydantic model or dataclass instance

    Returns:
        Tag name used for ``name`` attributes and the CSS scope class
    """
    _require_field(field_name, record)

    if isinstance(record, BaseModel):
        info = type(record).model_fields[field_name]
        return info.alias or info.serialization_alias or field_name

    for f in dataclasses.fields(record):
        if f.name == field_name:
            return f.metadata.get("json", field_name)
    return field_name


def tag_name_from_field_multi(field_name: str, index: int, record: Any) -> str:
    """Return the indexed tag name ``<tag>.<index>`` for one instance."""
    return f"{tag_name_from_field(field_name, record)}.{index}"


def value_from_field(field_name: str, record: Any) -> str:
    """Return the stored-string form of a record field's current value.

    Lists and tuples are joined with the multi-value delimiter.

    Args:
        field_name: Exact attribute name of the field
        record: Bound pydantic model or dataclass instance

    Returns:
        Current value as a string ("" when unset)
    """
    _require_field(field_name, record)

    value = getattr(record, field_name)
    if isinstance(value, (list, tuple)):
        return join_values(value)
    return format_value(value)
