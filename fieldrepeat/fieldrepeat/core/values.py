"""Multi-value encoding for repeated fields."""

from __future__ import annotations

from typing import Any, Iterable

# Joins per-instance values in a single stored string. Values must not
# contain it; there is no escaping.
MULTI_VALUE_DELIMITER = "__ponzu"


def format_value(value: Any) -> str:
    """Format a scalar value the way it is stored in a form field.

    Args:
        value: Scalar attribute value

    Returns:
        String form of the value
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def join_values(values: Iterable[Any]) -> str:
    """Pack instance values into one delimiter-joined string."""
    return MULTI_VALUE_DELIMITER.join(format_value(v) for v in values)


def split_values(raw: str) -> list[str]:
    """Split a stored string into its ordered instance values.

    An empty string yields a single empty instance.
    """
    return raw.split(MULTI_VALUE_DELIMITER)
