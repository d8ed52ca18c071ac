"""Decoding of submitted repeated-field names."""

from __future__ import annotations

import logging
import re
from typing import Mapping, Sequence, Union

from .core.values import join_values

logger = logging.getLogger(__name__)

_INDEXED_NAME = re.compile(r"^(?P<tag>.+)\.(?P<index>0|[1-9]\d*)$")

FormValue = Union[str, Sequence[str]]


def _first(value: FormValue) -> str:
    if isinstance(value, str):
        return value
    return value[0] if value else ""


def collect_repeated(form: Mapping[str, FormValue]) -> dict[str, list[str]]:
    """Group ``<tag>.<index>`` form keys into ordered value lists.

    Indices may have gaps (left by removed clones); values are ordered by
    index. Keys without a numeric suffix, or whose index has a leading zero,
    are ignored.

    Args:
        form: Submitted form data; list values (as from ``parse_qs``) use
            their first element

    Returns:
        Mapping of tag name to its values in index order
    """
    indexed: dict[str, dict[int, str]] = {}
    for key, value in form.items():
        match = _INDEXED_NAME.match(key)
        if not match:
            continue
        tag = match.group("tag")
        index = int(match.group("index"))
        indexed.setdefault(tag, {})[index] = _first(value)

    logger.debug(f"Collected repeated fields: {sorted(indexed)}")

    return {
        tag: [values[i] for i in sorted(values)]
        for tag, values in indexed.items()
    }


def encode_repeated(form: Mapping[str, FormValue]) -> dict[str, str]:
    """Collect repeated fields and pack each into its stored string form."""
    return {tag: join_values(values) for tag, values in collect_repeated(form).items()}
