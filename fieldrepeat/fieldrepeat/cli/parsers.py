"""CLI argument parsers and validators."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import typer
import yaml
from pydantic import BaseModel, PydanticUserError, ValidationError, create_model


def parse_pair(value: str, what: str = "KEY=VALUE") -> tuple[str, str]:
    """Parse a ``KEY=VALUE`` argument."""
    if "=" not in value:
        raise typer.BadParameter(f"Must be {what}, got: {value!r}")
    key, val = value.split("=", 1)
    if not key:
        raise typer.BadParameter(f"Empty key in {value!r}")
    return key, val


def parse_pairs(values: list[str], what: str = "KEY=VALUE") -> dict[str, str]:
    """Parse repeated ``KEY=VALUE`` arguments, keeping their order."""
    return dict(parse_pair(v, what) for v in values)


def load_record(path: Path) -> BaseModel:
    """Load a JSON or YAML mapping as a record.

    Each top-level key becomes a field of a generated pydantic model, so the
    keys are the field names (and tag names) to render.
    """
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise typer.BadParameter(f"Cannot read record {path}: {e}") from e
    except yaml.YAMLError as e:
        raise typer.BadParameter(f"Invalid record {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise typer.BadParameter(f"Record {path} must be a mapping")

    for key in data:
        if not isinstance(key, str) or not key.isidentifier() or key.startswith("_"):
            raise typer.BadParameter(f"Invalid record field name: {key!r}")

    fields: dict[str, Any] = {key: (Any, None) for key in data}
    try:
        record_type = create_model("Record", **fields)
        return record_type(**data)
    except (PydanticUserError, ValidationError) as e:
        raise typer.BadParameter(f"Invalid record {path}: {e}") from e
