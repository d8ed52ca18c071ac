"""Main CLI application."""

from __future__ import annotations

import enum
import json
import logging
import sys
from pathlib import Path
from urllib.parse import parse_qs

import typer
from typing_extensions import Annotated

from ..forms import encode_repeated
from ..rendering.io import atomic_write_bytes
from ..repeaters import file_repeater, input_repeater, select_repeater
from .parsers import load_record, parse_pairs

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="fieldrepeat",
    help="Render repeatable admin form fields and decode their submissions.",
)


class FieldKind(str, enum.Enum):
    text = "text"
    select = "select"
    file = "file"


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
    )


@app.command()
def render(
    field: Annotated[
        str,
        typer.Option("--field", help="Record field to render.", metavar="NAME"),
    ],
    record_path: Annotated[
        Path,
        typer.Option(
            "--record",
            help="JSON or YAML mapping holding the record values.",
            metavar="FILE",
        ),
    ],
    kind: Annotated[
        FieldKind,
        typer.Option("--kind", help="Kind of repeater to render."),
    ] = FieldKind.text,
    attrs: Annotated[
        list[str],
        typer.Option(
            "--attr",
            help="HTML attribute (format: KEY=VALUE). 'label' sets the label. Repeatable.",
            metavar="KEY=VALUE",
        ),
    ] = [],
    options: Annotated[
        list[str],
        typer.Option(
            "--option",
            help="Select option (format: VALUE=TEXT). Repeatable.",
            metavar="VALUE=TEXT",
        ),
    ] = [],
    output: Annotated[
        str,
        typer.Option(
            "--output",
            "-o",
            help="Write markup to FILE instead of stdout.",
            metavar="FILE",
        ),
    ] = "",
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose logging."),
    ] = False,
) -> None:
    """Render a repeatable field for a record."""
    _configure_logging(verbose)

    record = load_record(record_path)
    attr_map = parse_pairs(attrs)

    if kind is FieldKind.select:
        option_map = parse_pairs(options, "VALUE=TEXT")
        markup = select_repeater(field, record, attr_map, option_map)
    elif kind is FieldKind.file:
        markup = file_repeater(field, record, attr_map)
    else:
        markup = input_repeater(field, record, attr_map)

    if output:
        atomic_write_bytes(Path(output), markup)
        logger.info(f"Rendered {kind.value} repeater for {field} → {output}")
    else:
        sys.stdout.write(markup.decode("utf-8"))


@app.command()
def decode(
    query: Annotated[
        str,
        typer.Argument(help="URL-encoded form body, e.g. 'tags.0=a&tags.1=b'."),
    ],
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose logging."),
    ] = False,
) -> None:
    """Decode repeated field submissions into stored values."""
    _configure_logging(verbose)

    form = parse_qs(query, keep_blank_values=True)
    encoded = encode_repeated(form)

    logger.debug(f"Decoded {len(encoded)} repeated field(s)")
    typer.echo(json.dumps(encoded, indent=2, sort_keys=True))


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
