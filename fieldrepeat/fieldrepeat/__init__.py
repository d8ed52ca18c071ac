"""fieldrepeat - Repeatable form fields for content admin editors.

Renders text, select and file inputs that an editor can multiply or reduce
in the browser, plus the script that keeps their submission names indexed.
"""

__version__ = "0.1.0"

# Configure logging for library use
import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

from .core.fields import FieldNotFoundError
from .core.values import MULTI_VALUE_DELIMITER, join_values, split_values
from .forms import collect_repeated, encode_repeated
from .repeaters import (
    file_repeater,
    input_repeater,
    repeat_controller,
    select_repeater,
)

__all__ = [
    "FieldNotFoundError",
    "MULTI_VALUE_DELIMITER",
    "collect_repeated",
    "encode_repeated",
    "file_repeater",
    "input_repeater",
    "join_values",
    "repeat_controller",
    "select_repeater",
    "split_values",
]
