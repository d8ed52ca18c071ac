"""Repeatable field renderers and their client-side controller."""

from .controller import repeat_controller
from .file import file_repeater
from .select import select_repeater
from .state import Clone, Control, RepeatGroup
from .text import input_repeater

__all__ = [
    "Clone",
    "Control",
    "RepeatGroup",
    "file_repeater",
    "input_repeater",
    "repeat_controller",
    "select_repeater",
]
