"""In-memory model of the repeat controller's client-side state.

``RepeatGroup`` applies the same add/remove/renumber rules as the emitted
``repeat_controller.js`` script to plain Python objects, so the submission
names a browser would post can be computed and checked server-side.
"""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field
from typing import Iterable

from ..core.models import RepeatInstance

logger = logging.getLogger(__name__)


@dataclass
class Control:
    """An input-like element inside a clone."""

    name: str = ""
    value: str = ""


@dataclass
class Clone:
    """One repeatable unit: the designated input plus auxiliary inputs."""

    designated: Control
    auxiliary: list[Control] = field(default_factory=list)
    label: str = ""
    preview: bool = False
    controls: int = 0


class RepeatGroup:
    """Clones of a single field scope, in DOM order."""

    def __init__(self, scope: str, clones: list[Clone]) -> None:
        if not clones:
            raise ValueError("A repeat group needs at least one clone")
        self.scope = scope
        self.clones = clones

    @classmethod
    def from_instances(
        cls,
        scope: str,
        instances: Iterable[RepeatInstance],
        *,
        file_inputs: bool = False,
    ) -> RepeatGroup:
        """Build the page-load state for rendered instances.

        With ``file_inputs`` each clone mirrors a file block: an unnamed upload
        control as the designated element, an unnamed path preview, and the
        hidden input carrying the stored reference.
        """
        clones = []
        for inst in instances:
            if file_inputs:
                clone = Clone(
                    designated=Control(),
                    auxiliary=[Control(), Control(name=inst.name, value=inst.value)],
                    label=inst.label,
                    preview=bool(inst.value),
                )
            else:
                clone = Clone(
                    designated=Control(name=inst.name, value=inst.value),
                    label=inst.label,
                )
            clones.append(clone)

        group = cls(scope, clones)
        group.attach_controls()
        return group

    def __len__(self) -> int:
        return len(self.clones)

    def renumber(self) -> None:
        """Assign ``<scope>.<i>`` names and re-attach the controls."""
        for i, clone in enumerate(self.clones):
            name = f"{self.scope}.{i}"
            clone.designated.name = name

            preset = False
            for aux in clone.auxiliary:
                if not aux.value:
                    aux.name = ""
                elif aux.name:
                    aux.name = name
                    preset = True

            if preset:
                clone.designated.name = ""

            clone.controls = 0

        self.attach_controls()

    def attach_controls(self) -> None:
        for clone in self.clones:
            clone.controls = 1

    def add(self, index: int) -> None:
        """Clone the unit at ``index`` and append the empty copy."""
        source = self.clones[index]

        clone = copy.deepcopy(source)
        clone.label = ""
        clone.designated.value = ""
        for aux in clone.auxiliary:
            aux.value = ""
        clone.controls = 0
        clone.preview = False

        self.clones.append(clone)
        logger.debug(f"Added clone to {self.scope} ({len(self.clones)} total)")

        self.renumber()

    def remove(self, index: int) -> bool:
        """Remove the unit at ``index``; the last remaining unit stays.

        Returns:
            True when a clone was removed
        """
        if len(self.clones) == 1:
            return False

        if index < 0:
            index += len(self.clones)
        removed = self.clones[index]
        if index == 0:
            self.clones[1].label = removed.label

        del self.clones[index]
        logger.debug(f"Removed clone from {self.scope} ({len(self.clones)} total)")

        self.renumber()
        return True

    def reset_stored(self, index: int) -> None:
        """Drop the stored reference of a file clone in favour of its upload."""
        clone = self.clones[index]
        for aux in clone.auxiliary:
            if aux.name:
                aux.value = ""
                aux.name = ""
        clone.designated.name = f"{self.scope}.{index}"
        clone.preview = False

        self.renumber()

    def submissions(self) -> list[tuple[str, str]]:
        """Return the (name, value) pairs a form submit would post."""
        pairs = []
        for clone in self.clones:
            for control in (clone.designated, *clone.auxiliary):
                if control.name:
                    pairs.append((control.name, control.value))
        return pairs
