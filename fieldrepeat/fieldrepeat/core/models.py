"""Domain models for rendered elements and repeat instances."""

from __future__ import annotations

from pydantic import BaseModel, Field

# Attribute keys that never pass through to the rendered tag.
RESERVED_ATTRS = frozenset({"label", "name", "value"})


class Element(BaseModel):
    """One markup element to render."""

    tag_name: str = Field(..., description="HTML tag name")
    attrs: dict[str, str] = Field(default_factory=dict, description="Attributes")
    name: str = Field(default="", description="Index-qualified submission name")
    label: str = Field(default="", description="Visible label (instance 0 only)")
    data: str = Field(default="", description="Current value or option text")
    children: list[Element] = Field(default_factory=list)

    def html_attrs(self) -> dict[str, str]:
        return {k: v for k, v in self.attrs.items() if k not in RESERVED_ATTRS}


class RepeatInstance(BaseModel):
    """A single instance of a repeated field."""

    index: int = Field(..., ge=0)
    name: str = Field(..., description="Submission name <tag>.<index>")
    value: str = Field(default="")
    label: str = Field(default="")
