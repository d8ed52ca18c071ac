from __future__ import annotations

import dataclasses

import pytest
from pydantic import BaseModel, Field

from fieldrepeat.settings import Settings


class Person(BaseModel):
    Name: str = Field("", alias="name")
    Tags: list[str] = Field(default_factory=list, alias="tags")
    Category: str = Field("", alias="category")
    Photos: str = Field("", alias="photos")
    Age: int = Field(0, alias="age")


@dataclasses.dataclass
class Song:
    Title: str = dataclasses.field(default="", metadata={"json": "title"})
    Rating: float = 0.0
    Explicit: bool = False


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def make_person():
    def _make(**values) -> Person:
        return Person.model_validate(values)

    return _make
