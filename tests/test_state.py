"""Tests for the client-side repeat state model."""

from __future__ import annotations

import dataclasses

import pytest

from fieldrepeat.repeaters import RepeatGroup
from fieldrepeat.repeaters.base import build_instances


@dataclasses.dataclass
class Post:
    Name: str = ""
    Photos: str = dataclasses.field(default="", metadata={"json": "photos"})


def _text_group(value: str) -> RepeatGroup:
    scope, instances = build_instances("Name", Post(Name=value), "Name")
    return RepeatGroup.from_instances(scope, instances)


def _file_group(value: str) -> RepeatGroup:
    scope, instances = build_instances("Photos", Post(Photos=value), "Photos")
    return RepeatGroup.from_instances(scope, instances, file_inputs=True)


def _names(group: RepeatGroup) -> list[str]:
    return [name for name, _ in group.submissions()]


def _assert_contiguous(group: RepeatGroup) -> None:
    assert _names(group) == [f"{group.scope}.{i}" for i in range(len(group))]


def _assert_one_submission_per_clone(group: RepeatGroup) -> None:
    for clone in group.clones:
        named = [c for c in (clone.designated, *clone.auxiliary) if c.name]
        assert len(named) <= 1


class TestTextGroup:
    def test_page_load_state(self):
        group = _text_group("a__ponzub__ponzuc")

        assert group.submissions() == [("Name.0", "a"), ("Name.1", "b"), ("Name.2", "c")]
        assert [c.label for c in group.clones] == ["Name", "", ""]
        assert all(c.controls == 1 for c in group.clones)

    def test_remove_last_clone_is_noop(self):
        group = _text_group("")

        assert group.remove(0) is False
        assert len(group) == 1
        assert group.submissions() == [("Name.0", "")]

    def test_add_grows_by_one_with_empty_clone(self):
        group = _text_group("a__ponzub")
        group.add(0)

        assert len(group) == 3
        assert group.submissions()[-1] == ("Name.2", "")
        assert group.clones[-1].label == ""
        _assert_contiguous(group)

    def test_remove_middle_renumbers(self):
        group = _text_group("a__ponzub__ponzuc")

        assert group.remove(1) is True
        assert group.submissions() == [("Name.0", "a"), ("Name.1", "c")]

    def test_removing_first_clone_moves_label(self):
        group = _text_group("a__ponzub")
        group.remove(0)

        assert group.submissions() == [("Name.0", "b")]
        assert group.clones[0].label == "Name"

    def test_controls_stay_one_pair_per_clone(self):
        group = _text_group("a")
        for _ in range(3):
            group.add(len(group) - 1)
        group.remove(2)

        assert [c.controls for c in group.clones] == [1, 1, 1]

    def test_negative_index_of_first_clone_moves_label(self):
        group = _text_group("a__ponzub")

        assert group.remove(-2) is True
        assert group.submissions() == [("Name.0", "b")]
        assert [c.label for c in group.clones] == ["Name"]

    def test_out_of_range_index(self):
        group = _text_group("a__ponzub")

        with pytest.raises(IndexError):
            group.remove(2)
        assert len(group) == 2

    def test_empty_group_is_rejected(self):
        with pytest.raises(ValueError):
            RepeatGroup("Name", [])


class TestFileGroup:
    def test_page_load_submits_stored_references(self):
        group = _file_group("/a.jpg__ponzu/b.jpg")

        assert group.submissions() == [("photos.0", "/a.jpg"), ("photos.1", "/b.jpg")]
        assert [c.preview for c in group.clones] == [True, True]

    def test_added_clone_submits_its_upload(self):
        group = _file_group("/a.jpg")
        group.add(0)

        added = group.clones[1]
        assert added.designated.name == "photos.1"
        assert all(aux.name == "" for aux in added.auxiliary)
        assert added.preview is False
        _assert_contiguous(group)

    def test_reset_switches_to_upload(self):
        group = _file_group("/a.jpg__ponzu/b.jpg")
        group.reset_stored(1)

        clone = group.clones[1]
        assert clone.designated.name == "photos.1"
        assert all(aux.name == "" for aux in clone.auxiliary)
        assert group.clones[0].auxiliary[1].name == "photos.0"

    def test_stored_reference_follows_its_new_index(self):
        group = _file_group("/a.jpg__ponzu/b.jpg__ponzu/c.jpg")
        group.remove(0)

        assert group.submissions() == [("photos.0", "/b.jpg"), ("photos.1", "/c.jpg")]

    def test_never_both_reference_and_upload(self):
        group = _file_group("/a.jpg__ponzu/b.jpg")
        _assert_one_submission_per_clone(group)

        group.add(1)
        _assert_one_submission_per_clone(group)
        group.reset_stored(0)
        _assert_one_submission_per_clone(group)
        group.remove(1)
        _assert_one_submission_per_clone(group)
        group.add(0)
        _assert_one_submission_per_clone(group)
        _assert_contiguous(group)
