"""Tests for Snapshot and SnapshotBuilder."""

import dataclasses

import pytest

from algorithms.snapshot import Highlight, Snapshot, SnapshotBuilder, StructureKind
from structures import Trie


def test_build_numbers_snapshots_from_zero() -> None:
    sb = SnapshotBuilder(StructureKind.ARRAY, [3, 1, 2])
    first = sb.build()
    second = sb.build()
    assert (first.step_number, second.step_number) == (0, 1)
    assert sb.steps_built == 2


def test_build_copies_live_structure() -> None:
    arr = [3, 1, 2]
    sb = SnapshotBuilder(StructureKind.ARRAY, arr)
    before = sb.build()
    arr[0], arr[1] = arr[1], arr[0]
    after = sb.build()
    assert before.structure == [3, 1, 2]
    assert after.structure == [1, 3, 2]


def test_build_copies_arena_structures_via_to_dict() -> None:
    trie = Trie.from_words(["ab"])
    sb = SnapshotBuilder(StructureKind.TRIE, trie)
    snap = sb.build()
    trie.insert("abc")
    assert snap.structure == Trie.from_words(["ab"]).to_dict()
    assert len(snap.structure["nodes"]) == 3


def test_highlights_and_pointers_are_copied() -> None:
    sb = SnapshotBuilder(StructureKind.ARRAY, [1, 2])
    sb.compare(0, 1)
    sb.point("i", 0)
    snap = sb.build()
    sb.compare(5)
    sb.point("i", 1)
    assert snap.highlights == {"comparing": [0, 1]}
    assert snap.pointers == {"i": 0}


def test_mark_deduplicates_items() -> None:
    sb = SnapshotBuilder(StructureKind.ARRAY, [])
    sb.visited(1, 2)
    sb.visited(2, 3)
    assert sb.build().marked(Highlight.VISITED) == [1, 2, 3]


def test_point_none_removes_pointer() -> None:
    sb = SnapshotBuilder(StructureKind.ARRAY, [])
    sb.point("L", 0)
    sb.point("L", None)
    assert sb.build().pointers == {}


def test_reset_keeps_structure_but_clears_frame_fields() -> None:
    sb = SnapshotBuilder(StructureKind.ARRAY, [9])
    sb.compare(0)
    sb.message = "hello"
    sb.pseudocode_line = 2
    sb.overlay["queue"] = [1]
    sb.reset()
    snap = sb.build()
    assert snap.structure == [9]
    assert snap.highlights == {}
    assert snap.message == ""
    assert snap.pseudocode_line is None
    assert snap.overlay == {}


def test_result_only_attached_to_final_snapshot() -> None:
    sb = SnapshotBuilder(StructureKind.ARRAY, [])
    assert sb.build(result={"x": 1}).result is None
    final = sb.build(is_final=True, result={"x": 1})
    assert final.is_final
    assert final.result == {"x": 1}


def test_snapshot_is_frozen() -> None:
    snap = Snapshot()
    with pytest.raises(dataclasses.FrozenInstanceError):
        snap.message = "changed"  # type: ignore[misc]


def test_marked_returns_empty_list_when_absent() -> None:
    assert Snapshot().marked(Highlight.SORTED) == []


def test_to_dict_is_json_friendly() -> None:
    sb = SnapshotBuilder(StructureKind.GRID, [[0, 1], [1, 2]])
    sb.activate((1, 1))
    sb.overlay["distances"] = {"A": 0.0, "B": float("inf")}
    data = sb.build(is_final=True, result={"cells": {(0, 1): 1}}).to_dict()
    assert data["kind"] == "grid"
    assert data["highlights"] == {"active": [[1, 1]]}
    assert data["overlay"]["distances"] == {"A": 0.0, "B": None}
    assert data["result"] == {"cells": {"(0, 1)": 1}}
    assert data["is_final"] is True
