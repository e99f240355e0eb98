"""Tests for the bracket-matching and linked-list producers."""

import pytest

from algorithms import Highlight, StructureKind
from algorithms.balanced_parentheses import balanced_parentheses
from algorithms.reverse_linked_list import reverse_linked_list
from engine import materialize
from structures import LinkedList

from conftest import assert_well_formed


# ---------------------------------------------------------------------------
# Balanced parentheses
# ---------------------------------------------------------------------------
def test_nested_brackets_are_balanced() -> None:
    trace = materialize(balanced_parentheses("{[()()]}"))
    assert_well_formed(trace)
    assert trace.final.kind == StructureKind.STACK.value
    assert trace.result == {"balanced": True, "position": None}
    assert trace.final.structure == []
    assert max(len(s.structure) for s in trace) == 3


@pytest.mark.parametrize(
    ("text", "position"),
    [("(]", 1), ("((", 2), (")", 0), ("([)]", 2)],
)
def test_unbalanced_input_reports_position(text: str, position: int) -> None:
    trace = materialize(balanced_parentheses(text))
    assert_well_formed(trace)
    assert trace.result == {"balanced": False, "position": position}


def test_mismatch_frame_compares_the_top() -> None:
    trace = materialize(balanced_parentheses("(]"))
    assert trace.final.marked(Highlight.COMPARING) == [0]
    assert trace.final.pointers == {"i": 1}
    assert trace.final.overlay["input"] == "(]"


def test_empty_input_is_balanced() -> None:
    trace = materialize(balanced_parentheses(""))
    assert len(trace) == 2
    assert trace.result["balanced"] is True


def test_leftover_openers_are_highlighted() -> None:
    trace = materialize(balanced_parentheses("(("))
    assert trace.final.marked(Highlight.HIGHLIGHTED) == [0, 1]


# ---------------------------------------------------------------------------
# Reverse linked list
# ---------------------------------------------------------------------------
def test_reverse_values_and_head() -> None:
    original = LinkedList.from_values([1, 2, 3, 4, 5])
    trace = materialize(reverse_linked_list(original))
    assert_well_formed(trace)
    assert trace.result["values"] == [5, 4, 3, 2, 1]
    assert trace.result["structure"]["head"] == 4
    assert trace.final.pointers == {"head": 4}
    # init + two frames per node + final
    assert len(trace) == 1 + 2 * 5 + 1
    assert original.values() == [1, 2, 3, 4, 5]


def test_reverse_frames_carry_three_cursors() -> None:
    trace = materialize(reverse_linked_list(LinkedList.from_values([1, 2, 3])))
    first_save = trace[1]
    assert first_save.pointers == {"curr": 0, "next": 1}
    relink = trace[4]
    assert relink.pointers == {"prev": 0, "curr": 1, "next": 2}
    assert relink.structure["nodes"][1]["next"] == 0
    assert relink.marked(Highlight.SWAPPING) == [1]


def test_reverse_empty_and_single() -> None:
    empty = materialize(reverse_linked_list(LinkedList()))
    assert len(empty) == 2
    assert empty.result["values"] == []
    single = materialize(reverse_linked_list(LinkedList.from_values([7])))
    assert single.result["values"] == [7]
