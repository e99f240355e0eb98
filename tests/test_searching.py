"""Tests for the searching producers."""

import pytest

from algorithms import Highlight
from algorithms.binary_search import binary_search
from algorithms.exponential_search import exponential_search
from algorithms.interpolation_search import interpolation_search
from algorithms.jump_search import jump_search
from algorithms.linear_search import linear_search
from engine import materialize

from conftest import assert_well_formed

SORTED = list(range(10, 160, 10))


def test_binary_search_finds_80_at_index_7() -> None:
    trace = materialize(binary_search(SORTED, 80))
    assert_well_formed(trace)
    assert trace.result == {"found": True, "index": 7, "target": 80}
    assert trace.final.marked(Highlight.HIGHLIGHTED) == [7]
    assert trace.final.pointers == {"M": 7}


def test_binary_search_reports_missing_81() -> None:
    trace = materialize(binary_search(SORTED, 81))
    assert_well_formed(trace)
    assert trace.result == {"found": False, "index": -1, "target": 81}


def test_binary_search_midpoint_checks_carry_pointers() -> None:
    trace = materialize(binary_search(SORTED, 150))
    checks = [s for s in trace if s.marked(Highlight.COMPARING)]
    assert [s.pointers["M"] for s in checks] == [7, 11, 13, 14]
    first = checks[0]
    assert (first.pointers["L"], first.pointers["R"]) == (0, 14)
    assert first.pseudocode_line == 3


def test_binary_search_on_empty_array() -> None:
    trace = materialize(binary_search([], 1))
    assert len(trace) == 2
    assert trace.result["found"] is False


def test_linear_search_scans_until_match() -> None:
    trace = materialize(linear_search([4, 8, 15, 16, 23, 42], 16))
    assert_well_formed(trace)
    assert trace.result["index"] == 3
    assert [s.marked(Highlight.COMPARING) for s in trace[1:-1]] == [[0], [1], [2], [3]]


@pytest.mark.parametrize("search", [jump_search, interpolation_search, exponential_search, linear_search])
@pytest.mark.parametrize(
    ("target", "index"),
    [(10, 0), (80, 7), (150, 14), (81, -1), (5, -1), (999, -1)],
)
def test_every_search_agrees_on_index(search, target: int, index: int) -> None:
    trace = materialize(search(SORTED, target))
    assert_well_formed(trace)
    assert trace.result["index"] == index
    assert trace.result["found"] is (index >= 0)


@pytest.mark.parametrize("search", [jump_search, interpolation_search, exponential_search, binary_search])
def test_search_handles_single_and_repeated_values(search) -> None:
    assert materialize(search([7], 7)).result["index"] == 0
    assert materialize(search([7], 3)).result["found"] is False
    result = materialize(search([5, 5, 5, 5], 5)).result
    assert result["found"] is True
    assert 0 <= result["index"] < 4


def test_search_does_not_touch_caller_array() -> None:
    data = list(SORTED)
    materialize(binary_search(data, 80))
    assert data == SORTED
