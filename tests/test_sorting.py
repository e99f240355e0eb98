"""Tests for the sorting producers."""

import pytest

from algorithms import Highlight
from algorithms.bubble_sort import bubble_sort
from algorithms.insertion_sort import insertion_sort
from algorithms.merge_sort import merge_sort
from algorithms.quick_sort import quick_sort
from algorithms.selection_sort import selection_sort
from engine import materialize

from conftest import assert_well_formed

SORTS = [bubble_sort, selection_sort, insertion_sort, merge_sort, quick_sort]


@pytest.mark.parametrize("sort", SORTS)
@pytest.mark.parametrize(
    "values",
    [
        [],
        [1],
        [38, 27, 43, 3, 9, 82, 10],
        [3, 1, 3, 2, 1],
        [1, 2, 3, 4, 5],
        [5, 4, 3, 2, 1],
        [0, -7, 12, -7, 4],
    ],
)
def test_sort_produces_sorted_output(sort, values) -> None:
    trace = materialize(sort(values))
    assert_well_formed(trace)
    assert trace.result == {"sorted": sorted(values)}
    assert trace.final.structure == sorted(values)
    assert trace.final.marked(Highlight.SORTED) == list(range(len(values)))


@pytest.mark.parametrize("sort", SORTS)
def test_sort_leaves_input_untouched(sort) -> None:
    values = [4, 2, 3, 1]
    materialize(sort(values))
    assert values == [4, 2, 3, 1]


@pytest.mark.parametrize("sort", SORTS)
def test_every_intermediate_frame_is_a_permutation(sort) -> None:
    values = [38, 27, 43, 3, 9, 82, 10]
    for snap in materialize(sort(values)):
        assert sorted(snap.structure) == sorted(values)


def test_bubble_sort_swap_frame_shows_values_after_the_swap() -> None:
    trace = materialize(bubble_sort([2, 1]))
    compare_frame, swap_frame = trace[1], trace[2]
    assert compare_frame.structure == [2, 1]
    assert compare_frame.marked(Highlight.COMPARING) == [0, 1]
    assert swap_frame.structure == [1, 2]
    assert swap_frame.marked(Highlight.SWAPPING) == [0, 1]


def test_bubble_sort_stops_after_a_clean_pass() -> None:
    trace = materialize(bubble_sort([1, 2, 3, 4, 5]))
    # init + 4 comparisons + "no swaps" + final
    assert len(trace) == 7
    assert trace.metrics.swaps == 0


def test_selection_sort_compares_every_pair_once() -> None:
    trace = materialize(selection_sort([38, 27, 43, 3, 9, 82, 10]))
    assert trace.metrics.comparisons == 21


def test_merge_sort_overlay_shows_runs() -> None:
    trace = materialize(merge_sort([2, 1]))
    merging = [s for s in trace if "left" in s.overlay]
    assert merging[0].overlay == {"left": [2], "right": [1]}


def test_merge_write_keeps_pending_run_values_in_place() -> None:
    trace = materialize(merge_sort([3, 4, 1, 2]))
    writes = [s for s in trace if s.pseudocode_line in (6, 7)]
    # final merge of [3, 4] with [1, 2]: 1 is written, 3 4 2 still pending
    assert writes[-4].structure == [1, 3, 4, 2]
    assert writes[-4].marked(Highlight.SWAPPING) == [0]
    assert writes[-1].structure == [1, 2, 3, 4]


def test_quick_sort_marks_pivot_active() -> None:
    trace = materialize(quick_sort([3, 1, 2]))
    partition = trace[1]
    assert partition.marked(Highlight.ACTIVE) == [2]
    assert partition.pseudocode_line == 2
