"""Tests for the trace materializer and run comparison."""

from typing import Iterator

import pytest

from algorithms import REGISTRY
from algorithms.binary_search import binary_search
from algorithms.linear_search import linear_search
from algorithms.snapshot import Snapshot, SnapshotBuilder, StructureKind
from engine import ProducerContractError, Trace, compare, materialize

from conftest import assert_well_formed


def _producer(count: int, final_at: int = -1) -> Iterator[Snapshot]:
    sb = SnapshotBuilder(StructureKind.ARRAY, [])
    last = count - 1 if final_at < 0 else final_at
    for i in range(count):
        yield sb.build(is_final=(i == last), result={"i": i} if i == last else None)


def test_materialize_collects_every_snapshot() -> None:
    trace = materialize(_producer(4), label="four")
    assert len(trace) == 4
    assert trace.label == "four"
    assert trace.final is trace[3]
    assert trace.result == {"i": 3}
    assert_well_formed(trace)


def test_trace_is_an_immutable_sequence() -> None:
    trace = materialize(_producer(3))
    assert list(trace) == list(trace[0:3])
    assert trace[-1].is_final
    with pytest.raises(TypeError):
        trace[0] = trace[1]  # type: ignore[index]


def test_single_snapshot_trace_is_allowed() -> None:
    trace = materialize(_producer(1))
    assert len(trace) == 1
    assert trace[0].is_final


def test_empty_producer_is_rejected() -> None:
    with pytest.raises(ProducerContractError, match="no snapshots"):
        materialize(iter([]), label="empty")


def test_missing_final_snapshot_is_rejected() -> None:
    sb = SnapshotBuilder(StructureKind.ARRAY, [])
    with pytest.raises(ProducerContractError, match="without a final"):
        materialize([sb.build(), sb.build()])


def test_early_final_snapshot_is_rejected() -> None:
    with pytest.raises(ProducerContractError, match="before the end"):
        materialize(_producer(3, final_at=1))


def test_materialization_is_deterministic() -> None:
    info = REGISTRY["quick_sort"]
    first = materialize(info.produce(info.sample_form()))
    second = materialize(info.produce(info.sample_form()))
    assert [s.to_dict() for s in first] == [s.to_dict() for s in second]


def test_metrics_count_highlight_kinds() -> None:
    trace = materialize(linear_search([5, 6, 7], 7), label="Linear")
    assert trace.metrics.total_steps == len(trace)
    assert trace.metrics.comparisons == 3
    assert trace.metrics.swaps == 0
    assert trace.metrics.memory_bytes > 0
    data = trace.metrics.to_dict()
    assert data["label"] == "Linear"
    assert data["comparisons"] == 3


def test_to_dict_serialises_every_snapshot() -> None:
    trace = materialize(_producer(2), label="two")
    data = trace.to_dict()
    assert data["label"] == "two"
    assert len(data["snapshots"]) == 2
    assert data["snapshots"][-1]["is_final"] is True


def test_compare_picks_fewer_steps() -> None:
    array = list(range(10, 160, 10))
    left = materialize(linear_search(array, 150), label="Linear")
    right = materialize(binary_search(array, 150), label="Binary")
    result = compare(left, right)
    assert result.winner_steps == "Binary"
    assert result.winner_comparisons == "Binary"
    assert result.winner_swaps == "tie"


def test_trace_repr_mentions_label_and_length() -> None:
    assert repr(Trace([], label="x")) == "Trace(label='x', steps=0)"
