"""Shared fixtures for AlgoTrace tests."""

from typing import Callable, Iterable

import pytest

from algorithms import Snapshot
from engine import PlaybackController, PollingScheduler, Trace, materialize
from structures import Graph


class FakeClock:
    """Manually advanced replacement for time.monotonic."""

    def __init__(self, start: float = 100.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


BFS_ADJACENCY = {
    "A": ["B", "C"],
    "B": ["A", "D", "E"],
    "C": ["A", "F", "G"],
    "D": ["B"],
    "E": ["B", "F"],
    "F": ["C", "E"],
    "G": ["C"],
}


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def scheduler(clock: FakeClock) -> PollingScheduler:
    return PollingScheduler(clock=clock)


@pytest.fixture
def controller(scheduler: PollingScheduler) -> PlaybackController:
    return PlaybackController(scheduler, speed_ms=100)


@pytest.fixture
def bfs_graph() -> Graph:
    return Graph.from_dict(BFS_ADJACENCY, directed=True)


@pytest.fixture
def weighted_graph() -> Graph:
    return Graph.from_adjacency_list(
        "A: B(4) C(1)\nB: C(2) D(5)\nC: D(8) E(10)\nD: E(2)\nF: A(1)"
    )


@pytest.fixture
def run() -> Callable[[Iterable[Snapshot]], Trace]:
    """Materialize a producer; shorthand used across the producer tests."""
    return materialize


def assert_well_formed(trace: Trace) -> None:
    """Numbering is contiguous and only the last snapshot is final."""
    assert len(trace) >= 1
    assert [s.step_number for s in trace] == list(range(len(trace)))
    assert trace[-1].is_final
    assert not any(s.is_final for s in trace[:-1])
    assert all(s.result is None for s in trace[:-1])
    assert trace[-1].result is not None
