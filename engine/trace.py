"""
trace.py — Trace Materializer & Run Analytics
==============================================
Drains a step producer into an immutable, indexable Trace and computes
the analytics the UI shows for the run.

Usage:
    trace = materialize(binary_search(arr, 80), label="Binary Search")
    trace[0], trace[-1], len(trace)
    trace.result                     # the final snapshot's result
    trace.metrics                    # TraceMetrics for the analytics card

Comparison Mode:
    Materialize two producers on the SAME input, then
    compare(left, right) → ComparisonResult.

Draining is eager and unbounded: a producer that never terminates
blocks the caller.
"""

import logging
import sys
import time
from collections.abc import Sequence
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Iterable, Iterator, List, Optional, Union

from algorithms.snapshot import Highlight, Snapshot

logger = logging.getLogger(__name__)


class ProducerContractError(RuntimeError):
    """A producer emitted nothing, or its last snapshot was not final."""


# ---------------------------------------------------------------------------
# Metrics dataclass: what the Analytics panel renders
# ---------------------------------------------------------------------------
@dataclass
class TraceMetrics:
    label:        str            = ""
    total_steps:  int            = 0      # number of Snapshots
    wall_time_ms: float          = 0.0    # wall-clock time to drain the producer
    memory_bytes: int            = 0      # approx size of the snapshot buffer
    highlight_counts: Dict[str, int] = field(default_factory=dict)   # snapshots per highlight kind

    @property
    def comparisons(self) -> int:
        return self.highlight_counts.get(Highlight.COMPARING.value, 0)

    @property
    def swaps(self) -> int:
        return self.highlight_counts.get(Highlight.SWAPPING.value, 0)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["comparisons"] = self.comparisons
        data["swaps"] = self.swaps
        return data


# ---------------------------------------------------------------------------
# ComparisonResult: side-by-side analytics
# ---------------------------------------------------------------------------
@dataclass
class ComparisonResult:
    left:  TraceMetrics = field(default_factory=TraceMetrics)
    right: TraceMetrics = field(default_factory=TraceMetrics)
    # derived
    winner_steps:       str = ""
    winner_comparisons: str = ""
    winner_swaps:       str = ""


# ---------------------------------------------------------------------------
# Trace
# ---------------------------------------------------------------------------
class Trace(Sequence):
    """
    Immutable, finite, ordered sequence of Snapshots from one run.

    Attributes:
        label   : Algorithm label (for panels / logs).
        metrics : TraceMetrics computed when the trace was materialized.
    """

    def __init__(self, snapshots: Iterable[Snapshot], label: str = "", metrics: Optional[TraceMetrics] = None):
        self._snapshots = tuple(snapshots)
        self.label = label
        self.metrics = metrics or TraceMetrics(label=label, total_steps=len(self._snapshots))

    def __getitem__(self, index: Union[int, slice]):
        return self._snapshots[index]

    def __len__(self) -> int:
        return len(self._snapshots)

    def __iter__(self) -> Iterator[Snapshot]:
        return iter(self._snapshots)

    @property
    def final(self) -> Snapshot:
        return self._snapshots[-1]

    @property
    def result(self) -> Optional[Dict[str, Any]]:
        return self.final.result

    def to_dict(self) -> Dict[str, Any]:
        return {
            "label": self.label,
            "metrics": self.metrics.to_dict(),
            "snapshots": [s.to_dict() for s in self._snapshots],
        }

    def __repr__(self) -> str:
        return f"Trace(label={self.label!r}, steps={len(self)})"


# ---------------------------------------------------------------------------
# Materializer
# ---------------------------------------------------------------------------
def materialize(snapshots: Iterable[Snapshot], label: str = "") -> Trace:
    """Drain a producer completely and validate its termination contract."""
    start = time.monotonic()
    steps: List[Snapshot] = list(snapshots)
    wall_ms = (time.monotonic() - start) * 1000

    if not steps:
        logger.error("Producer %r emitted no snapshots", label)
        raise ProducerContractError(f"{label or 'producer'} emitted no snapshots")
    early = next((s.step_number for s in steps[:-1] if s.is_final), None)
    if early is not None:
        logger.error("Producer %r emitted a final snapshot at step %d of %d", label, early, len(steps))
        raise ProducerContractError(f"{label or 'producer'} emitted a final snapshot before the end")
    if not steps[-1].is_final:
        logger.error("Producer %r ended without a final snapshot (%d emitted)", label, len(steps))
        raise ProducerContractError(f"{label or 'producer'} ended without a final snapshot")

    metrics = _compute_metrics(steps, wall_ms, label)
    logger.debug("Materialized %r: %d snapshots in %.2f ms", label, len(steps), wall_ms)
    return Trace(steps, label=label, metrics=metrics)


def _compute_metrics(steps: List[Snapshot], wall_ms: float, label: str) -> TraceMetrics:
    counts: Dict[str, int] = {h.value: 0 for h in Highlight}
    for s in steps:
        for name, items in s.highlights.items():
            if items:
                counts[name] = counts.get(name, 0) + 1

    # approximate memory: sizeof the snapshot buffer
    mem = sys.getsizeof(steps)
    for s in steps:
        mem += sys.getsizeof(s) + sys.getsizeof(s.structure)

    return TraceMetrics(
        label=label,
        total_steps=len(steps),
        wall_time_ms=round(wall_ms, 2),
        memory_bytes=mem,
        highlight_counts=counts,
    )


# ---------------------------------------------------------------------------
# Comparison helper
# ---------------------------------------------------------------------------
def compare(left: Trace, right: Trace) -> ComparisonResult:
    """Given two materialized traces, produce a ComparisonResult."""
    l, r = left.metrics, right.metrics

    def winner(l_val, r_val):
        if l_val == r_val:
            return "tie"
        return l.label if l_val < r_val else r.label

    return ComparisonResult(
        left=l,
        right=r,
        winner_steps=winner(l.total_steps, r.total_steps),
        winner_comparisons=winner(l.comparisons, r.comparisons),
        winner_swaps=winner(l.swaps, r.swaps),
    )
