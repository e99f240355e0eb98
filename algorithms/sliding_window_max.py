"""
sliding_window_max.py — Sliding Window Maximum (monotonic deque)
================================================================
The deque holds indices whose values decrease from front to rear, so
the front is always the maximum of the current window.

Yields a Snapshot at:
  1. Each new index entering the window  →  VISITING
  2. Front index falling out of the window
  3. Each smaller value popped from the rear
  4. Pushing the new index
  5. Recording the window maximum (front of the deque ACTIVE)
  6. Final  →  every maximum

Overlay exposes:
  • "deque"  – indices, front → rear
  • "maxima" – maxima recorded so far
Pointers "L" and "R" bound the window.
"""

from collections import deque
from typing import Deque, Iterator, List, Sequence

from algorithms.snapshot import Snapshot, SnapshotBuilder, StructureKind


PSEUDOCODE: List[str] = [
    "def window_max(arr, k):",                                  # 0
    "    for i in 0 .. n - 1:",                                 # 1
    "        if dq.front ≤ i - k: dq.pop_front()",              # 2
    "        while arr[dq.rear] < arr[i]: dq.pop_rear()",       # 3
    "        dq.push_rear(i)",                                  # 4
    "        if i ≥ k - 1: record arr[dq.front]",               # 5
    "    return maxima",                                        # 6
]


def sliding_window_max(array: Sequence[int], k: int) -> Iterator[Snapshot]:
    arr = list(array)
    sb = SnapshotBuilder(StructureKind.ARRAY, arr)
    dq: Deque[int] = deque()
    maxima: List[int] = []

    def _frame(i: int, line: int, message: str) -> None:
        lo = max(0, i - k + 1)
        sb.reset()
        sb.highlight(*range(lo, i + 1))
        sb.point("L", lo)
        sb.point("R", i)
        sb.overlay["deque"] = list(dq)
        sb.overlay["maxima"] = list(maxima)
        sb.pseudocode_line = line
        sb.message = message

    sb.overlay["deque"] = []
    sb.overlay["maxima"] = []
    sb.pseudocode_line = 0
    sb.message = f"Slide a window of size {k} across {len(arr)} element(s)."
    yield sb.build()

    for i, value in enumerate(arr):
        _frame(i, 1, f"Index {i} (value {value}) enters the window.")
        sb.visiting(i)
        yield sb.build()

        if dq and dq[0] <= i - k:
            gone = dq.popleft()
            _frame(i, 2, f"Index {gone} is outside the window [{i - k + 1}, {i}]: drop it from the front.")
            sb.swap(gone)
            yield sb.build()

        while dq and arr[dq[-1]] < value:
            popped = dq.pop()
            _frame(i, 3, f"{arr[popped]} < {value}: index {popped} can never be a maximum, pop it from the rear.")
            sb.compare(popped, i)
            yield sb.build()

        dq.append(i)
        _frame(i, 4, f"Push index {i} onto the rear.")
        sb.activate(i)
        yield sb.build()

        if i >= k - 1:
            maxima.append(arr[dq[0]])
            _frame(i, 5, f"Window [{i - k + 1}, {i}] is full: its maximum is arr[{dq[0]}] = {arr[dq[0]]}.")
            sb.activate(dq[0])
            yield sb.build()

    sb.reset()
    sb.overlay["deque"] = list(dq)
    sb.overlay["maxima"] = list(maxima)
    sb.pseudocode_line = 6
    sb.message = f"Window maxima: {', '.join(map(str, maxima))}."
    yield sb.build(is_final=True, result={"maxima": maxima})
