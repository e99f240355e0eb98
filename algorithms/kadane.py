"""
kadane.py — Kadane's Maximum Subarray
======================================
Yields a Snapshot for every element considered (VISITING), with the
current run ACTIVE and the best run so far HIGHLIGHTED.

Overlay exposes:
  • "current_sum" – best sum of a run ending at i
  • "best_sum"    – best sum seen so far
"""

from typing import Iterator, List, Sequence

from algorithms.snapshot import Snapshot, SnapshotBuilder, StructureKind


PSEUDOCODE: List[str] = [
    "def kadane(arr):",                                         # 0
    "    best ← cur ← arr[0]",                                  # 1
    "    for i in 1 .. n - 1:",                                 # 2
    "        cur ← max(arr[i], cur + arr[i])",                  # 3
    "        if cur > best: best ← cur, record [start, i]",     # 4
    "    return best",                                          # 5
]


def kadane(array: Sequence[int]) -> Iterator[Snapshot]:
    arr = list(array)
    n = len(arr)
    sb = SnapshotBuilder(StructureKind.ARRAY, arr)

    if n == 0:
        sb.pseudocode_line = 5
        sb.message = "The array is empty: there is no subarray to sum."
        yield sb.build(is_final=True, result={"max_sum": None, "start": None, "end": None})
        return

    best = cur = arr[0]
    start = end = run_start = 0

    sb.visiting(0)
    sb.activate(0)
    sb.highlight(0)
    sb.overlay["current_sum"] = cur
    sb.overlay["best_sum"] = best
    sb.pseudocode_line = 1
    sb.message = f"Start with arr[0] = {arr[0]}: current sum = best sum = {cur}."
    yield sb.build()

    for i in range(1, n):
        if arr[i] > cur + arr[i]:
            message = (
                f"arr[{i}] = {arr[i]} alone beats extending ({cur} + {arr[i]} = {cur + arr[i]}): "
                f"start a new run at {i}."
            )
            cur = arr[i]
            run_start = i
        else:
            message = f"Extend the run: {cur} + {arr[i]} = {cur + arr[i]}."
            cur += arr[i]

        sb.reset()
        sb.visiting(i)
        sb.activate(*range(run_start, i + 1))
        sb.highlight(*range(start, end + 1))
        sb.point("i", i)
        sb.overlay["current_sum"] = cur
        sb.overlay["best_sum"] = best
        sb.pseudocode_line = 3
        sb.message = message
        yield sb.build()

        if cur > best:
            best = cur
            start, end = run_start, i
            sb.reset()
            sb.highlight(*range(start, end + 1))
            sb.point("i", i)
            sb.overlay["current_sum"] = cur
            sb.overlay["best_sum"] = best
            sb.pseudocode_line = 4
            sb.message = f"New best sum {best} for subarray [{start}, {end}]."
            yield sb.build()

    sb.reset()
    sb.highlight(*range(start, end + 1))
    sb.overlay["current_sum"] = cur
    sb.overlay["best_sum"] = best
    sb.pseudocode_line = 5
    sb.message = f"Maximum subarray sum is {best} (indices {start}..{end})."
    yield sb.build(is_final=True, result={"max_sum": best, "start": start, "end": end})
