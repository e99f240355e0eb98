"""
interpolation_search.py — Interpolation Search
===============================================
Like binary search, but the next position to check is estimated from the values
at the window ends:

    pos = L + (target - arr[L]) · (R - L) // (arr[R] - arr[L])

When arr[L] == arr[R] the check falls back to L (no division by zero).
"""

from typing import Iterator, List, Sequence

from algorithms.snapshot import Snapshot, SnapshotBuilder, StructureKind


PSEUDOCODE: List[str] = [
    "def interpolation_search(arr, target):",                         # 0
    "    L ← 0, R ← n - 1",                                           # 1
    "    while L ≤ R and arr[L] ≤ target ≤ arr[R]:",                  # 2
    "        pos ← L + (target - arr[L]) * (R - L) // (arr[R] - arr[L])",  # 3
    "        if arr[pos] == target: return pos",                      # 4
    "        if arr[pos] < target: L ← pos + 1",                      # 5
    "        else: R ← pos - 1",                                      # 6
    "    return NOT FOUND",                                           # 7
]


def interpolation_search(array: Sequence[int], target: int) -> Iterator[Snapshot]:
    arr = list(array)
    sb = SnapshotBuilder(StructureKind.ARRAY, arr)
    lo, hi = 0, len(arr) - 1

    if arr:
        sb.point("L", lo)
        sb.point("R", hi)
    sb.pseudocode_line = 1
    sb.message = f"Search for {target} by estimating where it should sit between arr[L] and arr[R]."
    yield sb.build()

    while lo <= hi and arr[lo] <= target <= arr[hi]:
        if arr[hi] == arr[lo]:
            pos = lo
        else:
            pos = lo + (target - arr[lo]) * (hi - lo) // (arr[hi] - arr[lo])

        sb.reset()
        sb.point("L", lo)
        sb.point("R", hi)
        sb.point("pos", pos)
        sb.activate(*range(lo, hi + 1))
        sb.compare(pos)
        sb.pseudocode_line = 3
        sb.message = f"Estimated position {pos}: arr[{pos}] = {arr[pos]} vs {target}."
        yield sb.build()

        if arr[pos] == target:
            sb.reset()
            sb.point("pos", pos)
            sb.highlight(pos)
            sb.pseudocode_line = 4
            sb.message = f"Found! {target} is at index {pos}."
            yield sb.build(is_final=True, result={"found": True, "index": pos, "target": target})
            return

        if arr[pos] < target:
            lo = pos + 1
        else:
            hi = pos - 1

    sb.reset()
    sb.pseudocode_line = 7
    sb.message = f"{target} is outside the remaining window. Not found."
    yield sb.build(is_final=True, result={"found": False, "index": -1, "target": target})
