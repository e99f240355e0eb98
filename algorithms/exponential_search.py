"""
exponential_search.py — Exponential Search
===========================================
Doubles a bound (1, 2, 4, …) until arr[bound] > target or the end is
reached, then binary-searches [bound / 2, min(bound, n - 1)].
"""

from typing import Iterator, List, Sequence

from algorithms.snapshot import Snapshot, SnapshotBuilder, StructureKind


PSEUDOCODE: List[str] = [
    "def exponential_search(arr, target):",             # 0
    "    if arr[0] == target: return 0",                # 1
    "    i ← 1",                                        # 2
    "    while i < n and arr[i] ≤ target: i ← i * 2",   # 3
    "    L ← i // 2, R ← min(i, n - 1)",                # 4
    "    while L ≤ R:",                                 # 5
    "        M ← (L + R) // 2",                         # 6
    "        if arr[M] == target: return M",            # 7
    "        if arr[M] < target: L ← M + 1 else R ← M - 1",  # 8
    "    return NOT FOUND",                             # 9
]


def exponential_search(array: Sequence[int], target: int) -> Iterator[Snapshot]:
    arr = list(array)
    n = len(arr)
    sb = SnapshotBuilder(StructureKind.ARRAY, arr)

    def _found(idx: int) -> Snapshot:
        sb.reset()
        sb.point("M", idx)
        sb.highlight(idx)
        sb.pseudocode_line = 7
        sb.message = f"Found! {target} is at index {idx}."
        return sb.build(is_final=True, result={"found": True, "index": idx, "target": target})

    if n == 0:
        sb.pseudocode_line = 9
        sb.message = "The array is empty. Nothing to search."
        yield sb.build(is_final=True, result={"found": False, "index": -1, "target": target})
        return

    sb.compare(0)
    sb.pseudocode_line = 1
    sb.message = f"Check arr[0] = {arr[0]} first."
    yield sb.build()
    if arr[0] == target:
        yield _found(0)
        return

    # --- doubling phase ---
    i = 1
    while i < n:
        sb.reset()
        sb.point("bound", i)
        sb.compare(i)
        sb.pseudocode_line = 3
        if arr[i] <= target:
            sb.message = f"arr[{i}] = {arr[i]} ≤ {target}: double the bound to {i * 2}."
        else:
            sb.message = f"arr[{i}] = {arr[i]} > {target}: the target lies before index {i}."
        yield sb.build()
        if arr[i] == target:
            yield _found(i)
            return
        if arr[i] > target:
            break
        i *= 2

    # --- binary phase ---
    lo, hi = i // 2, min(i, n - 1)
    sb.reset()
    sb.point("L", lo)
    sb.point("R", hi)
    sb.activate(*range(lo, hi + 1))
    sb.pseudocode_line = 4
    sb.message = f"Binary search the range [{lo}, {hi}]."
    yield sb.build()

    while lo <= hi:
        mid = (lo + hi) // 2
        sb.reset()
        sb.point("L", lo)
        sb.point("R", hi)
        sb.point("M", mid)
        sb.activate(*range(lo, hi + 1))
        sb.compare(mid)
        sb.pseudocode_line = 6
        sb.message = f"M = {mid}: arr[{mid}] = {arr[mid]} vs {target}."
        yield sb.build()

        if arr[mid] == target:
            yield _found(mid)
            return
        if arr[mid] < target:
            lo = mid + 1
        else:
            hi = mid - 1

    sb.reset()
    sb.pseudocode_line = 9
    sb.message = f"{target} is not in the array."
    yield sb.build(is_final=True, result={"found": False, "index": -1, "target": target})
