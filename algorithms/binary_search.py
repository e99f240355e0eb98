"""
binary_search.py — Binary Search
=================================
Generator-based binary search over a sorted array.  Yields a Snapshot at:
  1. Initialise L / R
  2. Every check of the midpoint M  →  COMPARING
  3. Target found  →  HIGHLIGHTED, final
  4. Window empty  →  not found, final

Pointers: "L", "R", "M".  The live search window is marked ACTIVE.
"""

from typing import Iterator, List, Sequence

from algorithms.snapshot import Snapshot, SnapshotBuilder, StructureKind


# ---------------------------------------------------------------------------
# Pseudocode: each string is one displayed line; index = pseudocode_line
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def binary_search(arr, target):",          # 0
    "    L ← 0, R ← n - 1",                     # 1
    "    while L ≤ R:",                         # 2
    "        M ← (L + R) // 2",                 # 3
    "        if arr[M] == target: return M",    # 4
    "        if arr[M] < target: L ← M + 1",    # 5
    "        else: R ← M - 1",                  # 6
    "    return NOT FOUND",                     # 7
]


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def binary_search(array: Sequence[int], target: int) -> Iterator[Snapshot]:
    """
    Args:
        array  : Sorted input values (ascending).
        target : Value to look for.

    Yields:
        Snapshot – one per midpoint check, plus the initial and terminal frames.
    """
    arr = list(array)
    sb = SnapshotBuilder(StructureKind.ARRAY, arr)
    lo, hi = 0, len(arr) - 1

    # --- initialisation step ---
    if arr:
        sb.point("L", lo)
        sb.point("R", hi)
        sb.activate(*range(lo, hi + 1))
    sb.pseudocode_line = 1
    sb.message = f"Search for {target} in {len(arr)} sorted element(s): L = {lo}, R = {hi}."
    yield sb.build()

    # --- main loop ---
    while lo <= hi:
        mid = (lo + hi) // 2

        sb.reset()
        sb.point("L", lo)
        sb.point("R", hi)
        sb.point("M", mid)
        sb.activate(*range(lo, hi + 1))
        sb.compare(mid)
        sb.pseudocode_line = 3
        if arr[mid] == target:
            sb.message = f"M = ({lo} + {hi}) // 2 = {mid}; arr[{mid}] = {arr[mid]} equals the target."
        elif arr[mid] < target:
            sb.message = (
                f"M = ({lo} + {hi}) // 2 = {mid}; arr[{mid}] = {arr[mid]} < {target} "
                f"→ discard the left half, L ← {mid + 1}."
            )
        else:
            sb.message = (
                f"M = ({lo} + {hi}) // 2 = {mid}; arr[{mid}] = {arr[mid]} > {target} "
                f"→ discard the right half, R ← {mid - 1}."
            )
        yield sb.build()

        if arr[mid] == target:
            sb.reset()
            sb.point("M", mid)
            sb.highlight(mid)
            sb.pseudocode_line = 4
            sb.message = f"Found! {target} is at index {mid}."
            yield sb.build(is_final=True, result={"found": True, "index": mid, "target": target})
            return

        if arr[mid] < target:
            lo = mid + 1
        else:
            hi = mid - 1

    # --- exhausted ---
    sb.reset()
    sb.pseudocode_line = 7
    sb.message = f"L > R: the window is empty. {target} is not in the array."
    yield sb.build(is_final=True, result={"found": False, "index": -1, "target": target})
