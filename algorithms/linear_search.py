"""
linear_search.py — Linear Search
=================================
Scans left to right, one COMPARING snapshot per element.
"""

from typing import Iterator, List, Sequence

from algorithms.snapshot import Snapshot, SnapshotBuilder, StructureKind


PSEUDOCODE: List[str] = [
    "def linear_search(arr, target):",          # 0
    "    for i in 0 .. n - 1:",                 # 1
    "        if arr[i] == target: return i",    # 2
    "    return NOT FOUND",                     # 3
]


def linear_search(array: Sequence[int], target: int) -> Iterator[Snapshot]:
    arr = list(array)
    sb = SnapshotBuilder(StructureKind.ARRAY, arr)

    sb.pseudocode_line = 0
    sb.message = f"Scan {len(arr)} element(s) from the left looking for {target}."
    yield sb.build()

    for i, value in enumerate(arr):
        sb.reset()
        sb.point("i", i)
        sb.visited(*range(i))
        sb.compare(i)
        sb.pseudocode_line = 2
        sb.message = (
            f"arr[{i}] = {value} equals {target}." if value == target
            else f"arr[{i}] = {value} ≠ {target}, move on."
        )
        yield sb.build()

        if value == target:
            sb.reset()
            sb.point("i", i)
            sb.highlight(i)
            sb.pseudocode_line = 2
            sb.message = f"Found! {target} is at index {i}."
            yield sb.build(is_final=True, result={"found": True, "index": i, "target": target})
            return

    sb.reset()
    sb.visited(*range(len(arr)))
    sb.pseudocode_line = 3
    sb.message = f"Reached the end without a match. {target} is not in the array."
    yield sb.build(is_final=True, result={"found": False, "index": -1, "target": target})
