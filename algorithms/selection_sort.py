"""
selection_sort.py — Selection Sort
===================================
Each pass scans the unsorted suffix for its minimum (HIGHLIGHTED while it
is the running minimum) and swaps it to the front of the suffix.
"""

from typing import Iterator, List, Sequence

from algorithms.snapshot import Snapshot, SnapshotBuilder, StructureKind


PSEUDOCODE: List[str] = [
    "def selection_sort(arr):",                         # 0
    "    for i in 0 .. n - 2:",                         # 1
    "        min ← i",                                  # 2
    "        for j in i + 1 .. n - 1:",                 # 3
    "            if arr[j] < arr[min]: min ← j",        # 4
    "        swap(arr[i], arr[min])",                   # 5
    "    return arr",                                   # 6
]


def selection_sort(array: Sequence[int]) -> Iterator[Snapshot]:
    arr = list(array)
    n = len(arr)
    sb = SnapshotBuilder(StructureKind.ARRAY, arr)

    sb.pseudocode_line = 0
    sb.message = f"Sort {n} element(s) by repeatedly selecting the minimum of the unsorted part."
    yield sb.build()

    for i in range(n - 1):
        min_idx = i
        for j in range(i + 1, n):
            sb.reset()
            sb.mark_sorted(*range(i))
            sb.compare(min_idx, j)
            sb.highlight(min_idx)
            sb.point("i", i)
            sb.point("j", j)
            sb.pseudocode_line = 4
            if arr[j] < arr[min_idx]:
                sb.message = f"arr[{j}] = {arr[j]} < current minimum {arr[min_idx]}: new minimum."
            else:
                sb.message = f"arr[{j}] = {arr[j]} ≥ current minimum {arr[min_idx]}."
            yield sb.build()
            if arr[j] < arr[min_idx]:
                min_idx = j

        if min_idx != i:
            arr[i], arr[min_idx] = arr[min_idx], arr[i]
            sb.reset()
            sb.mark_sorted(*range(i))
            sb.swap(i, min_idx)
            sb.point("i", i)
            sb.pseudocode_line = 5
            sb.message = f"Swap the minimum {arr[i]} into position {i}."
            yield sb.build()

    sb.reset()
    sb.mark_sorted(*range(n))
    sb.pseudocode_line = 6
    sb.message = "Sorted."
    yield sb.build(is_final=True, result={"sorted": list(arr)})
