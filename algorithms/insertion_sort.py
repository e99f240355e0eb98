"""
insertion_sort.py — Insertion Sort
===================================
Grows a sorted prefix (HIGHLIGHTED); each new element sinks left by
adjacent swaps until it meets a smaller-or-equal neighbour.
"""

from typing import Iterator, List, Sequence

from algorithms.snapshot import Snapshot, SnapshotBuilder, StructureKind


PSEUDOCODE: List[str] = [
    "def insertion_sort(arr):",                         # 0
    "    for i in 1 .. n - 1:",                         # 1
    "        j ← i - 1",                                # 2
    "        while j ≥ 0 and arr[j] > arr[j + 1]:",     # 3
    "            swap(arr[j], arr[j + 1])",             # 4
    "            j ← j - 1",                            # 5
    "    return arr",                                   # 6
]


def insertion_sort(array: Sequence[int]) -> Iterator[Snapshot]:
    arr = list(array)
    n = len(arr)
    sb = SnapshotBuilder(StructureKind.ARRAY, arr)

    sb.pseudocode_line = 0
    sb.message = f"Sort {n} element(s) by inserting each one into the sorted prefix."
    yield sb.build()

    for i in range(1, n):
        j = i - 1
        while j >= 0:
            sb.reset()
            sb.highlight(*range(i))
            sb.compare(j, j + 1)
            sb.point("i", i)
            sb.point("j", j)
            sb.pseudocode_line = 3
            sb.message = f"Compare arr[{j}] = {arr[j]} with arr[{j + 1}] = {arr[j + 1]}."
            yield sb.build()

            if arr[j] <= arr[j + 1]:
                break

            arr[j], arr[j + 1] = arr[j + 1], arr[j]
            sb.reset()
            sb.highlight(*range(i))
            sb.swap(j, j + 1)
            sb.point("i", i)
            sb.point("j", j)
            sb.pseudocode_line = 4
            sb.message = f"{arr[j + 1]} > {arr[j]}: shift {arr[j]} one place left."
            yield sb.build()
            j -= 1

    sb.reset()
    sb.mark_sorted(*range(n))
    sb.pseudocode_line = 6
    sb.message = "Sorted."
    yield sb.build(is_final=True, result={"sorted": list(arr)})
