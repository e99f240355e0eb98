"""
bubble_sort.py — Bubble Sort
=============================
Yields a Snapshot at:
  1. Every adjacent comparison  →  COMPARING
  2. Every swap (after the values moved)  →  SWAPPING
  3. Final  →  every index SORTED

The tail that has already bubbled into place stays SORTED throughout.
Stops early after a pass without swaps.
"""

from typing import Iterator, List, Sequence

from algorithms.snapshot import Snapshot, SnapshotBuilder, StructureKind


PSEUDOCODE: List[str] = [
    "def bubble_sort(arr):",                            # 0
    "    for i in 0 .. n - 2:",                         # 1
    "        for j in 0 .. n - 2 - i:",                 # 2
    "            if arr[j] > arr[j + 1]:",              # 3
    "                swap(arr[j], arr[j + 1])",         # 4
    "        if no swaps this pass: break",             # 5
    "    return arr",                                   # 6
]


def bubble_sort(array: Sequence[int]) -> Iterator[Snapshot]:
    arr = list(array)
    n = len(arr)
    sb = SnapshotBuilder(StructureKind.ARRAY, arr)
    done: List[int] = []

    sb.pseudocode_line = 0
    sb.message = f"Sort {n} element(s) by repeatedly swapping adjacent out-of-order pairs."
    yield sb.build()

    for i in range(n - 1):
        swapped = False
        for j in range(n - 1 - i):
            sb.reset()
            sb.mark_sorted(*done)
            sb.compare(j, j + 1)
            sb.point("j", j)
            sb.pseudocode_line = 3
            sb.message = f"Compare arr[{j}] = {arr[j]} and arr[{j + 1}] = {arr[j + 1]}."
            yield sb.build()

            if arr[j] > arr[j + 1]:
                arr[j], arr[j + 1] = arr[j + 1], arr[j]
                swapped = True
                sb.reset()
                sb.mark_sorted(*done)
                sb.swap(j, j + 1)
                sb.point("j", j)
                sb.pseudocode_line = 4
                sb.message = f"{arr[j + 1]} > {arr[j]}: swapped them."
                yield sb.build()

        done.append(n - 1 - i)
        if not swapped:
            sb.reset()
            sb.mark_sorted(*done)
            sb.pseudocode_line = 5
            sb.message = f"Pass {i + 1} made no swaps: the array is already sorted."
            yield sb.build()
            break

    sb.reset()
    sb.mark_sorted(*range(n))
    sb.pseudocode_line = 6
    sb.message = "Sorted."
    yield sb.build(is_final=True, result={"sorted": list(arr)})
