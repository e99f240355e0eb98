"""
quick_sort.py — Quick Sort (Lomuto partition)
==============================================
The last element of each range is the pivot (ACTIVE).  Elements smaller
than the pivot are swapped into the growing left partition; finally the
pivot is swapped into its resting place and marked SORTED.
"""

from typing import Iterator, List, Sequence

from algorithms.snapshot import Snapshot, SnapshotBuilder, StructureKind


PSEUDOCODE: List[str] = [
    "def quick_sort(arr, lo, hi):",                     # 0
    "    if lo ≥ hi: return",                           # 1
    "    pivot ← arr[hi], i ← lo",                      # 2
    "    for j in lo .. hi - 1:",                       # 3
    "        if arr[j] < pivot:",                       # 4
    "            swap(arr[i], arr[j]); i ← i + 1",      # 5
    "    swap(arr[i], arr[hi])",                        # 6
    "    quick_sort(arr, lo, i - 1)",                   # 7
    "    quick_sort(arr, i + 1, hi)",                   # 8
]


def quick_sort(array: Sequence[int]) -> Iterator[Snapshot]:
    arr = list(array)
    n = len(arr)
    sb = SnapshotBuilder(StructureKind.ARRAY, arr)
    placed: List[int] = []

    sb.pseudocode_line = 0
    sb.message = f"Sort {n} element(s) by partitioning around a pivot."
    yield sb.build()

    yield from _quick(arr, 0, n - 1, sb, placed)

    sb.reset()
    sb.mark_sorted(*range(n))
    sb.pseudocode_line = 0
    sb.message = "Sorted."
    yield sb.build(is_final=True, result={"sorted": list(arr)})


def _quick(arr: List[int], lo: int, hi: int, sb: SnapshotBuilder, placed: List[int]) -> Iterator[Snapshot]:
    if lo > hi:
        return
    if lo == hi:
        placed.append(lo)
        return

    pivot = arr[hi]
    i = lo
    sb.reset()
    sb.mark_sorted(*placed)
    sb.highlight(*range(lo, hi + 1))
    sb.activate(hi)
    sb.point("i", i)
    sb.pseudocode_line = 2
    sb.message = f"Partition [{lo}, {hi}] around pivot {pivot}."
    yield sb.build()

    for j in range(lo, hi):
        sb.reset()
        sb.mark_sorted(*placed)
        sb.activate(hi)
        sb.compare(j, hi)
        sb.point("i", i)
        sb.point("j", j)
        sb.pseudocode_line = 4
        sb.message = (
            f"arr[{j}] = {arr[j]} < pivot {pivot}: it belongs on the left." if arr[j] < pivot
            else f"arr[{j}] = {arr[j]} ≥ pivot {pivot}: leave it."
        )
        yield sb.build()

        if arr[j] < pivot:
            if i != j:
                arr[i], arr[j] = arr[j], arr[i]
                sb.reset()
                sb.mark_sorted(*placed)
                sb.activate(hi)
                sb.swap(i, j)
                sb.point("i", i)
                sb.point("j", j)
                sb.pseudocode_line = 5
                sb.message = f"Swap {arr[i]} into the left partition at index {i}."
                yield sb.build()
            i += 1

    if i != hi:
        arr[i], arr[hi] = arr[hi], arr[i]
        sb.reset()
        sb.mark_sorted(*placed)
        sb.swap(i, hi)
        sb.pseudocode_line = 6
        sb.message = f"Move pivot {pivot} to its final position {i}."
        yield sb.build()
    placed.append(i)

    yield from _quick(arr, lo, i - 1, sb, placed)
    yield from _quick(arr, i + 1, hi, sb, placed)
