"""
merge_sort.py — Merge Sort
===========================
Top-down merge sort.  The recursion is itself a generator chain
(`yield from`), so every compare and every write is still one Snapshot.

Overlay exposes:
  • "left" / "right" – the two runs being merged (copies)
The slot about to be written is marked ACTIVE; the run being merged is
HIGHLIGHTED.
"""

from typing import Iterator, List, Sequence

from algorithms.snapshot import Snapshot, SnapshotBuilder, StructureKind


PSEUDOCODE: List[str] = [
    "def merge_sort(arr, lo, hi):",                     # 0
    "    if hi - lo ≤ 1: return",                       # 1
    "    mid ← (lo + hi) // 2",                         # 2
    "    merge_sort(arr, lo, mid)",                     # 3
    "    merge_sort(arr, mid, hi)",                     # 4
    "    while left and right remain:",                 # 5
    "        take the smaller head into arr[k]",        # 6
    "    copy whatever remains",                        # 7
]


def merge_sort(array: Sequence[int]) -> Iterator[Snapshot]:
    arr = list(array)
    n = len(arr)
    sb = SnapshotBuilder(StructureKind.ARRAY, arr)

    sb.pseudocode_line = 0
    sb.message = f"Sort {n} element(s) by splitting in halves and merging sorted runs."
    yield sb.build()

    yield from _sort(arr, 0, n, sb)

    sb.reset()
    sb.mark_sorted(*range(n))
    sb.pseudocode_line = 0
    sb.message = "Sorted."
    yield sb.build(is_final=True, result={"sorted": list(arr)})


def _sort(arr: List[int], lo: int, hi: int, sb: SnapshotBuilder) -> Iterator[Snapshot]:
    if hi - lo <= 1:
        return
    mid = (lo + hi) // 2

    sb.reset()
    sb.highlight(*range(lo, hi))
    sb.point("mid", mid)
    sb.pseudocode_line = 2
    sb.message = f"Split [{lo}, {hi - 1}] at {mid}."
    yield sb.build()

    yield from _sort(arr, lo, mid, sb)
    yield from _sort(arr, mid, hi, sb)
    yield from _merge(arr, lo, mid, hi, sb)


def _merge(arr: List[int], lo: int, mid: int, hi: int, sb: SnapshotBuilder) -> Iterator[Snapshot]:
    left, right = arr[lo:mid], arr[mid:hi]
    merged: List[int] = []
    i = j = 0
    k = lo

    # arr[lo:hi] is merged output followed by the unconsumed run heads
    def _place() -> None:
        arr[lo:hi] = merged + left[i:] + right[j:]

    def _frame(line: int, message: str) -> None:
        sb.reset()
        sb.highlight(*range(lo, hi))
        sb.overlay["left"] = left[i:]
        sb.overlay["right"] = right[j:]
        sb.point("k", k)
        sb.pseudocode_line = line
        sb.message = message

    while i < len(left) and j < len(right):
        _frame(5, f"Compare heads: left {left[i]} vs right {right[j]}.")
        sb.compare(k)
        yield sb.build()

        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
        _place()
        _frame(6, f"Write {arr[k]} into position {k}.")
        sb.swap(k)
        yield sb.build()
        k += 1

    while i < len(left) or j < len(right):
        if i < len(left):
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
        _place()
        _frame(7, f"Copy the leftover {arr[k]} into position {k}.")
        sb.swap(k)
        yield sb.build()
        k += 1
