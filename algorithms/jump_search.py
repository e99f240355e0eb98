"""
jump_search.py — Jump Search
=============================
Jumps ahead in blocks of ⌊√n⌋ until the block end is ≥ target, then scans
that block linearly.  Pointers: "prev" (block start), "jump" (block end),
"i" (linear cursor).
"""

import math
from typing import Iterator, List, Sequence

from algorithms.snapshot import Snapshot, SnapshotBuilder, StructureKind


PSEUDOCODE: List[str] = [
    "def jump_search(arr, target):",                    # 0
    "    step ← ⌊√n⌋, prev ← 0",                        # 1
    "    while arr[min(step, n) - 1] < target:",        # 2
    "        prev ← step, step ← step + ⌊√n⌋",          # 3
    "        if prev ≥ n: return NOT FOUND",            # 4
    "    for i in prev .. min(step, n) - 1:",           # 5
    "        if arr[i] == target: return i",            # 6
    "    return NOT FOUND",                             # 7
]


def jump_search(array: Sequence[int], target: int) -> Iterator[Snapshot]:
    arr = list(array)
    n = len(arr)
    sb = SnapshotBuilder(StructureKind.ARRAY, arr)
    block = max(1, math.isqrt(n))

    sb.pseudocode_line = 1
    sb.message = f"Block size ⌊√{n}⌋ = {block}. Jump ahead block by block looking for {target}."
    yield sb.build()

    if n == 0:
        sb.reset()
        sb.pseudocode_line = 7
        sb.message = "The array is empty. Nothing to search."
        yield sb.build(is_final=True, result={"found": False, "index": -1, "target": target})
        return

    # --- jump phase ---
    prev, step = 0, block
    while True:
        end = min(step, n) - 1
        sb.reset()
        sb.point("prev", prev)
        sb.point("jump", end)
        sb.activate(*range(prev, end + 1))
        sb.compare(end)
        sb.pseudocode_line = 2
        if arr[end] < target and step < n:
            sb.message = f"arr[{end}] = {arr[end]} < {target}: the target lies further right, jump."
        else:
            sb.message = f"arr[{end}] = {arr[end]}: if {target} exists it is in block [{prev}, {end}]."
        yield sb.build()

        if arr[end] >= target or step >= n:
            break
        prev, step = step, step + block

    # --- linear phase ---
    for i in range(prev, min(step, n)):
        sb.reset()
        sb.point("prev", prev)
        sb.point("i", i)
        sb.activate(*range(prev, min(step, n)))
        sb.compare(i)
        sb.pseudocode_line = 6
        sb.message = f"Linear scan: arr[{i}] = {arr[i]} vs {target}."
        yield sb.build()

        if arr[i] == target:
            sb.reset()
            sb.highlight(i)
            sb.point("i", i)
            sb.pseudocode_line = 6
            sb.message = f"Found! {target} is at index {i}."
            yield sb.build(is_final=True, result={"found": True, "index": i, "target": target})
            return
        if arr[i] > target:
            break

    sb.reset()
    sb.pseudocode_line = 7
    sb.message = f"{target} is not in the array."
    yield sb.build(is_final=True, result={"found": False, "index": -1, "target": target})
