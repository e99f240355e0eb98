"""
knapsack.py — 0/1 Knapsack
===========================
Fills an (n + 1) × (capacity + 1) grid where dp[i][c] is the best value
using the first i items within capacity c.  Highlights are (row, col)
cells: sources COMPARING, the written cell ACTIVE.  The final frame
HIGHLIGHTS the traceback of chosen items.
"""

from typing import Iterator, List, Sequence

from algorithms.snapshot import Snapshot, SnapshotBuilder, StructureKind


PSEUDOCODE: List[str] = [
    "def knapsack(w, v, C):",                                       # 0
    "    dp ← (n + 1) × (C + 1) grid of 0",                          # 1
    "    for i in 1 .. n:",                                         # 2
    "        for c in 1 .. C:",                                     # 3
    "            if w[i] > c: dp[i][c] ← dp[i - 1][c]",             # 4
    "            else: dp[i][c] ← max(dp[i - 1][c],",               # 5
    "                                 dp[i - 1][c - w[i]] + v[i])", # 6
    "    return dp[n][C]",                                          # 7
]


def knapsack(weights: Sequence[int], values: Sequence[int], capacity: int) -> Iterator[Snapshot]:
    n = len(weights)
    dp: List[List[int]] = [[0] * (capacity + 1) for _ in range(n + 1)]
    sb = SnapshotBuilder(StructureKind.GRID, dp)

    sb.overlay["weights"] = list(weights)
    sb.overlay["values"] = list(values)
    sb.pseudocode_line = 1
    sb.message = f"{n} item(s), capacity {capacity}. Row 0 and column 0 are all 0."
    yield sb.build()

    for i in range(1, n + 1):
        w, v = weights[i - 1], values[i - 1]
        for c in range(1, capacity + 1):
            sb.reset()
            sb.overlay["weights"] = list(weights)
            sb.overlay["values"] = list(values)
            sb.point("item", i - 1)
            sb.activate((i, c))
            if w > c:
                dp[i][c] = dp[i - 1][c]
                sb.compare((i - 1, c))
                sb.pseudocode_line = 4
                sb.message = f"Item {i - 1} (w={w}) does not fit in {c}: copy {dp[i][c]} from above."
            else:
                skip, take = dp[i - 1][c], dp[i - 1][c - w] + v
                dp[i][c] = max(skip, take)
                sb.compare((i - 1, c), (i - 1, c - w))
                sb.pseudocode_line = 5
                sb.message = (
                    f"Item {i - 1} (w={w}, v={v}) at capacity {c}: "
                    f"skip = {skip}, take = {dp[i - 1][c - w]} + {v} = {take} → {dp[i][c]}."
                )
            yield sb.build()

    # traceback
    chosen: List[int] = []
    path = []
    c = capacity
    for i in range(n, 0, -1):
        path.append((i, c))
        if dp[i][c] != dp[i - 1][c]:
            chosen.append(i - 1)
            c -= weights[i - 1]
    chosen.reverse()

    sb.reset()
    sb.overlay["weights"] = list(weights)
    sb.overlay["values"] = list(values)
    sb.highlight(*path)
    sb.activate((n, capacity))
    sb.pseudocode_line = 7
    sb.message = f"Best value is {dp[n][capacity]} using item(s) {chosen or 'none'}."
    yield sb.build(is_final=True, result={"value": dp[n][capacity], "items": chosen})
