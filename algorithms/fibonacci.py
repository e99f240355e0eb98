"""
fibonacci.py — Fibonacci (bottom-up tabulation)
================================================
The table is the structure; unfilled cells are None.  Each write marks
the two source cells COMPARING and the written cell ACTIVE.
"""

from typing import Iterator, List, Optional

from algorithms.snapshot import Snapshot, SnapshotBuilder, StructureKind


PSEUDOCODE: List[str] = [
    "def fib(n):",                                  # 0
    "    dp[0] ← 0, dp[1] ← 1",                     # 1
    "    for i in 2 .. n:",                         # 2
    "        dp[i] ← dp[i - 1] + dp[i - 2]",        # 3
    "    return dp[n]",                             # 4
]


def fibonacci(n: int) -> Iterator[Snapshot]:
    table: List[Optional[int]] = [None] * (n + 1)
    sb = SnapshotBuilder(StructureKind.ARRAY, table)

    table[0] = 0
    if n >= 1:
        table[1] = 1
    sb.activate(*range(min(n, 1) + 1))
    sb.pseudocode_line = 1
    sb.message = "Base cases: dp[0] = 0" + (", dp[1] = 1." if n >= 1 else ".")
    yield sb.build()

    for i in range(2, n + 1):
        table[i] = table[i - 1] + table[i - 2]
        sb.reset()
        sb.compare(i - 1, i - 2)
        sb.activate(i)
        sb.point("i", i)
        sb.pseudocode_line = 3
        sb.message = f"dp[{i}] = dp[{i - 1}] + dp[{i - 2}] = {table[i - 1]} + {table[i - 2]} = {table[i]}."
        yield sb.build()

    sb.reset()
    sb.highlight(n)
    sb.pseudocode_line = 4
    sb.message = f"fib({n}) = {table[n]}."
    yield sb.build(is_final=True, result={"value": table[n]})
