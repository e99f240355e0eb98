"""
lcs.py — Longest Common Subsequence
====================================
Fills an (m + 1) × (n + 1) grid.  On a character match the diagonal
source is COMPARING; otherwise the cells above and to the left are.
"""

from typing import Iterator, List

from algorithms.snapshot import Snapshot, SnapshotBuilder, StructureKind


PSEUDOCODE: List[str] = [
    "def lcs(a, b):",                                               # 0
    "    dp ← (m + 1) × (n + 1) grid of 0",                          # 1
    "    for i in 1 .. m:",                                         # 2
    "        for j in 1 .. n:",                                     # 3
    "            if a[i] == b[j]: dp[i][j] ← dp[i - 1][j - 1] + 1", # 4
    "            else: dp[i][j] ← max(dp[i - 1][j], dp[i][j - 1])", # 5
    "    return dp[m][n]",                                          # 6
]


def lcs(text_a: str, text_b: str) -> Iterator[Snapshot]:
    m, n = len(text_a), len(text_b)
    dp: List[List[int]] = [[0] * (n + 1) for _ in range(m + 1)]
    sb = SnapshotBuilder(StructureKind.GRID, dp)

    def _labels() -> None:
        sb.overlay["rows"] = list(text_a)
        sb.overlay["cols"] = list(text_b)

    _labels()
    sb.pseudocode_line = 1
    sb.message = f"Compare '{text_a}' with '{text_b}'. Row 0 and column 0 are all 0."
    yield sb.build()

    for i in range(1, m + 1):
        for j in range(1, n + 1):
            sb.reset()
            _labels()
            sb.activate((i, j))
            sb.point("i", i - 1)
            sb.point("j", j - 1)
            if text_a[i - 1] == text_b[j - 1]:
                dp[i][j] = dp[i - 1][j - 1] + 1
                sb.compare((i - 1, j - 1))
                sb.pseudocode_line = 4
                sb.message = f"'{text_a[i - 1]}' matches: diagonal {dp[i - 1][j - 1]} + 1 = {dp[i][j]}."
            else:
                dp[i][j] = max(dp[i - 1][j], dp[i][j - 1])
                sb.compare((i - 1, j), (i, j - 1))
                sb.pseudocode_line = 5
                sb.message = (
                    f"'{text_a[i - 1]}' ≠ '{text_b[j - 1]}': "
                    f"max(up {dp[i - 1][j]}, left {dp[i][j - 1]}) = {dp[i][j]}."
                )
            yield sb.build()

    # traceback
    chars: List[str] = []
    path = []
    i, j = m, n
    while i > 0 and j > 0:
        if text_a[i - 1] == text_b[j - 1]:
            path.append((i, j))
            chars.append(text_a[i - 1])
            i -= 1
            j -= 1
        elif dp[i - 1][j] >= dp[i][j - 1]:
            i -= 1
        else:
            j -= 1
    subsequence = "".join(reversed(chars))

    sb.reset()
    _labels()
    sb.highlight(*path)
    sb.pseudocode_line = 6
    sb.message = f"LCS length is {dp[m][n]}" + (f": '{subsequence}'." if subsequence else ".")
    yield sb.build(is_final=True, result={"length": dp[m][n], "subsequence": subsequence})
