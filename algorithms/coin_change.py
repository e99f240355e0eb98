"""
coin_change.py — Coin Change (minimum coins)
=============================================
dp[a] is the fewest coins that sum to a, or None while unreachable.
One snapshot per (amount, coin) pair that fits.
"""

from typing import Iterator, List, Optional, Sequence

from algorithms.snapshot import Snapshot, SnapshotBuilder, StructureKind


PSEUDOCODE: List[str] = [
    "def coin_change(coins, amount):",                      # 0
    "    dp ← [0] + [∞] * amount",                          # 1
    "    for a in 1 .. amount:",                            # 2
    "        for coin in coins:",                           # 3
    "            if coin ≤ a:",                             # 4
    "                dp[a] ← min(dp[a], dp[a - coin] + 1)", # 5
    "    return dp[amount] if finite else -1",              # 6
]


def coin_change(coins: Sequence[int], amount: int) -> Iterator[Snapshot]:
    dp: List[Optional[int]] = [0] + [None] * amount
    sb = SnapshotBuilder(StructureKind.ARRAY, dp)

    sb.overlay["coins"] = list(coins)
    sb.activate(0)
    sb.pseudocode_line = 1
    sb.message = f"Make {amount} from coins {list(coins)}. dp[0] = 0; everything else unknown."
    yield sb.build()

    for a in range(1, amount + 1):
        for coin in coins:
            if coin > a:
                continue
            prev = dp[a - coin]
            sb.reset()
            sb.overlay["coins"] = list(coins)
            sb.overlay["coin"] = coin
            sb.compare(a - coin)
            sb.activate(a)
            sb.point("a", a)
            sb.pseudocode_line = 5
            if prev is None:
                sb.message = f"dp[{a} - {coin}] is unreachable: coin {coin} cannot finish {a}."
            elif dp[a] is None or prev + 1 < dp[a]:
                dp[a] = prev + 1
                sb.message = f"Use coin {coin}: dp[{a - coin}] + 1 = {dp[a]} is the best so far for {a}."
            else:
                sb.message = f"Coin {coin}: dp[{a - coin}] + 1 = {prev + 1} does not beat {dp[a]}."
            yield sb.build()

    value = dp[amount] if dp[amount] is not None else -1
    sb.reset()
    sb.overlay["coins"] = list(coins)
    sb.highlight(amount)
    sb.pseudocode_line = 6
    sb.message = (
        f"{amount} needs at least {value} coin(s)." if value >= 0
        else f"{amount} cannot be made from these coins."
    )
    yield sb.build(is_final=True, result={"value": value})
