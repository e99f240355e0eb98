"""
count_set_bits.py — Count Set Bits (Brian Kernighan)
=====================================================
`n & (n - 1)` clears the lowest set bit, so the loop runs once per set
bit instead of once per bit position.

The structure is a bit grid, most significant bit first:
    row 0 – n
    row 1 – n - 1           (only while clearing)
    row 2 – n & (n - 1)     (only while clearing)
The bit being cleared is SWAPPING in row 0 and ACTIVE in row 2.

Overlay exposes:
  • "n"     – current value
  • "count" – set bits counted so far
"""

from typing import Iterator, List

from algorithms.snapshot import Snapshot, SnapshotBuilder, StructureKind


PSEUDOCODE: List[str] = [
    "def count_set_bits(n):",               # 0
    "    count ← 0",                        # 1
    "    while n > 0:",                     # 2
    "        n ← n & (n - 1)",              # 3
    "        count ← count + 1",            # 4
    "    return count",                     # 5
]


def count_set_bits(n: int) -> Iterator[Snapshot]:
    width = max(8, n.bit_length())
    sb = SnapshotBuilder(StructureKind.GRID, [_bits(n, width)])
    count = 0

    sb.overlay["n"] = n
    sb.overlay["count"] = count
    sb.pseudocode_line = 1
    sb.message = f"Count the set bits of {n} ({n:b} in binary)."
    yield sb.build()

    current = n
    while current > 0:
        col = width - 1 - ((current & -current).bit_length() - 1)
        cleared = current & (current - 1)

        sb.reset()
        sb.structure = [_bits(current, width)]
        sb.visiting(*[(0, j) for j, bit in enumerate(sb.structure[0]) if bit])
        sb.overlay["n"] = current
        sb.overlay["count"] = count
        sb.pseudocode_line = 2
        sb.message = f"n = {current} > 0, so at least one bit is still set."
        yield sb.build()

        sb.reset()
        sb.structure = [_bits(current, width), _bits(current - 1, width), _bits(cleared, width)]
        sb.swap((0, col))
        sb.compare((1, col))
        sb.activate((2, col))
        sb.overlay["n"] = cleared
        sb.overlay["count"] = count + 1
        sb.pseudocode_line = 3
        sb.message = (
            f"{current} & {current - 1} = {cleared}: the lowest set bit "
            f"(position {width - 1 - col}) is cleared. Count = {count + 1}."
        )
        yield sb.build()

        current = cleared
        count += 1

    sb.reset()
    sb.structure = [_bits(n, width)]
    sb.highlight(*[(0, j) for j, bit in enumerate(sb.structure[0]) if bit])
    sb.overlay["n"] = 0
    sb.overlay["count"] = count
    sb.pseudocode_line = 5
    sb.message = f"n reached 0: {n} has {count} set bit(s)."
    yield sb.build(is_final=True, result={"count": count})


def _bits(value: int, width: int) -> List[int]:
    return [(value >> shift) & 1 for shift in range(width - 1, -1, -1)]
