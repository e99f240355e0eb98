"""
reverse_linked_list.py — In-place Linked List Reversal
=======================================================
Three cursors walk the list: "prev", "curr", "next".  Two frames per
node: one after saving `next`, one after re-pointing `curr.next`.
"""

from typing import Iterator, List

from structures import LinkedList
from algorithms.snapshot import Snapshot, SnapshotBuilder, StructureKind


PSEUDOCODE: List[str] = [
    "def reverse(head):",                   # 0
    "    prev ← None, curr ← head",         # 1
    "    while curr is not None:",          # 2
    "        next ← curr.next",             # 3
    "        curr.next ← prev",             # 4
    "        prev ← curr, curr ← next",     # 5
    "    return prev",                      # 6
]


def reverse_linked_list(linked_list: LinkedList) -> Iterator[Snapshot]:
    ll = linked_list.copy()
    sb = SnapshotBuilder(StructureKind.LINKED_LIST, ll)
    done: List[int] = []

    prev = None
    curr = ll.head
    sb.point("curr", curr)
    sb.pseudocode_line = 1
    sb.message = "prev ← None, curr ← head."
    yield sb.build()

    while curr is not None:
        nxt = ll.nodes[curr].next
        sb.reset()
        sb.visited(*done)
        sb.visiting(curr)
        sb.point("prev", prev)
        sb.point("curr", curr)
        sb.point("next", nxt)
        sb.pseudocode_line = 3
        sb.message = f"Remember next = {ll.nodes[nxt].value if nxt is not None else 'None'}."
        yield sb.build()

        ll.nodes[curr].next = prev
        sb.reset()
        sb.visited(*done)
        sb.swap(curr)
        sb.point("prev", prev)
        sb.point("curr", curr)
        sb.point("next", nxt)
        sb.pseudocode_line = 4
        sb.message = (
            f"Point {ll.nodes[curr].value}.next back at "
            f"{ll.nodes[prev].value if prev is not None else 'None'}."
        )
        yield sb.build()

        done.append(curr)
        prev, curr = curr, nxt

    ll.head = prev
    sb.reset()
    sb.visited(*done)
    sb.point("head", prev)
    sb.pseudocode_line = 6
    sb.message = f"curr is None: prev is the new head. List is now {ll.values()}."
    yield sb.build(is_final=True, result={"values": ll.values(), "structure": ll.to_dict()})
