"""
linked_list.py — Singly Linked List Arena
==========================================
Nodes addressed by integer id; `next` is an id or None.
"""

import copy as _copy
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional


@dataclass
class ListNode:
    id:    int
    value: int
    next:  Optional[int] = None


class LinkedList:
    def __init__(self):
        self.nodes: Dict[int, ListNode] = {}
        self.head:  Optional[int]       = None

    @classmethod
    def from_values(cls, values: Iterable[int]) -> "LinkedList":
        ll = cls()
        prev: Optional[int] = None
        for i, v in enumerate(values):
            ll.nodes[i] = ListNode(id=i, value=v)
            if prev is None:
                ll.head = i
            else:
                ll.nodes[prev].next = i
            prev = i
        return ll

    def copy(self) -> "LinkedList":
        return _copy.deepcopy(self)

    def values(self) -> List[int]:
        out = []
        cur = self.head
        seen = set()
        while cur is not None and cur not in seen:
            seen.add(cur)
            out.append(self.nodes[cur].value)
            cur = self.nodes[cur].next
        return out

    def __len__(self) -> int:
        return len(self.nodes)

    def to_dict(self) -> dict:
        return {
            "head": self.head,
            "nodes": {nid: {"value": n.value, "next": n.next} for nid, n in self.nodes.items()},
        }
