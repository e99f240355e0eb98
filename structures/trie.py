"""
trie.py — Prefix Tree Arena
============================
Node 0 is always the root (char "").  Children map a character to a child
id; each node keeps its parent id so deletion can prune upward without a
recursive walk.
"""

import copy as _copy
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

ROOT = 0


@dataclass
class TrieNode:
    id:       int
    char:     str
    parent:   Optional[int]  = None
    children: Dict[str, int] = field(default_factory=dict)
    is_end:   bool           = False


class Trie:
    def __init__(self):
        self.nodes:    Dict[int, TrieNode] = {ROOT: TrieNode(id=ROOT, char="")}
        self._next_id: int                 = ROOT + 1

    @classmethod
    def from_words(cls, words: Iterable[str]) -> "Trie":
        trie = cls()
        for w in words:
            trie.insert(w)
        return trie

    def copy(self) -> "Trie":
        return _copy.deepcopy(self)

    # ------------------------------------------------------------------
    # Node-level primitives (used by the step producers)
    # ------------------------------------------------------------------
    def child(self, nid: int, ch: str) -> Optional[int]:
        return self.nodes[nid].children.get(ch)

    def add_child(self, nid: int, ch: str) -> int:
        cid = self._next_id
        self._next_id += 1
        self.nodes[cid] = TrieNode(id=cid, char=ch, parent=nid)
        self.nodes[nid].children[ch] = cid
        return cid

    def remove_node(self, nid: int) -> None:
        """Detach a leaf from its parent and drop it from the arena."""
        node = self.nodes[nid]
        if node.children:
            raise ValueError(f"trie node {nid} still has children")
        if node.parent is not None:
            del self.nodes[node.parent].children[node.char]
        del self.nodes[nid]

    def walk(self, text: str) -> Optional[int]:
        """Id of the node spelling `text`, or None."""
        cur = ROOT
        for ch in text:
            nxt = self.child(cur, ch)
            if nxt is None:
                return None
            cur = nxt
        return cur

    def path(self, nid: int) -> List[int]:
        """Ids from the root down to `nid` inclusive."""
        out = []
        cur: Optional[int] = nid
        while cur is not None:
            out.append(cur)
            cur = self.nodes[cur].parent
        out.reverse()
        return out

    # ------------------------------------------------------------------
    # Silent whole-word operations
    # ------------------------------------------------------------------
    def insert(self, word: str) -> None:
        cur = ROOT
        for ch in word:
            nxt = self.child(cur, ch)
            cur = nxt if nxt is not None else self.add_child(cur, ch)
        self.nodes[cur].is_end = True

    def contains(self, word: str) -> bool:
        nid = self.walk(word)
        return nid is not None and self.nodes[nid].is_end

    def starts_with(self, prefix: str) -> bool:
        return self.walk(prefix) is not None

    def words(self) -> List[str]:
        out: List[str] = []

        def _collect(nid: int, prefix: str) -> None:
            node = self.nodes[nid]
            if node.is_end:
                out.append(prefix)
            for ch in sorted(node.children):
                _collect(node.children[ch], prefix + ch)

        _collect(ROOT, "")
        return out

    def __len__(self) -> int:
        return len(self.nodes)

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {
            "root": ROOT,
            "nodes": {
                nid: {
                    "char": n.char,
                    "parent": n.parent,
                    "children": dict(n.children),
                    "is_end": n.is_end,
                }
                for nid, n in self.nodes.items()
            },
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Trie":
        trie = cls()
        trie.nodes = {}
        for key, nd in data.get("nodes", {}).items():
            nid = int(key)
            trie.nodes[nid] = TrieNode(
                id=nid,
                char=nd["char"],
                parent=nd.get("parent"),
                children={ch: int(c) for ch, c in nd.get("children", {}).items()},
                is_end=nd.get("is_end", False),
            )
        trie._next_id = max(trie.nodes, default=ROOT) + 1
        return trie
