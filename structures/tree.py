"""
tree.py — Binary Search Tree Arena
===================================
Nodes live in a flat dict keyed by a stable integer id; children are ids,
never object references.  That makes two things trivial:

  • structural copy  – `copy()` / `to_dict()` never alias a live node
  • rotations        – re-pointing ids, no parent back-links to fix up

The same class backs plain BST and AVL producers (`height` is only
maintained by the AVL code path and by `recompute_height`).
"""

import copy as _copy
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional


@dataclass
class TreeNode:
    id:     int
    value:  int
    left:   Optional[int] = None
    right:  Optional[int] = None
    height: int           = 1


class BinarySearchTree:
    """
    Attributes:
        nodes : {node_id: TreeNode}
        root  : id of the root node, or None for an empty tree
    """

    def __init__(self):
        self.nodes:    Dict[int, TreeNode] = {}
        self.root:     Optional[int]       = None
        self._next_id: int                 = 0

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    def from_values(cls, values: Iterable[int], balanced: bool = False) -> "BinarySearchTree":
        """Silent bulk insert (no trace). `balanced` applies AVL rebalancing."""
        tree = cls()
        for v in values:
            if balanced:
                tree.insert_balanced(v)
            else:
                tree.insert(v)
        return tree

    def new_node(self, value: int) -> int:
        nid = self._next_id
        self._next_id += 1
        self.nodes[nid] = TreeNode(id=nid, value=value)
        return nid

    def copy(self) -> "BinarySearchTree":
        return _copy.deepcopy(self)

    # ------------------------------------------------------------------
    # Silent operations (used to pre-build inputs)
    # ------------------------------------------------------------------
    def insert(self, value: int) -> int:
        """Plain BST insert; duplicates go to the right subtree."""
        nid = self.new_node(value)
        if self.root is None:
            self.root = nid
            return nid
        cur = self.root
        while True:
            node = self.nodes[cur]
            if value < node.value:
                if node.left is None:
                    node.left = nid
                    return nid
                cur = node.left
            else:
                if node.right is None:
                    node.right = nid
                    return nid
                cur = node.right

    def insert_balanced(self, value: int) -> Optional[int]:
        """AVL insert; duplicates are ignored (returns None)."""
        if self.find(value) is not None:
            return None
        path: List[int] = []
        cur = self.root
        while cur is not None:
            path.append(cur)
            node = self.nodes[cur]
            cur = node.left if value < node.value else node.right
        nid = self.new_node(value)
        if not path:
            self.root = nid
            return nid
        parent = self.nodes[path[-1]]
        if value < parent.value:
            parent.left = nid
        else:
            parent.right = nid
        for i in range(len(path) - 1, -1, -1):
            sub = path[i]
            self.recompute_height(sub)
            new_sub = self.rebalance(sub)
            if new_sub != sub:
                self.replace_child(path[i - 1] if i > 0 else None, sub, new_sub)
        return nid

    def find(self, value: int) -> Optional[int]:
        cur = self.root
        while cur is not None:
            node = self.nodes[cur]
            if value == node.value:
                return cur
            cur = node.left if value < node.value else node.right
        return None

    # ------------------------------------------------------------------
    # AVL helpers
    # ------------------------------------------------------------------
    def height(self, nid: Optional[int]) -> int:
        return self.nodes[nid].height if nid is not None else 0

    def recompute_height(self, nid: int) -> None:
        node = self.nodes[nid]
        node.height = 1 + max(self.height(node.left), self.height(node.right))

    def balance(self, nid: Optional[int]) -> int:
        if nid is None:
            return 0
        node = self.nodes[nid]
        return self.height(node.left) - self.height(node.right)

    def rotate_right(self, nid: int) -> int:
        """Right rotation around `nid`; returns the new subtree root id."""
        y = self.nodes[nid]
        x = self.nodes[y.left]
        y.left = x.right
        x.right = y.id
        self.recompute_height(y.id)
        self.recompute_height(x.id)
        return x.id

    def rotate_left(self, nid: int) -> int:
        x = self.nodes[nid]
        y = self.nodes[x.right]
        x.right = y.left
        y.left = x.id
        self.recompute_height(x.id)
        self.recompute_height(y.id)
        return y.id

    def rebalance(self, nid: int) -> int:
        """Apply whichever rotation(s) `nid` needs; returns the subtree root."""
        bal = self.balance(nid)
        node = self.nodes[nid]
        if bal > 1:
            if self.balance(node.left) < 0:
                node.left = self.rotate_left(node.left)
            return self.rotate_right(nid)
        if bal < -1:
            if self.balance(node.right) > 0:
                node.right = self.rotate_right(node.right)
            return self.rotate_left(nid)
        return nid

    def replace_child(self, parent: Optional[int], old: int, new: Optional[int]) -> None:
        """Re-point whichever link (or the root) referenced `old`."""
        if parent is None:
            self.root = new
            return
        p = self.nodes[parent]
        if p.left == old:
            p.left = new
        else:
            p.right = new

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def inorder(self) -> List[int]:
        out: List[int] = []
        stack: List[int] = []
        cur = self.root
        while stack or cur is not None:
            while cur is not None:
                stack.append(cur)
                cur = self.nodes[cur].left
            cur = stack.pop()
            out.append(self.nodes[cur].value)
            cur = self.nodes[cur].right
        return out

    def depth(self) -> int:
        def _d(nid: Optional[int]) -> int:
            if nid is None:
                return 0
            n = self.nodes[nid]
            return 1 + max(_d(n.left), _d(n.right))
        return _d(self.root)

    def is_balanced(self) -> bool:
        def _check(nid: Optional[int]) -> int:
            if nid is None:
                return 0
            n = self.nodes[nid]
            lh, rh = _check(n.left), _check(n.right)
            if lh < 0 or rh < 0 or abs(lh - rh) > 1:
                return -1
            return 1 + max(lh, rh)
        return _check(self.root) >= 0

    def __len__(self) -> int:
        return len(self.nodes)

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {
            "root": self.root,
            "nodes": {
                nid: {"value": n.value, "left": n.left, "right": n.right, "height": n.height}
                for nid, n in self.nodes.items()
            },
        }

    @classmethod
    def from_dict(cls, data: dict) -> "BinarySearchTree":
        tree = cls()
        for key, nd in data.get("nodes", {}).items():
            nid = int(key)
            tree.nodes[nid] = TreeNode(
                id=nid, value=nd["value"], left=nd.get("left"), right=nd.get("right"),
                height=nd.get("height", 1),
            )
        tree.root = data.get("root")
        tree._next_id = max(tree.nodes, default=-1) + 1
        return tree
