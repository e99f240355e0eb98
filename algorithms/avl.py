"""
avl.py — AVL Tree Insert
=========================
BST insert followed by a bottom-up retrace.  At each ancestor the height
and balance factor are recomputed (one snapshot), and every single
rotation is its own snapshot, so LR / RL cases show two frames.
Duplicates are ignored.
"""

from typing import Iterator, List

from structures import BinarySearchTree
from algorithms.snapshot import Snapshot, SnapshotBuilder, StructureKind


PSEUDOCODE: List[str] = [
    "def avl_insert(root, value):",                         # 0
    "    BST-insert value, remember the path",              # 1
    "    for node in reversed(path):",                      # 2
    "        update height, b ← balance(node)",             # 3
    "        if b > 1 and balance(node.left) < 0:",         # 4
    "            node.left ← rotate_left(node.left)",       # 5
    "        if b < -1 and balance(node.right) > 0:",       # 6
    "            node.right ← rotate_right(node.right)",    # 7
    "        if b > 1: rotate_right(node)",                 # 8
    "        if b < -1: rotate_left(node)",                 # 9
]


def avl_insert(tree: BinarySearchTree, value: int) -> Iterator[Snapshot]:
    tree = tree.copy()
    sb = SnapshotBuilder(StructureKind.TREE, tree)

    def _done(inserted: bool, node=None) -> dict:
        return {
            "inserted": inserted,
            "node": node,
            "structure": tree.to_dict(),
            "inorder": tree.inorder(),
            "balanced": tree.is_balanced(),
        }

    sb.pseudocode_line = 0
    sb.message = f"AVL insert {value}."
    yield sb.build()

    # --- descend ---
    path: List[int] = []
    cur = tree.root
    while cur is not None:
        node = tree.nodes[cur]
        sb.reset()
        sb.visited(*path)
        sb.visiting(cur)
        sb.compare(cur)
        sb.pseudocode_line = 1
        if value == node.value:
            sb.message = f"{value} is already in the tree: duplicates are ignored."
            yield sb.build(is_final=True, result=_done(False))
            return
        sb.message = f"{value} {'<' if value < node.value else '>'} {node.value}: go {'left' if value < node.value else 'right'}."
        yield sb.build()
        path.append(cur)
        cur = node.left if value < node.value else node.right

    nid = tree.new_node(value)
    if not path:
        tree.root = nid
    elif value < tree.nodes[path[-1]].value:
        tree.nodes[path[-1]].left = nid
    else:
        tree.nodes[path[-1]].right = nid

    sb.reset()
    sb.highlight(nid)
    sb.pseudocode_line = 1
    sb.message = f"Attach {value} as a new leaf."
    yield sb.build()

    # --- retrace ---
    for i in range(len(path) - 1, -1, -1):
        sub = path[i]
        parent = path[i - 1] if i > 0 else None
        tree.recompute_height(sub)
        bal = tree.balance(sub)

        sb.reset()
        sb.visiting(sub)
        sb.overlay["balance"] = bal
        sb.overlay["height"] = tree.height(sub)
        sb.pseudocode_line = 3
        sb.message = (
            f"Node {tree.nodes[sub].value}: height {tree.height(sub)}, balance {bal}"
            + (" → unbalanced, rotate." if abs(bal) > 1 else " → fine.")
        )
        yield sb.build()

        if abs(bal) <= 1:
            continue

        node = tree.nodes[sub]
        if bal > 1 and tree.balance(node.left) < 0:
            pivot = node.left
            node.left = tree.rotate_left(pivot)
            sb.reset()
            sb.swap(pivot, node.left)
            sb.pseudocode_line = 5
            sb.message = f"Left-Right case: rotate left around {tree.nodes[pivot].value} first."
            yield sb.build()
        elif bal < -1 and tree.balance(node.right) > 0:
            pivot = node.right
            node.right = tree.rotate_right(pivot)
            sb.reset()
            sb.swap(pivot, node.right)
            sb.pseudocode_line = 7
            sb.message = f"Right-Left case: rotate right around {tree.nodes[pivot].value} first."
            yield sb.build()

        if bal > 1:
            new_sub = tree.rotate_right(sub)
            line, direction = 8, "right"
        else:
            new_sub = tree.rotate_left(sub)
            line, direction = 9, "left"
        tree.replace_child(parent, sub, new_sub)

        sb.reset()
        sb.swap(sub, new_sub)
        sb.pseudocode_line = line
        sb.message = (
            f"Rotate {direction} around {tree.nodes[sub].value}: "
            f"{tree.nodes[new_sub].value} moves up."
        )
        yield sb.build()

    sb.reset()
    sb.highlight(nid)
    sb.pseudocode_line = 2
    sb.message = f"Inserted {value}; every node is balanced."
    yield sb.build(is_final=True, result=_done(True, nid))
