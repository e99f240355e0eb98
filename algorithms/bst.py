"""
bst.py — Binary Search Tree Operations
=======================================
Insert, search, delete and in-order traversal, each a separate producer.

Every producer works on `tree.copy()`, so the caller's tree is never
touched and re-running an operation is deterministic.  Node ids are the
arena ids of structures.BinarySearchTree; highlights refer to them.

Results always carry "structure" (the tree after the operation) and
"inorder" so the UI can chain operations.
"""

from typing import Iterator, List, Optional

from structures import BinarySearchTree
from algorithms.snapshot import Snapshot, SnapshotBuilder, StructureKind


INSERT_PSEUDOCODE: List[str] = [
    "def insert(root, value):",                         # 0
    "    if root is None: return Node(value)",          # 1
    "    node ← root",                                  # 2
    "    loop:",                                        # 3
    "        if value < node.value: go left",           # 4
    "        else: go right",                           # 5
    "        if that child is empty: attach Node(value)",  # 6
]

SEARCH_PSEUDOCODE: List[str] = [
    "def search(root, value):",                         # 0
    "    node ← root",                                  # 1
    "    while node is not None:",                      # 2
    "        if value == node.value: return node",      # 3
    "        node ← left if value < node.value else right",  # 4
    "    return NOT FOUND",                             # 5
]

DELETE_PSEUDOCODE: List[str] = [
    "def delete(root, value):",                         # 0
    "    find node with value (track parent)",          # 1
    "    if node has < 2 children:",                    # 2
    "        replace node by its only child (or None)", # 3
    "    else:",                                        # 4
    "        succ ← leftmost node of node.right",       # 5
    "        node.value ← succ.value",                  # 6
    "        remove succ (it has no left child)",       # 7
]

INORDER_PSEUDOCODE: List[str] = [
    "def inorder(root):",                               # 0
    "    stack ← [], node ← root",                      # 1
    "    while stack or node:",                         # 2
    "        while node: stack.push(node); node ← node.left",  # 3
    "        node ← stack.pop(); visit(node)",          # 4
    "        node ← node.right",                        # 5
]


def _result(tree: BinarySearchTree, **extra) -> dict:
    result = {"structure": tree.to_dict(), "inorder": tree.inorder()}
    result.update(extra)
    return result


# ---------------------------------------------------------------------------
# Insert
# ---------------------------------------------------------------------------
def bst_insert(tree: BinarySearchTree, value: int) -> Iterator[Snapshot]:
    tree = tree.copy()
    sb = SnapshotBuilder(StructureKind.TREE, tree)

    sb.pseudocode_line = 0
    sb.message = f"Insert {value}."
    yield sb.build()

    if tree.root is None:
        nid = tree.new_node(value)
        tree.root = nid
        sb.reset()
        sb.highlight(nid)
        sb.pseudocode_line = 1
        sb.message = f"The tree was empty: {value} becomes the root."
        yield sb.build(is_final=True, result=_result(tree, inserted=True, node=nid))
        return

    cur = tree.root
    path: List[int] = []
    while True:
        node = tree.nodes[cur]
        go_left = value < node.value
        sb.reset()
        sb.visited(*path)
        sb.visiting(cur)
        sb.compare(cur)
        sb.pseudocode_line = 4 if go_left else 5
        sb.message = (
            f"{value} < {node.value}: go left." if go_left
            else f"{value} ≥ {node.value}: go right."
        )
        yield sb.build()
        path.append(cur)

        child = node.left if go_left else node.right
        if child is None:
            nid = tree.new_node(value)
            if go_left:
                node.left = nid
            else:
                node.right = nid
            break
        cur = child

    sb.reset()
    sb.visited(*path)
    sb.highlight(nid)
    sb.pseudocode_line = 6
    sb.message = f"Empty slot found: attach {value} as the {'left' if go_left else 'right'} child of {node.value}."
    yield sb.build(is_final=True, result=_result(tree, inserted=True, node=nid))


# ---------------------------------------------------------------------------
# Search
# ---------------------------------------------------------------------------
def bst_search(tree: BinarySearchTree, value: int) -> Iterator[Snapshot]:
    tree = tree.copy()
    sb = SnapshotBuilder(StructureKind.TREE, tree)

    sb.pseudocode_line = 1
    sb.message = f"Search for {value} starting at the root."
    yield sb.build()

    cur = tree.root
    path: List[int] = []
    while cur is not None:
        node = tree.nodes[cur]
        sb.reset()
        sb.visited(*path)
        sb.visiting(cur)
        sb.compare(cur)
        if value == node.value:
            sb.pseudocode_line = 3
            sb.message = f"{value} == {node.value}."
        else:
            sb.pseudocode_line = 4
            sb.message = f"{value} {'<' if value < node.value else '>'} {node.value}: go {'left' if value < node.value else 'right'}."
        yield sb.build()

        if value == node.value:
            sb.reset()
            sb.visited(*path)
            sb.highlight(cur)
            sb.pseudocode_line = 3
            sb.message = f"Found {value}."
            yield sb.build(is_final=True, result=_result(tree, found=True, node=cur))
            return
        path.append(cur)
        cur = node.left if value < node.value else node.right

    sb.reset()
    sb.visited(*path)
    sb.pseudocode_line = 5
    sb.message = f"Reached an empty subtree: {value} is not in the tree."
    yield sb.build(is_final=True, result=_result(tree, found=False, node=None))


# ---------------------------------------------------------------------------
# Delete
# ---------------------------------------------------------------------------
def bst_delete(tree: BinarySearchTree, value: int) -> Iterator[Snapshot]:
    tree = tree.copy()
    sb = SnapshotBuilder(StructureKind.TREE, tree)

    sb.pseudocode_line = 1
    sb.message = f"Delete {value}: first find it."
    yield sb.build()

    parent: Optional[int] = None
    cur = tree.root
    path: List[int] = []
    while cur is not None and tree.nodes[cur].value != value:
        node = tree.nodes[cur]
        sb.reset()
        sb.visited(*path)
        sb.visiting(cur)
        sb.compare(cur)
        sb.pseudocode_line = 1
        sb.message = f"{value} {'<' if value < node.value else '>'} {node.value}: go {'left' if value < node.value else 'right'}."
        yield sb.build()
        path.append(cur)
        parent, cur = cur, (node.left if value < node.value else node.right)

    if cur is None:
        sb.reset()
        sb.visited(*path)
        sb.pseudocode_line = 1
        sb.message = f"{value} is not in the tree. Nothing to delete."
        yield sb.build(is_final=True, result=_result(tree, deleted=False))
        return

    target = tree.nodes[cur]
    sb.reset()
    sb.visited(*path)
    sb.highlight(cur)
    sb.pseudocode_line = 2
    sb.message = f"Found {value}."
    yield sb.build()

    if target.left is None or target.right is None:
        child = target.left if target.left is not None else target.right
        tree.replace_child(parent, cur, child)
        del tree.nodes[cur]
        sb.reset()
        if child is not None:
            sb.highlight(child)
        sb.pseudocode_line = 3
        sb.message = (
            f"{value} had at most one child: splice it out." if child is not None
            else f"{value} was a leaf: remove it."
        )
        yield sb.build(is_final=True, result=_result(tree, deleted=True))
        return

    # two children: in-order successor
    succ_parent = cur
    succ = target.right
    while True:
        sb.reset()
        sb.highlight(cur)
        sb.visiting(succ)
        sb.pseudocode_line = 5
        sb.message = f"Looking for the successor: at {tree.nodes[succ].value}."
        yield sb.build()
        if tree.nodes[succ].left is None:
            break
        succ_parent, succ = succ, tree.nodes[succ].left

    target.value = tree.nodes[succ].value
    sb.reset()
    sb.swap(cur, succ)
    sb.pseudocode_line = 6
    sb.message = f"Copy successor value {target.value} into the node being deleted."
    yield sb.build()

    tree.replace_child(succ_parent, succ, tree.nodes[succ].right)
    del tree.nodes[succ]
    sb.reset()
    sb.highlight(cur)
    sb.pseudocode_line = 7
    sb.message = f"Remove the old successor node. {value} is gone."
    yield sb.build(is_final=True, result=_result(tree, deleted=True))


# ---------------------------------------------------------------------------
# In-order traversal
# ---------------------------------------------------------------------------
def bst_inorder(tree: BinarySearchTree) -> Iterator[Snapshot]:
    tree = tree.copy()
    sb = SnapshotBuilder(StructureKind.TREE, tree)
    order: List[int] = []
    visited: List[int] = []

    sb.pseudocode_line = 1
    sb.message = "In-order traversal: left subtree, node, right subtree."
    yield sb.build()

    stack: List[int] = []
    cur = tree.root
    while stack or cur is not None:
        while cur is not None:
            stack.append(cur)
            cur = tree.nodes[cur].left
        cur = stack.pop()
        order.append(tree.nodes[cur].value)

        sb.reset()
        sb.visited(*visited)
        sb.visiting(cur)
        sb.overlay["stack"] = [tree.nodes[s].value for s in stack]
        sb.overlay["output"] = list(order)
        sb.pseudocode_line = 4
        sb.message = f"Visit {tree.nodes[cur].value}."
        yield sb.build()

        visited.append(cur)
        cur = tree.nodes[cur].right

    sb.reset()
    sb.visited(*visited)
    sb.overlay["output"] = list(order)
    sb.pseudocode_line = 2
    sb.message = f"In-order: {order}." if order else "The tree is empty."
    yield sb.build(is_final=True, result=_result(tree, order=order))
