"""
trie_ops.py — Trie Operations
==============================
insert / search / starts_with / delete, each a separate producer.

Every producer works on `trie.copy()`; results carry the resulting
"structure" (Trie.to_dict()) so the next operation can start from it
via Trie.from_dict().

Overlay exposes:
  • "word"     – the word being processed
  • "position" – how many characters have been consumed
"""

from typing import Iterator, List

from structures import Trie
from structures.trie import ROOT
from algorithms.snapshot import Snapshot, SnapshotBuilder, StructureKind


INSERT_PSEUDOCODE: List[str] = [
    "def insert(word):",                                # 0
    "    node ← root",                                  # 1
    "    for ch in word:",                              # 2
    "        if ch not in node.children:",              # 3
    "            node.children[ch] ← new Node()",       # 4
    "        node ← node.children[ch]",                 # 5
    "    node.is_end ← True",                           # 6
]

SEARCH_PSEUDOCODE: List[str] = [
    "def search(word):",                                # 0
    "    node ← root",                                  # 1
    "    for ch in word:",                              # 2
    "        if ch not in node.children: return False", # 3
    "        node ← node.children[ch]",                 # 4
    "    return node.is_end",                           # 5
]

PREFIX_PSEUDOCODE: List[str] = [
    "def starts_with(prefix):",                         # 0
    "    node ← root",                                  # 1
    "    for ch in prefix:",                            # 2
    "        if ch not in node.children: return False", # 3
    "        node ← node.children[ch]",                 # 4
    "    return True",                                  # 5
]

DELETE_PSEUDOCODE: List[str] = [
    "def delete(word):",                                # 0
    "    node ← walk(word)",                            # 1
    "    if node is None or not node.is_end: return False",  # 2
    "    node.is_end ← False",                          # 3
    "    while node ≠ root and node has no children",   # 4
    "          and not node.is_end:",                   # 5
    "        remove node from its parent",              # 6
    "        node ← parent",                            # 7
    "    return True",                                  # 8
]


def _start(sb: SnapshotBuilder, word: str, line: int, message: str) -> Snapshot:
    sb.visiting(ROOT)
    sb.overlay["word"] = word
    sb.overlay["position"] = 0
    sb.pseudocode_line = line
    sb.message = message
    return sb.build()


def _walk(trie: Trie, sb: SnapshotBuilder, word: str, miss_line: int, step_line: int):
    """
    Shared descent for search / starts_with / delete.
    Yields snapshots; returns the node id reached, or None on a missing edge.
    """
    cur = ROOT
    for i, ch in enumerate(word):
        nxt = trie.child(cur, ch)
        sb.reset()
        sb.overlay["word"] = word
        sb.overlay["position"] = i
        sb.visited(*trie.path(cur))
        if nxt is None:
            sb.visiting(cur)
            sb.pseudocode_line = miss_line
            sb.message = f"No child '{ch}' under this node: '{word[:i + 1]}' is not in the trie."
            yield sb.build()
            return None
        sb.visiting(nxt)
        sb.overlay["position"] = i + 1
        sb.pseudocode_line = step_line
        sb.message = f"Follow '{ch}'."
        yield sb.build()
        cur = nxt
    return cur


# ---------------------------------------------------------------------------
# Insert
# ---------------------------------------------------------------------------
def trie_insert(trie: Trie, word: str) -> Iterator[Snapshot]:
    trie = trie.copy()
    sb = SnapshotBuilder(StructureKind.TRIE, trie)
    yield _start(sb, word, 1, f"Insert '{word}' starting at the root.")

    cur = ROOT
    for i, ch in enumerate(word):
        nxt = trie.child(cur, ch)
        sb.reset()
        sb.overlay["word"] = word
        sb.overlay["position"] = i + 1
        sb.visited(*trie.path(cur))
        if nxt is None:
            nxt = trie.add_child(cur, ch)
            sb.highlight(nxt)
            sb.pseudocode_line = 4
            sb.message = f"No child '{ch}': create it."
        else:
            sb.pseudocode_line = 5
            sb.message = f"Child '{ch}' already exists: follow it."
        sb.visiting(nxt)
        yield sb.build()
        cur = nxt

    inserted = bool(word) and not trie.nodes[cur].is_end
    if word:
        trie.nodes[cur].is_end = True

    sb.reset()
    sb.overlay["word"] = word
    sb.overlay["position"] = len(word)
    sb.visited(*trie.path(cur))
    sb.activate(cur)
    sb.pseudocode_line = 6
    if not word:
        sb.message = "The empty word is not stored."
    elif inserted:
        sb.message = f"Mark the end of '{word}'."
    else:
        sb.message = f"'{word}' was already in the trie."
    yield sb.build(is_final=True, result={"inserted": inserted, "word": word, "structure": trie.to_dict()})


# ---------------------------------------------------------------------------
# Search / prefix
# ---------------------------------------------------------------------------
def trie_search(trie: Trie, word: str) -> Iterator[Snapshot]:
    trie = trie.copy()
    sb = SnapshotBuilder(StructureKind.TRIE, trie)
    yield _start(sb, word, 1, f"Search for the whole word '{word}'.")

    node = yield from _walk(trie, sb, word, 3, 4)

    found = node is not None and trie.nodes[node].is_end
    sb.reset()
    sb.overlay["word"] = word
    sb.overlay["position"] = len(word)
    sb.pseudocode_line = 5 if node is not None else 3
    if node is None:
        sb.message = f"'{word}' is not in the trie."
    else:
        sb.visited(*trie.path(node))
        if found:
            sb.highlight(node)
            sb.message = f"End-of-word flag is set: '{word}' is in the trie."
        else:
            sb.activate(node)
            sb.message = f"'{word}' is only a prefix here: the end-of-word flag is not set."
    yield sb.build(is_final=True, result={"found": found, "word": word, "structure": trie.to_dict()})


def trie_starts_with(trie: Trie, prefix: str) -> Iterator[Snapshot]:
    trie = trie.copy()
    sb = SnapshotBuilder(StructureKind.TRIE, trie)
    yield _start(sb, prefix, 1, f"Check whether any word starts with '{prefix}'.")

    node = yield from _walk(trie, sb, prefix, 3, 4)

    found = node is not None
    sb.reset()
    sb.overlay["word"] = prefix
    sb.overlay["position"] = len(prefix)
    sb.pseudocode_line = 5 if found else 3
    if found:
        sb.visited(*trie.path(node))
        sb.highlight(node)
        sb.message = f"Every character matched: some word starts with '{prefix}'."
    else:
        sb.message = f"No word starts with '{prefix}'."
    yield sb.build(is_final=True, result={"found": found, "prefix": prefix, "structure": trie.to_dict()})


# ---------------------------------------------------------------------------
# Delete (with pruning)
# ---------------------------------------------------------------------------
def trie_delete(trie: Trie, word: str) -> Iterator[Snapshot]:
    trie = trie.copy()
    sb = SnapshotBuilder(StructureKind.TRIE, trie)
    yield _start(sb, word, 1, f"Delete '{word}': first walk down to it.")

    node = yield from _walk(trie, sb, word, 2, 1)

    if node is None or not word or not trie.nodes[node].is_end:
        sb.reset()
        sb.overlay["word"] = word
        sb.pseudocode_line = 2
        sb.message = f"'{word}' is not stored in the trie. Nothing to delete."
        yield sb.build(is_final=True, result={"deleted": False, "word": word, "structure": trie.to_dict()})
        return

    trie.nodes[node].is_end = False
    sb.reset()
    sb.overlay["word"] = word
    sb.activate(node)
    sb.pseudocode_line = 3
    sb.message = f"Clear the end-of-word flag for '{word}'."
    yield sb.build()

    cur = node
    while cur != ROOT and not trie.nodes[cur].children and not trie.nodes[cur].is_end:
        parent = trie.nodes[cur].parent
        ch = trie.nodes[cur].char
        trie.remove_node(cur)
        sb.reset()
        sb.overlay["word"] = word
        sb.visiting(parent)
        sb.pseudocode_line = 6
        sb.message = f"Node '{ch}' has no children and ends no word: prune it."
        yield sb.build()
        cur = parent

    sb.reset()
    sb.overlay["word"] = word
    sb.pseudocode_line = 8
    sb.message = f"'{word}' deleted; {len(trie) - 1} node(s) remain below the root."
    yield sb.build(is_final=True, result={"deleted": True, "word": word, "structure": trie.to_dict()})
