"""
structures/
-----------
Working data the step producers mutate.  Public API:

    from structures import Graph, BinarySearchTree, Trie, LinkedList

Every structure offers `copy()` and `to_dict()`; snapshots only ever
carry the dict form.
"""

from structures.graph       import Graph, GraphFormatError
from structures.tree        import BinarySearchTree, TreeNode
from structures.trie        import Trie, TrieNode
from structures.linked_list import LinkedList, ListNode

__all__ = [
    "Graph",            "GraphFormatError",
    "BinarySearchTree", "TreeNode",
    "Trie",             "TrieNode",
    "LinkedList",       "ListNode",
]
