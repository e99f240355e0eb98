"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for every algorithm the visualizer knows about.

    from algorithms import REGISTRY, get_algorithm

REGISTRY is a dict:
    {
        "binary_search": AlgoInfo(key, label, family, fn, pseudocode, fields, parse_inputs, …),
        …
    }

AlgoInfo is a lightweight dataclass.  The engine and UI both consume it
so adding a new algorithm is: write the generator, add one entry here
(plus a form parser in inputs.py if the input shape is new).
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterator, List, Mapping, Optional

import inputs
from inputs import FormField
from config import Settings
from algorithms.snapshot import Highlight, Snapshot, SnapshotBuilder, StructureKind

# ---------------------------------------------------------------------------
# Import all algorithm modules
# ---------------------------------------------------------------------------
from algorithms.linear_search        import linear_search,        PSEUDOCODE as _lin_pc
from algorithms.binary_search        import binary_search,        PSEUDOCODE as _bin_pc
from algorithms.jump_search          import jump_search,          PSEUDOCODE as _jump_pc
from algorithms.interpolation_search import interpolation_search, PSEUDOCODE as _interp_pc
from algorithms.exponential_search   import exponential_search,   PSEUDOCODE as _exp_pc
from algorithms.bubble_sort          import bubble_sort,          PSEUDOCODE as _bub_pc
from algorithms.selection_sort       import selection_sort,       PSEUDOCODE as _sel_pc
from algorithms.insertion_sort       import insertion_sort,       PSEUDOCODE as _ins_pc
from algorithms.merge_sort           import merge_sort,           PSEUDOCODE as _mrg_pc
from algorithms.quick_sort           import quick_sort,           PSEUDOCODE as _qck_pc
from algorithms.kadane               import kadane,               PSEUDOCODE as _kad_pc
from algorithms.bfs                  import bfs,                  PSEUDOCODE as _bfs_pc
from algorithms.dfs                  import dfs,                  PSEUDOCODE as _dfs_pc
from algorithms.dijkstra             import dijkstra,             PSEUDOCODE as _dij_pc
from algorithms.fibonacci            import fibonacci,            PSEUDOCODE as _fib_pc
from algorithms.knapsack             import knapsack,             PSEUDOCODE as _knap_pc
from algorithms.lcs                  import lcs,                  PSEUDOCODE as _lcs_pc
from algorithms.coin_change          import coin_change,          PSEUDOCODE as _coin_pc
from algorithms.bst import (
    bst_insert, bst_search, bst_delete, bst_inorder,
    INSERT_PSEUDOCODE as _bst_ins_pc, SEARCH_PSEUDOCODE as _bst_srch_pc,
    DELETE_PSEUDOCODE as _bst_del_pc, INORDER_PSEUDOCODE as _bst_in_pc,
)
from algorithms.avl                  import avl_insert,           PSEUDOCODE as _avl_pc
from algorithms.trie_ops import (
    trie_insert, trie_search, trie_starts_with, trie_delete,
    INSERT_PSEUDOCODE as _trie_ins_pc, SEARCH_PSEUDOCODE as _trie_srch_pc,
    PREFIX_PSEUDOCODE as _trie_pre_pc, DELETE_PSEUDOCODE as _trie_del_pc,
)
from algorithms.balanced_parentheses import balanced_parentheses, PSEUDOCODE as _paren_pc
from algorithms.reverse_linked_list  import reverse_linked_list,  PSEUDOCODE as _rev_pc
from algorithms.sliding_window_max   import sliding_window_max,   PSEUDOCODE as _win_pc
from algorithms.count_set_bits       import count_set_bits,       PSEUDOCODE as _bits_pc


Producer = Callable[..., Iterator[Snapshot]]
FormParser = Callable[[Mapping[str, Any], Optional[Settings]], Dict[str, Any]]


# ---------------------------------------------------------------------------
# AlgoInfo: metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:              str                       # registry key, e.g. "binary_search"
    label:            str                       # human label, e.g. "Binary Search"
    family:           str                       # page group, e.g. "searching"
    fn:               Producer                  # the generator function
    pseudocode:       List[str]                 # lines for the side-panel
    parse_inputs:     FormParser                # form → producer kwargs (raises InputError)
    fields:           List[FormField] = field(default_factory=list)
    tags:             List[str]       = field(default_factory=list)
    complexity_time:  str             = ""
    complexity_space: str             = ""
    description:      str             = ""
    random_array:     bool            = False   # offer a "random input" button?
    random_graph:     bool            = False   # random input is a generated graph

    @property
    def has_random_input(self) -> bool:
        return self.random_array or self.random_graph

    def sample_form(self) -> Dict[str, str]:
        """The default form values (what the page starts with)."""
        return {f.name: f.default for f in self.fields}

    def produce(self, form: Mapping[str, Any], settings: Optional[Settings] = None) -> Iterator[Snapshot]:
        """Validate `form` and return a fresh producer generator."""
        return self.fn(**self.parse_inputs(form, settings))


# ---------------------------------------------------------------------------
# Shared form layouts
# ---------------------------------------------------------------------------
_SORTED_ARRAY = "10, 20, 30, 40, 50, 60, 70, 80, 90, 100, 110, 120, 130, 140, 150"
_UNSORTED = "38, 27, 43, 3, 9, 82, 10"
_BFS_GRAPH = "A: B C\nB: A D E\nC: A F G\nD: B\nE: B F\nF: C E\nG: C"
_WEIGHTED_GRAPH = "A: B(4) C(1)\nB: A(4) C(2) D(5)\nC: A(1) B(2) D(8) E(10)\nD: B(5) C(8) E(2)\nE: C(10) D(2)"

_SEARCH_FIELDS = [FormField("array", "Sorted array", _SORTED_ARRAY), FormField("target", "Target", "80")]
_SORT_FIELDS = [FormField("array", "Array", _UNSORTED)]
_GRAPH_FIELDS = [
    FormField("graph", "Adjacency list", _BFS_GRAPH),
    FormField("start", "Start node", "A"),
    FormField("directed", "Directed", "", kind="checkbox"),
]
_WEIGHTED_FIELDS = [
    FormField("graph", "Adjacency list (weights in brackets)", _WEIGHTED_GRAPH),
    FormField("start", "Source node", "A"),
    FormField("directed", "Directed", "", kind="checkbox"),
]
_TREE_FIELDS = [FormField("values", "Existing values", "50, 30, 70, 20, 40, 60, 80"), FormField("value", "Value", "65")]
_TRIE_FIELDS = [FormField("words", "Existing words", "car, cart, care, dog"), FormField("word", "Word", "cat")]


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    # ----- searching -----
    "linear_search": AlgoInfo(
        key="linear_search", label="Linear Search", family="searching",
        fn=linear_search, pseudocode=_lin_pc, parse_inputs=inputs.search_form,
        fields=[FormField("array", "Array", _UNSORTED), FormField("target", "Target", "82")],
        tags=["unsorted"], random_array=True,
        complexity_time="O(n)", complexity_space="O(1)",
        description="Check every element in turn. Works on any array.",
    ),
    "binary_search": AlgoInfo(
        key="binary_search", label="Binary Search", family="searching",
        fn=binary_search, pseudocode=_bin_pc, parse_inputs=inputs.sorted_search_form,
        fields=_SEARCH_FIELDS, tags=["sorted", "divide-and-conquer"], random_array=True,
        complexity_time="O(log n)", complexity_space="O(1)",
        description="Halve the search window on every midpoint check.",
    ),
    "jump_search": AlgoInfo(
        key="jump_search", label="Jump Search", family="searching",
        fn=jump_search, pseudocode=_jump_pc, parse_inputs=inputs.sorted_search_form,
        fields=_SEARCH_FIELDS, tags=["sorted"], random_array=True,
        complexity_time="O(√n)", complexity_space="O(1)",
        description="Jump ahead in √n blocks, then scan one block.",
    ),
    "interpolation_search": AlgoInfo(
        key="interpolation_search", label="Interpolation Search", family="searching",
        fn=interpolation_search, pseudocode=_interp_pc, parse_inputs=inputs.sorted_search_form,
        fields=_SEARCH_FIELDS, tags=["sorted"], random_array=True,
        complexity_time="O(log log n) avg", complexity_space="O(1)",
        description="Guess the position from the values. Fast on uniform data.",
    ),
    "exponential_search": AlgoInfo(
        key="exponential_search", label="Exponential Search", family="searching",
        fn=exponential_search, pseudocode=_exp_pc, parse_inputs=inputs.sorted_search_form,
        fields=_SEARCH_FIELDS, tags=["sorted", "unbounded"], random_array=True,
        complexity_time="O(log i)", complexity_space="O(1)",
        description="Double a bound until it passes the target, then binary search.",
    ),

    # ----- sorting -----
    "bubble_sort": AlgoInfo(
        key="bubble_sort", label="Bubble Sort", family="sorting",
        fn=bubble_sort, pseudocode=_bub_pc, parse_inputs=inputs.array_form,
        fields=_SORT_FIELDS, tags=["stable", "in-place"], random_array=True,
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Swap adjacent out-of-order pairs until a pass makes no swaps.",
    ),
    "selection_sort": AlgoInfo(
        key="selection_sort", label="Selection Sort", family="sorting",
        fn=selection_sort, pseudocode=_sel_pc, parse_inputs=inputs.array_form,
        fields=_SORT_FIELDS, tags=["in-place"], random_array=True,
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Select the minimum of the unsorted part and move it to the front.",
    ),
    "insertion_sort": AlgoInfo(
        key="insertion_sort", label="Insertion Sort", family="sorting",
        fn=insertion_sort, pseudocode=_ins_pc, parse_inputs=inputs.array_form,
        fields=_SORT_FIELDS, tags=["stable", "in-place", "adaptive"], random_array=True,
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Grow a sorted prefix one element at a time.",
    ),
    "merge_sort": AlgoInfo(
        key="merge_sort", label="Merge Sort", family="sorting",
        fn=merge_sort, pseudocode=_mrg_pc, parse_inputs=inputs.array_form,
        fields=_SORT_FIELDS, tags=["stable", "divide-and-conquer"], random_array=True,
        complexity_time="O(n log n)", complexity_space="O(n)",
        description="Split in halves, sort each, merge the sorted runs.",
    ),
    "quick_sort": AlgoInfo(
        key="quick_sort", label="Quick Sort", family="sorting",
        fn=quick_sort, pseudocode=_qck_pc, parse_inputs=inputs.array_form,
        fields=_SORT_FIELDS, tags=["in-place", "divide-and-conquer"], random_array=True,
        complexity_time="O(n log n) avg", complexity_space="O(log n)",
        description="Partition around a pivot, then sort both sides.",
    ),

    # ----- techniques -----
    "kadane": AlgoInfo(
        key="kadane", label="Kadane's Algorithm", family="techniques",
        fn=kadane, pseudocode=_kad_pc, parse_inputs=inputs.array_form,
        fields=[FormField("array", "Array", "-2, 1, -3, 4, -1, 2, 1, -5, 4")],
        tags=["dynamic-programming", "subarray"],
        complexity_time="O(n)", complexity_space="O(1)",
        description="Maximum subarray sum in one pass.",
    ),

    # ----- graphs -----
    "bfs": AlgoInfo(
        key="bfs", label="Breadth-First Search", family="graphs",
        fn=bfs, pseudocode=_bfs_pc, parse_inputs=inputs.graph_form,
        fields=_GRAPH_FIELDS, tags=["unweighted", "traversal"], random_graph=True,
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Explores layer by layer from the start node.",
    ),
    "dfs": AlgoInfo(
        key="dfs", label="Depth-First Search", family="graphs",
        fn=dfs, pseudocode=_dfs_pc, parse_inputs=inputs.graph_form,
        fields=_GRAPH_FIELDS, tags=["unweighted", "traversal"], random_graph=True,
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Dives deep before backtracking.",
    ),
    "dijkstra": AlgoInfo(
        key="dijkstra", label="Dijkstra's Algorithm", family="graphs",
        fn=dijkstra, pseudocode=_dij_pc, parse_inputs=inputs.weighted_graph_form,
        fields=_WEIGHTED_FIELDS, tags=["weighted", "shortest-path"], random_graph=True,
        complexity_time="O((V + E) log V)", complexity_space="O(V)",
        description="Greedily finalises the closest node. Non-negative weights only.",
    ),

    # ----- dynamic programming -----
    "fibonacci": AlgoInfo(
        key="fibonacci", label="Fibonacci (tabulation)", family="dynamic-programming",
        fn=fibonacci, pseudocode=_fib_pc, parse_inputs=inputs.fibonacci_form,
        fields=[FormField("n", "n", "10")], tags=["tabulation"],
        complexity_time="O(n)", complexity_space="O(n)",
        description="Each entry is the sum of the previous two.",
    ),
    "knapsack": AlgoInfo(
        key="knapsack", label="0/1 Knapsack", family="dynamic-programming",
        fn=knapsack, pseudocode=_knap_pc, parse_inputs=inputs.knapsack_form,
        fields=[
            FormField("weights", "Weights", "1, 3, 4, 5"),
            FormField("values", "Values", "1, 4, 5, 7"),
            FormField("capacity", "Capacity", "7"),
        ],
        tags=["tabulation", "grid"],
        complexity_time="O(n · C)", complexity_space="O(n · C)",
        description="Best value within a weight limit, each item taken at most once.",
    ),
    "lcs": AlgoInfo(
        key="lcs", label="Longest Common Subsequence", family="dynamic-programming",
        fn=lcs, pseudocode=_lcs_pc, parse_inputs=inputs.lcs_form,
        fields=[FormField("text_a", "First string", "ABCBDAB"), FormField("text_b", "Second string", "BDCABA")],
        tags=["tabulation", "grid", "strings"],
        complexity_time="O(m · n)", complexity_space="O(m · n)",
        description="Longest sequence of characters appearing in both strings in order.",
    ),
    "coin_change": AlgoInfo(
        key="coin_change", label="Coin Change", family="dynamic-programming",
        fn=coin_change, pseudocode=_coin_pc, parse_inputs=inputs.coin_change_form,
        fields=[FormField("coins", "Coins", "1, 3, 4"), FormField("amount", "Amount", "6")],
        tags=["tabulation"],
        complexity_time="O(amount · k)", complexity_space="O(amount)",
        description="Fewest coins that make the amount.",
    ),

    # ----- trees -----
    "bst_insert": AlgoInfo(
        key="bst_insert", label="BST Insert", family="trees",
        fn=bst_insert, pseudocode=_bst_ins_pc, parse_inputs=inputs.tree_form,
        fields=_TREE_FIELDS, tags=["bst"],
        complexity_time="O(h)", complexity_space="O(1)",
        description="Walk down comparing values and attach a new leaf.",
    ),
    "bst_search": AlgoInfo(
        key="bst_search", label="BST Search", family="trees",
        fn=bst_search, pseudocode=_bst_srch_pc, parse_inputs=inputs.tree_form,
        fields=[_TREE_FIELDS[0], FormField("value", "Value", "60")], tags=["bst"],
        complexity_time="O(h)", complexity_space="O(1)",
        description="Go left for smaller, right for larger.",
    ),
    "bst_delete": AlgoInfo(
        key="bst_delete", label="BST Delete", family="trees",
        fn=bst_delete, pseudocode=_bst_del_pc, parse_inputs=inputs.tree_form,
        fields=[_TREE_FIELDS[0], FormField("value", "Value", "30")], tags=["bst"],
        complexity_time="O(h)", complexity_space="O(1)",
        description="Splice out the node, using the in-order successor when it has two children.",
    ),
    "bst_inorder": AlgoInfo(
        key="bst_inorder", label="In-order Traversal", family="trees",
        fn=bst_inorder, pseudocode=_bst_in_pc, parse_inputs=inputs.traversal_form,
        fields=[_TREE_FIELDS[0]], tags=["bst", "traversal"],
        complexity_time="O(n)", complexity_space="O(h)",
        description="Visits a BST's values in ascending order.",
    ),
    "avl_insert": AlgoInfo(
        key="avl_insert", label="AVL Insert", family="trees",
        fn=avl_insert, pseudocode=_avl_pc, parse_inputs=inputs.avl_form,
        fields=[FormField("values", "Existing values", "30, 20, 40, 10"), FormField("value", "Value", "5")],
        tags=["self-balancing", "rotations"],
        complexity_time="O(log n)", complexity_space="O(log n)",
        description="BST insert, then rotate any ancestor whose balance factor leaves [-1, 1].",
    ),

    # ----- tries -----
    "trie_insert": AlgoInfo(
        key="trie_insert", label="Trie Insert", family="tries",
        fn=trie_insert, pseudocode=_trie_ins_pc, parse_inputs=inputs.trie_form,
        fields=_TRIE_FIELDS, tags=["prefix-tree"],
        complexity_time="O(L)", complexity_space="O(L)",
        description="Create missing character nodes and mark the end of the word.",
    ),
    "trie_search": AlgoInfo(
        key="trie_search", label="Trie Search", family="tries",
        fn=trie_search, pseudocode=_trie_srch_pc, parse_inputs=inputs.trie_form,
        fields=[_TRIE_FIELDS[0], FormField("word", "Word", "car")], tags=["prefix-tree"],
        complexity_time="O(L)", complexity_space="O(1)",
        description="Whole-word lookup: a prefix alone does not count.",
    ),
    "trie_starts_with": AlgoInfo(
        key="trie_starts_with", label="Trie Prefix Check", family="tries",
        fn=trie_starts_with, pseudocode=_trie_pre_pc, parse_inputs=inputs.prefix_form,
        fields=[_TRIE_FIELDS[0], FormField("word", "Prefix", "ca")], tags=["prefix-tree"],
        complexity_time="O(L)", complexity_space="O(1)",
        description="Does any stored word start with the prefix?",
    ),
    "trie_delete": AlgoInfo(
        key="trie_delete", label="Trie Delete", family="tries",
        fn=trie_delete, pseudocode=_trie_del_pc, parse_inputs=inputs.trie_form,
        fields=[_TRIE_FIELDS[0], FormField("word", "Word", "cart")], tags=["prefix-tree"],
        complexity_time="O(L)", complexity_space="O(1)",
        description="Unmark the word, then prune nodes nothing else needs.",
    ),

    # ----- stacks -----
    "balanced_parentheses": AlgoInfo(
        key="balanced_parentheses", label="Balanced Parentheses", family="stacks",
        fn=balanced_parentheses, pseudocode=_paren_pc, parse_inputs=inputs.brackets_form,
        fields=[FormField("text", "Brackets", "{[()()]}")], tags=["stack"],
        complexity_time="O(n)", complexity_space="O(n)",
        description="Push openers, pop on matching closers.",
    ),

    # ----- queues -----
    "sliding_window_max": AlgoInfo(
        key="sliding_window_max", label="Sliding Window Maximum", family="queues",
        fn=sliding_window_max, pseudocode=_win_pc, parse_inputs=inputs.window_form,
        fields=[FormField("array", "Array", "1, 3, -1, -3, 5, 3, 6, 7"), FormField("k", "Window size", "3")],
        tags=["deque", "monotonic"],
        complexity_time="O(n)", complexity_space="O(k)",
        description="A deque of decreasing values keeps each window maximum at the front.",
    ),

    # ----- linked lists -----
    "reverse_linked_list": AlgoInfo(
        key="reverse_linked_list", label="Reverse Linked List", family="linked-lists",
        fn=reverse_linked_list, pseudocode=_rev_pc, parse_inputs=inputs.linked_list_form,
        fields=[FormField("values", "Values", "1, 2, 3, 4, 5")], tags=["pointers"],
        complexity_time="O(n)", complexity_space="O(1)",
        description="Re-point every next pointer backwards with three cursors.",
    ),

    # ----- bit manipulation -----
    "count_set_bits": AlgoInfo(
        key="count_set_bits", label="Count Set Bits", family="bit-manipulation",
        fn=count_set_bits, pseudocode=_bits_pc, parse_inputs=inputs.bits_form,
        fields=[FormField("n", "n", "29")], tags=["kernighan"],
        complexity_time="O(set bits)", complexity_space="O(1)",
        description="n & (n - 1) clears the lowest set bit once per loop.",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None."""
    return REGISTRY.get(key)


def require_algorithm(key: str) -> AlgoInfo:
    """Return AlgoInfo by key, or raise ValueError."""
    info = REGISTRY.get(key)
    if info is None:
        raise ValueError(f"Unknown algorithm: {key}")
    return info


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered algorithms in insertion order."""
    return list(REGISTRY.values())


def algorithms_by_family(family: str) -> List[AlgoInfo]:
    return [a for a in REGISTRY.values() if a.family == family]


def families() -> List[str]:
    """Family names in registry order, without duplicates."""
    return list(dict.fromkeys(a.family for a in REGISTRY.values()))


__all__ = [
    "AlgoInfo",
    "REGISTRY",
    "Highlight",
    "Snapshot",
    "SnapshotBuilder",
    "StructureKind",
    "get_algorithm",
    "require_algorithm",
    "list_algorithms",
    "algorithms_by_family",
    "families",
]
