"""
graph.py — Adjacency Graph
===========================
Working data for the graph traversals (BFS / DFS / Dijkstra).

Responsibilities:
  1. Node & edge insertion                  (add_node / add_edge)
  2. Adjacency queries                      (neighbours, edges, …)
  3. Import from dict / adjacency-list text (from_dict / from_adjacency_list)
  4. Seeded random generation               (generate_random)
  5. Serialisation                          (to_dict, to_adjacency_list)

Design decisions:
  - Nodes are plain string ids; insertion order is preserved everywhere
    so traversal order (and therefore every trace) is deterministic.
  - `_adj[node_id] → [(neighbour_id, weight), …]` in declaration order.
  - Undirected edges are stored twice (once per direction) unless the
    reverse entry is already present, so a symmetric dict imports cleanly.
    When importing, every declared list is taken in full first and the
    missing reverse entries are appended afterwards, so a node's own line
    fixes its neighbour order.
"""

import random
from typing import Dict, List, Mapping, Sequence, Tuple, Union


class GraphFormatError(ValueError):
    """Raised when adjacency-list text cannot be parsed."""


# an adjacency entry is either "B" or ("B", weight)
AdjEntry = Union[str, Tuple[str, float], Sequence]


class Graph:
    """
    Attributes:
        directed : bool – graph-level directedness
        _adj     : {node_id: [(neighbour_id, weight), …]}
    """

    def __init__(self, directed: bool = False):
        self.directed: bool = directed
        self._adj: Dict[str, List[Tuple[str, float]]] = {}

    # ==================================================================
    # CRUD
    # ==================================================================
    def add_node(self, node_id: str) -> str:
        self._adj.setdefault(node_id, [])
        return node_id

    def add_edge(self, source: str, target: str, weight: float = 1.0) -> None:
        self._link(source, target, weight)
        if not self.directed and source != target:
            self._link(target, source, weight)

    def _link(self, source: str, target: str, weight: float) -> bool:
        """One directed entry; False when source already lists target."""
        self.add_node(source)
        self.add_node(target)
        if self.has_edge(source, target):
            return False
        self._adj[source].append((target, weight))
        return True

    def _mirror(self, declared: List[Tuple[str, str, float]]) -> None:
        """Append reverse entries missing from an undirected declaration."""
        if self.directed:
            return
        for src, tgt, w in declared:
            if src != tgt:
                self._link(tgt, src, w)

    def has_node(self, node_id: str) -> bool:
        return node_id in self._adj

    def has_edge(self, source: str, target: str) -> bool:
        return any(nbr == target for nbr, _ in self._adj.get(source, []))

    # ==================================================================
    # ADJACENCY QUERIES
    # ==================================================================
    def neighbours(self, node_id: str) -> List[Tuple[str, float]]:
        """Return [(neighbour_id, weight)] in declaration order."""
        return list(self._adj.get(node_id, []))

    def node_ids(self) -> List[str]:
        return list(self._adj.keys())

    def edges(self) -> List[Tuple[str, str, float]]:
        """Every edge once; undirected edges reported in first-seen direction."""
        seen = set()
        result = []
        for src, nbrs in self._adj.items():
            for tgt, w in nbrs:
                key = (src, tgt) if self.directed else frozenset((src, tgt))
                if key in seen:
                    continue
                seen.add(key)
                result.append((src, tgt, w))
        return result

    def has_negative_weights(self) -> bool:
        return any(w < 0 for nbrs in self._adj.values() for _, w in nbrs)

    def __len__(self) -> int:
        return len(self._adj)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._adj

    # ==================================================================
    # SERIALISATION
    # ==================================================================
    def copy(self) -> "Graph":
        g = Graph(directed=self.directed)
        g._adj = {n: list(nbrs) for n, nbrs in self._adj.items()}
        return g

    def to_dict(self) -> dict:
        return {
            "directed":  self.directed,
            "nodes":     self.node_ids(),
            "adjacency": {n: [[nbr, w] for nbr, w in nbrs] for n, nbrs in self._adj.items()},
        }

    @classmethod
    def from_dict(cls, adjacency: Mapping[str, Sequence[AdjEntry]], directed: bool = True) -> "Graph":
        """
        Build from `{node: [neighbour | (neighbour, weight), …]}`.

        Lists are taken as out-neighbours, so the default is directed: a
        symmetric dict already describes an undirected graph.
        """
        g = cls(directed=directed)
        for node in adjacency:
            g.add_node(node)
        declared = []
        for node, nbrs in adjacency.items():
            for entry in nbrs:
                tgt, w = (entry, 1.0) if isinstance(entry, str) else (entry[0], float(entry[1]))
                if g._link(node, tgt, w):
                    declared.append((node, tgt, w))
        g._mirror(declared)
        return g

    # ==================================================================
    # FACTORIES
    # ==================================================================
    @classmethod
    def generate_random(
        cls,
        rng: random.Random,
        num_nodes: int = 7,
        edge_probability: float = 0.3,
        directed: bool = False,
        weight_range: Tuple[int, int] = (1, 9),
    ) -> "Graph":
        """
        Erdős–Rényi style random graph labelled A, B, C, …
        A shuffled spanning path is added so the graph is always connected.
        """
        g = cls(directed=directed)
        ids = [_label(i) for i in range(num_nodes)]
        for nid in ids:
            g.add_node(nid)

        for i in range(num_nodes):
            for j in range(num_nodes):
                if i == j or (not directed and j < i):
                    continue
                if rng.random() < edge_probability:
                    g.add_edge(ids[i], ids[j], rng.randint(*weight_range))

        shuffled = list(ids)
        rng.shuffle(shuffled)
        for k in range(1, len(shuffled)):
            if not g.has_edge(shuffled[k - 1], shuffled[k]):
                g.add_edge(shuffled[k - 1], shuffled[k], rng.randint(*weight_range))
        return g

    @classmethod
    def from_adjacency_list(cls, text: str, directed: bool = False) -> "Graph":
        """
        Parse a simple text adjacency list.

        Supported formats (one node per line):
            A: B C D            → A connects to B, C, D  (weight 1)
            A: B(3) C(7)        → A→B weight 3, A→C weight 7
            A -> B, C           → alternate arrow syntax
        Lines starting with '#' are ignored.
        """
        g = cls(directed=directed)
        declared: List[Tuple[str, str, float]] = []

        for lineno, raw in enumerate(text.strip().splitlines(), start=1):
            line = raw.strip()
            if not line or line.startswith("#"):
                continue

            if ":" in line:
                parts = line.split(":", 1)
            elif "→" in line:
                parts = line.split("→", 1)
            elif "->" in line:
                parts = line.split("->", 1)
            else:
                raise GraphFormatError(f"line {lineno}: expected 'node: neighbours', got {line!r}")

            src = parts[0].strip()
            if not src:
                raise GraphFormatError(f"line {lineno}: missing node name")
            g.add_node(src)

            for token in parts[1].replace(",", " ").split():
                if "(" in token and token.endswith(")"):
                    tgt, w_str = token[:-1].split("(", 1)
                    try:
                        w = float(w_str)
                    except ValueError:
                        raise GraphFormatError(f"line {lineno}: bad weight {w_str!r} for {tgt!r}") from None
                else:
                    tgt, w = token, 1.0
                if not tgt:
                    raise GraphFormatError(f"line {lineno}: empty neighbour name")
                if g._link(src, tgt, w):
                    declared.append((src, tgt, w))
        g._mirror(declared)
        return g

    def to_adjacency_list(self) -> str:
        """Inverse of from_adjacency_list; unit weights are left implicit."""
        lines = []
        for node, nbrs in self._adj.items():
            tokens = [nbr if w == 1 else f"{nbr}({_num(w)})" for nbr, w in nbrs]
            lines.append(f"{node}: {' '.join(tokens)}".rstrip())
        return "\n".join(lines)


def _num(w: float) -> str:
    return str(int(w)) if float(w).is_integer() else str(w)


def _label(i: int) -> str:
    """0 → A, 25 → Z, 26 → A1 …"""
    letter = chr(ord("A") + i % 26)
    return letter if i < 26 else f"{letter}{i // 26}"
