"""
dijkstra.py — Dijkstra's Shortest-Path Algorithm
==================================================
Generator-based single-source Dijkstra using a min-heap (heapq).

Yields a Snapshot at:
  1. Initialise distances / push source
  2. Pop minimum-distance node  →  VISITING (distance now final)
  3. Stale heap entry popped  →  skipped
  4. Each relaxation attempt  →  edge COMPARING, improved node HIGHLIGHTED
  5. Heap empty  →  final distances

Overlay exposes:
  • "queue"     – [(dist, node_id)] heap contents, sorted
  • "distances" – full current distance map (∞ for unreached)

Correctness note: Dijkstra requires non-negative weights.
The input layer rejects graphs with negative edges.
"""

import heapq
from typing import Dict, Iterator, List, Optional, Set, Tuple

from structures import Graph
from algorithms.snapshot import Snapshot, SnapshotBuilder, StructureKind


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def Dijkstra(graph, source):",                # 0
    "    dist ← {v: ∞ for v in V}",                # 1
    "    dist[source] ← 0",                        # 2
    "    pq ← [(0, source)]",                      # 3
    "    while pq is not empty:",                  # 4
    "        (d, node) ← pq.pop_min()",            # 5
    "        if d > dist[node]: continue",         # 6
    "        for (neighbour, w) in adj(node):",    # 7
    "            new_dist ← dist[node] + w",       # 8
    "            if new_dist < dist[neighbour]:",  # 9
    "                dist[neighbour] ← new_dist",  # 10
    "                parent[neighbour] ← node",    # 11
    "                pq.push((new_dist, nbr))",    # 12
    "    return dist",                             # 13
]


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def dijkstra(graph: Graph, start: str) -> Iterator[Snapshot]:
    INF = float("inf")
    sb = SnapshotBuilder(StructureKind.GRAPH, graph)

    dist: Dict[str, float] = {nid: INF for nid in graph.node_ids()}
    dist[start] = 0.0
    parent: Dict[str, Optional[str]] = {start: None}
    pq: List[Tuple[float, str]] = [(0.0, start)]
    done: Set[str] = set()
    order: List[str] = []

    def _frame(line: int, message: str) -> None:
        sb.reset()
        sb.visited(*order)
        sb.overlay["queue"] = sorted(pq)
        sb.overlay["distances"] = dict(dist)
        sb.pseudocode_line = line
        sb.message = message

    # --- init step ---
    _frame(2, f"Initialise: all distances = ∞ except source '{start}' = 0. Push the source.")
    sb.highlight(start)
    yield sb.build()

    # --- main loop ---
    while pq:
        d, node = heapq.heappop(pq)

        if node in done:
            _frame(6, f"Pop ({_fmt(d)}, '{node}'): stale entry, '{node}' is already final. Skip.")
            yield sb.build()
            continue

        done.add(node)
        order.append(node)
        _frame(5, f"Pop '{node}' with distance {_fmt(d)}: smallest in the queue, so it is now FINAL.")
        sb.visiting(node)
        yield sb.build()

        for nbr, w in graph.neighbours(node):
            if nbr in done:
                continue
            new_dist = dist[node] + w
            improved = new_dist < dist[nbr]
            if improved:
                dist[nbr] = new_dist
                parent[nbr] = node
                heapq.heappush(pq, (new_dist, nbr))

            _frame(9, "")
            sb.visiting(node)
            sb.compare((node, nbr))
            if improved:
                sb.highlight(nbr)
                sb.message = f"Relax {node}→{nbr}: {_fmt(dist[node])} + {_fmt(w)} = {_fmt(new_dist)} is better. Update."
            else:
                sb.message = (
                    f"Edge {node}→{nbr}: {_fmt(dist[node])} + {_fmt(w)} = {_fmt(new_dist)} "
                    f"≥ current {_fmt(dist[nbr])}. No improvement."
                )
            yield sb.build()

    # --- done ---
    _frame(13, "Priority queue empty. All reachable distances are final.")
    distances = {n: (None if v == INF else v) for n, v in dist.items()}
    yield sb.build(
        is_final=True,
        result={"distances": distances, "parents": parent, "visited_order": order},
    )


def _fmt(value: float) -> str:
    if value == float("inf"):
        return "∞"
    return str(int(value)) if float(value).is_integer() else f"{value:g}"
