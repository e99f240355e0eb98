"""
bfs.py — Breadth-First Search
==============================
Generator-based BFS traversal.  Yields a Snapshot at every meaningful event:
  1. Dequeue a node  →  VISITING
  2. Discover an unseen neighbour  →  HIGHLIGHTED, edge ACTIVE, enqueued
  3. Final step  →  full visit order

Nodes are marked discovered when enqueued, so each node enters the queue
at most once.  Neighbours are explored in adjacency declaration order.

Overlay exposes:
  • "queue" – the FIFO contents after the event
"""

from collections import deque
from typing import Iterator, List, Set

from structures import Graph
from algorithms.snapshot import Snapshot, SnapshotBuilder, StructureKind


# ---------------------------------------------------------------------------
# Pseudocode: each string is one displayed line; index = pseudocode_line
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def BFS(graph, start):",                   # 0
    "    queue ← [start]",                      # 1
    "    discovered ← {start}",                 # 2
    "    while queue is not empty:",            # 3
    "        node ← queue.dequeue()",           # 4
    "        visit(node)",                      # 5
    "        for neighbour in adj(node):",      # 6
    "            if neighbour not discovered:", # 7
    "                discovered.add(neighbour)",# 8
    "                queue.enqueue(neighbour)", # 9
    "    return visit order",                   # 10
]


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def bfs(graph: Graph, start: str) -> Iterator[Snapshot]:
    """
    Yields Snapshots for every event during a BFS traversal.

    Args:
        graph : The graph to traverse.
        start : Starting node id.
    """
    sb = SnapshotBuilder(StructureKind.GRAPH, graph)
    queue = deque([start])
    discovered: Set[str] = {start}
    order: List[str] = []

    # --- initialisation step ---
    sb.highlight(start)
    sb.overlay["queue"] = list(queue)
    sb.pseudocode_line = 1
    sb.message = f"Initialise: '{start}' is placed into the queue and marked discovered."
    yield sb.build()

    # --- main loop ---
    while queue:
        node = queue.popleft()
        order.append(node)

        sb.reset()
        sb.visited(*order[:-1])
        sb.visiting(node)
        sb.overlay["queue"] = list(queue)
        sb.pseudocode_line = 5
        sb.message = (
            f"Dequeue '{node}' and visit it. BFS always expands the node "
            f"that was discovered earliest (FIFO)."
        )
        yield sb.build()

        for nbr, _weight in graph.neighbours(node):
            if nbr in discovered:
                continue
            discovered.add(nbr)
            queue.append(nbr)

            sb.reset()
            sb.visited(*order[:-1])
            sb.visiting(node)
            sb.highlight(nbr)
            sb.activate((node, nbr))
            sb.overlay["queue"] = list(queue)
            sb.pseudocode_line = 9
            sb.message = f"'{nbr}' is new: mark it discovered and enqueue it behind {len(queue) - 1} node(s)."
            yield sb.build()

    # --- done ---
    sb.reset()
    sb.visited(*order)
    sb.overlay["queue"] = []
    sb.pseudocode_line = 10
    sb.message = f"Queue is empty. Visit order: {', '.join(order)}."
    yield sb.build(is_final=True, result={"visited_order": order})
