"""
dfs.py — Depth-First Search
============================
Iterative DFS with an explicit stack.  Neighbours are pushed in reverse
adjacency order so the first-declared neighbour is explored first, which
reproduces the visit order of the textbook recursive version.

Yields a Snapshot at:
  1. Pop an unvisited node  →  VISITING
  2. Push each unvisited neighbour  →  HIGHLIGHTED (one frame per push)
  3. Pop an already-visited node  →  skipped
  4. Final  →  full visit order

Overlay exposes:
  • "stack" – bottom → top
"""

from typing import Iterator, List, Set

from structures import Graph
from algorithms.snapshot import Snapshot, SnapshotBuilder, StructureKind


PSEUDOCODE: List[str] = [
    "def DFS(graph, start):",                           # 0
    "    stack ← [start]",                              # 1
    "    while stack is not empty:",                    # 2
    "        node ← stack.pop()",                       # 3
    "        if node visited: continue",                # 4
    "        visit(node)",                              # 5
    "        for neighbour in reversed(adj(node)):",    # 6
    "            if neighbour not visited:",            # 7
    "                stack.push(neighbour)",            # 8
    "    return visit order",                           # 9
]


def dfs(graph: Graph, start: str) -> Iterator[Snapshot]:
    sb = SnapshotBuilder(StructureKind.GRAPH, graph)
    stack: List[str] = [start]
    visited: Set[str] = set()
    order: List[str] = []

    sb.highlight(start)
    sb.overlay["stack"] = list(stack)
    sb.pseudocode_line = 1
    sb.message = f"Initialise: push '{start}' onto the stack."
    yield sb.build()

    while stack:
        node = stack.pop()

        if node in visited:
            sb.reset()
            sb.visited(*order)
            sb.overlay["stack"] = list(stack)
            sb.pseudocode_line = 4
            sb.message = f"Pop '{node}': already visited, skip."
            yield sb.build()
            continue

        visited.add(node)
        order.append(node)
        sb.reset()
        sb.visited(*order[:-1])
        sb.visiting(node)
        sb.overlay["stack"] = list(stack)
        sb.pseudocode_line = 5
        sb.message = f"Pop '{node}' and visit it. DFS goes as deep as possible before backtracking."
        yield sb.build()

        for nbr, _weight in reversed(graph.neighbours(node)):
            if nbr in visited:
                continue
            stack.append(nbr)
            sb.reset()
            sb.visited(*order[:-1])
            sb.visiting(node)
            sb.highlight(nbr)
            sb.activate((node, nbr))
            sb.overlay["stack"] = list(stack)
            sb.pseudocode_line = 8
            sb.message = f"Push unvisited neighbour '{nbr}' (stack size {len(stack)})."
            yield sb.build()

    sb.reset()
    sb.visited(*order)
    sb.overlay["stack"] = []
    sb.pseudocode_line = 9
    sb.message = f"Stack is empty. Visit order: {', '.join(order)}."
    yield sb.build(is_final=True, result={"visited_order": order})
