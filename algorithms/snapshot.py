"""
snapshot.py — Algorithm Snapshot
=================================
Every algorithm is a generator that yields Snapshot objects.
A Snapshot is a frozen-in-time picture of everything the visualizer
needs to render one frame:

    • The structure being worked on (array, DP grid, graph, tree, trie, …)
    • Which cells / nodes are being compared, swapped, visited, …
    • Named cursors (L / R / M, prev / curr / next, …)
    • Auxiliary data for overlays (queue, stack, distance map, running sum)
    • Which line of pseudocode is executing right now
    • A plain-English narration of what just happened

Design decisions:
  - Snapshot is a frozen dataclass. The producer generator is the only
    writer; the controller / renderer are pure readers.
  - SnapshotBuilder.build() deep-copies everything it hands out, so a
    producer can keep mutating its working storage after a yield without
    rewriting history.  Producers point `builder.structure` at live data
    and never copy by hand.
  - `highlights` maps a Highlight name to the indices / node ids it
    applies to; a renderer applies them in one pass.
"""

import copy
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


# ---------------------------------------------------------------------------
# Vocabularies
# ---------------------------------------------------------------------------
class Highlight(Enum):
    COMPARING   = "comparing"
    SWAPPING    = "swapping"
    SORTED      = "sorted"
    VISITING    = "visiting"
    VISITED     = "visited"
    ACTIVE      = "active"
    HIGHLIGHTED = "highlighted"


class StructureKind(Enum):
    ARRAY       = "array"
    GRID        = "grid"
    GRAPH       = "graph"
    TREE        = "tree"
    TRIE        = "trie"
    STACK       = "stack"
    LINKED_LIST = "linked_list"


# ---------------------------------------------------------------------------
# Snapshot
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class Snapshot:
    """
    Attributes:
        step_number     : 0-based index of this snapshot in the trace.
        kind            : StructureKind value – tells the renderer what `structure` is.
        structure       : Copy of the working data at this instant.
        highlights      : {highlight_name: [index | node_id, …]}.
        pointers        : {cursor_name: index | node_id}.
        message         : Human-readable narration.
        pseudocode_line : 0-based index into the producer's PSEUDOCODE, or None.
        overlay         : Free-form dict for algorithm-specific extras:
                            • "queue" / "stack"  – frontier contents
                            • "distances"        – current distance map
                            • "current_sum"      – running sum (Kadane)
                            • "input"            – input cursor (parentheses)
        result          : Terminal metadata; only set on the final snapshot.
        is_final        : True on the very last snapshot of a run.
    """

    step_number:     int                       = 0
    kind:            str                       = StructureKind.ARRAY.value
    structure:       Any                       = None
    highlights:      Dict[str, List[Any]]      = field(default_factory=dict)
    pointers:        Dict[str, Any]            = field(default_factory=dict)
    message:         str                       = ""
    pseudocode_line: Optional[int]             = None
    overlay:         Dict[str, Any]            = field(default_factory=dict)
    result:          Optional[Dict[str, Any]]  = None
    is_final:        bool                      = False

    def marked(self, highlight: Highlight) -> List[Any]:
        """Items carrying `highlight` (empty list if none)."""
        return list(self.highlights.get(highlight.value, []))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "step_number":     self.step_number,
            "kind":            self.kind,
            "structure":       _jsonable(self.structure),
            "highlights":      _jsonable(self.highlights),
            "pointers":        _jsonable(self.pointers),
            "message":         self.message,
            "pseudocode_line": self.pseudocode_line,
            "overlay":         _jsonable(self.overlay),
            "result":          _jsonable(self.result),
            "is_final":        self.is_final,
        }


def _jsonable(value: Any) -> Any:
    """Tuples → lists, non-str dict keys → str, recursively."""
    if isinstance(value, dict):
        return {str(k) if not isinstance(k, str) else k: _jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_jsonable(v) for v in value]
    if isinstance(value, float) and value == float("inf"):
        return None
    return value


# ---------------------------------------------------------------------------
# Convenience builder so producers don't have to spell out every kwarg
# ---------------------------------------------------------------------------
class SnapshotBuilder:
    """
    Mutable scratch-pad that producers use to construct Snapshots.

    Usage inside a producer:
        sb = SnapshotBuilder(StructureKind.ARRAY)
        sb.structure = arr              # live list, copied on build()
        sb.reset()
        sb.compare(j, j + 1)
        sb.pseudocode_line = 3
        sb.message = f"Compare arr[{j}] and arr[{j + 1}]"
        yield sb.build()

    `reset()` clears the per-frame fields but keeps `structure`;
    `build()` numbers snapshots 0, 1, 2, … automatically.
    """

    def __init__(self, kind: StructureKind, structure: Any = None):
        self.kind = kind
        self.structure: Any = structure
        self._step_no = 0
        self.reset()

    def reset(self) -> None:
        self.highlights:      Dict[str, List[Any]] = {}
        self.pointers:        Dict[str, Any]       = {}
        self.message:         str                  = ""
        self.pseudocode_line: Optional[int]        = None
        self.overlay:         Dict[str, Any]       = {}

    # -- helpers --
    def mark(self, highlight: Highlight, *items: Any) -> None:
        bucket = self.highlights.setdefault(highlight.value, [])
        for item in items:
            if item not in bucket:
                bucket.append(item)

    def compare(self, *items: Any) -> None:
        self.mark(Highlight.COMPARING, *items)

    def swap(self, *items: Any) -> None:
        self.mark(Highlight.SWAPPING, *items)

    def mark_sorted(self, *items: Any) -> None:
        self.mark(Highlight.SORTED, *items)

    def visiting(self, *items: Any) -> None:
        self.mark(Highlight.VISITING, *items)

    def visited(self, *items: Any) -> None:
        self.mark(Highlight.VISITED, *items)

    def activate(self, *items: Any) -> None:
        self.mark(Highlight.ACTIVE, *items)

    def highlight(self, *items: Any) -> None:
        self.mark(Highlight.HIGHLIGHTED, *items)

    def point(self, name: str, position: Any) -> None:
        if position is None:
            self.pointers.pop(name, None)
        else:
            self.pointers[name] = position

    @property
    def steps_built(self) -> int:
        return self._step_no

    def build(self, is_final: bool = False, result: Optional[Dict[str, Any]] = None) -> Snapshot:
        snap = Snapshot(
            step_number=self._step_no,
            kind=self.kind.value,
            structure=_structure_copy(self.structure),
            highlights=copy.deepcopy(self.highlights),
            pointers=copy.deepcopy(self.pointers),
            message=self.message,
            pseudocode_line=self.pseudocode_line,
            overlay=copy.deepcopy(self.overlay),
            result=copy.deepcopy(result) if is_final else None,
            is_final=is_final,
        )
        self._step_no += 1
        return snap


def _structure_copy(structure: Any) -> Any:
    """Arena structures serialise themselves; plain data is deep-copied."""
    if hasattr(structure, "to_dict"):
        return copy.deepcopy(structure.to_dict())
    return copy.deepcopy(structure)
