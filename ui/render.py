"""
render.py — Snapshot Renderer
==============================
Pure rendering function: Snapshot → SVG / HTML string.

The renderer consumes:
  • snapshot   – the current Snapshot (structure, highlights, pointers, overlay)
  • config     – visual config (canvas size, colors, fonts, …)

And produces markup ready to inject into the DOM.

Design decisions:
  - NO mutation.  The renderer only reads the snapshot it is handed and
    never talks to the controller.  Any callable with the same signature
    (see SnapshotRenderer) can stand in for it.
  - Dispatch is on `snapshot.kind`: arrays, graphs, trees and tries are
    drawn as SVG; DP grids, stacks and linked lists as HTML.
  - Highlight coloring is a dict lookup with a fixed precedence, so a
    cell that is both "sorted" and "comparing" shows as comparing.
  - Overlay data (queue, stack, distances, running sums) is rendered as a
    separate panel below the structure.
"""

import math
from html import escape
from typing import Any, Dict, Iterable, List, Optional, Protocol, Tuple

from algorithms.snapshot import Highlight, Snapshot, StructureKind


# ---------------------------------------------------------------------------
# Visual Config: color palette, dimensions, fonts
# ---------------------------------------------------------------------------
class RenderConfig:
    # canvas
    width:  int = 900
    height: int = 420
    bg:     str = "#0d1117"

    # highlight name → fill
    colors: Dict[str, str] = {
        "default":     "#1c2128",   # dark grey
        "comparing":   "#f59e0b",   # amber
        "swapping":    "#ef4444",   # red
        "sorted":      "#10b981",   # emerald green
        "visiting":    "#0ea5e9",   # cyan blue
        "visited":     "#065f46",   # deep green
        "active":      "#06b6d4",   # bright teal, current focus
        "highlighted": "#a855f7",   # purple, results / found
    }

    # strongest first
    precedence: Tuple[str, ...] = (
        Highlight.SWAPPING.value,
        Highlight.COMPARING.value,
        Highlight.ACTIVE.value,
        Highlight.HIGHLIGHTED.value,
        Highlight.VISITING.value,
        Highlight.SORTED.value,
        Highlight.VISITED.value,
    )

    # cells / nodes
    cell_width:   int = 52
    cell_height:  int = 44
    node_radius:  int = 20
    stroke:       str = "#30363d"
    label_color:  str = "#e6edf3"
    label_size:   int = 13
    muted:        str = "#7d8590"
    pointer_color: str = "#ec4899"  # pink

    # edges
    edge_color:   str = "#30363d"
    edge_width:   int = 2

    # overlay panel
    overlay_bg:     str = "#161b22"
    overlay_border: str = "#30363d"
    overlay_accent: str = "#0ea5e9"


CONFIG = RenderConfig()


class SnapshotRenderer(Protocol):
    def __call__(self, snapshot: Snapshot, config: RenderConfig = CONFIG) -> str: ...


# ---------------------------------------------------------------------------
# Main Render Function
# ---------------------------------------------------------------------------
def render_snapshot(snapshot: Optional[Snapshot], config: RenderConfig = CONFIG) -> str:
    """
    Returns markup for one frame.

    Args:
        snapshot : The snapshot to draw (None draws an empty placeholder).
        config   : Visual config.
    """
    if snapshot is None:
        return f'<div class="canvas-empty" style="color: {config.muted};">Run an algorithm to start.</div>'

    renderer = _RENDERERS.get(snapshot.kind, _render_unknown)
    parts = [f'<div class="frame" data-kind="{snapshot.kind}" data-step="{snapshot.step_number}">']
    parts.append(renderer(snapshot, config))
    overlay = _render_overlay(snapshot.overlay, config)
    if overlay:
        parts.append(overlay)
    parts.append("</div>")
    return "\n".join(parts)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def _key(item: Any) -> Any:
    return tuple(item) if isinstance(item, list) else item


def _fill_for(item: Any, highlights: Dict[str, List[Any]], config: RenderConfig) -> str:
    item = _key(item)
    for name in config.precedence:
        if item in {_key(i) for i in highlights.get(name, [])}:
            return config.colors[name]
    return config.colors["default"]


def _pointer_labels(pointers: Dict[str, Any], item: Any) -> List[str]:
    return [name for name, pos in pointers.items() if _key(pos) == _key(item)]


def _fmt(value: Any) -> str:
    if value is None:
        return "·"
    if isinstance(value, float):
        if value == float("inf"):
            return "∞"
        if value.is_integer():
            return str(int(value))
    return escape(str(value))


def _svg_open(width: int, height: int, config: RenderConfig) -> str:
    return (
        f'<svg width="{width}" height="{height}" viewBox="0 0 {width} {height}" '
        f'xmlns="http://www.w3.org/2000/svg" style="background: {config.bg};">'
    )


def _circle(x: float, y: float, label: str, fill: str, config: RenderConfig, node_id: Any = "") -> str:
    return (
        f'<g class="node" data-id="{escape(str(node_id))}">'
        f'<circle cx="{x:.1f}" cy="{y:.1f}" r="{config.node_radius}" fill="{fill}" '
        f'stroke="{config.stroke}" stroke-width="2"/>'
        f'<text x="{x:.1f}" y="{y + 4:.1f}" text-anchor="middle" font-size="{config.label_size}" '
        f'font-weight="600" fill="{config.label_color}">{label}</text></g>'
    )


def _line(x1: float, y1: float, x2: float, y2: float, color: str, width: int) -> str:
    return (
        f'<line x1="{x1:.1f}" y1="{y1:.1f}" x2="{x2:.1f}" y2="{y2:.1f}" '
        f'stroke="{color}" stroke-width="{width}"/>'
    )


def _pointer_tag(x: float, y: float, names: Iterable[str], config: RenderConfig) -> str:
    text = ",".join(escape(n) for n in names)
    return (
        f'<text x="{x:.1f}" y="{y:.1f}" text-anchor="middle" font-size="11" '
        f'font-weight="700" fill="{config.pointer_color}">{text}</text>'
    )


# ---------------------------------------------------------------------------
# Arrays
# ---------------------------------------------------------------------------
def _render_array(snapshot: Snapshot, config: RenderConfig) -> str:
    values = list(snapshot.structure or [])
    cw, ch = config.cell_width, config.cell_height
    width = max(config.cell_width, len(values) * cw) + 20
    height = ch + 60
    parts = [_svg_open(width, height, config)]
    for i, value in enumerate(values):
        x = 10 + i * cw
        fill = _fill_for(i, snapshot.highlights, config)
        parts.append(
            f'<rect class="cell" data-index="{i}" x="{x}" y="20" width="{cw - 4}" height="{ch}" '
            f'rx="4" fill="{fill}" stroke="{config.stroke}"/>'
        )
        parts.append(
            f'<text x="{x + (cw - 4) / 2:.1f}" y="{20 + ch / 2 + 5:.1f}" text-anchor="middle" '
            f'font-size="{config.label_size}" fill="{config.label_color}">{_fmt(value)}</text>'
        )
        parts.append(
            f'<text x="{x + (cw - 4) / 2:.1f}" y="14" text-anchor="middle" font-size="10" '
            f'fill="{config.muted}">{i}</text>'
        )
        names = _pointer_labels(snapshot.pointers, i)
        if names:
            parts.append(_pointer_tag(x + (cw - 4) / 2, 20 + ch + 18, names, config))
    parts.append("</svg>")
    return "\n".join(parts)


# ---------------------------------------------------------------------------
# DP grids (HTML table)
# ---------------------------------------------------------------------------
def _render_grid(snapshot: Snapshot, config: RenderConfig) -> str:
    grid = snapshot.structure or []
    row_labels = snapshot.overlay.get("rows")
    col_labels = snapshot.overlay.get("cols")
    parts = [f'<table class="dp-grid" style="border-collapse: collapse; background: {config.bg};">']
    if col_labels is not None:
        head = "".join(f"<th>{escape(str(c))}</th>" for c in col_labels)
        parts.append(f"<tr><th></th><th></th>{head}</tr>")
    for i, row in enumerate(grid):
        cells = []
        if row_labels is not None:
            label = escape(str(row_labels[i - 1])) if i > 0 else ""
            cells.append(f"<th>{label}</th>")
        for j, value in enumerate(row):
            fill = _fill_for((i, j), snapshot.highlights, config)
            cells.append(
                f'<td data-cell="{i},{j}" style="background: {fill}; color: {config.label_color}; '
                f'border: 1px solid {config.stroke}; padding: 4px 8px; text-align: center;">{_fmt(value)}</td>'
            )
        parts.append(f"<tr>{''.join(cells)}</tr>")
    parts.append("</table>")
    return "\n".join(parts)


# ---------------------------------------------------------------------------
# Graphs (circular layout)
# ---------------------------------------------------------------------------
def _render_graph(snapshot: Snapshot, config: RenderConfig) -> str:
    data = snapshot.structure or {}
    nodes = list(data.get("nodes", []))
    adjacency = data.get("adjacency", {})
    directed = data.get("directed", False)
    if not nodes:
        return _svg_open(config.width, 60, config) + "</svg>"

    cx, cy = config.width / 2, config.height / 2
    radius = min(cx, cy) - config.node_radius * 2
    positions = {}
    for k, nid in enumerate(nodes):
        angle = 2 * math.pi * k / len(nodes) - math.pi / 2
        positions[nid] = (cx + radius * math.cos(angle), cy + radius * math.sin(angle))

    active_edges = {_key(e) for e in snapshot.highlights.get(Highlight.ACTIVE.value, []) if isinstance(e, (list, tuple))}

    parts = [_svg_open(config.width, config.height, config)]
    if directed:
        parts.append(
            '<defs><marker id="arrow" viewBox="0 0 10 10" refX="28" refY="5" markerWidth="8" '
            f'markerHeight="8" orient="auto"><path d="M 0 0 L 10 5 L 0 10 z" fill="{config.muted}"/></marker></defs>'
        )
    seen = set()
    # -- edges (draw first so nodes sit on top) --
    for src, entries in adjacency.items():
        for nbr, weight in entries:
            pair = (src, nbr) if directed else tuple(sorted((src, nbr)))
            if pair in seen or nbr not in positions:
                continue
            seen.add(pair)
            on = (src, nbr) in active_edges or (not directed and (nbr, src) in active_edges)
            color = config.colors["active"] if on else config.edge_color
            (x1, y1), (x2, y2) = positions[src], positions[nbr]
            line = _line(x1, y1, x2, y2, color, config.edge_width * (2 if on else 1))
            if directed:
                line = line.replace("/>", ' marker-end="url(#arrow)"/>')
            parts.append(line)
            if weight != 1:
                parts.append(
                    f'<text x="{(x1 + x2) / 2:.1f}" y="{(y1 + y2) / 2 - 4:.1f}" text-anchor="middle" '
                    f'font-size="11" fill="{config.muted}">{_fmt(weight)}</text>'
                )
    # -- nodes --
    for nid in nodes:
        x, y = positions[nid]
        parts.append(_circle(x, y, escape(str(nid)), _fill_for(nid, snapshot.highlights, config), config, nid))
        names = _pointer_labels(snapshot.pointers, nid)
        if names:
            parts.append(_pointer_tag(x, y - config.node_radius - 6, names, config))
    parts.append("</svg>")
    return "\n".join(parts)


# ---------------------------------------------------------------------------
# Trees: x from in-order rank, y from depth
# ---------------------------------------------------------------------------
def _tree_layout(nodes: Dict[Any, Dict[str, Any]], root: Any) -> Dict[Any, Tuple[int, int]]:
    layout: Dict[Any, Tuple[int, int]] = {}
    stack: List[Tuple[Any, int, bool]] = [(root, 0, False)] if root is not None else []
    rank = 0
    while stack:
        nid, depth, expanded = stack.pop()
        node = nodes[nid]
        if expanded:
            layout[nid] = (rank, depth)
            rank += 1
            continue
        if node.get("right") is not None:
            stack.append((node["right"], depth + 1, False))
        stack.append((nid, depth, True))
        if node.get("left") is not None:
            stack.append((node["left"], depth + 1, False))
    return layout


def _render_tree(snapshot: Snapshot, config: RenderConfig) -> str:
    data = snapshot.structure or {}
    nodes = {_int_key(k): v for k, v in data.get("nodes", {}).items()}
    layout = _tree_layout(nodes, data.get("root"))
    if not layout:
        return _svg_open(config.width, 60, config) + f'<text x="20" y="35" fill="{config.muted}">(empty tree)</text></svg>'

    cols = max(r for r, _ in layout.values()) + 1
    rows = max(d for _, d in layout.values()) + 1
    step_x = max(2 * config.node_radius + 8, (config.width - 40) / max(cols, 1))
    width = int(max(config.width, cols * step_x + 40))
    height = rows * 70 + 40

    def xy(nid):
        r, d = layout[nid]
        return 20 + step_x * (r + 0.5), 40 + d * 70

    parts = [_svg_open(width, height, config)]
    for nid in layout:
        for side in ("left", "right"):
            child = nodes[nid].get(side)
            if child is not None and child in layout:
                (x1, y1), (x2, y2) = xy(nid), xy(child)
                parts.append(_line(x1, y1, x2, y2, config.edge_color, config.edge_width))
    for nid in layout:
        x, y = xy(nid)
        parts.append(_circle(x, y, _fmt(nodes[nid].get("value")), _fill_for(nid, snapshot.highlights, config), config, nid))
        names = _pointer_labels(snapshot.pointers, nid)
        if names:
            parts.append(_pointer_tag(x, y - config.node_radius - 6, names, config))
    parts.append("</svg>")
    return "\n".join(parts)


def _int_key(key: Any) -> Any:
    return int(key) if isinstance(key, str) and key.isdigit() else key


# ---------------------------------------------------------------------------
# Tries: leaves spread left → right in child order
# ---------------------------------------------------------------------------
def _render_trie(snapshot: Snapshot, config: RenderConfig) -> str:
    data = snapshot.structure or {}
    nodes = {_int_key(k): v for k, v in data.get("nodes", {}).items()}
    root = data.get("root", 0)
    if root not in nodes:
        return _svg_open(config.width, 60, config) + "</svg>"

    layout: Dict[Any, Tuple[float, int]] = {}
    leaf = [0]

    def place(nid, depth):
        children = [c for _, c in sorted(nodes[nid].get("children", {}).items())]
        if not children:
            layout[nid] = (leaf[0], depth)
            leaf[0] += 1
            return
        for child in children:
            place(child, depth + 1)
        layout[nid] = ((layout[children[0]][0] + layout[children[-1]][0]) / 2, depth)

    place(root, 0)
    rows = max(d for _, d in layout.values()) + 1
    step_x = max(2 * config.node_radius + 10, (config.width - 40) / max(leaf[0], 1))
    width = int(max(config.width, leaf[0] * step_x + 40))
    height = rows * 64 + 40

    def xy(nid):
        r, d = layout[nid]
        return 20 + step_x * (r + 0.5), 36 + d * 64

    parts = [_svg_open(width, height, config)]
    for nid, node in nodes.items():
        for child in node.get("children", {}).values():
            if child in layout and nid in layout:
                (x1, y1), (x2, y2) = xy(nid), xy(child)
                parts.append(_line(x1, y1, x2, y2, config.edge_color, config.edge_width))
    for nid in layout:
        x, y = xy(nid)
        node = nodes[nid]
        label = "•" if nid == root else escape(node.get("char") or "")
        parts.append(_circle(x, y, label, _fill_for(nid, snapshot.highlights, config), config, nid))
        if node.get("is_end"):
            parts.append(
                f'<circle cx="{x:.1f}" cy="{y:.1f}" r="{config.node_radius + 4}" fill="none" '
                f'stroke="{config.colors["sorted"]}" stroke-width="2"/>'
            )
    parts.append("</svg>")
    return "\n".join(parts)


# ---------------------------------------------------------------------------
# Stacks (bottom → top, drawn top-first)
# ---------------------------------------------------------------------------
def _render_stack(snapshot: Snapshot, config: RenderConfig) -> str:
    items = list(snapshot.structure or [])
    parts = ['<div class="stack-view" style="display: inline-flex; flex-direction: column-reverse; gap: 4px;">']
    for i, value in enumerate(items):
        fill = _fill_for(i, snapshot.highlights, config)
        parts.append(
            f'<div class="stack-cell" data-index="{i}" style="background: {fill}; color: {config.label_color}; '
            f'border: 1px solid {config.stroke}; padding: 6px 18px; text-align: center;">{_fmt(value)}</div>'
        )
    if not items:
        parts.append(f'<div class="stack-cell" style="color: {config.muted};">(empty stack)</div>')
    parts.append("</div>")
    return "\n".join(parts)


# ---------------------------------------------------------------------------
# Linked lists (follow `next` from head)
# ---------------------------------------------------------------------------
def _render_linked_list(snapshot: Snapshot, config: RenderConfig) -> str:
    data = snapshot.structure or {}
    nodes = {_int_key(k): v for k, v in data.get("nodes", {}).items()}
    parts = ['<div class="linked-list" style="display: flex; flex-wrap: wrap; align-items: center; gap: 6px;">']
    # every node, in id order; arrows show the current `next` target
    for nid in sorted(nodes):
        node = nodes[nid]
        fill = _fill_for(nid, snapshot.highlights, config)
        names = _pointer_labels(snapshot.pointers, nid)
        if data.get("head") == nid:
            names = ["head"] + names
        tag = f'<div class="ptr" style="color: {config.pointer_color};">{escape(",".join(names))}</div>' if names else ""
        nxt = node.get("next")
        target = nodes[nxt]["value"] if nxt in nodes else None
        parts.append(
            f'<div class="ll-node" data-id="{nid}" style="background: {fill}; color: {config.label_color}; '
            f'border: 1px solid {config.stroke}; padding: 6px 12px;">{tag}{_fmt(node.get("value"))} '
            f'<span style="color: {config.muted};">→ {_fmt(target) if nxt is not None else "null"}</span></div>'
        )
    parts.append("</div>")
    return "\n".join(parts)


def _render_unknown(snapshot: Snapshot, config: RenderConfig) -> str:
    return f'<pre style="color: {config.muted};">{escape(repr(snapshot.structure))}</pre>'


_RENDERERS = {
    StructureKind.ARRAY.value:       _render_array,
    StructureKind.GRID.value:        _render_grid,
    StructureKind.GRAPH.value:       _render_graph,
    StructureKind.TREE.value:        _render_tree,
    StructureKind.TRIE.value:        _render_trie,
    StructureKind.STACK.value:       _render_stack,
    StructureKind.LINKED_LIST.value: _render_linked_list,
}


# ---------------------------------------------------------------------------
# Overlay panel
# ---------------------------------------------------------------------------
_HIDDEN_OVERLAY_KEYS = {"rows", "cols"}


def _render_overlay(overlay: Dict[str, Any], config: RenderConfig) -> str:
    entries = [(k, v) for k, v in overlay.items() if k not in _HIDDEN_OVERLAY_KEYS]
    if not entries:
        return ""
    rows = []
    for name, value in entries:
        if isinstance(value, dict):
            shown = ", ".join(f"{escape(str(k))}: {_fmt(v)}" for k, v in value.items())
        elif isinstance(value, (list, tuple)):
            shown = "[" + ", ".join(_fmt(v) for v in value[:16]) + (" …" if len(value) > 16 else "") + "]"
        else:
            shown = _fmt(value)
        rows.append(
            f'<tr><td style="color: {config.overlay_accent}; padding-right: 10px;">{escape(name)}</td>'
            f'<td style="font-family: monospace;">{shown}</td></tr>'
        )
    return (
        f'<table class="overlay-panel" style="margin-top: 10px; background: {config.overlay_bg}; '
        f'border: 1px solid {config.overlay_border}; color: {config.label_color};">'
        + "".join(rows)
        + "</table>"
    )
