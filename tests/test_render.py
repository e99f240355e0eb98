"""Tests for the snapshot renderer and the HTML control panels."""

import pytest

from algorithms import REGISTRY, Snapshot, SnapshotBuilder, StructureKind
from algorithms.bfs import bfs
from algorithms.bubble_sort import bubble_sort
from algorithms.lcs import lcs
from engine import PlaybackState, compare, materialize
from ui import (
    RenderConfig,
    algorithm_selector,
    analytics_panel,
    comparison_panel,
    input_form,
    message_panel,
    playback_controls,
    pseudocode_viewer,
    render_snapshot,
    result_panel,
)

CONFIG = RenderConfig()


def test_placeholder_when_nothing_is_loaded() -> None:
    assert "Run an algorithm to start." in render_snapshot(None)


@pytest.mark.parametrize("key", sorted(REGISTRY))
def test_every_sample_frame_renders(key: str) -> None:
    info = REGISTRY[key]
    trace = materialize(info.produce(info.sample_form()))
    for snap in (trace[0], trace[len(trace) // 2], trace.final):
        html = render_snapshot(snap)
        assert html.startswith(f'<div class="frame" data-kind="{snap.kind}" data-step="{snap.step_number}">')
        assert html.endswith("</div>")


def test_array_cells_take_highlight_colors() -> None:
    trace = materialize(bubble_sort([2, 1]))
    html = render_snapshot(trace[1])
    assert html.count('class="cell"') == 2
    assert CONFIG.colors["comparing"] in html
    swap_html = render_snapshot(trace[2])
    assert CONFIG.colors["swapping"] in swap_html


def test_highlight_precedence_prefers_stronger_marks() -> None:
    sb = SnapshotBuilder(StructureKind.ARRAY, [1])
    sb.mark_sorted(0)
    sb.compare(0)
    html = render_snapshot(sb.build())
    assert CONFIG.colors["comparing"] in html
    assert CONFIG.colors["sorted"] not in html


def test_pointers_are_labelled() -> None:
    sb = SnapshotBuilder(StructureKind.ARRAY, [5, 6, 7])
    sb.point("L", 0)
    sb.point("R", 2)
    html = render_snapshot(sb.build())
    assert ">L</text>" in html
    assert ">R</text>" in html


def test_grid_uses_row_and_column_labels_but_hides_them_from_overlay() -> None:
    trace = materialize(lcs("AB", "B"))
    html = render_snapshot(trace[1])
    assert '<table class="dp-grid"' in html
    assert 'data-cell="1,1"' in html
    assert "<th>A</th>" in html
    assert "overlay-panel" not in html


def test_graph_marks_nodes_and_active_edge(bfs_graph) -> None:
    trace = materialize(bfs(bfs_graph, "A"))
    html = render_snapshot(trace[2])
    assert html.count('<g class="node"') == 7
    assert 'marker-end="url(#arrow)"' in html
    assert f'stroke="{CONFIG.colors["active"]}" stroke-width="{CONFIG.edge_width * 2}"' in html
    assert "overlay-panel" in html


def test_graph_shows_non_unit_weights(weighted_graph) -> None:
    sb = SnapshotBuilder(StructureKind.GRAPH, weighted_graph)
    html = render_snapshot(sb.build())
    assert ">10</text>" in html
    assert "marker-end" not in html


def test_empty_structures_render_placeholders() -> None:
    tree = render_snapshot(SnapshotBuilder(StructureKind.TREE, {"root": None, "nodes": {}}).build())
    assert "(empty tree)" in tree
    stack = render_snapshot(SnapshotBuilder(StructureKind.STACK, []).build())
    assert "(empty stack)" in stack


def test_linked_list_shows_next_targets() -> None:
    data = {"head": 1, "nodes": {0: {"value": 10, "next": None}, 1: {"value": 20, "next": 0}}}
    html = render_snapshot(SnapshotBuilder(StructureKind.LINKED_LIST, data).build())
    assert "→ 10" in html
    assert "→ null" in html
    assert "head" in html


def test_overlay_formats_infinity_and_none() -> None:
    sb = SnapshotBuilder(StructureKind.ARRAY, [None])
    sb.overlay["distances"] = {"A": 0, "B": float("inf")}
    html = render_snapshot(sb.build())
    assert "B: ∞" in html
    assert "·" in html


def test_unknown_kind_falls_back_to_repr() -> None:
    html = render_snapshot(Snapshot(kind="mystery", structure={"x": 1}))
    assert "<pre" in html
    assert "&#x27;x&#x27;" in html


# ---------------------------------------------------------------------------
# Control panels
# ---------------------------------------------------------------------------
def test_playback_controls_disabled_when_idle() -> None:
    html = playback_controls()
    assert 'data-state="idle"' in html
    assert "disabled" in html


def test_playback_controls_show_step_and_complete_badge() -> None:
    html = playback_controls(PlaybackState.COMPLETE, index=6, total_steps=7, speed_ms=150)
    assert '<span id="current-step">7</span>' in html
    assert "COMPLETE" in html
    assert '<option value="fast" selected>' in html


def test_algorithm_selector_groups_by_family() -> None:
    html = algorithm_selector(list(REGISTRY.values()), selected_key="dfs")
    assert '<optgroup label="Graphs">' in html
    assert '<optgroup label="Dynamic Programming">' in html
    assert 'value="dfs" selected' in html
    assert 'id="btn-run"' in html


def test_input_form_renders_field_kinds() -> None:
    html = input_form(REGISTRY["bfs"])
    assert "<textarea" in html
    assert 'type="checkbox"' in html
    assert 'id="btn-random"' in html
    assert 'id="btn-random"' in input_form(REGISTRY["bubble_sort"])
    assert 'id="btn-random"' not in input_form(REGISTRY["knapsack"])


def test_pseudocode_viewer_highlights_current_line() -> None:
    html = pseudocode_viewer(["a", "b", "c"], current_line=1, algo_label="X")
    assert html.count("code-line highlight") == 1
    assert "&lt;" in pseudocode_viewer(["x < y"])


def test_result_and_message_panels() -> None:
    assert result_panel(None) == ""
    html = result_panel({"found": True, "structure": {"root": 0}})
    assert "found" in html
    assert "structure" not in html
    assert "&lt;b&gt;" in message_panel("<b>")


def test_analytics_and_comparison_panels() -> None:
    left = materialize(bubble_sort([3, 2, 1]), label="Bubble")
    right = materialize(bubble_sort([1, 2, 3]), label="Sorted")
    assert "Bubble" in analytics_panel(left.metrics)
    html = comparison_panel(compare(left, right))
    assert "Wall Time" in html
    assert "👑 Sorted" in html
