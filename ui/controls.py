"""
controls.py — UI Control Panels
=================================
Every UI panel is a pure function that takes state and returns HTML.

Panels:
  • playback_controls   – play/pause/next/prev/rewind/speed + step counter
  • algorithm_selector  – dropdown grouped by family
  • input_form          – one input per FormField of the selected algorithm
  • pseudocode_viewer   – with live line highlighting
  • message_panel       – the current snapshot's narration
  • result_panel        – the final snapshot's result
  • analytics_panel     – steps, comparisons, swaps, wall time, …
  • comparison_panel    – side-by-side metrics of two runs

Panels take playback / registry values as arguments and never touch the
controller.  Output is plain HTML; main.py drops it into the page or
returns it from the JSON routes for the browser to swap in.
"""

from html import escape
from typing import Any, Dict, List, Mapping, Optional

from algorithms import AlgoInfo
from engine import ComparisonResult, PlaybackState, SPEED_PRESETS, TraceMetrics


# ---------------------------------------------------------------------------
# Playback Controls
# ---------------------------------------------------------------------------
def playback_controls(
    state: PlaybackState = PlaybackState.IDLE,
    index: int = 0,
    total_steps: int = 0,
    speed_ms: int = SPEED_PRESETS["medium"],
) -> str:
    playing = state is PlaybackState.PLAYING
    play_icon = "⏸" if playing else "▶"
    play_label = "Pause" if playing else "Play"
    disabled = "disabled" if state is PlaybackState.IDLE else ""
    shown = index + 1 if total_steps else 0

    options = []
    for name, ms in SPEED_PRESETS.items():
        sel = "selected" if ms == speed_ms else ""
        options.append(f'<option value="{name}" {sel}>{name.capitalize()} ({ms} ms)</option>')

    return f"""
    <div class="panel playback-controls" data-state="{state.value}">
      <div class="button-row">
        <button id="btn-rewind" title="Rewind to start" {disabled}>⏮</button>
        <button id="btn-prev" title="Previous step" {disabled}>◀</button>
        <button id="btn-play" title="{play_label}" {disabled}>{play_icon}</button>
        <button id="btn-next" title="Next step" {disabled}>▶</button>
        <button id="btn-end" title="Jump to end" {disabled}>⏭</button>
        <button id="btn-reset" title="Reset">↺</button>
      </div>
      <div class="step-info">
        Step <span id="current-step">{shown}</span> / <span id="total-steps">{total_steps}</span>
        {' <span class="finished-badge">COMPLETE</span>' if state is PlaybackState.COMPLETE else ''}
      </div>
      <input type="range" id="scrubber" min="0" max="{max(total_steps - 1, 0)}" value="{index}" {disabled}>
      <div class="speed-control">
        <label>Speed:</label>
        <select id="speed-selector">
          {''.join(options)}
        </select>
      </div>
    </div>
    """


# ---------------------------------------------------------------------------
# Algorithm Selector
# ---------------------------------------------------------------------------
def algorithm_selector(algorithms: List[AlgoInfo], selected_key: str = "binary_search") -> str:
    groups: Dict[str, List[str]] = {}
    for algo in algorithms:
        sel = "selected" if algo.key == selected_key else ""
        groups.setdefault(algo.family, []).append(
            f'<option value="{algo.key}" {sel}>{escape(algo.label)} ({escape(algo.complexity_time)})</option>'
        )

    optgroups = [
        f'<optgroup label="{escape(family.replace("-", " ").title())}">{"".join(opts)}</optgroup>'
        for family, opts in groups.items()
    ]

    return f"""
    <div class="panel algorithm-selector">
      <select id="algo-selector">
        {''.join(optgroups)}
      </select>
      <button id="btn-run" class="btn-primary">▶ Run Algorithm</button>
    </div>
    """


# ---------------------------------------------------------------------------
# Input Form
# ---------------------------------------------------------------------------
def input_form(info: Optional[AlgoInfo], values: Optional[Mapping[str, Any]] = None) -> str:
    if info is None:
        return '<div class="panel input-form"><p class="placeholder">Select an algorithm.</p></div>'
    values = values if values is not None else info.sample_form()

    rows = []
    for f in info.fields:
        raw = values.get(f.name, f.default)
        if f.kind == "checkbox":
            checked = "checked" if str(raw).lower() in ("1", "true", "on", "yes") else ""
            control = f'<input type="checkbox" name="{f.name}" {checked}>'
        elif "\n" in str(raw) or f.name == "graph":
            control = f'<textarea name="{f.name}" rows="7">{escape(str(raw))}</textarea>'
        else:
            control = f'<input type="text" name="{f.name}" value="{escape(str(raw))}">'
        rows.append(f'<label data-field="{f.name}">{escape(f.label)}: {control}</label>')

    random_btn = '<button id="btn-random" class="btn-secondary">🎲 Random input</button>' if info.has_random_input else ""

    return f"""
    <form class="panel input-form" id="input-form" data-algo="{info.key}">
      {''.join(rows)}
      {random_btn}
      <div class="form-error" id="form-error"></div>
    </form>
    """


# ---------------------------------------------------------------------------
# Pseudocode Viewer
# ---------------------------------------------------------------------------
def pseudocode_viewer(
    pseudocode_lines: List[str],
    current_line: Optional[int] = None,
    algo_label: str = "",
) -> str:
    if not pseudocode_lines:
        return """
        <div class="code-block">
          <div style="color: #7d8590; padding: 20px; text-align: center;">
            Select an algorithm to view pseudocode
          </div>
        </div>
        """

    lines_html = []
    for i, line in enumerate(pseudocode_lines):
        highlight = "highlight" if i == current_line else ""
        lines_html.append(f'<div class="code-line {highlight}" data-line="{i}">{escape(line)}</div>')

    title = f'<div class="code-title">{escape(algo_label)}</div>' if algo_label else ""
    return f"""
    <div class="code-block">
      {title}{''.join(lines_html)}
    </div>
    """


# ---------------------------------------------------------------------------
# Narration & Result
# ---------------------------------------------------------------------------
def message_panel(message: str = "") -> str:
    if not message:
        message = "▶ Click <strong>Run Algorithm</strong> to see what happens at each step."
        return f'<div class="explanation-text">{message}</div>'
    return f'<div class="explanation-text">{escape(message)}</div>'


def result_panel(result: Optional[Dict[str, Any]] = None) -> str:
    if result is None:
        return ""
    rows = "".join(
        f"<tr><td>{escape(str(k))}:</td><td><strong>{escape(str(v))}</strong></td></tr>"
        for k, v in result.items()
        if k != "structure"
    )
    return f"""
    <div class="panel result-panel">
      <h3>✅ Result</h3>
      <table>{rows}</table>
    </div>
    """


# ---------------------------------------------------------------------------
# Analytics Panel
# ---------------------------------------------------------------------------
def analytics_panel(metrics: Optional[TraceMetrics] = None) -> str:
    if metrics is None:
        return """
        <div class="panel analytics-panel">
          <h3>📊 Analytics</h3>
          <p class="placeholder">Run an algorithm to see metrics.</p>
        </div>
        """

    return f"""
    <div class="panel analytics-panel">
      <h3>📊 Analytics: {escape(metrics.label)}</h3>
      <table>
        <tr><td>Total Steps:</td><td><strong>{metrics.total_steps}</strong></td></tr>
        <tr><td>Comparison steps:</td><td><strong>{metrics.comparisons}</strong></td></tr>
        <tr><td>Swap steps:</td><td><strong>{metrics.swaps}</strong></td></tr>
        <tr><td>Wall Time:</td><td><strong>{metrics.wall_time_ms:.2f} ms</strong></td></tr>
        <tr><td>Memory:</td><td><strong>{metrics.memory_bytes // 1024} KB</strong></td></tr>
      </table>
    </div>
    """


# ---------------------------------------------------------------------------
# Comparison Panel (side-by-side)
# ---------------------------------------------------------------------------
def comparison_panel(comp: Optional[ComparisonResult] = None) -> str:
    if comp is None:
        return """
        <div class="panel comparison-panel">
          <h3>⚖️ Compare</h3>
          <p class="placeholder">Pick two algorithms from one family to race them on the same input.</p>
        </div>
        """

    left, right = comp.left, comp.right

    def badge(winner: str) -> str:
        return "🟰 Tie" if winner == "tie" else f"👑 {escape(winner)}"

    rows = [
        ("Steps", left.total_steps, right.total_steps, badge(comp.winner_steps)),
        ("Comparison steps", left.comparisons, right.comparisons, badge(comp.winner_comparisons)),
        ("Swap steps", left.swaps, right.swaps, badge(comp.winner_swaps)),
        ("Wall Time", f"{left.wall_time_ms:.2f} ms", f"{right.wall_time_ms:.2f} ms", "—"),
    ]
    body = "".join(
        f"<tr><td>{name}</td><td>{lv}</td><td>{rv}</td><td>{win}</td></tr>"
        for name, lv, rv, win in rows
    )
    return f"""
    <div class="panel comparison-panel">
      <h3>⚖️ Comparison: {escape(left.label)} vs {escape(right.label)}</h3>
      <table class="comparison-table">
        <tr><th>Metric</th><th>{escape(left.label)}</th><th>{escape(right.label)}</th><th>Winner</th></tr>
        {body}
      </table>
    </div>
    """
