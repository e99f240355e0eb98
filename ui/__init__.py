"""
ui/
---
Presentation layer.

    from ui import render_snapshot
    from ui import playback_controls, algorithm_selector, …
"""

from ui.render import render_snapshot, RenderConfig, SnapshotRenderer

from ui.controls import (
    playback_controls,
    algorithm_selector,
    input_form,
    pseudocode_viewer,
    message_panel,
    result_panel,
    analytics_panel,
    comparison_panel,
)

__all__ = [
    "render_snapshot",
    "RenderConfig",
    "SnapshotRenderer",
    "playback_controls",
    "algorithm_selector",
    "input_form",
    "pseudocode_viewer",
    "message_panel",
    "result_panel",
    "analytics_panel",
    "comparison_panel",
]
