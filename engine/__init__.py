"""
engine/
-------
Materialization & playback layer.

    from engine import materialize, PlaybackController, PollingScheduler
"""

from engine.timers   import PollingScheduler, Scheduler, TimerHandle
from engine.trace    import (
    Trace, TraceMetrics, ComparisonResult, ProducerContractError, materialize, compare,
)
from engine.playback import PlaybackController, PlaybackState, SPEED_PRESETS, MIN_SPEED_MS

__all__ = [
    "PollingScheduler",
    "Scheduler",
    "TimerHandle",
    "Trace",
    "TraceMetrics",
    "ComparisonResult",
    "ProducerContractError",
    "materialize",
    "compare",
    "PlaybackController",
    "PlaybackState",
    "SPEED_PRESETS",
    "MIN_SPEED_MS",
]
