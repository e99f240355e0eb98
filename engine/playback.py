"""
playback.py — Playback Controller
==================================
The controller is the ONLY object the UI drives during a run.  It owns
the installed Trace, the current index, the speed, and at most one
pending timer, and exposes play / pause / seek / speed / reset.

State machine:
    IDLE      →  run() / load()          →  READY     (index 0)
    READY     →  play()                  →  PLAYING
    PAUSED    →  play()                  →  PLAYING
    PLAYING   →  pause()                 →  PAUSED
    PLAYING   →  tick reaches last index →  COMPLETE
    any       →  reset()                 →  READY (trace kept) / IDLE
    any       →  run() / load()          →  READY (new trace, timer cancelled)
    not PLAYING → seek(i)                →  READY at 0, COMPLETE at last, PAUSED otherwise

Misuse (play without a trace, pause while paused, seek while playing,
out-of-range seek) is a no-op that returns False.

Timing:
  Ticks come from an injected scheduler (see engine.timers).  Each tick
  re-arms a one-shot timer with the speed in force at that moment, so
  set_speed() takes effect from the next tick.  Every arm / cancel bumps a
  generation token and a tick whose token is stale is ignored, so at most
  one timer is ever effective.

Thread safety:
  This class is NOT thread-safe.  Drive it from one thread (or one event
  loop); the web layer serialises access per session with a lock.
"""

import logging
from enum import Enum
from typing import Any, Callable, Iterable, Optional

from algorithms.snapshot import Snapshot
from engine.timers import Scheduler, TimerHandle
from engine.trace import Trace, materialize

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class PlaybackState(Enum):
    IDLE     = "idle"
    READY    = "ready"
    PLAYING  = "playing"
    PAUSED   = "paused"
    COMPLETE = "complete"


# ---------------------------------------------------------------------------
# Speed presets (milliseconds per step)
# ---------------------------------------------------------------------------
SPEED_PRESETS = {
    "slow":   1000,   # teaching mode
    "medium": 400,
    "fast":   150,    # demo mode
    "turbo":  50,
}
MIN_SPEED_MS = 20


# ---------------------------------------------------------------------------
# Controller
# ---------------------------------------------------------------------------
class PlaybackController:
    """
    Attributes:
        state     : Current PlaybackState.
        trace     : The installed Trace (None while IDLE).
        index     : Index into `trace` that is currently displayed.
        speed_ms  : Milliseconds between auto-advance ticks.
        on_change : Optional callback(Snapshot | None, PlaybackState) fired whenever
                    the displayed snapshot or the state changes.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        speed_ms: int = SPEED_PRESETS["medium"],
        on_change: Optional[Callable[[Optional[Snapshot], PlaybackState], None]] = None,
    ):
        self._scheduler = scheduler
        self._timer: Optional[TimerHandle] = None
        self._generation = 0
        self.trace: Optional[Trace] = None
        self.index: int = 0
        self.state: PlaybackState = PlaybackState.IDLE
        self.speed_ms: int = max(MIN_SPEED_MS, int(speed_ms))
        self.on_change = on_change

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def run(self, producer: Callable[..., Iterable[Snapshot]], label: str = "", **inputs: Any) -> Trace:
        """
        Invoke `producer(**inputs)`, drain it, install the resulting trace.

        Any pending tick is cancelled first.  If the drain raises, the
        previous trace stays installed (a playing controller is left PAUSED).
        """
        self._cancel_timer()
        if self.state is PlaybackState.PLAYING:
            self.state = PlaybackState.PAUSED
            self._notify()
        trace = materialize(producer(**inputs), label=label or getattr(producer, "__name__", ""))
        self.load(trace)
        return trace

    def load(self, trace: Trace) -> None:
        """Install an already materialized trace; READY at index 0."""
        self._cancel_timer()
        self.trace = trace
        self.index = 0
        self.state = PlaybackState.READY
        logger.debug("Installed trace %r (%d snapshots)", trace.label, len(trace))
        self._notify()

    def reset(self, keep_trace: bool = True) -> None:
        """Back to READY at index 0, or to IDLE when `keep_trace` is False."""
        self._cancel_timer()
        self.index = 0
        if keep_trace and self.trace is not None:
            self.state = PlaybackState.READY
        else:
            self.trace = None
            self.state = PlaybackState.IDLE
        logger.debug("Reset to %s", self.state.value)
        self._notify()

    def close(self) -> None:
        """Teardown: release the timer.  A playing controller ends PAUSED."""
        self._cancel_timer()
        if self.state is PlaybackState.PLAYING:
            self.state = PlaybackState.PAUSED

    # ------------------------------------------------------------------
    # Play / Pause
    # ------------------------------------------------------------------
    def play(self) -> bool:
        if self.trace is None or self.state not in (PlaybackState.READY, PlaybackState.PAUSED):
            return False
        if self.index >= len(self.trace) - 1:
            self.state = PlaybackState.COMPLETE
            self._notify()
            return False
        self.state = PlaybackState.PLAYING
        self._arm()
        self._notify()
        return True

    def pause(self) -> bool:
        if self.state is not PlaybackState.PLAYING:
            return False
        self._cancel_timer()
        self.state = PlaybackState.PAUSED
        self._notify()
        return True

    def toggle_play(self) -> bool:
        if self.state is PlaybackState.PLAYING:
            return self.pause()
        return self.play()

    # ------------------------------------------------------------------
    # Speed
    # ------------------------------------------------------------------
    def set_speed(self, ms: float) -> None:
        """Any state.  Applies from the next scheduled tick."""
        self.speed_ms = max(MIN_SPEED_MS, int(ms))

    def set_speed_preset(self, preset: str) -> None:
        if preset not in SPEED_PRESETS:
            raise ValueError(f"Unknown speed preset: {preset}")
        self.set_speed(SPEED_PRESETS[preset])

    # ------------------------------------------------------------------
    # Navigation (refused while PLAYING)
    # ------------------------------------------------------------------
    def seek(self, index: int) -> bool:
        if self.trace is None or self.state is PlaybackState.PLAYING:
            return False
        if not 0 <= index < len(self.trace):
            return False
        self.index = index
        self._settle()
        self._notify()
        return True

    def next_step(self) -> bool:
        return self.seek(self.index + 1)

    def prev_step(self) -> bool:
        return self.seek(self.index - 1)

    def rewind(self) -> bool:
        return self.seek(0)

    def jump_to_end(self) -> bool:
        if self.trace is None:
            return False
        return self.seek(len(self.trace) - 1)

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def current(self) -> Optional[Snapshot]:
        if self.trace is None:
            return None
        return self.trace[self.index]

    @property
    def total_steps(self) -> int:
        return len(self.trace) if self.trace is not None else 0

    @property
    def is_playing(self) -> bool:
        return self.state is PlaybackState.PLAYING

    @property
    def is_complete(self) -> bool:
        return self.state is PlaybackState.COMPLETE

    @property
    def has_timer(self) -> bool:
        return self._timer is not None

    def status(self) -> dict:
        return {
            "state":       self.state.value,
            "index":       self.index,
            "total_steps": self.total_steps,
            "speed_ms":    self.speed_ms,
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _settle(self) -> None:
        last = len(self.trace) - 1
        if self.index == 0:
            self.state = PlaybackState.READY
        elif self.index == last:
            self.state = PlaybackState.COMPLETE
        else:
            self.state = PlaybackState.PAUSED

    def _arm(self) -> None:
        self._cancel_timer()
        token = self._generation
        self._timer = self._scheduler.call_later(self.speed_ms / 1000.0, lambda: self._tick(token))

    def _tick(self, token: int) -> None:
        if token != self._generation or self.state is not PlaybackState.PLAYING:
            return
        self._timer = None
        last = len(self.trace) - 1
        if self.index < last:
            self.index += 1
        if self.index >= last:
            self.state = PlaybackState.COMPLETE
            self._generation += 1
        else:
            self._arm()
        self._notify()

    def _cancel_timer(self) -> None:
        self._generation += 1
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _notify(self) -> None:
        if self.on_change is not None:
            self.on_change(self.current, self.state)
