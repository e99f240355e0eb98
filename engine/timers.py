"""
timers.py — Scheduler Abstraction
==================================
The playback controller never sleeps and never owns a thread.  It asks a
scheduler for one-shot callbacks:

    handle = scheduler.call_later(delay_seconds, callback)
    handle.cancel()

`asyncio` event loops already satisfy this protocol.  For the Flask app
(request/response, no event loop) and for tests there is
PollingScheduler: callbacks fire from `poll()`, which the web layer
calls whenever the browser asks for fresh state.

PollingScheduler keeps virtual time while firing: a callback scheduled
from inside another callback is timed from the due time of the one that
scheduled it, so a late poll catches up tick by tick instead of drifting.
"""

import heapq
import itertools
import time
from typing import Callable, List, Optional, Protocol, Tuple


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle: ...


class PendingCall:
    """Handle returned by PollingScheduler.call_later."""

    __slots__ = ("due", "callback", "cancelled", "_scheduler")

    def __init__(self, due: float, callback: Callable[[], None], scheduler: "PollingScheduler"):
        self.due = due
        self.callback = callback
        self.cancelled = False
        self._scheduler = scheduler

    def cancel(self) -> None:
        if not self.cancelled:
            self.cancelled = True
            self._scheduler._live -= 1


class PollingScheduler:
    """
    Attributes:
        clock : zero-arg callable returning seconds (time.monotonic by default;
                tests inject a fake clock).
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self.clock = clock
        self._heap: List[Tuple[float, int, PendingCall]] = []
        self._seq = itertools.count()
        self._live = 0
        self._firing_at: Optional[float] = None

    def call_later(self, delay: float, callback: Callable[[], None]) -> PendingCall:
        base = self._firing_at if self._firing_at is not None else self.clock()
        call = PendingCall(base + max(0.0, delay), callback, self)
        heapq.heappush(self._heap, (call.due, next(self._seq), call))
        self._live += 1
        return call

    def poll(self) -> int:
        """Fire every callback that is due.  Returns how many fired."""
        now = self.clock()
        fired = 0
        while self._heap and self._heap[0][0] <= now:
            due, _, call = heapq.heappop(self._heap)
            if call.cancelled:
                continue
            call.cancelled = True
            self._live -= 1
            self._firing_at = due
            try:
                call.callback()
            finally:
                self._firing_at = None
            fired += 1
        return fired

    @property
    def pending(self) -> int:
        """Number of scheduled, not-yet-fired, not-cancelled callbacks."""
        return self._live

    def next_due(self) -> Optional[float]:
        for due, _, call in sorted(self._heap):
            if not call.cancelled:
                return due
        return None
