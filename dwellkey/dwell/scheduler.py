"""
dwellkey/dwell/scheduler.py — Timer surfaces the dwell engine schedules on.

The engine only needs a monotonic millisecond clock and a way to run a
callback later. It never cancels a scheduled callback: stale callbacks are
filtered by generation counters inside the engine, so neither scheduler
exposes a cancel primitive.
"""

from __future__ import annotations

import heapq
import itertools
import logging
import time
from typing import Any, Callable, Protocol

logger = logging.getLogger(__name__)


class Scheduler(Protocol):
    """Minimal timing interface consumed by :class:`~dwellkey.dwell.engine.DwellEngine`."""

    def now(self) -> float:
        """Return the current monotonic time in milliseconds."""
        ...

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> None:
        """Run *callback* once, no earlier than *delay_ms* from now."""
        ...


class ManualScheduler:
    """
    Deterministic virtual-time scheduler.

    Time only moves when :meth:`advance` is called. Due callbacks run in
    order of due time, ties in the order they were scheduled. Callbacks that
    schedule further callbacks inside the advanced window are run in the
    same call.

    Args:
        start_ms: Initial value of the virtual clock.
    """

    def __init__(self, start_ms: float = 0.0) -> None:
        self._now = float(start_ms)
        self._queue: list[tuple[float, int, Callable[[], None]]] = []
        self._seq = itertools.count()

    def now(self) -> float:
        return self._now

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> None:
        due = self._now + max(0.0, float(delay_ms))
        heapq.heappush(self._queue, (due, next(self._seq), callback))

    @property
    def pending(self) -> int:
        """Number of callbacks not yet run (stale ones included)."""
        return len(self._queue)

    def advance(self, ms: float) -> int:
        """
        Move the clock forward by *ms*, running every callback that falls due.

        Returns:
            Number of callbacks executed.
        """
        if ms < 0:
            raise ValueError(f"Cannot move virtual time backwards ({ms} ms)")
        return self.advance_to(self._now + ms)

    def advance_to(self, target_ms: float) -> int:
        """Move the clock to *target_ms* (never backwards), running due callbacks."""
        ran = 0
        while self._queue and self._queue[0][0] <= target_ms:
            due, _, callback = heapq.heappop(self._queue)
            self._now = max(self._now, due)
            callback()
            ran += 1
        self._now = max(self._now, target_ms)
        return ran


class TkScheduler:
    """
    Scheduler backed by a Tk widget's event loop.

    All callbacks run on the Tk main thread through ``widget.after``, which
    keeps the engine single-threaded.

    Args:
        widget: Any object exposing Tk's ``after(ms, func)`` method.
    """

    def __init__(self, widget: Any) -> None:
        self._widget = widget

    def now(self) -> float:
        return time.monotonic() * 1000.0

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> None:
        self._widget.after(max(0, int(round(delay_ms))), callback)
