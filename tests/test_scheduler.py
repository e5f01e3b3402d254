"""
tests/test_scheduler.py — Unit tests for the dwell timer surfaces.
"""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from dwellkey.dwell.scheduler import ManualScheduler, TkScheduler


class TestManualScheduler:
    """Virtual clock ordering and nested scheduling."""

    def test_runs_in_due_order(self) -> None:
        sched = ManualScheduler()
        order: list[str] = []
        sched.call_later(30, lambda: order.append("c"))
        sched.call_later(10, lambda: order.append("a"))
        sched.call_later(20, lambda: order.append("b"))
        assert sched.advance(25) == 2
        assert order == ["a", "b"]
        assert sched.now() == 25
        sched.advance(5)
        assert order == ["a", "b", "c"]

    def test_ties_run_in_scheduling_order(self) -> None:
        sched = ManualScheduler()
        order: list[int] = []
        for i in range(5):
            sched.call_later(10, lambda i=i: order.append(i))
        sched.advance(10)
        assert order == [0, 1, 2, 3, 4]

    def test_clock_reads_due_time_inside_callback(self) -> None:
        sched = ManualScheduler(start_ms=100)
        seen: list[float] = []
        sched.call_later(40, lambda: seen.append(sched.now()))
        sched.advance(500)
        assert seen == [140]
        assert sched.now() == 600

    def test_nested_callbacks_within_window_run(self) -> None:
        sched = ManualScheduler()
        seen: list[float] = []

        def _tick() -> None:
            seen.append(sched.now())
            if len(seen) < 4:
                sched.call_later(10, _tick)

        sched.call_later(10, _tick)
        sched.advance(100)
        assert seen == [10, 20, 30, 40]
        assert sched.pending == 0

    def test_negative_delay_runs_now(self) -> None:
        sched = ManualScheduler()
        hit = MagicMock()
        sched.call_later(-5, hit)
        sched.advance(0)
        hit.assert_called_once_with()

    def test_cannot_go_backwards(self) -> None:
        sched = ManualScheduler()
        with pytest.raises(ValueError):
            sched.advance(-1)
        sched.advance(50)
        sched.advance_to(10)
        assert sched.now() == 50


class TestTkScheduler:
    """Adapter over a Tk widget's after()."""

    def test_call_later_uses_after(self) -> None:
        widget = MagicMock()
        cb = MagicMock()
        TkScheduler(widget).call_later(799.6, cb)
        widget.after.assert_called_once_with(800, cb)

    def test_negative_delay_clamped(self) -> None:
        widget = MagicMock()
        TkScheduler(widget).call_later(-3, MagicMock())
        assert widget.after.call_args[0][0] == 0

    def test_now_is_monotonic_ms(self) -> None:
        with patch("dwellkey.dwell.scheduler.time.monotonic", return_value=12.5):
            assert TkScheduler(MagicMock()).now() == 12500.0
