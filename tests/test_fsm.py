"""
tests/test_fsm.py — pytest unit tests for dwellkey.core.fsm.

Covers the per-target transition map, the bounded history and the
external transition callback.
"""

from __future__ import annotations

import pytest

from dwellkey.core.constants import TargetState
from dwellkey.core.fsm import InvalidTransitionError, TransitionLog, can_transition


# ──────────────────────────────────────────────────────────────
# Transition map mirror (must stay in sync with dwellkey/core/fsm.py)
# ──────────────────────────────────────────────────────────────

VALID_TRANSITIONS: dict[TargetState, list[TargetState]] = {
    TargetState.IDLE: [TargetState.DWELLING, TargetState.COOLDOWN],
    TargetState.DWELLING: [TargetState.IDLE, TargetState.COOLDOWN],
    TargetState.COOLDOWN: [TargetState.IDLE, TargetState.COOLDOWN],
}

INVALID_TRANSITIONS: list[tuple[TargetState, TargetState]] = [
    (s, t)
    for s in TargetState
    for t in TargetState
    if t not in VALID_TRANSITIONS[s]
]


@pytest.fixture()
def log() -> TransitionLog:
    return TransitionLog()


class TestTransitionMap:
    """Every edge in the map is accepted; everything else is rejected."""

    def test_every_valid_edge(self, log: TransitionLog) -> None:
        for from_state, targets in VALID_TRANSITIONS.items():
            for to_state in targets:
                assert can_transition(from_state, to_state)
                assert log.transition("t", from_state, to_state, "test") is to_state

    @pytest.mark.parametrize("from_state,to_state", INVALID_TRANSITIONS)
    def test_invalid_edges_raise(
        self, log: TransitionLog, from_state: TargetState, to_state: TargetState
    ) -> None:
        assert not can_transition(from_state, to_state)
        with pytest.raises(InvalidTransitionError) as exc_info:
            log.transition("t", from_state, to_state, "bad")
        err = exc_info.value
        assert err.from_state is from_state
        assert err.to_state is to_state
        assert "bad" in str(err)

    def test_rejected_transition_not_recorded(self, log: TransitionLog) -> None:
        with pytest.raises(InvalidTransitionError):
            log.transition("t", TargetState.COOLDOWN, TargetState.DWELLING)
        assert log.get_history() == []


class TestHistory:
    """History keeps the last 50 records, oldest first."""

    def test_record_fields(self, log: TransitionLog) -> None:
        log.transition("key:a", TargetState.IDLE, TargetState.DWELLING, "pointer_enter")
        (record,) = log.get_history()
        assert record["target"] == "key:a"
        assert record["from"] == "IDLE"
        assert record["to"] == "DWELLING"
        assert record["reason"] == "pointer_enter"
        assert isinstance(record["timestamp"], float)

    def test_bounded_to_50(self, log: TransitionLog) -> None:
        for i in range(60):
            log.transition(f"t{i}", TargetState.IDLE, TargetState.DWELLING)
        history = log.get_history()
        assert len(history) == 50
        assert history[0]["target"] == "t10"
        assert history[-1]["target"] == "t59"

    def test_history_is_a_copy(self, log: TransitionLog) -> None:
        log.transition("t", TargetState.IDLE, TargetState.DWELLING)
        log.get_history().clear()
        assert len(log) == 1


class TestExternalCallback:

    def test_callback_receives_transition(self) -> None:
        seen: list[tuple] = []
        log = TransitionLog(on_transition=lambda *args: seen.append(args))
        log.transition("t", TargetState.IDLE, TargetState.COOLDOWN, "click")
        assert seen == [("t", TargetState.IDLE, TargetState.COOLDOWN, "click")]

    def test_callback_exception_swallowed(self) -> None:
        def _boom(*_args) -> None:
            raise RuntimeError("listener failed")

        log = TransitionLog(on_transition=_boom)
        assert log.transition("t", TargetState.IDLE, TargetState.DWELLING) is TargetState.DWELLING
        assert len(log) == 1
