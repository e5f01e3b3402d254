"""
dwellkey/core/fsm.py — Validated per-target state transitions for DwellKey.

Holds the explicit IDLE / DWELLING / COOLDOWN transition map, a bounded
transition history (last 50) and structured logging of every move.
The dwell engine owns one :class:`TransitionLog` and routes every target
state change through it.
"""

from __future__ import annotations

import logging
import time
from typing import Callable

from dwellkey.core.constants import TargetState

logger = logging.getLogger(__name__)


# ──────────────────────────────────────────────────────────────
# Custom exception
# ──────────────────────────────────────────────────────────────

class InvalidTransitionError(RuntimeError):
    """
    Raised when a requested target transition is not in the valid map.

    Only reachable through an internal bookkeeping bug; the dwell engine
    never produces an illegal transition from public input.

    Args:
        from_state: State of the target at the time of the illegal attempt.
        to_state: Requested (invalid) target state.
        reason: Caller-supplied reason string.
    """

    def __init__(
        self,
        from_state: TargetState,
        to_state: TargetState,
        reason: str = "",
    ) -> None:
        self.from_state = from_state
        self.to_state = to_state
        self.reason = reason
        super().__init__(
            f"Invalid transition {from_state.value} → {to_state.value}"
            + (f" (reason: {reason})" if reason else "")
        )


# ──────────────────────────────────────────────────────────────
# Valid transition map — single source of truth
# ──────────────────────────────────────────────────────────────

_VALID_TRANSITIONS: dict[TargetState, list[TargetState]] = {
    TargetState.IDLE: [
        TargetState.DWELLING,
        TargetState.COOLDOWN,   # click without a dwell
    ],
    TargetState.DWELLING: [
        TargetState.IDLE,       # pointer left
        TargetState.COOLDOWN,   # deadline reached or clicked
    ],
    TargetState.COOLDOWN: [
        TargetState.IDLE,
        TargetState.COOLDOWN,   # clicked again while cooling down
    ],
}

# Maximum number of transition records kept in history
_MAX_HISTORY = 50


def can_transition(from_state: TargetState, to_state: TargetState) -> bool:
    """Return True if ``from_state → to_state`` is in the valid map."""
    return to_state in _VALID_TRANSITIONS.get(from_state, [])


class TransitionLog:
    """
    Validates and records target state transitions.

    Args:
        on_transition: Optional callback invoked after every successful
            transition with signature ``(target_id, from_state, to_state, reason)``.
    """

    def __init__(
        self,
        on_transition: Callable[[str, TargetState, TargetState, str], None] | None = None,
    ) -> None:
        self._history: list[dict] = []
        self._external_callback = on_transition

    def transition(
        self,
        target_id: str,
        from_state: TargetState,
        to_state: TargetState,
        reason: str = "",
    ) -> TargetState:
        """
        Validate a transition, record it and return the new state.

        Raises:
            InvalidTransitionError: If the transition is not in the valid map.
        """
        if not can_transition(from_state, to_state):
            raise InvalidTransitionError(from_state, to_state, reason)

        self._history.append({
            "target": target_id,
            "from": from_state.value,
            "to": to_state.value,
            "reason": reason,
            "timestamp": time.time(),
        })
        if len(self._history) > _MAX_HISTORY:
            self._history.pop(0)

        logger.debug(
            "Target %s: %s → %s%s",
            target_id,
            from_state.value,
            to_state.value,
            f" [{reason}]" if reason else "",
        )

        if self._external_callback is not None:
            try:
                self._external_callback(target_id, from_state, to_state, reason)
            except Exception as exc:  # noqa: BLE001
                logger.warning("Transition callback raised: %s", exc)
        return to_state

    def get_history(self) -> list[dict]:
        """
        Return a copy of the last (up to 50) transition records, oldest first.

        Each record has keys ``target``, ``from``, ``to``, ``reason`` and
        ``timestamp`` (Unix epoch float).
        """
        return list(self._history)

    def __len__(self) -> int:
        return len(self._history)
