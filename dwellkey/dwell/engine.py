"""
dwellkey/dwell/engine.py — Dwell activation engine.

Turns sustained pointer presence (or an explicit click) over a registered
target into exactly one activation. One engine instance owns the single
active dwell session: at most one target dwells at a time, a target that
just activated is in cooldown and ignores hover, and clicks always work.

Timers are never cancelled. Every scheduled callback captures the target's
generation number and does nothing if the target has moved on since.
"""

from __future__ import annotations

import itertools
import logging
import math
from dataclasses import dataclass
from typing import Any, Callable, Optional, Protocol

from dwellkey.core.config import DwellConfig
from dwellkey.core.constants import TargetState
from dwellkey.core.fsm import TransitionLog
from dwellkey.core.logger import ActivationRecord
from dwellkey.dwell.scheduler import Scheduler

logger = logging.getLogger(__name__)

ActivationCallback = Callable[[], None]
ProgressSink = Callable[[str, float], None]
CooldownSink = Callable[[str, bool], None]


class AudioCue(Protocol):
    """Anything that can play a short activation tone."""

    def play(self) -> None:
        ...


@dataclass
class Target:
    """
    A control registered with the engine.

    Attributes:
        id: Unique target identifier (e.g. ``'key:a'``).
        callback: Invoked once per activation.
        state: Current :class:`TargetState`.
        cooldown_until: Engine time (ms) the cooldown ends, or None.
        generation: Stamp checked by scheduled callbacks; bumped on every
            session start, cancel and activation.
    """

    id: str
    callback: ActivationCallback
    state: TargetState = TargetState.IDLE
    cooldown_until: Optional[float] = None
    generation: int = 0


@dataclass(frozen=True)
class DwellSession:
    """The one live dwell. ``deadline_at`` is fixed when the session starts."""

    target_id: str
    started_at: float
    deadline_at: float
    generation: int

    @property
    def duration_ms(self) -> float:
        return self.deadline_at - self.started_at


class DwellEngine:
    """
    Per-target dwell state machine with one globally exclusive session.

    Args:
        scheduler: Clock and timer surface (see :mod:`dwellkey.dwell.scheduler`).
        config: Initial timing parameters. Defaults to :class:`DwellConfig`.
        sound_enabled: Whether activations play the audio cue.
        chime: Optional audio cue; failures are swallowed.
        on_progress: Visual indicator sink, called as ``(target_id, fraction)``.
        on_cooldown: Called as ``(target_id, cooling)`` on cooldown entry/exit.
        event_log: Optional session journal, given an ``ActivationRecord``
            for every activation.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        config: DwellConfig | None = None,
        sound_enabled: bool = True,
        chime: AudioCue | None = None,
        on_progress: ProgressSink | None = None,
        on_cooldown: CooldownSink | None = None,
        event_log: Any = None,
    ) -> None:
        cfg = config or DwellConfig()
        self._scheduler = scheduler
        self._dwell_ms = float(cfg.dwell_ms)
        self._cooldown_ms = float(cfg.cooldown_ms)
        self._tick_ms = float(cfg.progress_tick_ms)
        self._dwell_enabled = bool(cfg.dwell_enabled)
        self._sound_enabled = sound_enabled

        self._chime = chime
        self._on_progress = on_progress
        self._on_cooldown = on_cooldown
        self._event_log = event_log

        self._targets: dict[str, Target] = {}
        self._session: Optional[DwellSession] = None
        self._activating: set[str] = set()
        self._generations = itertools.count(1)
        self._fsm = TransitionLog()

        logger.info(
            "DwellEngine ready (dwell=%.0fms, cooldown=%.0fms, dwell_mode=%s)",
            self._dwell_ms, self._cooldown_ms, self._dwell_enabled,
        )

    # ──────────────────────────────────────────
    # Configuration
    # ──────────────────────────────────────────

    def configure(
        self,
        dwell_duration_ms: float | None = None,
        cooldown_duration_ms: float | None = None,
        sound_enabled: bool | None = None,
        dwell_mode_enabled: bool | None = None,
    ) -> None:
        """
        Update global parameters for future sessions and cooldowns.

        A running session keeps its deadline and a running cooldown keeps
        its end time. Omitted arguments keep their current value; invalid
        durations are logged and ignored. Turning dwell mode off cancels
        the live session.
        """
        if dwell_duration_ms is not None:
            if _valid_duration(dwell_duration_ms, allow_zero=False):
                self._dwell_ms = float(dwell_duration_ms)
            else:
                logger.warning("Ignoring invalid dwell duration: %r", dwell_duration_ms)
        if cooldown_duration_ms is not None:
            if _valid_duration(cooldown_duration_ms, allow_zero=True):
                self._cooldown_ms = float(cooldown_duration_ms)
            else:
                logger.warning("Ignoring invalid cooldown duration: %r", cooldown_duration_ms)
        if sound_enabled is not None:
            self._sound_enabled = bool(sound_enabled)
        if dwell_mode_enabled is not None:
            self._dwell_enabled = bool(dwell_mode_enabled)
            if not self._dwell_enabled and self._session is not None:
                self._cancel_session("dwell_disabled")

        logger.info(
            "DwellEngine configured (dwell=%.0fms, cooldown=%.0fms, sound=%s, dwell_mode=%s)",
            self._dwell_ms, self._cooldown_ms, self._sound_enabled, self._dwell_enabled,
        )

    @property
    def dwell_duration_ms(self) -> float:
        return self._dwell_ms

    @property
    def cooldown_duration_ms(self) -> float:
        return self._cooldown_ms

    @property
    def sound_enabled(self) -> bool:
        return self._sound_enabled

    @property
    def dwell_mode_enabled(self) -> bool:
        return self._dwell_enabled

    # ──────────────────────────────────────────
    # Target registry
    # ──────────────────────────────────────────

    def register_target(self, target_id: str, callback: ActivationCallback) -> None:
        """
        Make *target_id* eligible for dwell and click activation.

        Re-registering an existing id swaps its callback and keeps its
        state, so a re-rendered control stays in cooldown.
        """
        existing = self._targets.get(target_id)
        if existing is not None:
            existing.callback = callback
            logger.debug("Target %s re-registered", target_id)
            return
        self._targets[target_id] = Target(id=target_id, callback=callback)
        logger.debug("Target %s registered", target_id)

    def unregister_target(self, target_id: str) -> None:
        """Forget *target_id*, tearing down its live session if it has one."""
        target = self._targets.get(target_id)
        if target is None:
            return
        if self._session is not None and self._session.target_id == target_id:
            self._session = None
            self._emit_progress(target_id, 0.0)
        # Pending timers see a missing target and do nothing.
        del self._targets[target_id]
        logger.debug("Target %s unregistered", target_id)

    def is_registered(self, target_id: str) -> bool:
        return target_id in self._targets

    @property
    def target_ids(self) -> list[str]:
        return list(self._targets)

    # ──────────────────────────────────────────
    # Pointer events
    # ──────────────────────────────────────────

    def pointer_enter(self, target_id: str) -> bool:
        """
        Start a dwell on *target_id* if allowed.

        Ignored when dwell mode is off, the target is unknown or cooling
        down, or any session is already live (first session wins, and a
        repeat enter on the dwelling target does not restart it).

        Returns:
            True if a new session started.
        """
        target = self._targets.get(target_id)
        if target is None:
            logger.debug("pointer_enter on unknown target %s ignored", target_id)
            return False
        if not self._dwell_enabled:
            return False
        if self._session is not None:
            if self._session.target_id != target_id:
                logger.debug(
                    "pointer_enter on %s ignored — %s is dwelling",
                    target_id, self._session.target_id,
                )
            return False

        now = self._scheduler.now()
        if self._in_cooldown(target, now):
            logger.debug("pointer_enter on %s ignored — cooling down", target_id)
            return False

        generation = next(self._generations)
        target.generation = generation
        duration = self._dwell_ms
        self._session = DwellSession(
            target_id=target_id,
            started_at=now,
            deadline_at=now + duration,
            generation=generation,
        )
        target.state = self._fsm.transition(
            target_id, target.state, TargetState.DWELLING, "pointer_enter"
        )

        self._scheduler.call_later(
            duration, lambda: self._on_deadline(target_id, generation)
        )
        self._emit_progress(target_id, 0.0)
        self._scheduler.call_later(
            self._tick_ms, lambda: self._on_tick(target_id, generation)
        )
        return True

    def pointer_leave(self, target_id: str) -> None:
        """Cancel the live session if it belongs to *target_id*."""
        if self._session is None or self._session.target_id != target_id:
            return
        self._cancel_session("pointer_leave")

    def pointer_down(self, target_id: str) -> None:
        """
        Click: activate *target_id* now, whatever the dwell mode.

        A dwell on a different target is left running.
        """
        target = self._targets.get(target_id)
        if target is None:
            logger.debug("pointer_down on unknown target %s ignored", target_id)
            return
        self._activate(target, source="click")

    def activate(self, target_id: str) -> None:
        """Activate *target_id* immediately. Unknown ids are ignored."""
        target = self._targets.get(target_id)
        if target is None:
            logger.debug("activate on unknown target %s ignored", target_id)
            return
        self._activate(target, source="click")

    # ──────────────────────────────────────────
    # Queries
    # ──────────────────────────────────────────

    @property
    def active_session(self) -> Optional[DwellSession]:
        return self._session

    @property
    def active_target(self) -> Optional[str]:
        """Id of the dwelling target, or None."""
        return self._session.target_id if self._session is not None else None

    def state_of(self, target_id: str) -> Optional[TargetState]:
        """Return the state of *target_id*, or None if it is not registered."""
        target = self._targets.get(target_id)
        return target.state if target is not None else None

    def cooldown_until(self, target_id: str) -> Optional[float]:
        target = self._targets.get(target_id)
        return target.cooldown_until if target is not None else None

    def progress(self, target_id: str) -> float:
        """Dwell completion in [0, 1] for *target_id* (0.0 when not dwelling)."""
        session = self._session
        if session is None or session.target_id != target_id:
            return 0.0
        return self._fraction(session, self._scheduler.now())

    def get_history(self) -> list[dict]:
        """Return the last (up to 50) target transitions, oldest first."""
        return self._fsm.get_history()

    # ──────────────────────────────────────────
    # Internal — timers
    # ──────────────────────────────────────────

    def _on_deadline(self, target_id: str, generation: int) -> None:
        target = self._targets.get(target_id)
        if target is None or target.generation != generation:
            return
        session = self._session
        if session is None or session.target_id != target_id:
            return
        self._activate(target, source="dwell")

    def _on_tick(self, target_id: str, generation: int) -> None:
        target = self._targets.get(target_id)
        session = self._session
        if target is None or target.generation != generation:
            return
        if session is None or session.target_id != target_id:
            return
        fraction = self._fraction(session, self._scheduler.now())
        self._emit_progress(target_id, fraction)
        if fraction < 1.0:
            self._scheduler.call_later(
                self._tick_ms, lambda: self._on_tick(target_id, generation)
            )

    def _on_cooldown_end(self, target_id: str, generation: int) -> None:
        target = self._targets.get(target_id)
        if target is None or target.generation != generation:
            return
        if target.state is TargetState.COOLDOWN:
            self._end_cooldown(target, "cooldown_elapsed")

    # ──────────────────────────────────────────
    # Internal — state changes
    # ──────────────────────────────────────────

    def _cancel_session(self, reason: str) -> None:
        session = self._session
        if session is None:
            return
        self._session = None
        target = self._targets.get(session.target_id)
        if target is not None:
            target.generation = next(self._generations)
            target.state = self._fsm.transition(
                target.id, target.state, TargetState.IDLE, reason
            )
        self._emit_progress(session.target_id, 0.0)
        logger.debug("Dwell on %s cancelled (%s)", session.target_id, reason)

    def _activate(self, target: Target, source: str) -> None:
        """
        Single choke point for dwell completion and clicks.

        Clears session and timer state for the target before anything else
        so a second trigger for the same interaction finds nothing to do.
        """
        if target.id in self._activating:
            logger.debug("Re-entrant activation of %s ignored", target.id)
            return

        now = self._scheduler.now()
        dwelled_ms: Optional[float] = None
        session = self._session
        if session is not None and session.target_id == target.id:
            dwelled_ms = now - session.started_at
            self._session = None
            self._emit_progress(target.id, 0.0)

        generation = next(self._generations)
        target.generation = generation
        target.state = self._fsm.transition(
            target.id, target.state, TargetState.COOLDOWN, source
        )
        cooldown = self._cooldown_ms
        target.cooldown_until = now + cooldown
        self._emit_cooldown(target.id, True)
        self._scheduler.call_later(
            cooldown, lambda: self._on_cooldown_end(target.id, generation)
        )

        if self._sound_enabled:
            self._play_chime()
        self._record_activation(target.id, source, dwelled_ms)

        logger.info("Activated %s (%s)", target.id, source)
        self._activating.add(target.id)
        try:
            target.callback()
        except Exception as exc:  # noqa: BLE001
            logger.warning("Activation callback for %s raised: %s", target.id, exc)
        finally:
            self._activating.discard(target.id)

    def _in_cooldown(self, target: Target, now: float) -> bool:
        if target.cooldown_until is None:
            return False
        if now < target.cooldown_until:
            return True
        # Cooldown elapsed but its timer has not run yet.
        self._end_cooldown(target, "cooldown_elapsed")
        return False

    def _end_cooldown(self, target: Target, reason: str) -> None:
        target.cooldown_until = None
        if target.state is TargetState.COOLDOWN:
            target.state = self._fsm.transition(
                target.id, target.state, TargetState.IDLE, reason
            )
        self._emit_cooldown(target.id, False)

    # ──────────────────────────────────────────
    # Internal — collaborators
    # ──────────────────────────────────────────

    @staticmethod
    def _fraction(session: DwellSession, now: float) -> float:
        if session.duration_ms <= 0:
            return 1.0
        return max(0.0, min((now - session.started_at) / session.duration_ms, 1.0))

    def _emit_progress(self, target_id: str, fraction: float) -> None:
        if self._on_progress is None:
            return
        try:
            self._on_progress(target_id, fraction)
        except Exception as exc:  # noqa: BLE001
            logger.warning("Progress sink raised: %s", exc)

    def _emit_cooldown(self, target_id: str, cooling: bool) -> None:
        if self._on_cooldown is None:
            return
        try:
            self._on_cooldown(target_id, cooling)
        except Exception as exc:  # noqa: BLE001
            logger.warning("Cooldown sink raised: %s", exc)

    def _play_chime(self) -> None:
        if self._chime is None:
            return
        try:
            self._chime.play()
        except Exception as exc:  # noqa: BLE001
            logger.debug("Activation tone failed: %s", exc)

    def _record_activation(
        self, target_id: str, source: str, dwelled_ms: Optional[float]
    ) -> None:
        if self._event_log is None:
            return
        try:
            self._event_log.activation(ActivationRecord(target_id, source, dwelled_ms))
        except Exception as exc:  # noqa: BLE001
            logger.warning("Event log write failed: %s", exc)

    def __repr__(self) -> str:
        return (
            f"DwellEngine(targets={len(self._targets)}, "
            f"active={self.active_target or 'none'}, "
            f"dwell={self._dwell_ms:.0f}ms, cooldown={self._cooldown_ms:.0f}ms)"
        )


def _valid_duration(value: object, allow_zero: bool) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    if not math.isfinite(value):
        return False
    return value >= 0 if allow_zero else value > 0
