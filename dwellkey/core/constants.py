"""
dwellkey/core/constants.py — System constants for DwellKey.

Per-target dwell states (Enum) plus a frozen dataclass holding the timing
defaults, configuration bounds, prediction limits and activation tone.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar


# ──────────────────────────────────────────────────────────────
# Target states
# ──────────────────────────────────────────────────────────────

class TargetState(Enum):
    """States a registered dwell target moves through."""

    IDLE = "IDLE"
    DWELLING = "DWELLING"
    COOLDOWN = "COOLDOWN"


# ──────────────────────────────────────────────────────────────
# Frozen constants dataclass
# ──────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class KeyboardConstants:
    """
    Frozen dataclass holding all DwellKey system constants.

    Use the class attributes directly — do not instantiate this class.

    Example::

        from dwellkey.core.constants import C, TargetState

        print(C.DWELL_MS)           # 800.0
        print(TargetState.COOLDOWN)
    """

    # ── Timing (milliseconds) ─────────────────────────────────
    DWELL_MS: ClassVar[float] = 800.0
    """ms the pointer must stay on a target before it activates."""

    COOLDOWN_MS: ClassVar[float] = 300.0
    """ms after an activation during which hover cannot restart a dwell."""

    PROGRESS_TICK_MS: ClassVar[float] = 16.0
    """Interval of the progress animation tick (~60 fps)."""

    MIN_DWELL_MS: ClassVar[float] = 200.0
    MAX_DWELL_MS: ClassVar[float] = 5000.0
    MAX_COOLDOWN_MS: ClassVar[float] = 3000.0

    # ── Prediction ────────────────────────────────────────────
    PREDICTION_LIMIT: ClassVar[int] = 5
    """Number of suggestions shown in the prediction bar."""

    # ── Activation tone ───────────────────────────────────────
    CHIME_FREQUENCY_HZ: ClassVar[float] = 880.0
    CHIME_DURATION_MS: ClassVar[float] = 80.0
    CHIME_GAIN: ClassVar[float] = 0.1
    CHIME_SAMPLE_RATE: ClassVar[int] = 44100

    # ── Text composition ──────────────────────────────────────
    TAB_TEXT: ClassVar[str] = "    "
    """Inserted by the Tab key."""

    States: ClassVar[type[TargetState]] = TargetState
    """Convenience reference to :class:`TargetState` — use ``C.States.IDLE``."""


#: Convenience alias — ``from dwellkey.core.constants import C``
C = KeyboardConstants
