"""
dwellkey/core/config.py — Typed configuration loader for DwellKey.

Loads config/dwellkey.yaml and validates all values into typed dataclasses.
All downstream modules import from this module; never read YAML directly.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

from dwellkey.core.constants import C

logger = logging.getLogger(__name__)


# ──────────────────────────────────────────────
# Dataclass hierarchy — mirrors dwellkey.yaml
# ──────────────────────────────────────────────


@dataclass(frozen=True)
class DwellConfig:
    """Dwell timing and activation behaviour."""

    dwell_ms: float = C.DWELL_MS
    cooldown_ms: float = C.COOLDOWN_MS
    progress_tick_ms: float = C.PROGRESS_TICK_MS
    dwell_enabled: bool = True


@dataclass(frozen=True)
class PredictionConfig:
    """Word prediction engine settings."""

    enabled: bool = True
    limit: int = C.PREDICTION_LIMIT
    vocabulary_path: Optional[str] = None
    """YAML vocabulary file; the bundled Spanish corpus is used when unset."""


@dataclass(frozen=True)
class AudioConfig:
    """Activation tone settings."""

    sound_enabled: bool = True
    frequency_hz: float = C.CHIME_FREQUENCY_HZ
    duration_ms: float = C.CHIME_DURATION_MS
    gain: float = C.CHIME_GAIN
    sample_rate: int = C.CHIME_SAMPLE_RATE


@dataclass(frozen=True)
class LoggingConfig:
    """Logging and session event recording configuration."""

    level: str = "INFO"
    log_dir: str = "logs"
    log_events: bool = True


@dataclass(frozen=True)
class KeyboardConfig:
    """Root configuration object — single source of truth for all settings."""

    dwell: DwellConfig = field(default_factory=DwellConfig)
    prediction: PredictionConfig = field(default_factory=PredictionConfig)
    audio: AudioConfig = field(default_factory=AudioConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


# ──────────────────────────────────────────────
# Loader
# ──────────────────────────────────────────────


def load_config(config_path: Path | str | None = None) -> KeyboardConfig:
    """
    Load, validate, and return a KeyboardConfig from a YAML file.

    The search order for the config file is:
    1. *config_path* argument (if provided)
    2. DWELLKEY_CONFIG environment variable
    3. ``config/dwellkey.yaml`` relative to the project root
    4. Built-in defaults (no file required)

    Args:
        config_path: Optional path to a ``dwellkey.yaml`` file.

    Returns:
        A fully populated and frozen :class:`KeyboardConfig` instance.

    Raises:
        ValueError: If a YAML field has an invalid type or value.
        FileNotFoundError: If *config_path* is explicitly given but does not exist.
    """
    resolved_path: Path | None = None

    if config_path is not None:
        resolved_path = Path(config_path)
        if not resolved_path.exists():
            raise FileNotFoundError(f"Config file not found: {resolved_path}")
    elif "DWELLKEY_CONFIG" in os.environ:
        resolved_path = Path(os.environ["DWELLKEY_CONFIG"])
        if not resolved_path.exists():
            raise FileNotFoundError(
                f"DWELLKEY_CONFIG points to missing file: {resolved_path}"
            )
    else:
        # Auto-discover: walk up from this file to find config/dwellkey.yaml
        here = Path(__file__).resolve()
        for parent in [here.parent.parent.parent, here.parent.parent]:
            candidate = parent / "config" / "dwellkey.yaml"
            if candidate.exists():
                resolved_path = candidate
                break

    raw: dict = {}
    if resolved_path is not None:
        logger.info("Loading config from: %s", resolved_path)
        with resolved_path.open("r", encoding="utf-8") as fh:
            loaded = yaml.safe_load(fh) or {}
        if not isinstance(loaded, dict):
            raise ValueError(f"Config file must be a YAML mapping, got: {type(loaded)}")
        raw = loaded
    else:
        logger.info("No config file found — using built-in defaults")

    try:
        dwell_cfg = DwellConfig(**raw.get("dwell", {}))
        prediction_cfg = PredictionConfig(**raw.get("prediction", {}))
        audio_cfg = AudioConfig(**raw.get("audio", {}))
        log_cfg = LoggingConfig(**raw.get("logging", {}))
    except TypeError as exc:
        raise ValueError(f"Invalid config value: {exc}") from exc

    _validate_config(dwell_cfg, prediction_cfg, audio_cfg)

    config = KeyboardConfig(
        dwell=dwell_cfg,
        prediction=prediction_cfg,
        audio=audio_cfg,
        logging=log_cfg,
    )
    logger.debug("Config loaded: %s", config)
    return config


def _validate_config(
    dwell: DwellConfig,
    prediction: PredictionConfig,
    audio: AudioConfig,
) -> None:
    """
    Validate range constraints on the loaded configuration.

    Raises:
        ValueError: If any configured value violates a hard constraint.
    """
    for name in ("dwell_ms", "cooldown_ms", "progress_tick_ms"):
        value = getattr(dwell, name)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"dwell.{name} must be a number, got {value!r}")
    if not (C.MIN_DWELL_MS <= dwell.dwell_ms <= C.MAX_DWELL_MS):
        raise ValueError(
            f"dwell.dwell_ms must be in [{C.MIN_DWELL_MS:.0f}, {C.MAX_DWELL_MS:.0f}], "
            f"got {dwell.dwell_ms}"
        )
    if not (0 <= dwell.cooldown_ms <= C.MAX_COOLDOWN_MS):
        raise ValueError(
            f"dwell.cooldown_ms must be in [0, {C.MAX_COOLDOWN_MS:.0f}], "
            f"got {dwell.cooldown_ms}"
        )
    if dwell.progress_tick_ms <= 0:
        raise ValueError(
            f"dwell.progress_tick_ms must be positive, got {dwell.progress_tick_ms}"
        )
    if isinstance(prediction.limit, bool) or not isinstance(prediction.limit, int):
        raise ValueError(f"prediction.limit must be an integer, got {prediction.limit!r}")
    if prediction.limit < 1:
        raise ValueError(f"prediction.limit must be ≥1, got {prediction.limit}")
    if not (0.0 <= audio.gain <= 1.0):
        raise ValueError(f"audio.gain must be in [0, 1], got {audio.gain}")
    if audio.duration_ms <= 0 or audio.frequency_hz <= 0 or audio.sample_rate <= 0:
        raise ValueError(
            "audio.duration_ms, audio.frequency_hz and audio.sample_rate must be positive"
        )
