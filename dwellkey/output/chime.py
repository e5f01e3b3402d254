"""
dwellkey/output/chime.py — Short activation tone.

Synthesises a sine blip with an exponential fade using numpy and plays it
through simpleaudio without blocking. Audio is best-effort: a missing
library or sound device is logged once and never reaches the caller.
"""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from dwellkey.core.config import AudioConfig

logger = logging.getLogger(__name__)

# Amplitude the fade decays to by the end of the tone
_FADE_FLOOR = 0.001


def synthesize_tone(
    frequency_hz: float,
    duration_ms: float,
    gain: float,
    sample_rate: int,
) -> np.ndarray:
    """
    Return a mono 16-bit PCM sine tone that fades exponentially to silence.

    Args:
        frequency_hz: Tone pitch.
        duration_ms: Tone length.
        gain: Peak amplitude in [0, 1].
        sample_rate: Samples per second.

    Returns:
        ``int16`` array of ``sample_rate * duration_ms / 1000`` samples.
    """
    n_samples = max(1, int(round(sample_rate * duration_ms / 1000.0)))
    t = np.arange(n_samples, dtype=np.float64) / sample_rate
    progress = t / t[-1] if n_samples > 1 else np.zeros_like(t)
    envelope = gain * np.power(_FADE_FLOOR / max(gain, _FADE_FLOOR), progress)
    wave = np.sin(2.0 * np.pi * frequency_hz * t) * envelope
    return (wave * 32767).astype(np.int16)


class Chime:
    """
    Non-blocking activation tone player.

    The PCM buffer is synthesised once at construction; :meth:`play` only
    hands it to the audio device.

    Args:
        config: Tone settings.
    """

    def __init__(self, config: AudioConfig | None = None) -> None:
        cfg = config or AudioConfig()
        self._cfg = cfg
        self._pcm: np.ndarray = synthesize_tone(
            cfg.frequency_hz, cfg.duration_ms, cfg.gain, cfg.sample_rate
        )
        self._available: Optional[bool] = None

    @property
    def samples(self) -> np.ndarray:
        return self._pcm

    @property
    def available(self) -> Optional[bool]:
        """False once playback has failed; None until the first attempt."""
        return self._available

    def play(self) -> None:
        """Start the tone and return immediately. Never raises."""
        if self._available is False:
            return
        try:
            import simpleaudio as sa  # type: ignore[import]  # optional dep

            sa.play_buffer(
                self._pcm.tobytes(),
                num_channels=1,
                bytes_per_sample=2,
                sample_rate=self._cfg.sample_rate,
            )
            self._available = True
        except ImportError:
            logger.debug("simpleaudio not installed — activation tone disabled")
            self._available = False
        except Exception as exc:  # noqa: BLE001
            logger.debug("Activation tone playback failed: %s — tone disabled", exc)
            self._available = False
