"""
tests/test_chime.py — Unit tests for the activation tone.

simpleaudio is replaced with a mock module so no audio device is needed.
"""

from __future__ import annotations

import sys
from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import numpy as np

from dwellkey.core.config import AudioConfig
from dwellkey.output.chime import Chime, synthesize_tone


class TestSynthesizeTone:

    def test_length_and_dtype(self) -> None:
        pcm = synthesize_tone(880, 80, 0.1, 44100)
        assert pcm.dtype == np.int16
        assert len(pcm) == 3528

    def test_peak_respects_gain(self) -> None:
        pcm = synthesize_tone(880, 80, 0.1, 44100)
        assert np.abs(pcm).max() <= int(0.1 * 32767) + 1

    def test_fades_out(self) -> None:
        pcm = synthesize_tone(440, 100, 0.5, 8000).astype(np.int32)
        head = np.abs(pcm[:100]).max()
        tail = np.abs(pcm[-100:]).max()
        assert tail < head / 10

    def test_silent_gain(self) -> None:
        assert not synthesize_tone(880, 10, 0.0, 8000).any()


class TestChime:

    def test_play_hands_buffer_to_simpleaudio(self) -> None:
        fake_sa = SimpleNamespace(play_buffer=MagicMock())
        chime = Chime(AudioConfig(sample_rate=8000))
        with patch.dict(sys.modules, {"simpleaudio": fake_sa}):
            chime.play()
        fake_sa.play_buffer.assert_called_once()
        _, kwargs = fake_sa.play_buffer.call_args
        assert kwargs == {"num_channels": 1, "bytes_per_sample": 2, "sample_rate": 8000}
        assert chime.available is True

    def test_playback_failure_disables_tone(self) -> None:
        fake_sa = SimpleNamespace(play_buffer=MagicMock(side_effect=OSError("no device")))
        chime = Chime()
        with patch.dict(sys.modules, {"simpleaudio": fake_sa}):
            chime.play()
            chime.play()
        assert chime.available is False
        fake_sa.play_buffer.assert_called_once()

    def test_missing_library_swallowed(self) -> None:
        chime = Chime()
        with patch.dict(sys.modules, {"simpleaudio": None}):
            chime.play()
        assert chime.available is False
