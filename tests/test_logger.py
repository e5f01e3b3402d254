"""
tests/test_logger.py — Unit tests for the JSONL session journal.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from dwellkey.core.logger import ActivationRecord, EventLogger


def _read(path: Path) -> list[dict]:
    return [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines()]


class TestEventLogger:

    def test_session_start_entry(self, tmp_path: Path) -> None:
        journal = EventLogger(tmp_path)
        first = _read(journal.path)[0]
        assert first["kind"] == "event"
        assert (first["phase"], first["event"]) == ("system", "session_start")
        assert journal.path.name.startswith("dwellkey_")
        journal.close()

    def test_activation_records(self, tmp_path: Path) -> None:
        journal = EventLogger(tmp_path)
        journal.activation(ActivationRecord("key:a", "dwell", dwelled_ms=800.12345))
        journal.activation(ActivationRecord("suggest:0", "click"))
        dwell, click = _read(journal.path)[1:]
        assert dwell["kind"] == "activation"
        assert (dwell["target"], dwell["source"], dwell["dwelled_ms"]) == (
            "key:a", "dwell", 800.123,
        )
        assert click["dwelled_ms"] is None
        assert journal.activations == 2
        journal.close()

    def test_event_data_preserves_non_ascii(self, tmp_path: Path) -> None:
        journal = EventLogger(tmp_path)
        journal.event("keyboard", "typed", {"text": "año"})
        assert _read(journal.path)[-1]["data"] == {"text": "año"}
        assert "año" in journal.path.read_text(encoding="utf-8")
        journal.close()

    def test_error_is_mirrored(self, tmp_path: Path, caplog) -> None:
        journal = EventLogger(tmp_path)
        with caplog.at_level(logging.ERROR, logger="dwellkey.events"):
            journal.error("main", "unhandled_exception", {"traceback": "boom"})
        last = _read(journal.path)[-1]
        assert last["level"] == "ERROR"
        assert last["event"] == "unhandled_exception"
        assert "unhandled_exception" in caplog.text
        journal.close()

    def test_write_after_close_reopens(self, tmp_path: Path) -> None:
        journal = EventLogger(tmp_path)
        journal.close()
        journal.activation(ActivationRecord("key:b", "click"))
        assert _read(journal.path)[-1]["target"] == "key:b"
        journal.close()

    def test_creates_missing_directory(self, tmp_path: Path) -> None:
        target = tmp_path / "nested" / "logs"
        journal = EventLogger(target)
        assert target.is_dir()
        journal.close()
