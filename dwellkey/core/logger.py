"""
dwellkey/core/logger.py — Session journal for DwellKey.

The journal is an append-only JSONL file, ``{log_dir}/dwellkey_{date}.jsonl``,
holding two kinds of record:

* ``activation``: one per target activation, written from an
  :class:`ActivationRecord` (which target, dwell or click, how long the
  pointer dwelled).
* ``event``: free-form lifecycle entries (session start, crashes).

ERROR events are also passed to the stdlib logger ``dwellkey.events``.

Usage::

    from dwellkey.core.logger import ActivationRecord, get_logger
    journal = get_logger("logs")
    journal.activation(ActivationRecord("key:a", "dwell", dwelled_ms=800.0))
"""

from __future__ import annotations

import json
import logging
import platform
import threading
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import IO, Any, Optional

_stdlib = logging.getLogger("dwellkey.events")

_DEFAULT_DIR = Path("logs")

_instance: Optional["EventLogger"] = None
_instance_lock = threading.Lock()


@dataclass(frozen=True)
class ActivationRecord:
    """
    One target activation.

    Attributes:
        target: Target id (``'key:a'``, ``'suggest:0'``, ``'action:clear'``).
        source: ``'dwell'`` or ``'click'``.
        dwelled_ms: Time from dwell start to activation; None for clicks.
    """

    target: str
    source: str
    dwelled_ms: Optional[float] = None


class EventLogger:
    """
    Writes the session journal.

    Writes are serialised with a lock and flushed per line, so a crash loses
    at most the record being written. The file is chosen from the UTC date
    of each record.

    Args:
        log_dir: Directory for the journal files; created on first write.
    """

    def __init__(self, log_dir: Path | str = _DEFAULT_DIR) -> None:
        self._log_dir = Path(log_dir)
        self._lock = threading.Lock()
        self._fh: Optional[IO[str]] = None
        self._fh_date = ""
        self.activations = 0
        self.event(
            "system",
            "session_start",
            {"python": platform.python_version(), "platform": platform.platform()},
        )

    @property
    def path(self) -> Path:
        """Journal file for the current UTC date."""
        return self._file_for(datetime.now(tz=timezone.utc).strftime("%Y-%m-%d"))

    def activation(self, record: ActivationRecord) -> None:
        fields: dict[str, Any] = asdict(record)
        if record.dwelled_ms is not None:
            fields["dwelled_ms"] = round(record.dwelled_ms, 3)
        self._append("INFO", "activation", fields)
        self.activations += 1

    def event(
        self,
        phase: str,
        event: str,
        data: Optional[dict] = None,
        level: str = "INFO",
    ) -> None:
        """Append a lifecycle entry under *phase* (``'system'``, ``'main'``...)."""
        self._append(level, "event", {"phase": phase, "event": event, "data": data or {}})

    def error(self, phase: str, event: str, data: Optional[dict] = None) -> None:
        self.event(phase, event, data, level="ERROR")
        _stdlib.error("[%s] %s", phase, event)

    def flush(self) -> None:
        with self._lock:
            if self._fh is not None:
                self._fh.flush()

    def close(self) -> None:
        """Close the open file; the next write reopens it."""
        with self._lock:
            if self._fh is not None:
                self._fh.close()
            self._fh = None
            self._fh_date = ""

    def _file_for(self, date: str) -> Path:
        return self._log_dir / f"dwellkey_{date}.jsonl"

    def _append(self, level: str, kind: str, fields: dict[str, Any]) -> None:
        now = datetime.now(tz=timezone.utc)
        line = json.dumps(
            {"ts": now.isoformat(), "level": level, "kind": kind, **fields},
            ensure_ascii=False,
        )
        date = now.strftime("%Y-%m-%d")
        with self._lock:
            if self._fh is None or date != self._fh_date:
                if self._fh is not None:
                    self._fh.close()
                self._log_dir.mkdir(parents=True, exist_ok=True)
                self._fh = self._file_for(date).open("a", encoding="utf-8")
                self._fh_date = date
            self._fh.write(line + "\n")
            self._fh.flush()


def get_logger(log_dir: Path | str | None = None) -> EventLogger:
    """
    Return the process-wide journal, creating it in *log_dir* on first use.

    Later calls return the same instance and ignore *log_dir*.
    """
    global _instance
    with _instance_lock:
        if _instance is None:
            _instance = EventLogger(log_dir if log_dir is not None else _DEFAULT_DIR)
        return _instance
