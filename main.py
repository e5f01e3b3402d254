"""
main.py — DwellKey command-line entry point.

Loads configuration and the vocabulary, then either prints completions for
a prefix or replays a scripted pointer-event trace through a full keyboard
session in virtual time and prints the resulting text.
"""

from __future__ import annotations

import argparse
import logging
import sys
import traceback
from pathlib import Path
from typing import Any

import yaml

_BANNER = r"""
  ____                 _ _ _  __
 |  _ \__      _____| | | |/ /___ _   _
 | | | \ \ /\ / / _ \ | | ' // _ \ | | |
 | |_| |\ V  V /  __/ | | . \  __/ |_| |
 |____/  \_/\_/ \___|_|_|_|\_\___|\__, |
                                  |___/
      Dwell keyboard with word prediction
"""

_EVENTS = ("enter", "leave", "click")


# ──────────────────────────────────────────────────────────────
# Argument parsing
# ──────────────────────────────────────────────────────────────

def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="dwellkey",
        description="DwellKey — dwell-activated on-screen keyboard with word prediction",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    p.add_argument("--config", default=None, help="Path to a dwellkey.yaml file")
    p.add_argument(
        "--vocab",
        default=None,
        help="YAML vocabulary file (overrides prediction.vocabulary_path)",
    )
    mode = p.add_mutually_exclusive_group(required=True)
    mode.add_argument("--predict", metavar="PREFIX", help="Print completions for PREFIX")
    mode.add_argument(
        "--replay",
        metavar="FILE",
        help="Replay a YAML pointer-event script and print the typed text",
    )
    p.add_argument("--limit", type=int, default=None, help="Number of suggestions")
    p.add_argument("--no-sound", action="store_true", help="Disable the activation tone")
    p.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARN"],
        default="WARN",
        help="Minimum log level for stderr output",
    )
    return p


# ──────────────────────────────────────────────────────────────
# Wiring
# ──────────────────────────────────────────────────────────────

def _build_predictor(config, vocab_override: str | None):
    from dwellkey.predict.predictor import Predictor
    from dwellkey.predict.vocabulary import load_vocabulary_file

    predictor = Predictor(config.prediction)
    vocab_path = vocab_override or config.prediction.vocabulary_path
    if vocab_path:
        predictor.load(load_vocabulary_file(vocab_path))
    else:
        predictor.load_builtin()
    return predictor


def load_script(path: Path | str) -> list[dict[str, Any]]:
    """
    Read and validate a replay script.

    The script is a YAML list of ``{at_ms, event, target}`` mappings where
    ``event`` is ``enter``, ``leave`` or ``click``. Steps are returned
    sorted by ``at_ms`` (stable for equal times).

    Raises:
        FileNotFoundError: If *path* does not exist.
        ValueError: If a step is malformed.
    """
    resolved = Path(path)
    if not resolved.exists():
        raise FileNotFoundError(f"Replay script not found: {resolved}")
    with resolved.open("r", encoding="utf-8") as fh:
        loaded = yaml.safe_load(fh) or []
    if not isinstance(loaded, list):
        raise ValueError(f"Replay script must be a YAML list, got: {type(loaded)}")

    steps: list[dict[str, Any]] = []
    for index, step in enumerate(loaded):
        if not isinstance(step, dict):
            raise ValueError(f"Step {index} must be a mapping, got: {step!r}")
        at_ms = step.get("at_ms")
        event = step.get("event")
        target = step.get("target")
        if isinstance(at_ms, bool) or not isinstance(at_ms, (int, float)) or at_ms < 0:
            raise ValueError(f"Step {index}: at_ms must be a non-negative number")
        if event not in _EVENTS:
            raise ValueError(f"Step {index}: event must be one of {_EVENTS}, got {event!r}")
        if not isinstance(target, str):
            raise ValueError(f"Step {index}: target must be a string")
        steps.append({"at_ms": float(at_ms), "event": event, "target": target})
    steps.sort(key=lambda s: s["at_ms"])
    return steps


def replay(config, predictor, steps: list[dict[str, Any]], chime=None, event_log=None) -> str:
    """
    Run *steps* through a :class:`KeyboardSession` in virtual time.

    Returns:
        The text typed by the end of the script.
    """
    from dwellkey.dwell.engine import DwellEngine
    from dwellkey.dwell.scheduler import ManualScheduler
    from dwellkey.keyboard.session import KeyboardSession

    scheduler = ManualScheduler()
    engine = DwellEngine(
        scheduler,
        config.dwell,
        sound_enabled=config.audio.sound_enabled,
        chime=chime,
        event_log=event_log,
    )
    session = KeyboardSession(engine, predictor, suggestion_limit=config.prediction.limit)
    session.refresh_suggestions()

    dispatch = {
        "enter": engine.pointer_enter,
        "leave": engine.pointer_leave,
        "click": engine.pointer_down,
    }
    for step in steps:
        scheduler.advance_to(step["at_ms"])
        dispatch[step["event"]](step["target"])

    # Let a trailing dwell and its cooldown run out.
    scheduler.advance(engine.dwell_duration_ms + engine.cooldown_duration_ms)
    return session.text


# ──────────────────────────────────────────────────────────────
# Main
# ──────────────────────────────────────────────────────────────

def main(argv: list[str] | None = None) -> int:
    """Application entry point. Returns process exit code."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    level_map = {"DEBUG": logging.DEBUG, "INFO": logging.INFO, "WARN": logging.WARNING}
    logging.basicConfig(level=level_map.get(args.log_level, logging.WARNING))

    from dwellkey.core.config import load_config

    try:
        config = load_config(args.config)
        predictor = _build_predictor(config, args.vocab)
    except (FileNotFoundError, ValueError) as exc:
        print(f"[ERROR] {exc}", file=sys.stderr)
        return 2

    if args.predict is not None:
        for word in predictor.predict(args.predict, args.limit):
            print(word)
        return 0

    print(_BANNER)
    from dwellkey.core.logger import get_logger
    from dwellkey.output.chime import Chime

    event_log = get_logger(config.logging.log_dir) if config.logging.log_events else None
    chime = None if args.no_sound or not config.audio.sound_enabled else Chime(config.audio)

    exit_code = 0
    try:
        steps = load_script(args.replay)
        text = replay(config, predictor, steps, chime=chime, event_log=event_log)
        print(text)
    except (FileNotFoundError, ValueError) as exc:
        print(f"[ERROR] {exc}", file=sys.stderr)
        exit_code = 2
    except Exception:                              # noqa: BLE001
        tb = traceback.format_exc()
        print(tb, file=sys.stderr)
        if event_log is not None:
            event_log.error("main", "unhandled_exception", {"traceback": tb})
        exit_code = 1
    finally:
        if event_log is not None:
            event_log.flush()
    return exit_code


def cli() -> None:
    """Console-script wrapper around :func:`main`."""
    sys.exit(main())


if __name__ == "__main__":
    cli()
