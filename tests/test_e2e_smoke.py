"""
tests/test_e2e_smoke.py — End-to-end smoke test for DwellKey.

Drives main.py the way a user would: a scripted pointer trace is replayed
through a full keyboard session (real engine, real predictor, bundled
corpus) in virtual time, and the prefix query mode is checked on stdout.
No audio device is required; the event log goes to pytest's tmp_path.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

import main
from dwellkey.core.config import KeyboardConfig, load_config
from dwellkey.core.logger import EventLogger
from dwellkey.predict.predictor import Predictor

_ROOT = Path(__file__).resolve().parent.parent
_DEMO = _ROOT / "config" / "demo_replay.yaml"
_CONFIG = _ROOT / "config" / "dwellkey.yaml"


@pytest.fixture(scope="module")
def predictor() -> Predictor:
    p = Predictor()
    p.load_builtin()
    return p


def _write_script(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "script.yaml"
    path.write_text(text, encoding="utf-8")
    return path


class TestReplay:

    def test_demo_script_types_expected_text(self, predictor) -> None:
        steps = main.load_script(_DEMO)
        text = main.replay(load_config(_CONFIG), predictor, steps)
        assert text == "casa y"

    def test_activations_recorded_in_event_log(self, predictor, tmp_path) -> None:
        event_log = EventLogger(tmp_path)
        steps = main.load_script(_DEMO)
        main.replay(KeyboardConfig(), predictor, steps, event_log=event_log)
        event_log.close()

        records = [
            json.loads(line)
            for path in tmp_path.glob("dwellkey_*.jsonl")
            for line in path.read_text(encoding="utf-8").splitlines()
        ]
        activations = [r for r in records if r["kind"] == "activation"]
        assert [r["target"] for r in activations] == [
            "key:c", "key:a", "suggest:0", "key:y",
        ]
        assert [r["source"] for r in activations] == ["dwell", "dwell", "dwell", "click"]
        assert activations[0]["dwelled_ms"] == pytest.approx(800.0)

    def test_short_hover_types_nothing(self, predictor, tmp_path) -> None:
        script = _write_script(
            tmp_path,
            "- {at_ms: 0, event: enter, target: 'key:h'}\n"
            "- {at_ms: 400, event: leave, target: 'key:h'}\n",
        )
        text = main.replay(KeyboardConfig(), predictor, main.load_script(script))
        assert text == ""

    def test_unsorted_steps_are_ordered(self, tmp_path) -> None:
        script = _write_script(
            tmp_path,
            "- {at_ms: 50, event: click, target: 'key:b'}\n"
            "- {at_ms: 10, event: click, target: 'key:a'}\n",
        )
        steps = main.load_script(script)
        assert [s["target"] for s in steps] == ["key:a", "key:b"]

    @pytest.mark.parametrize(
        "text",
        [
            "just text\n",
            "- not-a-mapping\n",
            "- {at_ms: -1, event: click, target: 'key:a'}\n",
            "- {at_ms: 0, event: hover, target: 'key:a'}\n",
            "- {at_ms: 0, event: click, target: 7}\n",
        ],
    )
    def test_malformed_script_rejected(self, tmp_path, text) -> None:
        with pytest.raises(ValueError):
            main.load_script(_write_script(tmp_path, text))


class TestCommandLine:

    def test_predict_mode(self, capsys) -> None:
        code = main.main(["--config", str(_CONFIG), "--predict", "ca", "--limit", "3"])
        assert code == 0
        assert capsys.readouterr().out.split() == ["casa", "caso", "casi"]

    def test_missing_config_exits_2(self, tmp_path, capsys) -> None:
        code = main.main(["--config", str(tmp_path / "nope.yaml"), "--predict", "ca"])
        assert code == 2
        assert "not found" in capsys.readouterr().err

    def test_replay_mode(self, tmp_path, capsys) -> None:
        cfg = tmp_path / "dwellkey.yaml"
        cfg.write_text("logging:\n  log_events: false\n", encoding="utf-8")
        code = main.main(["--config", str(cfg), "--replay", str(_DEMO), "--no-sound"])
        assert code == 0
        assert capsys.readouterr().out.rstrip().endswith("casa y")
