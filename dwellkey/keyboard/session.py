"""
dwellkey/keyboard/session.py — Wires keys, suggestions and actions to the engine.

Every key, suggestion slot and action button is a dwell target. Key
activations update the composer; after each change the suggestion slots
are re-registered with the new completions. A slot whose word changed is
re-created, which ends any dwell on it, and slots that no longer have a
word are unregistered.
"""

from __future__ import annotations

import functools
import logging
from typing import Callable, Optional

from dwellkey.dwell.engine import DwellEngine
from dwellkey.keyboard import layout
from dwellkey.keyboard.composer import TextComposer
from dwellkey.predict.predictor import Predictor

logger = logging.getLogger(__name__)

CLEAR_TARGET = "action:clear"
COPY_TARGET = "action:copy"

ChangeListener = Callable[[str, list[str]], None]
CopySink = Callable[[str], None]


def suggestion_target(index: int) -> str:
    """Dwell target id of suggestion slot *index*."""
    return f"suggest:{index}"


class KeyboardSession:
    """
    One typing session on the dwell keyboard.

    Args:
        engine: Dwell engine the targets are registered with.
        predictor: Loaded word predictor.
        composer: Text state. A fresh :class:`TextComposer` by default.
        suggestion_limit: Number of suggestion slots; predictor default if None.
        on_change: Called as ``(text, suggestions)`` after every change.
        on_copy: Receives the typed text when the copy action fires (a
            clipboard writer in a live UI). Empty text is never copied.
    """

    def __init__(
        self,
        engine: DwellEngine,
        predictor: Predictor,
        composer: TextComposer | None = None,
        suggestion_limit: Optional[int] = None,
        on_change: ChangeListener | None = None,
        on_copy: CopySink | None = None,
    ) -> None:
        self._engine = engine
        self._predictor = predictor
        self._rows = layout.build_layout()
        self._composer = composer or TextComposer(layout.key_map(self._rows))
        self._limit = suggestion_limit
        self._on_change = on_change
        self._on_copy = on_copy
        self._suggestions: list[str] = []

        for row in self._rows:
            for key in row:
                engine.register_target(
                    key.target_id, functools.partial(self._on_key, key.code)
                )
        engine.register_target(CLEAR_TARGET, self._on_clear)
        engine.register_target(COPY_TARGET, self._on_copy_action)

        logger.info(
            "KeyboardSession ready: %d keys, predictor %s",
            sum(len(r) for r in self._rows),
            "on" if predictor.is_enabled() else "off",
        )

    @property
    def text(self) -> str:
        return self._composer.text

    @property
    def composer(self) -> TextComposer:
        return self._composer

    @property
    def suggestions(self) -> list[str]:
        return list(self._suggestions)

    @property
    def rows(self) -> list[list[layout.KeyDef]]:
        return self._rows

    def refresh_suggestions(self) -> list[str]:
        """Re-query the predictor and re-register the suggestion slots."""
        words = self._composer.suggestions(self._predictor, self._limit)
        for index, word in enumerate(words):
            target_id = suggestion_target(index)
            if index < len(self._suggestions) and self._suggestions[index] != word:
                # New word in the slot: a dwell begun on the old word must not select it.
                self._engine.unregister_target(target_id)
            self._engine.register_target(
                target_id,
                functools.partial(self._on_suggestion, word),
            )
        for index in range(len(words), len(self._suggestions)):
            self._engine.unregister_target(suggestion_target(index))
        self._suggestions = words
        self._notify()
        return list(words)

    # ──────────────────────────────────────────
    # Activation callbacks
    # ──────────────────────────────────────────

    def _on_key(self, code: str) -> None:
        if self._composer.press(code):
            self.refresh_suggestions()

    def _on_suggestion(self, word: str) -> None:
        logger.debug("Suggestion selected: %s", word)
        self._composer.select_prediction(word)
        self.refresh_suggestions()

    def _on_clear(self) -> None:
        self._composer.clear()
        self.refresh_suggestions()

    def _on_copy_action(self) -> None:
        text = self._composer.text
        if not text:
            return
        if self._on_copy is None:
            logger.debug("Copy requested but no copy sink is wired")
            return
        try:
            self._on_copy(text)
        except Exception as exc:  # noqa: BLE001
            logger.warning("Copy sink raised: %s", exc)

    def _notify(self) -> None:
        if self._on_change is None:
            return
        try:
            self._on_change(self._composer.text, list(self._suggestions))
        except Exception as exc:  # noqa: BLE001
            logger.warning("Change listener raised: %s", exc)
