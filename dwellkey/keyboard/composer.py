"""
dwellkey/keyboard/composer.py — Text state driven by key activations.

Tracks the typed text, the word currently being typed (the prediction
prefix) and the shift / caps modifiers.
"""

from __future__ import annotations

import logging
import re
from typing import Optional

from dwellkey.core.constants import C
from dwellkey.keyboard import layout
from dwellkey.keyboard.layout import KeyDef
from dwellkey.predict.predictor import Predictor

logger = logging.getLogger(__name__)

_WORD_SPLIT = re.compile(r"\s+")


class TextComposer:
    """
    Mutable text buffer for the on-screen keyboard.

    Shift is one-shot: it turns off after the next character. Caps lock
    upper-cases letters until toggled off. Unlike Shift it leaves digits and
    punctuation unshifted, so caps lock plus ``1`` types ``1``, not ``!``.

    Args:
        keys: Key definitions by code. Defaults to the Spanish layout.
    """

    def __init__(self, keys: dict[str, KeyDef] | None = None) -> None:
        self._keys = keys if keys is not None else layout.key_map()
        self.text: str = ""
        self.current_word: str = ""
        self.shift_active: bool = False
        self.caps_active: bool = False

    def press(self, code: str) -> bool:
        """
        Apply the key *code*.

        Returns:
            True if the text changed.
        """
        key = self._keys.get(code)
        if key is None:
            logger.debug("Unknown key code %r ignored", code)
            return False

        if code == layout.BACKSPACE:
            return self.backspace()
        if code == layout.ENTER:
            return self._end_word("\n")
        if code == layout.SPACE:
            return self._end_word(" ")
        if code == layout.TAB:
            return self._end_word(C.TAB_TEXT)
        if code in (layout.SHIFT_LEFT, layout.SHIFT_RIGHT):
            self.shift_active = not self.shift_active
            return False
        if code == layout.CAPS:
            self.caps_active = not self.caps_active
            return False

        char = self.char_for_key(key)
        if char is None:
            return False
        self.text += char
        self.current_word += char
        self.shift_active = False
        return True

    def char_for_key(self, key: KeyDef) -> Optional[str]:
        """
        Character *key* types under the current modifiers.

        Shift picks ``shift_char`` for any key; caps lock only for letters.
        """
        if key.kind == "special" or key.char is None:
            return None
        if key.shift_char is None:
            return key.char
        if self.shift_active or (self.caps_active and key.is_letter):
            return key.shift_char
        return key.char

    def backspace(self) -> bool:
        if not self.text:
            return False
        removed = self.text[-1]
        self.text = self.text[:-1]
        if removed.isspace():
            self.current_word = self._last_word()
        else:
            self.current_word = self.current_word[:-1]
        return True

    def select_prediction(self, word: str) -> None:
        """Replace the word being typed with *word* followed by a space."""
        if self.current_word:
            self.text = self.text[: -len(self.current_word)]
        self.text += word + " "
        self.current_word = ""

    def clear(self) -> None:
        self.text = ""
        self.current_word = ""

    def suggestions(self, predictor: Predictor, limit: Optional[int] = None) -> list[str]:
        """Completions for the word being typed."""
        return predictor.predict(self.current_word.lower(), limit)

    def _end_word(self, separator: str) -> bool:
        self.text += separator
        self.current_word = ""
        return True

    def _last_word(self) -> str:
        return _WORD_SPLIT.split(self.text)[-1]

    def __repr__(self) -> str:
        return f"TextComposer(text={self.text!r}, current_word={self.current_word!r})"
