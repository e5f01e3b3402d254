"""
dwellkey/keyboard/layout.py — Spanish QWERTY key definitions.

Five rows of keys. Character keys carry an unshifted and an optional
shifted character; special keys (backspace, tab, caps, enter, shifts,
space) are handled by the text composer.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class KeyDef:
    """
    A single key on the on-screen keyboard.

    Attributes:
        code: Unique key identifier (e.g. ``'ntilde'``).
        label: Text shown on the key.
        char: Character typed without modifiers (None for most special keys).
        shift_char: Character typed with shift, if different.
        kind: ``'char'`` or ``'special'``.
        row: Row index (0-indexed).
        col: Column index within the row.
    """

    code: str
    label: str
    char: Optional[str]
    shift_char: Optional[str]
    kind: str
    row: int
    col: int

    @property
    def target_id(self) -> str:
        """Dwell target id this key registers under."""
        return f"key:{self.code}"

    @property
    def is_letter(self) -> bool:
        return self.char is not None and len(self.char) == 1 and self.char.isalpha()


BACKSPACE = "backspace"
TAB = "tab"
CAPS = "caps"
ENTER = "enter"
SHIFT_LEFT = "shift-left"
SHIFT_RIGHT = "shift-right"
SPACE = "space"

SPECIAL_CODES: frozenset[str] = frozenset(
    {BACKSPACE, TAB, CAPS, ENTER, SHIFT_LEFT, SHIFT_RIGHT, SPACE}
)

# Columns: code, label, char, shift_char
_ROWS: list[list[tuple[str, str, Optional[str], Optional[str]]]] = [
    # ── Row 0: numbers ───────────────────────────────────────
    [
        ("masculine", "º", "º", "ª"), ("digit1", "1", "1", "!"), ("digit2", "2", "2", '"'),
        ("digit3", "3", "3", "·"), ("digit4", "4", "4", "$"), ("digit5", "5", "5", "%"),
        ("digit6", "6", "6", "&"), ("digit7", "7", "7", "/"), ("digit8", "8", "8", "("),
        ("digit9", "9", "9", ")"), ("digit0", "0", "0", "="), ("apostrophe", "'", "'", "?"),
        ("exclamdown", "¡", "¡", "¿"), (BACKSPACE, "⌫", None, None),
    ],
    # ── Row 1: QWERTY top ────────────────────────────────────
    [
        (TAB, "Tab", None, None),
        ("q", "Q", "q", "Q"), ("w", "W", "w", "W"), ("e", "E", "e", "E"),
        ("r", "R", "r", "R"), ("t", "T", "t", "T"), ("y", "Y", "y", "Y"),
        ("u", "U", "u", "U"), ("i", "I", "i", "I"), ("o", "O", "o", "O"),
        ("p", "P", "p", "P"), ("grave", "`", "`", "^"), ("plus", "+", "+", "*"),
    ],
    # ── Row 2: home row ──────────────────────────────────────
    [
        (CAPS, "Bloq", None, None),
        ("a", "A", "a", "A"), ("s", "S", "s", "S"), ("d", "D", "d", "D"),
        ("f", "F", "f", "F"), ("g", "G", "g", "G"), ("h", "H", "h", "H"),
        ("j", "J", "j", "J"), ("k", "K", "k", "K"), ("l", "L", "l", "L"),
        ("ntilde", "Ñ", "ñ", "Ñ"), ("acute", "´", "´", "¨"), (ENTER, "↵", None, None),
    ],
    # ── Row 3: bottom letters ────────────────────────────────
    [
        (SHIFT_LEFT, "⇧", None, None),
        ("less", "<", "<", ">"), ("z", "Z", "z", "Z"), ("x", "X", "x", "X"),
        ("c", "C", "c", "C"), ("v", "V", "v", "V"), ("b", "B", "b", "B"),
        ("n", "N", "n", "N"), ("m", "M", "m", "M"), ("comma", ",", ",", ";"),
        ("period", ".", ".", ":"), ("minus", "-", "-", "_"),
        (SHIFT_RIGHT, "⇧", None, None),
    ],
    # ── Row 4: accented vowels, punctuation and space ────────
    [
        ("excl-open", "¡", "¡", None), ("excl-close", "!", "!", None),
        ("a-acute", "Á", "á", "Á"), ("e-acute", "É", "é", "É"), ("i-acute", "Í", "í", "Í"),
        (SPACE, "Espacio", " ", None),
        ("o-acute", "Ó", "ó", "Ó"), ("u-acute", "Ú", "ú", "Ú"), ("u-dieresis", "Ü", "ü", "Ü"),
        ("quest-open", "¿", "¿", None), ("quest-close", "?", "?", None),
    ],
]


def build_layout() -> list[list[KeyDef]]:
    """Return the keyboard as rows of :class:`KeyDef`."""
    rows: list[list[KeyDef]] = []
    for row_idx, row_defs in enumerate(_ROWS):
        rows.append([
            KeyDef(
                code=code,
                label=label,
                char=char,
                shift_char=shift_char,
                kind="special" if code in SPECIAL_CODES else "char",
                row=row_idx,
                col=col_idx,
            )
            for col_idx, (code, label, char, shift_char) in enumerate(row_defs)
        ])
    return rows


def key_map(rows: list[list[KeyDef]] | None = None) -> dict[str, KeyDef]:
    """Index keys by code."""
    return {key.code: key for row in (rows or build_layout()) for key in row}
