"""
dwellkey/predict/predictor.py — Ranked word completion over a prefix trie.

Builds a :class:`PredictionTrie` from ``(word, frequency)`` pairs and answers
prefix queries ranked by frequency (descending), ties broken by insertion
order. A reload builds the new trie aside and swaps it in with a single
assignment, so readers never see a half-built tree.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Iterable, Optional

from dwellkey.core.config import PredictionConfig
from dwellkey.predict.trie import PredictionTrie

logger = logging.getLogger(__name__)


class Predictor:
    """
    Prefix prediction engine.

    Args:
        config: Prediction settings (enabled flag and default limit).
    """

    def __init__(self, config: PredictionConfig | None = None) -> None:
        cfg = config or PredictionConfig()
        self._trie = PredictionTrie()
        self._enabled: bool = cfg.enabled
        self._default_limit: int = cfg.limit
        self._skipped: int = 0

    # ──────────────────────────────────────────
    # Loading
    # ──────────────────────────────────────────

    def load(self, vocabulary: Iterable[Any]) -> int:
        """
        Replace the vocabulary with *vocabulary*.

        Each entry should be a ``(word, frequency)`` pair. Malformed entries
        are skipped one by one; an empty vocabulary leaves the predictor
        answering nothing until the next load, as does a non-iterable
        *vocabulary* (logged as a warning).

        Returns:
            Number of entries accepted.
        """
        try:
            entries = iter(vocabulary)
        except TypeError:
            logger.warning(
                "Vocabulary of type %s is not iterable; loading an empty vocabulary",
                type(vocabulary).__name__,
            )
            entries = iter(())

        trie = PredictionTrie()
        accepted = 0
        skipped = 0
        for entry in entries:
            parsed = _parse_entry(entry)
            if parsed is None:
                skipped += 1
                continue
            trie.insert(*parsed)
            accepted += 1

        self._trie = trie
        self._skipped = skipped
        if skipped:
            logger.warning("Vocabulary load skipped %d malformed entries", skipped)
        logger.info(
            "Predictor loaded %d words (%d trie nodes)", trie.word_count, trie.node_count
        )
        return accepted

    def load_builtin(self) -> int:
        """Load the bundled Spanish corpus."""
        from dwellkey.predict.vocabulary import SPANISH_WORDS

        return self.load(SPANISH_WORDS)

    # ──────────────────────────────────────────
    # Queries
    # ──────────────────────────────────────────

    def predict(self, prefix: str, limit: Optional[int] = None) -> list[str]:
        """
        Return up to *limit* completions of *prefix*, most frequent first.

        An empty prefix, a disabled predictor, a prefix with no match, or a
        *limit* that is not a positive integer all return an empty list.
        """
        if not self._enabled or not prefix or not isinstance(prefix, str):
            return []
        if limit is None:
            limit = self._default_limit
        if isinstance(limit, bool) or not isinstance(limit, int):
            logger.debug("Non-integer prediction limit %r ignored", limit)
            return []
        if limit <= 0:
            return []

        trie = self._trie
        node = trie.find(prefix.lower())
        if node is None:
            return []

        matches = trie.collect(node)
        matches.sort(key=lambda n: (-n.frequency, n.insertion_index))
        return [n.word for n in matches[:limit]]

    def set_enabled(self, enabled: bool) -> None:
        """Turn suggestions on or off without discarding the trie."""
        self._enabled = bool(enabled)
        logger.info("Prediction %s", "enabled" if self._enabled else "disabled")

    def is_enabled(self) -> bool:
        return self._enabled

    @property
    def word_count(self) -> int:
        return self._trie.word_count

    @property
    def skipped_count(self) -> int:
        """Malformed entries skipped by the last load."""
        return self._skipped

    def __contains__(self, word: object) -> bool:
        return word in self._trie


def _parse_entry(entry: Any) -> Optional[tuple[str, float]]:
    """Return ``(word, frequency)`` for a well-formed entry, else None."""
    if isinstance(entry, (str, bytes)):
        return None
    try:
        word, frequency = entry
    except (TypeError, ValueError):
        return None
    if not isinstance(word, str) or not word.strip():
        return None
    if isinstance(frequency, bool) or not isinstance(frequency, (int, float)):
        return None
    if not math.isfinite(frequency):
        return None
    return word.strip(), frequency
