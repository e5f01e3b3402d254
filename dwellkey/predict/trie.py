"""
dwellkey/predict/trie.py — Frequency-annotated prefix trie.

Each terminal node carries the full word, its relative frequency and the
order it was first inserted in, which is the deterministic tie-break used
when ranking completions. Subtree collection is iterative.
"""

from __future__ import annotations

from typing import Optional


class TrieNode:
    """
    One character step in the trie.

    Attributes:
        children: Outgoing edges keyed by a single character.
        is_terminal: True if a vocabulary word ends here.
        word: The (lower-cased) word ending here, else None.
        frequency: Relative frequency of ``word``.
        insertion_index: Position of ``word`` in insertion order.
    """

    __slots__ = ("children", "is_terminal", "word", "frequency", "insertion_index")

    def __init__(self) -> None:
        self.children: dict[str, TrieNode] = {}
        self.is_terminal: bool = False
        self.word: Optional[str] = None
        self.frequency: float = 0.0
        self.insertion_index: int = -1

    def __repr__(self) -> str:
        return (
            f"TrieNode(word={self.word!r}, frequency={self.frequency}, "
            f"children={len(self.children)})"
        )


class PredictionTrie:
    """Prefix tree over a word vocabulary. The root carries no word."""

    def __init__(self) -> None:
        self.root = TrieNode()
        self._word_count = 0
        self._node_count = 1

    @property
    def word_count(self) -> int:
        """Number of distinct words stored."""
        return self._word_count

    @property
    def node_count(self) -> int:
        """Number of nodes including the root."""
        return self._node_count

    def insert(self, word: str, frequency: float) -> None:
        """
        Insert a lower-cased *word* with *frequency*.

        Inserting a word that is already present updates its frequency and
        keeps its original insertion index.
        """
        lowered = word.lower()
        node = self.root
        for ch in lowered:
            child = node.children.get(ch)
            if child is None:
                child = TrieNode()
                node.children[ch] = child
                self._node_count += 1
            node = child

        if not node.is_terminal:
            node.is_terminal = True
            node.word = lowered
            node.insertion_index = self._word_count
            self._word_count += 1
        node.frequency = frequency

    def find(self, prefix: str) -> Optional[TrieNode]:
        """Return the node reached by walking *prefix*, or None on a missing edge."""
        node = self.root
        for ch in prefix:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    @staticmethod
    def collect(node: TrieNode) -> list[TrieNode]:
        """Return every terminal node in the subtree rooted at *node*."""
        found: list[TrieNode] = []
        stack = [node]
        while stack:
            current = stack.pop()
            if current.is_terminal:
                found.append(current)
            stack.extend(current.children.values())
        return found

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str):
            return False
        node = self.find(word.lower())
        return node is not None and node.is_terminal

    def __len__(self) -> int:
        return self._word_count
