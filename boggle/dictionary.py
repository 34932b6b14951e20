"""Prefix-tree word index and word-list loading."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

logger = logging.getLogger("boggle")

MIN_WORD_LENGTH = 4
MAX_WORD_LENGTH = 16


class TrieNode:
    __slots__ = ("children", "is_word")

    def __init__(self):
        self.children: dict[str, TrieNode] = {}
        self.is_word: bool = False


class WordIndex:
    """Read-only prefix tree over a lowercased word list.

    Both queries run in time proportional to the length of the query string,
    independent of how many words were inserted.
    """

    def __init__(self, words: Iterable[str] = ()):
        self.root = TrieNode()
        self._words: set[str] = set()
        for word in words:
            self._insert(word)
        self.words = frozenset(self._words)

    def _insert(self, word: str):
        word = word.lower()
        node = self.root
        for ch in word:
            if ch not in node.children:
                node.children[ch] = TrieNode()
            node = node.children[ch]
        node.is_word = True
        self._words.add(word)

    @staticmethod
    def walk(node: TrieNode, text: str) -> TrieNode | None:
        """Descend from node through text. Returns None when the path breaks off."""
        for ch in text:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def has_prefix(self, prefix: str) -> bool:
        return self.walk(self.root, prefix.lower()) is not None

    def has_word(self, word: str) -> bool:
        node = self.walk(self.root, word.lower())
        return node is not None and node.is_word

    def __contains__(self, word: str) -> bool:
        return self.has_word(word)

    def __len__(self) -> int:
        return len(self.words)


def build_index(words: Iterable[str]) -> WordIndex:
    return WordIndex(words)


def load_words(path: str | Path, min_length: int = MIN_WORD_LENGTH,
               max_length: int = MAX_WORD_LENGTH) -> list[str]:
    """Read a newline-delimited word file, keeping lowercased words within the length bounds."""
    words = []
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            word = line.strip().lower()
            if word and min_length <= len(word) <= max_length:
                words.append(word)
    return words


def load_index(path: str | Path, min_length: int = MIN_WORD_LENGTH,
               max_length: int = MAX_WORD_LENGTH) -> WordIndex:
    words = load_words(path, min_length, max_length)
    index = build_index(words)
    logger.info("Index built from %s: %d words (%d-%d letters)", path, len(index), min_length, max_length)
    return index
