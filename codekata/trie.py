"""Prefix tree of words and search for dictionary words inside a text."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional, Sequence

logger = logging.getLogger(__name__)


@dataclass
class _TrieNode:
    children: Dict[str, "_TrieNode"] = field(default_factory=dict)
    is_end: bool = False


class Trie:
    """A set of words stored as a prefix tree."""

    def __init__(self) -> None:
        self._root = _TrieNode()

    def insert(self, word: str) -> None:
        """Add a word to the trie."""
        node = self._root
        for char in word:
            node = node.children.setdefault(char, _TrieNode())
        node.is_end = True

    def search(self, word: str) -> bool:
        """Return True if ``word`` was inserted."""
        node = self._root
        for char in word:
            child = node.children.get(char)
            if child is None:
                return False
            node = child
        return node.is_end

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.search(word)

    def _word_ends(self, text: str, start: int) -> Iterator[int]:
        """Yield every end index such that text[start:end] is a word."""
        node = self._root
        for end, char in enumerate(text[start:], start=start + 1):
            child = node.children.get(char)
            if child is None:
                return
            node = child
            if node.is_end:
                yield end


def find_substrings(text: str, words: Iterable[str]) -> List[str]:
    """Return every occurrence of a word from ``words`` inside ``text``.

    Occurrences are listed by start position, then by length.
    """
    trie = Trie()
    for word in words:
        trie.insert(word)
    return [
        text[start:end]
        for start in range(len(text))
        for end in trie._word_ends(text, start)
    ]


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the words from the arguments that occur in the first argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        logger.error("usage: trie <word> <word1> <word2> ... <wordN>")
        return 1

    text, words = args[0], args[1:]
    for word in words:
        logger.info("word inserted: %s", word)

    print("Printing all the strings found in the trie:")
    for found in find_substrings(text, words):
        print("\t- " + found)
    return 0


if __name__ == "__main__":
    sys.exit(main())