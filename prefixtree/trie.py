"""Prefix trie over the 26 lowercase Latin letters."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator

from prefixtree.constants import ALPHABET_SIZE, FIRST_LETTER
from prefixtree.trace import SearchStep, SearchTrace

log = logging.getLogger("prefixtree")

_FIRST_ORD = ord(FIRST_LETTER)


def letter_index(ch: str) -> int:
    """Alphabet position of *ch* after lowercasing.

    Only the first code point of the lowercase form counts, so "İ" maps
    to "i". The result may fall outside ``[0, ALPHABET_SIZE)``; callers
    check the range themselves.
    """
    return ord(ch.lower()[0]) - _FIRST_ORD


def index_letter(index: int) -> str:
    return chr(_FIRST_ORD + index)


def _is_valid(index: int) -> bool:
    return 0 <= index < ALPHABET_SIZE


class TrieNode:
    """Single node in the prefix trie."""

    __slots__ = ("children", "is_terminal", "child_count")

    def __init__(self):
        self.children: list[TrieNode | None] = [None] * ALPHABET_SIZE
        self.is_terminal: bool = False
        self.child_count: int = 0

    def iter_children(self) -> Iterator[tuple[str, TrieNode]]:
        """(letter, child) pairs in alphabetical order."""
        for i, child in enumerate(self.children):
            if child is not None:
                yield index_letter(i), child


class Trie:
    """Prefix trie with word/prefix checks, enumeration and statistics.

    Non-letter characters are dropped when a word is inserted but make
    any lookup fail, so ``insert("a1b")`` stores ``"ab"`` while
    ``contains("a1b")`` stays ``False``.
    """

    def __init__(self):
        self.root = TrieNode()
        self.word_count = 0

    # mutation

    def insert(self, word: str | None) -> None:
        if not word:
            return

        node = self.root
        for ch in word:
            index = letter_index(ch)
            if not _is_valid(index):
                continue
            child = node.children[index]
            if child is None:
                child = TrieNode()
                node.children[index] = child
                node.child_count += 1
            node = child

        if not node.is_terminal:
            node.is_terminal = True
            self.word_count += 1

    def import_words(self, words: Iterable[str | None]) -> None:
        """Insert every word of *words* in order."""
        before = self.word_count
        for word in words:
            self.insert(word)
        log.debug("Imported %d new words (%d total)", self.word_count - before, self.word_count)

    # lookup

    def contains(self, word: str | None) -> bool:
        if not word:
            return False
        node = self._find_node(word)
        return node is not None and node.is_terminal

    def starts_with(self, prefix: str | None) -> bool:
        if not prefix:
            return False
        return self._find_node(prefix) is not None

    def _find_node(self, s: str) -> TrieNode | None:
        node = self.root
        for ch in s:
            index = letter_index(ch)
            if not _is_valid(index):
                return None
            node = node.children[index]
            if node is None:
                return None
        return node

    # enumeration

    def get_by_prefix(self, prefix: str | None) -> list[str]:
        """All words starting with *prefix*, in alphabetical order.

        An empty prefix matches nothing; use :meth:`get_all_words` to
        list the whole trie.
        """
        if not prefix:
            return []
        node = self._find_node(prefix)
        if node is None:
            return []
        return self._collect(node, prefix)

    def get_all_words(self) -> list[str]:
        return self._collect(self.root, "")

    def _collect(self, node: TrieNode, prefix: str) -> list[str]:
        # Pre-order walk; children are pushed in reverse so 'a' pops first.
        words: list[str] = []
        stack: list[tuple[TrieNode, str]] = [(node, prefix)]
        while stack:
            current, path = stack.pop()
            if current.is_terminal:
                words.append(path)
            for i in range(ALPHABET_SIZE - 1, -1, -1):
                child = current.children[i]
                if child is not None:
                    stack.append((child, path + index_letter(i)))
        return words

    def count_subtree(self, node: TrieNode) -> int:
        """Number of words ending in the subtree rooted at *node*, itself included."""
        count = 0
        stack = [node]
        while stack:
            current = stack.pop()
            if current.is_terminal:
                count += 1
            stack.extend(child for child in current.children if child is not None)
        return count

    # aggregate queries

    def size(self) -> int:
        return self.word_count

    def is_empty(self) -> bool:
        return self.root.child_count == 0

    def get_longest_word(self) -> str:
        """Longest stored word; the alphabetically first one wins a tie."""
        best = ""
        stack: list[tuple[TrieNode, str]] = [(self.root, "")]
        while stack:
            node, path = stack.pop()
            # Strictly longer only: the first word found keeps a tie.
            if node.is_terminal and len(path) > len(best):
                best = path
            for i in range(ALPHABET_SIZE - 1, -1, -1):
                child = node.children[i]
                if child is not None:
                    stack.append((child, path + index_letter(i)))
        return best

    def first_letter_statistics(self) -> dict[str, int]:
        """Word counts keyed by first letter, for letters that start a word path."""
        return {
            letter: self.count_subtree(child)
            for letter, child in self.root.iter_children()
        }

    # guided search

    def trace_search(self, word: str | None) -> SearchTrace:
        """Walk *word* through the trie, recording each matched character."""
        word = word or ""
        steps: list[SearchStep] = []
        node = self.root
        for i, ch in enumerate(word):
            index = letter_index(ch)
            child = node.children[index] if _is_valid(index) else None
            if child is None:
                return SearchTrace(word, steps, SearchTrace.MISSING, stopped_at=ch)
            node = child
            steps.append(SearchStep(i + 1, word[: i + 1], word[i + 1:]))

        status = SearchTrace.FOUND if node.is_terminal else SearchTrace.PREFIX
        return SearchTrace(word, steps, status)

    # container protocol

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def __len__(self) -> int:
        return self.word_count

    def __iter__(self) -> Iterator[str]:
        return iter(self.get_all_words())

    def __repr__(self) -> str:
        return f"Trie({self.word_count} words)"
