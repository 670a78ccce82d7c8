"""Word list loading into a trie, with the sample words as a fallback."""

from __future__ import annotations

import logging

from prefixtree.constants import SAMPLE_WORDS
from prefixtree.trie import Trie

log = logging.getLogger("prefixtree")


class WordList:
    """Words read from a file (or the sample set) and the trie built from them."""

    def __init__(self, path: str | None = None):
        self.words: list[str] = []
        self.trie = Trie()
        self.source: str | None = None
        self._load(path)

    def _load(self, path: str | None) -> None:
        if path:
            try:
                self._load_file(path)
            except (OSError, UnicodeDecodeError) as exc:
                log.warning("Could not read word list %s: %s", path, exc)
            else:
                if self.words:
                    log.info("Loaded %s words from %s", f"{len(self.trie):,}", path)
                    self.source = path
                    return
                log.warning("Word list %s is empty", path)
            log.warning("Falling back to the built-in sample words.")
        self._load_sample()

    def _load_file(self, path: str) -> None:
        words: list[str] = []
        with open(path, "r", encoding="utf-8") as f:
            for line in f:
                word = line.strip()
                if word and not word.startswith("#"):
                    words.append(word)
        self.words = words
        self.trie.import_words(words)

    def _load_sample(self) -> None:
        self.words = list(SAMPLE_WORDS)
        self.trie.import_words(self.words)

    def __contains__(self, word: object) -> bool:
        return word in self.trie

    def __len__(self) -> int:
        return len(self.trie)
