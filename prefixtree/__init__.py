"""Prefix tree over lowercase Latin letters."""

from prefixtree.constants import ALPHABET_SIZE, FIRST_LETTER, SAMPLE_WORDS
from prefixtree.trie import Trie, TrieNode
from prefixtree.trace import SearchStep, SearchTrace
from prefixtree.render import render_search, render_statistics, render_tree
from prefixtree.wordlist import WordList

__all__ = [
    "ALPHABET_SIZE",
    "FIRST_LETTER",
    "SAMPLE_WORDS",
    "SearchStep",
    "SearchTrace",
    "Trie",
    "TrieNode",
    "WordList",
    "render_search",
    "render_statistics",
    "render_tree",
]
