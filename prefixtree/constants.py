"""Alphabet, drawing glyphs and demonstration data for the prefix tree."""

from __future__ import annotations

# Alphabet

ALPHABET_SIZE = 26
FIRST_LETTER = "a"

# Tree drawing

BRANCH = "├── "
LAST_BRANCH = "└── "
PIPE = "│   "
SPACE = "    "
TERMINAL_MARKER = "* "

# Demonstration words (the misspelled "algoritmh" and "carboard" are
# part of the reference list and are kept as-is).

SAMPLE_WORDS: tuple[str, ...] = (
    "algoritmh", "algebra", "alphabet", "banana", "band",
    "car", "carboard", "dog", "document", "data",
)
