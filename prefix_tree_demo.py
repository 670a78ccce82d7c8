#!/usr/bin/env python3
"""
Prefix Tree Demo

Loads a word list (or the built-in sample words) into a prefix tree,
draws the tree, prints per-letter statistics, traces a few lookups and
lists the words under the requested prefixes.
"""

from __future__ import annotations

import argparse
import logging

from prefixtree.cli import DEFAULT_PREFIXES, DEFAULT_SEARCHES, interactive_session, run_demo
from prefixtree.wordlist import WordList

# Logging setup

logging.basicConfig(
    level=logging.INFO,
    format="[%(levelname)s] %(message)s",
)
log = logging.getLogger("prefixtree")


# Entry point

def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Prefix tree demo -- build a trie from a word list and query it",
    )
    parser.add_argument("--words", type=str, default=None,
                        help="Path to a word list file (one word per line)")
    parser.add_argument("--prefix", action="append", default=None,
                        help="Prefix to list words for (repeatable, default: al)")
    parser.add_argument("--search", action="append", default=None,
                        help="Word to trace step by step (repeatable)")
    parser.add_argument("--interactive", action="store_true",
                        help="Open an interactive session after the demo")
    parser.add_argument("--no-tree", action="store_true",
                        help="Skip drawing the tree (useful for big word lists)")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    print("PREFIX TREE -- Demonstration\n")

    words = WordList(args.words)
    log.debug("Built %r from %s", words.trie, words.source or "sample words")

    run_demo(
        words.trie,
        prefixes=args.prefix or DEFAULT_PREFIXES,
        searches=args.search or DEFAULT_SEARCHES,
        show_tree=not args.no_tree,
    )

    if args.interactive:
        interactive_session(words.trie)


if __name__ == "__main__":
    main()
