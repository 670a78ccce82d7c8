"""Demonstration run and interactive terminal mode for the prefix tree."""

from __future__ import annotations

from typing import Sequence

from prefixtree.render import render_search, render_statistics, render_tree
from prefixtree.trie import Trie

DEFAULT_PREFIXES = ("al",)
DEFAULT_SEARCHES = ("algebra", "document")


def run_demo(
    trie: Trie,
    prefixes: Sequence[str] = DEFAULT_PREFIXES,
    searches: Sequence[str] = DEFAULT_SEARCHES,
    show_tree: bool = True,
) -> None:
    """Print the tree, its statistics, guided searches and prefix listings."""
    if show_tree:
        print(render_tree(trie))
        print()
    print(render_statistics(trie))

    for word in searches:
        print()
        print(render_search(trie.trace_search(word)))

    for prefix in prefixes:
        matches = trie.get_by_prefix(prefix)
        print(f"\nWords with prefix '{prefix}' ({len(matches)}):")
        for word in matches:
            print(word)

    print("\nAdditional operations:")
    print(f'Longest word: "{trie.get_longest_word()}"')
    print(f"Contains 'algebra': {trie.contains('algebra')}")
    print(f"Has words starting with 'b': {trie.starts_with('b')}")


def _print_help() -> None:
    print("Commands:")
    print("  add WORD [WORD ...]   -- insert words")
    print("  has WORD              -- is WORD stored?")
    print("  prefix PREFIX         -- list words starting with PREFIX")
    print("  words                 -- list every word")
    print("  longest               -- show the longest word")
    print("  search WORD           -- step-by-step lookup")
    print("  stats                 -- per-letter statistics")
    print("  show                  -- draw the tree")
    print("  size                  -- number of words")
    print("  clear                 -- start over with an empty tree")
    print("  done                  -- leave")


def interactive_session(trie: Trie) -> Trie:
    """Read commands from the terminal until ``done`` or end of input."""
    print("\n" + "=" * 60)
    print("  PREFIX TREE -- Interactive Mode")
    print("=" * 60)
    print()
    _print_help()
    print()

    while True:
        try:
            inp = input("  trie> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break

        parts = inp.split()
        if not parts:
            continue
        cmd, args = parts[0].lower(), parts[1:]

        if cmd == "done":
            break
        if cmd == "show":
            print(render_tree(trie))
        elif cmd == "stats":
            print(render_statistics(trie))
        elif cmd == "clear":
            trie = Trie()
            print("  Tree cleared.")
        elif cmd == "size":
            print(f"  {trie.size()} words")
        elif cmd == "words":
            for word in trie.get_all_words():
                print(f"  {word}")
        elif cmd == "longest":
            print(f'  "{trie.get_longest_word()}"')
        elif cmd == "add" and args:
            before = trie.size()
            trie.import_words(args)
            print(f"  Added {trie.size() - before} new words ({trie.size()} total)")
        elif cmd == "has" and len(args) == 1:
            print(f"  {args[0]}: {'yes' if trie.contains(args[0]) else 'no'}")
        elif cmd == "prefix" and len(args) == 1:
            matches = trie.get_by_prefix(args[0])
            if not matches:
                print(f"  No words start with '{args[0]}'")
            for word in matches:
                print(f"  {word}")
        elif cmd == "search" and len(args) == 1:
            print(render_search(trie.trace_search(args[0])))
        else:
            print("  Unknown command.  Type one of: add has prefix words longest search stats show size clear done")

    return trie
