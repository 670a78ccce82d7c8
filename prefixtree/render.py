"""Plain-text rendering of a trie, its statistics and search traces."""

from __future__ import annotations

from prefixtree.constants import BRANCH, LAST_BRANCH, PIPE, SPACE, TERMINAL_MARKER
from prefixtree.trace import SearchTrace
from prefixtree.trie import Trie, TrieNode


def plural_words(n: int) -> str:
    return "1 word" if n == 1 else f"{n} words"


def render_tree(trie: Trie) -> str:
    """Box-drawing picture of the trie.

    Each letter gets a label line followed by a detail line holding the
    number of words below it; ``*`` marks nodes where a word ends::

        └── 'a'
            * [2 words]
            └── 'b'
                * [1 word]
    """
    lines = [f"Prefix tree: {plural_words(trie.size())}", "Structure:"]
    _render_children(trie, trie.root, SPACE, lines)
    return "\n".join(lines)


def _render_children(trie: Trie, node: TrieNode, indent: str, lines: list[str]) -> None:
    children = list(node.iter_children())
    for pos, (letter, child) in enumerate(children):
        last = pos == len(children) - 1
        continuation = SPACE if last else PIPE
        marker = TERMINAL_MARKER if child.is_terminal else ""
        lines.append(f"{indent}{LAST_BRANCH if last else BRANCH}'{letter}'")
        lines.append(f"{indent}{continuation}{marker}[{plural_words(trie.count_subtree(child))}]")
        _render_children(trie, child, indent + continuation, lines)


def render_statistics(trie: Trie) -> str:
    lines = [
        "Prefix tree statistics:",
        f"Total words: {trie.size()}",
        f'Longest word: "{trie.get_longest_word()}"',
        "Words by first letter:",
    ]
    for letter, count in trie.first_letter_statistics().items():
        lines.append(f"  '{letter}': {plural_words(count)}")
    return "\n".join(lines)


def render_search(trace: SearchTrace) -> str:
    """Step-by-step report of a guided search, unread input in brackets."""
    lines = [f'Searching for "{trace.word}"']
    for step in trace.steps:
        rest = f"[{step.remaining}]" if step.remaining else ""
        lines.append(f'Step {step.number}: "{step.matched}"{rest}')

    if trace.status == SearchTrace.MISSING:
        lines.append(f"Not found (stopped at '{trace.stopped_at}')")
        lines.append(f'Matched prefix: "{trace.matched}"')
    elif trace.found:
        lines.append(f'Found "{trace.word}"')
    else:
        lines.append("Prefix found, but no complete word")
    return "\n".join(lines)
