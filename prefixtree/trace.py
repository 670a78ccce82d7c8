"""Step-by-step record of a guided trie lookup."""

from __future__ import annotations


class SearchStep:
    """One matched character of a guided search."""

    __slots__ = ("number", "matched", "remaining")

    def __init__(self, number: int, matched: str, remaining: str):
        self.number = number        # 1-based position of the matched character
        self.matched = matched      # input consumed so far
        self.remaining = remaining  # input not yet read

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SearchStep):
            return NotImplemented
        return (self.number, self.matched, self.remaining) == (
            other.number, other.matched, other.remaining,
        )

    def __repr__(self) -> str:
        return f"SearchStep({self.number}, {self.matched!r}, {self.remaining!r})"


class SearchTrace:
    """Outcome of walking a word through the trie character by character."""

    FOUND = "found"
    PREFIX = "prefix"
    MISSING = "missing"

    __slots__ = ("word", "steps", "status", "stopped_at")

    def __init__(
        self,
        word: str,
        steps: list[SearchStep],
        status: str,
        stopped_at: str | None = None,
    ):
        self.word = word
        self.steps = steps
        self.status = status          # FOUND, PREFIX or MISSING
        self.stopped_at = stopped_at  # offending character when MISSING

    @property
    def found(self) -> bool:
        return self.status == self.FOUND

    @property
    def matched(self) -> str:
        """Longest input prefix that exists as a path."""
        return self.steps[-1].matched if self.steps else ""

    def __repr__(self) -> str:
        stop = f" at {self.stopped_at!r}" if self.stopped_at is not None else ""
        return f"SearchTrace({self.word!r}: {self.status}{stop}, {len(self.steps)} steps)"
