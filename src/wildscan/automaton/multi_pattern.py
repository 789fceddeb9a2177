"""MultiPatternSearch: find every occurrence of many literal patterns.

This is the plain mode of the engine. Each whole pattern is one
fragment whose id is the pattern's index in the input list, so the
automaton's outputs map straight back to patterns.

Usage:
    search = MultiPatternSearch(["he", "she", "his", "hers"])
    search.build()
    search.search("ahishers")
    # [Match(start=1, pattern_id=2), Match(start=3, pattern_id=1),
    #  Match(start=4, pattern_id=0), Match(start=4, pattern_id=3)]

Results are sorted by start offset, then pattern id. Duplicate
patterns keep their own ids, and each copy is reported separately.
"""

from __future__ import annotations

from collections.abc import Iterable

from wildscan.automaton.forest import build_forest
from wildscan.automaton.linker import FailureLinker
from wildscan.automaton.matcher import Match, Matcher


class MultiPatternSearch:
    """Plain multi-pattern search over one shared automaton."""

    def __init__(self, patterns: Iterable[str] = ()) -> None:
        self._patterns: list[str] = list(patterns)
        self._matcher: Matcher | None = None

    @property
    def pattern_count(self) -> int:
        return len(self._patterns)

    @property
    def node_count(self) -> int:
        if self._matcher is None:
            raise RuntimeError("Must call build() before node_count")
        return self._matcher.automaton.node_count

    @property
    def matcher(self) -> Matcher:
        if self._matcher is None:
            raise RuntimeError("Must call build() before matcher")
        return self._matcher

    def add_pattern(self, pattern: str) -> int:
        """Add a pattern and return its id. Not allowed after build()."""
        if self._matcher is not None:
            raise RuntimeError("Cannot add patterns after build()")
        self._patterns.append(pattern)
        return len(self._patterns) - 1

    def build(self) -> None:
        """Build the trie and link it. Calling build() again is a no-op."""
        if self._matcher is not None:
            return
        automaton = FailureLinker().link(build_forest(self._patterns))
        self._matcher = Matcher(automaton)

    def search(self, text: str) -> list[Match]:
        """Return every (start, pattern_id) occurrence, sorted."""
        if self._matcher is None:
            raise RuntimeError("Must call build() before search()")
        return sorted(self._matcher.find_matches(text))

    def search_naive(self, text: str) -> list[Match]:
        """Brute-force scan: test every pattern at every offset.

        The baseline for benchmarks and for cross-checking search().
        Empty patterns never match, same as in the automaton.
        """
        matches: list[Match] = []
        for pattern_id, pattern in enumerate(self._patterns):
            if not pattern:
                continue
            for start in range(len(text) - len(pattern) + 1):
                if text.startswith(pattern, start):
                    matches.append(Match(start, pattern_id))
        return sorted(matches)
