"""WildcardSearch: single-pass search for one wildcard pattern.

Usage:
    search = WildcardSearch("a?c", wildcard="?")
    search.search("xabcx")           # [1]

    search = WildcardSearch("a!bc", wildcard="?", complement="!")
    search.search("abc")             # []  ("b" is forbidden at 1)
    search.search("aXc")             # [0]

The pattern is decomposed once. Its Parts become fragments 0..p-1 and
its Complement characters become one-symbol fragments p..p+c-1 of the
same automaton, so a single scan reports both kinds of event. The
per-scan WildcardMatchAggregator turns those events into match starts.
"""

from __future__ import annotations

import logging

from wildscan.automaton.automaton import Automaton
from wildscan.automaton.forest import ForestBuilder
from wildscan.automaton.linker import FailureLinker
from wildscan.automaton.matcher import Matcher
from wildscan.wildcard.aggregator import WildcardMatchAggregator
from wildscan.wildcard.pattern import Pattern, decompose

log = logging.getLogger(__name__)


def build_pattern_automaton(pattern: Pattern) -> Automaton:
    """Insert all Parts, then all Complements, and link the result."""
    builder = ForestBuilder()
    n_parts = len(pattern.parts)
    for idx, part in enumerate(pattern.parts):
        log.debug(
            "Building states for part %r at offset %d", part.chars, part.offset
        )
        builder.insert(part.chars, idx)
    for idx, compl in enumerate(pattern.complements):
        log.debug(
            "Building states for complement %r at offset %d",
            compl.char, compl.offset,
        )
        builder.insert(compl.char, n_parts + idx)
    return FailureLinker().link(builder.automaton)


class WildcardSearch:
    """Find every alignment of a wildcard/complement pattern in a text."""

    def __init__(
        self,
        pattern: str,
        wildcard: str,
        complement: str | None = None,
    ) -> None:
        self._source = pattern
        self._pattern = decompose(pattern, wildcard, complement)
        self._matcher = Matcher(build_pattern_automaton(self._pattern))

    @property
    def pattern(self) -> Pattern:
        return self._pattern

    @property
    def source(self) -> str:
        return self._source

    @property
    def matcher(self) -> Matcher:
        return self._matcher

    def search(self, text: str) -> list[int]:
        """Return 0-based match starts in the order they are found."""
        matcher = self._matcher
        aggregator = WildcardMatchAggregator(self._pattern, len(text))
        state = matcher.automaton.root
        starts: list[int] = []

        for position, symbol in enumerate(text):
            state, matched = matcher.step(state, symbol)
            outputs = matcher.outputs_at(state) if matched else ()
            start = aggregator.feed(position, outputs)
            if start is not None:
                starts.append(start)
        return starts

    def search_naive(self, text: str) -> list[int]:
        """Check every alignment directly against Parts and Complements.

        The baseline for benchmarks and for cross-checking search().
        """
        pat = self._pattern
        starts: list[int] = []
        for start in range(len(text) - pat.length + 1):
            if any(
                text[start + compl.offset] == compl.char
                for compl in pat.complements
            ):
                continue
            if all(
                text.startswith(part.chars, start + part.offset)
                for part in pat.parts
            ):
                starts.append(start)
        return starts
