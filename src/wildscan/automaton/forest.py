"""Goto-trie construction: phase 1 of Aho-Corasick.

Each fragment is inserted symbol by symbol from the root, reusing an
existing transition where one exists and creating a new state where
it doesn't. Fragments that share a prefix therefore share states, and
the set of all inserted fragments forms a single forest of prefixes
rooted at state 0.

The state reached after the last symbol gets one Output entry for the
fragment. Duplicate fragments are allowed; each contributes its own
entry to the same state, so a duplicated pattern is reported once per
copy.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from wildscan.automaton.automaton import Automaton
from wildscan.automaton.state import Output, StateId, Symbol

log = logging.getLogger(__name__)


class ForestBuilder:
    """Insert literal fragments into an automaton's goto trie.

    Usage:
        builder = ForestBuilder()
        builder.insert("he", 0)
        builder.insert("she", 1)
        automaton = builder.automaton
    """

    def __init__(self, automaton: Automaton | None = None) -> None:
        self._automaton = automaton if automaton is not None else Automaton()

    @property
    def automaton(self) -> Automaton:
        return self._automaton

    def insert(
        self,
        fragment: Sequence[Symbol],
        fragment_id: int,
        length: int | None = None,
    ) -> StateId:
        """Insert one fragment and return the state that ends it.

        `length` is recorded in the output entry and defaults to the
        number of symbols in the fragment.
        """
        ac = self._automaton
        if length is None:
            length = len(fragment)

        state = ac.root
        for symbol in fragment:
            nxt = ac.transition(state, symbol)
            if nxt is not None:
                log.debug("Found transition on %r to state %d", symbol, nxt)
            else:
                nxt = ac.new_state(ac.state(state).depth + 1)
                ac.state(state).transitions[symbol] = nxt
                log.debug("No transition on %r; new state %d", symbol, nxt)
            state = nxt

        ac.add_output(state, Output(fragment_id, length))
        return state


def build_forest(fragments: Iterable[Sequence[Symbol]]) -> Automaton:
    """Build an unlinked trie from fragments numbered 0..n-1."""
    builder = ForestBuilder()
    for idx, fragment in enumerate(fragments):
        log.debug("Building states for fragment #%d %r", idx, fragment)
        builder.insert(fragment, idx)
    return builder.automaton
