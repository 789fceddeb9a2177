"""Streaming matcher: phase 3 of Aho-Corasick.

The matcher feeds the text one symbol at a time through a linked
automaton. On each symbol it either follows a direct transition or
falls back along failure links until one exists. If the walk bottoms
out at the root and the root has no transition either, the symbol is
simply consumed: the cursor stays at the root and nothing matches at
that position. That is a normal outcome, never an error.

After a successful step the destination state's output list already
holds every fragment ending at this position (see linker.py), so
reporting is O(outputs) per position. Each failure-link hop moves the
cursor to a strictly shallower state, and depth grows by at most one
per symbol, so a whole scan is linear in text length plus the number
of reported outputs.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from wildscan.automaton.automaton import Automaton
from wildscan.automaton.state import Output, StateId, Symbol

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True, order=True)
class Match:
    """One occurrence of a pattern: 0-based start offset and pattern id.

    Field order gives the natural sort: by start, then by pattern id.
    """
    start: int
    pattern_id: int


class Matcher:
    """Walk a linked automaton over a text.

    The matcher never mutates the automaton. Every scan starts its own
    cursor at the root, so one Matcher (or several) can serve any
    number of independent scans.
    """

    def __init__(self, automaton: Automaton) -> None:
        if not automaton.linked:
            raise RuntimeError("Must link the automaton before matching")
        self._automaton = automaton

    @property
    def automaton(self) -> Automaton:
        return self._automaton

    def step(self, state: StateId, symbol: Symbol) -> tuple[StateId, bool]:
        """Advance from `state` on `symbol`.

        Returns (next_state, matched). matched is False only when no
        state on the failure chain, root included, has a transition on
        `symbol`; next_state is the root in that case.
        """
        ac = self._automaton
        debug = log.isEnabledFor(logging.DEBUG)
        current = state
        while True:
            nxt = ac.transition(current, symbol)
            if nxt is not None:
                if debug:
                    log.debug(
                        "Transition on %r from %d to %d", symbol, current, nxt
                    )
                return nxt, True
            failure = ac.state(current).failure
            if failure is None:
                if debug:
                    log.debug("No transition on %r from root", symbol)
                return current, False
            if debug:
                log.debug("No transition from %d; fallback to %d", current, failure)
            current = failure

    def outputs_at(self, state: StateId) -> list[Output]:
        """All fragment endings at `state`, inherited ones included."""
        return self._automaton.state(state).outputs

    def scan(self, text: Sequence[Symbol]) -> Iterator[tuple[int, Output]]:
        """Yield (position, output) for every fragment ending in `text`.

        position is the 0-based index of the fragment's last symbol.
        Outputs at one position come in the state's list order: the
        state's own fragments first, then inherited ones.
        """
        state = self._automaton.root
        for position, symbol in enumerate(text):
            state, matched = self.step(state, symbol)
            if not matched:
                continue
            for output in self._automaton.state(state).outputs:
                yield position, output

    def find_matches(self, text: Sequence[Symbol]) -> list[Match]:
        """Return every fragment occurrence in discovery order."""
        matches: list[Match] = []
        for position, output in self.scan(text):
            start = position - output.length + 1
            matches.append(Match(start, output.fragment_id))
            log.debug(
                "Found pattern #%d starting at %d", output.fragment_id, start
            )
        return matches
