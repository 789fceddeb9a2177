"""Failure links and output propagation: phase 2 of Aho-Corasick.

Failure link computation (BFS from the root):
    - The root has no failure link; it is where every fallback chain
      ends.
    - For a state s reached by the edge (parent, c) -> s, walk the
      parent's failure chain (parent.failure, parent.failure.failure,
      ...) until some state has a transition on c. That transition's
      destination is s.failure. If even the root has no transition on
      c, s.failure is the root.

The parent's failure link must already be final when its children are
processed, which is why the walk is strictly breadth-first: every
state at depth d is linked before any state at depth d + 1.

Output propagation:
    - Right after s.failure is set, s.outputs is extended with a copy of
      s.failure's outputs. The failure target is shallower, so its own
      list already includes everything inherited from further down its
      chain. At match time a single state's list is therefore the full
      set of fragment endings, with no failure walk needed.
    - Nothing is copied from the root. Its only outputs come from empty
      fragments, which never match.
"""

from __future__ import annotations

import logging
from collections import deque

from wildscan.automaton.automaton import Automaton
from wildscan.automaton.state import StateId, Symbol

log = logging.getLogger(__name__)


class FailureLinker:
    """Turn a goto trie into a full Aho-Corasick automaton."""

    def link(self, automaton: Automaton) -> Automaton:
        """Compute failure links and merge outputs. Returns `automaton`.

        Linking an automaton twice is a no-op; the second call would
        otherwise duplicate every inherited output.
        """
        if automaton.linked:
            return automaton

        root = automaton.root
        queue: deque[StateId] = deque([root])
        visited = 0
        log.debug("Linking automaton with %d states", automaton.node_count)

        while queue:
            current = queue.popleft()
            visited += 1
            state = automaton.state(current)
            for symbol, child in state.transitions.items():
                queue.append(child)
                fallback = self._find_fallback(automaton, state.failure, symbol)
                target = fallback if fallback is not None else root

                child_state = automaton.state(child)
                child_state.failure = target
                # The root's own outputs are empty fragments; they end
                # before any symbol and are never inherited.
                if target != root:
                    child_state.outputs.extend(automaton.state(target).outputs)
                log.debug(
                    "Fallback for state %d (transition on %r): %d",
                    child, symbol, target,
                )

        automaton.mark_linked()
        log.debug("Linked %d states", visited)
        return automaton

    @staticmethod
    def _find_fallback(
        automaton: Automaton,
        start: StateId | None,
        symbol: Symbol,
    ) -> StateId | None:
        """Walk the failure chain from `start` looking for `symbol`.

        Returns None when the chain runs out, i.e. when not even the
        root has a transition on `symbol`. Children of the root pass
        start=None and always land here.
        """
        current = start
        while current is not None:
            nxt = automaton.transition(current, symbol)
            if nxt is not None:
                return nxt
            current = automaton.state(current).failure
        return None
