"""Arena that owns every state of an Aho-Corasick automaton.

States live in a single list and refer to each other by index. The
arena is grown by ForestBuilder, finalized by FailureLinker, and then
only read: any number of Matcher instances can walk a linked
automaton at the same time because all per-scan state (the current
cursor, aggregator buffers) lives outside of it.
"""

from __future__ import annotations

from wildscan.automaton.state import ROOT, Output, State, StateId, Symbol


class Automaton:
    """Index-addressed storage for automaton states.

    The root is always state 0 and exists from construction on.
    """

    def __init__(self) -> None:
        self._states: list[State] = [State()]
        self._fragment_count = 0
        self._linked = False

    @property
    def root(self) -> StateId:
        return ROOT

    @property
    def linked(self) -> bool:
        return self._linked

    @property
    def node_count(self) -> int:
        return len(self._states)

    @property
    def fragment_count(self) -> int:
        """Number of fragments inserted (duplicates counted separately)."""
        return self._fragment_count

    def state(self, index: StateId) -> State:
        return self._states[index]

    def states(self) -> list[State]:
        """Return the arena list. Callers must treat it as read-only."""
        return self._states

    def new_state(self, depth: int) -> StateId:
        """Append a fresh state and return its index."""
        if self._linked:
            raise RuntimeError("Cannot add states to a linked automaton")
        self._states.append(State(depth=depth))
        return len(self._states) - 1

    def transition(self, index: StateId, symbol: Symbol) -> StateId | None:
        return self._states[index].transitions.get(symbol)

    def add_output(self, index: StateId, output: Output) -> None:
        if self._linked:
            raise RuntimeError("Cannot add outputs to a linked automaton")
        self._states[index].outputs.append(output)
        self._fragment_count += 1

    def mark_linked(self) -> None:
        self._linked = True
