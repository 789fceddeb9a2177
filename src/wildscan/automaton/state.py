"""Automaton states and the output records they carry.

A state is identified by its index in the owning Automaton's arena,
not by object identity. Transitions and failure links are plain ints
into that same list, so there are no aliasing references between
states and nothing to tear down by hand.

Output records are frozen. The failure-link pass copies records from
a fallback state into the states that inherit it; because the records
are immutable, the copy shares them without any state ever owning
another state's data.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TypeAlias

Symbol: TypeAlias = str
StateId: TypeAlias = int

ROOT: StateId = 0


@dataclass(frozen=True, slots=True)
class Output:
    """A fragment ending: which fragment, and how many symbols it spans."""
    fragment_id: int
    length: int


@dataclass(slots=True)
class State:
    """One node in the automaton arena.

    transitions maps a symbol to the index of the destination state.
    failure is None only for the root.
    outputs holds the state's own fragment endings first, followed by
    everything inherited through the failure link once linked.
    """
    transitions: dict[Symbol, StateId] = field(default_factory=dict)
    failure: StateId | None = None
    outputs: list[Output] = field(default_factory=list)
    depth: int = 0
