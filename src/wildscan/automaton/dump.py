"""Human-readable dump of an automaton, for --dump and debugging."""

from __future__ import annotations

from wildscan.automaton.automaton import Automaton


def format_automaton(automaton: Automaton) -> str:
    """Render every state depth-first from the root.

    States are named by their arena index, so two dumps of the same
    automaton are identical.
    """
    lines: list[str] = []
    stack = [automaton.root]
    while stack:
        index = stack.pop()
        state = automaton.state(index)
        lines.append(f"State {index}:")
        for symbol, dest in state.transitions.items():
            stack.append(dest)
            lines.append(f"\tTransition on {symbol!r} to {dest}")
        fallback = "(none)" if state.failure is None else str(state.failure)
        lines.append(f"\tFallback to {fallback}")
        for output in state.outputs:
            lines.append(
                f"\tResult #{output.fragment_id} of length {output.length}"
            )
    return "\n".join(lines)
