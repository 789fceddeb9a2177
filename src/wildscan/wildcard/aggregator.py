"""Reassemble fragment matches into whole-pattern matches.

The automaton reports where each Part (and each single-character
Complement) of a decomposed pattern ends in the text. Turning those
into whole-pattern matches means voting: the alignment starting at
text offset s matches iff every Part was found at s + part.offset and
no Complement character was found at s + complement.offset.

Keeping a counter per text offset would cost O(len(text)) memory, but
only L = pattern.length alignments are ever undecided at once: when
the scan is at position i, every alignment starting before i - L + 1
is already complete. So the counters live in two ring buffers of
size L, indexed by start offset mod L:

    votes[k]     Parts matched for the live alignment in slot k
    disabled[k]  a forbidden character was seen for that alignment

A cursor `slot` tracks i mod L. At each position the slot about to be
claimed by the newest alignment (start = i) is cleared first. After
the position's outputs are applied the cursor advances; the slot it
lands on belongs to the alignment starting at i + 1 - L, which just
saw its last character and can be decided.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from wildscan.automaton.state import Output
from wildscan.wildcard.pattern import Pattern

log = logging.getLogger(__name__)


class WildcardMatchAggregator:
    """Vote-counting ring buffer for one scan of one pattern.

    Output ids below len(pattern.parts) are Parts; the rest are
    Complements at index id - len(pattern.parts). That is the
    numbering WildcardSearch uses when it builds the automaton.

    If `text_length` is given, fragment matches whose alignment would
    run past the end of the text are discarded early. Without it the
    aggregator works on an unbounded stream; such alignments are
    simply never decided.
    """

    def __init__(self, pattern: Pattern, text_length: int | None = None) -> None:
        if pattern.length <= 0:
            raise ValueError("Pattern length must be positive")
        self._pattern = pattern
        self._length = pattern.length
        self._n_parts = len(pattern.parts)
        self._text_length = text_length
        self._votes = [0] * self._length
        self._disabled = [False] * self._length
        self._slot = 0
        self._matches_found = 0

    @property
    def matches_found(self) -> int:
        return self._matches_found

    def _pattern_offset(self, output: Output) -> tuple[int, bool]:
        """Offset within the pattern where `output` ends, and whether
        it is a complement."""
        if output.fragment_id >= self._n_parts:
            compl = self._pattern.complements[output.fragment_id - self._n_parts]
            return compl.offset, True
        part = self._pattern.parts[output.fragment_id]
        return part.offset + output.length - 1, False

    def feed(self, position: int, outputs: Iterable[Output]) -> int | None:
        """Consume the fragment endings at text `position`.

        Must be called exactly once per text position, in order,
        with an empty iterable where nothing matched. Returns the
        0-based start of a whole-pattern match decided at this
        position, or None.
        """
        length = self._length
        votes = self._votes
        disabled = self._disabled
        slot = self._slot

        votes[slot] = 0
        disabled[slot] = False

        for output in outputs:
            total_off, is_complement = self._pattern_offset(output)
            if position < total_off:
                continue
            start = position - total_off
            if self._text_length is not None and start + length > self._text_length:
                continue

            # 0 <= total_off < length, so this stays in range.
            idx = (length + slot - total_off) % length
            if is_complement:
                disabled[idx] = True
                log.debug("Complement found; disabling match at %d", start)
            elif not disabled[idx]:
                votes[idx] += 1
                log.debug(
                    "%d/%d parts matched at offset %d",
                    votes[idx], self._n_parts, start,
                )

        slot += 1
        if slot == length:
            slot = 0
        self._slot = slot

        if (
            position + 1 >= length
            and not disabled[slot]
            and votes[slot] == self._n_parts
        ):
            start = position + 1 - length
            self._matches_found += 1
            log.debug("Pattern matched at %d", start)
            return start
        return None
