"""Decompose a wildcard pattern into literal parts and complements.

A wildcard pattern mixes three kinds of positions:

    literal      "abc"     the character itself must appear
    wildcard     "?"       any single character
    complement   "!b"      any single character except "b"

The automaton only understands literal fragments, so the pattern is
split into:

    - Parts: maximal runs of literal characters, each tagged with its
      offset in the *compressed* pattern.
    - Complements: the forbidden character and its compressed offset.

"Compressed" means offsets count pattern positions, not source
characters. A wildcard is one position and one source character. A
complement is one position but two source characters (marker plus
operand), so every complement seen so far shifts later offsets left
by one. For example, with wildcard "?" and complement "!":

    "ab?!xc"  ->  Part "ab" @ 0, Complement "x" @ 3, Part "c" @ 4
                  total length 5

The operand of a complement is always taken literally, even if it is
the wildcard or the complement character itself.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

log = logging.getLogger(__name__)


class MalformedPatternError(ValueError):
    """Raised when a wildcard pattern cannot be decomposed."""


@dataclass(frozen=True, slots=True)
class Part:
    """A literal run of the pattern at a compressed offset."""
    offset: int
    chars: str

    @property
    def length(self) -> int:
        return len(self.chars)


@dataclass(frozen=True, slots=True)
class Complement:
    """A position where `char` must NOT occur."""
    offset: int
    char: str


@dataclass(frozen=True, slots=True)
class Pattern:
    """A decomposed pattern. `length` is its span in text characters."""
    parts: tuple[Part, ...]
    complements: tuple[Complement, ...]
    length: int


def _check_special(name: str, value: str | None) -> None:
    if value is None:
        return
    if len(value) != 1:
        raise MalformedPatternError(
            f"{name} must be a single character, got {value!r}"
        )


def decompose(
    pattern: str,
    wildcard: str,
    complement: str | None = None,
) -> Pattern:
    """Split `pattern` into Parts and Complements.

    `complement` of None or "" disables complement handling; the
    pattern is then plain wildcard matching.

    Raises MalformedPatternError for an empty pattern, a complement
    marker at the very end (no operand), or bad special characters.
    """
    if not complement:
        complement = None
    _check_special("wildcard", wildcard)
    _check_special("complement", complement)
    if complement == wildcard:
        raise MalformedPatternError(
            f"wildcard and complement must differ, both are {wildcard!r}"
        )
    if not pattern:
        raise MalformedPatternError("pattern must not be empty")

    parts: list[Part] = []
    complements: list[Complement] = []
    # Complement markers consumed so far; each one is a source
    # character that occupies no pattern position.
    extra_offset = 0
    n = len(pattern)
    pos = 0

    while pos < n:
        end = pos
        while end < n and pattern[end] != wildcard and pattern[end] != complement:
            end += 1

        if end != pos:
            part = Part(pos - extra_offset, pattern[pos:end])
            parts.append(part)
            log.debug(
                "Part at offset %d of length %d: %r",
                part.offset, part.length, part.chars,
            )

        pos = end
        if complement is not None and pos < n and pattern[pos] == complement:
            if pos + 1 >= n:
                raise MalformedPatternError(
                    f"complement marker {complement!r} at index {pos} "
                    f"has no operand in pattern {pattern!r}"
                )
            compl = Complement(pos - extra_offset, pattern[pos + 1])
            complements.append(compl)
            log.debug(
                "Complement to char %r at offset %d", compl.char, compl.offset
            )
            pos += 2
            extra_offset += 1

        while pos < n and pattern[pos] == wildcard:
            pos += 1

    return Pattern(tuple(parts), tuple(complements), n - extra_offset)


def format_pattern(pattern: Pattern) -> str:
    """Render a decomposed pattern, one line per part or complement."""
    lines = [
        f"Part at offset {part.offset} of length {part.length}: {part.chars!r}"
        for part in pattern.parts
    ]
    lines.extend(
        f"Complement to char {compl.char!r} at index {compl.offset}"
        for compl in pattern.complements
    )
    lines.append(f"Total length of pattern: {pattern.length}")
    return "\n".join(lines)
