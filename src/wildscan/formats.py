"""Line-oriented job formats for the command-line front end.

Plain job (multi-pattern search):

    ahishers          <- text to search, one line
    4                 <- number of patterns
    he                <- one pattern per line
    she
    his
    hers

    Output: one "start pattern" line per match, both 1-based, sorted by
    start and then pattern number.

Wildcard job:

    xabcx             <- text to search, one line
    a?c               <- the pattern, one line
    ?                 <- wildcard character
    !                 <- optional complement marker

    Output: one 1-based start per line, in the order found.

Whitespace after the pattern count and around the special characters
is skipped, so the wildcard and complement may share a line. Blank
lines right after the count are skipped as well, so an empty pattern
can only appear after the first one. A job with fewer pattern lines
than its count raises JobFormatError rather than padding the list with
empty patterns.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import TextIO

from wildscan.automaton.matcher import Match

_TOKEN = re.compile(r"\s*(\S+)\s*")
_CHAR = re.compile(r"\s*(\S)")


class JobFormatError(ValueError):
    """Raised when a job file does not follow the expected layout."""


def _read_line(stream: TextIO, what: str) -> str:
    line = stream.readline()
    if not line:
        raise JobFormatError(f"missing {what} line")
    return line.rstrip("\n")


def read_plain_job(stream: TextIO) -> tuple[str, list[str]]:
    """Parse a plain job and return (text, patterns)."""
    text = _read_line(stream, "text")
    rest = stream.read()

    m = _TOKEN.match(rest)
    if m is None:
        raise JobFormatError("missing pattern count")
    try:
        count = int(m.group(1))
    except ValueError:
        raise JobFormatError(
            f"pattern count must be an integer, got {m.group(1)!r}"
        ) from None
    if count < 0:
        raise JobFormatError(f"pattern count must not be negative, got {count}")

    body = rest[m.end():]
    lines = body.split("\n") if body else []
    if body.endswith("\n"):
        lines.pop()
    if len(lines) < count:
        raise JobFormatError(
            f"expected {count} patterns, found {len(lines)}"
        )
    return text, lines[:count]


def read_wildcard_job(stream: TextIO) -> tuple[str, str, str, str | None]:
    """Parse a wildcard job and return (text, pattern, wildcard, complement).

    complement is None when the job names no complement marker.
    """
    text = _read_line(stream, "text")
    pattern = _read_line(stream, "pattern")
    rest = stream.read()

    m = _CHAR.match(rest)
    if m is None:
        raise JobFormatError("missing wildcard character")
    wildcard = m.group(1)

    m2 = _CHAR.match(rest, m.end())
    complement = m2.group(1) if m2 is not None else None
    return text, pattern, wildcard, complement


def format_plain_matches(matches: Iterable[Match]) -> str:
    """One "start pattern" line per match, both numbers 1-based."""
    return "".join(f"{m.start + 1} {m.pattern_id + 1}\n" for m in matches)


def format_wildcard_matches(starts: Iterable[int]) -> str:
    """One 1-based start per line."""
    return "".join(f"{start + 1}\n" for start in starts)
