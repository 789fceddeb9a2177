"""Wildcard and complement pattern matching on top of the automaton."""

from wildscan.wildcard.aggregator import WildcardMatchAggregator
from wildscan.wildcard.pattern import (
    Complement,
    MalformedPatternError,
    Part,
    Pattern,
    decompose,
    format_pattern,
)
from wildscan.wildcard.search import WildcardSearch, build_pattern_automaton

__all__ = [
    "Complement",
    "MalformedPatternError",
    "Part",
    "Pattern",
    "WildcardMatchAggregator",
    "WildcardSearch",
    "build_pattern_automaton",
    "decompose",
    "format_pattern",
]
