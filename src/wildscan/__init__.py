"""wildscan: single-pass multi-pattern and wildcard string search.

Re-exports the public API:
    from wildscan import MultiPatternSearch, WildcardSearch, Match
"""
from wildscan.automaton import (
    Automaton,
    FailureLinker,
    ForestBuilder,
    Match,
    Matcher,
    MultiPatternSearch,
    Output,
    State,
    build_forest,
    format_automaton,
)
from wildscan.wildcard import (
    Complement,
    MalformedPatternError,
    Part,
    Pattern,
    WildcardMatchAggregator,
    WildcardSearch,
    decompose,
    format_pattern,
)

__all__ = [
    "Automaton",
    "FailureLinker",
    "ForestBuilder",
    "Match",
    "Matcher",
    "MultiPatternSearch",
    "Output",
    "State",
    "build_forest",
    "format_automaton",
    "Complement",
    "MalformedPatternError",
    "Part",
    "Pattern",
    "WildcardMatchAggregator",
    "WildcardSearch",
    "decompose",
    "format_pattern",
]
