"""Aho-Corasick automaton: construction, linking, and matching."""

from wildscan.automaton.automaton import Automaton
from wildscan.automaton.dump import format_automaton
from wildscan.automaton.forest import ForestBuilder, build_forest
from wildscan.automaton.linker import FailureLinker
from wildscan.automaton.matcher import Match, Matcher
from wildscan.automaton.multi_pattern import MultiPatternSearch
from wildscan.automaton.state import ROOT, Output, State

__all__ = [
    "Automaton",
    "FailureLinker",
    "ForestBuilder",
    "Match",
    "Matcher",
    "MultiPatternSearch",
    "Output",
    "ROOT",
    "State",
    "build_forest",
    "format_automaton",
]
