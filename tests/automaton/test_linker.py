"""Tests for FailureLinker (failure links and output propagation)."""

from wildscan.automaton.forest import build_forest
from wildscan.automaton.linker import FailureLinker
from wildscan.automaton.state import Output


def _walk(ac, word):
    state = ac.root
    for ch in word:
        state = ac.transition(state, ch)
        assert state is not None, f"no path for {word!r}"
    return state


class TestFailureLinks:
    """Failure link targets on the classic he/she/his/hers trie."""

    def setup_method(self):
        self.ac = FailureLinker().link(build_forest(["he", "she", "his", "hers"]))

    def test_root_has_no_failure(self):
        assert self.ac.state(self.ac.root).failure is None

    def test_depth_one_fails_to_root(self):
        for ch in "hs":
            assert self.ac.state(_walk(self.ac, ch)).failure == self.ac.root

    def test_sh_fails_to_h(self):
        assert self.ac.state(_walk(self.ac, "sh")).failure == _walk(self.ac, "h")

    def test_she_fails_to_he(self):
        assert self.ac.state(_walk(self.ac, "she")).failure == _walk(self.ac, "he")

    def test_his_fails_to_s(self):
        assert self.ac.state(_walk(self.ac, "his")).failure == _walk(self.ac, "s")

    def test_hers_fails_to_s(self):
        assert self.ac.state(_walk(self.ac, "hers")).failure == _walk(self.ac, "s")

    def test_every_non_root_state_is_linked(self):
        states = self.ac.states()
        assert all(s.failure is not None for s in states[1:])

    def test_linked_flag(self):
        assert self.ac.linked


class TestOutputPropagation:
    """Outputs inherited along failure links."""

    def test_she_inherits_he(self):
        ac = FailureLinker().link(build_forest(["he", "she"]))
        assert ac.state(_walk(ac, "she")).outputs == [Output(1, 3), Output(0, 2)]

    def test_chain_of_suffixes(self):
        ac = FailureLinker().link(build_forest(["a", "aa", "aaa"]))
        outputs = ac.state(_walk(ac, "aaa")).outputs
        assert outputs == [Output(2, 3), Output(1, 2), Output(0, 1)]

    def test_origin_state_keeps_only_its_own_outputs(self):
        ac = FailureLinker().link(build_forest(["he", "she"]))
        assert ac.state(_walk(ac, "he")).outputs == [Output(0, 2)]

    def test_link_twice_does_not_duplicate_outputs(self):
        linker = FailureLinker()
        ac = linker.link(build_forest(["he", "she"]))
        linker.link(ac)
        assert ac.state(_walk(ac, "she")).outputs == [Output(1, 3), Output(0, 2)]

    def test_empty_fragment_not_inherited(self):
        ac = FailureLinker().link(build_forest(["", "a", "ba"]))
        assert ac.state(ac.root).outputs == [Output(0, 0)]
        assert ac.state(_walk(ac, "a")).outputs == [Output(1, 1)]
        assert ac.state(_walk(ac, "b")).outputs == []
        assert ac.state(_walk(ac, "ba")).outputs == [Output(2, 2), Output(1, 1)]

    def test_link_empty_forest(self):
        ac = FailureLinker().link(build_forest([]))
        assert ac.linked
        assert ac.node_count == 1
