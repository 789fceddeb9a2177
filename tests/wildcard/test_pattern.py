"""Tests for wildcard pattern decomposition."""

import pytest

from wildscan.wildcard.pattern import (
    Complement,
    MalformedPatternError,
    Part,
    decompose,
    format_pattern,
)


class TestDecomposeWildcards:
    """Parts and offsets with wildcards only."""

    def test_literal_only(self):
        p = decompose("abc", "?")
        assert p.parts == (Part(0, "abc"),)
        assert p.complements == ()
        assert p.length == 3

    def test_wildcard_in_middle(self):
        p = decompose("a?c", "?")
        assert p.parts == (Part(0, "a"), Part(2, "c"))
        assert p.length == 3

    def test_wildcard_run(self):
        p = decompose("ab??cd?", "?")
        assert p.parts == (Part(0, "ab"), Part(4, "cd"))
        assert p.length == 7

    def test_leading_wildcards(self):
        p = decompose("??x", "?")
        assert p.parts == (Part(2, "x"),)
        assert p.length == 3

    def test_wildcards_only(self):
        p = decompose("???", "?")
        assert p.parts == ()
        assert p.length == 3

    def test_part_length(self):
        assert Part(0, "abcd").length == 4


class TestDecomposeComplements:
    """Complement markers shift later offsets by one."""

    def test_single_complement(self):
        p = decompose("a!bc", "?", "!")
        assert p.parts == (Part(0, "a"), Part(2, "c"))
        assert p.complements == (Complement(1, "b"),)
        assert p.length == 3

    def test_complement_after_wildcard(self):
        p = decompose("ab?!xc", "?", "!")
        assert p.parts == (Part(0, "ab"), Part(4, "c"))
        assert p.complements == (Complement(3, "x"),)
        assert p.length == 5

    def test_adjacent_complements(self):
        p = decompose("!a!b", "?", "!")
        assert p.parts == ()
        assert p.complements == (Complement(0, "a"), Complement(1, "b"))
        assert p.length == 2

    def test_complement_operand_taken_literally(self):
        p = decompose("x!?y", "?", "!")
        assert p.complements == (Complement(1, "?"),)
        assert p.parts == (Part(0, "x"), Part(2, "y"))

    def test_complement_disabled_when_none(self):
        p = decompose("a!b", "?", None)
        assert p.parts == (Part(0, "a!b"),)
        assert p.length == 3

    def test_complement_disabled_when_empty(self):
        p = decompose("a!b", "?", "")
        assert p.complements == ()
        assert p.length == 3

    def test_offsets_in_range(self):
        p = decompose("?a!b??cd!e?", "?", "!")
        offsets = [x.offset for x in p.parts] + [c.offset for c in p.complements]
        assert all(0 <= off < p.length for off in offsets)
        for part in p.parts:
            assert part.offset + part.length <= p.length


class TestDecomposeErrors:
    """Malformed patterns are rejected before construction."""

    def test_trailing_complement_marker(self):
        with pytest.raises(MalformedPatternError, match="no operand"):
            decompose("ab!", "?", "!")

    def test_empty_pattern(self):
        with pytest.raises(MalformedPatternError, match="empty"):
            decompose("", "?")

    def test_same_specials(self):
        with pytest.raises(MalformedPatternError, match="must differ"):
            decompose("a?b", "?", "?")

    def test_multichar_wildcard(self):
        with pytest.raises(MalformedPatternError, match="single character"):
            decompose("a?b", "??")

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            decompose("!", "?", "!")


class TestFormatPattern:
    """Debug rendering of a decomposed pattern."""

    def test_format(self):
        text = format_pattern(decompose("a!bc", "?", "!"))
        assert text.splitlines() == [
            "Part at offset 0 of length 1: 'a'",
            "Part at offset 2 of length 1: 'c'",
            "Complement to char 'b' at index 1",
            "Total length of pattern: 3",
        ]
