"""Tests for the styled alphabet intervals."""

import pytest

from mathspeak.alphabet import (
    BASE_SIZE,
    INTERVALS,
    Base,
    Embellish,
    interval_for,
)
from mathspeak.semantic_meaning import SemanticFont


class TestIntervals:

    @pytest.mark.parametrize("base,size", [
        (Base.LATINCAP, 26),
        (Base.LATINSMALL, 26),
        (Base.GREEKCAP, 25),
        (Base.GREEKSMALL, 33),
        (Base.DIGIT, 10),
    ])
    def test_base_sizes(self, base, size):
        assert BASE_SIZE[base] == size

    def test_every_interval_has_full_size(self):
        for interval in INTERVALS:
            assert len(interval.unicode) == BASE_SIZE[interval.base]

    def test_normal_latin_small_is_ascii(self):
        interval = interval_for(Base.LATINSMALL, SemanticFont.NORMAL)
        assert "".join(interval.unicode) == "abcdefghijklmnopqrstuvwxyz"

    def test_script_capital_holes_are_letterlike_symbols(self):
        interval = interval_for(Base.LATINCAP, SemanticFont.SCRIPT)
        assert interval.unicode[1] == "ℬ"
        assert interval.unicode[0] == "\U0001D49C"

    def test_greek_small_starts_with_nabla(self):
        interval = interval_for(Base.GREEKSMALL, SemanticFont.NORMAL)
        assert interval.unicode[0] == "∇"
        assert interval.unicode[1] == "α"
        assert interval.unicode[26] == "∂"

    def test_no_code_point_is_claimed_twice(self):
        seen = set()
        for interval in INTERVALS:
            for char in interval.unicode:
                assert char not in seen, f"{char!r} in two alphabets"
                seen.add(char)


class TestSemanticFont:

    def test_fullwidth_maps_to_normal(self):
        interval = interval_for(Base.LATINCAP, SemanticFont.FULLWIDTH)
        assert interval.semantic_font is SemanticFont.NORMAL

    def test_embellished_maps_to_unknown(self):
        interval = interval_for(Base.LATINCAP, Embellish.CIRCLED)
        assert interval.semantic_font is SemanticFont.UNKNOWN

    def test_plain_font_kept(self):
        interval = interval_for(Base.LATINCAP, SemanticFont.FRAKTUR)
        assert interval.semantic_font is SemanticFont.FRAKTUR

    def test_missing_interval_is_none(self):
        assert interval_for(Base.GREEKCAP, SemanticFont.SCRIPT) is None
