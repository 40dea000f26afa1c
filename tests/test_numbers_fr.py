"""Tests for French number words."""

import pytest

from mathspeak.grammar import Grammar
from mathspeak.numbers.numbers_fr import (
    number_to_ordinal,
    number_to_words,
    simple_ordinal,
)


class TestCardinals:

    @pytest.mark.parametrize("num,words", [
        (0, "zéro"),
        (16, "seize"),
        (17, "dix-sept"),
        (21, "vingt et un"),
        (22, "vingt-deux"),
        (70, "soixante-dix"),
        (71, "soixante et onze"),
        (72, "soixante-douze"),
        (80, "quatre-vingts"),
        (81, "quatre-vingt-un"),
        (91, "quatre-vingt-onze"),
        (99, "quatre-vingt-dix-neuf"),
        (100, "cent"),
        (200, "deux cents"),
        (201, "deux cent un"),
    ])
    def test_below_a_thousand(self, num, words):
        assert number_to_words(num) == words

    @pytest.mark.parametrize("num,words", [
        (1000, "mille"),
        (2000, "deux mille"),
        (80000, "quatre-vingt mille"),
        (200000, "deux cent mille"),
        (1000000, "un million"),
        (2000000, "deux millions"),
        (80000000, "quatre-vingts millions"),
        (10 ** 9, "un milliard"),
    ])
    def test_scale_words(self, num, words):
        assert number_to_words(num) == words

    def test_ceiling(self):
        assert number_to_words(10 ** 36) == str(10 ** 36)


class TestOrdinals:

    @pytest.mark.parametrize("num,words", [
        (2, "deuxième"),
        (3, "troisième"),
        (4, "quatrième"),
        (5, "cinquième"),
        (9, "neuvième"),
        (21, "vingt et unième"),
        (80, "quatre-vingtième"),
        (1000, "millième"),
    ])
    def test_words(self, num, words):
        assert number_to_ordinal(num) == words

    def test_first_follows_gender(self):
        assert number_to_ordinal(1) == "premier"
        assert number_to_ordinal(1, False, Grammar({"gender": "female"})) == "première"

    def test_plural(self):
        assert number_to_ordinal(4, True) == "quatrièmes"

    def test_simple_ordinal(self):
        assert simple_ordinal(1) == "1er"
        assert simple_ordinal(1, Grammar({"gender": "female"})) == "1re"
        assert simple_ordinal(2) == "2e"
