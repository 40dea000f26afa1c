"""Tests for English number words and the locale lookup."""

import pytest

from mathspeak.errors import ConfigurationError
from mathspeak.numbers import LOCALES, get_numbers
from mathspeak.numbers.numbers_en import (
    number_to_ordinal,
    number_to_words,
    simple_ordinal,
    word_ordinal,
)


class TestCardinals:

    @pytest.mark.parametrize("num,words", [
        (0, "zero"),
        (7, "seven"),
        (13, "thirteen"),
        (21, "twenty-one"),
        (40, "forty"),
        (100, "one hundred"),
        (115, "one hundred fifteen"),
        (999, "nine hundred ninety-nine"),
        (1021, "one thousand twenty-one"),
        (1000000, "one million"),
        (2000000001, "two billion one"),
    ])
    def test_words(self, num, words):
        assert number_to_words(num) == words

    def test_ceiling(self):
        assert number_to_words(10 ** 36) == str(10 ** 36)
        assert number_to_words(10 ** 33).endswith("decillion")


class TestOrdinals:

    @pytest.mark.parametrize("num,words", [
        (3, "third"),
        (4, "fourth"),
        (5, "fifth"),
        (8, "eighth"),
        (9, "ninth"),
        (12, "twelfth"),
        (20, "twentieth"),
        (21, "twenty-first"),
        (100, "one hundredth"),
        (1002, "one thousand second"),
    ])
    def test_word_ordinal(self, num, words):
        assert word_ordinal(num) == words

    @pytest.mark.parametrize("num,plural,words", [
        (1, False, "first"),
        (1, True, "oneths"),
        (2, False, "second"),
        (2, True, "halves"),
        (3, True, "thirds"),
        (10, True, "tenths"),
    ])
    def test_fraction_forms(self, num, plural, words):
        assert number_to_ordinal(num, plural) == words

    def test_ceiling(self):
        assert number_to_ordinal(10 ** 36) == f"{10 ** 36}th"

    @pytest.mark.parametrize("num,expected", [
        (1, "1st"), (2, "2nd"), (3, "3rd"), (4, "4th"),
        (11, "11th"), (12, "12th"), (13, "13th"),
        (21, "21st"), (22, "22nd"), (111, "111th"), (101, "101st"),
    ])
    def test_simple_ordinal(self, num, expected):
        assert simple_ordinal(num) == expected


class TestLocaleLookup:

    def test_known_locales(self):
        assert set(LOCALES) == {"en", "es", "fr"}

    @pytest.mark.parametrize("locale,expected", [
        ("en", "en"), ("EN", "en"), ("es-MX", "es"), ("fr_CA", "fr"),
    ])
    def test_region_is_ignored(self, locale, expected):
        assert get_numbers(locale).locale == expected

    def test_unknown_locale(self):
        with pytest.raises(ConfigurationError):
            get_numbers("de")
