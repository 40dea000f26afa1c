"""
numbers_en.py — Translating numbers into English.
"""

from __future__ import annotations

from typing import Optional

from mathspeak.grammar import Grammar
from mathspeak.numbers.base import MAGNITUDE_CEILING, Numbers, check_non_negative

ZERO = "zero"

ONES_NUMBERS = [
    "", "one", "two", "three", "four", "five", "six", "seven", "eight",
    "nine", "ten", "eleven", "twelve", "thirteen", "fourteen", "fifteen",
    "sixteen", "seventeen", "eighteen", "nineteen",
]

TENS_NUMBERS = [
    "", "", "twenty", "thirty", "forty", "fifty", "sixty", "seventy",
    "eighty", "ninety",
]

# Short scale, one entry per power of a thousand.
LARGE_NUMBERS = [
    "", "thousand", "million", "billion", "trillion", "quadrillion",
    "quintillion", "sextillion", "septillion", "octillion", "nonillion",
    "decillion",
]


def _hundreds_to_words(num: int) -> str:
    n = num % 1000
    parts: list[str] = []
    if n // 100:
        parts.append(f"{ONES_NUMBERS[n // 100]} hundred")
    rest = n % 100
    if rest >= 20:
        ones = ONES_NUMBERS[rest % 10]
        parts.append(f"{TENS_NUMBERS[rest // 10]}-{ones}" if ones else TENS_NUMBERS[rest // 10])
    elif rest:
        parts.append(ONES_NUMBERS[rest])
    return " ".join(parts)


def number_to_words(num: int) -> str:
    """
    Translate a non-negative integer into English words.

    >>> number_to_words(1021)
    'one thousand twenty-one'
    """
    check_non_negative(num)
    if num == 0:
        return ZERO
    if num >= MAGNITUDE_CEILING:
        return str(num)
    pos = 0
    parts: list[str] = []
    while num > 0:
        hundreds = num % 1000
        if hundreds:
            words = _hundreds_to_words(hundreds)
            parts.insert(0, f"{words} {LARGE_NUMBERS[pos]}" if pos else words)
        num //= 1000
        pos += 1
    return " ".join(parts)


# ─────────────────────────────────────────────
# Ordinals
# ─────────────────────────────────────────────

_IRREGULAR_ORDINALS = {
    "one": "first",
    "two": "second",
    "three": "third",
    "five": "fifth",
    "eight": "eighth",
    "nine": "ninth",
    "twelve": "twelfth",
}


def _word_ordinal(word: str) -> str:
    if word in _IRREGULAR_ORDINALS:
        return _IRREGULAR_ORDINALS[word]
    if word.endswith("y"):
        return word[:-1] + "ieth"
    return word + "th"


def word_ordinal(num: int) -> str:
    """Ordinal of *num* built by inflecting the last word of its cardinal."""
    words = number_to_words(num)
    head, sep, last = words.rpartition(" ")
    # twenty-one → twenty-first
    prefix, hyphen, unit = last.rpartition("-")
    return head + sep + prefix + hyphen + _word_ordinal(unit)


def number_to_ordinal(num: int, plural: bool = False,
                      grammar: Optional[Grammar] = None) -> str:
    """
    Ordinal as spoken in a fraction denominator: ``third``, ``thirds``.

    One and two have their own fraction words (``oneths``, ``halves``).
    """
    check_non_negative(num)
    if num >= MAGNITUDE_CEILING:
        return f"{num}th"
    if num == 1:
        return "oneths" if plural else "first"
    if num == 2:
        return "halves" if plural else "second"
    ordinal = word_ordinal(num)
    return ordinal + "s" if plural else ordinal


def simple_ordinal(num: int, grammar: Optional[Grammar] = None) -> str:
    tens = num % 100
    if 11 <= tens <= 13:
        return f"{num}th"
    suffix = {1: "st", 2: "nd", 3: "rd"}.get(num % 10, "th")
    return f"{num}{suffix}"


NUMBERS = Numbers(
    locale="en",
    number_to_words=number_to_words,
    number_to_ordinal=number_to_ordinal,
    simple_ordinal=simple_ordinal,
    vulgar_sep="-",
)
