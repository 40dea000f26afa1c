"""
numbers_fr.py — Translating numbers into French.

Traditional spelling: ``vingt et un``, ``soixante-dix``, ``quatre-vingts``.
Large numbers follow the long scale (million, milliard, billion, …).
"""

from __future__ import annotations

import re
from typing import Optional

from mathspeak.grammar import Grammar
from mathspeak.numbers.base import (
    MAGNITUDE_CEILING,
    Numbers,
    check_non_negative,
    gender_of,
)

ZERO = "zéro"

ONES_NUMBERS = [
    "", "un", "deux", "trois", "quatre", "cinq", "six", "sept", "huit",
    "neuf", "dix", "onze", "douze", "treize", "quatorze", "quinze", "seize",
    "dix-sept", "dix-huit", "dix-neuf",
]

TENS_NUMBERS = [
    "", "", "vingt", "trente", "quarante", "cinquante", "soixante",
    "soixante", "quatre-vingt", "quatre-vingt",
]

LARGE_NUMBERS = [
    "", "mille",
    "million", "milliard",
    "billion", "billiard",
    "trillion", "trilliard",
    "quadrillion", "quadrilliard",
    "quintillion", "quintilliard",
]


def _tens_to_words(num: int) -> str:
    n = num % 100
    if n < 20:
        return ONES_NUMBERS[n]
    tens, ones = divmod(n, 10)
    # 70-79 and 90-99 count on from the previous ten: soixante-douze.
    if tens in (7, 9):
        ones += 10
    word = TENS_NUMBERS[tens]
    if not ones:
        return word + "s" if tens == 8 else word
    if ones in (1, 11) and tens < 8:
        return f"{word} et {ONES_NUMBERS[ones]}"
    return f"{word}-{ONES_NUMBERS[ones]}"


def _hundreds_to_words(num: int) -> str:
    n = num % 1000
    hundred, rest = divmod(n, 100)
    tens = _tens_to_words(rest)
    if not hundred:
        return tens
    if hundred == 1:
        head = "cent"
    else:
        head = f"{ONES_NUMBERS[hundred]} cent" + ("" if rest else "s")
    return f"{head} {tens}" if tens else head


def number_to_words(num: int) -> str:
    """
    Translate a non-negative integer into French words.

    >>> number_to_words(80)
    'quatre-vingts'
    >>> number_to_words(2000000)
    'deux millions'
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
            large = LARGE_NUMBERS[pos]
            if pos == 1:
                # mille is invariant and takes no article; the plural marks
                # of vingts and cents are dropped in front of it.
                if hundreds == 1:
                    words = large
                else:
                    if words.endswith("s"):
                        words = words[:-1]
                    words = f"{words} {large}"
            elif pos:
                words = f"{words} {large}" + ("s" if hundreds > 1 else "")
            parts.insert(0, words)
        num //= 1000
        pos += 1
    return " ".join(parts)


# ─────────────────────────────────────────────
# Ordinals
# ─────────────────────────────────────────────

_LAST_WORD = re.compile(r"^(.*?)([^ -]+)$")

_IRREGULAR_ORDINALS = {
    "un": "unième",
    "cinq": "cinquième",
    "neuf": "neuvième",
}


def _word_ordinal(word: str) -> str:
    if word in _IRREGULAR_ORDINALS:
        return _IRREGULAR_ORDINALS[word]
    if word.endswith("s") and word != "trois":
        word = word[:-1]
    if word.endswith("e"):
        word = word[:-1]
    return word + "ième"


def number_to_ordinal(num: int, plural: bool = False,
                      grammar: Optional[Grammar] = None) -> str:
    check_non_negative(num)
    if num >= MAGNITUDE_CEILING:
        return f"{num}e"
    if num == 1:
        ordinal = "première" if gender_of(grammar) == "female" else "premier"
    else:
        head, last = _LAST_WORD.match(number_to_words(num)).groups()
        ordinal = head + _word_ordinal(last)
    return ordinal + "s" if plural else ordinal


def simple_ordinal(num: int, grammar: Optional[Grammar] = None) -> str:
    if num == 1:
        return "1re" if gender_of(grammar) == "female" else "1er"
    return f"{num}e"


NUMBERS = Numbers(
    locale="fr",
    number_to_words=number_to_words,
    number_to_ordinal=number_to_ordinal,
    simple_ordinal=simple_ordinal,
    vulgar_sep=" ",
)
