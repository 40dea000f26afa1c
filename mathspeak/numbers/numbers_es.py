"""
numbers_es.py — Translating numbers into Spanish.

Cardinals use the long scale (millón, mil millones, billón, …).  Ordinals
are feminine unless the grammar asks for ``gender = "male"``, since in
mathematical speech they mostly qualify feminine nouns (la derivada
segunda, la raíz cuarta).
"""

from __future__ import annotations

from typing import Optional

from mathspeak.grammar import Grammar
from mathspeak.numbers.base import (
    MAGNITUDE_CEILING,
    Numbers,
    check_non_negative,
    gender_of,
)

# ─────────────────────────────────────────────
# Cardinals
# ─────────────────────────────────────────────

ZERO = "cero"

# Zero to twenty-nine; the twenties are written as one word.
ONES_NUMBERS = [
    "", "uno", "dos", "tres", "cuatro", "cinco", "seis", "siete", "ocho",
    "nueve", "diez", "once", "doce", "trece", "catorce", "quince",
    "dieciséis", "diecisiete", "dieciocho", "diecinueve", "veinte",
    "veintiuno", "veintidós", "veintitrés", "veinticuatro", "veinticinco",
    "veintiséis", "veintisiete", "veintiocho", "veintinueve",
]

TENS_NUMBERS = [
    "", "", "", "treinta", "cuarenta", "cincuenta", "sesenta", "setenta",
    "ochenta", "noventa",
]

HUNDREDS_NUMBERS = [
    "", "cien", "doscientos", "trescientos", "cuatrocientos", "quinientos",
    "seiscientos", "setecientos", "ochocientos", "novecientos",
]

# One entry per power of a thousand, up to 10**33.
LARGE_NUMBERS = [
    "", "mil",
    "millón", "mil millones",
    "billón", "mil billones",
    "trillón", "mil trillones",
    "cuatrillón", "mil cuatrillones",
    "quintillón", "mil quintillones",
]


def _tens_to_words(num: int) -> str:
    n = num % 100
    if n < 30:
        return ONES_NUMBERS[n]
    tens = TENS_NUMBERS[n // 10]
    ones = ONES_NUMBERS[n % 10]
    return f"{tens} y {ones}" if ones else tens


def _hundreds_to_words(num: int) -> str:
    n = num % 1000
    hundred = n // 100
    tens = _tens_to_words(n % 100)
    if hundred == 1:
        # cien on its own, ciento before anything else.
        return f"ciento {tens}" if tens else HUNDREDS_NUMBERS[1]
    hundreds = HUNDREDS_NUMBERS[hundred]
    return " ".join(p for p in (hundreds, tens) if p)


def _apocope(words: str) -> str:
    """uno loses its final vowel in front of a scale word."""
    if words.endswith("veintiuno"):
        return words[:-len("veintiuno")] + "veintiún"
    if words.endswith("uno"):
        return words[:-1]
    return words


def number_to_words(num: int) -> str:
    """
    Translate a non-negative integer into Spanish words.

    >>> number_to_words(21)
    'veintiuno'
    >>> number_to_words(21000)
    'veintiún mil'
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
            large = LARGE_NUMBERS[pos]
            if not pos:
                parts.insert(0, _hundreds_to_words(hundreds))
            elif hundreds == 1:
                # mil needs no article, millón and friends do.
                parts.insert(0, large if large.startswith("mil") and pos % 2 else f"un {large}")
            else:
                if large.endswith("ón"):
                    large = large[:-2] + "ones"
                parts.insert(0, f"{_apocope(_hundreds_to_words(hundreds))} {large}")
        num //= 1000
        pos += 1
    return " ".join(parts)


# ─────────────────────────────────────────────
# Ordinals
# ─────────────────────────────────────────────

ONES_ORDINALS = [
    "primera", "segunda", "tercera", "cuarta", "quinta", "sexta", "séptima",
    "octava", "novena", "décima", "undécima", "duodécima",
]

TENS_ORDINALS = [
    "décima", "vigésima", "trigésima", "cuadragésima", "quincuagésima",
    "sexagésima", "septuagésima", "octogésima", "nonagésima",
]

HUNDREDS_ORDINALS = [
    "centésima", "ducentésima", "tricentésima", "cuadringentésima",
    "quingentésima", "sexcentésima", "septingentésima", "octingentésima",
    "noningentésima",
]

ORDINAL_CEILING = 1999


def _inflect(word: str, male: bool, plural: bool) -> str:
    if male:
        word = word[:-1] + "o"
    return word + "s" if plural else word


def number_to_ordinal(num: int, plural: bool = False,
                      grammar: Optional[Grammar] = None) -> str:
    """
    Translate a number into a Spanish ordinal.

    Numbers outside 1..1999 are returned as numeral plus gender suffix.
    """
    check_non_negative(num)
    male = gender_of(grammar) == "male"
    if num > ORDINAL_CEILING or num < 1:
        return str(num) + ("o" if male else "a")
    words: list[str] = []
    if num >= 1000:
        num -= 1000
        words.append("milésima")
    if num >= 100:
        words.append(HUNDREDS_ORDINALS[num // 100 - 1])
        num %= 100
    if 0 < num <= 12:
        words.append(ONES_ORDINALS[num - 1])
    elif num:
        words.append(TENS_ORDINALS[num // 10 - 1])
        if num % 10:
            words.append(ONES_ORDINALS[num % 10 - 1])
    return " ".join(_inflect(w, male, plural) for w in words)


def simple_ordinal(num: int, grammar: Optional[Grammar] = None) -> str:
    """Numeral with the gender suffix, e.g. ``3a`` or ``3o``."""
    return str(num) + ("a" if gender_of(grammar) == "female" else "o")


NUMBERS = Numbers(
    locale="es",
    number_to_words=number_to_words,
    number_to_ordinal=number_to_ordinal,
    simple_ordinal=simple_ordinal,
    vulgar_sep="-",
)
