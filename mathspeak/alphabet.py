"""
alphabet.py — Unicode intervals for styled alphabets and digits.

Every styled alphabet (bold, italic, fraktur, double-struck, …) is declared
once as a starting code point plus a table of substitutions for the holes
Unicode left in the Mathematical Alphanumeric Symbols block, where the
letter already existed in Letterlike Symbols (e.g. script capital B).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from mathspeak.semantic_meaning import SemanticFont


class Base(Enum):
    LATINCAP = "latinCap"
    LATINSMALL = "latinSmall"
    GREEKCAP = "greekCap"
    GREEKSMALL = "greekSmall"
    DIGIT = "digit"


class Embellish(Enum):
    """Decorations that do not constitute a semantic font."""

    SUPER = "super"
    SUB = "sub"
    CIRCLED = "circled"
    PARENTHESIZED = "parenthesized"
    SQUARED = "squared"


Font = Union[SemanticFont, Embellish]

# Number of positions in each base alphabet.  Small Greek runs from nabla
# over alpha..omega to partial and the six variant symbols.
BASE_SIZE: dict[Base, int] = {
    Base.LATINCAP: 26,
    Base.LATINSMALL: 26,
    Base.GREEKCAP: 25,
    Base.GREEKSMALL: 33,
    Base.DIGIT: 10,
}


@dataclass(frozen=True)
class Interval:
    base: Base
    font: Font
    start: int
    subst: dict[int, int] = field(default_factory=dict)

    @property
    def unicode(self) -> list[str]:
        """The characters of this alphabet in base order."""
        return [
            chr(self.subst.get(pos, self.start + pos))
            for pos in range(BASE_SIZE[self.base])
        ]

    @property
    def semantic_font(self) -> SemanticFont:
        """Font recorded in the registry for characters of this alphabet."""
        if isinstance(self.font, Embellish):
            return SemanticFont.UNKNOWN
        if self.font is SemanticFont.FULLWIDTH:
            return SemanticFont.NORMAL
        return self.font


# ── Hole tables ──────────────────────────────────────────────────────

_ITALIC_SMALL_HOLES = {7: 0x210E}
_SCRIPT_CAP_HOLES = {
    1: 0x212C, 4: 0x2130, 5: 0x2131, 7: 0x210B,
    8: 0x2110, 11: 0x2112, 12: 0x2133, 17: 0x211B,
}
_SCRIPT_SMALL_HOLES = {4: 0x212F, 6: 0x210A, 14: 0x2134}
_FRAKTUR_CAP_HOLES = {2: 0x212D, 7: 0x210C, 8: 0x2111, 17: 0x211C, 25: 0x2128}
_DOUBLESTRUCK_CAP_HOLES = {
    2: 0x2102, 7: 0x210D, 13: 0x2115, 15: 0x2119,
    16: 0x211A, 17: 0x211D, 25: 0x2124,
}
# Position 17 of the capital Greek block is unassigned; Unicode puts the
# capital theta symbol there in the styled blocks.
_GREEK_CAP_HOLES = {17: 0x03F4}
_GREEK_SMALL_NORMAL = {
    0: 0x2207, 26: 0x2202, 27: 0x03F5, 28: 0x03D1,
    29: 0x03F0, 30: 0x03D5, 31: 0x03F1, 32: 0x03D6,
}
_SUPER_DIGIT_HOLES = {1: 0x00B9, 2: 0x00B2, 3: 0x00B3}
_CIRCLED_DIGIT_HOLES = {0: 0x24EA}


def _latin(font: Font, cap: int, small: int | None,
           cap_subst: dict[int, int] | None = None,
           small_subst: dict[int, int] | None = None) -> list[Interval]:
    result = [Interval(Base.LATINCAP, font, cap, cap_subst or {})]
    if small is not None:
        result.append(Interval(Base.LATINSMALL, font, small, small_subst or {}))
    return result


def _greek(font: SemanticFont, cap: int, small: int) -> list[Interval]:
    return [
        Interval(Base.GREEKCAP, font, cap),
        Interval(Base.GREEKSMALL, font, small),
    ]


INTERVALS: list[Interval] = [
    # Latin.
    *_latin(SemanticFont.NORMAL, 0x41, 0x61),
    *_latin(SemanticFont.FULLWIDTH, 0xFF21, 0xFF41),
    *_latin(SemanticFont.BOLD, 0x1D400, 0x1D41A),
    *_latin(SemanticFont.ITALIC, 0x1D434, 0x1D44E, small_subst=_ITALIC_SMALL_HOLES),
    *_latin(SemanticFont.BOLDITALIC, 0x1D468, 0x1D482),
    *_latin(SemanticFont.SCRIPT, 0x1D49C, 0x1D4B6,
            _SCRIPT_CAP_HOLES, _SCRIPT_SMALL_HOLES),
    *_latin(SemanticFont.BOLDSCRIPT, 0x1D4D0, 0x1D4EA),
    *_latin(SemanticFont.FRAKTUR, 0x1D504, 0x1D51E, _FRAKTUR_CAP_HOLES),
    *_latin(SemanticFont.DOUBLESTRUCK, 0x1D538, 0x1D552, _DOUBLESTRUCK_CAP_HOLES),
    *_latin(SemanticFont.BOLDFRAKTUR, 0x1D56C, 0x1D586),
    *_latin(SemanticFont.SANSSERIF, 0x1D5A0, 0x1D5BA),
    *_latin(SemanticFont.SANSSERIFBOLD, 0x1D5D4, 0x1D5EE),
    *_latin(SemanticFont.SANSSERIFITALIC, 0x1D608, 0x1D622),
    *_latin(SemanticFont.SANSSERIFBOLDITALIC, 0x1D63C, 0x1D656),
    *_latin(SemanticFont.MONOSPACE, 0x1D670, 0x1D68A),
    *_latin(Embellish.CIRCLED, 0x24B6, 0x24D0),
    *_latin(Embellish.PARENTHESIZED, 0x1F110, 0x249C),
    *_latin(Embellish.SQUARED, 0x1F130, None),
    # Greek.
    Interval(Base.GREEKCAP, SemanticFont.NORMAL, 0x391, _GREEK_CAP_HOLES),
    Interval(Base.GREEKSMALL, SemanticFont.NORMAL, 0x3B0, _GREEK_SMALL_NORMAL),
    *_greek(SemanticFont.BOLD, 0x1D6A8, 0x1D6C1),
    *_greek(SemanticFont.ITALIC, 0x1D6E2, 0x1D6FB),
    *_greek(SemanticFont.BOLDITALIC, 0x1D71C, 0x1D735),
    *_greek(SemanticFont.SANSSERIFBOLD, 0x1D756, 0x1D76F),
    *_greek(SemanticFont.SANSSERIFBOLDITALIC, 0x1D790, 0x1D7A9),
    # Digits.
    Interval(Base.DIGIT, SemanticFont.NORMAL, 0x30),
    Interval(Base.DIGIT, SemanticFont.FULLWIDTH, 0xFF10),
    Interval(Base.DIGIT, SemanticFont.BOLD, 0x1D7CE),
    Interval(Base.DIGIT, SemanticFont.DOUBLESTRUCK, 0x1D7D8),
    Interval(Base.DIGIT, SemanticFont.SANSSERIF, 0x1D7E2),
    Interval(Base.DIGIT, SemanticFont.SANSSERIFBOLD, 0x1D7EC),
    Interval(Base.DIGIT, SemanticFont.MONOSPACE, 0x1D7F6),
    Interval(Base.DIGIT, Embellish.SUPER, 0x2070, _SUPER_DIGIT_HOLES),
    Interval(Base.DIGIT, Embellish.SUB, 0x2080),
    Interval(Base.DIGIT, Embellish.CIRCLED, 0x245F, _CIRCLED_DIGIT_HOLES),
]


def make_interval(start: str, end: str) -> list[str]:
    """All characters between two hex code points, inclusive."""
    return [chr(code) for code in range(int(start, 16), int(end, 16) + 1)]


def make_multi_interval(spec: list) -> list[str]:
    """
    Expand a list of hex code points and ``[start, end]`` pairs.

    >>> make_multi_interval(["41", ["61", "63"]])
    ['A', 'a', 'b', 'c']
    """
    result: list[str] = []
    for item in spec:
        if isinstance(item, str):
            result.append(chr(int(item, 16)))
        else:
            result.extend(make_interval(item[0], item[1]))
    return result


def interval_for(base: Base, font: Font) -> Interval | None:
    for interval in INTERVALS:
        if interval.base is base and interval.font is font:
            return interval
    return None
