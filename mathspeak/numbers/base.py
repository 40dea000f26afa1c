"""
base.py — Shape shared by every locale's number-to-words module.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from mathspeak.grammar import Grammar

# Cardinal conversion gives up on words at this magnitude and returns digits.
MAGNITUDE_CEILING = 10 ** 36


@dataclass(frozen=True)
class Numbers:
    """Number conversion functions of one locale."""

    locale: str
    number_to_words: Callable[[int], str]
    number_to_ordinal: Callable[[int, bool, Optional[Grammar]], str]
    simple_ordinal: Callable[[int, Optional[Grammar]], str]
    vulgar_sep: str = "-"
    joiner: str = " "


def check_non_negative(num: int) -> int:
    if isinstance(num, bool) or not isinstance(num, int):
        raise TypeError(f"Expected an integer, got {type(num).__name__}")
    if num < 0:
        raise ValueError(f"Cannot convert negative number {num} to words")
    return num


def gender_of(grammar: Optional[Grammar]) -> Optional[str]:
    if grammar is None:
        return None
    value = grammar.get_parameter("gender")
    return value if isinstance(value, str) else None
