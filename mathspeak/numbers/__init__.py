"""Locale number-to-words engines."""

from __future__ import annotations

from mathspeak.errors import ConfigurationError
from mathspeak.numbers.base import Numbers
from mathspeak.numbers.numbers_en import NUMBERS as _EN
from mathspeak.numbers.numbers_es import NUMBERS as _ES
from mathspeak.numbers.numbers_fr import NUMBERS as _FR

LOCALES: dict[str, Numbers] = {n.locale: n for n in (_EN, _ES, _FR)}


def get_numbers(locale: str) -> Numbers:
    """Number functions for *locale* (``"es"``, ``"es-MX"`` → Spanish)."""
    key = locale.lower().replace("_", "-").split("-")[0]
    try:
        return LOCALES[key]
    except KeyError:
        raise ConfigurationError(f"No number tables for locale {locale!r}") from None


__all__ = ["Numbers", "LOCALES", "get_numbers"]
