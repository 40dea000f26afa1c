"""
grammar.py — Scoped store of linguistic agreement parameters.

A ``Grammar`` is created per top-level generation call.  Rules change
parameters (gender, plural, case, custom flags) only through ``scope``,
which restores the previous values when the scoped step ends, whether it
succeeded or not.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Callable, Iterator, Mapping, Optional, Union

from mathspeak.errors import GrammarScopeError

logger = logging.getLogger(__name__)

GrammarValue = Union[str, bool]

_MISSING = object()


# ─────────────────────────────────────────────
# Text corrections
# ─────────────────────────────────────────────

def _capitalize(text: str) -> str:
    return text[:1].upper() + text[1:]


def _plural(text: str) -> str:
    if not text or text.endswith("s"):
        return text
    if text.endswith("y") and text[-2:-1] not in "aeiou":
        return text[:-1] + "ies"
    return text + "s"


CORRECTIONS: dict[str, Callable[[str], str]] = {
    "capitalize": _capitalize,
    "plural": _plural,
}


class Grammar:
    """Parameter store with push/pop scoping."""

    def __init__(self, parameters: Optional[Mapping[str, GrammarValue]] = None):
        self.parameters: dict[str, GrammarValue] = dict(parameters or {})
        self._stack: list[dict[str, object]] = []

    def get_parameter(self, name: str) -> Optional[GrammarValue]:
        return self.parameters.get(name)

    def set_parameter(self, name: str, value: Optional[GrammarValue]) -> Optional[GrammarValue]:
        """Set (or clear, with ``None``/``False``) a parameter; returns the old value."""
        previous = self.parameters.get(name)
        if value is None or value is False:
            self.parameters.pop(name, None)
        else:
            self.parameters[name] = value
        return previous

    def push_state(self, assignments: Mapping[str, Optional[GrammarValue]]) -> None:
        saved = {name: self.parameters.get(name, _MISSING) for name in assignments}
        self._stack.append(saved)
        for name, value in assignments.items():
            self.set_parameter(name, value)

    def pop_state(self) -> None:
        if not self._stack:
            raise GrammarScopeError("Grammar state popped on an empty stack")
        saved = self._stack.pop()
        for name, value in saved.items():
            if value is _MISSING:
                self.parameters.pop(name, None)
            else:
                self.parameters[name] = value

    @contextmanager
    def scope(self, assignments: Mapping[str, Optional[GrammarValue]]) -> Iterator["Grammar"]:
        self.push_state(assignments)
        try:
            yield self
        finally:
            self.pop_state()

    @property
    def depth(self) -> int:
        return len(self._stack)

    def correct(self, text: str, name: str) -> str:
        """Apply the named text correction, leaving *text* alone if unknown."""
        func = CORRECTIONS.get(name)
        if func is None:
            logger.warning("Unknown grammar correction %r", name)
            return text
        return func(text)
