"""
speech_rule.py — Speech rules and their action language.

An action is a ``;``-separated list of components::

    [t] "over"                      literal text
    [t] "sum" (correct:capitalize)  literal with a grammar correction
    [n] children[0] (gender:male)   speech of a related node
    [m] children (sep:", ")         speech of every child of a node
    [cardinal] .                    node text as cardinal words
    [ordinal] children[1] (plural)  node text as ordinal words
    [simple_ordinal] .              numeral plus ordinal suffix

Options in parentheses are grammar assignments scoped to the one
component.  ``key:value`` sets a parameter, a bare ``key`` sets a flag
and ``key:none`` clears it.  ``sep`` and ``correct`` are read by the
component itself and never reach the grammar.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Optional

from mathspeak.errors import RuleDefinitionError
from mathspeak.grammar import CORRECTIONS, GrammarValue
from mathspeak.precondition import (
    PathStep,
    Precondition,
    format_path,
    parse_path,
    parse_precondition,
)

COMPONENT_KINDS = ("t", "n", "m", "cardinal", "ordinal", "simple_ordinal")

_COMPONENT_RE = re.compile(
    r"""^\s*\[(?P<kind>\w+)\]\s*
        (?P<content>"(?:[^"\\]|\\.)*"|[^\s(]+)\s*
        (?:\((?P<options>.*)\))?\s*$""",
    re.X | re.S,
)
_OPTION_RE = re.compile(r'\s*(\w+)\s*(?::\s*("(?:[^"\\]|\\.)*"|[^,]*))?\s*(?:,|$)')


def _unquote(token: str) -> str:
    return re.sub(r"\\(.)", r"\1", token[1:-1])


def _split_components(text: str) -> list[str]:
    """Split on ``;`` outside of quotes."""
    parts, current, quoted, previous = [], [], False, ""
    for char in text:
        if char == '"' and previous != "\\":
            quoted = not quoted
        if char == ";" and not quoted:
            parts.append("".join(current))
            current = []
        else:
            current.append(char)
        previous = char
    parts.append("".join(current))
    return [p for p in parts if p.strip()]


def _parse_options(text: str, source: str) -> dict[str, Optional[GrammarValue]]:
    options: dict[str, Optional[GrammarValue]] = {}
    position = 0
    text = text.strip()
    while position < len(text):
        match = _OPTION_RE.match(text, position)
        if not match or match.end() == position:
            raise RuleDefinitionError("Malformed options", source)
        key, value = match.groups()
        if value is None:
            options[key] = True
        else:
            value = value.strip()
            if value.startswith('"'):
                options[key] = _unquote(value)
            elif value == "none":
                options[key] = None
            else:
                options[key] = value
        position = match.end()
    return options


@dataclass(frozen=True)
class Component:
    """One step of a rule's action."""

    kind: str
    text: str = ""
    path: tuple[PathStep, ...] = ()
    grammar: dict[str, Optional[GrammarValue]] = field(default_factory=dict)
    sep: Optional[str] = None
    correction: Optional[str] = None

    def __str__(self) -> str:
        if self.kind == "t":
            body = f'"{self.text}"'
        elif self.kind == "m":
            body = (format_path(self.path) + ".children").lstrip("./")
        else:
            body = format_path(self.path)
        return f"[{self.kind}] {body}"


def parse_component(text: str) -> Component:
    match = _COMPONENT_RE.match(text)
    if not match:
        raise RuleDefinitionError("Malformed action component", text)
    kind, content = match.group("kind"), match.group("content")
    if kind not in COMPONENT_KINDS:
        raise RuleDefinitionError(f"Unknown component kind [{kind}]", text)
    options = _parse_options(match.group("options") or "", text)
    sep = options.pop("sep", None)
    correction = options.pop("correct", None)
    if correction is not None and correction not in CORRECTIONS:
        raise RuleDefinitionError(f"Unknown correction {correction!r}", text)

    if kind == "t":
        if not content.startswith('"'):
            raise RuleDefinitionError("Text components need a quoted string", text)
        return Component(kind, text=_unquote(content), grammar=options,
                         correction=correction)
    if kind == "m":
        # The path names the list of children: "children" or "x.children".
        head, _, last = content.rpartition(".")
        if last != "children":
            raise RuleDefinitionError("[m] needs a path ending in children", text)
        return Component(kind, path=parse_path(head), grammar=options,
                         sep=None if sep is None else str(sep))
    return Component(kind, path=parse_path(content), grammar=options)


def parse_action(text: str) -> tuple[Component, ...]:
    components = tuple(parse_component(part) for part in _split_components(text))
    if not components:
        raise RuleDefinitionError("Empty action", text)
    return components


# ─────────────────────────────────────────────
# Rules
# ─────────────────────────────────────────────

@dataclass(frozen=True)
class SpeechRule:
    name: str
    precondition: Precondition
    action: tuple[Component, ...]
    domain: str
    style: str
    locale: str
    order: int = 0

    @property
    def specificity(self) -> tuple[int, int]:
        return self.precondition.specificity

    def __str__(self) -> str:
        actions = "; ".join(str(c) for c in self.action)
        return f"{self.name} | {self.precondition.source} | {actions}"

    @classmethod
    def from_definition(
        cls,
        name: str,
        precondition: str,
        action: str,
        domain: str,
        style: str,
        locale: str,
        order: int = 0,
    ) -> "SpeechRule":
        """Parse a rule from its textual definition."""
        try:
            return cls(
                name=name,
                precondition=parse_precondition(precondition),
                action=parse_action(action),
                domain=domain,
                style=style,
                locale=locale,
                order=order,
            )
        except RuleDefinitionError as err:
            raise RuleDefinitionError(f"Rule {name!r}: {err}") from err
