"""
precondition.py — Declarative rule preconditions.

A precondition is a conjunction of clauses over a node, its relatives,
its annotations and the current grammar::

    type = infixop & role = addition & children[0].type = number
    @simple = true & child_count in (2, 3)
    $gender != female

Selectors
---------
``type role font text id child_count index is_integer``
    Attributes of the node.  ``type``/``role``/``font`` values are checked
    against the semantic enums when the precondition is parsed.
``@domain``
    True when the value is one of the node's annotations in ``domain``.
``$param``
    Current value of a grammar parameter (unset parameters never equal
    anything).
``parent.``, ``children[i].``
    Path prefixes moving to a relative before reading the attribute.
    Negative indices count from the end.  A path that leads nowhere makes
    the clause false.

Specificity is computed from the parsed structure: more clauses win, and
among equally long preconditions equality beats membership, which beats
inequality.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Optional, Union

from mathspeak.errors import RuleDefinitionError, StructuralViolation
from mathspeak.grammar import Grammar
from mathspeak.semantic_meaning import (
    SemanticFont,
    SemanticRole,
    SemanticType,
    parse_enum,
)
from mathspeak.semantic_node import SemanticNode

# ─────────────────────────────────────────────
# Node paths
# ─────────────────────────────────────────────

PathStep = Union[str, int]  # "parent" or a child index

_STEP_RE = re.compile(r"^(?:(parent)|children\[\s*(-?\d+)\s*\])$")


def parse_path(text: str) -> tuple[PathStep, ...]:
    """
    Parse a dotted node path: ``.`` (the node itself), ``parent``,
    ``children[0]``, ``children[-1].children[1]`` …
    """
    text = text.strip()
    if text in (".", ""):
        return ()
    steps: list[PathStep] = []
    for part in text.split("."):
        match = _STEP_RE.match(part.strip())
        if not match:
            raise RuleDefinitionError("Invalid node path", text)
        steps.append("parent" if match.group(1) else int(match.group(2)))
    return tuple(steps)


def follow_path(node: SemanticNode, steps: tuple[PathStep, ...]) -> Optional[SemanticNode]:
    """Walk *steps* from *node*; ``None`` if the path leaves the tree."""
    current: Optional[SemanticNode] = node
    for step in steps:
        if current is None:
            return None
        if step == "parent":
            current = current.parent
        else:
            try:
                current = current.children[step]
            except IndexError:
                return None
    return current


def resolve_path(node: SemanticNode, steps: tuple[PathStep, ...]) -> SemanticNode:
    """Like ``follow_path`` but a missing node is a structural violation."""
    target = follow_path(node, steps)
    if target is None:
        raise StructuralViolation(
            f"Node {node.id} has no node at path {format_path(steps)}"
        )
    return target


def format_path(steps: tuple[PathStep, ...]) -> str:
    if not steps:
        return "."
    return ".".join("parent" if s == "parent" else f"children[{s}]" for s in steps)


# ─────────────────────────────────────────────
# Selectors
# ─────────────────────────────────────────────

ENUM_ATTRIBUTES = {
    "type": SemanticType,
    "role": SemanticRole,
    "font": SemanticFont,
}
INT_ATTRIBUTES = ("id", "child_count", "index")
BOOL_ATTRIBUTES = ("is_integer",)
STR_ATTRIBUTES = ("text",)

ATTRIBUTES = (*ENUM_ATTRIBUTES, *INT_ATTRIBUTES, *BOOL_ATTRIBUTES, *STR_ATTRIBUTES)

_MISSING = object()


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


@dataclass(frozen=True)
class Selector:
    path: tuple[PathStep, ...]
    kind: str  # "attr" | "annotation" | "grammar"
    name: str

    def __str__(self) -> str:
        prefix = "" if not self.path else format_path(self.path) + "."
        sigil = {"attr": "", "annotation": "@", "grammar": "$"}[self.kind]
        return f"{prefix}{sigil}{self.name}"

    def coerce(self, raw: str) -> Any:
        """Convert a literal from the rule source to the selector's domain."""
        if self.kind != "attr":
            return raw
        if self.name in ENUM_ATTRIBUTES:
            try:
                return parse_enum(ENUM_ATTRIBUTES[self.name], raw)
            except ValueError:
                raise RuleDefinitionError(f"Unknown {self.name} value", raw) from None
        if self.name in INT_ATTRIBUTES:
            try:
                return int(raw)
            except ValueError:
                raise RuleDefinitionError(f"{self.name} needs an integer", raw) from None
        if self.name in BOOL_ATTRIBUTES:
            if raw not in ("true", "false"):
                raise RuleDefinitionError(f"{self.name} needs true or false", raw)
            return raw == "true"
        return raw

    def read(self, node: SemanticNode, grammar: Optional[Grammar]) -> Any:
        """
        Value(s) of the selector at *node*.

        Annotations return the whole list of values in the domain.  A
        missing node or unset grammar parameter returns ``_MISSING``.
        """
        if self.kind == "grammar":
            value = grammar.get_parameter(self.name) if grammar is not None else None
            return _MISSING if value is None else _stringify(value)
        target = follow_path(node, self.path)
        if target is None:
            return _MISSING
        if self.kind == "annotation":
            return [_stringify(v) for v in target.get_annotation(self.name)]
        if self.name == "child_count":
            return len(target.children)
        if self.name == "is_integer":
            return target.text.strip().isdecimal()
        return getattr(target, self.name)


def parse_selector(text: str) -> Selector:
    text = text.strip()
    head, _, last = text.rpartition(".")
    path = parse_path(head) if head else ()
    if last.startswith("@") and len(last) > 1:
        return Selector(path, "annotation", last[1:])
    if last.startswith("$") and len(last) > 1:
        return Selector(path, "grammar", last[1:])
    if last not in ATTRIBUTES:
        raise RuleDefinitionError("Unknown selector", text)
    return Selector(path, "attr", last)


# ─────────────────────────────────────────────
# Clauses
# ─────────────────────────────────────────────

OPERATOR_WEIGHTS = {"=": 3, "in": 2, "!=": 1}

_CLAUSE_RE = re.compile(
    r"""^\s*(?P<selector>[^\s=!]+?)\s*
        (?P<op>!=|=|\bin\b)\s*
        (?P<value>.+?)\s*$""",
    re.X,
)

_VALUE_RE = re.compile(r'"((?:[^"\\]|\\.)*)"|([^,\s][^,]*)')


def _unquote(token: str) -> str:
    return re.sub(r"\\(.)", r"\1", token)


def _parse_values(text: str, membership: bool, source: str) -> list[str]:
    if membership:
        if not (text.startswith("(") and text.endswith(")")):
            raise RuleDefinitionError("Membership needs a parenthesised list", source)
        text = text[1:-1]
    values = []
    for match in _VALUE_RE.finditer(text):
        quoted, bare = match.groups()
        values.append(_unquote(quoted) if quoted is not None else bare.strip())
    if not values or (not membership and len(values) != 1):
        raise RuleDefinitionError("Malformed clause value", source)
    return values


@dataclass(frozen=True)
class Clause:
    selector: Selector
    op: str
    values: tuple[Any, ...]

    @property
    def weight(self) -> int:
        return OPERATOR_WEIGHTS[self.op]

    def holds(self, node: SemanticNode, grammar: Optional[Grammar]) -> bool:
        actual = self.selector.read(node, grammar)
        if actual is _MISSING:
            # Unset grammar parameters differ from every value.
            return self.op == "!=" and self.selector.kind == "grammar"
        if self.selector.kind == "annotation":
            found = any(v in actual for v in self.values)
        else:
            found = actual in self.values
        return not found if self.op == "!=" else found


def parse_clause(text: str) -> Clause:
    match = _CLAUSE_RE.match(text)
    if not match:
        raise RuleDefinitionError("Malformed clause", text)
    selector = parse_selector(match.group("selector"))
    op = match.group("op")
    raw = _parse_values(match.group("value"), op == "in", text)
    return Clause(selector, op, tuple(selector.coerce(v) for v in raw))


# ─────────────────────────────────────────────
# Preconditions
# ─────────────────────────────────────────────

def _split_conjunction(text: str) -> list[str]:
    """Split on ``&`` outside of quotes."""
    parts, current, quoted = [], [], False
    previous = ""
    for char in text:
        if char == '"' and previous != "\\":
            quoted = not quoted
        if char == "&" and not quoted:
            parts.append("".join(current))
            current = []
        else:
            current.append(char)
        previous = char
    parts.append("".join(current))
    return parts


@dataclass(frozen=True)
class Precondition:
    source: str
    clauses: tuple[Clause, ...]

    @property
    def specificity(self) -> tuple[int, int]:
        return len(self.clauses), sum(c.weight for c in self.clauses)

    def matches(self, node: SemanticNode, grammar: Optional[Grammar] = None) -> bool:
        return all(c.holds(node, grammar) for c in self.clauses)


def parse_precondition(text: str) -> Precondition:
    """
    Parse a precondition string.  An empty string matches every node and
    has the lowest possible specificity.
    """
    if not text.strip():
        return Precondition(text, ())
    clauses = []
    for part in _split_conjunction(text):
        if not part.strip():
            raise RuleDefinitionError("Empty clause", text)
        clauses.append(parse_clause(part))
    return Precondition(text, tuple(clauses))
