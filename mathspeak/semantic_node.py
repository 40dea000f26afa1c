"""
semantic_node.py — Nodes of a semantic tree.

Trees are produced by an external parser; this module only needs each node
to carry a stable id, its text, its semantic meaning, ordered children and
an annotation map.  ``from_dict`` / ``to_dict`` let trees travel as JSON.
"""

from __future__ import annotations

import itertools
from typing import Any, Iterator, Optional

from mathspeak.semantic_attr import meaning_of
from mathspeak.semantic_meaning import (
    SemanticFont,
    SemanticMeaning,
    SemanticRole,
    SemanticType,
    parse_enum,
)

_ids = itertools.count()


class SemanticNode:
    """A node of a semantic tree.  A node owns its children exclusively."""

    def __init__(
        self,
        node_id: Optional[int] = None,
        text: str = "",
        type: SemanticType = SemanticType.UNKNOWN,
        role: SemanticRole = SemanticRole.UNKNOWN,
        font: SemanticFont = SemanticFont.UNKNOWN,
    ):
        self.id = next(_ids) if node_id is None else node_id
        self.text = text
        self.type = type
        self.role = role
        self.font = font
        self.children: list[SemanticNode] = []
        self.parent: Optional[SemanticNode] = None
        self.annotation: dict[str, list[Any]] = {}

    def __repr__(self) -> str:
        return (
            f"SemanticNode(id={self.id}, type={self.type.value}, "
            f"role={self.role.value}, text={self.text!r})"
        )

    # ── Structure ────────────────────────────────────────────────

    def append_child(self, child: "SemanticNode") -> "SemanticNode":
        if child.parent is not None:
            raise ValueError(f"Node {child.id} already belongs to node {child.parent.id}")
        child.parent = self
        self.children.append(child)
        return child

    @property
    def is_leaf(self) -> bool:
        return not self.children

    @property
    def index(self) -> int:
        """Position among the parent's children, ``-1`` for the root."""
        if self.parent is None:
            return -1
        return next(i for i, c in enumerate(self.parent.children) if c is self)

    def ancestors(self) -> Iterator["SemanticNode"]:
        node = self.parent
        while node is not None:
            yield node
            node = node.parent

    def walk(self) -> Iterator["SemanticNode"]:
        """Pre-order traversal of the subtree rooted here."""
        yield self
        for child in self.children:
            yield from child.walk()

    def meaning(self) -> SemanticMeaning:
        return SemanticMeaning(self.type, self.role, self.font)

    # ── Annotations ──────────────────────────────────────────────

    def add_annotation(self, domain: str, value: Any) -> None:
        """Record *value* under *domain* unless it is already present."""
        values = self.annotation.setdefault(domain, [])
        if value not in values:
            values.append(value)

    def get_annotation(self, domain: str) -> list[Any]:
        return self.annotation.get(domain, [])

    def has_annotation(self, domain: str, value: Any) -> bool:
        return value in self.annotation.get(domain, [])

    # ── Serialisation ────────────────────────────────────────────

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "text": self.text,
            "type": self.type.value,
            "role": self.role.value,
            "font": self.font.value,
        }
        if self.children:
            data["children"] = [c.to_dict() for c in self.children]
        if self.annotation:
            data["annotation"] = {k: list(v) for k, v in self.annotation.items()}
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SemanticNode":
        """
        Build a tree from nested dictionaries.

        Leaves without an explicit ``type`` are classified through the
        symbol registry; unknown enum names raise ``ValueError``.
        """
        text = str(data.get("text", ""))
        children = data.get("children") or []
        if "type" not in data and not children and text:
            node = make_leaf(text, data.get("id"))
        else:
            node = cls(
                node_id=data.get("id"),
                text=text,
                type=parse_enum(SemanticType, data.get("type", "unknown")),
                role=parse_enum(SemanticRole, data.get("role", "unknown")),
                font=parse_enum(SemanticFont, data.get("font", "unknown")),
            )
        for child in children:
            node.append_child(cls.from_dict(child))
        for domain, values in (data.get("annotation") or {}).items():
            for value in values:
                node.add_annotation(domain, value)
        return node


def make_leaf(text: str, node_id: Optional[int] = None) -> SemanticNode:
    """
    Create a leaf classified by the symbol registry.

    Multi-digit numerals are not glyphs of their own, so a string made of
    registered digits is given the meaning of its first digit.
    """
    meaning = meaning_of(text)
    if meaning.type is SemanticType.UNKNOWN and len(text) > 1 and text.isdecimal():
        meaning = meaning_of(text[0])
    return SemanticNode(node_id, text, meaning.type, meaning.role, meaning.font)
