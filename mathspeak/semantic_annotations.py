"""
semantic_annotations.py — Registered annotation passes.

Every pass registered here runs over a tree before speech is generated,
annotators first, then visitors, each in registration order.  Rules can
then test the results with ``@domain = value`` preconditions.
"""

from __future__ import annotations

import logging
from typing import Any

from mathspeak.semantic_annotator import SemanticAnnotator, SemanticVisitor
from mathspeak.semantic_meaning import SemanticRole, SemanticType
from mathspeak.semantic_node import SemanticNode

logger = logging.getLogger(__name__)

_annotators: dict[str, SemanticAnnotator] = {}
_visitors: dict[str, SemanticVisitor] = {}


def register_annotator(annotator: SemanticAnnotator) -> None:
    _annotators[annotator.name] = annotator


def register_visitor(visitor: SemanticVisitor) -> None:
    _visitors[visitor.name] = visitor


def unregister(name: str) -> None:
    _annotators.pop(name, None)
    _visitors.pop(name, None)


def registered() -> list[str]:
    return list(_annotators) + list(_visitors)


def annotate(node: SemanticNode) -> SemanticNode:
    """Run every registered pass over the tree rooted at *node*."""
    for annotator in _annotators.values():
        logger.debug("Annotating %s with %s", node.id, annotator.name)
        annotator.annotate(node)
    for visitor in _visitors.values():
        logger.debug("Visiting %s with %s", node.id, visitor.name)
        visitor.visit(node, visitor.default_info)
    return node


# ─────────────────────────────────────────────
# Built-in passes
# ─────────────────────────────────────────────

_SIMPLE_NUMBERS = (SemanticRole.INTEGER, SemanticRole.FLOAT)


def _is_simple(node: SemanticNode) -> bool:
    """
    Simple expressions are spoken without grouping words: numbers,
    single identifiers and negated numbers.
    """
    if node.is_leaf:
        if node.type is SemanticType.NUMBER:
            return node.role in _SIMPLE_NUMBERS
        return node.type is SemanticType.IDENTIFIER
    if node.type is SemanticType.PREFIXOP and node.role is SemanticRole.NEGATIVE:
        operands = [c for c in node.children if c.type is not SemanticType.OPERATOR]
        return len(operands) == 1 and operands[0].type is SemanticType.NUMBER
    return False


def _leaf_position(node: SemanticNode, info: Any) -> tuple[int, int]:
    # Leaves consume a position; inner nodes record where their first leaf is.
    if node.is_leaf:
        return info, info + 1
    return info, info


register_annotator(SemanticAnnotator("simple", _is_simple))
register_visitor(SemanticVisitor("leaf_position", _leaf_position, 0))
