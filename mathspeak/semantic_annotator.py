"""
semantic_annotator.py — Bottom-up annotators and top-down visitors.

Both attach values to a named annotation domain on every node of a
semantic tree.  Annotation functions are expected to be total; anything
they raise propagates to the caller untouched.
"""

from __future__ import annotations

from typing import Any, Callable

from mathspeak.semantic_node import SemanticNode

AnnotationFunc = Callable[[SemanticNode], Any]
VisitorFunc = Callable[[SemanticNode, Any], tuple[Any, Any]]


class SemanticAnnotator:
    """Annotates a tree bottom up: children first, then the node itself."""

    def __init__(self, domain: str, func: AnnotationFunc):
        self.domain = domain
        self.func = func
        # Can be changed to a unique name when several passes share a domain.
        self.name = domain

    def annotate(self, node: SemanticNode) -> None:
        for child in node.children:
            self.annotate(child)
        node.add_annotation(self.domain, self.func(node))


class SemanticVisitor:
    """
    Visits a tree top down, threading information through the traversal.

    ``func(node, info)`` returns ``(annotation, info)``.  The annotation is
    recorded on the node; the info is handed to the first child, whose
    traversal result feeds the second child, and so on.  The pair produced
    by the last step is returned, which lets callers fold over siblings.
    """

    def __init__(self, domain: str, func: VisitorFunc, default_info: Any = None):
        self.domain = domain
        self.func = func
        self.default_info = default_info
        self.name = domain

    def visit(self, node: SemanticNode, info: Any) -> tuple[Any, Any]:
        result = self.func(node, info)
        node.add_annotation(self.domain, result[0])
        for child in node.children:
            result = self.visit(child, result[1])
        return result
