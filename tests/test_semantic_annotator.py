"""
Tests for annotators, visitors and the registered annotation passes.
"""

import pytest

from mathspeak import semantic_annotations
from mathspeak.semantic_annotator import SemanticAnnotator, SemanticVisitor
from mathspeak.semantic_node import SemanticNode

from tests.conftest import tree


def _count_leaves(node):
    if node.is_leaf:
        return 1
    return sum(c.get_annotation("leaves")[0] for c in node.children)


class TestAnnotator:

    def test_bottom_up(self, sum_tree):
        SemanticAnnotator("leaves", _count_leaves).annotate(sum_tree)
        assert sum_tree.get_annotation("leaves") == [3]
        assert sum_tree.children[0].get_annotation("leaves") == [1]

    def test_idempotent(self, sum_tree):
        annotator = SemanticAnnotator("leaves", _count_leaves)
        annotator.annotate(sum_tree)
        first = [dict(n.annotation) for n in sum_tree.walk()]
        annotator.annotate(sum_tree)
        assert [dict(n.annotation) for n in sum_tree.walk()] == first

    def test_errors_propagate(self, sum_tree):
        def broken(node):
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            SemanticAnnotator("broken", broken).annotate(sum_tree)


class TestVisitor:

    def test_depth_is_threaded_down(self):
        root = tree({"type": "infixop", "children": [
            {"type": "fenced", "children": [{"text": "x"}]},
            {"text": "y"},
        ]})
        # Annotation is the inherited info; children get info + 1.
        visitor = SemanticVisitor("depth", lambda node, info: (info, info + 1), 0)
        visitor.visit(root, 0)
        assert root.get_annotation("depth") == [0]
        assert root.children[0].get_annotation("depth") == [1]

    def test_returns_last_child_result(self):
        root = SemanticNode()
        for _ in range(3):
            root.append_child(SemanticNode())
        visitor = SemanticVisitor("count", lambda node, info: (info, info + 1), 0)
        # Root consumes 0 → 1, children fold 1 → 2 → 3 → 4.
        assert visitor.visit(root, 0) == (3, 4)

    def test_leaf_returns_own_pair(self):
        visitor = SemanticVisitor("x", lambda node, info: ("a", info * 2), 0)
        assert visitor.visit(SemanticNode(), 5) == ("a", 10)


class TestRegisteredPasses:

    def test_builtin_passes_registered(self):
        assert "simple" in semantic_annotations.registered()
        assert "leaf_position" in semantic_annotations.registered()

    def test_simple(self, sum_tree):
        semantic_annotations.annotate(sum_tree)
        assert sum_tree.children[0].has_annotation("simple", True)
        assert sum_tree.children[1].has_annotation("simple", False)
        assert sum_tree.has_annotation("simple", False)

    def test_negative_number_is_simple(self):
        node = tree({"type": "prefixop", "role": "negative",
                     "children": [{"text": "-"}, {"text": "5"}]})
        semantic_annotations.annotate(node)
        assert node.has_annotation("simple", True)

    def test_leaf_position(self, sum_tree):
        semantic_annotations.annotate(sum_tree)
        positions = [c.get_annotation("leaf_position") for c in sum_tree.children]
        assert positions == [[0], [1], [2]]

    def test_register_and_unregister(self, sum_tree):
        semantic_annotations.register_annotator(
            SemanticAnnotator("arity", lambda node: len(node.children))
        )
        try:
            semantic_annotations.annotate(sum_tree)
            assert sum_tree.get_annotation("arity") == [3]
        finally:
            semantic_annotations.unregister("arity")
        assert "arity" not in semantic_annotations.registered()
