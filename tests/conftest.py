"""Shared fixtures for the MathSpeak test suite."""

import pytest

from mathspeak.grammar import Grammar
from mathspeak.semantic_node import SemanticNode
from mathspeak.speech_rule_engine import SpeechRuleEngine
from mathspeak.speech_rule_store import SpeechRuleStore


def tree(data):
    """Build a semantic tree from a nested dict."""
    return SemanticNode.from_dict(data)


@pytest.fixture
def sum_tree():
    """3 + 21 as an infix operation over two integers."""
    return tree({
        "type": "infixop",
        "role": "addition",
        "children": [{"text": "3"}, {"text": "+"}, {"text": "21"}],
    })


@pytest.fixture
def grammar():
    return Grammar()


@pytest.fixture
def store():
    """A store that only knows the shipped locale modules."""
    return SpeechRuleStore()


@pytest.fixture
def make_engine():
    """
    Build an engine over hand-written rules in the ``test`` domain.

    Usage: ``engine = make_engine([(name, precondition, action), ...])``
    """
    def _make(definitions, style="default", locale="en"):
        store = SpeechRuleStore()
        store.add_rule_set("test", style, locale, definitions)
        return SpeechRuleEngine(store)

    return _make
