"""
mathspeak — Speech generation for semantic trees of mathematical notation.

Typical use::

    from mathspeak import run_pipeline
    result = run_pipeline(tree_dict, locale="es")
    result["speech"]
"""

from mathspeak.errors import (
    ConfigurationError,
    GrammarScopeError,
    MathSpeakError,
    RuleDefinitionError,
    RuleFailure,
    StructuralViolation,
)
from mathspeak.grammar import Grammar
from mathspeak.pipeline import run_pipeline
from mathspeak.semantic_meaning import (
    SemanticFont,
    SemanticMeaning,
    SemanticRole,
    SemanticType,
)
from mathspeak.semantic_node import SemanticNode, make_leaf
from mathspeak.speech_generator import generator_for
from mathspeak.speech_rule_engine import SpeechRuleEngine

__all__ = [
    "ConfigurationError",
    "Grammar",
    "GrammarScopeError",
    "MathSpeakError",
    "RuleDefinitionError",
    "RuleFailure",
    "SemanticFont",
    "SemanticMeaning",
    "SemanticNode",
    "SemanticRole",
    "SemanticType",
    "SpeechRuleEngine",
    "StructuralViolation",
    "generator_for",
    "make_leaf",
    "run_pipeline",
]
