"""
errors.py — Exception types raised by the speech pipeline.

Only two kinds of failure ever reach a caller of the top-level generation
call: a missing rule set (``ConfigurationError``) and a broken rule file
(``RuleDefinitionError``).  Everything below ``RuleFailure`` is recovered
inside the rule engine by falling back to the next candidate rule.
"""

from __future__ import annotations


class MathSpeakError(Exception):
    """Base class for all errors raised by this package."""


class ConfigurationError(MathSpeakError):
    """No rule set or number table exists for the requested configuration."""


class RuleDefinitionError(MathSpeakError):
    """A precondition or action string could not be parsed."""

    def __init__(self, message: str, source: str = ""):
        super().__init__(f"{message}: {source!r}" if source else message)
        self.source = source


class RuleFailure(MathSpeakError):
    """A rule matched but could not be expanded for this node."""

    def __init__(self, message: str, rule_name: str = ""):
        super().__init__(message)
        self.rule_name = rule_name


class StructuralViolation(RuleFailure):
    """A generation step addressed a node that does not exist."""


class GrammarScopeError(StructuralViolation):
    """Grammar state was popped without a matching push."""
