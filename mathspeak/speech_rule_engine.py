"""
speech_rule_engine.py — Selects and executes speech rules over a tree.

Generation for a node runs in three steps:

  1. SELECT   every rule of the active configuration whose precondition
              holds, ranked best first.
  2. EXPAND   the best rule's action, component by component.  Child
              references recurse into SELECT for the child node.
  3. ASSEMBLE the fragments into one normalised string.

A rule whose precondition or expansion fails (missing child, non-numeric
text for a number component, recursion onto itself) is logged and the next
candidate is tried.  When no rule succeeds, the node's own text is spoken.
Only a missing rule set is reported to the caller.
"""

from __future__ import annotations

import logging
from typing import Optional

import config
from mathspeak.errors import ConfigurationError, RuleFailure
from mathspeak.grammar import Grammar
from mathspeak.numbers import Numbers, get_numbers
from mathspeak.post_processor import clean_speech
from mathspeak.precondition import resolve_path
from mathspeak.semantic_node import SemanticNode
from mathspeak.speech_rule import Component, SpeechRule
from mathspeak.speech_rule_store import SpeechRuleStore, get_store

logger = logging.getLogger(__name__)


def rank_key(rule: SpeechRule, style: str) -> tuple[bool, tuple[int, int], int]:
    """Exact style first, then specificity, then later declaration."""
    return rule.style == style, rule.specificity, rule.order


class _Generation:
    """State of a single top-level generation call."""

    def __init__(self, rules: list[SpeechRule], style: str, numbers: Numbers, grammar: Grammar):
        self.rules = rules
        self.style = style
        self.numbers = numbers
        self.grammar = grammar
        self._active: set[tuple[int, str]] = set()

    # ── SELECT ───────────────────────────────────────────────────

    def _applies(self, rule: SpeechRule, node: SemanticNode) -> bool:
        try:
            return rule.precondition.matches(node, self.grammar)
        except Exception as err:
            logger.warning("Precondition of %r failed on node %s: %s", rule.name, node.id, err)
            return False

    def select(self, node: SemanticNode) -> list[SpeechRule]:
        candidates = [r for r in self.rules if self._applies(r, node)]
        candidates.sort(key=lambda r: rank_key(r, self.style), reverse=True)
        return candidates

    def speak(self, node: SemanticNode) -> str:
        for rule in self.select(node):
            if (id(node), rule.name) in self._active:
                # A rule speaking its own node hands over to the next rule.
                logger.debug("Skipping %r on node %s: already expanding", rule.name, node.id)
                continue
            try:
                speech = self.expand(rule, node)
            except ConfigurationError:
                raise
            except RuleFailure as err:
                logger.warning("Rule %r failed on node %s: %s", rule.name, node.id, err)
                continue
            except Exception as err:
                logger.warning("Rule %r raised on node %s: %r", rule.name, node.id, err)
                continue
            logger.debug("Node %s spoken by %r: %r", node.id, rule.name, speech)
            return speech
        logger.debug("No rule for node %s, speaking its text", node.id)
        return node.text

    # ── EXPAND ───────────────────────────────────────────────────

    def expand(self, rule: SpeechRule, node: SemanticNode) -> str:
        # Keyed on the node object: ids in client trees need not be unique.
        key = (id(node), rule.name)
        if key in self._active:
            raise RuleFailure(f"Rule {rule.name!r} recursed onto node {node.id}", rule.name)
        self._active.add(key)
        try:
            fragments = []
            for component in rule.action:
                with self.grammar.scope(component.grammar):
                    fragments.append(self.run_component(component, node, rule))
        finally:
            self._active.discard(key)
        # ASSEMBLE
        return clean_speech(fragments, self.numbers.joiner)

    def run_component(self, component: Component, node: SemanticNode, rule: SpeechRule) -> str:
        if component.kind == "t":
            if component.correction:
                return self.grammar.correct(component.text, component.correction)
            return component.text

        target = resolve_path(node, component.path)
        if component.kind == "n":
            return self.speak(target)
        if component.kind == "m":
            parts = [self.speak(child) for child in target.children]
            if component.sep is not None:
                return component.sep.join(p for p in parts if p)
            return clean_speech(parts, self.numbers.joiner)

        value = self._number(target, rule)
        if component.kind == "cardinal":
            return self.numbers.number_to_words(value)
        if component.kind == "ordinal":
            plural = bool(self.grammar.get_parameter("plural"))
            return self.numbers.number_to_ordinal(value, plural, self.grammar)
        return self.numbers.simple_ordinal(value, self.grammar)

    @staticmethod
    def _number(node: SemanticNode, rule: SpeechRule) -> int:
        text = node.text.strip()
        # Superscript and circled digits pass isdigit() but int() rejects them.
        if not text.isdecimal():
            raise RuleFailure(f"Node {node.id} text {node.text!r} is not an integer", rule.name)
        try:
            return int(text)
        except ValueError as err:
            raise RuleFailure(f"Node {node.id} text {node.text!r}: {err}", rule.name) from err


class SpeechRuleEngine:
    """Entry point for rule-based generation."""

    def __init__(self, store: Optional[SpeechRuleStore] = None):
        self.store = store or get_store()

    def speak(
        self,
        node: SemanticNode,
        domain: Optional[str] = None,
        style: Optional[str] = None,
        locale: Optional[str] = None,
        grammar: Optional[Grammar] = None,
    ) -> str:
        """
        Generate speech for the tree rooted at *node*.

        Parameters
        ----------
        node : SemanticNode
            Root of an (annotated) semantic tree.
        domain, style, locale : str
            Active configuration; defaults come from ``config``.
        grammar : Grammar
            Starting grammar parameters.  A fresh one is used if omitted.

        Raises
        ------
        ConfigurationError
            If no rule set or number table exists for the configuration.
        """
        domain = domain or config.DEFAULT_DOMAIN
        style = style or config.DEFAULT_STYLE
        locale = locale or config.DEFAULT_LOCALE
        rules = self.store.rules_for(domain, style, locale)
        numbers = get_numbers(locale)
        generation = _Generation(rules, style, numbers, grammar or Grammar())
        logger.debug("Generating %s/%s/%s for node %s", domain, style, locale, node.id)
        return generation.speak(node)
