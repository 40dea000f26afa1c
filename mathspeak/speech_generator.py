"""
speech_generator.py — Façade publishing speech onto document nodes.

Document nodes are whatever the host uses to carry markup; all that is
required is ``get(name)`` and ``set(name, value)``, which
``xml.etree.ElementTree.Element`` already provides.

Variants:
  • TreeSpeechGenerator   → full rule-based generation, result written
                            onto the node's speech attribute.
  • DirectSpeechGenerator → reads a speech attribute computed earlier.
  • DummySpeechGenerator  → always the empty string.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import config
from mathspeak.errors import ConfigurationError
from mathspeak.semantic_annotations import annotate
from mathspeak.semantic_node import SemanticNode
from mathspeak.speech_rule_engine import SpeechRuleEngine

logger = logging.getLogger(__name__)


class SpeechGenerator:
    """Base class; subclasses decide where the string comes from."""

    def __init__(
        self,
        domain: Optional[str] = None,
        style: Optional[str] = None,
        locale: Optional[str] = None,
        attribute: Optional[str] = None,
    ):
        self.domain = domain or config.DEFAULT_DOMAIN
        self.style = style or config.DEFAULT_STYLE
        self.locale = locale or config.DEFAULT_LOCALE
        self.attribute = attribute or config.SPEECH_ATTRIBUTE

    def get_speech(self, node: Any, tree: Optional[SemanticNode] = None) -> str:
        raise NotImplementedError


class TreeSpeechGenerator(SpeechGenerator):
    def __init__(self, *args: Any, engine: Optional[SpeechRuleEngine] = None, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self.engine = engine or SpeechRuleEngine()

    def get_speech(self, node: Any, tree: Optional[SemanticNode] = None) -> str:
        """
        Annotate *tree*, generate its speech and write it onto *node*.

        *node* may be ``None`` when only the string is wanted.
        """
        if tree is None:
            raise ValueError("TreeSpeechGenerator needs a semantic tree")
        annotate(tree)
        speech = self.engine.speak(tree, self.domain, self.style, self.locale)
        if node is not None:
            node.set(self.attribute, speech)
        logger.debug("Speech for tree %s: %r", tree.id, speech)
        return speech


class DirectSpeechGenerator(SpeechGenerator):
    def get_speech(self, node: Any, tree: Optional[SemanticNode] = None) -> str:
        return node.get(self.attribute) or ""


class DummySpeechGenerator(SpeechGenerator):
    def get_speech(self, node: Any, tree: Optional[SemanticNode] = None) -> str:
        return ""


_GENERATORS = {
    "tree": TreeSpeechGenerator,
    "direct": DirectSpeechGenerator,
    "dummy": DummySpeechGenerator,
}


def generator_for(kind: str, **kwargs: Any) -> SpeechGenerator:
    """Create a generator by name: ``"tree"`` | ``"direct"`` | ``"dummy"``."""
    try:
        cls = _GENERATORS[kind]
    except KeyError:
        raise ConfigurationError(f"Unknown speech generator {kind!r}") from None
    return cls(**kwargs)
