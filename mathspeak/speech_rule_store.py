"""
speech_rule_store.py — Rule sets keyed by (domain, style, locale).

Rule sets live in the ``rules`` package, one module per locale.  Each
module exposes::

    LOCALE = "en"
    RULE_SETS = {
        ("mathspeak", "default"): [
            ("number", "type = number", "[cardinal] ."),
            ...
        ],
    }

A locale module is imported and parsed the first time any of its rule
sets is requested; parsed rules are cached for the life of the store.
"""

from __future__ import annotations

import importlib
import logging
from typing import Iterable, Optional

from mathspeak.errors import ConfigurationError
from mathspeak.speech_rule import SpeechRule

logger = logging.getLogger(__name__)

DEFAULT_STYLE = "default"

RuleDefinition = tuple[str, str, str]
RuleKey = tuple[str, str, str]


def normalize_locale(locale: str) -> str:
    return locale.lower().replace("_", "-").split("-")[0]


class SpeechRuleStore:
    """Lazily populated cache of parsed rule sets."""

    def __init__(self, package: str = "rules"):
        self.package = package
        self._rule_sets: dict[RuleKey, list[SpeechRule]] = {}
        self._loaded: set[str] = set()

    # ── Population ───────────────────────────────────────────────

    def add_rule_set(
        self,
        domain: str,
        style: str,
        locale: str,
        definitions: Iterable[RuleDefinition],
    ) -> list[SpeechRule]:
        """Parse and register rules; later definitions extend an existing set."""
        locale = normalize_locale(locale)
        rules = self._rule_sets.setdefault((domain, style, locale), [])
        for name, precondition, action in definitions:
            rules.append(SpeechRule.from_definition(
                name, precondition, action, domain, style, locale, order=len(rules),
            ))
        logger.debug("Rule set %s/%s/%s now has %d rules", domain, style, locale, len(rules))
        return rules

    def load_locale(self, locale: str) -> None:
        locale = normalize_locale(locale)
        if locale in self._loaded:
            return
        module_name = f"{self.package}.{locale}"
        try:
            module = importlib.import_module(module_name)
        except ModuleNotFoundError as err:
            if err.name not in (module_name, self.package):
                raise
            # Remember the miss so we do not retry the import every call.
            self._loaded.add(locale)
            logger.info("No rule module for locale %r", locale)
            return
        for (domain, style), definitions in module.RULE_SETS.items():
            self.add_rule_set(domain, style, locale, definitions)
        self._loaded.add(locale)
        logger.info("Loaded rules for locale %r from %s", locale, module_name)

    # ── Lookup ───────────────────────────────────────────────────

    def has_rule_set(self, domain: str, style: str, locale: str) -> bool:
        self.load_locale(locale)
        return (domain, style, normalize_locale(locale)) in self._rule_sets

    def rules_for(self, domain: str, style: str, locale: str) -> list[SpeechRule]:
        """
        All rules usable for the configuration: the requested style plus
        the default style of the same domain and locale.

        Raises ``ConfigurationError`` if neither exists.
        """
        locale = normalize_locale(locale)
        self.load_locale(locale)
        rules: list[SpeechRule] = list(self._rule_sets.get((domain, style, locale), []))
        if style != DEFAULT_STYLE:
            rules.extend(self._rule_sets.get((domain, DEFAULT_STYLE, locale), []))
        if not rules:
            raise ConfigurationError(
                f"No rule set for domain={domain!r} style={style!r} locale={locale!r}"
            )
        return rules

    def keys(self, locale: Optional[str] = None) -> list[RuleKey]:
        if locale is not None:
            self.load_locale(locale)
        return sorted(self._rule_sets)


_store: Optional[SpeechRuleStore] = None


def get_store() -> SpeechRuleStore:
    """Process-wide store shared by every engine that is not given one."""
    global _store
    if _store is None:
        _store = SpeechRuleStore()
    return _store
