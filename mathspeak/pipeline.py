"""
pipeline.py — End-to-end orchestrator.

Ties together every stage of the tree-to-speech pipeline:
  1. Build the semantic tree (from a JSON-style dict if needed).
  2. Run the registered annotation passes.
  3. Generate speech with the rule engine.

This module is the single entry point used by the Streamlit UI and the
HTTP API.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional, Union

import config
from mathspeak.semantic_annotations import annotate
from mathspeak.semantic_node import SemanticNode
from mathspeak.speech_rule_engine import SpeechRuleEngine

logger = logging.getLogger(__name__)


def run_pipeline(
    tree: Union[SemanticNode, dict[str, Any]],
    domain: Optional[str] = None,
    style: Optional[str] = None,
    locale: Optional[str] = None,
    progress_callback: Optional[Callable[[str, float], None]] = None,
    engine: Optional[SpeechRuleEngine] = None,
) -> dict:
    """
    Execute the full tree → speech pipeline.

    Parameters
    ----------
    tree : SemanticNode | dict
        Semantic tree, or its ``to_dict`` form.
    domain, style, locale : str
        Rule configuration (defaults from ``config``).
    progress_callback : callable
        ``callback(stage, fraction)`` for UI progress updates.

    Returns
    -------
    dict with keys:
        "speech" → str
        "tree"   → annotated tree as a dict
        "locale", "domain", "style" → the configuration used
    """
    domain = domain or config.DEFAULT_DOMAIN
    style = style or config.DEFAULT_STYLE
    locale = locale or config.DEFAULT_LOCALE

    def _progress(msg: str, frac: float) -> None:
        logger.info("[%.0f%%] %s", frac * 100, msg)
        if progress_callback:
            progress_callback(msg, frac)

    # ── 1. Build tree ────────────────────────────────────────
    _progress("Building semantic tree…", 0.0)
    root = tree if isinstance(tree, SemanticNode) else SemanticNode.from_dict(tree)

    # ── 2. Annotate ──────────────────────────────────────────
    _progress("Annotating tree…", 0.3)
    annotate(root)

    # ── 3. Generate speech ───────────────────────────────────
    _progress("Generating speech…", 0.6)
    speech = (engine or SpeechRuleEngine()).speak(root, domain, style, locale)

    _progress("Pipeline finished!", 1.0)

    return {
        "speech": speech,
        "tree": root.to_dict(),
        "locale": locale,
        "domain": domain,
        "style": style,
    }
