"""
post_processor.py — Final clean-up of generated speech.

Rules produce a list of fragments per node; this joins them with the
locale's joiner and tidies the result so that nested expansions never
leave doubled spaces or spaces in front of punctuation.
"""

from __future__ import annotations

import re
from typing import Iterable

_SPACES_RE = re.compile(r"\s+")
_SPACE_BEFORE_PUNCT_RE = re.compile(r"\s+([.,;:!?])")


def clean_speech(fragments: Iterable[str], joiner: str = " ") -> str:
    """Join non-empty *fragments* and normalise whitespace."""
    text = joiner.join(f for f in fragments if f and f.strip())
    text = _SPACES_RE.sub(" ", text)
    text = _SPACE_BEFORE_PUNCT_RE.sub(r"\1", text)
    return text.strip()
