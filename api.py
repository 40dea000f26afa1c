"""
api.py — FastAPI backend for MathSpeak.

Provides REST endpoints for:
  • POST /api/speech                → speech for a semantic tree
  • GET  /api/meaning/{glyph}       → registry classification of a glyph
  • GET  /api/numbers/{locale}/{n}  → number words of a locale
  • GET  /api/locales               → available locales and rule sets
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

import config
from mathspeak.errors import ConfigurationError, RuleDefinitionError
from mathspeak.numbers import LOCALES, get_numbers
from mathspeak.pipeline import run_pipeline
from mathspeak.semantic_attr import meaning_of, secondary_of
from mathspeak.semantic_meaning import SemanticSecondary
from mathspeak.speech_rule_store import get_store

logging.basicConfig(level=config.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(title="MathSpeak API", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── Request / Response models ────────────────────────────────────────

class SpeechRequest(BaseModel):
    tree: dict[str, Any]
    domain: Optional[str] = None
    style: Optional[str] = None
    locale: Optional[str] = None


class SpeechResponse(BaseModel):
    speech: str
    locale: str
    domain: str
    style: str
    tree: dict[str, Any]


class MeaningResponse(BaseModel):
    glyph: str
    type: str
    role: str
    font: str
    secondary: dict[str, str] = {}


class NumberResponse(BaseModel):
    locale: str
    number: int
    cardinal: str
    ordinal: str
    simple_ordinal: str


# ── Endpoints ────────────────────────────────────────────────────────

@app.post("/api/speech", response_model=SpeechResponse)
def generate_speech(req: SpeechRequest):
    """Annotate the tree and generate its speech string."""
    try:
        result = run_pipeline(
            req.tree,
            domain=req.domain,
            style=req.style,
            locale=req.locale,
        )
    except ConfigurationError as exc:
        raise HTTPException(404, str(exc))
    except RuleDefinitionError as exc:
        logger.exception("Broken rule set for %s", req.locale)
        raise HTTPException(500, str(exc))
    except (ValueError, TypeError) as exc:
        raise HTTPException(422, f"Malformed tree: {exc}")
    return SpeechResponse(**result)


@app.get("/api/meaning/{glyph}", response_model=MeaningResponse)
def get_meaning(glyph: str):
    """Look up a glyph in the symbol registry; unknown glyphs are not an error."""
    meaning = meaning_of(glyph)
    secondary: dict[str, str] = {}
    for kind in SemanticSecondary:
        value = secondary_of(glyph, kind)
        if value is not None:
            secondary[kind.value] = value
    return MeaningResponse(glyph=glyph, secondary=secondary, **meaning.to_dict())


@app.get("/api/numbers/{locale}/{n}", response_model=NumberResponse)
def get_number_words(locale: str, n: int):
    try:
        numbers = get_numbers(locale)
    except ConfigurationError as exc:
        raise HTTPException(404, str(exc))
    if n < 0:
        raise HTTPException(422, "Only non-negative numbers can be spoken")
    return NumberResponse(
        locale=numbers.locale,
        number=n,
        cardinal=numbers.number_to_words(n),
        ordinal=numbers.number_to_ordinal(n, False, None),
        simple_ordinal=numbers.simple_ordinal(n, None),
    )


@app.get("/api/locales")
def list_locales():
    """Locales with number tables, and the rule sets each one provides."""
    store = get_store()
    return {
        locale: [
            {"domain": domain, "style": style}
            for domain, style, key_locale in store.keys(locale)
            if key_locale == locale
        ]
        for locale in sorted(LOCALES)
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("api:app", host=config.API_HOST, port=config.API_PORT, reload=True)
