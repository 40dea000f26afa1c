"""
Central configuration for the MathSpeak pipeline.

All tuneable knobs live here so that switching locale, rule style or the
published attribute requires editing exactly one file (or the ``.env``).
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (before any os.getenv calls)
load_dotenv(Path(__file__).resolve().parent / ".env")

# ──────────────────────────────────────────────
# Paths
# ──────────────────────────────────────────────
PROJECT_ROOT = Path(__file__).resolve().parent

# ──────────────────────────────────────────────
# Speech generation
# ──────────────────────────────────────────────
DEFAULT_LOCALE = os.getenv("MATHSPEAK_LOCALE", "en")
DEFAULT_DOMAIN = os.getenv("MATHSPEAK_DOMAIN", "mathspeak")
DEFAULT_STYLE = os.getenv("MATHSPEAK_STYLE", "default")

# Attribute the tree generator writes and the direct generator reads
SPEECH_ATTRIBUTE = os.getenv("MATHSPEAK_SPEECH_ATTRIBUTE", "data-semantic-speech")

# ──────────────────────────────────────────────
# Service
# ──────────────────────────────────────────────
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
API_HOST = os.getenv("API_HOST", "127.0.0.1")
API_PORT = int(os.getenv("API_PORT", "8000"))
