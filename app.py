"""
app.py — Streamlit interface for the MathSpeak pipeline.

Single-page app with:
  • JSON editor for a semantic tree
  • Sidebar for locale, domain and style selection
  • Progress bar showing pipeline stages
  • Split view: generated speech (left) + annotated tree (right)
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

# Ensure project root is on the path so imports work
sys.path.insert(0, str(Path(__file__).resolve().parent))

import streamlit as st

import config
from mathspeak.errors import MathSpeakError
from mathspeak.numbers import LOCALES
from mathspeak.pipeline import run_pipeline


EXAMPLE_TREE = {
    "type": "infixop",
    "role": "addition",
    "children": [
        {"text": "3"},
        {"text": "+"},
        {"text": "21"},
    ],
}


# ─────────────────────────────────────────────
# Page config
# ─────────────────────────────────────────────

st.set_page_config(
    page_title="MathSpeak",
    page_icon="🔢",
    layout="wide",
)

# ─────────────────────────────────────────────
# Sidebar — settings
# ─────────────────────────────────────────────

locales = sorted(LOCALES)

with st.sidebar:
    st.header("Settings")

    locale = st.selectbox(
        "Locale",
        options=locales,
        index=locales.index(config.DEFAULT_LOCALE) if config.DEFAULT_LOCALE in locales else 0,
    )
    domain = st.text_input("Domain", value=config.DEFAULT_DOMAIN)
    style = st.text_input(
        "Style",
        value=config.DEFAULT_STYLE,
        help="Rules of the chosen style are tried before the default style.",
    )

    st.divider()
    st.caption(
        "Leaves without a `type` are classified from their text by the "
        "symbol registry."
    )

# ─────────────────────────────────────────────
# Main area
# ─────────────────────────────────────────────

st.title("🔢 MathSpeak")
st.markdown(
    "Turn a semantic tree of a formula into the words a screen reader "
    "should say. Paste a tree below and hit **Speak**."
)

tree_input = st.text_area(
    "Semantic tree (JSON)",
    value=json.dumps(EXAMPLE_TREE, indent=2, ensure_ascii=False),
    height=260,
)

speak_btn = st.button("Speak", type="primary", use_container_width=True)

# ─────────────────────────────────────────────
# Pipeline execution
# ─────────────────────────────────────────────

if speak_btn:
    try:
        tree = json.loads(tree_input)
    except json.JSONDecodeError as exc:
        st.error(f"Invalid JSON: {exc}")
        st.stop()

    progress_bar = st.progress(0)
    status_text = st.empty()

    def _progress(msg: str, frac: float) -> None:
        progress_bar.progress(min(frac, 1.0))
        status_text.text(msg)

    try:
        result = run_pipeline(
            tree,
            domain=domain,
            style=style,
            locale=locale,
            progress_callback=_progress,
        )
    except (MathSpeakError, ValueError, TypeError) as exc:
        st.error(f"Pipeline failed: {exc}")
        st.exception(exc)
        st.stop()

    status_text.text("Done!")

    col_left, col_right = st.columns([3, 2])

    with col_left:
        st.subheader("Speech")
        st.markdown(f"> {result['speech']}")
        st.download_button(
            label="Download Speech",
            data=result["speech"],
            file_name="speech.txt",
            mime="text/plain",
        )

    with col_right:
        st.subheader("Annotated tree")
        st.json(result["tree"])
