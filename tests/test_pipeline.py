"""Tests for the end-to-end pipeline and the speech post-processor."""

import pytest

from mathspeak.errors import ConfigurationError
from mathspeak.pipeline import run_pipeline
from mathspeak.post_processor import clean_speech

SUM = {
    "type": "infixop",
    "role": "addition",
    "children": [{"text": "3"}, {"text": "+"}, {"text": "21"}],
}


class TestRunPipeline:

    @pytest.mark.parametrize("locale,expected", [
        ("en", "three plus twenty-one"),
        ("es", "tres más veintiuno"),
        ("fr", "trois plus vingt et un"),
    ])
    def test_sum_in_every_locale(self, locale, expected):
        result = run_pipeline(SUM, domain="mathspeak", style="default", locale=locale)
        assert result["speech"] == expected
        assert result["locale"] == locale

    def test_result_shape(self):
        result = run_pipeline(SUM, locale="en")
        assert set(result) == {"speech", "tree", "locale", "domain", "style"}
        assert result["domain"] == "mathspeak"
        assert result["style"] == "default"

    def test_tree_is_annotated(self):
        result = run_pipeline(SUM, locale="en")
        first = result["tree"]["children"][0]
        assert first["annotation"]["simple"] == [True]
        assert first["type"] == "number"

    def test_accepts_node(self, sum_tree):
        assert run_pipeline(sum_tree, locale="en")["speech"] == "three plus twenty-one"

    def test_progress_callback(self):
        calls = []
        run_pipeline(SUM, locale="en", progress_callback=lambda msg, frac: calls.append(frac))
        assert calls[0] == 0.0
        assert calls[-1] == 1.0
        assert calls == sorted(calls)

    def test_configuration_error_surfaces(self):
        with pytest.raises(ConfigurationError):
            run_pipeline(SUM, domain="clearspeak", locale="en")

    def test_superscript_digit_exponent(self):
        data = {"type": "superscript", "children": [{"text": "x"}, {"text": "²"}]}
        assert run_pipeline(data, locale="en")["speech"] == "x raised to the ² power"

    def test_malformed_tree(self):
        with pytest.raises(ValueError):
            run_pipeline({"type": "not-a-type"}, locale="en")


class TestCleanSpeech:

    @pytest.mark.parametrize("fragments,expected", [
        (["three", "plus", "four"], "three plus four"),
        (["a", "", "  ", "b"], "a b"),
        (["one", ",", "two"], "one, two"),
        (["  x  squared "], "x squared"),
        (["x\n", "\ty"], "x y"),
        ([], ""),
    ])
    def test_clean(self, fragments, expected):
        assert clean_speech(fragments) == expected

    def test_joiner(self):
        assert clean_speech(["a", "b"], joiner="-") == "a-b"
