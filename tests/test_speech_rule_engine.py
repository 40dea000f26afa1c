"""
Tests for rule selection, expansion and failure recovery.
"""

import logging

import pytest

from mathspeak.errors import ConfigurationError, RuleDefinitionError
from mathspeak.grammar import CORRECTIONS, Grammar
from mathspeak.semantic_annotations import annotate
from mathspeak.speech_rule_engine import SpeechRuleEngine
from mathspeak.speech_rule_store import SpeechRuleStore

from tests.conftest import tree

NUMBERS = ("number", "type = number & is_integer = true", "[cardinal] .")
INFIX = ("infix", "type = infixop", "[m] children")


class TestSelection:

    @pytest.mark.parametrize("order", [0, 1])
    def test_more_specific_rule_wins_in_any_order(self, make_engine, order):
        general = ("operator", "type = operator", '[t] "operator"')
        specific = ("addition", "type = operator & role = addition", '[t] "plus"')
        rules = [general, specific] if order == 0 else [specific, general]
        engine = make_engine(rules)
        assert engine.speak(tree({"text": "+"}), "test") == "plus"

    def test_later_declaration_wins_ties(self, make_engine):
        engine = make_engine([
            ("first", "type = operator", '[t] "first"'),
            ("second", "type = operator", '[t] "second"'),
        ])
        assert engine.speak(tree({"text": "+"}), "test") == "second"

    def test_requested_style_before_default(self):
        store = SpeechRuleStore()
        store.add_rule_set("test", "default", "en", [
            ("default-op", "type = operator & role = addition", '[t] "plus"'),
        ])
        store.add_rule_set("test", "terse", "en", [
            ("terse-op", "type = operator", '[t] "and"'),
        ])
        engine = SpeechRuleEngine(store)
        plus = tree({"text": "+"})
        assert engine.speak(plus, "test", "terse") == "and"
        assert engine.speak(plus, "test", "default") == "plus"

    def test_unknown_style_falls_back_to_default(self, make_engine):
        engine = make_engine([("op", "type = operator", '[t] "op"')])
        assert engine.speak(tree({"text": "+"}), "test", "fancy") == "op"


class TestFallbacks:

    def test_no_rule_speaks_literal_text(self, make_engine):
        engine = make_engine([NUMBERS])
        assert engine.speak(tree({"text": "foo"}), "test") == "foo"

    def test_structural_node_without_rule_is_silent(self, make_engine, sum_tree):
        engine = make_engine([NUMBERS])
        assert engine.speak(sum_tree, "test") == ""

    def test_missing_child_falls_back_to_next_rule(self, make_engine, caplog):
        engine = make_engine([
            ("safe", "type = operator", '[t] "plus"'),
            ("broken", "type = operator & role = addition", '[n] children[4]'),
        ])
        with caplog.at_level(logging.WARNING, logger="mathspeak.speech_rule_engine"):
            assert engine.speak(tree({"text": "+"}), "test") == "plus"
        assert "broken" in caplog.text

    def test_non_integer_number_falls_back(self, make_engine):
        engine = make_engine([("cardinal", "type = number", "[cardinal] .")])
        assert engine.speak(tree({"type": "number", "text": "3.5"}), "test") == "3.5"

    @pytest.mark.parametrize("text", ["²", "①"])
    def test_non_decimal_digit_falls_back(self, make_engine, text):
        engine = make_engine([("cardinal", "type = number", "[cardinal] .")])
        assert engine.speak(tree({"type": "number", "text": text}), "test") == text

    def test_other_decimal_digits_are_spoken(self, make_engine):
        engine = make_engine([NUMBERS])
        assert engine.speak(tree({"type": "number", "text": "٣"}), "test") == "three"

    def test_unexpected_error_falls_back_to_next_rule(self, make_engine, monkeypatch, caplog):
        def explode(text):
            raise KeyError(text)

        monkeypatch.setitem(CORRECTIONS, "explode", explode)
        engine = make_engine([
            ("safe", "type = operator", '[t] "plus"'),
            ("broken", "type = operator & role = addition", '[t] "x" (correct:explode)'),
        ])
        with caplog.at_level(logging.WARNING, logger="mathspeak.speech_rule_engine"):
            assert engine.speak(tree({"text": "+"}), "test") == "plus"
        assert "broken" in caplog.text

    def test_failing_precondition_drops_only_that_rule(self, make_engine):
        class Unprintable:
            def __str__(self):
                raise RuntimeError("no text form")

        engine = make_engine([
            ("plain", "type = number", '[t] "M"'),
            ("female", "type = number & $gender = female", '[t] "F"'),
        ])
        grammar = Grammar({"gender": Unprintable()})
        assert engine.speak(tree({"text": "3"}), "test", grammar=grammar) == "M"

    def test_configuration_error_still_propagates(self, make_engine, monkeypatch):
        def missing(locale):
            raise ConfigurationError(f"No number words for {locale!r}")

        monkeypatch.setitem(CORRECTIONS, "missing", missing)
        engine = make_engine([("op", "type = operator", '[t] "plus" (correct:missing)')])
        with pytest.raises(ConfigurationError):
            engine.speak(tree({"text": "+"}), "test")

    def test_failing_subtree_does_not_abort_siblings(self, make_engine, sum_tree):
        engine = make_engine([
            NUMBERS,
            INFIX,
            ("broken-op", "type = operator", "[ordinal] children[0]"),
        ])
        assert engine.speak(sum_tree, "test") == "three + twenty-one"

    def test_self_reference_hands_over(self, make_engine):
        engine = make_engine([
            ("plain", "type = identifier", '[t] "letter"'),
            ("bold", "type = identifier & font = bold", '[t] "bold"; [n] .'),
        ])
        bold_a = tree({"text": "\U0001D400"})
        assert engine.speak(bold_a, "test") == "bold letter"

    def test_repeated_ids_do_not_block_nested_rules(self, make_engine):
        engine = make_engine([
            NUMBERS,
            ("frac", "type = fraction",
             '[n] children[0]; [t] "over"; [n] children[1]'),
        ])
        nested = tree({"type": "fraction", "id": 0, "children": [
            {"type": "fraction", "id": 0, "children": [
                {"text": "1", "id": 1}, {"text": "2", "id": 1},
            ]},
            {"text": "3", "id": 1},
        ]})
        assert engine.speak(nested, "test") == "one over two over three"

    def test_self_reference_without_other_rule_speaks_text(self, make_engine):
        engine = make_engine([("loop", "type = identifier", '[t] "x is"; [n] .')])
        assert engine.speak(tree({"text": "x"}), "test") == "x is x"


class TestExpansion:

    def test_end_to_end_english(self, make_engine, sum_tree):
        engine = make_engine([
            NUMBERS,
            INFIX,
            ("plus", "type = operator & role = addition", '[t] "plus"'),
        ])
        assert engine.speak(sum_tree, "test") == "three plus twenty-one"

    def test_separator(self, make_engine, sum_tree):
        engine = make_engine([NUMBERS, ("list", "type = infixop", '[m] children (sep:", ")')])
        assert engine.speak(sum_tree, "test") == "three, +, twenty-one"

    def test_ordinals(self, make_engine):
        engine = make_engine([
            ("frac", "type = fraction",
             "[cardinal] children[0]; [ordinal] children[1] (plural)"),
            ("rank", "type = postfixop", "[simple_ordinal] children[0]"),
        ])
        frac = tree({"type": "fraction", "children": [{"text": "3"}, {"text": "4"}]})
        assert engine.speak(frac, "test") == "three fourths"
        rank = tree({"type": "postfixop", "children": [{"text": "22"}]})
        assert engine.speak(rank, "test") == "22nd"

    def test_correction(self, make_engine):
        engine = make_engine([("sum", "type = largeop", '[t] "sum" (correct:capitalize)')])
        assert engine.speak(tree({"text": "∑"}), "test") == "Sum"

    def test_punctuation_spacing(self, make_engine):
        engine = make_engine([
            NUMBERS, INFIX,
            ("comma", "type = punctuation & role = comma", '[t] ","'),
        ])
        node = tree({"type": "infixop", "children": [
            {"text": "1"}, {"text": ","}, {"text": "2"},
        ]})
        assert engine.speak(node, "test") == "one, two"

    def test_annotation_preconditions(self, make_engine):
        engine = make_engine([
            NUMBERS,
            ("fenced", "type = fenced", '[t] "open"; [n] children[0]; [t] "close"'),
            ("fenced-simple", "type = fenced & children[0].@simple = true", "[n] children[0]"),
        ])
        node = tree({"type": "fenced", "children": [{"text": "7"}]})
        assert engine.speak(node, "test") == "open seven close"
        annotate(node)
        assert engine.speak(node, "test") == "seven"


class TestGrammarScoping:

    PROBE = ("probe-female", "type = number & $gender = female", '[t] "F"')
    PROBE_OTHER = ("probe", "type = number", '[t] "M"')

    def test_override_visible_only_inside_step(self, make_engine, sum_tree):
        engine = make_engine([
            self.PROBE_OTHER,
            self.PROBE,
            ("infix", "type = infixop",
             "[n] children[0]; [n] children[0] (gender:female); [n] children[2]"),
        ])
        assert engine.speak(sum_tree, "test") == "M F M"

    def test_caller_grammar_restored(self, make_engine, sum_tree):
        grammar = Grammar({"gender": "male"})
        engine = make_engine([
            self.PROBE_OTHER,
            self.PROBE,
            ("infix", "type = infixop", "[n] children[0] (gender:female); [n] children[2]"),
        ])
        assert engine.speak(sum_tree, "test", grammar=grammar) == "F M"
        assert grammar.parameters == {"gender": "male"}
        assert grammar.depth == 0

    def test_restored_after_failing_step(self, make_engine, sum_tree):
        grammar = Grammar()
        engine = make_engine([
            self.PROBE_OTHER,
            self.PROBE,
            ("infix", "type = infixop", "[m] children"),
            ("infix-broken", "type = infixop & child_count = 3",
             "[n] children[0] (gender:female); [n] children[9] (gender:female)"),
        ])
        assert engine.speak(sum_tree, "test", grammar=grammar) == "M + M"
        assert grammar.parameters == {}

    def test_ordinal_reads_gender(self, make_engine):
        engine = make_engine([
            ("ord", "type = number", "[ordinal] ."),
            ("ord-m", "type = number & $case = m", "[ordinal] . (gender:male)"),
        ], locale="es")
        assert engine.speak(tree({"text": "3"}), "test", locale="es") == "tercera"
        grammar = Grammar({"case": "m"})
        assert engine.speak(tree({"text": "3"}), "test", locale="es", grammar=grammar) == "tercero"


class TestConfiguration:

    def test_missing_rule_set(self, make_engine):
        engine = make_engine([NUMBERS])
        with pytest.raises(ConfigurationError):
            engine.speak(tree({"text": "1"}), "no-such-domain")

    def test_missing_locale(self, make_engine):
        engine = make_engine([NUMBERS])
        with pytest.raises(ConfigurationError):
            engine.speak(tree({"text": "1"}), "test", locale="de")

    def test_broken_rule_definition(self):
        store = SpeechRuleStore()
        with pytest.raises(RuleDefinitionError):
            store.add_rule_set("test", "default", "en", [("bad", "type ~ x", "[t] \"\"")])
