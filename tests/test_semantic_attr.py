"""
Tests for the symbol meaning registry.

Covers glyph classification, the last-group-wins initialisation order,
secondary annotations and fence matching.
"""

import pytest

from mathspeak import alphabet
from mathspeak.semantic_attr import (
    REGISTRY,
    SYMBOL_GROUPS,
    SecondaryMap,
    build_registry,
    equal,
    fences_match,
    is_metric_fence,
    is_neutral_fence,
    meaning_of,
    secondary_of,
)
from mathspeak.semantic_meaning import (
    SemanticFont,
    SemanticMeaning,
    SemanticRole,
    SemanticSecondary,
    SemanticType,
)


class TestMeaningOf:
    """Glyph → meaning lookups."""

    @pytest.mark.parametrize("glyph", ["", "\U0001F600", "abc", "͸"])
    def test_unregistered_glyph_is_unknown(self, glyph):
        assert meaning_of(glyph) == SemanticMeaning.unknown()

    def test_plus_is_addition(self):
        meaning = meaning_of("+")
        assert meaning.type is SemanticType.OPERATOR
        assert meaning.role is SemanticRole.ADDITION

    def test_minus_sign_is_subtraction(self):
        assert meaning_of("−").role is SemanticRole.SUBTRACTION

    def test_equals_is_equality_relation(self):
        meaning = meaning_of("=")
        assert meaning.type is SemanticType.RELATION
        assert meaning.role is SemanticRole.EQUALITY

    @pytest.mark.parametrize("digit", list("0123456789"))
    def test_ascii_digits_are_integers(self, digit):
        meaning = meaning_of(digit)
        assert meaning.type is SemanticType.NUMBER
        assert meaning.role is SemanticRole.INTEGER
        assert meaning.font is SemanticFont.NORMAL

    def test_open_paren_is_open_fence(self):
        meaning = meaning_of("(")
        assert meaning.type is SemanticType.FENCE
        assert meaning.role is SemanticRole.OPEN

    def test_sum_is_largeop(self):
        assert meaning_of("∑").type is SemanticType.LARGEOP
        assert meaning_of("∑").role is SemanticRole.SUM

    def test_infinity(self):
        assert meaning_of("∞").role is SemanticRole.INFTY


class TestAlphabets:
    """Styled alphabets expanded from Unicode intervals."""

    def test_bold_latin(self):
        meaning = meaning_of("\U0001D400")  # bold A
        assert meaning.type is SemanticType.IDENTIFIER
        assert meaning.role is SemanticRole.LATINLETTER
        assert meaning.font is SemanticFont.BOLD

    def test_italic_small_h_hole(self):
        # Planck constant fills the hole in the italic small block.
        assert meaning_of("ℎ").font is SemanticFont.ITALIC

    def test_double_struck_capital_r(self):
        meaning = meaning_of("ℝ")
        assert meaning.font is SemanticFont.DOUBLESTRUCK
        assert meaning.type is SemanticType.IDENTIFIER

    def test_fullwidth_is_normal_font(self):
        assert meaning_of("Ａ").font is SemanticFont.NORMAL

    def test_circled_is_unknown_font(self):
        meaning = meaning_of("Ⓐ")
        assert meaning.type is SemanticType.IDENTIFIER
        assert meaning.font is SemanticFont.UNKNOWN

    def test_greek_small_alpha(self):
        meaning = meaning_of("α")
        assert meaning.role is SemanticRole.GREEKLETTER
        assert meaning.type is SemanticType.IDENTIFIER

    @pytest.mark.parametrize("glyph", ["∇", "∂", "\U0001D6C1", "\U0001D6DB"])
    def test_nabla_and_partial_are_operators(self, glyph):
        meaning = meaning_of(glyph)
        assert meaning.type is SemanticType.OPERATOR
        assert meaning.role is SemanticRole.PREFIXOP

    def test_interval_order_does_not_matter(self):
        forward = build_registry(SYMBOL_GROUPS, alphabet.INTERVALS)
        backward = build_registry(SYMBOL_GROUPS, list(reversed(alphabet.INTERVALS)))
        assert dict(forward.meanings) == dict(backward.meanings)


class TestGroupOrder:
    """Later groups overwrite earlier ones."""

    def test_last_group_wins(self):
        from mathspeak.semantic_attr import MeaningSet

        groups = [
            MeaningSet(["x"], SemanticType.IDENTIFIER, SemanticRole.LATINLETTER),
            MeaningSet(["x"], SemanticType.OPERATOR, SemanticRole.MULTIPLICATION),
        ]
        registry = build_registry(groups, [])
        assert registry.meaning_of("x").type is SemanticType.OPERATOR

    def test_dotless_i_overrides_other_letters(self):
        meaning = meaning_of("ı")
        assert meaning.role is SemanticRole.LATINLETTER
        assert meaning.font is SemanticFont.NORMAL

    def test_registry_is_read_only(self):
        with pytest.raises(TypeError):
            REGISTRY.meanings["+"] = SemanticMeaning.unknown()


class TestSecondary:
    """Secondary annotations keyed by kind and glyph."""

    def test_latin_letters_have_all_letters(self):
        assert secondary_of("a", SemanticSecondary.ALLLETTERS) is not None

    def test_small_d_has_d_secondary(self):
        assert secondary_of("d", SemanticSecondary.D) is not None
        assert secondary_of("e", SemanticSecondary.D) is None

    def test_bar_on_dashes(self):
        assert secondary_of("¯", SemanticSecondary.BAR) is not None

    def test_glyph_key_wins_over_kind_default(self):
        secondary = SecondaryMap()
        secondary.set(None, SemanticSecondary.BAR, "default")
        secondary.set("-", SemanticSecondary.BAR, "specific")
        assert secondary.get("-", SemanticSecondary.BAR) == "specific"
        assert secondary.get("~", SemanticSecondary.BAR) == "default"

    def test_missing_kind_is_none(self):
        assert secondary_of("+", SemanticSecondary.TILDE) is None


class TestFences:
    """Fence pairing."""

    @pytest.mark.parametrize("open_fence,close_fence", [
        ("(", ")"), ("[", "]"), ("{", "}"), ("⟨", "⟩"), ("⏞", "⏟"),
    ])
    def test_pairs_match(self, open_fence, close_fence):
        assert fences_match(open_fence, close_fence)

    @pytest.mark.parametrize("open_fence,close_fence", [
        ("(", "}"), ("[", ")"), (")", "("), ("|", "‖"), ("a", "a"),
    ])
    def test_non_pairs_do_not_match(self, open_fence, close_fence):
        assert not fences_match(open_fence, close_fence)

    @pytest.mark.parametrize("fence", ["|", "‖", "∣"])
    def test_neutral_and_metric_match_themselves(self, fence):
        assert fences_match(fence, fence)

    def test_fence_sets(self):
        assert is_neutral_fence("|")
        assert is_metric_fence("‖")
        assert not is_neutral_fence("‖")


class TestEqual:
    def test_equal_meanings(self):
        assert equal(meaning_of("+"), meaning_of("+"))
        assert not equal(meaning_of("+"), meaning_of("-"))
