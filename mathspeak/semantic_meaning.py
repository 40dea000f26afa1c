"""
semantic_meaning.py — Closed vocabularies for semantic types, roles and fonts.

type -- An immutable property of an expression, regardless of its position
        in the math expression (the letter ``f`` is always an identifier).
role -- A description of the role an expression plays in context (``|`` is
        punctuation, but may act as a neutral fence or a divides sign).
font -- The typographic variant of a glyph, where it carries meaning.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SemanticType(Enum):
    # Leaf types.
    PUNCTUATION = "punctuation"
    FENCE = "fence"
    NUMBER = "number"
    IDENTIFIER = "identifier"
    TEXT = "text"
    OPERATOR = "operator"
    RELATION = "relation"
    LARGEOP = "largeop"
    FUNCTION = "function"

    # Branch types.
    ACCENT = "accent"
    FENCED = "fenced"
    FRACTION = "fraction"
    PUNCTUATED = "punctuated"
    RELSEQ = "relseq"
    MULTIREL = "multirel"
    INFIXOP = "infixop"
    PREFIXOP = "prefixop"
    POSTFIXOP = "postfixop"
    APPL = "appl"
    INTEGRAL = "integral"
    BIGOP = "bigop"
    SQRT = "sqrt"
    ROOT = "root"
    LIMUPPER = "limupper"
    LIMLOWER = "limlower"
    LIMBOTH = "limboth"
    SUBSCRIPT = "subscript"
    SUPERSCRIPT = "superscript"
    UNDERSCORE = "underscore"
    OVERSCORE = "overscore"
    TENSOR = "tensor"
    TABLE = "table"
    MULTILINE = "multiline"
    MATRIX = "matrix"
    VECTOR = "vector"
    CASES = "cases"
    ROW = "row"
    LINE = "line"
    CELL = "cell"
    ENCLOSE = "enclose"

    # Proofs and inferences.
    INFERENCE = "inference"
    RULELABEL = "rulelabel"
    CONCLUSION = "conclusion"
    PREMISES = "premises"

    EMPTY = "empty"
    UNKNOWN = "unknown"


class SemanticRole(Enum):
    # Punctuation.
    COMMA = "comma"
    SEMICOLON = "semicolon"
    ELLIPSIS = "ellipsis"
    FULLSTOP = "fullstop"
    QUESTION = "question"
    EXCLAMATION = "exclamation"
    QUOTES = "quotes"
    DASH = "dash"
    TILDE = "tilde"
    PRIME = "prime"
    DEGREE = "degree"
    VBAR = "vbar"
    COLON = "colon"
    OPENFENCE = "openfence"
    CLOSEFENCE = "closefence"
    APPLICATION = "application"
    DUMMY = "dummy"
    UNIT = "unit"
    LABEL = "label"

    # Fences.
    OPEN = "open"
    CLOSE = "close"
    TOP = "top"
    BOTTOM = "bottom"
    NEUTRAL = "neutral"
    METRIC = "metric"

    # Letters.
    LATINLETTER = "latinletter"
    GREEKLETTER = "greekletter"
    OTHERLETTER = "otherletter"
    NUMBERSET = "numbersetletter"

    # Numbers.
    INTEGER = "integer"
    FLOAT = "float"
    OTHERNUMBER = "othernumber"
    MIXED = "mixed"

    # Accents and scripts.
    MULTIACCENT = "multiaccent"
    OVERACCENT = "overaccent"
    UNDERACCENT = "underaccent"
    UNDEROVER = "underover"
    SUBSUP = "subsup"
    LEFTSUB = "leftsub"
    LEFTSUPER = "leftsuper"
    RIGHTSUB = "rightsub"
    RIGHTSUPER = "rightsuper"

    # Fenced and set constructs.
    LEFTRIGHT = "leftright"
    ABOVEBELOW = "abovebelow"
    SETEMPTY = "set empty"
    INFTY = "infty"
    SETEXT = "set extended"
    SETSINGLE = "set singleton"
    SETCOLLECT = "set collection"

    # Text.
    STRING = "string"
    SPACE = "space"

    # Punctuated elements.
    SEQUENCE = "sequence"
    ENDPUNCT = "endpunct"
    STARTPUNCT = "startpunct"
    TEXT = "text"

    # Operators.
    NEGATIVE = "negative"
    POSITIVE = "positive"
    NEGATION = "negation"
    MULTIOP = "multiop"
    PREFIXOP = "prefix operator"
    POSTFIXOP = "postfix operator"

    # Functions.
    LIMFUNC = "limit function"
    INFIXFUNC = "infix function"
    PREFIXFUNC = "prefix function"
    POSTFIXFUNC = "postfix function"
    SIMPLEFUNC = "simple function"
    COMPFUNC = "composed function"

    # Large operators.
    SUM = "sum"
    INTEGRAL = "integral"

    # Geometry.
    GEOMETRY = "geometry"
    BOX = "box"
    BLOCK = "block"

    # Binary operations.
    ADDITION = "addition"
    MULTIPLICATION = "multiplication"
    SUBTRACTION = "subtraction"
    IMPLICIT = "implicit"

    # Fractions.
    DIVISION = "division"
    VULGAR = "vulgar"

    # Relations.
    EQUALITY = "equality"
    INEQUALITY = "inequality"
    ARROW = "arrow"

    # Membership.
    ELEMENT = "element"
    NONELEMENT = "nonelement"
    REELEMENT = "reelement"
    RENONELEMENT = "renonelement"
    SET = "set"

    # Roots.
    SQUAREROOT = "squareroot"
    NTHROOT = "nthroot"

    # Tables and matrices.
    DETERMINANT = "determinant"
    ROWVECTOR = "rowvector"
    BINOMIAL = "binomial"
    SQUAREMATRIX = "squarematrix"
    CYCLE = "cycle"
    MULTILINE = "multiline"
    MATRIX = "matrix"
    VECTOR = "vector"
    CASES = "cases"
    TABLE = "table"

    # Inferences.
    PROOF = "proof"
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    FINAL = "final"
    SINGLE = "single"
    HYP = "hyp"
    AXIOM = "axiom"

    LOGIC = "logic"
    UNKNOWN = "unknown"
    MGLYPH = "mglyph"


class SemanticFont(Enum):
    BOLD = "bold"
    BOLDFRAKTUR = "bold-fraktur"
    BOLDITALIC = "bold-italic"
    BOLDSCRIPT = "bold-script"
    CALIGRAPHIC = "caligraphic"
    CALIGRAPHICBOLD = "caligraphic-bold"
    DOUBLESTRUCK = "double-struck"
    DOUBLESTRUCKITALIC = "double-struck-italic"
    FRAKTUR = "fraktur"
    FULLWIDTH = "fullwidth"
    ITALIC = "italic"
    MONOSPACE = "monospace"
    NORMAL = "normal"
    OLDSTYLE = "oldstyle"
    OLDSTYLEBOLD = "oldstyle-bold"
    SCRIPT = "script"
    SANSSERIF = "sans-serif"
    SANSSERIFITALIC = "sans-serif-italic"
    SANSSERIFBOLD = "sans-serif-bold"
    SANSSERIFBOLDITALIC = "sans-serif-bold-italic"
    UNKNOWN = "unknown"


class SemanticSecondary(Enum):
    ALLLETTERS = "allLetters"
    D = "d"
    BAR = "bar"
    TILDE = "tilde"


@dataclass(frozen=True)
class SemanticMeaning:
    """Immutable (type, role, font) triple assigned to a glyph or node."""

    type: SemanticType = SemanticType.UNKNOWN
    role: SemanticRole = SemanticRole.UNKNOWN
    font: SemanticFont = SemanticFont.UNKNOWN

    @classmethod
    def unknown(cls) -> "SemanticMeaning":
        return cls()

    def to_dict(self) -> dict[str, str]:
        return {
            "type": self.type.value,
            "role": self.role.value,
            "font": self.font.value,
        }


def parse_enum(enum_cls, value):
    """
    Resolve *value* against *enum_cls* by member name or value.

    Accepts ``"ADDITION"``, ``"addition"`` or the enum member itself.
    Raises ``ValueError`` when nothing matches.
    """
    if isinstance(value, enum_cls):
        return value
    text = str(value).strip()
    try:
        return enum_cls(text)
    except ValueError:
        pass
    member = enum_cls.__members__.get(text.upper().replace("-", "").replace(" ", ""))
    if member is None:
        raise ValueError(f"{text!r} is not a valid {enum_cls.__name__}")
    return member
