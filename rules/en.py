"""
en.py — English speech rules.

Each rule is ``(name, precondition, action)``; see ``mathspeak.precondition``
and ``mathspeak.speech_rule`` for the two small languages.  Within a rule
set, later rules win ties in specificity.
"""

LOCALE = "en"

# ─────────────────────────────────────────────
# Leaves
# ─────────────────────────────────────────────

_LEAVES = [
    ("number", "type = number & is_integer = true", "[cardinal] ."),
    ("bold", "type = identifier & font = bold", '[t] "bold"; [n] .'),
    ("double-struck", "type = identifier & font = double-struck",
     '[t] "double-struck"; [n] .'),
    ("empty-set", "type = identifier & role = setempty", '[t] "the empty set"'),
    ("infinity", "type = identifier & role = infty", '[t] "infinity"'),
    ("comma", "type = punctuation & role = comma", '[t] ","'),
    ("sum", "type = largeop & role = sum", '[t] "sum"'),
    ("integral", "type = largeop & role = integral", '[t] "integral"'),
]

# ─────────────────────────────────────────────
# Operators and relations
# ─────────────────────────────────────────────

_OPERATORS = [
    ("addition", "type = operator & role = addition", '[t] "plus"'),
    ("plus-minus", 'type = operator & role = addition & text = "±"',
     '[t] "plus or minus"'),
    ("subtraction", "type = operator & role = subtraction", '[t] "minus"'),
    ("multiplication", "type = operator & role = multiplication", '[t] "times"'),
    ("division", "type = operator & role = division", '[t] "divided by"'),
    ("equals", 'type = relation & text = "="', '[t] "equals"'),
    ("not-equals", 'type = relation & text = "≠"', '[t] "does not equal"'),
    ("less", 'type = relation & text = "<"', '[t] "is less than"'),
    ("greater", 'type = relation & text = ">"', '[t] "is greater than"'),
    ("less-equal", 'type = relation & text = "≤"',
     '[t] "is less than or equal to"'),
    ("greater-equal", 'type = relation & text = "≥"',
     '[t] "is greater than or equal to"'),
]

# ─────────────────────────────────────────────
# Structures
# ─────────────────────────────────────────────

_STRUCTURES = [
    ("infixop", "type = infixop", "[m] children"),
    ("relseq", "type = relseq", "[m] children"),
    ("punctuated", "type = punctuated", "[m] children"),
    ("negative", "type = prefixop & role = negative",
     '[t] "negative"; [n] children[-1]'),
    ("fenced", "type = fenced",
     '[t] "open paren"; [n] children[0]; [t] "close paren"'),
    ("fenced-simple", "type = fenced & children[0].@simple = true",
     "[n] children[0]"),
    ("appl", "type = appl", '[n] children[0]; [t] "of"; [n] children[1]'),
    ("sqrt", "type = sqrt", '[t] "the square root of"; [n] children[0]'),
    ("root", "type = root",
     '[t] "the"; [ordinal] children[0]; [t] "root of"; [n] children[1]'),
    ("subscript", "type = subscript", '[n] children[0]; [t] "sub"; [n] children[1]'),
    ("superscript", "type = superscript",
     '[n] children[0]; [t] "raised to the"; [n] children[1]; [t] "power"'),
    ("superscript-ordinal", "type = superscript & children[1].is_integer = true",
     '[n] children[0]; [t] "to the"; [ordinal] children[1]; [t] "power"'),
    ("squared", "type = superscript & children[1].text = 2",
     '[n] children[0]; [t] "squared"'),
    ("cubed", "type = superscript & children[1].text = 3",
     '[n] children[0]; [t] "cubed"'),
    ("fraction", "type = fraction",
     '[t] "the fraction with numerator"; [n] children[0]; '
     '[t] "and denominator"; [n] children[1]'),
    ("vulgar", "type = fraction & role = vulgar & children[1].is_integer = true",
     "[cardinal] children[0]; [ordinal] children[1] (plural)"),
    ("vulgar-one", "type = fraction & role = vulgar & children[0].text = 1",
     '[t] "one"; [ordinal] children[1]'),
    ("vulgar-half", "type = fraction & role = vulgar & children[0].text = 1 "
     "& children[1].text = 2", '[t] "one half"'),
]

_BRIEF = [
    ("fenced", "type = fenced", '[t] "open"; [n] children[0]; [t] "close"'),
    ("superscript-ordinal", "type = superscript & children[1].is_integer = true",
     '[n] children[0]; [t] "to the"; [simple_ordinal] children[1]'),
    ("fraction", "type = fraction",
     '[t] "frac"; [n] children[0]; [t] "over"; [n] children[1]'),
]

RULE_SETS = {
    ("mathspeak", "default"): _LEAVES + _OPERATORS + _STRUCTURES,
    ("mathspeak", "brief"): _BRIEF,
}
