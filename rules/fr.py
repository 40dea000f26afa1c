"""
fr.py — French speech rules.
"""

LOCALE = "fr"

_LEAVES = [
    ("number", "type = number & is_integer = true", "[cardinal] ."),
    ("number-une", "type = number & text = 1 & $gender = female", '[t] "une"'),
    ("bold", "type = identifier & font = bold", '[t] "gras"; [n] .'),
    ("empty-set", "type = identifier & role = setempty", '[t] "l\'ensemble vide"'),
    ("infinity", "type = identifier & role = infty", '[t] "infini"'),
    ("comma", "type = punctuation & role = comma", '[t] ","'),
    ("sum", "type = largeop & role = sum", '[t] "somme"'),
    ("integral", "type = largeop & role = integral", '[t] "intégrale"'),
]

_OPERATORS = [
    ("addition", "type = operator & role = addition", '[t] "plus"'),
    ("plus-minus", 'type = operator & role = addition & text = "±"',
     '[t] "plus ou moins"'),
    ("subtraction", "type = operator & role = subtraction", '[t] "moins"'),
    ("multiplication", "type = operator & role = multiplication", '[t] "fois"'),
    ("division", "type = operator & role = division", '[t] "divisé par"'),
    ("equals", 'type = relation & text = "="', '[t] "égale"'),
    ("not-equals", 'type = relation & text = "≠"', '[t] "différent de"'),
    ("less", 'type = relation & text = "<"', '[t] "inférieur à"'),
    ("greater", 'type = relation & text = ">"', '[t] "supérieur à"'),
    ("less-equal", 'type = relation & text = "≤"', '[t] "inférieur ou égal à"'),
    ("greater-equal", 'type = relation & text = "≥"', '[t] "supérieur ou égal à"'),
]

_STRUCTURES = [
    ("infixop", "type = infixop", "[m] children"),
    ("relseq", "type = relseq", "[m] children"),
    ("punctuated", "type = punctuated", "[m] children"),
    ("negative", "type = prefixop & role = negative", '[t] "moins"; [n] children[-1]'),
    ("fenced", "type = fenced",
     '[t] "parenthèse ouvrante"; [n] children[0]; [t] "parenthèse fermante"'),
    ("fenced-simple", "type = fenced & children[0].@simple = true",
     "[n] children[0]"),
    ("appl", "type = appl", '[n] children[0]; [t] "de"; [n] children[1]'),
    ("sqrt", "type = sqrt", '[t] "racine carrée de"; [n] children[0]'),
    ("root", "type = root",
     '[t] "racine"; [ordinal] children[0] (gender:female); [t] "de"; [n] children[1]'),
    ("subscript", "type = subscript", '[n] children[0]; [t] "indice"; [n] children[1]'),
    ("superscript", "type = superscript",
     '[n] children[0]; [t] "puissance"; [n] children[1]'),
    ("squared", "type = superscript & children[1].text = 2",
     '[n] children[0]; [t] "au carré"'),
    ("cubed", "type = superscript & children[1].text = 3",
     '[n] children[0]; [t] "au cube"'),
    ("fraction", "type = fraction",
     '[t] "fraction avec numérateur"; [n] children[0]; '
     '[t] "et dénominateur"; [n] children[1]'),
    ("vulgar", "type = fraction & role = vulgar & children[1].is_integer = true",
     "[cardinal] children[0]; [ordinal] children[1] (plural)"),
    ("vulgar-un", "type = fraction & role = vulgar & children[0].text = 1",
     '[t] "un"; [ordinal] children[1]'),
    ("vulgar-demis", "type = fraction & role = vulgar & children[1].text = 2",
     '[cardinal] children[0]; [t] "demis"'),
    ("vulgar-tiers", "type = fraction & role = vulgar & children[1].text = 3",
     '[cardinal] children[0]; [t] "tiers"'),
    ("vulgar-quarts", "type = fraction & role = vulgar & children[1].text = 4",
     '[cardinal] children[0]; [t] "quarts"'),
    ("vulgar-demi", "type = fraction & role = vulgar & children[0].text = 1 "
     "& children[1].text = 2", '[t] "un demi"'),
    ("vulgar-tiers-un", "type = fraction & role = vulgar & children[0].text = 1 "
     "& children[1].text = 3", '[t] "un tiers"'),
    ("vulgar-quart", "type = fraction & role = vulgar & children[0].text = 1 "
     "& children[1].text = 4", '[t] "un quart"'),
]

RULE_SETS = {
    ("mathspeak", "default"): _LEAVES + _OPERATORS + _STRUCTURES,
}
