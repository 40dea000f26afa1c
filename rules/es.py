"""
es.py — Spanish speech rules.

Ordinals default to the feminine (la potencia tercera, la raíz cuarta);
fractions ask for the masculine plural (tres cuartos).
"""

LOCALE = "es"

_LEAVES = [
    ("number", "type = number & is_integer = true", "[cardinal] ."),
    ("number-una", "type = number & text = 1 & $gender = female", '[t] "una"'),
    ("bold", "type = identifier & font = bold", '[t] "negrita"; [n] .'),
    ("empty-set", "type = identifier & role = setempty", '[t] "el conjunto vacío"'),
    ("infinity", "type = identifier & role = infty", '[t] "infinito"'),
    ("comma", "type = punctuation & role = comma", '[t] ","'),
    ("sum", "type = largeop & role = sum", '[t] "suma"'),
    ("integral", "type = largeop & role = integral", '[t] "integral"'),
]

_OPERATORS = [
    ("addition", "type = operator & role = addition", '[t] "más"'),
    ("plus-minus", 'type = operator & role = addition & text = "±"',
     '[t] "más menos"'),
    ("subtraction", "type = operator & role = subtraction", '[t] "menos"'),
    ("multiplication", "type = operator & role = multiplication", '[t] "por"'),
    ("division", "type = operator & role = division", '[t] "entre"'),
    ("equals", 'type = relation & text = "="', '[t] "es igual a"'),
    ("not-equals", 'type = relation & text = "≠"', '[t] "no es igual a"'),
    ("less", 'type = relation & text = "<"', '[t] "menor que"'),
    ("greater", 'type = relation & text = ">"', '[t] "mayor que"'),
    ("less-equal", 'type = relation & text = "≤"', '[t] "menor o igual que"'),
    ("greater-equal", 'type = relation & text = "≥"', '[t] "mayor o igual que"'),
]

_STRUCTURES = [
    ("infixop", "type = infixop", "[m] children"),
    ("relseq", "type = relseq", "[m] children"),
    ("punctuated", "type = punctuated", "[m] children"),
    ("negative", "type = prefixop & role = negative", '[t] "menos"; [n] children[-1]'),
    ("fenced", "type = fenced",
     '[t] "abrir paréntesis"; [n] children[0]; [t] "cerrar paréntesis"'),
    ("fenced-simple", "type = fenced & children[0].@simple = true",
     "[n] children[0]"),
    ("appl", "type = appl", '[n] children[0]; [t] "de"; [n] children[1]'),
    ("sqrt", "type = sqrt", '[t] "raíz cuadrada de"; [n] children[0]'),
    ("root", "type = root",
     '[t] "raíz"; [ordinal] children[0]; [t] "de"; [n] children[1]'),
    ("subscript", "type = subscript", '[n] children[0]; [t] "sub"; [n] children[1]'),
    ("superscript", "type = superscript",
     '[n] children[0]; [t] "elevado a"; [n] children[1]'),
    ("superscript-ordinal", "type = superscript & children[1].is_integer = true",
     '[n] children[0]; [t] "a la"; [ordinal] children[1]; [t] "potencia"'),
    ("squared", "type = superscript & children[1].text = 2",
     '[n] children[0]; [t] "al cuadrado"'),
    ("cubed", "type = superscript & children[1].text = 3",
     '[n] children[0]; [t] "al cubo"'),
    ("fraction", "type = fraction",
     '[t] "fracción con numerador"; [n] children[0]; '
     '[t] "y denominador"; [n] children[1]'),
    ("vulgar", "type = fraction & role = vulgar & children[1].is_integer = true",
     "[cardinal] children[0]; [ordinal] children[1] (gender:male, plural)"),
    ("vulgar-un", "type = fraction & role = vulgar & children[0].text = 1",
     '[t] "un"; [ordinal] children[1] (gender:male)'),
    ("vulgar-medios", "type = fraction & role = vulgar & children[1].text = 2",
     '[cardinal] children[0]; [t] "medios"'),
    ("vulgar-tercios", "type = fraction & role = vulgar & children[1].text = 3",
     '[cardinal] children[0]; [t] "tercios"'),
    ("vulgar-medio", "type = fraction & role = vulgar & children[0].text = 1 "
     "& children[1].text = 2", '[t] "un medio"'),
    ("vulgar-tercio", "type = fraction & role = vulgar & children[0].text = 1 "
     "& children[1].text = 3", '[t] "un tercio"'),
]

RULE_SETS = {
    ("mathspeak", "default"): _LEAVES + _OPERATORS + _STRUCTURES,
}
