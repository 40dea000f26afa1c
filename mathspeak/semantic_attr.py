"""
semantic_attr.py — Semantic attributes of mathematical symbols.

Looks up and assigns a default semantics (type, role, font) to every glyph
we know about.  Since there is no such thing as a well-defined semantics
for all of mathematics, the defaults closely model expressions found in
K-12 mathematics and the general undergraduate curriculum.

The registry is built once at import time from an ordered list of symbol
groups followed by the styled alphabets.  A glyph listed in several groups
keeps the meaning of the last group that mentions it, so the order of
``SYMBOL_GROUPS`` is significant.  After import the maps are read-only.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from mathspeak import alphabet
from mathspeak.alphabet import Base, Interval
from mathspeak.semantic_meaning import (
    SemanticFont,
    SemanticMeaning,
    SemanticRole,
    SemanticSecondary,
    SemanticType,
)

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────
# Invisible operators
# ─────────────────────────────────────────────

FUNCTION_APPLICATION = "\u2061"
INVISIBLE_TIMES = "\u2062"
INVISIBLE_COMMA = "\u2063"
INVISIBLE_PLUS = "\u2064"


# ─────────────────────────────────────────────
# Fences
# ─────────────────────────────────────────────

FENCES_HORIZ: dict[str, str] = dict([
    ('(', ')'), ('[', ']'), ('{', '}'), ('⁅', '⁆'), ('〈', '〉'), ('❨', '❩'),
    ('❪', '❫'), ('❬', '❭'), ('❮', '❯'), ('❰', '❱'), ('❲', '❳'), ('❴', '❵'),
    ('⟅', '⟆'), ('⟦', '⟧'), ('⟨', '⟩'), ('⟪', '⟫'), ('⟬', '⟭'), ('⟮', '⟯'),
    ('⦃', '⦄'), ('⦅', '⦆'), ('⦇', '⦈'), ('⦉', '⦊'), ('⦋', '⦌'), ('⦍', '⦎'),
    ('⦏', '⦐'), ('⦑', '⦒'), ('⦓', '⦔'), ('⦕', '⦖'), ('⦗', '⦘'), ('⧘', '⧙'),
    ('⧚', '⧛'), ('⧼', '⧽'), ('⸢', '⸣'), ('⸤', '⸥'), ('⸦', '⸧'), ('⸨', '⸩'),
    ('〈', '〉'), ('《', '》'), ('「', '」'), ('『', '』'), ('【', '】'), ('〔', '〕'),
    ('〖', '〗'), ('〘', '〙'), ('〚', '〛'), ('﴾', '﴿'), ('︗', '︘'), ('﹙', '﹚'),
    ('﹛', '﹜'), ('﹝', '﹞'), ('（', '）'), ('［', '］'), ('｛', '｝'), ('｟', '｠'),
    ('｢', '｣'), ('⌈', '⌉'), ('⌊', '⌋'), ('⌌', '⌍'), ('⌎', '⌏'), ('⌜', '⌝'),
    ('⌞', '⌟'), ('⎛', '⎞'), ('⎜', '⎟'), ('⎝', '⎠'), ('⎡', '⎤'), ('⎢', '⎥'),
    ('⎣', '⎦'), ('⎧', '⎫'), ('⎨', '⎬'), ('⎩', '⎭'), ('⎰', '⎱'), ('⎸', '⎹'),
])

FENCES_VERT: dict[str, str] = dict([
    ('⎴', '⎵'), ('⏜', '⏝'), ('⏞', '⏟'), ('⏠', '⏡'), ('︵', '︶'), ('︷', '︸'),
    ('︹', '︺'), ('︻', '︼'), ('︽', '︾'), ('︿', '﹀'), ('﹁', '﹂'), ('﹃', '﹄'),
    ('﹇', '﹈'),
])

LEFT_FENCES = list(FENCES_HORIZ.keys())
RIGHT_FENCES = list(FENCES_HORIZ.values())
TOP_FENCES = list(FENCES_VERT.keys())
BOTTOM_FENCES = list(FENCES_VERT.values())

NEUTRAL_FENCES = [
    '|', '¦', '∣', '⏐', '⎸', '⎹', '❘', '｜',
    '￤', '︱', '︲', '︳', '︴', '￨',
]

METRIC_FENCES = [
    '‖', '∥', '⦀', '⫴',
]


# ─────────────────────────────────────────────
# Punctuation
# ─────────────────────────────────────────────

GENERAL_PUNCTUATIONS = [
    '#', '%', '&', '@', '\\', '§', '¶', '‗',
    '•', '‣', '․', '‥', '‧', '‰', '‱', '※',
    '⁁', '⁂', '⁃', '⁋', '⁌', '⁍', '⁐', '⁕',
    '⁖', '⁘', '⁙', '⁚', '⁛', '⁜', '⁝', '⁞',
    '﹅', '﹆', '﹟', '﹠', '﹨', '﹪', '﹫', '＃',
    '％', '＆', '／', '＠', '＼', '∴', '∵', '⁉',
    '‼', '¿', '⁇', '⁈', '¡',
]

QUOTES = [
    '"', '︐', '＂', '＇', '˝', '‘', '’', '‚',
    '‛', '“', '”', '„', '‟', '‹', '›', '»',
    '«', '〝', '〞', '〟',
]

SEMICOLONS = [
    ';', '⁏', '︔', '﹔', '；', '⨾', '⨟',
]

QUESTION_MARKS = [
    '?', '‽', '︖', '﹖', '？',
]

EXCLAMATION_MARKS = [
    '!', '︕', '﹗', '！',
]

COLONS = [
    '︓', ':', '：', '﹕', '︰', '⦂',
]

COMMAS = [
    '，', '﹐', ',', INVISIBLE_COMMA,
]

ELLIPSES = [
    '…', '⋮', '⋯', '⋰', '⋱', '︙',
]

FULL_STOPS = [
    '.', '﹒', '．',
]

DASHES = [
    '¯', '‾', '‒', '–', '—', '―', '﹘', '-',
    '⁻', '₋', '−', '➖', '﹣', '－', '‐', '‑',
    '‾', '_', '﹍', '﹎', '﹏', '＿', '￣', '﹉',
    '﹊', '﹋', '﹌',
]

TILDES = [
    '~', '̃', '∼', '˜', '∽', '˷', '̴', '̰',
    '〜', '～', '⁓',
]

PRIMES = [
    "'", '′', '″', '‴', '‵', '‶', '‷', '⁗',
    'ʹ', 'ʺ',
]

DEGREES = [
    '°',
]

OVER_ACCENTS = [
    '^', 'ˇ', '`', '¨', 'ª', '´', 'º', '˘',
    '˙', '˚', '⁀', '⁺', '⁽', '⁾', '＾', '｀',
]

UNDER_ACCENTS = [
    '¸', '˛', '‿', '⁔', '₊', '₍', '₎', '‸',
]


# ─────────────────────────────────────────────
# Operators, relations, functions
# ─────────────────────────────────────────────

# Operator symbols
ADDITIONS = [
    '+', '±', '∓', '∔', '∨', '∪', '⊌', '⊍',
    '⊎', '⊔', '⊝', '⊞', '⊻', '⋄', '⋎', '⋓',
    '⊕', '✛', '✜', '➕', '﹢', '＋', '⨹', '⨢',
    '⨣', '⨤', '⨥', '⨦', '⨧', '⨨', '⨭', '⨮',
    '⫝̸', '⫝', '⧺', '⧻', '⧾', '⊽', '⟏', '⩂',
    '⩅', '⩆', '⩈', '⩊', '⩌', '⩏', '⩐', '⩒',
    '⩔', '⩖', '⩗', '⩙', '⩛', '⩝', '⩡', '⩢',
    '⩣', '⌄',
    INVISIBLE_PLUS,
]

MULTIPLICATIONS = [
    '⊹', '†', '‡', '∗', '∘', '∙', '≀', '⊚',
    '⊛', '⊠', '⊡', '⋅', '⋆', '⋇', '⋈', '⋉',
    '⋊', '⋋', '⋌', '○', '·', '*', '⁎', '⁑',
    '﹡', '＊', '⊗', '⊙', '✕', '✖', '×', '⨯',
    '⨰', '⨱', '⨲', '⨳', '⨴', '⨵', '⨶', '⨷',
    '⨻', '⨼', '⨽', '⨝', '⧑', '⧒', '⧓', '⧔',
    '⧕', '⧖', '⧗', '⧢', '⋔', '⫚', '⫛', '∧',
    '∩', '⊓', '⊼', '⋏', '⋒', '⩞', '⌅', '⌆',
    '⟎', '⟑', '⩀', '⩃', '⩄', '⩇', '⩉', '⩋',
    '⩍', '⩎', '⩑', '⩓', '⩕', '⩘', '⩚', '⩜',
    '⩟', '⩠', '⌃',
    INVISIBLE_TIMES,
]

SUBTRACTIONS = [
    '¯', '-', '⁒', '⁻', '₋', '−', '∖', '∸',
    '≂', '⊖', '⊟', '➖', '⨩', '⨪', '⨫', '⨬',
    '⨺', '⩁', '﹣', '－', '‐', '‑', '⧿',
]

DIVISIONS = [
    '/', '÷', '⁄', '∕', '⊘', '⟌', '⦼', '⨸',
    '➗', '⧵', '⧶', '⧷', '⧸', '⧹',
]

# Relation symbols
EQUALITIES = [
    '=', '~', '⁼', '₌', '∼', '∽', '≃', '≅',
    '≈', '≊', '≋', '≌', '≍', '≎', '≑', '≒',
    '≓', '≔', '≕', '≖', '≗', '≘', '≙', '≚',
    '≛', '≜', '≝', '≞', '≟', '≡', '≣', '⧤',
    '⩦', '⩮', '⩯', '⩰', '⩱', '⩲', '⩳', '⩴',
    '⩵', '⩶', '⩷', '⩸', '⋕', '⩭', '⩪', '⩫',
    '⩬', '﹦', '＝', '⩬', '⊜', '∷', '∺', '∻',
    '∾', '∿', '⋍', '⩧', '⧦', '∝',
]

INEQUALITIES = [
    '<', '>', '≁', '≂', '≄', '≆', '≇', '≉',
    '≏', '≐', '≠', '≢', '≤', '≥', '≦', '≧',
    '≨', '≩', '≪', '≫', '≬', '≭', '≮', '≯',
    '≰', '≱', '≲', '≳', '≴', '≵', '≶', '≷',
    '≸', '≹', '≺', '≻', '≼', '≽', '≾', '≿',
    '⊀', '⊁', '⋖', '⋗', '⋘', '⋙', '⋚', '⋛',
    '⋜', '⋝', '⋞', '⋟', '⋠', '⋡', '⋦', '⋧',
    '⋨', '⋩', '⩹', '⩺', '⩻', '⩼', '⩽', '⩾',
    '⩿', '⪀', '⪁', '⪂', '⪃', '⪄', '⪅', '⪆',
    '⪇', '⪈', '⪉', '⪊', '⪋', '⪌', '⪍', '⪎',
    '⪏', '⪐', '⪑', '⪒', '⪓', '⪔', '⪕', '⪖',
    '⪗', '⪘', '⪙', '⪚', '⪛', '⪜', '⪝', '⪞',
    '⪟', '⪠', '⪡', '⪢', '⪣', '⪤', '⪥', '⪦',
    '⪧', '⪨', '⪩', '⪪', '⪫', '⪬', '⪭', '⪮',
    '⪯', '⪰', '⪱', '⪲', '⪳', '⪴', '⪵', '⪶',
    '⪷', '⪸', '⪹', '⪺', '⪻', '⪼', '⫷', '⫸',
    '⫹', '⫺', '⧀', '⧁', '﹤', '﹥', '＜', '＞',
    '⥶', '⥷', '⥸', '⊰', '⊱', '⧣', '⧥', '⧡',
]

SET_RELATIONS = [
    '⋢', '⋣', '⋤', '⋥', '⊂', '⊃', '⊄', '⊅',
    '⊆', '⊇', '⊈', '⊉', '⊊', '⊋', '⊏', '⊐',
    '⊑', '⊒', '⪽', '⪾', '⪿', '⫀', '⫁', '⫂',
    '⫃', '⫄', '⫅', '⫆', '⫇', '⫈', '⫉', '⫊',
    '⫋', '⫌', '⫍', '⫎', '⫏', '⫐', '⫑', '⫒',
    '⫓', '⫔', '⫕', '⫖', '⫗', '⫘', '⋐', '⋑',
    '⋪', '⋫', '⋬', '⋭', '⊲', '⊳', '⊴', '⊵',
    '⥹', '⥺', '⥻', '⟃', '⟄', '⟇', '⟈', '⟉',
    '⊶', '⊷', '⊸', '⟕', '⟖', '⟗', '⟜', '⧟',
]

ELEMENT_RELATIONS = [
    '∈', '∊', '⋲', '⋳', '⋴', '⋵', '⋶', '⋷',
    '⋸', '⋹', '⋿', '⫙', '⟒',
]

NONELEMENT_RELATIONS = [
    '∉',
]

REELEMENT_RELATIONS = [
    '∋', '∍', '⋺', '⋻', '⋼', '⋽', '⋾',
]

RENONELEMENT_RELATIONS = [
    '∌',
]

SET_EMPTY = [
    '∅', '⦰', '⦳', '⦱', '⦲', '⦴',
]

INFTY = [
    '⧜', '⧝', '⧞', '∞', '᪲',
]

LOGIC_IDENTIFIERS = [
    '⫟', '⫠', '⫧', '⫨', '⫩', '⫪', '⫫', '⟘',
    '⟙', '⟟', '⫱', '⊤', '⊥', '⊺',
]

# Mainly tacks and turnstiles so far.
LOGIC_RELATIONS = [
    '⊢', '⊣', '⊦', '⊧', '⊨', '⊩', '⊪', '⊫',
    '⊬', '⊭', '⊮', '⊯', '⫞', '⫢', '⫣', '⫤',
    '⫥', '⫦', '⫬', '⫭', '⟚', '⟛', '⟝', '⟞',
]

# Arrows and harpoons
ARROWS = [
    '←', '↑', '→', '↓', '↔', '↕', '↖', '↗',
    '↘', '↙', '↚', '↛', '↜', '↝', '↞', '↟',
    '↠', '↡', '↢', '↣', '↤', '↥', '↦', '↧',
    '↨', '↩', '↪', '↫', '↬', '↭', '↮', '↯',
    '↰', '↱', '↲', '↳', '↴', '↵', '↶', '↷',
    '↸', '↹', '↺', '↻', '⇄', '⇅', '⇆', '⇇',
    '⇈', '⇉', '⇊', '⇍', '⇎', '⇏', '⇐', '⇑',
    '⇒', '⇓', '⇔', '⇕', '⇖', '⇗', '⇘', '⇙',
    '⇚', '⇛', '⇜', '⇝', '⇞', '⇟', '⇠', '⇡',
    '⇢', '⇣', '⇤', '⇥', '⇦', '⇧', '⇨', '⇩',
    '⇪', '⇫', '⇬', '⇭', '⇮', '⇯', '⇰', '⇱',
    '⇲', '⇳', '⇴', '⇵', '⇶', '⇷', '⇸', '⇹',
    '⇺', '⇻', '⇼', '⇽', '⇾', '⇿', '⌁', '⌤',
    '⎋', '➔', '➘', '➙', '➚', '➛', '➜', '➝',
    '➞', '➟', '➠', '➡', '➢', '➣', '➤', '➥',
    '➦', '➧', '➨', '➩', '➪', '➫', '➬', '➭',
    '➮', '➯', '➱', '➲', '➳', '➴', '➵', '➶',
    '➷', '➸', '➹', '➺', '➻', '➼', '➽', '➾',
    '⟰', '⟱', '⟲', '⟳', '⟴', '⟵', '⟶', '⟷',
    '⟸', '⟹', '⟺', '⟻', '⟼', '⟽', '⟾', '⟿',
    '⤀', '⤁', '⤂', '⤃', '⤄', '⤅', '⤆', '⤇',
    '⤈', '⤉', '⤊', '⤋', '⤌', '⤍', '⤎', '⤏',
    '⤐', '⤑', '⤒', '⤓', '⤔', '⤕', '⤖', '⤗',
    '⤘', '⤙', '⤚', '⤛', '⤜', '⤝', '⤞', '⤟',
    '⤠', '⤡', '⤢', '⤣', '⤤', '⤥', '⤦', '⤧',
    '⤨', '⤩', '⤪', '⤭', '⤮', '⤯', '⤰', '⤱',
    '⤲', '⤳', '⤴', '⤵', '⤶', '⤷', '⤸', '⤹',
    '⤺', '⤻', '⤼', '⤽', '⤾', '⤿', '⥀', '⥁',
    '⥂', '⥃', '⥄', '⥅', '⥆', '⥇', '⥈', '⥉',
    '⥰', '⥱', '⥲', '⥳', '⥴', '⥵', '⬀', '⬁',
    '⬂', '⬃', '⬄', '⬅', '⬆', '⬇', '⬈', '⬉',
    '⬊', '⬋', '⬌', '⬍', '⬎', '⬏', '⬐', '⬑',
    '⬰', '⬱', '⬲', '⬳', '⬴', '⬵', '⬶', '⬷',
    '⬸', '⬹', '⬺', '⬻', '⬼', '⬽', '⬾', '⬿',
    '⭀', '⭁', '⭂', '⭃', '⭄', '⭅', '⭆', '⭇',
    '⭈', '⭉', '⭊', '⭋', '⭌', '￩', '￪', '￫',
    '￬', '↼', '↽', '↾', '↿', '⇀', '⇁', '⇂',
    '⇃', '⇋', '⇌', '⥊', '⥋', '⥌', '⥍', '⥎',
    '⥏', '⥐', '⥑', '⥒', '⥓', '⥔', '⥕', '⥖',
    '⥗', '⥘', '⥙', '⥚', '⥛', '⥜', '⥝', '⥞',
    '⥟', '⥠', '⥡', '⥢', '⥣', '⥤', '⥥', '⥦',
    '⥧', '⥨', '⥩', '⥪', '⥫', '⥬', '⥭', '⥮',
    '⥯', '⥼', '⥽', '⥾', '⥿',
]

RELATIONS = [
    '∶', '⟠', '⟡', '⟢', '⟣', '⟤', '⟥', '⤫',
    '⤬', '⦵', '⦶', '⦷', '⦸', '⦹', '⦺', '⦻',
    '⦾', '⦿', '⧂', '⧃', '⧄', '⧅', '⧆', '⧇',
    '⧈', '⧉', '⧊', '⧋', '⧌', '⧍', '⧎', '⧏',
    '⧐',
]

OPERATORS = [
    '∤', '∦', '∹', '➰', '➿', '⟂', '⟊', '⫡',
    '⟋', '⟍', '⩤', '⩥', '⩨', '⩩', '⫮', '⫯',
    '⫰', '⫲', '⫳', '⫵', '⫶', '⫻', '⫽', '⌇',
    '⟁', '⟐', '⟓', '⟔', '⦁', '⦙', '⦚', '⧧',
    '⧴', '⨠', '⨡',
]

# Big operation symbols
SUM_OPS = [
    '⅀', '∏', '∐', '∑', '⋀', '⋁', '⋂', '⋃',
    '⨀', '⨁', '⨂', '⨃', '⨄', '⨅', '⨆', '⨇',
    '⨈', '⨉', '⨊', '⨋', '⫼', '⫿', '⨿',
]

INT_OPS = [
    '∫', '∬', '∭', '∮', '∯', '∰', '∱', '∲',
    '∳', '⨌', '⨍', '⨎', '⨏', '⨗', '⨐', '⨑',
    '⨒', '⨓', '⨔', '⨕', '⨖', '⨗', '⨘', '⨙',
    '⨚', '⨛', '⨜',
]

ANGLES = [
    '∟', '∠', '∡', '∢', '⊾', '⊿', '⍼', '⟀',
    '⦛', '⦜', '⦝', '⦞', '⦟', '⦠', '⦡', '⦢',
    '⦣', '⦤', '⦥', '⦦', '⦧', '⦨', '⦩', '⦪',
    '⦫', '⦬', '⦭', '⦮', '⦯', '⌒', '⌓', '⌔',
]

GEOMETRY_OPS = [
    '⦽', '⧪', '⧬', '⧭', '⧨', '⧩', '⧫', '⧮',
    '⧯', '⧰', '⧱', '⧲', '⧳', '∎', '⌀', '⌂',
    '⧠', '⨞', '⫾', '￭', '￮', '⌑',
]

# Single glyphs of big operators.
OPERATOR_BITS = [
    '⌠', '⌡', '⎶', '⎪', '⎮', '⎯', '⎲', '⎳',
    '⎷',
]

ARBITRARY_CHARS = [
    '🄪', '🄫', '🄬', '🆊', 'ℏ', '℔', '№', '℗',
    '℞', '℟', '℠', '℡', '™', '℮', 'Ⅎ', 'ℹ',
    '℺', '℻', '⅁', '⅂', '⅃', '⅄', '©', '®',
    '⅍', 'ⅎ',
]

UNITS = [
    '℣', '℥', 'Ω', '℧', 'K', 'Å', '$', '¢',
    '£', '¤', '¥', 'µ', '﹩', '＄', '￠', '￡',
    '￥', '￦',
]

# Functions
TRIGONOMETRIC_FUNCTIONS = [
    'cos', 'cot', 'csc', 'sec', 'sin', 'tan', 'arccos', 'arccot',
    'arccsc', 'arcsec', 'arcsin', 'arctan', 'arc cos', 'arc cot', 'arc csc', 'arc sec',
    'arc sin', 'arc tan',
]

HYPERBOLIC_FUNCTIONS = [
    'cosh', 'coth', 'csch', 'sech', 'sinh', 'tanh', 'arcosh', 'arcoth',
    'arcsch', 'arsech', 'arsinh', 'artanh', 'arccosh', 'arccoth', 'arccsch', 'arcsech',
    'arcsinh', 'arctanh',
]

ALGEBRAIC_FUNCTIONS = [
    'deg', 'det', 'dim', 'hom', 'ker', 'Tr', 'tr',
]

ELEMENTARY_FUNCTIONS = [
    'log', 'ln', 'lg', 'exp', 'expt', 'gcd', 'gcd', 'arg',
    'im', 're', 'Pr',
]

PREFIX_FUNCTIONS = (
    TRIGONOMETRIC_FUNCTIONS + HYPERBOLIC_FUNCTIONS
    + ALGEBRAIC_FUNCTIONS + ELEMENTARY_FUNCTIONS
)

# Limit functions can carry lower (and upper) limiting expressions.
LIMIT_FUNCTIONS = [
    'inf', 'lim', 'liminf', 'limsup', 'max', 'min', 'sup', 'injlim',
    'projlim', 'inj lim', 'proj lim',
]

INFIX_FUNCTIONS = [
    'mod', 'rem',
]


# ─────────────────────────────────────────────
# Assignment of meanings to symbol sets
# ─────────────────────────────────────────────

@dataclass(frozen=True)
class MeaningSet:
    symbols: tuple[str, ...]
    type: SemanticType
    role: SemanticRole
    font: SemanticFont = SemanticFont.UNKNOWN
    secondary: Optional[SemanticSecondary] = None


def _group(symbols: Iterable[str], type: SemanticType, role: SemanticRole,
           font: SemanticFont = SemanticFont.UNKNOWN,
           secondary: Optional[SemanticSecondary] = None) -> MeaningSet:
    return MeaningSet(tuple(symbols), type, role, font, secondary)


_T = SemanticType
_R = SemanticRole
_F = SemanticFont
_S = SemanticSecondary
_mi = alphabet.make_multi_interval

SYMBOL_GROUPS: list[MeaningSet] = [
    # Punctuation
    _group(GENERAL_PUNCTUATIONS, _T.PUNCTUATION, _R.UNKNOWN),
    _group(QUOTES, _T.PUNCTUATION, _R.QUOTES),
    _group(SEMICOLONS, _T.PUNCTUATION, _R.SEMICOLON),
    _group(QUESTION_MARKS, _T.PUNCTUATION, _R.QUESTION),
    _group(EXCLAMATION_MARKS, _T.PUNCTUATION, _R.EXCLAMATION),
    _group(OVER_ACCENTS, _T.PUNCTUATION, _R.OVERACCENT),
    _group(UNDER_ACCENTS, _T.PUNCTUATION, _R.UNDERACCENT),
    _group(COLONS, _T.PUNCTUATION, _R.COLON),
    _group(COMMAS, _T.PUNCTUATION, _R.COMMA),
    _group(ELLIPSES, _T.PUNCTUATION, _R.ELLIPSIS),
    _group(FULL_STOPS, _T.PUNCTUATION, _R.FULLSTOP),
    _group(DASHES, _T.OPERATOR, _R.DASH, secondary=_S.BAR),
    _group(TILDES, _T.OPERATOR, _R.TILDE, secondary=_S.TILDE),
    _group(PRIMES, _T.PUNCTUATION, _R.PRIME),
    _group(DEGREES, _T.PUNCTUATION, _R.DEGREE),
    # Fences
    _group(LEFT_FENCES, _T.FENCE, _R.OPEN),
    _group(RIGHT_FENCES, _T.FENCE, _R.CLOSE),
    _group(TOP_FENCES, _T.FENCE, _R.TOP),
    _group(BOTTOM_FENCES, _T.FENCE, _R.BOTTOM),
    _group(NEUTRAL_FENCES, _T.FENCE, _R.NEUTRAL),
    _group(METRIC_FENCES, _T.FENCE, _R.METRIC),
    # Latin rest characters
    _group(_mi([["2145", "2149"]]), _T.IDENTIFIER, _R.LATINLETTER,
           _F.DOUBLESTRUCKITALIC, _S.ALLLETTERS),
    # Greek rest characters
    _group(_mi([["213c", "213f"]]), _T.IDENTIFIER, _R.GREEKLETTER,
           _F.DOUBLESTRUCK, _S.ALLLETTERS),
    _group(_mi(["3d0", "3d7", "3f6", ["1d26", "1d2a"], "1d5e", "1d60",
                ["1d66", "1d6a"]]),
           _T.IDENTIFIER, _R.GREEKLETTER, _F.NORMAL, _S.ALLLETTERS),
    # Other alphabets
    _group(_mi([["2135", "2138"]]), _T.IDENTIFIER, _R.OTHERLETTER,
           _F.NORMAL, _S.ALLLETTERS),
    # Numbers
    _group(_mi([["00bc", "00be"], ["2150", "215f"], "2189"]),
           _T.NUMBER, _R.FLOAT),
    _group(_mi(["23E8", ["3248", "324f"]]), _T.NUMBER, _R.INTEGER),
    # Operators
    _group(ADDITIONS, _T.OPERATOR, _R.ADDITION),
    _group(MULTIPLICATIONS, _T.OPERATOR, _R.MULTIPLICATION),
    _group(SUBTRACTIONS, _T.OPERATOR, _R.SUBTRACTION),
    _group(DIVISIONS, _T.OPERATOR, _R.DIVISION),
    _group(["∀", "∃", "∆", "∁", "∄", "√", "∛", "∜", "¬", "￢", "⌐"],
           _T.OPERATOR, _R.PREFIXOP),
    _group(OPERATOR_BITS, _T.OPERATOR, _R.PREFIXOP),
    _group(["𝟊", "𝟋"], _T.OPERATOR, _R.PREFIXOP, _F.BOLD),
    # Relations
    _group(EQUALITIES, _T.RELATION, _R.EQUALITY),
    _group(INEQUALITIES, _T.RELATION, _R.INEQUALITY),
    _group(SET_RELATIONS, _T.RELATION, _R.SET),
    _group(RELATIONS, _T.RELATION, _R.UNKNOWN),
    _group(SET_EMPTY, _T.IDENTIFIER, _R.SETEMPTY),
    _group(INFTY, _T.IDENTIFIER, _R.INFTY),
    _group(LOGIC_RELATIONS, _T.RELATION, _R.LOGIC),
    _group(LOGIC_IDENTIFIERS, _T.IDENTIFIER, _R.LOGIC),
    _group(ARROWS, _T.RELATION, _R.ARROW),
    # Membership, currently treated as operators.
    _group(ELEMENT_RELATIONS, _T.OPERATOR, _R.ELEMENT),
    _group(NONELEMENT_RELATIONS, _T.OPERATOR, _R.NONELEMENT),
    _group(REELEMENT_RELATIONS, _T.OPERATOR, _R.REELEMENT),
    _group(RENONELEMENT_RELATIONS, _T.OPERATOR, _R.RENONELEMENT),
    # Large operators
    _group(SUM_OPS, _T.LARGEOP, _R.SUM),
    _group(INT_OPS, _T.LARGEOP, _R.INTEGRAL),
    _group(_mi([["2500", "257F"]]), _T.RELATION, _R.BOX),
    _group(_mi([["2580", "259F"]]), _T.IDENTIFIER, _R.BLOCK),
    _group(_mi([["25A0", "25FF"], ["2B12", "2B2F"], ["2B50", "2B59"]]),
           _T.RELATION, _R.GEOMETRY),
    _group(GEOMETRY_OPS, _T.OPERATOR, _R.GEOMETRY),
    _group(ANGLES, _T.OPERATOR, _R.GEOMETRY),
    # Extra letter symbols
    _group(ARBITRARY_CHARS, _T.IDENTIFIER, _R.OTHERLETTER),
    # Units.  No unit role, otherwise string notation like $a4f breaks.
    _group(UNITS, _T.IDENTIFIER, _R.UNKNOWN),
    # Functions
    _group(LIMIT_FUNCTIONS, _T.FUNCTION, _R.LIMFUNC),
    _group(PREFIX_FUNCTIONS, _T.FUNCTION, _R.PREFIXFUNC),
    _group(INFIX_FUNCTIONS, _T.OPERATOR, _R.PREFIXFUNC),
    # Remaining Latin characters: dotless i and j.
    _group(["ı", "ȷ"], _T.IDENTIFIER, _R.LATINLETTER, _F.NORMAL),
    _group(["𝚤", "𝚥"], _T.IDENTIFIER, _R.LATINLETTER, _F.ITALIC),
    # Script small l and the Weierstrass p.
    _group(["ℓ", "℘"], _T.IDENTIFIER, _R.LATINLETTER, _F.SCRIPT),
    _group(_mi([
        # Extended Latin with accents
        ["c0", "d6"], ["d8", "f6"], ["f8", "1bf"], ["1c4", "2af"],
        # Latin phonetic alphabets
        ["1d00", "1d25"], ["1d6b", "1d9a"], ["1e00", "1ef9"],
        # Latin combining superscripts
        ["363", "36f"], ["1dd3", "1de6"],
        # Latin combining subscripts
        ["1d62", "1d65"], "1dca",
        # Latin superscripts
        "2071", "207f",
        # Latin subscripts
        ["2090", "209c"], "2c7c",
    ]), _T.IDENTIFIER, _R.LATINLETTER, _F.NORMAL),
    # Remaining symbols
    _group(OPERATORS, _T.OPERATOR, _R.UNKNOWN),
    _group(_mi(["2605", "2606", "26aa", "26ab", ["2720", "274d"]]),
           _T.OPERATOR, _R.UNKNOWN),
    # Checkmarks
    _group(_mi([["214A", "214C"], "2705", "2713", "2714", "2717", "2718"]),
           _T.IDENTIFIER, _R.UNKNOWN),
    # Spaces
    _group(_mi(["20", "a0", "ad", ["2000", "200f"], ["2028", "202f"],
                ["205f", "2060"], "206a", "206b", "206e", "206f", "feff",
                ["fff9", "fffb"]]),
           _T.TEXT, _R.SPACE),
]


# ─────────────────────────────────────────────
# Styled alphabets
# ─────────────────────────────────────────────

# (type, role, secondaries) given to every character of a base alphabet.
_ALPHABET_DEFAULTS: dict[Base, tuple[SemanticType, SemanticRole, tuple[SemanticSecondary, ...]]] = {
    Base.LATINCAP: (_T.IDENTIFIER, _R.LATINLETTER, (_S.ALLLETTERS,)),
    Base.LATINSMALL: (_T.IDENTIFIER, _R.LATINLETTER, (_S.ALLLETTERS,)),
    Base.GREEKCAP: (_T.IDENTIFIER, _R.GREEKLETTER, (_S.ALLLETTERS,)),
    Base.GREEKSMALL: (_T.IDENTIFIER, _R.GREEKLETTER, (_S.ALLLETTERS,)),
    Base.DIGIT: (_T.NUMBER, _R.INTEGER, ()),
}

# Positions inside an alphabet whose meaning differs from the default.
# Nabla and partial open and close the small Greek block.
_ALPHABET_CHANGES: dict[Base, dict[int, tuple[SemanticType, SemanticRole]]] = {
    Base.GREEKSMALL: {
        0: (_T.OPERATOR, _R.PREFIXOP),
        26: (_T.OPERATOR, _R.PREFIXOP),
    },
}

_ALPHABET_SECONDARIES: dict[Base, dict[int, SemanticSecondary]] = {
    Base.LATINSMALL: {3: _S.D},
}


# ─────────────────────────────────────────────
# Registry
# ─────────────────────────────────────────────

class SecondaryMap:
    """
    Secondary annotations keyed by kind, optionally refined by glyph.

    A lookup for ``(kind, glyph)`` falls back to the kind-wide default, so
    a glyph-specific entry always wins over the default.
    """

    def __init__(self) -> None:
        self._map: dict[str, str] = {}

    @staticmethod
    def key(kind: SemanticSecondary, char: Optional[str] = None) -> str:
        return f"{kind.value} {char}" if char else kind.value

    def set(self, char: Optional[str], kind: SemanticSecondary,
            annotation: str = "") -> None:
        self._map[self.key(kind, char)] = annotation or kind.value

    def has(self, char: Optional[str], kind: SemanticSecondary) -> bool:
        return self.key(kind, char) in self._map

    def get(self, char: Optional[str], kind: SemanticSecondary) -> Optional[str]:
        if char and self.key(kind, char) in self._map:
            return self._map[self.key(kind, char)]
        return self._map.get(self.key(kind))

    def freeze(self) -> None:
        self._map = MappingProxyType(dict(self._map))

    def __len__(self) -> int:
        return len(self._map)


class SymbolRegistry:
    """Read-only view over the meaning and secondary maps."""

    def __init__(self, meaning: dict[str, SemanticMeaning], secondary: SecondaryMap):
        self._meaning: Mapping[str, SemanticMeaning] = MappingProxyType(meaning)
        secondary.freeze()
        self._secondary = secondary

    @property
    def meanings(self) -> Mapping[str, SemanticMeaning]:
        return self._meaning

    def meaning_of(self, glyph: str) -> SemanticMeaning:
        return self._meaning.get(glyph, _UNKNOWN)

    def secondary_of(self, glyph: str, kind: SemanticSecondary) -> Optional[str]:
        return self._secondary.get(glyph, kind)

    def __contains__(self, glyph: str) -> bool:
        return glyph in self._meaning

    def __len__(self) -> int:
        return len(self._meaning)


_UNKNOWN = SemanticMeaning.unknown()


def _assign_alphabet(interval: Interval, meaning: dict[str, SemanticMeaning],
                     secondary: SecondaryMap) -> None:
    type_, role, secondaries = _ALPHABET_DEFAULTS[interval.base]
    font = interval.semantic_font
    characters = interval.unicode
    for char in characters:
        meaning[char] = SemanticMeaning(type_, role, font)
        for sec in secondaries:
            secondary.set(char, sec)
    for pos, (ctype, crole) in _ALPHABET_CHANGES.get(interval.base, {}).items():
        meaning[characters[pos]] = SemanticMeaning(ctype, crole, font)
    for pos, sec in _ALPHABET_SECONDARIES.get(interval.base, {}).items():
        secondary.set(characters[pos], sec)


def build_registry(groups: Iterable[MeaningSet] = SYMBOL_GROUPS,
                   intervals: Iterable[Interval] = alphabet.INTERVALS) -> SymbolRegistry:
    """
    Build a registry from symbol groups followed by styled alphabets.

    Groups are applied in order and later assignments overwrite earlier
    ones.  The alphabets occupy disjoint code points, so the order in
    which they are expanded does not change the result.
    """
    meaning: dict[str, SemanticMeaning] = {}
    secondary = SecondaryMap()
    for group in groups:
        entry = SemanticMeaning(group.type, group.role, group.font)
        for symbol in group.symbols:
            meaning[symbol] = entry
            if group.secondary:
                secondary.set(symbol, group.secondary)
    for interval in intervals:
        _assign_alphabet(interval, meaning, secondary)
    return SymbolRegistry(meaning, secondary)


REGISTRY = build_registry()
logger.debug("Symbol registry initialised with %d glyphs", len(REGISTRY))

_NEUTRAL = frozenset(NEUTRAL_FENCES)
_METRIC = frozenset(METRIC_FENCES)


# ─────────────────────────────────────────────
# Public accessors
# ─────────────────────────────────────────────

def meaning_of(glyph: str) -> SemanticMeaning:
    """Meaning of *glyph*, or the all-UNKNOWN triple if it is not registered."""
    return REGISTRY.meaning_of(glyph)


def secondary_of(glyph: str, kind: SemanticSecondary) -> Optional[str]:
    return REGISTRY.secondary_of(glyph, kind)


def equal(meaning1: SemanticMeaning, meaning2: SemanticMeaning) -> bool:
    return (
        meaning1.type == meaning2.type
        and meaning1.role == meaning2.role
        and meaning1.font == meaning2.font
    )


def is_neutral_fence(glyph: str) -> bool:
    return glyph in _NEUTRAL


def is_metric_fence(glyph: str) -> bool:
    return glyph in _METRIC


def fences_match(open_fence: str, close_fence: str) -> bool:
    """
    Decide whether an opening and a closing fence belong together.

    Neutral and metric fences only match themselves; everything else is
    looked up in the horizontal and vertical pairing tables.
    """
    if open_fence in _NEUTRAL or open_fence in _METRIC:
        return open_fence == close_fence
    return (
        FENCES_HORIZ.get(open_fence) == close_fence
        or FENCES_VERT.get(open_fence) == close_fence
    )
