"""
Read-only pattern tables for Brazilian Portuguese.

Everything here is compiled once at import and shared by every extraction
call. Supporting another locale means swapping these tables, not the engines.
"""

import re
from types import MappingProxyType
from typing import NamedTuple

from rateio.models.schemas import Pronoun, SplitRule

# ── Amounts ──────────────────────────────────────────────────────────────

# Nouns that follow a head count ("4 pessoas"); a number before them is never money.
PEOPLE_NOUNS = r"(?:pessoas?|amig[oa]s?|convidad[oa]s?|participantes?)"

# 1.200,00 | 120,00 | 120.00 | 120, but not the "3" of "3 mil"
NUMBER = (
    r"(?<![\d.,])(?P<num>\d{1,3}(?:\.\d{3})+(?:,\d{2})?|\d+(?:[.,]\d{2})?)"
    r"(?![.,]?\d)(?!\s*mil\b)"
)

_TOTAL = (
    r"\btotal\s*(?:(?:da conta|foi|ficou(?: em)?|deu|d[aá](?: de)?|[eé](?: de)?|de)\s*)?:?\s*"
)
_REAIS = r"(?:reais|real)\b"

# Keys are folded. Units, tens and hundreds; "mil" is composed by THOUSANDS.
NUMBER_WORDS = MappingProxyType(
    {
        "um": 1,
        "uma": 1,
        "dois": 2,
        "duas": 2,
        "tres": 3,
        "quatro": 4,
        "cinco": 5,
        "seis": 6,
        "sete": 7,
        "oito": 8,
        "nove": 9,
        "dez": 10,
        "vinte": 20,
        "trinta": 30,
        "quarenta": 40,
        "cinquenta": 50,
        "sessenta": 60,
        "setenta": 70,
        "oitenta": 80,
        "noventa": 90,
        "cem": 100,
        "cento": 100,
        "duzentos": 200,
        "trezentos": 300,
        "quatrocentos": 400,
        "quinhentos": 500,
        "seiscentos": 600,
        "setecentos": 700,
        "oitocentos": 800,
        "novecentos": 900,
    }
)

_WORD = "|".join(sorted([*NUMBER_WORDS, "três"], key=len, reverse=True))

# [<digits|word>] mil [e <digits|word>]: "2 mil", "2,5 mil", "dois mil", "mil e quinhentos", "1 mil e 200"
THOUSANDS = (
    r"(?<![\w.,])(?P<mult>(?:(?P<base>\d{1,3}(?:,\d{1,2})?|" + _WORD + r")\s+)?mil"
    r"(?:\s+e\s+(?P<add>\d{1,3}(?:,\d{2})?|" + _WORD + r"))?)(?!\w)(?![.,]\d)"
)

_NUMBER_WORD = r"(?<!\w)(?P<word>" + _WORD + r")"


class AmountNotation(NamedTuple):
    name: str
    pattern: re.Pattern
    is_total: bool = False


def _notation(name: str, regex: str, is_total: bool = False) -> AmountNotation:
    return AmountNotation(name, re.compile(regex, re.IGNORECASE), is_total)


# Order is priority: when two notations cover the same figure the earlier one keeps it.
AMOUNT_NOTATIONS = (
    _notation("total", _TOTAL + r"R\$\s*" + THOUSANDS, True),
    _notation("total", _TOTAL + THOUSANDS + r"\s*" + _REAIS, True),
    _notation("total", _TOTAL + r"R\$\s*" + NUMBER, True),
    _notation("total", _TOTAL + NUMBER + r"\s*" + _REAIS, True),
    _notation("thousands", r"R\$\s*" + THOUSANDS),
    _notation("thousands", THOUSANDS + r"\s*" + _REAIS),
    _notation("prefix", r"R\$\s*" + NUMBER),
    _notation("prefix", r"\breais?\s+" + NUMBER + r"(?!\s*" + PEOPLE_NOUNS + r"\b)"),
    _notation("suffix", NUMBER + r"\s*R\$"),
    _notation("suffix", NUMBER + r"\s*" + _REAIS),
    _notation("slang", NUMBER + r"\s*(?:pilas?|contos?)\b"),
    _notation("words", _NUMBER_WORD + r"\s+" + _REAIS),
)

# ── Participants ─────────────────────────────────────────────────────────

# Keys are folded (lower-case, accent-free) surface forms.
PRONOUN_ALIASES = MappingProxyType(
    {
        "eu": Pronoun.eu,
        "voce": Pronoun.voce,
        "vc": Pronoun.voce,
        "ele": Pronoun.ele,
        "ela": Pronoun.ela,
        "nos": Pronoun.nos,
        "voces": Pronoun.voces,
        "vcs": Pronoun.voces,
        "eles": Pronoun.eles,
        "elas": Pronoun.elas,
    }
)


def _word(alternatives: str) -> str:
    return rf"(?<!\w)({alternatives})(?!\w)"


_SINGULAR = _word(r"eu|você|voce|vc|ele|ela")
_PLURAL_LEAD = _word(r"nós|nos|vocês|voces|vcs|eles|elas")
_PLURAL_MID = _word(r"vocês|voces|vcs|eles|elas")
_PLURAL_TAIL = _word(r"eles|elas")


class ParticipantStrategy(NamedTuple):
    name: str
    pattern: re.Pattern
    min_participants: int = 2


PARTICIPANT_STRATEGIES = (
    ParticipantStrategy(
        "four_way",
        re.compile(
            rf"{_SINGULAR}\s*,\s*{_SINGULAR}\s*,\s*{_SINGULAR}\s*,?\s+e\s+{_SINGULAR}",
            re.IGNORECASE,
        ),
    ),
    ParticipantStrategy(
        "three_way",
        re.compile(rf"{_SINGULAR}\s*,\s*{_SINGULAR}\s*,?\s+e\s+{_SINGULAR}", re.IGNORECASE),
    ),
    ParticipantStrategy(
        "plural_list",
        re.compile(
            rf"{_PLURAL_LEAD}\s*,\s*{_PLURAL_MID}\s*,?\s+e\s+{_PLURAL_TAIL}", re.IGNORECASE
        ),
    ),
    ParticipantStrategy(
        "pair", re.compile(rf"{_SINGULAR}\s+e\s+{_SINGULAR}", re.IGNORECASE)
    ),
)

# Bare "nos" is left out: on its own it is usually the contraction em + os.
PRONOUN_SCAN = re.compile(
    _word(r"eu|você|voce|vc|ele|ela|nós|vocês|voces|vcs|eles|elas"), re.IGNORECASE
)

# ── Split rules ──────────────────────────────────────────────────────────
# Matched against folded text.

CLAUSE_TEMPLATES = (
    (re.compile(r"\bcada um paga (?:por )?igual\b"), SplitRule.equal),
    (re.compile(r"\bdivid\w* (?:(?:a conta|tudo) )?(?:por )?igual(?:mente)?\b"), SplitRule.equal),
    (re.compile(r"\bpag\w* (?:por )?igual(?:mente)?\b"), SplitRule.equal),
    (re.compile(r"\bcontribu\w* igual(?:mente)?\b"), SplitRule.equal),
    (re.compile(r"\b(?:em )?partes iguais\b"), SplitRule.equal),
    (re.compile(r"\bigualmente\b"), SplitRule.equal),
    (re.compile(r"\bmeio a meio\b"), SplitRule.equal),
    (re.compile(r"\bo que (?:cada um )?consum\w+\b"), SplitRule.proportional),
    (re.compile(r"\b(?:por|pelo) consumo\b"), SplitRule.proportional),
    (re.compile(r"\bcada um paga o (?:seu|que pediu)\b"), SplitRule.proportional),
    (re.compile(r"\bpor famil\w+\b"), SplitRule.per_family),
    (re.compile(r"\bcada familia\b"), SplitRule.per_family),
    (re.compile(r"\bpor (?:grupo|casal)\b"), SplitRule.per_family),
    (re.compile(r"\beu pago (?:agora|tudo|antes)\b"), SplitRule.payer_advances),
    (re.compile(r"\beu adianto\b"), SplitRule.payer_advances),
    (re.compile(r"\bdepois (?:a gente )?acert\w+\b"), SplitRule.payer_advances),
    (re.compile(r"\bacert\w+ depois\b"), SplitRule.payer_advances),
)

# A bare split verb with no qualifier reads as an equal split among several people.
IMPLICIT_EQUAL = re.compile(r"\b(?:divid\w*|rach\w*)\b")

# ── Head count ───────────────────────────────────────────────────────────

HEADCOUNT_WORDS = MappingProxyType(
    {
        "dois": 2,
        "duas": 2,
        "tres": 3,
        "quatro": 4,
        "cinco": 5,
        "seis": 6,
        "sete": 7,
        "oito": 8,
        "nove": 9,
        "dez": 10,
        "onze": 11,
        "doze": 12,
    }
)

HEADCOUNT = re.compile(
    r"(?<![\w.,])(\d{1,3}|" + "|".join(HEADCOUNT_WORDS) + r")\s+"
    + PEOPLE_NOUNS
    + r"\b"
)
MAX_HEADCOUNT = 100
