import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Iterator, NamedTuple

from loguru import logger

from rateio.models.schemas import Confidence, MonetaryAmount
from rateio.nlp.patterns import AMOUNT_NOTATIONS, NUMBER_WORDS, AmountNotation
from rateio.nlp.text import fold

_GROUPED = re.compile(r"\d{1,3}(?:\.\d{3})+(?:,\d{2})?")
_ONE = Decimal("1")


def normalize_number(token: str) -> str:
    """Turn a Brazilian numeric token into a plain decimal string ("1.200,50" -> "1200.50")."""
    token = token.strip()
    if _GROUPED.fullmatch(token):
        token = token.replace(".", "")
    return token.replace(",", ".")


def _figure(token: str) -> Decimal:
    """Value of a digit token or a spelled-out number word."""
    word = NUMBER_WORDS.get(fold(token))
    if word is not None:
        return Decimal(word)
    return Decimal(normalize_number(token))


def _cents(value: Decimal) -> int:
    return int((value * 100).quantize(_ONE, rounding=ROUND_HALF_UP))


def to_cents(token: str) -> int:
    try:
        value = Decimal(normalize_number(token))
    except InvalidOperation as e:
        raise ValueError(f"not a monetary figure: {token!r}") from e
    return _cents(value)


class _Hit(NamedTuple):
    start: int
    end: int
    priority: int
    notation: AmountNotation
    match: re.Match


def _cents_of(match: re.Match) -> int:
    groups = match.re.groupindex
    if "mult" in groups:
        base = _figure(match.group("base")) if match.group("base") else _ONE
        add = _figure(match.group("add")) if match.group("add") else Decimal(0)
        return _cents(base * 1000 + add)
    if "word" in groups:
        return _cents(_figure(match.group("word")))
    return to_cents(match.group("num"))


def _span_group(notation: AmountNotation) -> str:
    for group in ("mult", "word"):
        if group in notation.pattern.groupindex:
            return group
    return "num"


def _hits(text: str, notations: tuple[AmountNotation, ...]) -> list[_Hit]:
    hits = []
    for priority, notation in enumerate(notations):
        group = _span_group(notation)
        for match in notation.pattern.finditer(text):
            start, end = match.span(group)
            hits.append(_Hit(start, end, priority, notation, match))
    hits.sort(key=lambda h: (h.start, h.priority))
    return hits


class AmountSequence:
    """
    Amounts found in a text, in order of first occurrence, one entry per value.

    Nothing is scanned until the sequence is iterated, and every iteration
    scans again, so the same object can be walked any number of times.
    """

    def __init__(self, text: str, notations: tuple[AmountNotation, ...]):
        self.text = text
        self.notations = notations

    def __iter__(self) -> Iterator[MonetaryAmount]:
        claimed: list[tuple[int, int]] = []
        by_value: dict[int, MonetaryAmount] = {}

        for hit in _hits(self.text, self.notations):
            # A figure already claimed by a higher-priority notation
            if any(hit.start < end and start < hit.end for start, end in claimed):
                continue
            claimed.append((hit.start, hit.end))

            cents = _cents_of(hit.match)
            existing = by_value.get(cents)
            if existing is None:
                by_value[cents] = MonetaryAmount(
                    raw_text=hit.match.group(0).strip(),
                    value_cents=cents,
                    confidence=Confidence.exact if hit.notation.is_total else Confidence.inferred,
                    position=hit.start,
                    notation=hit.notation.name,
                )
                logger.debug(
                    "Amount {!r} -> {} cents via {}", hit.match.group(0), cents, hit.notation.name
                )
            elif hit.notation.is_total and existing.confidence is Confidence.inferred:
                by_value[cents] = existing.model_copy(
                    update={"confidence": Confidence.exact, "notation": hit.notation.name}
                )

        yield from by_value.values()

    def __repr__(self) -> str:
        return f"AmountSequence({self.text!r})"


class AmountExtractor:
    def __init__(self, notations: tuple[AmountNotation, ...] = AMOUNT_NOTATIONS):
        self.notations = notations

    def extract(self, text: str) -> AmountSequence:
        return AmountSequence(text, self.notations)
