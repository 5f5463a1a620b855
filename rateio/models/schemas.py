from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from rateio.config import get_settings


class Confidence(str, Enum):
    exact = "exact"
    inferred = "inferred"


class Pronoun(str, Enum):
    eu = "Eu"
    voce = "Você"
    ele = "Ele"
    ela = "Ela"
    nos = "Nós"
    voces = "Vocês"
    eles = "Eles"
    elas = "Elas"


class SplitRule(str, Enum):
    equal = "EqualSplit"
    proportional = "ProportionalToConsumption"
    per_family = "PerFamilyOrGroup"
    payer_advances = "PayerAdvancesSettlesLater"
    unknown = "Unknown"


class MonetaryAmount(BaseModel):
    model_config = ConfigDict(frozen=True)

    raw_text: str
    value_cents: int = Field(ge=0)
    currency: Literal["BRL"] = "BRL"
    confidence: Confidence = Confidence.inferred
    position: int = 0
    notation: str = "prefix"


class Participant(BaseModel):
    """A pronoun placeholder. Two spellings of the same pronoun are the same participant."""

    model_config = ConfigDict(frozen=True)

    canonical_form: Pronoun
    surface_form: str

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Participant):
            return NotImplemented
        return self.canonical_form == other.canonical_form

    def __hash__(self) -> int:
        return hash(self.canonical_form)


class ParticipantGroup(BaseModel):
    model_config = ConfigDict(frozen=True)

    participants: tuple[Participant, ...] = ()
    strategy: Literal["four_way", "three_way", "plural_list", "pair", "single_scan"] = (
        "single_scan"
    )

    @property
    def size(self) -> int:
        return len(self.participants)

    def canonical_forms(self) -> list[Pronoun]:
        return [p.canonical_form for p in self.participants]


class SplitRuleResult(BaseModel):
    """Classifier verdict plus every rule that matched, in text order."""

    model_config = ConfigDict(frozen=True)

    rule: SplitRule = SplitRule.unknown
    matched: tuple[SplitRule, ...] = ()

    @property
    def is_ambiguous(self) -> bool:
        return len(set(self.matched)) > 1


class BillSplitFact(BaseModel):
    model_config = ConfigDict(frozen=True)

    amounts: tuple[MonetaryAmount, ...] = ()
    participants: ParticipantGroup = ParticipantGroup()
    rule: SplitRule = SplitRule.unknown
    warnings: tuple[str, ...] = ()
    total: MonetaryAmount | None = None
    headcount: int | None = None
    share_cents: int | None = None

    @field_validator("warnings", mode="before")
    @classmethod
    def _as_sorted_set(cls, value):
        # Set semantics with a stable rendering
        return tuple(sorted(set(value)))


class ExtractRequest(BaseModel):
    text: str
    locale: str = Field(default_factory=lambda: get_settings().default_locale)
