from collections.abc import Iterable

from loguru import logger

from rateio import errors
from rateio.models.schemas import (
    BillSplitFact,
    Confidence,
    MonetaryAmount,
    ParticipantGroup,
    SplitRule,
    SplitRuleResult,
)
from rateio.utils.formatting import format_brl


def select_primary(amounts: Iterable[MonetaryAmount]) -> MonetaryAmount | None:
    """
    Pick the amount that stands for the bill total.

    First amount tagged by a "total" qualifier; otherwise the largest value;
    ties on value go to the first occurrence.
    """
    amounts = list(amounts)
    if not amounts:
        return None
    for amount in amounts:
        if amount.confidence is Confidence.exact:
            return amount
    # max() keeps the first of equal keys
    return max(amounts, key=lambda a: a.value_cents)


class FactMerger:
    def merge(
        self,
        amounts: Iterable[MonetaryAmount],
        participants: ParticipantGroup,
        split: SplitRuleResult,
        headcount: int | None = None,
    ) -> BillSplitFact:
        amounts = tuple(amounts)
        total = select_primary(amounts)
        warnings: list[str] = []

        if not amounts:
            warnings.append(errors.warning(errors.NO_AMOUNT_FOUND, "no monetary amount in text"))

        if participants.size == 0:
            warnings.append(
                errors.warning(errors.NO_PARTICIPANTS_FOUND, "no participant pronoun in text")
            )

        if split.is_ambiguous:
            rules = ", ".join(dict.fromkeys(r.value for r in split.matched))
            warnings.append(
                errors.warning(
                    errors.AMBIGUOUS_SPLIT_RULE, f"{rules} matched; kept {split.rule.value}"
                )
            )

        share_cents = None
        if split.rule is SplitRule.equal:
            if participants.size == 1:
                warnings.append(
                    errors.warning(
                        errors.SINGLE_PARTICIPANT_EQUAL_SPLIT,
                        "equal split requested with only one identified participant",
                    )
                )

            divisor = headcount or participants.size
            if total is not None and divisor > 0:
                share_cents, remainder = divmod(total.value_cents, divisor)
                if remainder:
                    warnings.append(
                        errors.warning(
                            errors.NON_DIVISIBLE_EQUAL_SPLIT,
                            f"{format_brl(total.value_cents)} / {divisor} = "
                            f"{format_brl(share_cents)} with remainder {format_brl(remainder)}",
                        )
                    )

        fact = BillSplitFact(
            amounts=amounts,
            participants=participants,
            rule=split.rule,
            warnings=warnings,
            total=total,
            headcount=headcount,
            share_cents=share_cents,
        )
        if fact.warnings:
            logger.debug("Fact warnings: {}", list(fact.warnings))
        return fact
