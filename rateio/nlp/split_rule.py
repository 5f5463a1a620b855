import re

from loguru import logger

from rateio.models.schemas import SplitRule, SplitRuleResult
from rateio.nlp.patterns import CLAUSE_TEMPLATES, IMPLICIT_EQUAL
from rateio.nlp.text import fold


class SplitRuleClassifier:
    """
    Classifies the division strategy from the clauses of a message.

    When several clauses match, the one appearing last in the text wins, so a
    later correction ("... não, melhor cada um paga o que consumiu") overrides
    an earlier intention. Never raises; falls back to ``SplitRule.unknown``.
    """

    def __init__(
        self,
        templates: tuple[tuple[re.Pattern, SplitRule], ...] = CLAUSE_TEMPLATES,
        implicit_equal: re.Pattern = IMPLICIT_EQUAL,
    ):
        self.templates = templates
        self.implicit_equal = implicit_equal

    def analyze(self, text: str, participant_count: int | None = None) -> SplitRuleResult:
        folded = fold(text)

        hits: list[tuple[int, int, SplitRule]] = []
        for pattern, rule in self.templates:
            for match in pattern.finditer(folded):
                hits.append((match.start(), match.end(), rule))
        hits.sort(key=lambda h: (h[0], h[1]))

        if hits:
            matched = tuple(rule for _, _, rule in hits)
            logger.debug("Split clauses matched: {}", [r.value for r in matched])
            return SplitRuleResult(rule=matched[-1], matched=matched)

        # "vamos dividir" alone only implies equal shares when more than one person is involved
        if self.implicit_equal.search(folded) and participant_count != 1:
            return SplitRuleResult(rule=SplitRule.equal)

        return SplitRuleResult()

    def classify(self, text: str, participant_count: int | None = None) -> SplitRule:
        return self.analyze(text, participant_count).rule
