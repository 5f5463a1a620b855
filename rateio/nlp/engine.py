from loguru import logger

from rateio.errors import SUPPORTED_LOCALES, InvalidTextError, UnsupportedLocaleError
from rateio.models.schemas import BillSplitFact
from rateio.nlp.amounts import AmountExtractor
from rateio.nlp.headcount import extract_headcount
from rateio.nlp.merger import FactMerger
from rateio.nlp.participants import ParticipantExtractor
from rateio.nlp.split_rule import SplitRuleClassifier

# Stateless, safe to share across calls and threads
amount_extractor = AmountExtractor()
participant_extractor = ParticipantExtractor()
split_classifier = SplitRuleClassifier()
merger = FactMerger()


def extract_bill_split_fact(text: str, locale: str = "pt-BR") -> BillSplitFact:
    """
    Extract amounts, participants and split rule from one message.

    Only malformed input raises (``InvalidTextError``, ``UnsupportedLocaleError``);
    anything the text fails to say comes back as a warning on the fact.
    """
    if not isinstance(text, str):
        raise InvalidTextError(text)
    if locale not in SUPPORTED_LOCALES:
        raise UnsupportedLocaleError(locale)

    amounts = amount_extractor.extract(text)
    participants = participant_extractor.extract(text)
    split = split_classifier.analyze(text, participant_count=participants.size)
    headcount = extract_headcount(text)

    fact = merger.merge(amounts, participants, split, headcount=headcount)
    logger.debug(
        "Extracted {} amount(s), {} participant(s), rule={}",
        len(fact.amounts),
        fact.participants.size,
        fact.rule.value,
    )
    return fact
