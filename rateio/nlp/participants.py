import re

from loguru import logger

from rateio.models.schemas import Participant, ParticipantGroup, Pronoun
from rateio.nlp.patterns import (
    PARTICIPANT_STRATEGIES,
    PRONOUN_ALIASES,
    PRONOUN_SCAN,
    ParticipantStrategy,
)
from rateio.nlp.text import fold


def canonicalize(surface: str) -> Pronoun:
    """Map any spelling of a pronoun ("você", "VOCE", "vc") to its canonical tag."""
    try:
        return PRONOUN_ALIASES[fold(surface)]
    except KeyError:
        raise ValueError(f"not a known pronoun: {surface!r}") from None


def _unique(surfaces: list[str]) -> tuple[Participant, ...]:
    seen: dict[Pronoun, Participant] = {}
    for surface in surfaces:
        canonical = canonicalize(surface)
        if canonical not in seen:
            seen[canonical] = Participant(canonical_form=canonical, surface_form=surface)
    return tuple(seen.values())


def _try_strategy(strategy: ParticipantStrategy, text: str) -> ParticipantGroup | None:
    for match in strategy.pattern.finditer(text):
        participants = _unique(list(match.groups()))
        if len(participants) >= strategy.min_participants:
            return ParticipantGroup(participants=participants, strategy=strategy.name)
        logger.debug(
            "{} matched {!r} with only {} distinct pronoun(s), skipping",
            strategy.name,
            match.group(0),
            len(participants),
        )
    return None


def scan_pronouns(text: str, pattern: re.Pattern = PRONOUN_SCAN) -> ParticipantGroup:
    """Every distinct pronoun in ``text``, in order of first appearance."""
    surfaces = [m.group(1) for m in pattern.finditer(text)]
    return ParticipantGroup(participants=_unique(surfaces), strategy="single_scan")


def select_group(
    text: str, strategies: tuple[ParticipantStrategy, ...] = PARTICIPANT_STRATEGIES
) -> ParticipantGroup:
    """First non-degenerate strategy in priority order, else the pronoun scan."""
    for strategy in strategies:
        group = _try_strategy(strategy, text)
        if group is not None:
            return group
    return scan_pronouns(text)


class ParticipantExtractor:
    def __init__(self, strategies: tuple[ParticipantStrategy, ...] = PARTICIPANT_STRATEGIES):
        self.strategies = strategies

    def extract(self, text: str) -> ParticipantGroup:
        group = select_group(text, self.strategies)
        logger.debug(
            "Participants via {}: {}", group.strategy, [p.value for p in group.canonical_forms()]
        )
        return group
