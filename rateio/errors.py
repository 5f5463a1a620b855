"""Boundary errors and the advisory warning codes attached to extracted facts."""

SUPPORTED_LOCALES = ("pt-BR",)

# Warning codes. Warnings are advisory, never raised.
NO_AMOUNT_FOUND = "NoAmountFound"
NO_PARTICIPANTS_FOUND = "NoParticipantsFound"
SINGLE_PARTICIPANT_EQUAL_SPLIT = "SingleParticipantEqualSplit"
AMBIGUOUS_SPLIT_RULE = "AmbiguousSplitRule"
NON_DIVISIBLE_EQUAL_SPLIT = "NonDivisibleEqualSplit"


class InvalidTextError(TypeError):
    """Raised when the input handed to the engine is not text."""

    def __init__(self, value: object):
        super().__init__(f"expected str, got {type(value).__name__}")
        self.value = value


class UnsupportedLocaleError(ValueError):
    def __init__(self, locale: str):
        super().__init__(
            f"unsupported locale {locale!r}; supported: {', '.join(SUPPORTED_LOCALES)}"
        )
        self.locale = locale


def warning(code: str, detail: str) -> str:
    return f"{code}: {detail}"
