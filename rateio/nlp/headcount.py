from rateio.nlp.patterns import HEADCOUNT, HEADCOUNT_WORDS, MAX_HEADCOUNT
from rateio.nlp.text import fold


def extract_headcount(text: str) -> int | None:
    """Explicit number of people named in the text ("para 4 pessoas", "somos cinco amigos")."""
    for match in HEADCOUNT.finditer(fold(text)):
        token = match.group(1)
        count = int(token) if token.isdigit() else HEADCOUNT_WORDS[token]
        if 1 <= count <= MAX_HEADCOUNT:
            return count
    return None
