import re
import unicodedata

_WHITESPACE = re.compile(r"\s+")


def strip_accents(text: str) -> str:
    decomposed = unicodedata.normalize("NFD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def fold(text: str) -> str:
    """Lower-case, accent-free, single-spaced version of ``text``."""
    return _WHITESPACE.sub(" ", strip_accents(text.lower())).strip()
