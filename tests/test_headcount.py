import pytest

from rateio.nlp.headcount import extract_headcount


@pytest.mark.parametrize(
    "text, count",
    [
        ("R$ 120,00 para 4 pessoas", 4),
        ("Somos cinco amigos no bar", 5),
        ("Churrasco com três convidados", 3),
        ("Jantar para 12 participantes", 12),
        ("R$ 120,00, cada um paga igual", None),
        ("Para 0 pessoas", None),
    ],
)
def test_extract_headcount(text, count):
    assert extract_headcount(text) == count
