import pytest

from rateio.models.schemas import Confidence
from rateio.nlp.amounts import AmountExtractor, normalize_number, to_cents
from rateio.utils.formatting import cents_to_decimal_str, format_brl

extractor = AmountExtractor()


def _values(text: str) -> list[int]:
    return [a.value_cents for a in extractor.extract(text)]


@pytest.mark.parametrize(
    "token, cents",
    [
        ("120,00", 12000),
        ("120", 12000),
        ("120.00", 12000),
        ("1.200,50", 120050),
        ("1.200", 120000),
        ("0,05", 5),
        ("19,99", 1999),
    ],
)
def test_to_cents(token, cents):
    assert to_cents(token) == cents


def test_to_cents_rejects_garbage():
    with pytest.raises(ValueError):
        to_cents("abc")


@pytest.mark.parametrize("token", ["120,00", "1.200,00", "0,10", "1.234.567,89", "75"])
def test_currency_round_trip(token):
    cents = to_cents(token)
    assert to_cents(normalize_number(token)) == cents
    assert to_cents(cents_to_decimal_str(cents)) == cents
    assert to_cents(format_brl(cents, with_symbol=False)) == cents


def test_format_brl():
    assert format_brl(120000) == "R$ 1.200,00"
    assert format_brl(5) == "R$ 0,05"
    assert format_brl(12000, with_symbol=False) == "120,00"


def test_prefix_notation():
    amounts = list(extractor.extract("Rodízio de pizza. R$ 120,00 para 4 pessoas. Cada um paga igual."))
    assert len(amounts) == 1
    assert amounts[0].value_cents == 12000
    assert amounts[0].raw_text == "R$ 120,00"
    assert amounts[0].confidence is Confidence.inferred
    assert amounts[0].currency == "BRL"


@pytest.mark.parametrize(
    "text, cents",
    [
        ("A conta deu 120 reais", 12000),
        ("Deu 120,00 R$ no total", 12000),
        ("Foi R$120 o jantar", 12000),
        ("Mercado: R$ 1.200,00", 120000),
        ("O uber deu 50 pilas", 5000),
        ("Foram cem reais de pizza", 10000),
        ("Aluguel de dois mil reais", 200000),
    ],
)
def test_notations(text, cents):
    assert _values(text) == [cents]


def test_total_qualifier_wins_over_plain_match():
    amounts = list(extractor.extract("O total de R$ 300,00 foi pago. Confirmando: R$ 300,00."))
    assert len(amounts) == 1
    assert amounts[0].value_cents == 30000
    assert amounts[0].confidence is Confidence.exact


def test_total_qualifier_after_plain_match_upgrades_confidence():
    text = "Paguei R$ 300,00 ontem, total de R$ 300,00"
    amounts = list(extractor.extract(text))
    assert len(amounts) == 1
    assert amounts[0].confidence is Confidence.exact
    assert amounts[0].position == text.index("300,00")


def test_distinct_figures_kept_in_order():
    amounts = list(extractor.extract("Cada um paga R$ 75,00, total de R$ 300,00"))
    assert [a.value_cents for a in amounts] == [7500, 30000]
    assert [a.confidence for a in amounts] == [Confidence.inferred, Confidence.exact]


def test_no_currency_marker():
    assert _values("Vamos dividir igualmente entre 4 pessoas") == []


def test_sequence_is_restartable():
    amounts = extractor.extract("R$ 50,00 de bebida e R$ 150,00 de comida")
    assert [a.value_cents for a in amounts] == [5000, 15000]
    assert [a.value_cents for a in amounts] == [5000, 15000]


@pytest.mark.parametrize(
    "text, cents",
    [
        ("2 mil reais para 4 pessoas", 200000),
        ("mil e quinhentos reais", 150000),
        ("R$ 3 mil, cada um paga igual", 300000),
        ("R$ 1 mil e 200", 120000),
        ("Viagem de 2,5 mil reais", 250000),
        ("Aluguel de dois mil reais", 200000),
        ("Carro por mil reais", 100000),
    ],
)
def test_thousands_are_composed(text, cents):
    assert _values(text) == [cents]


@pytest.mark.parametrize(
    "text",
    [
        "O total é de R$ 300,00",
        "O total é R$ 300,00",
        "Total deu R$ 300",
        "O total dá 300 reais",
        "Total da conta: R$ 300,00",
    ],
)
def test_total_connectors(text):
    amounts = list(extractor.extract(text))
    assert [a.value_cents for a in amounts] == [30000]
    assert amounts[0].confidence is Confidence.exact


@pytest.mark.parametrize("noun", ["pessoas", "amigos", "convidados", "participantes"])
def test_head_count_after_reais_is_not_an_amount(noun):
    assert _values(f"Jantar de 200 reais 5 {noun}") == [20000]
