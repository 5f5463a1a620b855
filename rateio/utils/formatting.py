def cents_to_decimal_str(cents: int) -> str:
    """12000 -> "120.00"."""
    sign = "-" if cents < 0 else ""
    whole, frac = divmod(abs(cents), 100)
    return f"{sign}{whole}.{frac:02d}"


def format_brl(cents: int, with_symbol: bool = True) -> str:
    """Format integer cents the Brazilian way: 120000 -> "R$ 1.200,00"."""
    sign = "- " if cents < 0 else ""
    whole, frac = divmod(abs(cents), 100)
    text = f"{whole:,}".replace(",", ".") + f",{frac:02d}"
    symbol = "R$ " if with_symbol else ""
    return f"{sign}{symbol}{text}"
