"""Conversão e formatação de valores monetários (sempre inteiros em centavos)."""

from decimal import Decimal, ROUND_HALF_UP
from typing import Any

_CENT = Decimal("1")

CURRENCY_SYMBOLS = {"BRL": "R$", "USD": "US$", "EUR": "€"}


def to_cents(value: Any) -> int:
    """Converte um valor em reais (unidade maior) para centavos."""
    if value is None:
        return 0
    amount = value if isinstance(value, Decimal) else Decimal(str(value))
    return int((amount * 100).quantize(_CENT, rounding=ROUND_HALF_UP))


def from_cents(cents: Any) -> Decimal:
    return (Decimal(int(cents or 0)) / 100).quantize(Decimal("0.01"))


def format_currency(cents: Any, currency: str = "BRL") -> str:
    """Formata centavos no padrão brasileiro: 123456 -> 'R$ 1.234,56'."""
    amount = from_cents(cents)
    sign = "-" if amount < 0 else ""
    formatted = f"{abs(amount):,.2f}".replace(",", "_").replace(".", ",").replace("_", ".")
    symbol = CURRENCY_SYMBOLS.get(currency, currency)
    return f"{sign}{symbol} {formatted}"
