# app/services/budget_calculations.py
"""
Regras de cálculo dos orçamentos.

Funções puras, sem acesso ao banco:

- total em centavos a partir dos itens;
- status exibido (um orçamento não finalizado vira "vencido" após a validade);
- dias até o vencimento e aviso de "vence em breve".

Todas as comparações são feitas só com datas (meia-noite), nunca com horário.
"""
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Iterable, Mapping, Optional, Union

from app.enums import BudgetStatus, TERMINAL_BUDGET_STATUSES
from app.utils.money import to_cents

DateLike = Union[date, datetime, str, None]

NEAR_EXPIRY_WINDOW_DAYS = 7


def _to_decimal(value: Any) -> Decimal:
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def _item_values(item: Any):
    if isinstance(item, Mapping):
        unit_price = item.get("unitPrice", item.get("unit_price"))
        return item.get("quantity"), unit_price
    return item.quantity, item.unit_price


def as_date(value: DateLike) -> Optional[date]:
    """Normaliza date, datetime ou texto ISO ("2026-10-19", "2026-10-19T10:00:00") para date."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


def compute_total(items: Iterable[Any]) -> int:
    """
    Soma quantidade x preço unitário de todos os itens e devolve centavos.

    Os preços chegam em reais; a conversão para centavos (x100, arredondando
    meio para cima) acontece uma única vez, sobre a soma.
    """
    total = Decimal("0")
    for item in items or []:
        quantity, unit_price = _item_values(item)
        total += _to_decimal(quantity) * _to_decimal(unit_price)
    return to_cents(total)


def days_to_expiry(validity_date: DateLike, today: DateLike) -> Optional[int]:
    validity = as_date(validity_date)
    if validity is None:
        return None
    return (validity - as_date(today)).days


def derive_display_status(stored_status: str, validity_date: DateLike, today: DateLike) -> BudgetStatus:
    status = BudgetStatus(stored_status)
    if status in TERMINAL_BUDGET_STATUSES:
        return status
    days = days_to_expiry(validity_date, today)
    if days is not None and days < 0:
        return BudgetStatus.VENCIDO
    return status


def is_near_expiry(validity_date: DateLike, today: DateLike, window_days: int = NEAR_EXPIRY_WINDOW_DAYS) -> bool:
    days = days_to_expiry(validity_date, today)
    return days is not None and 0 <= days < window_days
