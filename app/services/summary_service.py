# app/services/summary_service.py
from collections import Counter, defaultdict
from datetime import date
from typing import Iterable, Optional

from sqlalchemy.orm import Session

from app import crud
from app.core.config import settings
from app.enums import FinanceType, PENDING_BUDGET_STATUSES, TERMINAL_BUDGET_STATUSES, BudgetStatus
from app.models import Budget, Finance, MarketingCampaign
from app.schemas.summary import (
    DashboardSummary,
    FinanceCategoryTotal,
    FinanceSummary,
    MarketingSummary,
    MonthlyTotal,
)
from app.services import budget_calculations


def summarize_budgets(
    budgets: Iterable[Budget], *, client_count: int = 0, today: Optional[date] = None
) -> DashboardSummary:
    """Indicadores do painel inicial: totais, aprovados, pendentes e vencimentos."""
    today = today or date.today()
    budgets = list(budgets)

    status_counts = Counter()
    monthly = defaultdict(int)
    approved_count = approved_value = pending_count = near_expiry_count = 0

    for b in budgets:
        value = b.total_value or 0
        display_status = budget_calculations.derive_display_status(b.status, b.validity_date, today)
        status_counts[display_status.value] += 1

        if b.status == BudgetStatus.APROVADO:
            approved_count += 1
            approved_value += value
        if b.status in PENDING_BUDGET_STATUSES:
            pending_count += 1
        if b.status not in TERMINAL_BUDGET_STATUSES and budget_calculations.is_near_expiry(
            b.validity_date, today, settings.NEAR_EXPIRY_WINDOW_DAYS
        ):
            near_expiry_count += 1
        if b.created_at is not None:
            monthly[b.created_at.strftime("%Y-%m")] += value

    return DashboardSummary(
        total_budgets=len(budgets),
        total_value=sum(b.total_value or 0 for b in budgets),
        approved_count=approved_count,
        approved_value=approved_value,
        pending_count=pending_count,
        expired_count=status_counts.get(BudgetStatus.VENCIDO.value, 0),
        near_expiry_count=near_expiry_count,
        status_counts=dict(status_counts),
        monthly_totals=[MonthlyTotal(month=m, value=v) for m, v in sorted(monthly.items())],
        client_count=client_count,
    )


def summarize_finances(entries: Iterable[Finance]) -> FinanceSummary:
    """Receitas, despesas e saldo, também por categoria. O sinal vem do tipo do lançamento."""
    by_category = defaultdict(lambda: {"revenue": 0, "expense": 0})
    total_revenue = total_expense = 0

    for entry in entries:
        amount = entry.amount or 0
        if entry.type == FinanceType.DESPESA:
            total_expense += amount
            by_category[entry.category]["expense"] += amount
        else:
            total_revenue += amount
            by_category[entry.category]["revenue"] += amount

    return FinanceSummary(
        total_revenue=total_revenue,
        total_expense=total_expense,
        balance=total_revenue - total_expense,
        by_category=[
            FinanceCategoryTotal(category=category, **totals)
            for category, totals in sorted(by_category.items())
        ],
    )


def summarize_marketing(campaigns: Iterable[MarketingCampaign]) -> MarketingSummary:
    campaigns = list(campaigns)
    total_budget = sum(c.budget or 0 for c in campaigns)
    total_spent = sum(c.spent or 0 for c in campaigns)
    percentage = round(total_spent * 100 / total_budget, 2) if total_budget > 0 else 0.0
    return MarketingSummary(
        total_budget=total_budget,
        total_spent=total_spent,
        spent_percentage=percentage,
        status_counts=dict(Counter(c.status for c in campaigns)),
    )


def get_dashboard_summary(db: Session) -> DashboardSummary:
    return summarize_budgets(crud.budget.get_multi(db), client_count=crud.client.count(db))


def get_finance_summary(db: Session) -> FinanceSummary:
    return summarize_finances(crud.finance.get_multi(db))


def get_marketing_summary(db: Session) -> MarketingSummary:
    return summarize_marketing(crud.marketing.get_multi(db))
