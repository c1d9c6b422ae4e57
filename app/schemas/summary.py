# app/schemas/summary.py
from typing import Dict, List

from app.schemas.base import CamelModel

# Todos os valores monetários em centavos


class MonthlyTotal(CamelModel):
    month: str  # YYYY-MM
    value: int


class DashboardSummary(CamelModel):
    total_budgets: int
    total_value: int
    approved_count: int
    approved_value: int
    pending_count: int
    expired_count: int
    near_expiry_count: int
    status_counts: Dict[str, int]
    monthly_totals: List[MonthlyTotal]
    client_count: int


class FinanceCategoryTotal(CamelModel):
    category: str
    revenue: int
    expense: int


class FinanceSummary(CamelModel):
    total_revenue: int
    total_expense: int
    balance: int
    by_category: List[FinanceCategoryTotal]


class MarketingSummary(CamelModel):
    total_budget: int
    total_spent: int
    spent_percentage: float
    status_counts: Dict[str, int]
