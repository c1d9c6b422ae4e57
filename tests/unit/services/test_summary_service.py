"""Unit tests for the dashboard, finance and marketing summaries."""
from datetime import date, datetime, timedelta
from types import SimpleNamespace

from app.services.summary_service import summarize_budgets, summarize_finances, summarize_marketing

TODAY = date(2026, 10, 19)


def make_budget(status, total_value, validity_date=None, created_at=datetime(2026, 10, 1, 12, 0)):
    return SimpleNamespace(
        status=status,
        total_value=total_value,
        validity_date=validity_date,
        created_at=created_at,
    )


class TestSummarizeBudgets:
    def test_empty(self):
        summary = summarize_budgets([], today=TODAY)
        assert summary.total_budgets == 0
        assert summary.total_value == 0
        assert summary.status_counts == {}
        assert summary.monthly_totals == []

    def test_counts_and_values(self):
        budgets = [
            make_budget("aprovado", 100000, TODAY - timedelta(days=10)),
            make_budget("enviado", 50000, TODAY - timedelta(days=1)),
            make_budget("rascunho", 20000, TODAY + timedelta(days=3)),
            make_budget("rejeitado", 7000, None, created_at=datetime(2026, 9, 30, 8, 0)),
        ]
        summary = summarize_budgets(budgets, client_count=3, today=TODAY)

        assert summary.total_budgets == 4
        assert summary.total_value == 177000
        assert summary.approved_count == 1
        assert summary.approved_value == 100000
        assert summary.pending_count == 2
        # "enviado" com validade ontem aparece como vencido
        assert summary.expired_count == 1
        assert summary.near_expiry_count == 1
        assert summary.status_counts == {"aprovado": 1, "vencido": 1, "rascunho": 1, "rejeitado": 1}
        assert [(m.month, m.value) for m in summary.monthly_totals] == [
            ("2026-09", 7000),
            ("2026-10", 170000),
        ]
        assert summary.client_count == 3

    def test_approved_close_to_expiry_is_not_flagged(self):
        budgets = [make_budget("aprovado", 1000, TODAY + timedelta(days=2))]
        assert summarize_budgets(budgets, today=TODAY).near_expiry_count == 0


def test_summarize_finances_by_type_and_category():
    entries = [
        SimpleNamespace(type="receita", category="serviços", amount=500000),
        SimpleNamespace(type="despesa", category="licenças", amount=120000),
        SimpleNamespace(type="despesa", category="serviços", amount=30000),
    ]
    summary = summarize_finances(entries)

    assert summary.total_revenue == 500000
    assert summary.total_expense == 150000
    assert summary.balance == 350000
    assert [(c.category, c.revenue, c.expense) for c in summary.by_category] == [
        ("licenças", 0, 120000),
        ("serviços", 500000, 30000),
    ]


def test_summarize_marketing_percentage():
    campaigns = [
        SimpleNamespace(budget=300000, spent=100000, status="ativa"),
        SimpleNamespace(budget=0, spent=0, status="planejada"),
        SimpleNamespace(budget=0, spent=0, status="ativa"),
    ]
    summary = summarize_marketing(campaigns)

    assert summary.total_budget == 300000
    assert summary.total_spent == 100000
    assert summary.spent_percentage == 33.33
    assert summary.status_counts == {"ativa": 2, "planejada": 1}


def test_summarize_marketing_without_budget():
    summary = summarize_marketing([SimpleNamespace(budget=0, spent=500, status="ativa")])
    assert summary.spent_percentage == 0.0
