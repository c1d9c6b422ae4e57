"""
Unit tests for the budget calculation rules: totals in cents,
display status, days to expiry and the near-expiry warning.
"""
from datetime import date, datetime, timedelta
from types import SimpleNamespace

import pytest

from app.enums import BudgetStatus
from app.schemas.budget import BudgetItem
from app.services.budget_calculations import (
    as_date,
    compute_total,
    days_to_expiry,
    derive_display_status,
    is_near_expiry,
)

TODAY = date(2026, 10, 19)


class TestComputeTotal:
    def test_empty_items_total_zero(self):
        assert compute_total([]) == 0
        assert compute_total(None) == 0

    def test_single_item_in_cents(self):
        assert compute_total([{"quantity": 2, "unitPrice": 899.00}]) == 179800

    def test_sums_before_converting(self):
        items = [
            {"quantity": 3, "unitPrice": 0.1},
            {"quantity": 1, "unitPrice": 0.005},
        ]
        # 0.30 + 0.005 = 0.305 -> 30.5 centavos -> arredonda para cima
        assert compute_total(items) == 31

    def test_accepts_snake_case_and_schema_items(self):
        stored = [{"quantity": 1, "unit_price": 10}]
        schema_items = [BudgetItem(quantity=4, unit_price=2.5, description="Cabo HDMI")]
        assert compute_total(stored) == 1000
        assert compute_total(schema_items) == 1000

    def test_zero_quantity_contributes_nothing(self):
        items = [{"quantity": 0, "unitPrice": 5000}, {"quantity": 1, "unitPrice": 1.99}]
        assert compute_total(items) == 199

    def test_accepts_plain_objects(self):
        item = SimpleNamespace(quantity=10, unit_price=899.00)
        assert compute_total([item]) == 899000


class TestDisplayStatus:
    def test_sent_budget_past_validity_is_expired(self):
        yesterday = TODAY - timedelta(days=1)
        assert derive_display_status("enviado", yesterday, TODAY) == BudgetStatus.VENCIDO

    def test_approved_budget_is_unchanged(self):
        yesterday = TODAY - timedelta(days=1)
        assert derive_display_status("aprovado", yesterday, TODAY) == BudgetStatus.APROVADO

    def test_rejected_budget_is_unchanged(self):
        yesterday = TODAY - timedelta(days=1)
        assert derive_display_status("rejeitado", yesterday, TODAY) == BudgetStatus.REJEITADO

    def test_validity_today_is_not_expired(self):
        assert derive_display_status("rascunho", TODAY, TODAY) == BudgetStatus.RASCUNHO

    def test_without_validity_keeps_stored_status(self):
        assert derive_display_status("enviado", None, TODAY) == BudgetStatus.ENVIADO

    def test_time_of_day_is_ignored(self):
        late_today = datetime(2026, 10, 19, 23, 59)
        assert derive_display_status("enviado", TODAY, late_today) == BudgetStatus.ENVIADO

    def test_unknown_status_is_rejected(self):
        with pytest.raises(ValueError):
            derive_display_status("sent", TODAY, TODAY)


class TestDaysToExpiry:
    @pytest.mark.parametrize(
        "offset, expected",
        [(0, 0), (7, 7), (-1, -1)],
    )
    def test_whole_days(self, offset, expected):
        assert days_to_expiry(TODAY + timedelta(days=offset), TODAY) == expected

    def test_no_validity_date(self):
        assert days_to_expiry(None, TODAY) is None
        assert days_to_expiry("", TODAY) is None

    def test_iso_strings(self):
        assert days_to_expiry("2026-10-22", "2026-10-19T15:30:00") == 3


class TestNearExpiry:
    @pytest.mark.parametrize("offset", [0, 1, 6])
    def test_inside_window(self, offset):
        assert is_near_expiry(TODAY + timedelta(days=offset), TODAY) is True

    @pytest.mark.parametrize("offset", [7, 30, -1])
    def test_outside_window(self, offset):
        assert is_near_expiry(TODAY + timedelta(days=offset), TODAY) is False

    def test_null_validity(self):
        assert is_near_expiry(None, TODAY) is False

    def test_custom_window(self):
        assert is_near_expiry(TODAY + timedelta(days=10), TODAY, window_days=15) is True


def test_as_date_normalizes_inputs():
    assert as_date(datetime(2026, 1, 2, 10, 0)) == date(2026, 1, 2)
    assert as_date("2026-01-02") == date(2026, 1, 2)
    assert as_date(date(2026, 1, 2)) == date(2026, 1, 2)
    assert as_date(None) is None
