"""Unit tests for the revenue summaries."""

from datetime import date
from decimal import Decimal

import pytest

from bakery.domain.model.order import Order
from bakery.domain.service.financial import (
    PriceTable,
    daily_summary,
    monthly_summary,
    summarize,
)

TODAY = date(2024, 1, 10)
PRICES = PriceTable()


def _order(request_date: str, **quantities) -> Order:
    return Order(id=None, client_name="Ana", request_date=request_date, quantities=quantities)


class TestDailySummary:

    def test_ana_and_beto(self):
        orders = [
            {"clientName": "Ana", "requestDate": "2024-01-10", "hamburgerBuns": 10},
            {"clientName": "Beto", "requestDate": "2024-01-10", "bisnagaBuns": 5},
        ]
        summary = daily_summary(orders, PRICES, TODAY)
        assert summary.quantity("hamburger") == 10
        assert summary.quantity("bisnaga") == 5
        assert summary.total("hamburger") == Decimal("43.00")
        assert summary.total("bisnaga") == Decimal("24.00")
        assert summary.grand_total == Decimal("67.00")

    def test_other_days_excluded(self):
        orders = [_order("2024-01-09", baguette=3), _order("2024-01-10", baguette=1)]
        assert daily_summary(orders, PRICES, TODAY).quantity("baguette") == 1


class TestMonthlySummary:

    def test_current_month_only(self):
        orders = [
            _order("2024-01-01", baguette=2),
            _order("2024-01-31", mediumHamburger=4),
            _order("2023-12-31", baguette=100),
            _order("2023-01-10", baguette=100),  # same month, other year
        ]
        summary = monthly_summary(orders, PRICES, TODAY)
        assert summary.quantity("baguette") == 2
        assert summary.quantity("mediumHamburger") == 4
        assert summary.grand_total == Decimal("2") * Decimal("5.00") + Decimal("4") * Decimal("3.80")

    def test_grand_total_is_sum_of_lines(self):
        orders = [_order("2024-01-05", hamburger=7, mediumHamburger=3, bisnaga=11, baguette=13)]
        summary = monthly_summary(orders, PRICES, TODAY)
        assert summary.grand_total == sum(
            (line.quantity * line.unit_price for line in summary.lines), Decimal("0")
        )
        assert summary.grand_total == sum((line.total for line in summary.lines), Decimal("0"))


class TestSummaryRobustness:

    @pytest.mark.parametrize("bad_date", ["", "bad", "2024-01", "2024-01-99", "2024/01/10"])
    def test_unparsable_dates_contribute_nothing(self, bad_date):
        orders = [_order(bad_date, hamburger=5)]
        assert daily_summary(orders, PRICES, TODAY).grand_total == 0
        assert monthly_summary(orders, PRICES, TODAY).grand_total == 0

    def test_junk_input(self):
        summary = monthly_summary([None, "x", {"requestDate": "2024-01-02", "baguettes": "-4"}], PRICES, TODAY)
        assert summary.grand_total == 0
        assert len(summary.lines) == 4

    def test_unpriced_variant_costs_nothing(self):
        prices = PriceTable({"hamburger": Decimal("1.00")})
        summary = summarize([_order("2024-01-10", hamburger=2, baguette=9)], prices)
        assert summary.total("baguette") == Decimal("0")
        assert summary.grand_total == Decimal("2.00")

    def test_idempotent(self):
        orders = [_order("2024-01-10", hamburger=2)]
        assert daily_summary(orders, PRICES, TODAY) == daily_summary(orders, PRICES, TODAY)
