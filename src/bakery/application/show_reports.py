"""Application service: sales reports and revenue (queries).

Both handlers load the current snapshot from the store and hand it,
with an explicit reference date, to the pure domain transforms.
"""

from __future__ import annotations

from datetime import date
from enum import Enum

from bakery.domain.model.variant import DEFAULT_VARIANTS, VariantCatalog
from bakery.domain.repository.order_repository import OrderRepository
from bakery.domain.service.aggregation import (
    Bucket,
    DashboardCounters,
    daily_report,
    dashboard_counters,
    monthly_report,
    weekly_report,
)
from bakery.domain.service.financial import (
    FinancialSummary,
    PriceTable,
    daily_summary,
    monthly_summary,
)


class ReportPeriod(Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


_REPORTS = {
    ReportPeriod.DAILY: daily_report,
    ReportPeriod.WEEKLY: weekly_report,
    ReportPeriod.MONTHLY: monthly_report,
}


class SalesReportHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        catalog: VariantCatalog = DEFAULT_VARIANTS,
    ) -> None:
        self._order_repo = order_repo
        self._catalog = catalog

    def handle(self, period: ReportPeriod, today: date) -> list[Bucket]:
        report = _REPORTS[period]
        return report(self._order_repo.list_all(), today, self._catalog)

    def counters(self, today: date) -> DashboardCounters:
        return dashboard_counters(self._order_repo.list_all(), today)


class FinancialPeriod(Enum):
    TODAY = "today"
    MONTH = "month"


class FinancialReportHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        prices: PriceTable,
        catalog: VariantCatalog = DEFAULT_VARIANTS,
    ) -> None:
        self._order_repo = order_repo
        self._prices = prices
        self._catalog = catalog

    def handle(self, period: FinancialPeriod, today: date) -> FinancialSummary:
        orders = self._order_repo.list_all()
        if period == FinancialPeriod.TODAY:
            return daily_summary(orders, self._prices, today, self._catalog)
        return monthly_summary(orders, self._prices, today, self._catalog)
