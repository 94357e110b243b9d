"""Bucketing orders into daily, weekly and monthly sales reports.

Every report has a fixed number of buckets, oldest first, and every
bucket carries a total for every variant in the catalog (zero when no
order matched).  Orders whose request date cannot be parsed fall into no
bucket.  The reference date is always passed in explicitly; dates before
EARLIEST_REFERENCE_DATE are treated as that date.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, timedelta

from bakery.domain.model.order import Order
from bakery.domain.model.variant import DEFAULT_VARIANTS, VariantCatalog
from bakery.domain.service.calendar_labels import day_label, month_label, week_label
from bakery.domain.service.snapshot import normalize_orders

DAYS_IN_DAILY_REPORT = 7
WEEKS_IN_WEEKLY_REPORT = 4
MONTHS_IN_MONTHLY_REPORT = 12

# Earliest reference date whose twelve-month window still fits in the calendar
EARLIEST_REFERENCE_DATE = date(1, 12, 1)


@dataclass(frozen=True)
class Bucket:
    """One bar of a chart: a labelled time interval with per-variant totals."""

    key: str
    label: str
    start: date
    end: date  # inclusive
    totals: dict[str, int]

    @property
    def total(self) -> int:
        return sum(self.totals.values())


def daily_report(
    orders: Iterable[object],
    today: date,
    catalog: VariantCatalog = DEFAULT_VARIANTS,
) -> list[Bucket]:
    """Last 7 calendar days, ``today - 6`` through ``today``.

    Orders are matched by exact string equality of ``requestDate`` with
    the bucket's ISO date.
    """
    today = max(today, EARLIEST_REFERENCE_DATE)
    snapshot = normalize_orders(orders, catalog)
    days = [today - timedelta(days=offset) for offset in range(DAYS_IN_DAILY_REPORT - 1, -1, -1)]
    counts = {day.isoformat(): catalog.zero_totals() for day in days}

    for order in snapshot:
        totals = counts.get(order.request_date)
        if totals is not None:
            _add_quantities(totals, order, catalog)

    return [
        Bucket(
            key=day.isoformat(),
            label=day_label(day),
            start=day,
            end=day,
            totals=counts[day.isoformat()],
        )
        for day in days
    ]


def weekly_report(
    orders: Iterable[object],
    today: date,
    catalog: VariantCatalog = DEFAULT_VARIANTS,
) -> list[Bucket]:
    """Four trailing 7-day windows ending on today, today-7, today-14, today-21.

    These are rolling windows, not Monday-to-Sunday calendar weeks.
    """
    today = max(today, EARLIEST_REFERENCE_DATE)
    snapshot = normalize_orders(orders, catalog)
    dated = [(order.parsed_date, order) for order in snapshot]
    dated = [(day, order) for day, order in dated if day is not None]

    buckets: list[Bucket] = []
    for weeks_back in range(WEEKS_IN_WEEKLY_REPORT - 1, -1, -1):
        end = today - timedelta(days=weeks_back * 7)
        start = end - timedelta(days=6)
        totals = catalog.zero_totals()
        for day, order in dated:
            if start <= day <= end:
                _add_quantities(totals, order, catalog)
        buckets.append(
            Bucket(
                key=f"{start.isoformat()}/{end.isoformat()}",
                label=week_label(start, end),
                start=start,
                end=end,
                totals=totals,
            )
        )
    return buckets


def monthly_report(
    orders: Iterable[object],
    today: date,
    catalog: VariantCatalog = DEFAULT_VARIANTS,
) -> list[Bucket]:
    """The last 12 calendar months, ending with the month of *today*."""
    today = max(today, EARLIEST_REFERENCE_DATE)
    snapshot = normalize_orders(orders, catalog)

    months: list[tuple[int, int]] = []
    for months_back in range(MONTHS_IN_MONTHLY_REPORT - 1, -1, -1):
        index = today.year * 12 + (today.month - 1) - months_back
        months.append((index // 12, index % 12 + 1))
    counts = {_month_key(year, month): catalog.zero_totals() for year, month in months}

    for order in snapshot:
        day = order.parsed_date
        if day is None:
            continue
        totals = counts.get(_month_key(day.year, day.month))
        if totals is not None:
            _add_quantities(totals, order, catalog)

    return [
        Bucket(
            key=_month_key(year, month),
            label=month_label(year, month),
            start=date(year, month, 1),
            end=_last_day_of_month(year, month),
            totals=counts[_month_key(year, month)],
        )
        for year, month in months
    ]


@dataclass(frozen=True)
class DashboardCounters:
    total_orders: int
    orders_today: int


def dashboard_counters(orders: Iterable[object], today: date) -> DashboardCounters:
    """Headline numbers shown above the charts."""
    snapshot = normalize_orders(orders)
    key = today.isoformat()
    return DashboardCounters(
        total_orders=len(snapshot),
        orders_today=sum(1 for order in snapshot if order.request_date == key),
    )


# --- Internal helpers -------------------------------------------------------


def _add_quantities(totals: dict[str, int], order: Order, catalog: VariantCatalog) -> None:
    for variant in catalog:
        totals[variant.key] += order.quantity(variant.key)


def _month_key(year: int, month: int) -> str:
    return f"{year:04d}-{month:02d}"


def _last_day_of_month(year: int, month: int) -> date:
    if month == 12:
        return date(year, 12, 31)
    return date(year, month + 1, 1) - timedelta(days=1)
