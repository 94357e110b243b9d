"""Revenue summaries: quantity x unit price per variant, plus a grand total.

All arithmetic is done in Decimal so the grand total is exactly the sum
of the per-variant totals.  Formatting as currency is left to the
presentation layer.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from bakery.domain.model.order import Order
from bakery.domain.model.variant import DEFAULT_VARIANTS, VariantCatalog
from bakery.domain.service.snapshot import normalize_orders

DEFAULT_PRICES = {
    "hamburger": Decimal("4.30"),
    "mediumHamburger": Decimal("3.80"),
    "bisnaga": Decimal("4.80"),
    "baguette": Decimal("5.00"),
}


class PriceTable:
    """Unit price per variant key. Variants without a price cost zero."""

    def __init__(self, prices: Mapping[str, Decimal] | None = None) -> None:
        self._prices = dict(DEFAULT_PRICES if prices is None else prices)

    def price_of(self, variant_key: str) -> Decimal:
        return self._prices.get(variant_key, Decimal("0"))

    def __eq__(self, other: object) -> bool:
        return isinstance(other, PriceTable) and self._prices == other._prices

    def __repr__(self) -> str:
        return f"PriceTable({self._prices!r})"


@dataclass(frozen=True)
class SummaryLine:
    variant_key: str
    quantity: int
    unit_price: Decimal
    total: Decimal


@dataclass(frozen=True)
class FinancialSummary:
    lines: list[SummaryLine]
    grand_total: Decimal

    def line(self, variant_key: str) -> SummaryLine | None:
        for line in self.lines:
            if line.variant_key == variant_key:
                return line
        return None

    def quantity(self, variant_key: str) -> int:
        found = self.line(variant_key)
        return found.quantity if found else 0

    def total(self, variant_key: str) -> Decimal:
        found = self.line(variant_key)
        return found.total if found else Decimal("0")


def summarize(
    orders: Iterable[object],
    prices: PriceTable,
    catalog: VariantCatalog = DEFAULT_VARIANTS,
) -> FinancialSummary:
    """Sum quantities per variant over *orders* and price them."""
    quantities = catalog.zero_totals()
    for order in normalize_orders(orders, catalog):
        for variant in catalog:
            quantities[variant.key] += order.quantity(variant.key)

    lines = []
    for variant in catalog:
        unit_price = prices.price_of(variant.key)
        qty = quantities[variant.key]
        lines.append(SummaryLine(variant.key, qty, unit_price, unit_price * qty))

    grand_total = sum((line.total for line in lines), Decimal("0"))
    return FinancialSummary(lines=lines, grand_total=grand_total)


def orders_on(orders: Iterable[object], day: date, catalog: VariantCatalog = DEFAULT_VARIANTS) -> list[Order]:
    """Orders whose ``requestDate`` string is exactly *day*."""
    key = day.isoformat()
    return [order for order in normalize_orders(orders, catalog) if order.request_date == key]


def orders_in_month(
    orders: Iterable[object],
    day: date,
    catalog: VariantCatalog = DEFAULT_VARIANTS,
) -> list[Order]:
    """Orders whose parsed date falls in the calendar month of *day*."""
    result = []
    for order in normalize_orders(orders, catalog):
        parsed = order.parsed_date
        if parsed is not None and (parsed.year, parsed.month) == (day.year, day.month):
            result.append(order)
    return result


def daily_summary(
    orders: Iterable[object],
    prices: PriceTable,
    today: date,
    catalog: VariantCatalog = DEFAULT_VARIANTS,
) -> FinancialSummary:
    return summarize(orders_on(orders, today, catalog), prices, catalog)


def monthly_summary(
    orders: Iterable[object],
    prices: PriceTable,
    today: date,
    catalog: VariantCatalog = DEFAULT_VARIANTS,
) -> FinancialSummary:
    return summarize(orders_in_month(orders, today, catalog), prices, catalog)

