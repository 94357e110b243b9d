"""Normalizing an order snapshot before reporting.

Reports accept either ``Order`` objects or raw JSON-like records (as read
from a backup or a remote store).  Anything that is not a mapping is
skipped so the reporting functions stay total.
"""

from __future__ import annotations

from collections.abc import Iterable

from bakery.domain.model.order import Order
from bakery.domain.model.variant import DEFAULT_VARIANTS, VariantCatalog


def normalize_orders(
    orders: Iterable[object] | None,
    catalog: VariantCatalog = DEFAULT_VARIANTS,
) -> list[Order]:
    if orders is None or isinstance(orders, (str, bytes)):
        return []
    try:
        items = list(orders)
    except TypeError:
        return []

    result: list[Order] = []
    for item in items:
        if isinstance(item, Order):
            result.append(item)
            continue
        order = Order.from_record(item, catalog)
        if order is not None:
            result.append(order)
    return result
