"""Search, sort and pagination for the order list.

``OrderListState`` is the list's UI state (search term, sort, page).
``build_order_list`` derives the visible page from a snapshot and a
state; it is recomputed whenever either changes.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass, replace
from enum import Enum

from bakery.domain.model.order import Order
from bakery.domain.model.variant import DEFAULT_VARIANTS, VariantCatalog
from bakery.domain.service.snapshot import normalize_orders

DEFAULT_PAGE_SIZE = 20

NO_MATCHES_MESSAGE = "Nenhum pedido encontrado para a busca."
NO_ORDERS_MESSAGE = "Nenhum pedido registrado ainda."


class SortKey(Enum):
    CLIENT_NAME = "clientName"
    REQUEST_DATE = "requestDate"


class SortDirection(Enum):
    ASCENDING = "ascending"
    DESCENDING = "descending"


@dataclass(frozen=True)
class SortSpec:
    key: SortKey = SortKey.REQUEST_DATE
    direction: SortDirection = SortDirection.DESCENDING


DEFAULT_SORT = SortSpec()


def toggle_sort(current: SortSpec | None, key: SortKey) -> SortSpec:
    """Sort spec after the user clicks the *key* column.

    Clicking the column that is already sorted ascending flips it to
    descending; any other click sorts ascending.
    """
    if current is not None and current.key == key and current.direction == SortDirection.ASCENDING:
        return SortSpec(key, SortDirection.DESCENDING)
    return SortSpec(key, SortDirection.ASCENDING)


def filter_orders(orders: Iterable[Order], term: str | None) -> list[Order]:
    """Case-insensitive substring match on the client name."""
    needle = term.casefold() if isinstance(term, str) else ""
    if not needle:
        return list(orders)
    return [order for order in orders if needle in order.client_name.casefold()]


def sort_orders(orders: Iterable[Order], spec: SortSpec | None = DEFAULT_SORT) -> list[Order]:
    """Stable sort; orders with equal keys keep their input order."""
    if spec is None:
        return list(orders)
    if spec.key == SortKey.CLIENT_NAME:
        key = lambda order: order.client_name  # noqa: E731
    else:
        key = lambda order: order.request_date  # noqa: E731
    return sorted(orders, key=key, reverse=spec.direction == SortDirection.DESCENDING)


def total_pages(count: int, page_size: int = DEFAULT_PAGE_SIZE) -> int:
    """At least one page, even when there is nothing to show."""
    if count <= 0:
        return 1
    return math.ceil(count / max(page_size, 1))


def clamp_page(page: int, pages: int) -> int:
    if not isinstance(page, int) or isinstance(page, bool):
        page = 1
    return min(max(page, 1), pages)


def paginate(
    orders: list[Order],
    page: int,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> tuple[list[Order], int, int]:
    """Return ``(items, clamped page, total pages)``."""
    page_size = max(page_size, 1)
    pages = total_pages(len(orders), page_size)
    current = clamp_page(page, pages)
    start = (current - 1) * page_size
    return orders[start:start + page_size], current, pages


@dataclass(frozen=True)
class OrderListState:
    search: str = ""
    sort: SortSpec = DEFAULT_SORT
    page: int = 1

    def with_search(self, term: str) -> OrderListState:
        if term == self.search:
            return self
        return replace(self, search=term, page=1)

    def with_sort(self, key: SortKey) -> OrderListState:
        return replace(self, sort=toggle_sort(self.sort, key), page=1)

    def with_sort_spec(self, spec: SortSpec) -> OrderListState:
        if spec == self.sort:
            return self
        return replace(self, sort=spec, page=1)

    def with_page(self, page: int) -> OrderListState:
        return replace(self, page=page)


@dataclass(frozen=True)
class OrderListPage:
    items: list[Order]
    page: int
    total_pages: int
    total_count: int  # after filtering
    empty_message: str | None

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages


def build_order_list(
    orders: Iterable[object],
    state: OrderListState = OrderListState(),
    page_size: int = DEFAULT_PAGE_SIZE,
    catalog: VariantCatalog = DEFAULT_VARIANTS,
) -> OrderListPage:
    snapshot = normalize_orders(orders, catalog)
    visible = sort_orders(filter_orders(snapshot, state.search), state.sort)
    items, page, pages = paginate(visible, state.page, page_size)

    empty_message = None
    if not visible:
        empty_message = NO_MATCHES_MESSAGE if state.search else NO_ORDERS_MESSAGE

    return OrderListPage(
        items=items,
        page=page,
        total_pages=pages,
        total_count=len(visible),
        empty_message=empty_message,
    )
