"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from bakery.domain.model.order import Order


@dataclass(frozen=True)
class OrderDTO:
    """Output: an order as displayed to the user."""

    id: str
    client_name: str
    request_date: str
    quantities: dict[str, int]
    total_breads: int

    @staticmethod
    def from_order(order: Order) -> OrderDTO:
        return OrderDTO(
            id=order.id or "",
            client_name=order.client_name,
            request_date=order.request_date,
            quantities=dict(order.quantities),
            total_breads=order.total_breads,
        )


@dataclass(frozen=True)
class OrderPageDTO:
    """Output: one page of the order list."""

    items: list[OrderDTO]
    page: int
    total_pages: int
    total_count: int
    empty_message: str | None


@dataclass(frozen=True)
class ExportFile:
    """Output: a backup ready to be written to disk."""

    filename: str
    content: str
