"""Application service: List Orders use case (query)."""

from __future__ import annotations

from bakery.application.dto import OrderDTO, OrderPageDTO
from bakery.domain.repository.order_repository import OrderRepository
from bakery.domain.service.order_listing import (
    DEFAULT_PAGE_SIZE,
    OrderListState,
    build_order_list,
)


class ListOrdersHandler:

    def __init__(self, order_repo: OrderRepository, page_size: int = DEFAULT_PAGE_SIZE) -> None:
        self._order_repo = order_repo
        self._page_size = page_size

    def handle(self, state: OrderListState = OrderListState()) -> OrderPageDTO:
        result = build_order_list(self._order_repo.list_all(), state, self._page_size)
        return OrderPageDTO(
            items=[OrderDTO.from_order(order) for order in result.items],
            page=result.page,
            total_pages=result.total_pages,
            total_count=result.total_count,
            empty_message=result.empty_message,
        )
