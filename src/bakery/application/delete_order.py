"""Application service: Delete Order use case."""

from __future__ import annotations

import logging

from bakery.domain.exceptions import EntityNotFoundError
from bakery.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class DeleteOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: str) -> None:
        if not self._order_repo.delete(order_id):
            raise EntityNotFoundError(f"Order {order_id} not found")
        logger.info("Order %s deleted", order_id)
