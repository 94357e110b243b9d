"""Application service: Create Order use case."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from bakery.application.dto import OrderDTO
from bakery.domain.model.order import Order
from bakery.domain.model.variant import DEFAULT_VARIANTS, VariantCatalog
from bakery.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class CreateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        catalog: VariantCatalog = DEFAULT_VARIANTS,
    ) -> None:
        self._order_repo = order_repo
        self._catalog = catalog

    def handle(
        self,
        client_name: str,
        request_date: str,
        quantities: Mapping[str, object] | None = None,
    ) -> OrderDTO:
        """Register a new order.

        The aggregate validates the client name and date and coerces the
        quantities; the repository assigns the ID.
        """
        order = Order.create(
            client_name=client_name,
            request_date=request_date,
            quantities=quantities,
            catalog=self._catalog,
        )
        self._order_repo.save(order)
        logger.info(
            "Order %s created for %s on %s (%d breads)",
            order.id, order.client_name, order.request_date, order.total_breads,
        )
        return OrderDTO.from_order(order)
