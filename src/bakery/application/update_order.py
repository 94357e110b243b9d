"""Application service: Update Order use case."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from bakery.application.dto import OrderDTO
from bakery.domain.exceptions import EntityNotFoundError
from bakery.domain.model.variant import DEFAULT_VARIANTS, VariantCatalog
from bakery.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class UpdateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        catalog: VariantCatalog = DEFAULT_VARIANTS,
    ) -> None:
        self._order_repo = order_repo
        self._catalog = catalog

    def handle(
        self,
        order_id: str,
        client_name: str | None = None,
        request_date: str | None = None,
        quantities: Mapping[str, object] | None = None,
    ) -> OrderDTO:
        """Replace the given fields of an existing order."""
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order {order_id} not found")

        order.apply_changes(
            client_name=client_name,
            request_date=request_date,
            quantities=quantities,
            catalog=self._catalog,
        )
        self._order_repo.save(order)
        logger.info("Order %s updated", order_id)
        return OrderDTO.from_order(order)
