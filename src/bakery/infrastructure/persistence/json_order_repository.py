"""JSON-file-backed implementation of OrderRepository."""

from __future__ import annotations

import logging
from pathlib import Path
from uuid import uuid4

from bakery.domain.model.order import Order, is_importable_order
from bakery.domain.model.variant import DEFAULT_VARIANTS, VariantCatalog
from bakery.domain.repository.order_repository import OrderRepository
from bakery.infrastructure.persistence.json_file import (
    ensure_file,
    load_records,
    persist_records,
)

logger = logging.getLogger(__name__)


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path, catalog: VariantCatalog = DEFAULT_VARIANTS) -> None:
        self._file_path = file_path
        self._catalog = catalog
        ensure_file(self._file_path)

    # --- OrderRepository interface --------------------------------------------

    def next_id(self) -> str:
        return uuid4().hex

    def get_by_id(self, order_id: str) -> Order | None:
        for order in self._load():
            if order.id == order_id:
                return order
        return None

    def list_all(self) -> list[Order]:
        return self._load()

    def save(self, order: Order) -> None:
        self.save_many([order])

    def save_many(self, orders: list[Order]) -> None:
        stored = self._load()
        index = {order.id: i for i, order in enumerate(stored)}

        # Upsert: replace if exists, otherwise append
        for order in orders:
            if order.id is None:
                order.id = self.next_id()
            if order.id in index:
                stored[index[order.id]] = order
            else:
                index[order.id] = len(stored)
                stored.append(order)

        self._persist(stored)

    def delete(self, order_id: str) -> bool:
        stored = self._load()
        remaining = [order for order in stored if order.id != order_id]
        if len(remaining) == len(stored):
            return False
        self._persist(remaining)
        return True

    # --- Serialization --------------------------------------------------------

    def _load(self) -> list[Order]:
        orders: list[Order] = []
        for position, record in enumerate(load_records(self._file_path)):
            # Same rule as imports, plus a stored ID.
            if not is_importable_order(record) or not isinstance(record.get("id"), str):
                logger.warning(
                    "Skipping invalid order record #%d in %s", position, self._file_path
                )
                continue
            orders.append(Order.from_record(record, self._catalog))
        return orders

    def _persist(self, orders: list[Order]) -> None:
        persist_records(self._file_path, [o.to_record(self._catalog) for o in orders])
