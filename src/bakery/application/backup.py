"""Application service: bulk import and export of backups.

Exports serialize the full snapshot of one entity to JSON with a
date-stamped filename.  Imports accept any JSON-like payload: records
that do not look like an order (or client) are dropped, never raised.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from datetime import date
from enum import Enum

from bakery.application.dto import ExportFile
from bakery.domain.model.client import Client
from bakery.domain.model.order import Order, is_importable_order
from bakery.domain.model.variant import DEFAULT_VARIANTS, VariantCatalog
from bakery.domain.repository.client_repository import ClientRepository
from bakery.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class BackupEntity(Enum):
    ORDERS = "orders"
    CLIENTS = "clients"


def backup_filename(entity: BackupEntity, today: date) -> str:
    return f"backup_{entity.value}_{today.isoformat()}.json"


class ExportHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        client_repo: ClientRepository,
        catalog: VariantCatalog = DEFAULT_VARIANTS,
    ) -> None:
        self._order_repo = order_repo
        self._client_repo = client_repo
        self._catalog = catalog

    def handle(self, entity: BackupEntity, today: date) -> ExportFile:
        if entity == BackupEntity.ORDERS:
            records = [o.to_record(self._catalog) for o in self._order_repo.list_all()]
        else:
            records = [{"id": c.id, "name": c.name} for c in self._client_repo.list_all()]

        logger.info("Exporting %d %s", len(records), entity.value)
        return ExportFile(
            filename=backup_filename(entity, today),
            content=json.dumps(records, indent=2, ensure_ascii=False) + "\n",
        )


class ImportOrdersHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        catalog: VariantCatalog = DEFAULT_VARIANTS,
    ) -> None:
        self._order_repo = order_repo
        self._catalog = catalog

    def handle(self, payload: object) -> int:
        """Import order records and return how many were accepted."""
        if not isinstance(payload, list):
            logger.warning(
                "Order import ignored: expected a list, got %s", type(payload).__name__
            )
            return 0

        taken_ids = {order.id for order in self._order_repo.list_all()}
        accepted: list[Order] = []
        for index, record in enumerate(payload):
            if not is_importable_order(record):
                logger.debug("Dropping order record #%d: missing clientName/requestDate", index)
                continue
            order = Order.from_record(record, self._catalog)
            if not order.id or order.id in taken_ids:
                order.id = self._order_repo.next_id()
            taken_ids.add(order.id)
            accepted.append(order)

        if accepted:
            self._order_repo.save_many(accepted)
        logger.info("Imported %d of %d order records", len(accepted), len(payload))
        return len(accepted)


class ImportClientsHandler:

    def __init__(self, client_repo: ClientRepository) -> None:
        self._client_repo = client_repo

    def handle(self, payload: object) -> int:
        """Import client records, skipping duplicates by name."""
        if not isinstance(payload, list):
            logger.warning(
                "Client import ignored: expected a list, got %s", type(payload).__name__
            )
            return 0

        known = {client.name.casefold() for client in self._client_repo.list_all()}
        count = 0
        for index, record in enumerate(payload):
            name = record.get("name") if isinstance(record, Mapping) else None
            if not isinstance(name, str) or not name.strip():
                logger.debug("Dropping client record #%d: missing name", index)
                continue
            if name.strip().casefold() in known:
                logger.debug("Dropping client record #%d: %r already exists", index, name)
                continue
            self._client_repo.save(Client.create(name))
            known.add(name.strip().casefold())
            count += 1

        logger.info("Imported %d of %d client records", count, len(payload))
        return count
