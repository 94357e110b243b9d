"""JSON-file-backed implementation of ClientRepository."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from uuid import uuid4

from bakery.domain.model.client import Client
from bakery.domain.repository.client_repository import ClientRepository
from bakery.infrastructure.persistence.json_file import (
    ensure_file,
    load_records,
    persist_records,
)

logger = logging.getLogger(__name__)


class JsonClientRepository(ClientRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        ensure_file(self._file_path)

    # --- ClientRepository interface -------------------------------------------

    def get_by_name(self, name: str) -> Client | None:
        for client in self._load():
            if client.same_name(name):
                return client
        return None

    def list_all(self) -> list[Client]:
        return sorted(self._load(), key=lambda c: c.name.casefold())

    def save(self, client: Client) -> Client:
        clients = self._load()
        if client.id is None:
            client = Client(id=uuid4().hex, name=client.name)
        clients = [c for c in clients if c.id != client.id]
        clients.append(client)
        persist_records(self._file_path, [{"id": c.id, "name": c.name} for c in clients])
        return client

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> list[Client]:
        clients: list[Client] = []
        for position, record in enumerate(load_records(self._file_path)):
            if not (
                isinstance(record, Mapping)
                and isinstance(record.get("id"), str)
                and isinstance(record.get("name"), str)
            ):
                logger.warning(
                    "Skipping invalid client record #%d in %s", position, self._file_path
                )
                continue
            clients.append(Client(id=record["id"], name=record["name"]))
        return clients
