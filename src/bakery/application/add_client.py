"""Application service: Add Client use case."""

from __future__ import annotations

import logging

from bakery.domain.exceptions import ValidationError
from bakery.domain.model.client import Client
from bakery.domain.repository.client_repository import ClientRepository

logger = logging.getLogger(__name__)


class AddClientHandler:

    def __init__(self, client_repo: ClientRepository) -> None:
        self._client_repo = client_repo

    def handle(self, name: str) -> Client:
        """Add a client. Names are unique regardless of case."""
        client = Client.create(name)

        if self._client_repo.get_by_name(client.name) is not None:
            raise ValidationError(f"Client '{client.name}' already exists")

        saved = self._client_repo.save(client)
        logger.info("Client %s added (%s)", saved.id, saved.name)
        return saved


class ListClientsHandler:

    def __init__(self, client_repo: ClientRepository) -> None:
        self._client_repo = client_repo

    def handle(self) -> list[Client]:
        return self._client_repo.list_all()
