"""Abstract repository for clients."""

from __future__ import annotations

from abc import ABC, abstractmethod

from bakery.domain.model.client import Client


class ClientRepository(ABC):

    @abstractmethod
    def get_by_name(self, name: str) -> Client | None:
        """Return a client by name (case-insensitive), or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Client]:
        """Return every client, sorted by name."""

    @abstractmethod
    def save(self, client: Client) -> Client:
        """Persist a new client and return it with its assigned ID."""
