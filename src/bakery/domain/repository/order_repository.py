"""Abstract repository for the Order aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, in-memory) live in the
infrastructure layer and in the test fakes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from bakery.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def next_id(self) -> str:
        """Generate a new unique order ID."""

    @abstractmethod
    def get_by_id(self, order_id: str) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every stored order; the order of the list is not meaningful."""

    @abstractmethod
    def save(self, order: Order) -> None:
        """Persist a new or updated order, assigning an ID if it has none."""

    @abstractmethod
    def save_many(self, orders: list[Order]) -> None:
        """Persist several orders in one write."""

    @abstractmethod
    def delete(self, order_id: str) -> bool:
        """Remove an order. Returns False if it did not exist."""
