"""In-memory fake repositories for testing.

These implement the same abstract interfaces as the JSON repositories
but keep everything in a dict. No file I/O, no side effects.
"""

from __future__ import annotations

from bakery.domain.model.client import Client
from bakery.domain.model.order import Order
from bakery.domain.repository.client_repository import ClientRepository
from bakery.domain.repository.order_repository import OrderRepository


class FakeOrderRepository(OrderRepository):

    def __init__(self, orders: list[Order] | None = None) -> None:
        self._store: dict[str, Order] = {}
        self._counter = 0
        for order in orders or []:
            self.save(order)

    def next_id(self) -> str:
        self._counter += 1
        return f"order-{self._counter}"

    def get_by_id(self, order_id: str) -> Order | None:
        return self._store.get(order_id)

    def list_all(self) -> list[Order]:
        return list(self._store.values())

    def save(self, order: Order) -> None:
        if order.id is None:
            order.id = self.next_id()
        self._store[order.id] = order

    def save_many(self, orders: list[Order]) -> None:
        for order in orders:
            self.save(order)

    def delete(self, order_id: str) -> bool:
        return self._store.pop(order_id, None) is not None


class FakeClientRepository(ClientRepository):

    def __init__(self, names: list[str] | None = None) -> None:
        self._store: dict[str, Client] = {}
        for name in names or []:
            self.save(Client.create(name))

    def get_by_name(self, name: str) -> Client | None:
        for client in self._store.values():
            if client.same_name(name):
                return client
        return None

    def list_all(self) -> list[Client]:
        return sorted(self._store.values(), key=lambda c: c.name.casefold())

    def save(self, client: Client) -> Client:
        if client.id is None:
            client = Client(id=str(len(self._store) + 1), name=client.name)
        self._store[client.id] = client
        return client
