"""Client entity.

Clients live independently of orders: the order form only reads the
client list to offer names.  Once added a client never changes.
"""

from __future__ import annotations

from dataclasses import dataclass

from bakery.domain.exceptions import ValidationError


@dataclass(frozen=True)
class Client:
    id: str | None
    name: str

    @staticmethod
    def create(name: str) -> Client:
        if not isinstance(name, str) or not name.strip():
            raise ValidationError("Client name is required")
        return Client(id=None, name=name.strip())

    def same_name(self, other_name: str) -> bool:
        """Names are unique case-insensitively."""
        return self.name.casefold() == other_name.strip().casefold()
