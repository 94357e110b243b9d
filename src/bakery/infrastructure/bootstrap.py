"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from bakery.infrastructure.config import Settings
from bakery.infrastructure.logging_setup import setup_logger
from bakery.infrastructure.persistence.json_client_repository import (
    JsonClientRepository,
)
from bakery.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)


def settings() -> Settings:
    return Settings.from_env()


def configure_logging(config: Settings) -> None:
    setup_logger(config.log_dir, config.log_level)


def order_repository(config: Settings) -> JsonOrderRepository:
    return JsonOrderRepository(config.orders_file)


def client_repository(config: Settings) -> JsonClientRepository:
    return JsonClientRepository(config.clients_file)
