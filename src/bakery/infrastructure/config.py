"""Configuration loaded from the environment (and an optional ``.env`` file)."""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from pathlib import Path

from dotenv import load_dotenv

from bakery.domain.model.variant import DEFAULT_VARIANTS, VariantCatalog
from bakery.domain.service.financial import DEFAULT_PRICES, PriceTable
from bakery.domain.service.order_listing import DEFAULT_PAGE_SIZE

logger = logging.getLogger(__name__)

# When installed in editable mode the project root is the repo root.
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def price_env_var(variant_key: str) -> str:
    """``mediumHamburger`` -> ``BAKERY_PRICE_MEDIUM_HAMBURGER``"""
    return "BAKERY_PRICE_" + re.sub(r"(?<!^)(?=[A-Z])", "_", variant_key).upper()


@dataclass(frozen=True)
class Settings:
    data_dir: Path = DEFAULT_DATA_DIR
    page_size: int = DEFAULT_PAGE_SIZE
    log_level: str = "INFO"
    finance_passphrase: str | None = None
    prices: PriceTable = field(default_factory=PriceTable)

    @property
    def orders_file(self) -> Path:
        return self.data_dir / "orders.json"

    @property
    def clients_file(self) -> Path:
        return self.data_dir / "clients.json"

    @property
    def log_dir(self) -> Path:
        return self.data_dir / "logs"

    @classmethod
    def from_env(cls, catalog: VariantCatalog = DEFAULT_VARIANTS) -> Settings:
        load_dotenv()
        data_dir = os.getenv("BAKERY_DATA_DIR")
        return cls(
            data_dir=Path(data_dir) if data_dir else DEFAULT_DATA_DIR,
            page_size=_int_from_env("BAKERY_PAGE_SIZE", DEFAULT_PAGE_SIZE),
            log_level=os.getenv("BAKERY_LOG_LEVEL", "INFO").upper(),
            finance_passphrase=os.getenv("BAKERY_FINANCE_PASSPHRASE") or None,
            prices=_prices_from_env(catalog),
        )


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not an integer, using %d", name, raw, default)
        return default
    if value < 1:
        logger.warning("Ignoring %s=%r: must be at least 1, using %d", name, raw, default)
        return default
    return value


def _prices_from_env(catalog: VariantCatalog) -> PriceTable:
    prices = dict(DEFAULT_PRICES)
    for variant in catalog:
        name = price_env_var(variant.key)
        raw = os.getenv(name)
        if raw is None or not raw.strip():
            continue
        try:
            price = Decimal(raw.strip().replace(",", "."))
        except InvalidOperation:
            logger.warning("Ignoring %s=%r: not a number", name, raw)
            continue
        if not price.is_finite() or price < 0:
            logger.warning("Ignoring %s=%r: must be a non-negative amount", name, raw)
            continue
        prices[variant.key] = price
    return PriceTable(prices)
