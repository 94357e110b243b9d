"""Bread variants sold by the bakery.

The variant set has grown over time, so it is modeled as a catalog
rather than fixed fields on the order.  Reports and summaries iterate
the catalog; adding a bread means adding an entry here.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class BreadVariant:
    key: str  # internal key, also used in price configuration
    field: str  # field name in the stored / exported JSON
    label: str


class VariantCatalog:
    """Ordered, immutable collection of bread variants."""

    def __init__(self, variants: list[BreadVariant]) -> None:
        self._variants = tuple(variants)
        self._by_key = {v.key: v for v in self._variants}

    def __iter__(self) -> Iterator[BreadVariant]:
        return iter(self._variants)

    def __len__(self) -> int:
        return len(self._variants)

    def __contains__(self, key: object) -> bool:
        return key in self._by_key

    @property
    def keys(self) -> list[str]:
        return [v.key for v in self._variants]

    def get(self, key: str) -> BreadVariant | None:
        return self._by_key.get(key)

    def zero_totals(self) -> dict[str, int]:
        """A fresh ``{variant key: 0}`` mapping in catalog order."""
        return {v.key: 0 for v in self._variants}


DEFAULT_VARIANTS = VariantCatalog([
    BreadVariant("hamburger", "hamburgerBuns", "Pães de Hambúrguer"),
    BreadVariant("mediumHamburger", "mediumHamburgerBuns", "Pães de Hambúrguer Médio"),
    BreadVariant("bisnaga", "bisnagaBuns", "Pães de Bisnaga"),
    BreadVariant("baguette", "baguettes", "Baguetes"),
])
