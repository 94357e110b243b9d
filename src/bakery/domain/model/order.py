"""Order aggregate.

An order records how many breads of each variant a client asked for on
a given day.  ``Order.create()`` and ``Order.apply_changes()`` enforce
the rules for commands coming from staff; ``Order.from_record()`` is the
lenient path used for stored, imported, or otherwise untrusted data and
never raises.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date

from bakery.domain.exceptions import ValidationError
from bakery.domain.model.value_objects import coerce_quantity, parse_request_date
from bakery.domain.model.variant import DEFAULT_VARIANTS, VariantCatalog


@dataclass
class Order:
    """Aggregate root for bakery orders.

    ``quantities`` maps variant key -> non-negative int.  Missing keys
    read as zero.
    """

    id: str | None
    client_name: str
    request_date: str  # YYYY-MM-DD
    quantities: dict[str, int] = field(default_factory=dict)

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        client_name: str,
        request_date: str,
        quantities: Mapping[str, object] | None = None,
        catalog: VariantCatalog = DEFAULT_VARIANTS,
    ) -> Order:
        """Create a new order, enforcing all invariants."""
        order = Order(
            id=None,
            client_name=_require_client_name(client_name),
            request_date=_require_date(request_date),
            quantities={
                **catalog.zero_totals(),
                **_clean_quantities(quantities or {}, catalog),
            },
        )
        return order

    # --- Mutations ------------------------------------------------------------

    def apply_changes(
        self,
        client_name: str | None = None,
        request_date: str | None = None,
        quantities: Mapping[str, object] | None = None,
        catalog: VariantCatalog = DEFAULT_VARIANTS,
    ) -> None:
        """Replace the given fields; fields left as None are kept."""
        # Validate everything before touching state.
        new_name = _require_client_name(client_name) if client_name is not None else None
        new_date = _require_date(request_date) if request_date is not None else None
        new_quantities = (
            _clean_quantities(quantities, catalog) if quantities is not None else None
        )

        if new_name is not None:
            self.client_name = new_name
        if new_date is not None:
            self.request_date = new_date
        if new_quantities is not None:
            merged = dict(self.quantities)
            merged.update(new_quantities)
            self.quantities = merged

    # --- Computed properties --------------------------------------------------

    def quantity(self, variant_key: str) -> int:
        return self.quantities.get(variant_key, 0)

    @property
    def parsed_date(self) -> date | None:
        return parse_request_date(self.request_date)

    @property
    def total_breads(self) -> int:
        return sum(self.quantities.values())

    # --- Record mapping -------------------------------------------------------

    @staticmethod
    def from_record(
        record: object,
        catalog: VariantCatalog = DEFAULT_VARIANTS,
    ) -> Order | None:
        """Build an order from a JSON-like record without validating it.

        Returns None when *record* is not a mapping at all.  Wrongly typed
        fields degrade to safe values: non-string names and dates become
        empty strings and quantities are coerced.
        """
        if not isinstance(record, Mapping):
            return None
        raw_id = record.get("id")
        client_name = record.get("clientName")
        request_date = record.get("requestDate")
        return Order(
            id=raw_id if isinstance(raw_id, str) else None,
            client_name=client_name if isinstance(client_name, str) else "",
            request_date=request_date if isinstance(request_date, str) else "",
            quantities={v.key: coerce_quantity(record.get(v.field)) for v in catalog},
        )

    def to_record(self, catalog: VariantCatalog = DEFAULT_VARIANTS) -> dict:
        record: dict = {
            "id": self.id,
            "clientName": self.client_name,
            "requestDate": self.request_date,
        }
        for variant in catalog:
            record[variant.field] = self.quantity(variant.key)
        return record


# ---------------------------------------------------------------------------
# Validation helpers
# ---------------------------------------------------------------------------


def _require_client_name(client_name: str) -> str:
    if not isinstance(client_name, str) or not client_name.strip():
        raise ValidationError("Client name is required")
    return client_name.strip()


def _require_date(request_date: str) -> str:
    if parse_request_date(request_date) is None:
        raise ValidationError(
            f"Invalid request date {request_date!r}, expected YYYY-MM-DD"
        )
    return request_date


def _clean_quantities(
    quantities: Mapping[str, object],
    catalog: VariantCatalog,
) -> dict[str, int]:
    unknown = [key for key in quantities if key not in catalog]
    if unknown:
        raise ValidationError(
            f"Unknown bread variant(s): {', '.join(sorted(unknown))}"
        )
    return {key: coerce_quantity(value) for key, value in quantities.items()}


def is_importable_order(record: object) -> bool:
    """A record needs at least a string client name and request date."""
    return (
        isinstance(record, Mapping)
        and isinstance(record.get("clientName"), str)
        and isinstance(record.get("requestDate"), str)
    )
