"""Option helpers shared by the CLI command modules."""

from __future__ import annotations

from datetime import date, datetime

import click

from bakery.domain.model.variant import DEFAULT_VARIANTS


def today_option(func):
    """``--today YYYY-MM-DD`` reference date, defaulting to the local date."""
    return click.option(
        "--today",
        "today",
        type=click.DateTime(formats=["%Y-%m-%d"]),
        default=None,
        help="Reference date (YYYY-MM-DD). Defaults to today.",
    )(func)


def resolve_today(value: datetime | None) -> date:
    return value.date() if value is not None else date.today()


def parse_quantities(pairs: tuple[str, ...]) -> dict[str, str]:
    """Parse ('hamburger=10', 'baguette=2') into {variant: raw quantity}."""
    result: dict[str, str] = {}
    for pair in pairs:
        if "=" not in pair:
            raise click.BadParameter(
                f"Invalid quantity '{pair}'. Expected 'variant=N'.", param_hint="--qty"
            )
        key, raw = pair.split("=", 1)
        key = key.strip()
        if key not in DEFAULT_VARIANTS:
            raise click.BadParameter(
                f"Unknown bread variant '{key}'. Choose from: "
                f"{', '.join(DEFAULT_VARIANTS.keys)}.",
                param_hint="--qty",
            )
        result[key] = raw.strip()
    return result
