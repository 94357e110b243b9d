"""CLI commands for orders."""

from __future__ import annotations

from datetime import date

import click

from bakery.application.create_order import CreateOrderHandler
from bakery.application.delete_order import DeleteOrderHandler
from bakery.application.dto import OrderDTO
from bakery.application.list_orders import ListOrdersHandler
from bakery.application.update_order import UpdateOrderHandler
from bakery.domain.exceptions import DomainException
from bakery.domain.model.variant import DEFAULT_VARIANTS
from bakery.domain.service.order_listing import (
    OrderListState,
    SortDirection,
    SortKey,
    SortSpec,
)
from bakery.infrastructure.bootstrap import order_repository
from bakery.infrastructure.cli.options import parse_quantities
from bakery.infrastructure.config import Settings

_QTY_HELP = "Quantity as 'variant=N' (repeatable). Variants: " + ", ".join(DEFAULT_VARIANTS.keys)


def _display_order(dto: OrderDTO) -> None:
    click.echo(f"Order {dto.id}")
    click.echo(f"Client: {dto.client_name}")
    click.echo(f"Date:   {dto.request_date}")
    click.echo()
    for variant in DEFAULT_VARIANTS:
        click.echo(f"  {variant.label:<28} {dto.quantities.get(variant.key, 0):>6}")
    click.echo(f"  {'-'*35}")
    click.echo(f"  {'Total':<28} {dto.total_breads:>6}")


@click.command("create")
@click.option("--client", "client_name", required=True, help="Client name.")
@click.option("--date", "request_date", default=None, help="Request date (YYYY-MM-DD). Defaults to today.")
@click.option("--qty", "quantities", multiple=True, help=_QTY_HELP)
@click.pass_obj
def order_create(config: Settings, client_name: str, request_date: str | None, quantities: tuple[str, ...]) -> None:
    """Register a new order."""
    handler = CreateOrderHandler(order_repo=order_repository(config))

    try:
        dto = handler.handle(
            client_name=client_name,
            request_date=request_date or date.today().isoformat(),
            quantities=parse_quantities(quantities),
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Order registered.")
    _display_order(dto)


@click.command("update")
@click.option("--id", "order_id", required=True, help="Order ID.")
@click.option("--client", "client_name", default=None, help="New client name.")
@click.option("--date", "request_date", default=None, help="New request date (YYYY-MM-DD).")
@click.option("--qty", "quantities", multiple=True, help=_QTY_HELP)
@click.pass_obj
def order_update(
    config: Settings,
    order_id: str,
    client_name: str | None,
    request_date: str | None,
    quantities: tuple[str, ...],
) -> None:
    """Edit an existing order. Only the given fields change."""
    handler = UpdateOrderHandler(order_repo=order_repository(config))

    try:
        dto = handler.handle(
            order_id,
            client_name=client_name,
            request_date=request_date,
            quantities=parse_quantities(quantities) if quantities else None,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Order updated.")
    _display_order(dto)


@click.command("delete")
@click.option("--id", "order_id", required=True, help="Order ID.")
@click.pass_obj
def order_delete(config: Settings, order_id: str) -> None:
    """Delete an order."""
    handler = DeleteOrderHandler(order_repo=order_repository(config))

    try:
        handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {order_id} deleted.")


@click.command("list")
@click.option("--search", default="", help="Filter by client name (case-insensitive).")
@click.option(
    "--sort",
    "sort_key",
    type=click.Choice([k.value for k in SortKey]),
    default=SortKey.REQUEST_DATE.value,
    show_default=True,
)
@click.option(
    "--direction",
    type=click.Choice([d.value for d in SortDirection]),
    default=SortDirection.DESCENDING.value,
    show_default=True,
)
@click.option("--page", type=int, default=1, show_default=True)
@click.pass_obj
def order_list(config: Settings, search: str, sort_key: str, direction: str, page: int) -> None:
    """List orders, most recent first."""
    handler = ListOrdersHandler(order_repo=order_repository(config), page_size=config.page_size)
    state = (
        OrderListState()
        .with_search(search)
        .with_sort_spec(SortSpec(SortKey(sort_key), SortDirection(direction)))
        .with_page(page)
    )

    try:
        result = handler.handle(state)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if result.empty_message:
        click.echo(result.empty_message)
        return

    headers = "".join(f" {v.key[:10]:>10}" for v in DEFAULT_VARIANTS)
    click.echo(f"{'Date':<11} {'Client':<24}{headers}  ID")
    click.echo("-" * (37 + 11 * len(DEFAULT_VARIANTS) + 34))
    for dto in result.items:
        cells = "".join(f" {dto.quantities.get(v.key, 0):>10}" for v in DEFAULT_VARIANTS)
        click.echo(f"{dto.request_date:<11} {dto.client_name[:24]:<24}{cells}  {dto.id}")
    click.echo()
    click.echo(f"Page {result.page} of {result.total_pages} ({result.total_count} orders)")
