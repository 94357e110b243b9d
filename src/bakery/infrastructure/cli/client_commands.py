"""CLI commands for clients."""

from __future__ import annotations

import click

from bakery.application.add_client import AddClientHandler, ListClientsHandler
from bakery.domain.exceptions import DomainException
from bakery.infrastructure.bootstrap import client_repository
from bakery.infrastructure.config import Settings


@click.command("add")
@click.option("--name", required=True, help="Client name.")
@click.pass_obj
def client_add(config: Settings, name: str) -> None:
    """Add a client."""
    handler = AddClientHandler(client_repo=client_repository(config))

    try:
        client = handler.handle(name)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Client '{client.name}' added.")


@click.command("list")
@click.pass_obj
def client_list(config: Settings) -> None:
    """List all clients."""
    handler = ListClientsHandler(client_repo=client_repository(config))

    try:
        clients = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not clients:
        click.echo("No clients found.")
        return

    for c in clients:
        click.echo(c.name)
