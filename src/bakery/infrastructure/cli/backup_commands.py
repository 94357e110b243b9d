"""CLI commands for JSON backups."""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path

import click

from bakery.application.backup import (
    BackupEntity,
    ExportHandler,
    ImportClientsHandler,
    ImportOrdersHandler,
)
from bakery.domain.exceptions import DomainException
from bakery.infrastructure.bootstrap import client_repository, order_repository
from bakery.infrastructure.cli.options import resolve_today, today_option
from bakery.infrastructure.config import Settings

_ENTITY_CHOICE = click.Choice([e.value for e in BackupEntity])


@click.command("export")
@click.option("--entity", type=_ENTITY_CHOICE, default=BackupEntity.ORDERS.value, show_default=True)
@click.option(
    "--output-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=Path("."),
    help="Directory for the backup file.",
)
@today_option
@click.pass_obj
def backup_export(config: Settings, entity: str, output_dir: Path, today: datetime | None) -> None:
    """Write backup_<entity>_<date>.json."""
    handler = ExportHandler(
        order_repo=order_repository(config),
        client_repo=client_repository(config),
    )

    try:
        export = handler.handle(BackupEntity(entity), resolve_today(today))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    output_dir.mkdir(parents=True, exist_ok=True)
    target = output_dir / export.filename
    target.write_text(export.content, encoding="utf-8")
    click.echo(f"Backup written to {target}")


@click.command("import")
@click.option("--entity", type=_ENTITY_CHOICE, default=BackupEntity.ORDERS.value, show_default=True)
@click.argument("source", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_obj
def backup_import(config: Settings, entity: str, source: Path) -> None:
    """Import records from a JSON backup file."""
    try:
        payload = json.loads(source.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise click.ClickException(f"Cannot read backup {source}: {exc}")

    try:
        if BackupEntity(entity) == BackupEntity.ORDERS:
            count = ImportOrdersHandler(order_repo=order_repository(config)).handle(payload)
        else:
            count = ImportClientsHandler(client_repo=client_repository(config)).handle(payload)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{count} {entity} imported.")
