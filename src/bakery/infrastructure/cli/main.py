import click

from bakery.infrastructure import bootstrap
from bakery.infrastructure.cli.backup_commands import backup_export, backup_import
from bakery.infrastructure.cli.client_commands import client_add, client_list
from bakery.infrastructure.cli.order_commands import (
    order_create,
    order_delete,
    order_list,
    order_update,
)
from bakery.infrastructure.cli.report_commands import (
    finance_month,
    finance_today,
    report_daily,
    report_monthly,
    report_summary,
    report_weekly,
)


@click.group()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Bakery — order registry, sales charts and revenue"""
    config = bootstrap.settings()
    bootstrap.configure_logging(config)
    ctx.obj = config


@cli.group()
def order() -> None:
    """Manage orders."""


@cli.group()
def client() -> None:
    """Manage clients."""


@cli.group()
def report() -> None:
    """Sales per day, week and month."""


@cli.group()
def finance() -> None:
    """Revenue for today and for the current month."""


@cli.group()
def backup() -> None:
    """Export and import JSON backups."""


# Register subcommands
order.add_command(order_create)
order.add_command(order_update)
order.add_command(order_delete)
order.add_command(order_list)
client.add_command(client_add)
client.add_command(client_list)
report.add_command(report_daily)
report.add_command(report_weekly)
report.add_command(report_monthly)
report.add_command(report_summary)
finance.add_command(finance_today)
finance.add_command(finance_month)
backup.add_command(backup_export)
backup.add_command(backup_import)
