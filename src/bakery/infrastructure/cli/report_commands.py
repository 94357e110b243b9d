"""CLI commands for sales reports and revenue."""

from __future__ import annotations

import hmac
from datetime import datetime

import click

from bakery.application.show_reports import (
    FinancialPeriod,
    FinancialReportHandler,
    ReportPeriod,
    SalesReportHandler,
)
from bakery.domain.exceptions import DomainException
from bakery.domain.model.value_objects import Money
from bakery.domain.model.variant import DEFAULT_VARIANTS
from bakery.domain.service.aggregation import Bucket
from bakery.domain.service.financial import FinancialSummary
from bakery.infrastructure.bootstrap import order_repository
from bakery.infrastructure.cli.options import resolve_today, today_option
from bakery.infrastructure.config import Settings


def _display_buckets(title: str, buckets: list[Bucket]) -> None:
    click.echo(title)
    headers = "".join(f" {v.key[:10]:>10}" for v in DEFAULT_VARIANTS)
    click.echo(f"  {'':<18}{headers} {'Total':>8}")
    for bucket in buckets:
        cells = "".join(f" {bucket.totals[v.key]:>10}" for v in DEFAULT_VARIANTS)
        click.echo(f"  {bucket.label:<18}{cells} {bucket.total:>8}")


def _run_report(config: Settings, period: ReportPeriod, today: datetime | None, title: str) -> None:
    handler = SalesReportHandler(order_repo=order_repository(config))

    try:
        buckets = handler.handle(period, resolve_today(today))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_buckets(title, buckets)


@click.command("daily")
@today_option
@click.pass_obj
def report_daily(config: Settings, today: datetime | None) -> None:
    """Breads ordered per day over the last 7 days."""
    _run_report(config, ReportPeriod.DAILY, today, "Breads ordered in the last 7 days")


@click.command("weekly")
@today_option
@click.pass_obj
def report_weekly(config: Settings, today: datetime | None) -> None:
    """Breads ordered per 7-day window over the last 4 weeks."""
    _run_report(config, ReportPeriod.WEEKLY, today, "Breads ordered in the last 4 weeks")


@click.command("monthly")
@today_option
@click.pass_obj
def report_monthly(config: Settings, today: datetime | None) -> None:
    """Breads ordered per month over the last 12 months."""
    _run_report(config, ReportPeriod.MONTHLY, today, "Breads ordered in the last 12 months")


@click.command("summary")
@today_option
@click.pass_obj
def report_summary(config: Settings, today: datetime | None) -> None:
    """Total orders and orders for today."""
    handler = SalesReportHandler(order_repo=order_repository(config))

    try:
        counters = handler.counters(resolve_today(today))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Total orders:  {counters.total_orders}")
    click.echo(f"Orders today:  {counters.orders_today}")


# --- Revenue ----------------------------------------------------------------


def _check_passphrase(config: Settings) -> None:
    """Revenue is behind the shared passphrase when one is configured."""
    if not config.finance_passphrase:
        return
    entered = click.prompt("Passphrase", hide_input=True, default="", show_default=False)
    if not hmac.compare_digest(entered.encode(), config.finance_passphrase.encode()):
        raise click.ClickException("Wrong passphrase.")


def _display_summary(title: str, summary: FinancialSummary) -> None:
    click.echo(title)
    click.echo(f"  {'Bread':<28} {'Qty':>6} {'Unit':>12} {'Total':>14}")
    click.echo(f"  {'-'*63}")
    for line in summary.lines:
        variant = DEFAULT_VARIANTS.get(line.variant_key)
        label = variant.label if variant else line.variant_key
        click.echo(
            f"  {label:<28} {line.quantity:>6} "
            f"{str(Money(line.unit_price)):>12} {str(Money(line.total)):>14}"
        )
    click.echo(f"  {'-'*63}")
    click.echo(f"  {'Total':<48} {str(Money(summary.grand_total)):>14}")


def _run_financial(config: Settings, period: FinancialPeriod, today: datetime | None, title: str) -> None:
    _check_passphrase(config)
    handler = FinancialReportHandler(order_repo=order_repository(config), prices=config.prices)

    try:
        summary = handler.handle(period, resolve_today(today))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_summary(title, summary)


@click.command("today")
@today_option
@click.pass_obj
def finance_today(config: Settings, today: datetime | None) -> None:
    """Revenue from orders requested today."""
    _run_financial(config, FinancialPeriod.TODAY, today, "Revenue today")


@click.command("month")
@today_option
@click.pass_obj
def finance_month(config: Settings, today: datetime | None) -> None:
    """Revenue from orders requested in the current month."""
    _run_financial(config, FinancialPeriod.MONTH, today, "Revenue this month")
