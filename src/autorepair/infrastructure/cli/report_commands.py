"""CLI commands for management reports."""

from __future__ import annotations

import click

from autorepair.application.reports import (
    ExecutionTimeReportHandler,
    RevenueReportHandler,
)
from autorepair.domain.exceptions import DomainException
from autorepair.infrastructure.bootstrap import Container
from autorepair.infrastructure.cli.errors import to_click_error


@click.command("revenue")
@click.pass_obj
def report_revenue(container: Container) -> None:
    """Total revenue over all orders."""
    handler = RevenueReportHandler(
        order_repo=container.order_repo, currency=container.settings.currency
    )
    try:
        report = handler.handle()
    except DomainException as exc:
        raise to_click_error(exc)

    click.echo(f"Revenue ({report.period}): {report.total_revenue} over {report.order_count} orders")


@click.command("avg-execution-time")
@click.pass_obj
def report_avg_execution_time(container: Container) -> None:
    """Average time from approval to completion."""
    handler = ExecutionTimeReportHandler(order_repo=container.order_repo)
    try:
        report = handler.handle()
    except DomainException as exc:
        raise to_click_error(exc)

    click.echo(
        f"Average execution time: {report.avg_execution_minutes:.1f} min "
        f"({report.orders_counted} orders)"
    )
