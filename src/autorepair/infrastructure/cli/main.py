from pathlib import Path

import click
import pydantic

from autorepair.domain.exceptions import DomainException
from autorepair.infrastructure.bootstrap import build_container
from autorepair.infrastructure.cli.catalog_commands import (
    part_add,
    part_list,
    part_restock,
    service_add,
    service_delete,
    service_list,
    service_update,
)
from autorepair.infrastructure.cli.client_commands import (
    client_add,
    client_delete,
    client_list,
    client_update,
    vehicle_add,
    vehicle_delete,
    vehicle_list,
    vehicle_update,
)
from autorepair.infrastructure.cli.order_commands import (
    order_approve,
    order_create,
    order_deliver,
    order_diagnose,
    order_finish,
    order_list_active,
    order_reject,
    order_respond,
    order_send_budget,
    order_set_status,
    order_show,
    order_track,
)
from autorepair.infrastructure.cli.report_commands import (
    report_avg_execution_time,
    report_revenue,
)
from autorepair.infrastructure.cli.errors import to_click_error
from autorepair.infrastructure.config import Settings
from autorepair.infrastructure.logging_config import configure_logging


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory holding the JSON data files (overrides AUTOREPAIR_DATA_DIR).",
)
@click.pass_context
def cli(ctx: click.Context, data_dir: Path | None) -> None:
    """autorepair: auto repair shop service orders"""
    overrides = {"data_dir": data_dir} if data_dir is not None else {}
    try:
        settings = Settings(**overrides)
    except pydantic.ValidationError as exc:
        raise click.UsageError(f"Invalid configuration: {exc}")
    configure_logging(settings)
    try:
        ctx.obj = build_container(settings)
    except DomainException as exc:
        raise to_click_error(exc)


@cli.group()
def client() -> None:
    """Manage clients."""


@cli.group()
def vehicle() -> None:
    """Manage vehicles."""


@cli.group()
def part() -> None:
    """Manage the parts inventory."""


@cli.group()
def service() -> None:
    """Manage the labor services catalog."""


@cli.group()
def order() -> None:
    """Manage service orders."""


@cli.group()
def report() -> None:
    """Management reports."""


# Register subcommands
client.add_command(client_add)
client.add_command(client_delete)
client.add_command(client_list)
client.add_command(client_update)
vehicle.add_command(vehicle_add)
vehicle.add_command(vehicle_delete)
vehicle.add_command(vehicle_list)
vehicle.add_command(vehicle_update)
part.add_command(part_add)
part.add_command(part_list)
part.add_command(part_restock)
service.add_command(service_add)
service.add_command(service_delete)
service.add_command(service_list)
service.add_command(service_update)
order.add_command(order_approve)
order.add_command(order_create)
order.add_command(order_deliver)
order.add_command(order_diagnose)
order.add_command(order_finish)
order.add_command(order_list_active)
order.add_command(order_reject)
order.add_command(order_respond)
order.add_command(order_send_budget)
order.add_command(order_set_status)
order.add_command(order_show)
order.add_command(order_track)
report.add_command(report_avg_execution_time)
report.add_command(report_revenue)
