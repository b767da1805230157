"""CLI commands for the part inventory and the labor services catalog."""

from __future__ import annotations

import click

from autorepair.application.manage_labor import (
    AddLaborServiceHandler,
    DeleteLaborServiceHandler,
    UpdateLaborServiceHandler,
)
from autorepair.application.manage_parts import AddPartHandler, RestockPartHandler
from autorepair.domain.exceptions import DomainException
from autorepair.infrastructure.bootstrap import Container
from autorepair.infrastructure.cli.errors import to_click_error


@click.command("add")
@click.option("--name", required=True, help="Part name.")
@click.option("--price", required=True, help="Unit price (e.g. 45.90).")
@click.option("--quantity", default=0, show_default=True, type=int, help="Opening stock.")
@click.option("--description", default="", help="Free-text description.")
@click.pass_obj
def part_add(container: Container, name: str, price: str, quantity: int, description: str) -> None:
    """Add a new part to the inventory."""
    handler = AddPartHandler(part_repo=container.part_repo, currency=container.settings.currency)

    try:
        part = handler.handle(name=name, price=price, quantity=quantity, description=description)
    except DomainException as exc:
        raise to_click_error(exc)

    click.echo(f"Part {part.id} '{part.name}' added at {part.unit_price} ({part.quantity} in stock)")


@click.command("restock")
@click.option("--id", "part_id", required=True, type=click.UUID, help="Part ID.")
@click.option("--quantity", required=True, type=int, help="Units received.")
@click.pass_obj
def part_restock(container: Container, part_id, quantity: int) -> None:
    """Add stock to an existing part."""
    handler = RestockPartHandler(part_repo=container.part_repo)

    try:
        part = handler.handle(part_id=part_id, quantity=quantity)
    except DomainException as exc:
        raise to_click_error(exc)

    click.echo(f"Part '{part.name}' now has {part.quantity} in stock")


@click.command("list")
@click.pass_obj
def part_list(container: Container) -> None:
    """List all parts with stock on hand."""
    parts = container.part_repo.list_all()

    if not parts:
        click.echo("No parts found.")
        return

    click.echo(f"{'ID':<36}  {'Name':<24} {'Stock':>6} {'Price':>12}")
    click.echo("-" * 82)
    for p in parts:
        click.echo(f"{str(p.id):<36}  {p.name:<24} {p.quantity:>6} {str(p.unit_price):>12}")


@click.command("add")
@click.option("--name", required=True, help="Service name.")
@click.option("--price", required=True, help="Price (e.g. 120.00).")
@click.option("--description", default="", help="Free-text description.")
@click.pass_obj
def service_add(container: Container, name: str, price: str, description: str) -> None:
    """Add a labor service to the catalog."""
    handler = AddLaborServiceHandler(
        labor_repo=container.labor_repo, currency=container.settings.currency
    )

    try:
        service = handler.handle(name=name, price=price, description=description)
    except DomainException as exc:
        raise to_click_error(exc)

    click.echo(f"Service {service.id} '{service.name}' added at {service.price}")


@click.command("list")
@click.pass_obj
def service_list(container: Container) -> None:
    """List the labor services catalog."""
    services = container.labor_repo.list_all()

    if not services:
        click.echo("No services found.")
        return

    click.echo(f"{'ID':<36}  {'Name':<30} {'Price':>12}")
    click.echo("-" * 81)
    for s in services:
        click.echo(f"{str(s.id):<36}  {s.name:<30} {str(s.price):>12}")


@click.command("update")
@click.option("--id", "service_id", required=True, type=click.UUID, help="Service ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--description", default=None, help="New description.")
@click.option("--price", default=None, help="New price (e.g. 135.00).")
@click.pass_obj
def service_update(container: Container, service_id, name, description, price) -> None:
    """Change a catalog service; options left out keep their value."""
    handler = UpdateLaborServiceHandler(
        labor_repo=container.labor_repo, currency=container.settings.currency
    )

    try:
        service = handler.handle(service_id, name=name, description=description, price=price)
    except DomainException as exc:
        raise to_click_error(exc)

    click.echo(f"Service {service.id} '{service.name}' updated ({service.price})")


@click.command("delete")
@click.option("--id", "service_id", required=True, type=click.UUID, help="Service ID.")
@click.pass_obj
def service_delete(container: Container, service_id) -> None:
    """Remove a service from the catalog; existing orders keep their lines."""
    try:
        DeleteLaborServiceHandler(labor_repo=container.labor_repo).handle(service_id)
    except DomainException as exc:
        raise to_click_error(exc)

    click.echo(f"Service {service_id} deleted")
