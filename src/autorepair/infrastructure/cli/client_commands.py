"""CLI commands for clients and their vehicles."""

from __future__ import annotations

import click

from autorepair.application.manage_clients import (
    DeleteClientHandler,
    DeleteVehicleHandler,
    RegisterClientHandler,
    RegisterVehicleHandler,
    UpdateClientHandler,
    UpdateVehicleHandler,
)
from autorepair.domain.exceptions import DomainException
from autorepair.infrastructure.bootstrap import Container
from autorepair.infrastructure.cli.errors import to_click_error


@click.command("add")
@click.option("--name", required=True, help="Client name.")
@click.option("--document", required=True, help="CPF or CNPJ.")
@click.option("--email", default="", help="Email for order notifications.")
@click.option("--phone", default="", help="Phone number.")
@click.pass_obj
def client_add(container: Container, name: str, document: str, email: str, phone: str) -> None:
    """Register a new client."""
    handler = RegisterClientHandler(client_repo=container.client_repo)

    try:
        client = handler.handle(name=name, document=document, email=email, phone=phone)
    except DomainException as exc:
        raise to_click_error(exc)

    click.echo(f"Client {client.id} '{client.name}' registered")


@click.command("list")
@click.pass_obj
def client_list(container: Container) -> None:
    """List all clients."""
    clients = container.client_repo.list_all()

    if not clients:
        click.echo("No clients found.")
        return

    click.echo(f"{'ID':<36}  {'Name':<24} {'Document':<14} {'Email'}")
    click.echo("-" * 90)
    for c in clients:
        click.echo(f"{str(c.id):<36}  {c.name:<24} {c.document.value:<14} {c.email}")


@click.command("add")
@click.option("--client", "client_id", required=True, type=click.UUID, help="Owner client ID.")
@click.option("--plate", required=True, help="Plate, AAA1234 or AAA1A23.")
@click.option("--brand", required=True, help="Manufacturer.")
@click.option("--model", required=True, help="Model name.")
@click.option("--year", required=True, type=int, help="Model year.")
@click.pass_obj
def vehicle_add(
    container: Container,
    client_id,
    plate: str,
    brand: str,
    model: str,
    year: int,
) -> None:
    """Register a vehicle for a client."""
    handler = RegisterVehicleHandler(
        vehicle_repo=container.vehicle_repo,
        client_repo=container.client_repo,
    )

    try:
        vehicle = handler.handle(client_id, plate, brand, model, year)
    except DomainException as exc:
        raise to_click_error(exc)

    click.echo(f"Vehicle {vehicle.id} ({vehicle.plate}) registered")


@click.command("list")
@click.option("--client", "client_id", required=True, type=click.UUID, help="Owner client ID.")
@click.pass_obj
def vehicle_list(container: Container, client_id) -> None:
    """List a client's vehicles."""
    vehicles = container.vehicle_repo.list_by_client(client_id)

    if not vehicles:
        click.echo("No vehicles found.")
        return

    for v in vehicles:
        click.echo(f"{v.id}  {v.plate.value:<8} {v.brand} {v.model} ({v.year})")


@click.command("update")
@click.option("--id", "client_id", required=True, type=click.UUID, help="Client ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--document", default=None, help="New CPF or CNPJ.")
@click.option("--email", default=None, help="New email.")
@click.option("--phone", default=None, help="New phone number.")
@click.pass_obj
def client_update(container: Container, client_id, name, document, email, phone) -> None:
    """Change a client's details; options left out keep their value."""
    handler = UpdateClientHandler(client_repo=container.client_repo)

    try:
        client = handler.handle(
            client_id, name=name, document=document, email=email, phone=phone
        )
    except DomainException as exc:
        raise to_click_error(exc)

    click.echo(f"Client {client.id} '{client.name}' updated")


@click.command("delete")
@click.option("--id", "client_id", required=True, type=click.UUID, help="Client ID.")
@click.pass_obj
def client_delete(container: Container, client_id) -> None:
    """Remove a client that has no vehicles left."""
    handler = DeleteClientHandler(
        client_repo=container.client_repo,
        vehicle_repo=container.vehicle_repo,
    )

    try:
        handler.handle(client_id)
    except DomainException as exc:
        raise to_click_error(exc)

    click.echo(f"Client {client_id} deleted")


@click.command("update")
@click.option("--id", "vehicle_id", required=True, type=click.UUID, help="Vehicle ID.")
@click.option("--client", "client_id", default=None, type=click.UUID, help="New owner client ID.")
@click.option("--plate", default=None, help="New plate.")
@click.option("--brand", default=None, help="New manufacturer.")
@click.option("--model", default=None, help="New model name.")
@click.option("--year", default=None, type=int, help="New model year.")
@click.pass_obj
def vehicle_update(
    container: Container,
    vehicle_id,
    client_id,
    plate: str | None,
    brand: str | None,
    model: str | None,
    year: int | None,
) -> None:
    """Change a vehicle's details; options left out keep their value."""
    handler = UpdateVehicleHandler(
        vehicle_repo=container.vehicle_repo,
        client_repo=container.client_repo,
    )

    try:
        vehicle = handler.handle(
            vehicle_id,
            client_id=client_id,
            plate=plate,
            brand=brand,
            model=model,
            year=year,
        )
    except DomainException as exc:
        raise to_click_error(exc)

    click.echo(f"Vehicle {vehicle.id} ({vehicle.plate}) updated")


@click.command("delete")
@click.option("--id", "vehicle_id", required=True, type=click.UUID, help="Vehicle ID.")
@click.pass_obj
def vehicle_delete(container: Container, vehicle_id) -> None:
    """Remove a vehicle."""
    try:
        DeleteVehicleHandler(vehicle_repo=container.vehicle_repo).handle(vehicle_id)
    except DomainException as exc:
        raise to_click_error(exc)

    click.echo(f"Vehicle {vehicle_id} deleted")
