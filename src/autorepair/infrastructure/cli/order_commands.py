"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from autorepair.application.create_order import CreateOrderHandler
from autorepair.application.dto import OrderDTO, OrderItemSpec
from autorepair.application.order_lifecycle import TransitionResult
from autorepair.application.show_order import ListActiveOrdersHandler, ShowOrderHandler
from autorepair.domain.exceptions import DomainException
from autorepair.infrastructure.bootstrap import Container
from autorepair.infrastructure.cli.errors import to_click_error


def _parse_items(raw: str) -> list[OrderItemSpec]:
    """Parse 'service:<id>:1,part:<id>:2' into OrderItemSpec list."""
    specs: list[OrderItemSpec] = []
    for entry in raw.split(","):
        entry = entry.strip()
        if not entry:
            continue
        parts = entry.split(":")
        if len(parts) == 2:
            item_type, ref_id = parts
            qty_str = "1"
        elif len(parts) == 3:
            item_type, ref_id, qty_str = parts
        else:
            raise click.BadParameter(
                f"Invalid item format '{entry}'. Expected 'type:id[:qty]'."
            )
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(f"Invalid quantity '{qty_str}' for '{ref_id}'.")
        specs.append(OrderItemSpec(item_type=item_type.strip(), ref_id=ref_id.strip(), quantity=qty))
    return specs


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order {dto.id}  (status={dto.status})")
    click.echo(f"Client:   {dto.client_id}")
    click.echo(f"Vehicle:  {dto.vehicle_id}")
    click.echo(f"Created:  {dto.created_at}")
    if dto.started_at:
        click.echo(f"Started:  {dto.started_at}")
    if dto.finished_at:
        click.echo(f"Finished: {dto.finished_at}")
    click.echo()
    click.echo(f"  {'Type':<8} {'Item':<24} {'Qty':>5} {'Price':>12} {'Total':>12}")
    click.echo(f"  {'-'*65}")
    for item in dto.items:
        click.echo(
            f"  {item.item_type:<8} {item.name:<24} {item.quantity:>5} "
            f"{item.unit_price:>12} {item.total:>12}"
        )
    click.echo(f"  {'-'*65}")
    click.echo(f"  {'Services':<40} {dto.total_service:>25}")
    click.echo(f"  {'Parts':<40} {dto.total_parts:>25}")
    click.echo(f"  {'Order Total':<40} {dto.total:>25}")


def _report_transition(result: TransitionResult) -> None:
    click.echo(
        f"Order {result.order.id}: {result.previous_status.value} -> {result.status.value}"
    )
    if not result.notification.delivered:
        click.echo(f"Warning: client not notified ({result.notification.error})", err=True)


@click.command("create")
@click.option("--client", "client_id", required=True, help="Client ID.")
@click.option("--vehicle", "vehicle_id", required=True, help="Vehicle ID.")
@click.option("--items", default="", help="Items as 'service:<id>:qty,part:<id>:qty'.")
@click.pass_obj
def order_create(container: Container, client_id: str, vehicle_id: str, items: str) -> None:
    """Open a new service order."""
    specs = _parse_items(items)

    handler = CreateOrderHandler(
        order_repo=container.order_repo,
        client_repo=container.client_repo,
        vehicle_repo=container.vehicle_repo,
        labor_repo=container.labor_repo,
        part_repo=container.part_repo,
        currency=container.settings.currency,
    )

    try:
        dto = handler.handle(client_id=client_id, vehicle_id=vehicle_id, item_specs=specs)
    except DomainException as exc:
        raise to_click_error(exc)

    click.echo("Order created.")
    _display_order(dto)


@click.command("show")
@click.option("--id", "order_id", required=True, type=click.UUID, help="Order ID to display.")
@click.pass_obj
def order_show(container: Container, order_id) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(order_repo=container.order_repo)

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise to_click_error(exc)

    _display_order(dto)


@click.command("track")
@click.option("--id", "order_id", required=True, type=click.UUID, help="Order ID to track.")
@click.pass_obj
def order_track(container: Container, order_id) -> None:
    """Show the client-facing status of an order."""
    handler = ShowOrderHandler(order_repo=container.order_repo)

    try:
        dto = handler.track(order_id)
    except DomainException as exc:
        raise to_click_error(exc)

    click.echo(f"Order {dto.id}: {dto.status} (total {dto.total}, opened {dto.created_at})")
    for item in dto.items:
        click.echo(f"  {item.quantity} x {item.name}  {item.total}")


@click.command("list-active")
@click.pass_obj
def order_list_active(container: Container) -> None:
    """List open orders, work in progress first."""
    handler = ListActiveOrdersHandler(order_repo=container.order_repo)
    try:
        orders = handler.handle()
    except DomainException as exc:
        raise to_click_error(exc)

    if not orders:
        click.echo("No active orders.")
        return

    click.echo(f"{'ID':<36}  {'Status':<18} {'Created':<20} {'Total':>12}")
    click.echo("-" * 90)
    for dto in orders:
        click.echo(f"{dto.id:<36}  {dto.status:<18} {dto.created_at:<20} {dto.total:>12}")


def _transition_command(name: str, method: str, help_text: str) -> click.Command:
    """Build a command that runs one lifecycle transition by order id."""

    @click.command(name, help=help_text)
    @click.option("--id", "order_id", required=True, type=click.UUID, help="Order ID.")
    @click.pass_obj
    def command(container: Container, order_id) -> None:
        service = container.order_lifecycle()
        try:
            result = getattr(service, method)(order_id)
        except DomainException as exc:
            raise to_click_error(exc)
        _report_transition(result)

    return command


order_diagnose = _transition_command(
    "diagnose", "start_diagnosis", "Start diagnosing a received order."
)
order_send_budget = _transition_command(
    "send-budget", "send_budget", "Send the budget to the client for approval."
)
order_approve = _transition_command(
    "approve", "approve_order", "Approve an order and take its parts out of stock."
)
order_reject = _transition_command(
    "reject", "reject_budget", "Reject the budget; the order returns to Received."
)
order_finish = _transition_command(
    "finish", "finish_order", "Mark an order in execution as completed."
)
order_deliver = _transition_command(
    "deliver", "deliver_order", "Hand a completed order back to the client."
)


@click.command("respond")
@click.option("--id", "order_id", required=True, type=click.UUID, help="Order ID.")
@click.option(
    "--decision",
    required=True,
    type=click.Choice(["approve", "reject"], case_sensitive=False),
    help="Client's answer to the budget.",
)
@click.pass_obj
def order_respond(container: Container, order_id, decision: str) -> None:
    """Record the client's answer to a budget."""
    service = container.order_lifecycle()
    try:
        result = service.respond_to_budget(order_id, decision.lower() == "approve")
    except DomainException as exc:
        raise to_click_error(exc)
    _report_transition(result)


@click.command("set-status")
@click.option("--id", "order_id", required=True, type=click.UUID, help="Order ID.")
@click.option("--status", required=True, help="Target status, e.g. 'In execution'.")
@click.pass_obj
def order_set_status(container: Container, order_id, status: str) -> None:
    """Operator override: force a status without transition checks."""
    service = container.order_lifecycle()
    try:
        result = service.update_status(order_id, status)
    except DomainException as exc:
        raise to_click_error(exc)
    _report_transition(result)
