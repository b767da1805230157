"""Application service: Create Order use case.

Orchestrates the flow between repositories and the domain model.
This is the only place that coordinates the catalog aggregates (labor
services and parts) with order creation.
"""

from __future__ import annotations

from uuid import UUID

from autorepair.application.dto import OrderDTO, OrderItemSpec
from autorepair.domain.exceptions import EntityNotFoundError, ValidationError
from autorepair.domain.model.order import ItemType, Order
from autorepair.domain.repository.client_repository import (
    ClientRepository,
    VehicleRepository,
)
from autorepair.domain.repository.labor_repository import LaborRepository
from autorepair.domain.repository.order_repository import OrderRepository
from autorepair.domain.repository.part_repository import PartRepository


def parse_id(raw: str | UUID, what: str) -> UUID:
    if isinstance(raw, UUID):
        return raw
    try:
        return UUID(str(raw).strip())
    except ValueError as exc:
        raise ValidationError(f"Invalid {what} id: {raw!r}") from exc


class CreateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        client_repo: ClientRepository,
        vehicle_repo: VehicleRepository,
        labor_repo: LaborRepository,
        part_repo: PartRepository,
        currency: str = "BRL",
    ) -> None:
        self._order_repo = order_repo
        self._client_repo = client_repo
        self._vehicle_repo = vehicle_repo
        self._labor_repo = labor_repo
        self._part_repo = part_repo
        self._currency = currency

    def handle(
        self,
        client_id: str | UUID,
        vehicle_id: str | UUID,
        item_specs: list[OrderItemSpec],
    ) -> OrderDTO:
        """Open a new service order.

        Steps:
        1. Check that the client exists and owns the vehicle.
        2. Resolve each item against the service or part catalog.
        3. Add it with the *current* name and price (snapshot).
        4. Persist and return a DTO.

        Stock is only checked and taken when the order is approved.
        """
        client_uuid = parse_id(client_id, "client")
        vehicle_uuid = parse_id(vehicle_id, "vehicle")

        if self._client_repo.get_by_id(client_uuid) is None:
            raise EntityNotFoundError(f"Client {client_uuid} not found")
        vehicle = self._vehicle_repo.get_by_id(vehicle_uuid)
        if vehicle is None:
            raise EntityNotFoundError(f"Vehicle {vehicle_uuid} not found")
        if vehicle.client_id != client_uuid:
            raise ValidationError(
                f"Vehicle {vehicle.plate} does not belong to client {client_uuid}"
            )

        order = Order.create(client_uuid, vehicle_uuid, currency=self._currency)

        for spec in item_specs:
            item_type = self._parse_item_type(spec.item_type)
            ref_id = parse_id(spec.ref_id, item_type.value)

            if item_type is ItemType.SERVICE:
                service = self._labor_repo.get_by_id(ref_id)
                if service is None:
                    raise EntityNotFoundError(f"Service not found: {ref_id}")
                name, price = service.name, service.price
            else:
                part = self._part_repo.get_by_id(ref_id)
                if part is None:
                    raise EntityNotFoundError(f"Part not found: {ref_id}")
                name, price = part.name, part.unit_price

            order.add_item(ref_id, item_type, name, spec.quantity, price)

        self._order_repo.save(order)
        return OrderDTO.from_order(order)

    @staticmethod
    def _parse_item_type(raw: str) -> ItemType:
        try:
            return ItemType((raw or "").strip().lower())
        except ValueError as exc:
            raise ValidationError(
                f"Invalid item type {raw!r}: expected 'service' or 'part'"
            ) from exc
