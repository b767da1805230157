"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from autorepair.domain.model.order import Order

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M UTC"


@dataclass(frozen=True)
class OrderItemSpec:
    """Input: one requested line, with item type ("service"/"part"), catalog id, quantity."""

    item_type: str
    ref_id: str
    quantity: int


@dataclass(frozen=True)
class OrderItemDTO:
    """Output: a single order line as displayed to the user."""

    item_type: str
    name: str
    quantity: int
    unit_price: str  # formatted, e.g. "R$ 15.00"
    total: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: str
    client_id: str
    vehicle_id: str
    status: str
    items: list[OrderItemDTO]
    total_service: str
    total_parts: str
    total: str
    created_at: str
    started_at: str | None
    finished_at: str | None

    @staticmethod
    def from_order(order: Order) -> OrderDTO:
        return OrderDTO(
            id=str(order.id),
            client_id=str(order.client_id),
            vehicle_id=str(order.vehicle_id),
            status=order.status.value,
            items=[
                OrderItemDTO(
                    item_type=item.item_type.value,
                    name=item.name,
                    quantity=item.quantity.value,
                    unit_price=str(item.unit_price),
                    total=str(item.total),
                )
                for item in order.items
            ],
            total_service=str(order.total_service),
            total_parts=str(order.total_parts),
            total=str(order.total),
            created_at=order.created_at.strftime(TIMESTAMP_FORMAT),
            started_at=_fmt(order.started_at),
            finished_at=_fmt(order.finished_at),
        )


@dataclass(frozen=True)
class TrackingItemDTO:
    name: str
    quantity: int
    total: str


@dataclass(frozen=True)
class OrderTrackingDTO:
    """Output: the public view of an order, safe to show the client."""

    id: str
    status: str
    total: str
    created_at: str
    items: list[TrackingItemDTO]


def _fmt(value) -> str | None:
    return value.strftime(TIMESTAMP_FORMAT) if value is not None else None
