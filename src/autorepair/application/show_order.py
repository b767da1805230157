"""Application service: Show / Track Order use cases (queries)."""

from __future__ import annotations

from uuid import UUID

from autorepair.application.dto import (
    TIMESTAMP_FORMAT,
    OrderDTO,
    OrderTrackingDTO,
    TrackingItemDTO,
)
from autorepair.domain.exceptions import EntityNotFoundError
from autorepair.domain.model.order import Order
from autorepair.domain.repository.order_repository import OrderRepository


class ShowOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: UUID) -> OrderDTO:
        return OrderDTO.from_order(self._load(order_id))

    def track(self, order_id: UUID) -> OrderTrackingDTO:
        """Public summary: status, total and line names only."""
        order = self._load(order_id)
        return OrderTrackingDTO(
            id=str(order.id),
            status=order.status.value,
            total=str(order.total),
            created_at=order.created_at.strftime(TIMESTAMP_FORMAT),
            items=[
                TrackingItemDTO(
                    name=item.name,
                    quantity=item.quantity.value,
                    total=str(item.total),
                )
                for item in order.items
            ],
        )

    def _load(self, order_id: UUID) -> Order:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order {order_id} not found")
        return order


class ListActiveOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self) -> list[OrderDTO]:
        return [OrderDTO.from_order(order) for order in self._order_repo.list_active()]
