"""JSON-file-backed implementation of OrderRepository.

The header and the full item list are stored as one record, so a save
replaces both or neither.
"""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path
from uuid import UUID

from autorepair.domain.model.order import (
    ItemType,
    Order,
    OrderItem,
    OrderStatus,
    active_order_sort_key,
)
from autorepair.domain.model.value_objects import Money, Quantity
from autorepair.domain.repository.order_repository import OrderRepository
from autorepair.infrastructure.persistence.json_file import (
    JsonFile,
    dump_datetime,
    load_datetime,
)


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    # --- OrderRepository interface --------------------------------------------

    def get_by_id(self, order_id: UUID) -> Order | None:
        for raw in self._file.load():
            if raw["id"] == str(order_id):
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Order]:
        return [self._to_domain(raw) for raw in self._file.load()]

    def list_active(self) -> list[Order]:
        active = [order for order in self.list_all() if order.is_active]
        return sorted(active, key=active_order_sort_key)

    def save(self, order: Order) -> None:
        self._file.upsert(self._to_raw(order))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": str(order.id),
            "client_id": str(order.client_id),
            "vehicle_id": str(order.vehicle_id),
            "status": order.status.value,
            "currency": order.currency,
            "total_service": str(order.total_service.amount),
            "total_parts": str(order.total_parts.amount),
            "total": str(order.total.amount),
            "created_at": dump_datetime(order.created_at),
            "updated_at": dump_datetime(order.updated_at),
            "started_at": dump_datetime(order.started_at),
            "finished_at": dump_datetime(order.finished_at),
            "items": [
                {
                    "id": str(item.id),
                    "ref_id": str(item.ref_id),
                    "type": item.item_type.value,
                    "name": item.name,
                    "quantity": item.quantity.value,
                    "unit_price": str(item.unit_price.amount),
                }
                for item in order.items
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        order_id = UUID(raw["id"])
        currency = raw.get("currency", "BRL")
        items = [
            OrderItem(
                id=UUID(i["id"]),
                order_id=order_id,
                ref_id=UUID(i["ref_id"]),
                item_type=ItemType(i["type"]),
                name=i["name"],
                quantity=Quantity(i["quantity"]),
                unit_price=Money(Decimal(i["unit_price"]), currency),
            )
            for i in raw["items"]
        ]
        # Totals are derived from the items in __post_init__; the stored
        # totals are only there for readers of the raw file.
        return Order(
            id=order_id,
            client_id=UUID(raw["client_id"]),
            vehicle_id=UUID(raw["vehicle_id"]),
            status=OrderStatus(raw["status"]),
            items=items,
            currency=currency,
            created_at=load_datetime(raw["created_at"]),
            updated_at=load_datetime(raw["updated_at"]),
            started_at=load_datetime(raw.get("started_at")),
            finished_at=load_datetime(raw.get("finished_at")),
        )
