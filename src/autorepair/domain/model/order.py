"""Order aggregate, the core of the domain.

The Order is an aggregate root that owns its items. Pricing invariants
live here; status *preconditions* are checked by the lifecycle service,
which also coordinates the stock and notification side effects.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from uuid import UUID, uuid4

from autorepair.domain.exceptions import ValidationError
from autorepair.domain.model.value_objects import (
    DEFAULT_CURRENCY,
    Money,
    Quantity,
    is_nil_id,
)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class OrderStatus(Enum):
    RECEIVED = "Received"
    IN_DIAGNOSIS = "In diagnosis"
    AWAITING_APPROVAL = "Awaiting approval"
    IN_EXECUTION = "In execution"
    COMPLETED = "Completed"
    DELIVERED = "Delivered"

    @property
    def is_active(self) -> bool:
        return self not in (OrderStatus.COMPLETED, OrderStatus.DELIVERED)

    @property
    def priority(self) -> int:
        """Position in the active-orders list; work in progress comes first."""
        return _STATUS_PRIORITY.get(self, len(_STATUS_PRIORITY) + 1)

    @staticmethod
    def parse(value: str) -> OrderStatus:
        """Accept a status by value ("In execution") or name ("IN_EXECUTION")."""
        raw = (value or "").strip()
        for status in OrderStatus:
            if raw.lower() in (status.value.lower(), status.name.lower()):
                return status
        allowed = ", ".join(s.value for s in OrderStatus)
        raise ValidationError(f"Unknown order status {value!r} (expected one of: {allowed})")


_STATUS_PRIORITY = {
    OrderStatus.IN_EXECUTION: 1,
    OrderStatus.AWAITING_APPROVAL: 2,
    OrderStatus.IN_DIAGNOSIS: 3,
    OrderStatus.RECEIVED: 4,
}


class ItemType(Enum):
    SERVICE = "service"
    PART = "part"


@dataclass(frozen=True)
class OrderItem:
    """A priced line of an order.

    ``name`` and ``unit_price`` are snapshots taken when the item was
    added, so later catalog changes never rewrite past orders.
    """

    id: UUID
    order_id: UUID
    ref_id: UUID
    item_type: ItemType
    name: str
    quantity: Quantity
    unit_price: Money

    @property
    def total(self) -> Money:
        return self.unit_price * self.quantity.value

    @property
    def is_part(self) -> bool:
        return self.item_type is ItemType.PART


@dataclass
class Order:
    """Aggregate root for service orders.

    Use ``Order.create()`` for new orders. The ``__init__`` is kept plain
    so repositories can reconstitute persisted orders without
    re-validating them.
    """

    id: UUID
    client_id: UUID
    vehicle_id: UUID
    status: OrderStatus = OrderStatus.RECEIVED
    items: list[OrderItem] = field(default_factory=list)
    currency: str = DEFAULT_CURRENCY
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)
    started_at: datetime | None = None
    finished_at: datetime | None = None
    total_service: Money = field(init=False)
    total_parts: Money = field(init=False)
    total: Money = field(init=False)

    def __post_init__(self) -> None:
        self._recalculate_totals()

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        client_id: UUID | None,
        vehicle_id: UUID | None,
        currency: str = DEFAULT_CURRENCY,
    ) -> Order:
        if is_nil_id(client_id) or is_nil_id(vehicle_id):
            raise ValidationError("Client and vehicle are required")
        now = _utcnow()
        return Order(
            id=uuid4(),
            client_id=client_id,  # type: ignore[arg-type]
            vehicle_id=vehicle_id,  # type: ignore[arg-type]
            currency=currency,
            created_at=now,
            updated_at=now,
        )

    # --- Items ----------------------------------------------------------------

    def add_item(
        self,
        ref_id: UUID,
        item_type: ItemType,
        name: str,
        quantity: int,
        unit_price: Money,
    ) -> OrderItem:
        """Append a priced line and recompute every total."""
        if not isinstance(quantity, int) or quantity <= 0:
            raise ValidationError("Quantity must be positive")
        if unit_price.amount < 0:
            raise ValidationError("Price cannot be negative")
        if unit_price.currency != self.currency:
            raise ValidationError(
                f"Cannot price a {self.currency} order in {unit_price.currency}"
            )

        item = OrderItem(
            id=uuid4(),
            order_id=self.id,
            ref_id=ref_id,
            item_type=item_type,
            name=name,
            quantity=Quantity(quantity),
            unit_price=unit_price,
        )
        self.items.append(item)
        self._recalculate_totals()
        return item

    @property
    def part_items(self) -> list[OrderItem]:
        return [item for item in self.items if item.is_part]

    # --- Status bookkeeping ---------------------------------------------------

    def move_to(self, status: OrderStatus, at: datetime | None = None) -> None:
        """Set the status and stamp the timestamps that go with it.

        No transition rules are checked here.
        """
        now = at or _utcnow()
        self.status = status
        self.updated_at = now
        if status is OrderStatus.IN_EXECUTION:
            self.started_at = now
        elif status is OrderStatus.COMPLETED:
            self.finished_at = now

    def override_status(self, status: OrderStatus) -> None:
        """Operator override: set the status without stamping start/finish."""
        self.status = status
        self.updated_at = _utcnow()

    @property
    def is_active(self) -> bool:
        return self.status.is_active

    @property
    def execution_time_minutes(self) -> float | None:
        if self.started_at is None or self.finished_at is None:
            return None
        return (self.finished_at - self.started_at).total_seconds() / 60

    # --- Internal helpers -----------------------------------------------------

    def _recalculate_totals(self) -> None:
        total_service = Money.zero(self.currency)
        total_parts = Money.zero(self.currency)
        for item in self.items:
            if item.item_type is ItemType.SERVICE:
                total_service = total_service + item.total
            else:
                total_parts = total_parts + item.total
        self.total_service = total_service
        self.total_parts = total_parts
        self.total = total_service + total_parts


def active_order_sort_key(order: Order) -> tuple[int, datetime]:
    """Sort key for active-order listings: status priority, then oldest first."""
    return (order.status.priority, order.created_at)
