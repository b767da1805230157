"""Unit tests for the Order aggregate and its pricing rules."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from uuid import uuid4

import pytest

from autorepair.domain.exceptions import ValidationError
from autorepair.domain.model.order import (
    ItemType,
    Order,
    OrderStatus,
    active_order_sort_key,
)
from autorepair.domain.model.value_objects import NIL_ID, Money


def _order() -> Order:
    return Order.create(client_id=uuid4(), vehicle_id=uuid4())


class TestOrderCreation:

    def test_new_order_is_received_and_empty(self):
        order = _order()
        assert order.status == OrderStatus.RECEIVED
        assert order.items == []
        assert order.total == Money.zero()
        assert order.total_service == Money.zero()
        assert order.total_parts == Money.zero()

    def test_timestamps(self):
        order = _order()
        assert order.created_at == order.updated_at
        assert order.started_at is None
        assert order.finished_at is None

    @pytest.mark.parametrize("client_id,vehicle_id", [
        (None, uuid4()),
        (uuid4(), None),
        (NIL_ID, uuid4()),
        (uuid4(), NIL_ID),
    ])
    def test_missing_client_or_vehicle_rejected(self, client_id, vehicle_id):
        with pytest.raises(ValidationError, match="Client and vehicle are required"):
            Order.create(client_id, vehicle_id)

    def test_ids_are_unique(self):
        assert _order().id != _order().id


class TestAddItem:

    def test_item_total_and_snapshot(self):
        order = _order()
        item = order.add_item(uuid4(), ItemType.PART, "Brake pad", 2, Money.of("80.00"))
        assert item.total == Money.of("160.00")
        assert item.order_id == order.id
        assert item.name == "Brake pad"

    def test_totals_partitioned_by_type(self):
        order = _order()
        order.add_item(uuid4(), ItemType.SERVICE, "Oil change", 1, Money.of("60.00"))
        order.add_item(uuid4(), ItemType.PART, "Oil filter", 1, Money.of("35.00"))
        order.add_item(uuid4(), ItemType.PART, "Engine oil 1L", 4, Money.of("42.50"))

        assert order.total_service == Money.of("60.00")
        assert order.total_parts == Money.of("205.00")
        assert order.total == Money.of("265.00")

    def test_totals_hold_after_every_addition(self):
        order = _order()
        lines = [
            (ItemType.SERVICE, 1, "0.10"),
            (ItemType.PART, 3, "0.10"),
            (ItemType.SERVICE, 7, "19.99"),
            (ItemType.PART, 1, "0.00"),
            (ItemType.PART, 2, "0.20"),
        ]
        expected = Decimal("0")
        for item_type, qty, price in lines:
            order.add_item(uuid4(), item_type, "line", qty, Money.of(price))
            expected += qty * Decimal(price)
            assert order.total == order.total_service + order.total_parts
            assert order.total.amount == expected

    def test_free_item_accepted(self):
        order = _order()
        order.add_item(uuid4(), ItemType.SERVICE, "Courtesy check", 1, Money.of("0"))
        assert order.total == Money.zero()

    @pytest.mark.parametrize("qty", [0, -1])
    def test_non_positive_quantity_rejected(self, qty):
        order = _order()
        with pytest.raises(ValidationError, match="Quantity must be positive"):
            order.add_item(uuid4(), ItemType.PART, "Brake pad", qty, Money.of("80.00"))
        assert order.items == []

    def test_foreign_currency_rejected(self):
        order = _order()
        with pytest.raises(ValidationError, match="Cannot price"):
            order.add_item(uuid4(), ItemType.PART, "Brake pad", 1, Money.of("80.00", "USD"))

    def test_part_items(self):
        order = _order()
        order.add_item(uuid4(), ItemType.SERVICE, "Alignment", 1, Money.of("90.00"))
        part_line = order.add_item(uuid4(), ItemType.PART, "Brake pad", 2, Money.of("80.00"))
        assert order.part_items == [part_line]


class TestStatusBookkeeping:

    def test_moving_to_execution_stamps_start(self):
        order = _order()
        order.move_to(OrderStatus.IN_EXECUTION)
        assert order.started_at is not None
        assert order.finished_at is None

    def test_moving_to_completed_stamps_finish(self):
        order = _order()
        order.move_to(OrderStatus.COMPLETED)
        assert order.finished_at is not None

    def test_override_does_not_stamp(self):
        order = _order()
        order.override_status(OrderStatus.IN_EXECUTION)
        assert order.status == OrderStatus.IN_EXECUTION
        assert order.started_at is None

    def test_execution_time(self):
        order = _order()
        start = datetime(2024, 5, 1, 9, 0, tzinfo=timezone.utc)
        order.move_to(OrderStatus.IN_EXECUTION, at=start)
        order.move_to(OrderStatus.COMPLETED, at=start + timedelta(minutes=90))
        assert order.execution_time_minutes == 90


class TestOrderStatus:

    def test_values(self):
        assert [s.value for s in OrderStatus] == [
            "Received",
            "In diagnosis",
            "Awaiting approval",
            "In execution",
            "Completed",
            "Delivered",
        ]

    @pytest.mark.parametrize("raw", ["In execution", "in execution", "IN_EXECUTION"])
    def test_parse(self, raw):
        assert OrderStatus.parse(raw) is OrderStatus.IN_EXECUTION

    def test_parse_unknown_rejected(self):
        with pytest.raises(ValidationError, match="Unknown order status"):
            OrderStatus.parse("Cancelled")

    def test_active_statuses(self):
        assert not OrderStatus.COMPLETED.is_active
        assert not OrderStatus.DELIVERED.is_active
        assert OrderStatus.RECEIVED.is_active

    def test_sort_key_orders_by_priority_then_age(self):
        base = datetime(2024, 1, 1, tzinfo=timezone.utc)
        newer_exec = _order()
        newer_exec.status = OrderStatus.IN_EXECUTION
        newer_exec.created_at = base + timedelta(days=2)
        older_exec = _order()
        older_exec.status = OrderStatus.IN_EXECUTION
        older_exec.created_at = base
        received = _order()
        received.created_at = base - timedelta(days=30)

        ordered = sorted([received, newer_exec, older_exec], key=active_order_sort_key)
        assert ordered == [older_exec, newer_exec, received]
