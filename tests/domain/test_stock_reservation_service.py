"""Tests for the StockReservationService domain service."""

from uuid import uuid4

import pytest

from autorepair.domain.exceptions import (
    ConcurrencyError,
    EntityNotFoundError,
    InsufficientStockError,
)
from autorepair.domain.model.order import ItemType, Order
from autorepair.domain.model.part import Part
from autorepair.domain.model.value_objects import Money
from autorepair.domain.service.stock_reservation_service import (
    StockReservationService,
)
from tests.fakes import FakePartRepository


def _part(name: str, quantity: int) -> Part:
    return Part.create(name=name, unit_price=Money.of("50.00"), quantity=quantity)


def _order_with(*lines: tuple[Part, int]) -> Order:
    order = Order.create(uuid4(), uuid4())
    for part, qty in lines:
        order.add_item(part.id, ItemType.PART, part.name, qty, part.unit_price)
    return order


class TestReserveForOrder:

    def test_decrements_each_part(self):
        pads, disc = _part("Brake pad", 10), _part("Brake disc", 4)
        repo = FakePartRepository([pads, disc])
        order = _order_with((pads, 2), (disc, 4))

        StockReservationService(repo).reserve_for_order(order)

        assert repo.stock_of(pads.id) == 8
        assert repo.stock_of(disc.id) == 0

    def test_service_lines_are_ignored(self):
        repo = FakePartRepository()
        order = Order.create(uuid4(), uuid4())
        order.add_item(uuid4(), ItemType.SERVICE, "Alignment", 1, Money.of("90.00"))

        assert StockReservationService(repo).reserve_for_order(order) == []
        assert repo.update_calls == 0

    def test_repeated_lines_are_summed(self):
        pads = _part("Brake pad", 5)
        repo = FakePartRepository([pads])
        order = _order_with((pads, 3), (pads, 3))

        with pytest.raises(InsufficientStockError) as excinfo:
            StockReservationService(repo).reserve_for_order(order)
        assert excinfo.value.requested == 6
        assert repo.stock_of(pads.id) == 5

    def test_shortage_on_later_part_touches_nothing(self):
        pads, disc = _part("Brake pad", 10), _part("Brake disc", 1)
        repo = FakePartRepository([pads, disc])
        order = _order_with((pads, 2), (disc, 2))

        with pytest.raises(InsufficientStockError, match="Brake disc"):
            StockReservationService(repo).reserve_for_order(order)

        assert repo.stock_of(pads.id) == 10
        assert repo.stock_of(disc.id) == 1
        assert repo.update_calls == 0

    def test_unknown_part_rejected(self):
        ghost = _part("Ghost", 1)
        repo = FakePartRepository()
        order = _order_with((ghost, 1))

        with pytest.raises(EntityNotFoundError, match="not found"):
            StockReservationService(repo).reserve_for_order(order)

    def test_stale_part_version_rejected(self):
        pads = _part("Brake pad", 10)
        order = _order_with((pads, 1))

        # Another writer updates the part between our load and our update.
        class RacingRepo(FakePartRepository):
            def get_by_id(self, part_id):
                loaded = super().get_by_id(part_id)
                rival = super().get_by_id(part_id)
                rival.remove_stock(5)
                FakePartRepository.update(self, rival)
                return loaded

        racing = RacingRepo([pads])
        with pytest.raises(ConcurrencyError):
            StockReservationService(racing).reserve_for_order(order)
        assert racing.stock_of(pads.id) == 5
