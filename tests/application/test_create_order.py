"""Integration tests for the CreateOrder use case.

Uses in-memory fake repositories, no file I/O.
"""

from uuid import UUID, uuid4

import pytest

from autorepair.application.create_order import CreateOrderHandler
from autorepair.application.dto import OrderItemSpec
from autorepair.domain.exceptions import EntityNotFoundError, ValidationError
from autorepair.domain.model.client import Client, Vehicle
from autorepair.domain.model.labor import LaborService
from autorepair.domain.model.part import Part
from autorepair.domain.model.value_objects import Money
from tests.fakes import (
    FakeClientRepository,
    FakeLaborRepository,
    FakeOrderRepository,
    FakePartRepository,
    FakeVehicleRepository,
)


class _Catalog:

    def __init__(self) -> None:
        self.client = Client.create(name="Maria Souza", document="52998224725")
        self.vehicle = Vehicle.create(self.client.id, "ABC1D23", "Fiat", "Uno", 2015)
        self.oil_change = LaborService.create(name="Oil change", price=Money.of("120.00"))
        self.filter = Part.create(name="Oil filter", unit_price=Money.of("35.50"), quantity=3)

        self.order_repo = FakeOrderRepository()
        self.client_repo = FakeClientRepository([self.client])
        self.vehicle_repo = FakeVehicleRepository([self.vehicle])
        self.labor_repo = FakeLaborRepository([self.oil_change])
        self.part_repo = FakePartRepository([self.filter])
        self.handler = CreateOrderHandler(
            order_repo=self.order_repo,
            client_repo=self.client_repo,
            vehicle_repo=self.vehicle_repo,
            labor_repo=self.labor_repo,
            part_repo=self.part_repo,
        )

    def create(self, *specs: OrderItemSpec, client_id=None, vehicle_id=None):
        return self.handler.handle(
            client_id=client_id or self.client.id,
            vehicle_id=vehicle_id or self.vehicle.id,
            item_specs=list(specs),
        )

    def service_spec(self, qty: int = 1) -> OrderItemSpec:
        return OrderItemSpec("service", str(self.oil_change.id), qty)

    def part_spec(self, qty: int = 1) -> OrderItemSpec:
        return OrderItemSpec("part", str(self.filter.id), qty)


class TestCreateOrderHappyPath:

    def test_creates_received_order_with_totals(self):
        shop = _Catalog()
        dto = shop.create(shop.service_spec(), shop.part_spec(2))

        assert dto.status == "Received"
        assert dto.total_service == "R$ 120.00"
        assert dto.total_parts == "R$ 71.00"
        assert dto.total == "R$ 191.00"
        assert [item.item_type for item in dto.items] == ["service", "part"]
        assert dto.started_at is None

    def test_persists_order(self):
        shop = _Catalog()
        dto = shop.create(shop.service_spec())

        saved = shop.order_repo.get_by_id(UUID(dto.id))
        assert saved is not None
        assert saved.client_id == shop.client.id
        assert saved.vehicle_id == shop.vehicle.id

    def test_accepts_string_ids(self):
        shop = _Catalog()
        dto = shop.create(
            shop.service_spec(),
            client_id=str(shop.client.id),
            vehicle_id=f" {shop.vehicle.id} ",
        )
        assert dto.client_id == str(shop.client.id)

    def test_order_without_items(self):
        shop = _Catalog()
        dto = shop.create()
        assert dto.total == "R$ 0.00"
        assert dto.items == []

    def test_item_type_is_case_insensitive(self):
        shop = _Catalog()
        dto = shop.create(OrderItemSpec("PART", str(shop.filter.id), 1))
        assert dto.items[0].name == "Oil filter"

    def test_stock_is_not_taken_at_creation(self):
        shop = _Catalog()
        shop.create(shop.part_spec(10))
        assert shop.part_repo.stock_of(shop.filter.id) == 3


class TestCreateOrderPriceLock:

    def test_price_snapshot_at_creation(self):
        shop = _Catalog()
        dto = shop.create(shop.part_spec())

        shop.filter.unit_price = Money.of("99.99")
        shop.part_repo.update(shop.filter)

        saved = shop.order_repo.get_by_id(UUID(dto.id))
        assert str(saved.total) == "R$ 35.50"

    def test_service_price_snapshot_at_creation(self):
        shop = _Catalog()
        dto = shop.create(shop.service_spec())

        shop.oil_change.update_price(Money.of("180.00"))
        shop.labor_repo.save(shop.oil_change)

        saved = shop.order_repo.get_by_id(UUID(dto.id))
        assert saved.total_service == Money.of("120.00")
        assert shop.create(shop.service_spec()).total == "R$ 180.00"

    def test_name_snapshot_at_creation(self):
        shop = _Catalog()
        dto = shop.create(shop.service_spec())

        shop.oil_change.name = "Synthetic oil change"
        shop.labor_repo.save(shop.oil_change)

        saved = shop.order_repo.get_by_id(UUID(dto.id))
        assert saved.items[0].name == "Oil change"


class TestCreateOrderValidation:

    def test_unknown_client(self):
        shop = _Catalog()
        with pytest.raises(EntityNotFoundError, match="Client"):
            shop.create(shop.service_spec(), client_id=uuid4())

    def test_unknown_vehicle(self):
        shop = _Catalog()
        with pytest.raises(EntityNotFoundError, match="Vehicle"):
            shop.create(shop.service_spec(), vehicle_id=uuid4())

    def test_vehicle_of_another_client(self):
        shop = _Catalog()
        other = Client.create(name="João Lima", document="11.222.333/0001-81")
        shop.client_repo.save(other)

        with pytest.raises(ValidationError, match="does not belong"):
            shop.create(shop.service_spec(), client_id=other.id)
        assert shop.order_repo.list_all() == []

    def test_malformed_client_id(self):
        shop = _Catalog()
        with pytest.raises(ValidationError, match="Invalid client id"):
            shop.create(client_id="not-a-uuid")

    def test_unknown_service(self):
        shop = _Catalog()
        with pytest.raises(EntityNotFoundError, match="Service not found"):
            shop.create(OrderItemSpec("service", str(uuid4()), 1))

    def test_unknown_part(self):
        shop = _Catalog()
        with pytest.raises(EntityNotFoundError, match="Part not found"):
            shop.create(OrderItemSpec("part", str(uuid4()), 1))

    def test_invalid_item_type(self):
        shop = _Catalog()
        with pytest.raises(ValidationError, match="Invalid item type"):
            shop.create(OrderItemSpec("tyre", str(shop.filter.id), 1))

    @pytest.mark.parametrize("qty", [0, -2])
    def test_non_positive_quantity(self, qty):
        shop = _Catalog()
        with pytest.raises(ValidationError, match="Quantity must be positive"):
            shop.create(shop.part_spec(qty))
        assert shop.order_repo.list_all() == []

    def test_catalog_in_another_currency(self):
        shop = _Catalog()
        pricey = LaborService.create(name="Import check", price=Money.of("50.00", "USD"))
        shop.labor_repo.save(pricey)

        with pytest.raises(ValidationError, match="Cannot price"):
            shop.create(OrderItemSpec("service", str(pricey.id), 1))
