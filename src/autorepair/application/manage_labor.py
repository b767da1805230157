"""Application services: the labor services catalog.

Orders snapshot a service's name and price when the item is added, so
updating or deleting a catalog entry never changes an existing order.
"""

from __future__ import annotations

from uuid import UUID

from autorepair.domain.exceptions import EntityNotFoundError
from autorepair.domain.model.labor import LaborService
from autorepair.domain.model.value_objects import Money
from autorepair.domain.repository.labor_repository import LaborRepository


class AddLaborServiceHandler:

    def __init__(self, labor_repo: LaborRepository, currency: str = "BRL") -> None:
        self._labor_repo = labor_repo
        self._currency = currency

    def handle(self, name: str, price: str, description: str = "") -> LaborService:
        service = LaborService.create(
            name=name,
            price=Money.of(price, self._currency),
            description=description,
        )
        self._labor_repo.save(service)
        return service


class UpdateLaborServiceHandler:

    def __init__(self, labor_repo: LaborRepository, currency: str = "BRL") -> None:
        self._labor_repo = labor_repo
        self._currency = currency

    def handle(
        self,
        service_id: UUID,
        name: str | None = None,
        description: str | None = None,
        price: str | None = None,
    ) -> LaborService:
        service = self._labor_repo.get_by_id(service_id)
        if service is None:
            raise EntityNotFoundError(f"Service {service_id} not found")
        new_price = Money.of(price, self._currency) if price else None
        service.update(name=name, description=description, price=new_price)
        self._labor_repo.save(service)
        return service


class DeleteLaborServiceHandler:

    def __init__(self, labor_repo: LaborRepository) -> None:
        self._labor_repo = labor_repo

    def handle(self, service_id: UUID) -> None:
        self._labor_repo.delete(service_id)
