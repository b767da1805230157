"""Application services: Add Part and Restock Part use cases."""

from __future__ import annotations

from uuid import UUID

from autorepair.domain.exceptions import EntityNotFoundError
from autorepair.domain.model.part import Part
from autorepair.domain.model.value_objects import Money
from autorepair.domain.repository.part_repository import PartRepository


class AddPartHandler:

    def __init__(self, part_repo: PartRepository, currency: str = "BRL") -> None:
        self._part_repo = part_repo
        self._currency = currency

    def handle(self, name: str, price: str, quantity: int, description: str = "") -> Part:
        """Register a new part with its opening stock."""
        part = Part.create(
            name=name,
            unit_price=Money.of(price, self._currency),
            quantity=quantity,
            description=description,
        )
        self._part_repo.add(part)
        return part


class RestockPartHandler:

    def __init__(self, part_repo: PartRepository) -> None:
        self._part_repo = part_repo

    def handle(self, part_id: UUID, quantity: int) -> Part:
        part = self._part_repo.get_by_id(part_id)
        if part is None:
            raise EntityNotFoundError(f"Part {part_id} not found")
        part.add_stock(quantity)
        self._part_repo.update(part)
        return part
