"""JSON-file-backed implementation of LaborRepository."""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path
from uuid import UUID

from autorepair.domain.exceptions import EntityNotFoundError
from autorepair.domain.model.labor import LaborService
from autorepair.domain.model.value_objects import Money
from autorepair.domain.repository.labor_repository import LaborRepository
from autorepair.infrastructure.persistence.json_file import (
    JsonFile,
    dump_datetime,
    load_datetime,
)


class JsonLaborRepository(LaborRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    def get_by_id(self, service_id: UUID) -> LaborService | None:
        for raw in self._file.load():
            if raw["id"] == str(service_id):
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[LaborService]:
        return [self._to_domain(raw) for raw in self._file.load()]

    def save(self, service: LaborService) -> None:
        self._file.upsert(
            {
                "id": str(service.id),
                "name": service.name,
                "description": service.description,
                "price": str(service.price.amount),
                "currency": service.price.currency,
                "created_at": dump_datetime(service.created_at),
                "updated_at": dump_datetime(service.updated_at),
            }
        )

    def delete(self, service_id: UUID) -> None:
        if not self._file.remove(str(service_id)):
            raise EntityNotFoundError(f"Service {service_id} not found")

    @staticmethod
    def _to_domain(raw: dict) -> LaborService:
        return LaborService(
            id=UUID(raw["id"]),
            name=raw["name"],
            description=raw.get("description", ""),
            price=Money(Decimal(raw["price"]), raw.get("currency", "BRL")),
            created_at=load_datetime(raw["created_at"]),
            updated_at=load_datetime(raw["updated_at"]),
        )
