"""JSON-file-backed implementation of PartRepository."""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path
from uuid import UUID

from autorepair.domain.exceptions import (
    ConcurrencyError,
    EntityNotFoundError,
    ValidationError,
)
from autorepair.domain.model.part import Part
from autorepair.domain.model.value_objects import Money
from autorepair.domain.repository.part_repository import PartRepository
from autorepair.infrastructure.persistence.json_file import JsonFile


class JsonPartRepository(PartRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    # --- PartRepository interface ---------------------------------------------

    def get_by_id(self, part_id: UUID) -> Part | None:
        for raw in self._file.load():
            if raw["id"] == str(part_id):
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Part]:
        return [self._to_domain(raw) for raw in self._file.load()]

    def add(self, part: Part) -> None:
        records = self._file.load()
        if any(raw["id"] == str(part.id) for raw in records):
            raise ValidationError(f"Part {part.id} already exists")
        records.append(self._to_raw(part))
        self._file.persist(records)

    def update(self, part: Part) -> None:
        records = self._file.load()
        for i, raw in enumerate(records):
            if raw["id"] != str(part.id):
                continue
            stored_version = raw.get("version", 0)
            if stored_version != part.version:
                raise ConcurrencyError(
                    f"Part {part.name} was modified concurrently "
                    f"(expected version {part.version}, found {stored_version})"
                )
            records[i] = self._to_raw(part, version=part.version + 1)
            self._file.persist(records)
            part.version += 1
            return
        raise EntityNotFoundError(f"Part {part.id} not found")

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(part: Part, version: int | None = None) -> dict:
        return {
            "id": str(part.id),
            "name": part.name,
            "description": part.description,
            "quantity": part.quantity,
            "unit_price": str(part.unit_price.amount),
            "currency": part.unit_price.currency,
            "version": part.version if version is None else version,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Part:
        return Part(
            id=UUID(raw["id"]),
            name=raw["name"],
            description=raw.get("description", ""),
            quantity=raw["quantity"],
            unit_price=Money(Decimal(raw["unit_price"]), raw.get("currency", "BRL")),
            version=raw.get("version", 0),
        )
