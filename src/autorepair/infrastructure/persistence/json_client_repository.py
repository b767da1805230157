"""JSON-file-backed implementations of ClientRepository and VehicleRepository."""

from __future__ import annotations

from pathlib import Path
from uuid import UUID

from autorepair.domain.exceptions import EntityNotFoundError
from autorepair.domain.model.client import Client, Vehicle
from autorepair.domain.model.value_objects import Document, LicensePlate
from autorepair.domain.repository.client_repository import (
    ClientRepository,
    VehicleRepository,
)
from autorepair.infrastructure.persistence.json_file import (
    JsonFile,
    dump_datetime,
    load_datetime,
)


class JsonClientRepository(ClientRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    def get_by_id(self, client_id: UUID) -> Client | None:
        for raw in self._file.load():
            if raw["id"] == str(client_id):
                return self._to_domain(raw)
        return None

    def get_by_document(self, document: str) -> Client | None:
        for raw in self._file.load():
            if raw["document"] == document:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Client]:
        return [self._to_domain(raw) for raw in self._file.load()]

    def save(self, client: Client) -> None:
        self._file.upsert(
            {
                "id": str(client.id),
                "name": client.name,
                "document": client.document.value,
                "email": client.email,
                "phone": client.phone,
                "created_at": dump_datetime(client.created_at),
                "updated_at": dump_datetime(client.updated_at),
            }
        )

    def delete(self, client_id: UUID) -> None:
        if not self._file.remove(str(client_id)):
            raise EntityNotFoundError(f"Client {client_id} not found")

    @staticmethod
    def _to_domain(raw: dict) -> Client:
        return Client(
            id=UUID(raw["id"]),
            name=raw["name"],
            document=Document(raw["document"]),
            email=raw.get("email", ""),
            phone=raw.get("phone", ""),
            created_at=load_datetime(raw["created_at"]),
            updated_at=load_datetime(raw["updated_at"]),
        )


class JsonVehicleRepository(VehicleRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    def get_by_id(self, vehicle_id: UUID) -> Vehicle | None:
        for raw in self._file.load():
            if raw["id"] == str(vehicle_id):
                return self._to_domain(raw)
        return None

    def list_by_client(self, client_id: UUID) -> list[Vehicle]:
        return [
            self._to_domain(raw)
            for raw in self._file.load()
            if raw["client_id"] == str(client_id)
        ]

    def save(self, vehicle: Vehicle) -> None:
        self._file.upsert(
            {
                "id": str(vehicle.id),
                "client_id": str(vehicle.client_id),
                "plate": vehicle.plate.value,
                "brand": vehicle.brand,
                "model": vehicle.model,
                "year": vehicle.year,
                "created_at": dump_datetime(vehicle.created_at),
                "updated_at": dump_datetime(vehicle.updated_at),
            }
        )

    def delete(self, vehicle_id: UUID) -> None:
        if not self._file.remove(str(vehicle_id)):
            raise EntityNotFoundError(f"Vehicle {vehicle_id} not found")

    @staticmethod
    def _to_domain(raw: dict) -> Vehicle:
        return Vehicle(
            id=UUID(raw["id"]),
            client_id=UUID(raw["client_id"]),
            plate=LicensePlate(raw["plate"]),
            brand=raw["brand"],
            model=raw["model"],
            year=raw["year"],
            created_at=load_datetime(raw["created_at"]),
            updated_at=load_datetime(raw["updated_at"]),
        )
