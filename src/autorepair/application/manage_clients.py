"""Application services: client and vehicle registration and maintenance."""

from __future__ import annotations

from uuid import UUID

from autorepair.domain.exceptions import EntityNotFoundError, ValidationError
from autorepair.domain.model.client import Client, Vehicle
from autorepair.domain.model.value_objects import Document
from autorepair.domain.repository.client_repository import (
    ClientRepository,
    VehicleRepository,
)


def _load_client(client_repo: ClientRepository, client_id: UUID) -> Client:
    client = client_repo.get_by_id(client_id)
    if client is None:
        raise EntityNotFoundError(f"Client {client_id} not found")
    return client


def _load_vehicle(vehicle_repo: VehicleRepository, vehicle_id: UUID) -> Vehicle:
    vehicle = vehicle_repo.get_by_id(vehicle_id)
    if vehicle is None:
        raise EntityNotFoundError(f"Vehicle {vehicle_id} not found")
    return vehicle


class RegisterClientHandler:

    def __init__(self, client_repo: ClientRepository) -> None:
        self._client_repo = client_repo

    def handle(self, name: str, document: str, email: str = "", phone: str = "") -> Client:
        """Register a client; one client per CPF/CNPJ."""
        if self._client_repo.get_by_document(Document(document).value) is not None:
            raise ValidationError(f"A client with document {document} already exists")
        client = Client.create(name=name, document=document, email=email, phone=phone)
        self._client_repo.save(client)
        return client


class UpdateClientHandler:

    def __init__(self, client_repo: ClientRepository) -> None:
        self._client_repo = client_repo

    def handle(
        self,
        client_id: UUID,
        name: str | None = None,
        document: str | None = None,
        email: str | None = None,
        phone: str | None = None,
    ) -> Client:
        """Change the given fields of a client; blank fields are left alone."""
        client = _load_client(self._client_repo, client_id)
        if document and document.strip():
            holder = self._client_repo.get_by_document(Document(document).value)
            if holder is not None and holder.id != client.id:
                raise ValidationError(f"A client with document {document} already exists")
        client.update(name=name, document=document, email=email, phone=phone)
        self._client_repo.save(client)
        return client


class DeleteClientHandler:

    def __init__(
        self,
        client_repo: ClientRepository,
        vehicle_repo: VehicleRepository,
    ) -> None:
        self._client_repo = client_repo
        self._vehicle_repo = vehicle_repo

    def handle(self, client_id: UUID) -> None:
        """Remove a client who no longer owns any vehicle."""
        client = _load_client(self._client_repo, client_id)
        owned = self._vehicle_repo.list_by_client(client.id)
        if owned:
            raise ValidationError(
                f"Client {client.id} still owns {len(owned)} vehicle(s); delete them first"
            )
        self._client_repo.delete(client.id)


class RegisterVehicleHandler:

    def __init__(
        self,
        vehicle_repo: VehicleRepository,
        client_repo: ClientRepository,
    ) -> None:
        self._vehicle_repo = vehicle_repo
        self._client_repo = client_repo

    def handle(
        self,
        client_id: UUID,
        plate: str,
        brand: str,
        model: str,
        year: int,
    ) -> Vehicle:
        _load_client(self._client_repo, client_id)
        vehicle = Vehicle.create(client_id, plate, brand, model, year)
        self._vehicle_repo.save(vehicle)
        return vehicle


class UpdateVehicleHandler:

    def __init__(
        self,
        vehicle_repo: VehicleRepository,
        client_repo: ClientRepository,
    ) -> None:
        self._vehicle_repo = vehicle_repo
        self._client_repo = client_repo

    def handle(
        self,
        vehicle_id: UUID,
        client_id: UUID | None = None,
        plate: str | None = None,
        brand: str | None = None,
        model: str | None = None,
        year: int | None = None,
    ) -> Vehicle:
        """Change the given fields; moving to another owner requires that owner to exist."""
        vehicle = _load_vehicle(self._vehicle_repo, vehicle_id)
        if client_id is not None:
            _load_client(self._client_repo, client_id)
        vehicle.update(client_id=client_id, plate=plate, brand=brand, model=model, year=year)
        self._vehicle_repo.save(vehicle)
        return vehicle


class DeleteVehicleHandler:

    def __init__(self, vehicle_repo: VehicleRepository) -> None:
        self._vehicle_repo = vehicle_repo

    def handle(self, vehicle_id: UUID) -> None:
        self._vehicle_repo.delete(vehicle_id)
