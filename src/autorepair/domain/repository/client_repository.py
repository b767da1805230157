"""Abstract repositories for the Client and Vehicle aggregates."""

from __future__ import annotations

from abc import ABC, abstractmethod
from uuid import UUID

from autorepair.domain.model.client import Client, Vehicle


class ClientRepository(ABC):

    @abstractmethod
    def get_by_id(self, client_id: UUID) -> Client | None:
        """Return a client by its ID, or None if not found."""

    @abstractmethod
    def get_by_document(self, document: str) -> Client | None:
        """Return the client holding this CPF/CNPJ, or None."""

    @abstractmethod
    def list_all(self) -> list[Client]:
        """Return every client."""

    @abstractmethod
    def save(self, client: Client) -> None:
        """Persist a new or updated client."""

    @abstractmethod
    def delete(self, client_id: UUID) -> None:
        """Remove a client. Raises EntityNotFoundError if absent."""


class VehicleRepository(ABC):

    @abstractmethod
    def get_by_id(self, vehicle_id: UUID) -> Vehicle | None:
        """Return a vehicle by its ID, or None if not found."""

    @abstractmethod
    def list_by_client(self, client_id: UUID) -> list[Vehicle]:
        """Return the vehicles owned by a client."""

    @abstractmethod
    def save(self, vehicle: Vehicle) -> None:
        """Persist a new or updated vehicle."""

    @abstractmethod
    def delete(self, vehicle_id: UUID) -> None:
        """Remove a vehicle. Raises EntityNotFoundError if absent."""
