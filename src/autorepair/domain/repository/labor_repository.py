"""Abstract repository for the labor services catalog."""

from __future__ import annotations

from abc import ABC, abstractmethod
from uuid import UUID

from autorepair.domain.model.labor import LaborService


class LaborRepository(ABC):

    @abstractmethod
    def get_by_id(self, service_id: UUID) -> LaborService | None:
        """Return a service by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[LaborService]:
        """Return every service in the catalog."""

    @abstractmethod
    def save(self, service: LaborService) -> None:
        """Persist a new or updated service."""

    @abstractmethod
    def delete(self, service_id: UUID) -> None:
        """Remove a service from the catalog. Raises EntityNotFoundError if absent."""
