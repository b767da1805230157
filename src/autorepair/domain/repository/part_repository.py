"""Abstract repository for Part aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations live in the infrastructure
layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from uuid import UUID

from autorepair.domain.model.part import Part


class PartRepository(ABC):

    @abstractmethod
    def get_by_id(self, part_id: UUID) -> Part | None:
        """Return a part by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Part]:
        """Return every part in the inventory."""

    @abstractmethod
    def add(self, part: Part) -> None:
        """Persist a new part."""

    @abstractmethod
    def update(self, part: Part) -> None:
        """Persist changes to an existing part.

        Raises ConcurrencyError when the stored version differs from
        ``part.version``; on success the version is incremented on both
        the stored record and *part*.
        """
