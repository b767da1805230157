"""Abstract repository for Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod
from uuid import UUID

from autorepair.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def get_by_id(self, order_id: UUID) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every order, in no particular order."""

    @abstractmethod
    def list_active(self) -> list[Order]:
        """Return orders that are neither Completed nor Delivered.

        Sorted by ``active_order_sort_key``: In execution, Awaiting
        approval, In diagnosis, Received; oldest first within a status.
        """

    @abstractmethod
    def save(self, order: Order) -> None:
        """Upsert the header and replace the full item list, all or nothing."""
