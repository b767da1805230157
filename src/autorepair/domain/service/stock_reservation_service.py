"""Domain service: Stock Reservation.

Takes the parts an approved order needs off the shelf.  Every part is
checked before any is decremented, so a shortage leaves all stock as it
was.
"""

from __future__ import annotations

import logging
from uuid import UUID

from autorepair.domain.exceptions import EntityNotFoundError, InsufficientStockError
from autorepair.domain.model.order import Order
from autorepair.domain.model.part import Part
from autorepair.domain.repository.part_repository import PartRepository

logger = logging.getLogger(__name__)


class StockReservationService:

    def __init__(self, part_repo: PartRepository) -> None:
        self._part_repo = part_repo

    def reserve_for_order(self, order: Order) -> list[Part]:
        """Remove stock for every part line of the order.

        Phase 1 loads and validates: every referenced part must exist and
        hold enough units.  Lines repeating a part are summed.

        Phase 2 mutates and persists: ``remove_stock`` then ``update`` for
        each part.  ``update`` is version-checked, so a part changed by
        someone else since phase 1 raises ConcurrencyError instead of being
        overwritten.

        Returns the updated parts.
        """
        needed = self._required_quantities(order)

        # Phase 1: load all parts and validate
        reservations: list[tuple[Part, int]] = []
        for part_id, qty in needed.items():
            part = self._part_repo.get_by_id(part_id)
            if part is None:
                raise EntityNotFoundError(f"Part {part_id} not found")
            if not part.has_stock(qty):
                raise InsufficientStockError(part.name, qty, part.quantity)
            reservations.append((part, qty))

        # Phase 2: mutate and persist
        updated: list[Part] = []
        for part, qty in reservations:
            part.remove_stock(qty)
            self._part_repo.update(part)
            logger.debug("Reserved %d x %s for order %s", qty, part.name, order.id)
            updated.append(part)
        return updated

    @staticmethod
    def _required_quantities(order: Order) -> dict[UUID, int]:
        needed: dict[UUID, int] = {}
        for item in order.part_items:
            needed[item.ref_id] = needed.get(item.ref_id, 0) + item.quantity.value
        return needed
