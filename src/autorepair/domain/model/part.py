"""Part aggregate: an inventory item with stock on hand.

Orders reference parts by id only; stock leaves the shelf when an order
is approved.
"""

from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID, uuid4

from autorepair.domain.exceptions import InsufficientStockError, ValidationError
from autorepair.domain.model.value_objects import Money


@dataclass
class Part:
    """Aggregate root for inventory.

    Invariants:
    - ``quantity`` is never negative
    - ``add_stock`` and ``remove_stock`` are the only stock mutators

    ``version`` is owned by the repository: it is compared on update and
    bumped on every successful write.
    """

    id: UUID
    name: str
    unit_price: Money
    quantity: int = 0
    description: str = ""
    version: int = 0

    @staticmethod
    def create(
        name: str,
        unit_price: Money,
        quantity: int = 0,
        description: str = "",
    ) -> Part:
        if not name or not name.strip():
            raise ValidationError("Part name is required")
        if not isinstance(quantity, int) or isinstance(quantity, bool):
            raise ValidationError(
                f"Part quantity must be an integer, got {type(quantity).__name__}"
            )
        if quantity < 0:
            raise ValidationError("Part quantity cannot be negative")
        return Part(
            id=uuid4(),
            name=name.strip(),
            unit_price=unit_price,
            quantity=quantity,
            description=description,
        )

    def add_stock(self, quantity: int) -> None:
        """Restock the part."""
        if quantity <= 0:
            raise ValidationError("Restock quantity must be positive")
        self.quantity += quantity

    def remove_stock(self, quantity: int) -> None:
        """Take units off the shelf.

        Raises InsufficientStockError, leaving the quantity untouched, when
        fewer than *quantity* units are on hand.
        """
        if quantity <= 0:
            raise ValidationError("Stock removal quantity must be positive")
        if quantity > self.quantity:
            raise InsufficientStockError(self.name, quantity, self.quantity)
        self.quantity -= quantity

    def has_stock(self, quantity: int) -> bool:
        return quantity <= self.quantity
