"""LaborService aggregate: a priced unit of shop work (the "services" catalog)."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID, uuid4

from autorepair.domain.exceptions import ValidationError
from autorepair.domain.model.value_objects import Money


@dataclass
class LaborService:

    id: UUID
    name: str
    price: Money
    description: str = ""
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(name: str, price: Money, description: str = "") -> LaborService:
        if not name or not name.strip():
            raise ValidationError("Service name is required")
        return LaborService(id=uuid4(), name=name.strip(), price=price, description=description)

    def update(
        self,
        name: str | None = None,
        description: str | None = None,
        price: Money | None = None,
    ) -> None:
        """Change the given fields; a ``None`` or blank value keeps the current one."""
        if name is not None and name.strip():
            self.name = name.strip()
        if description is not None and description.strip():
            self.description = description.strip()
        if price is not None:
            self.update_price(price)
        self.updated_at = datetime.now(timezone.utc)

    def update_price(self, new_price: Money) -> None:
        """Change the price; orders already holding this service are unaffected."""
        self.price = new_price
        self.updated_at = datetime.now(timezone.utc)
