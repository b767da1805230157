"""Client and Vehicle aggregates.

A vehicle belongs to exactly one client; an order references both.

``update()`` on either aggregate takes only the fields to change: a
``None`` or blank value keeps the current one.  Every new value is
validated before any field is touched.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID, uuid4

from autorepair.domain.exceptions import ValidationError
from autorepair.domain.model.value_objects import Document, LicensePlate, is_nil_id

MIN_VEHICLE_YEAR = 1900


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _given(value: str | None) -> bool:
    return value is not None and value.strip() != ""


def _check_year(year: int) -> None:
    max_year = _utcnow().year + 1
    if year < MIN_VEHICLE_YEAR or year > max_year:
        raise ValidationError(
            f"Invalid year {year}: must be between {MIN_VEHICLE_YEAR} and {max_year}"
        )


@dataclass
class Client:

    id: UUID
    name: str
    document: Document
    email: str = ""
    phone: str = ""
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    @staticmethod
    def create(name: str, document: str, email: str = "", phone: str = "") -> Client:
        """Register a new client; the document must be a valid CPF or CNPJ."""
        if not name or not name.strip():
            raise ValidationError("Client name is required")
        return Client(
            id=uuid4(),
            name=name.strip(),
            document=Document(document),
            email=email.strip(),
            phone=phone.strip(),
        )

    def update(
        self,
        name: str | None = None,
        document: str | None = None,
        email: str | None = None,
        phone: str | None = None,
    ) -> None:
        new_document = Document(document) if _given(document) else self.document
        if _given(name):
            self.name = name.strip()
        self.document = new_document
        if _given(email):
            self.email = email.strip()
        if _given(phone):
            self.phone = phone.strip()
        self.updated_at = _utcnow()


@dataclass
class Vehicle:

    id: UUID
    client_id: UUID
    plate: LicensePlate
    brand: str
    model: str
    year: int
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    @staticmethod
    def create(
        client_id: UUID,
        plate: str,
        brand: str,
        model: str,
        year: int,
    ) -> Vehicle:
        if is_nil_id(client_id):
            raise ValidationError("Client id is required")
        if not brand or not brand.strip() or not model or not model.strip():
            raise ValidationError("Brand and model are required")
        _check_year(year)
        return Vehicle(
            id=uuid4(),
            client_id=client_id,
            plate=LicensePlate(plate),
            brand=brand.strip(),
            model=model.strip(),
            year=year,
        )

    def update(
        self,
        client_id: UUID | None = None,
        plate: str | None = None,
        brand: str | None = None,
        model: str | None = None,
        year: int | None = None,
    ) -> None:
        """Change the given fields; a new owner must be checked by the caller."""
        new_plate = LicensePlate(plate) if _given(plate) else self.plate
        if year is not None:
            _check_year(year)
            self.year = year
        if not is_nil_id(client_id):
            self.client_id = client_id  # type: ignore[assignment]
        self.plate = new_plate
        if _given(brand):
            self.brand = brand.strip()
        if _given(model):
            self.model = model.strip()
        self.updated_at = _utcnow()
