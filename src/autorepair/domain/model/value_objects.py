"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from uuid import UUID

from autorepair.domain.exceptions import ValidationError

DEFAULT_CURRENCY = "BRL"
NIL_ID = UUID(int=0)


def is_nil_id(value: UUID | None) -> bool:
    """True for a missing or all-zero identifier."""
    return value is None or value == NIL_ID


@dataclass(frozen=True)
class Money:
    """Non-negative monetary amount.

    Uses Decimal so repeated additions over order items never drift.
    """

    amount: Decimal
    currency: str = DEFAULT_CURRENCY

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def __mul__(self, factor: int) -> Money:
        if not isinstance(factor, int) or isinstance(factor, bool):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.amount * factor, self.currency)

    def __str__(self) -> str:
        symbol = "R$ " if self.currency == "BRL" else f"{self.currency} "
        return f"{symbol}{self.amount:.2f}"

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValidationError(
                f"Cannot combine {self.currency} with {other.currency}"
            )

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def zero(currency: str = DEFAULT_CURRENCY) -> Money:
        return Money(Decimal("0.00"), currency)

    @staticmethod
    def of(amount: str | float | int | Decimal, currency: str = DEFAULT_CURRENCY) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        try:
            value = Decimal(str(amount))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc
        if not value.is_finite():
            raise ValidationError(f"Invalid money amount: {amount!r}")
        return Money(value, currency)


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity."""

    value: int

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise ValidationError("Quantity must be positive")

    def __str__(self) -> str:
        return str(self.value)


# ---------------------------------------------------------------------------
# Brazilian registration documents and plates
# ---------------------------------------------------------------------------

_NON_DIGITS = re.compile(r"[^0-9]")
_CNPJ_WEIGHTS_1 = (5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)
_CNPJ_WEIGHTS_2 = (6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)


def _check_digit(digits: str, weights: tuple[int, ...] | range) -> int:
    total = sum(int(d) * w for d, w in zip(digits, weights))
    remainder = total % 11
    return 0 if remainder < 2 else 11 - remainder


def _is_valid_cpf(cpf: str) -> bool:
    if len(set(cpf)) == 1:
        return False
    if _check_digit(cpf[:9], range(10, 1, -1)) != int(cpf[9]):
        return False
    return _check_digit(cpf[:10], range(11, 1, -1)) == int(cpf[10])


def _is_valid_cnpj(cnpj: str) -> bool:
    if len(set(cnpj)) == 1:
        return False
    if _check_digit(cnpj[:12], _CNPJ_WEIGHTS_1) != int(cnpj[12]):
        return False
    return _check_digit(cnpj[:13], _CNPJ_WEIGHTS_2) == int(cnpj[13])


@dataclass(frozen=True)
class Document:
    """Client tax document: a CPF (11 digits) or CNPJ (14 digits).

    Punctuation is stripped; only the digits are kept.
    """

    value: str

    def __post_init__(self) -> None:
        clean = _NON_DIGITS.sub("", self.value or "")
        if len(clean) == 11:
            valid = _is_valid_cpf(clean)
        elif len(clean) == 14:
            valid = _is_valid_cnpj(clean)
        else:
            valid = False
        if not valid:
            raise ValidationError(f"Invalid document: {self.value!r}")
        object.__setattr__(self, "value", clean)

    @property
    def is_company(self) -> bool:
        return len(self.value) == 14

    def __str__(self) -> str:
        return self.value


_LEGACY_PLATE = re.compile(r"^[A-Z]{3}[0-9]{4}$")
_MERCOSUL_PLATE = re.compile(r"^[A-Z]{3}[0-9][A-Z][0-9]{2}$")


@dataclass(frozen=True)
class LicensePlate:
    """Vehicle plate in legacy (AAA1234) or Mercosul (AAA1A23) format."""

    value: str

    def __post_init__(self) -> None:
        normalized = (self.value or "").replace("-", "").upper()
        if not (_LEGACY_PLATE.match(normalized) or _MERCOSUL_PLATE.match(normalized)):
            raise ValidationError(f"Invalid plate: {self.value!r}")
        object.__setattr__(self, "value", normalized)

    @property
    def is_mercosul(self) -> bool:
        return bool(_MERCOSUL_PLATE.match(self.value))

    def __str__(self) -> str:
        return self.value
