"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and map each kind to a message
and exit code.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Malformed input or a violated invariant."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class InvalidStateTransitionError(DomainException):
    """An order operation was attempted from the wrong status."""

    def __init__(self, operation: str, current: str, required: tuple[str, ...]) -> None:
        self.operation = operation
        self.current = current
        self.required = required
        expected = " or ".join(f"'{status}'" for status in required)
        super().__init__(
            f"Cannot {operation}: order is '{current}', "
            f"must be {expected}"
        )


class InsufficientStockError(DomainException):
    """A part does not have enough units on hand."""

    def __init__(self, part_name: str, requested: int, available: int) -> None:
        self.part_name = part_name
        self.requested = requested
        self.available = available
        super().__init__(
            f"Insufficient stock for {part_name} "
            f"(need {requested}, have {available})"
        )


class PersistenceError(DomainException):
    """The storage layer failed to read or write a record."""


class ConcurrencyError(PersistenceError):
    """A record changed between load and update."""


class NotificationError(DomainException):
    """A notifier could not deliver a message."""
