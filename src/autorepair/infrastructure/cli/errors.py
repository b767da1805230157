"""Maps domain exceptions to CLI errors with distinct exit codes."""

from __future__ import annotations

import click

from autorepair.domain.exceptions import (
    DomainException,
    EntityNotFoundError,
    InsufficientStockError,
    InvalidStateTransitionError,
    PersistenceError,
)

EXIT_NOT_FOUND = 2
EXIT_CONFLICT = 3
EXIT_INVALID_TRANSITION = 4
EXIT_STORAGE = 5


class DomainClickException(click.ClickException):

    def __init__(self, message: str, exit_code: int = 1) -> None:
        super().__init__(message)
        self.exit_code = exit_code


def to_click_error(exc: DomainException) -> DomainClickException:
    if isinstance(exc, EntityNotFoundError):
        code = EXIT_NOT_FOUND
    elif isinstance(exc, InsufficientStockError):
        code = EXIT_CONFLICT
    elif isinstance(exc, InvalidStateTransitionError):
        code = EXIT_INVALID_TRANSITION
    elif isinstance(exc, PersistenceError):
        code = EXIT_STORAGE
    else:
        code = 1
    return DomainClickException(str(exc), exit_code=code)
