"""Exception taxonomy for ``unicash``.

Every error raised by the core derives from :class:`UniCashError` so the
single top-level dispatcher (the CLI loop) can catch them in one place and
turn them into a user-visible message. None of them are fatal: validation
always runs before any mutation, so the model is unchanged when one is
raised.
"""

from __future__ import annotations


class UniCashError(Exception):
    """Base class for all user-facing errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ValidationError(UniCashError, ValueError):
    """A single field value violates its format or range."""


class ParseError(UniCashError):
    """Command text does not match the expected grammar."""


class CommandError(UniCashError):
    """A parsed command could not be applied to the model."""


class DuplicateTransactionError(CommandError):
    """Adding/editing would create a value-equal duplicate transaction."""

    def __init__(self, message: str = "This transaction already exists in UniCash.") -> None:
        super().__init__(message)


class IndexOutOfBoundsError(CommandError):
    """Edit/delete index lies outside the currently displayed list."""

    def __init__(self, message: str = "The transaction index provided is invalid.") -> None:
        super().__init__(message)


class TransactionNotFoundError(CommandError):
    """The transaction to remove or replace is not in the list."""

    def __init__(self, message: str = "The transaction could not be found.") -> None:
        super().__init__(message)


class StorageError(UniCashError):
    """Reading or writing the on-disk data failed."""


__all__ = [
    "CommandError",
    "DuplicateTransactionError",
    "IndexOutOfBoundsError",
    "ParseError",
    "StorageError",
    "TransactionNotFoundError",
    "UniCashError",
    "ValidationError",
]
