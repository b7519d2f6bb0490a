"""Predicates used to filter the displayed transaction list."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from .models import Transaction

type TransactionPredicate = Callable[[Transaction], bool]


def show_all(_transaction: Transaction) -> bool:
    return True


def _contains_any(text: str, keywords: Sequence[str]) -> bool:
    haystack = text.lower()
    return any(k.lower() in haystack for k in keywords)


@dataclass(frozen=True, slots=True)
class TransactionContainsKeywordsPredicate:
    """Matches when every non-empty keyword group matches its field.

    - ``names``: name contains any keyword (case-insensitive substring)
    - ``categories``: any category equals a keyword (case-insensitive)
    - ``locations``: location contains any keyword (case-insensitive substring)
    """

    names: tuple[str, ...] = ()
    categories: tuple[str, ...] = ()
    locations: tuple[str, ...] = ()

    def __call__(self, transaction: Transaction) -> bool:
        if self.names and not _contains_any(transaction.name.value, self.names):
            return False
        if self.categories:
            wanted = {c.lower() for c in self.categories}
            if not any(c.value.lower() in wanted for c in transaction.categories):
                return False
        if self.locations:
            if transaction.location.is_empty:
                return False
            if not _contains_any(transaction.location.value, self.locations):
                return False
        return True


__all__ = ["TransactionContainsKeywordsPredicate", "TransactionPredicate", "show_all"]
