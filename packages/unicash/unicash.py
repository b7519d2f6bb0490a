"""The ``UniCash`` aggregate: the whole dataset, swapped wholesale on load/clear."""

from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal

from .models import Transaction, YearMonth
from .transaction_list import ReadOnlyTransactions, TransactionList

UNCATEGORIZED = "Uncategorized"


class UniCash:
    """Owns exactly one :class:`TransactionList`."""

    def __init__(self, to_be_copied: UniCash | None = None) -> None:
        self._transactions = TransactionList()
        if to_be_copied is not None:
            self.reset_data(to_be_copied)

    # ---- list overwrite operations ------------------------------------------

    def set_transactions(self, transactions: Iterable[Transaction]) -> None:
        self._transactions.set_transactions(transactions)

    def reset_data(self, new_data: UniCash) -> None:
        """Replace all transactions with the ones held by ``new_data``."""

        self.set_transactions(new_data.transaction_list)

    # ---- transaction-level operations ---------------------------------------

    def has_transaction(self, transaction: Transaction) -> bool:
        return self._transactions.contains(transaction)

    def add_transaction(self, transaction: Transaction) -> None:
        self._transactions.add(transaction)

    def set_transaction(self, target: Transaction, edited: Transaction) -> None:
        self._transactions.set_transaction(target, edited)

    def remove_transaction(self, transaction: Transaction) -> None:
        self._transactions.remove(transaction)

    @property
    def transaction_list(self) -> ReadOnlyTransactions:
        return self._transactions.as_read_only()

    # ---- summaries ----------------------------------------------------------

    def _expenses(self) -> list[Transaction]:
        return [t for t in self.transaction_list if t.is_expense]

    def sum_of_expense_per_year_month(self) -> dict[YearMonth, Decimal]:
        """Total expense amount per calendar month. Income is ignored."""

        totals: dict[YearMonth, Decimal] = {}
        for t in self._expenses():
            key = t.date_time.year_month
            totals[key] = totals.get(key, Decimal("0")) + t.amount.value
        return totals

    def sum_of_expense_per_category(self) -> dict[str, Decimal]:
        """Total expense amount per category name. Income is ignored.

        A transaction counts in full towards each of its categories; one
        without categories counts towards ``"Uncategorized"``.
        """

        totals: dict[str, Decimal] = {}
        for t in self._expenses():
            keys = [c.value for c in t.categories] or [UNCATEGORIZED]
            for key in keys:
                totals[key] = totals.get(key, Decimal("0")) + t.amount.value
        return totals

    # ---- util ---------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UniCash):
            return NotImplemented
        return self._transactions == other._transactions

    def __hash__(self) -> int:
        return hash(self._transactions)

    def __repr__(self) -> str:
        return f"UniCash(transactions={list(self.transaction_list)!r})"


__all__ = ["UNCATEGORIZED", "UniCash"]
