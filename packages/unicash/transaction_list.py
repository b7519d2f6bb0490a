"""Ordered, duplicate-rejecting container of transactions.

Outside callers only ever see :class:`ReadOnlyTransactions`, a live view over
the list that cannot mutate it. Presentation code can either ``subscribe`` to
change notifications or poll ``version``.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import overload

from .errors import DuplicateTransactionError, TransactionNotFoundError
from .models import Transaction

type Listener = Callable[["ReadOnlyTransactions"], None]


class ReadOnlyTransactions(Sequence[Transaction]):
    """Live, order-preserving, read-only view of a :class:`TransactionList`."""

    __slots__ = ("_source",)

    def __init__(self, source: TransactionList) -> None:
        self._source = source

    @overload
    def __getitem__(self, index: int) -> Transaction: ...

    @overload
    def __getitem__(self, index: slice) -> Sequence[Transaction]: ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return tuple(self._source._items[index])
        return self._source._items[index]

    def __len__(self) -> int:
        return len(self._source._items)

    def __iter__(self) -> Iterator[Transaction]:
        return iter(tuple(self._source._items))

    @property
    def version(self) -> int:
        return self._source.version

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Sequence):
            return list(self) == list(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"ReadOnlyTransactions({list(self)!r})"


class TransactionList:
    """Transactions in insertion order; no two elements are equal."""

    def __init__(self, transactions: Iterable[Transaction] = ()) -> None:
        self._items: list[Transaction] = []
        self._listeners: list[Listener] = []
        self._version = 0
        self._view = ReadOnlyTransactions(self)
        if transactions:
            self.set_transactions(transactions)

    # ---- queries -------------------------------------------------------------

    def contains(self, transaction: Transaction) -> bool:
        return transaction in self._items

    __contains__ = contains

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Transaction]:
        return iter(tuple(self._items))

    @property
    def version(self) -> int:
        """Incremented on every successful mutation."""

        return self._version

    def as_read_only(self) -> ReadOnlyTransactions:
        return self._view

    # ---- mutations -----------------------------------------------------------

    def add(self, transaction: Transaction) -> None:
        if self.contains(transaction):
            raise DuplicateTransactionError()
        self._items.append(transaction)
        self._changed()

    def set_transaction(self, target: Transaction, edited: Transaction) -> None:
        """Replace ``target`` with ``edited`` at the same position."""

        try:
            index = self._items.index(target)
        except ValueError:
            raise TransactionNotFoundError() from None
        if target != edited and self.contains(edited):
            raise DuplicateTransactionError()
        self._items[index] = edited
        self._changed()

    def remove(self, transaction: Transaction) -> None:
        try:
            self._items.remove(transaction)
        except ValueError:
            raise TransactionNotFoundError() from None
        self._changed()

    def set_transactions(self, transactions: Iterable[Transaction]) -> None:
        """Replace the whole contents; the incoming sequence must be duplicate-free."""

        incoming = list(transactions)
        if len(set(incoming)) != len(incoming):
            raise DuplicateTransactionError("Transactions must not contain duplicates.")
        self._items = incoming
        self._changed()

    # ---- change notification -------------------------------------------------

    def subscribe(self, listener: Listener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _changed(self) -> None:
        self._version += 1
        for listener in list(self._listeners):
            listener(self._view)

    # ---- util ----------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TransactionList):
            return NotImplemented
        return self._items == other._items

    def __hash__(self) -> int:
        return hash(tuple(self._items))

    def __repr__(self) -> str:
        return f"TransactionList({self._items!r})"


__all__ = ["Listener", "ReadOnlyTransactions", "TransactionList"]
