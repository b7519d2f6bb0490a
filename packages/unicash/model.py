"""In-memory model facade used by commands.

``ModelManager`` holds the current :class:`~unicash.unicash.UniCash`, the
user preferences, and the predicate behind the displayed (filtered) list.
The filtered list is recomputed from the predicate whenever it is read; no
index is persisted.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from pathlib import Path
from typing import overload

from .logging_setup import get_logger
from .models import Transaction
from .predicates import TransactionPredicate, show_all
from .prefs import GuiSettings, UserPrefs
from .unicash import UniCash

_logger = get_logger("unicash.model")


SHOW_ALL: TransactionPredicate = show_all


class FilteredTransactions(Sequence[Transaction]):
    """Read-only view of the transactions accepted by the current predicate."""

    __slots__ = ("_model",)

    def __init__(self, model: ModelManager) -> None:
        self._model = model

    def _snapshot(self) -> list[Transaction]:
        predicate = self._model.predicate
        return [t for t in self._model.unicash.transaction_list if predicate(t)]

    @overload
    def __getitem__(self, index: int) -> Transaction: ...

    @overload
    def __getitem__(self, index: slice) -> Sequence[Transaction]: ...

    def __getitem__(self, index):
        items = self._snapshot()
        if isinstance(index, slice):
            return tuple(items[index])
        return items[index]

    def __len__(self) -> int:
        return len(self._snapshot())

    def __iter__(self) -> Iterator[Transaction]:
        return iter(self._snapshot())

    def __repr__(self) -> str:
        return f"FilteredTransactions({self._snapshot()!r})"


class ModelManager:
    def __init__(self, unicash: UniCash | None = None, user_prefs: UserPrefs | None = None) -> None:
        self._unicash = UniCash(unicash) if unicash is not None else UniCash()
        self._user_prefs = user_prefs.copy_prefs() if user_prefs is not None else UserPrefs()
        self._predicate: TransactionPredicate = SHOW_ALL
        self._filtered = FilteredTransactions(self)

    # ---- user prefs ---------------------------------------------------------

    @property
    def user_prefs(self) -> UserPrefs:
        return self._user_prefs

    def set_user_prefs(self, user_prefs: UserPrefs) -> None:
        if user_prefs is None:
            raise TypeError("user_prefs must not be None")
        self._user_prefs = user_prefs.copy_prefs()

    @property
    def gui_settings(self) -> GuiSettings:
        return self._user_prefs.gui_settings

    def set_gui_settings(self, gui_settings: GuiSettings) -> None:
        if gui_settings is None:
            raise TypeError("gui_settings must not be None")
        self._user_prefs.gui_settings = gui_settings

    @property
    def unicash_file_path(self) -> Path:
        return self._user_prefs.unicash_file_path

    def set_unicash_file_path(self, path: Path) -> None:
        if path is None:
            raise TypeError("path must not be None")
        self._user_prefs.unicash_file_path = path

    # ---- UniCash ------------------------------------------------------------

    @property
    def unicash(self) -> UniCash:
        return self._unicash

    def set_unicash(self, unicash: UniCash) -> None:
        """Swap in the whole dataset held by ``unicash``."""

        if unicash is None:
            raise TypeError("unicash must not be None")
        self._unicash.reset_data(unicash)
        _logger.debug("dataset replaced (%d transactions)", len(self._unicash.transaction_list))

    def has_transaction(self, transaction: Transaction) -> bool:
        if transaction is None:
            raise TypeError("transaction must not be None")
        return self._unicash.has_transaction(transaction)

    def add_transaction(self, transaction: Transaction) -> None:
        self._unicash.add_transaction(transaction)
        self.update_filtered_transaction_list(SHOW_ALL)

    def delete_transaction(self, target: Transaction) -> None:
        self._unicash.remove_transaction(target)

    def set_transaction(self, target: Transaction, edited: Transaction) -> None:
        self._unicash.set_transaction(target, edited)

    # ---- filtered list ------------------------------------------------------

    @property
    def predicate(self) -> TransactionPredicate:
        return self._predicate

    @property
    def filtered_transactions(self) -> FilteredTransactions:
        return self._filtered

    def update_filtered_transaction_list(self, predicate: TransactionPredicate) -> None:
        if predicate is None:
            raise TypeError("predicate must not be None")
        self._predicate = predicate

    # ---- util ---------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ModelManager):
            return NotImplemented
        return (
            self._unicash == other._unicash
            and self._user_prefs == other._user_prefs
            and list(self._filtered) == list(other._filtered)
        )


__all__ = ["SHOW_ALL", "FilteredTransactions", "ModelManager"]
