"""Commands that add, change, remove, and filter transactions."""

from __future__ import annotations

from dataclasses import dataclass

from ..errors import DuplicateTransactionError, IndexOutOfBoundsError
from ..logging_setup import get_logger
from ..messages import (
    MESSAGE_DUPLICATE_TRANSACTION,
    MESSAGE_INVALID_TRANSACTION_DISPLAYED_INDEX,
    MESSAGE_TRANSACTIONS_LISTED_OVERVIEW,
    format_usage,
)
from ..model import SHOW_ALL, ModelManager
from ..models import Amount, Categories, DateTime, Location, Name, Transaction, Type
from ..predicates import TransactionContainsKeywordsPredicate
from ..unicash import UniCash
from .base import Command, CommandResult

_logger = get_logger("unicash.commands")


def _target_at(model: ModelManager, index: int) -> Transaction:
    shown = list(model.filtered_transactions)
    if index < 0 or index >= len(shown):
        raise IndexOutOfBoundsError(MESSAGE_INVALID_TRANSACTION_DISPLAYED_INDEX)
    return shown[index]


class AddTransactionCommand(Command):
    COMMAND_WORD = "add_transaction"
    MESSAGE_USAGE = format_usage(
        COMMAND_WORD,
        "Adds a transaction to UniCash.",
        arguments=("n/NAME", "t/TYPE", "a/AMOUNT", "[d/DATETIME]", "[l/LOCATION]", "[c/CATEGORY]..."),
        example=(
            f"{COMMAND_WORD} n/Lunch at Mala t/expense a/12.50 "
            "d/14-08-2023 12:30 l/Clementi c/Food c/Social"
        ),
    )
    MESSAGE_SUCCESS = "New transaction added: {}"

    def __init__(self, transaction: Transaction) -> None:
        self.transaction = transaction

    def execute(self, model: ModelManager) -> CommandResult:
        if model.has_transaction(self.transaction):
            raise DuplicateTransactionError(MESSAGE_DUPLICATE_TRANSACTION)
        model.add_transaction(self.transaction)
        _logger.debug("added transaction %r", self.transaction.name.value)
        return CommandResult(self.MESSAGE_SUCCESS.format(self.transaction))


@dataclass(frozen=True, slots=True)
class EditTransactionDescriptor:
    """Fields supplied to ``edit_transaction``; ``None`` means unchanged."""

    name: Name | None = None
    type: Type | None = None
    amount: Amount | None = None
    date_time: DateTime | None = None
    location: Location | None = None
    categories: Categories | None = None

    def is_any_field_edited(self) -> bool:
        return any(
            v is not None
            for v in (self.name, self.type, self.amount, self.date_time, self.location, self.categories)
        )

    def apply_to(self, transaction: Transaction) -> Transaction:
        return transaction.with_changes(
            name=self.name,
            type=self.type,
            amount=self.amount,
            date_time=self.date_time,
            location=self.location,
            categories=self.categories,
        )


class EditTransactionCommand(Command):
    COMMAND_WORD = "edit_transaction"
    MESSAGE_USAGE = format_usage(
        COMMAND_WORD,
        "Edits the transaction identified by its index in the displayed list. "
        "Only the given fields change; c/ replaces all categories.",
        arguments=(
            "INDEX",
            "[n/NAME]",
            "[t/TYPE]",
            "[a/AMOUNT]",
            "[d/DATETIME]",
            "[l/LOCATION]",
            "[c/CATEGORY]...",
        ),
        example=f"{COMMAND_WORD} 2 a/15.00 c/Dining",
    )
    MESSAGE_SUCCESS = "Edited transaction: {}"
    MESSAGE_NOT_EDITED = "At least one field to edit must be provided."

    def __init__(self, index: int, descriptor: EditTransactionDescriptor) -> None:
        self.index = index
        self.descriptor = descriptor

    def execute(self, model: ModelManager) -> CommandResult:
        target = _target_at(model, self.index)
        edited = self.descriptor.apply_to(target)
        if edited != target and model.has_transaction(edited):
            raise DuplicateTransactionError(MESSAGE_DUPLICATE_TRANSACTION)
        model.set_transaction(target, edited)
        model.update_filtered_transaction_list(SHOW_ALL)
        return CommandResult(self.MESSAGE_SUCCESS.format(edited))


class DeleteTransactionCommand(Command):
    COMMAND_WORD = "delete_transaction"
    MESSAGE_USAGE = format_usage(
        COMMAND_WORD,
        "Deletes the transaction identified by its index in the displayed list.",
        arguments=("INDEX",),
        example=f"{COMMAND_WORD} 1",
    )
    MESSAGE_SUCCESS = "Deleted transaction: {}"

    def __init__(self, index: int) -> None:
        self.index = index

    def execute(self, model: ModelManager) -> CommandResult:
        target = _target_at(model, self.index)
        model.delete_transaction(target)
        return CommandResult(self.MESSAGE_SUCCESS.format(target))


class ClearTransactionsCommand(Command):
    COMMAND_WORD = "clear_transactions"
    MESSAGE_USAGE = format_usage(COMMAND_WORD, "Clears all existing transactions.")
    MESSAGE_SUCCESS = "All transactions have been cleared!"

    def execute(self, model: ModelManager) -> CommandResult:
        model.set_unicash(UniCash())
        _logger.info("all transactions cleared")
        return CommandResult(self.MESSAGE_SUCCESS)


class FindTransactionCommand(Command):
    COMMAND_WORD = "find_transaction"
    MESSAGE_USAGE = format_usage(
        COMMAND_WORD,
        "Shows transactions matching every given field: name or location containing "
        "a keyword, or a category equal to one (case-insensitive).",
        arguments=("[n/NAME]...", "[c/CATEGORY]...", "[l/LOCATION]..."),
        example=f"{COMMAND_WORD} n/lunch c/Food",
    )

    def __init__(self, predicate: TransactionContainsKeywordsPredicate) -> None:
        self.predicate = predicate

    def execute(self, model: ModelManager) -> CommandResult:
        model.update_filtered_transaction_list(self.predicate)
        shown = len(model.filtered_transactions)
        return CommandResult(MESSAGE_TRANSACTIONS_LISTED_OVERVIEW.format(shown))


class ListTransactionsCommand(Command):
    COMMAND_WORD = "list_transactions"
    MESSAGE_USAGE = format_usage(COMMAND_WORD, "Lists all transactions.")
    MESSAGE_SUCCESS = "Listed all transactions"

    def execute(self, model: ModelManager) -> CommandResult:
        model.update_filtered_transaction_list(SHOW_ALL)
        return CommandResult(self.MESSAGE_SUCCESS)


__all__ = [
    "AddTransactionCommand",
    "ClearTransactionsCommand",
    "DeleteTransactionCommand",
    "EditTransactionCommand",
    "EditTransactionDescriptor",
    "FindTransactionCommand",
    "ListTransactionsCommand",
]
