"""Command objects executed against :class:`~unicash.model.ModelManager`."""

from .base import Command, CommandResult, ExpenseSummary
from .general import USAGES, ExitCommand, HelpCommand
from .summary import SummaryCommand, render_summary
from .transactions import (
    AddTransactionCommand,
    ClearTransactionsCommand,
    DeleteTransactionCommand,
    EditTransactionCommand,
    EditTransactionDescriptor,
    FindTransactionCommand,
    ListTransactionsCommand,
)

__all__ = [
    "USAGES",
    "AddTransactionCommand",
    "ClearTransactionsCommand",
    "Command",
    "CommandResult",
    "DeleteTransactionCommand",
    "EditTransactionCommand",
    "EditTransactionDescriptor",
    "ExitCommand",
    "ExpenseSummary",
    "FindTransactionCommand",
    "HelpCommand",
    "ListTransactionsCommand",
    "SummaryCommand",
    "render_summary",
]
