"""``help`` and ``exit``."""

from __future__ import annotations

from ..messages import format_usage
from ..model import ModelManager
from .base import Command, CommandResult
from .summary import SummaryCommand
from .transactions import (
    AddTransactionCommand,
    ClearTransactionsCommand,
    DeleteTransactionCommand,
    EditTransactionCommand,
    FindTransactionCommand,
    ListTransactionsCommand,
)


class ExitCommand(Command):
    COMMAND_WORD = "exit"
    MESSAGE_USAGE = format_usage(COMMAND_WORD, "Exits UniCash.")
    MESSAGE_EXIT_ACKNOWLEDGEMENT = "Exiting UniCash as requested ..."

    def execute(self, model: ModelManager) -> CommandResult:
        return CommandResult(self.MESSAGE_EXIT_ACKNOWLEDGEMENT, exit=True)


class HelpCommand(Command):
    COMMAND_WORD = "help"
    MESSAGE_USAGE = format_usage(
        COMMAND_WORD,
        "Shows the available commands, or the usage of one command.",
        arguments=("[COMMAND_WORD]",),
        example=f"{COMMAND_WORD} add_transaction",
    )

    def __init__(self, command_word: str | None = None) -> None:
        self.command_word = command_word

    def execute(self, model: ModelManager) -> CommandResult:
        if self.command_word is not None:
            return CommandResult(USAGES[self.command_word], show_help=True)
        words = "\n".join(f"  {w}" for w in USAGES)
        return CommandResult(
            f"Available commands:\n{words}\nType 'help COMMAND_WORD' for details.",
            show_help=True,
        )


USAGES: dict[str, str] = {
    cls.COMMAND_WORD: cls.MESSAGE_USAGE
    for cls in (
        AddTransactionCommand,
        EditTransactionCommand,
        DeleteTransactionCommand,
        ClearTransactionsCommand,
        FindTransactionCommand,
        ListTransactionsCommand,
        SummaryCommand,
        HelpCommand,
        ExitCommand,
    )
}


__all__ = ["USAGES", "ExitCommand", "HelpCommand"]
