"""Command-language parsing: command word lookup, tokenizing, validation."""

from __future__ import annotations

import re

from ..commands import (
    AddTransactionCommand,
    ClearTransactionsCommand,
    Command,
    DeleteTransactionCommand,
    EditTransactionCommand,
    ExitCommand,
    FindTransactionCommand,
    HelpCommand,
    ListTransactionsCommand,
    SummaryCommand,
)
from ..errors import ParseError
from ..messages import MESSAGE_UNKNOWN_COMMAND, invalid_format
from . import command_parsers as _p
from .command_parsers import CommandParser

_BASIC_COMMAND_FORMAT = re.compile(r"(?P<command_word>\S+)(?P<arguments>.*)", re.DOTALL)

# Closed, case-sensitive registry of command words.
COMMAND_PARSERS: dict[str, CommandParser] = {
    AddTransactionCommand.COMMAND_WORD: _p.parse_add_transaction,
    EditTransactionCommand.COMMAND_WORD: _p.parse_edit_transaction,
    DeleteTransactionCommand.COMMAND_WORD: _p.parse_delete_transaction,
    ClearTransactionsCommand.COMMAND_WORD: _p.parse_clear_transactions,
    FindTransactionCommand.COMMAND_WORD: _p.parse_find_transaction,
    ListTransactionsCommand.COMMAND_WORD: _p.parse_list_transactions,
    "list_transaction": _p.parse_list_transactions,
    SummaryCommand.COMMAND_WORD: _p.parse_summary,
    HelpCommand.COMMAND_WORD: _p.parse_help,
    ExitCommand.COMMAND_WORD: _p.parse_exit,
}


def parse_command(user_input: str) -> Command:
    """Parse one line of user input into a command.

    Raises
    ------
    ParseError
        On empty input, an unknown command word, or arguments that do not
        fit the command's grammar.
    """

    match = _BASIC_COMMAND_FORMAT.fullmatch(user_input.strip())
    if match is None:
        raise ParseError(invalid_format(HelpCommand.MESSAGE_USAGE))

    parser = COMMAND_PARSERS.get(match.group("command_word"))
    if parser is None:
        raise ParseError(MESSAGE_UNKNOWN_COMMAND)
    return parser(match.group("arguments"))


__all__ = ["COMMAND_PARSERS", "parse_command"]
