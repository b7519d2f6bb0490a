"""One parser per command word.

Every parser receives the text after the command word and either returns a
fully built command or raises :class:`ParseError`. Structural problems
(missing prefixes, bad index, stray text) report "Invalid command format!"
plus the usage; a field that fails validation reports its constraint message
followed by the usage.
"""

from __future__ import annotations

from collections.abc import Callable

from ..commands import (
    USAGES,
    AddTransactionCommand,
    ClearTransactionsCommand,
    Command,
    DeleteTransactionCommand,
    EditTransactionCommand,
    EditTransactionDescriptor,
    ExitCommand,
    FindTransactionCommand,
    HelpCommand,
    ListTransactionsCommand,
    SummaryCommand,
)
from ..errors import ParseError
from ..messages import invalid_format
from ..models import DateTime, Location, Transaction
from ..predicates import TransactionContainsKeywordsPredicate
from . import parser_util
from .cli_syntax import (
    PREFIX_AMOUNT,
    PREFIX_CATEGORY,
    PREFIX_DATETIME,
    PREFIX_LOCATION,
    PREFIX_NAME,
    PREFIX_TYPE,
    Prefix,
)
from .tokenizer import ArgumentMultimap, tokenize

type CommandParser = Callable[[str], Command]


def _field_error(err: ParseError, usage: str) -> ParseError:
    return ParseError(f"{err.message}\n{usage}")


def _optional[T](multimap: ArgumentMultimap, prefix: Prefix, parse: Callable[[str], T]) -> T | None:
    raw = multimap.value(prefix)
    return parse(raw) if raw is not None else None


def parse_add_transaction(args: str) -> AddTransactionCommand:
    usage = AddTransactionCommand.MESSAGE_USAGE
    m = tokenize(
        args,
        PREFIX_NAME,
        PREFIX_TYPE,
        PREFIX_AMOUNT,
        PREFIX_DATETIME,
        PREFIX_LOCATION,
        PREFIX_CATEGORY,
    )
    if not m.has_all(PREFIX_NAME, PREFIX_TYPE, PREFIX_AMOUNT) or m.preamble:
        raise ParseError(invalid_format(usage))

    try:
        transaction = Transaction(
            name=parser_util.parse_name(m.value(PREFIX_NAME) or ""),
            type=parser_util.parse_type(m.value(PREFIX_TYPE) or ""),
            amount=parser_util.parse_amount(m.value(PREFIX_AMOUNT) or ""),
            date_time=_optional(m, PREFIX_DATETIME, parser_util.parse_date_time) or DateTime.now(),
            location=_optional(m, PREFIX_LOCATION, parser_util.parse_location) or Location(),
            categories=parser_util.parse_categories(m.all_values(PREFIX_CATEGORY)),
        )
    except ParseError as e:
        raise _field_error(e, usage) from e
    return AddTransactionCommand(transaction)


def parse_edit_transaction(args: str) -> EditTransactionCommand:
    usage = EditTransactionCommand.MESSAGE_USAGE
    m = tokenize(
        args,
        PREFIX_NAME,
        PREFIX_TYPE,
        PREFIX_AMOUNT,
        PREFIX_DATETIME,
        PREFIX_LOCATION,
        PREFIX_CATEGORY,
    )
    try:
        index = parser_util.parse_index(m.preamble)
    except ParseError as e:
        raise ParseError(invalid_format(usage)) from e

    try:
        descriptor = EditTransactionDescriptor(
            name=_optional(m, PREFIX_NAME, parser_util.parse_name),
            type=_optional(m, PREFIX_TYPE, parser_util.parse_type),
            amount=_optional(m, PREFIX_AMOUNT, parser_util.parse_amount),
            date_time=_optional(m, PREFIX_DATETIME, parser_util.parse_date_time),
            location=_optional(m, PREFIX_LOCATION, parser_util.parse_location),
            categories=(
                parser_util.parse_categories(m.all_values(PREFIX_CATEGORY))
                if m.has(PREFIX_CATEGORY)
                else None
            ),
        )
    except ParseError as e:
        raise _field_error(e, usage) from e

    if not descriptor.is_any_field_edited():
        raise ParseError(EditTransactionCommand.MESSAGE_NOT_EDITED)
    return EditTransactionCommand(index, descriptor)


def parse_delete_transaction(args: str) -> DeleteTransactionCommand:
    try:
        index = parser_util.parse_index(args)
    except ParseError as e:
        raise ParseError(invalid_format(DeleteTransactionCommand.MESSAGE_USAGE)) from e
    return DeleteTransactionCommand(index)


def parse_find_transaction(args: str) -> FindTransactionCommand:
    usage = FindTransactionCommand.MESSAGE_USAGE
    m = tokenize(args, PREFIX_NAME, PREFIX_CATEGORY, PREFIX_LOCATION)
    if m.preamble or not m.has_any(PREFIX_NAME, PREFIX_CATEGORY, PREFIX_LOCATION):
        raise ParseError(invalid_format(usage))

    names = tuple(m.all_values(PREFIX_NAME))
    locations = tuple(m.all_values(PREFIX_LOCATION))
    if any(not v for v in (*names, *locations)):
        raise ParseError(invalid_format(usage))
    try:
        categories = tuple(parser_util.parse_category(c).value for c in m.all_values(PREFIX_CATEGORY))
    except ParseError as e:
        raise _field_error(e, usage) from e

    return FindTransactionCommand(
        TransactionContainsKeywordsPredicate(names=names, categories=categories, locations=locations)
    )


def parse_help(args: str) -> HelpCommand:
    word = args.strip()
    if not word:
        return HelpCommand()
    if word not in USAGES:
        raise ParseError(invalid_format(HelpCommand.MESSAGE_USAGE))
    return HelpCommand(word)


def _no_arguments[C: Command](factory: type[C]) -> Callable[[str], C]:
    def _parse(args: str) -> C:
        if args.strip():
            raise ParseError(invalid_format(factory.MESSAGE_USAGE))
        return factory()

    _parse.__name__ = f"parse_{factory.COMMAND_WORD}"
    return _parse


parse_clear_transactions = _no_arguments(ClearTransactionsCommand)
parse_list_transactions = _no_arguments(ListTransactionsCommand)
parse_summary = _no_arguments(SummaryCommand)
parse_exit = _no_arguments(ExitCommand)


__all__ = [
    "CommandParser",
    "parse_add_transaction",
    "parse_clear_transactions",
    "parse_delete_transaction",
    "parse_edit_transaction",
    "parse_exit",
    "parse_find_transaction",
    "parse_help",
    "parse_list_transactions",
    "parse_summary",
]
