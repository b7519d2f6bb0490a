from decimal import Decimal

import pytest

from unicash.commands import (
    AddTransactionCommand,
    ClearTransactionsCommand,
    DeleteTransactionCommand,
    EditTransactionCommand,
    EditTransactionDescriptor,
    ExitCommand,
    FindTransactionCommand,
    HelpCommand,
    ListTransactionsCommand,
    SummaryCommand,
)
from unicash.errors import ParseError
from unicash.messages import MESSAGE_UNKNOWN_COMMAND, invalid_format
from unicash.models import Amount, Categories, Category, DateTime, Location, Name, Type
from unicash.parsing import parse_command
from unicash.parsing.parser_util import MESSAGE_INVALID_INDEX, parse_index
from unicash.predicates import TransactionContainsKeywordsPredicate
from tests.helpers.builders import BUS, GROCERIES, LUNCH, command_text_for

# ---- command word resolution ----------------------------------------------------


@pytest.mark.parametrize("text", ["", "   "])
def test_empty_input(text):
    with pytest.raises(ParseError) as exc:
        parse_command(text)
    assert exc.value.message == invalid_format(HelpCommand.MESSAGE_USAGE)


@pytest.mark.parametrize("text", ["unknownCommand", "Add_Transaction n/x", "LIST_TRANSACTIONS", "add"])
def test_unknown_or_wrong_case_command_word(text):
    with pytest.raises(ParseError) as exc:
        parse_command(text)
    assert exc.value.message == MESSAGE_UNKNOWN_COMMAND


def test_argument_free_commands():
    assert parse_command("clear_transactions") == ClearTransactionsCommand()
    assert parse_command("list_transactions") == ListTransactionsCommand()
    assert parse_command("list_transaction") == ListTransactionsCommand()
    assert parse_command("summary") == SummaryCommand()
    assert parse_command("exit") == ExitCommand()
    assert parse_command("  help  ") == HelpCommand()


@pytest.mark.parametrize(
    ("text", "usage"),
    [
        ("clear_transactions now", ClearTransactionsCommand.MESSAGE_USAGE),
        ("summary 3", SummaryCommand.MESSAGE_USAGE),
        ("exit please", ExitCommand.MESSAGE_USAGE),
    ],
)
def test_argument_free_commands_reject_trailing_text(text, usage):
    with pytest.raises(ParseError) as exc:
        parse_command(text)
    assert exc.value.message == invalid_format(usage)


def test_help_with_command_word():
    assert parse_command("help add_transaction") == HelpCommand("add_transaction")
    with pytest.raises(ParseError):
        parse_command("help nope")


# ---- add_transaction ------------------------------------------------------------


def test_add_round_trips_typical_transactions():
    for t in (LUNCH, GROCERIES, BUS):
        assert parse_command(command_text_for(t)) == AddTransactionCommand(t)


def test_add_optional_fields_default():
    cmd = parse_command("add_transaction n/Coffee t/expense a/3")
    assert isinstance(cmd, AddTransactionCommand)
    t = cmd.transaction
    assert t.amount.value == Decimal("3.00")
    assert t.location.is_empty
    assert not t.categories
    assert isinstance(t.date_time, DateTime)


def test_add_field_order_does_not_matter():
    a = parse_command("add_transaction n/Coffee t/expense a/3 d/01-01-2024 08:00")
    b = parse_command("add_transaction d/01-01-2024 08:00 a/3 t/EXP n/Coffee")
    assert a == b


def test_add_categories_accumulate():
    cmd = parse_command("add_transaction n/Coffee t/expense a/3 d/01-01-2024 08:00 c/Food c/Drinks c/Food")
    assert cmd.transaction.categories == Categories.of("Drinks", "Food")
    assert [c.value for c in cmd.transaction.categories] == ["Food", "Drinks"]


def test_add_repeated_single_valued_prefix_last_wins():
    cmd = parse_command("add_transaction n/First n/Second t/income t/expense a/1 a/2 d/01-01-2024 08:00")
    t = cmd.transaction
    assert t.name == Name("Second")
    assert t.type == Type("expense")
    assert t.amount == Amount("2")


@pytest.mark.parametrize(
    "text",
    [
        "add_transaction",
        "add_transaction t/expense a/3",
        "add_transaction n/Coffee a/3",
        "add_transaction n/Coffee t/expense",
        "add_transaction stray n/Coffee t/expense a/3",
    ],
)
def test_add_missing_required_or_preamble(text):
    with pytest.raises(ParseError) as exc:
        parse_command(text)
    assert exc.value.message == invalid_format(AddTransactionCommand.MESSAGE_USAGE)


@pytest.mark.parametrize(
    ("text", "constraint"),
    [
        ("add_transaction n/Coffee! t/expense a/3", Name.MESSAGE_CONSTRAINTS),
        ("add_transaction n/Coffee t/spend a/3", Type.MESSAGE_CONSTRAINTS),
        ("add_transaction n/Coffee t/expense a/-3", Amount.MESSAGE_CONSTRAINTS),
        ("add_transaction n/Coffee t/expense a/3.999", Amount.MESSAGE_CONSTRAINTS),
        ("add_transaction n/Coffee t/expense a/" + "9" * 30, Amount.MESSAGE_CONSTRAINTS),
        ("add_transaction n/Coffee t/expense a/1000000000000000", Amount.MESSAGE_CONSTRAINTS),
        ("add_transaction n/Coffee t/expense a/3 d/yesterday", DateTime.MESSAGE_CONSTRAINTS),
        ("add_transaction n/Coffee t/expense a/3 c/Food c/Fast-food", Category.MESSAGE_CONSTRAINTS),
        ("add_transaction n/Coffee t/expense a/3 c/a c/b c/c c/d c/e c/f", Categories.MESSAGE_CONSTRAINTS),
    ],
)
def test_add_field_validation_message_wrapped_with_usage(text, constraint):
    with pytest.raises(ParseError) as exc:
        parse_command(text)
    assert exc.value.message == f"{constraint}\n{AddTransactionCommand.MESSAGE_USAGE}"


def test_add_first_invalid_field_is_reported():
    with pytest.raises(ParseError) as exc:
        parse_command("add_transaction n/Bad! t/nope a/-1")
    assert exc.value.message.startswith(Name.MESSAGE_CONSTRAINTS)


# ---- edit_transaction -----------------------------------------------------------


def test_edit_builds_descriptor_with_only_given_fields():
    cmd = parse_command("edit_transaction 2 a/15 c/Dining")
    assert cmd == EditTransactionCommand(
        1, EditTransactionDescriptor(amount=Amount("15"), categories=Categories.of("Dining"))
    )


def test_edit_empty_category_clears_categories():
    cmd = parse_command("edit_transaction 1 c/")
    assert cmd.descriptor == EditTransactionDescriptor(categories=Categories())


def test_edit_location_and_datetime():
    cmd = parse_command("edit_transaction 1 l/Jurong d/2023-09-01 10:00")
    assert cmd.descriptor.location == Location("Jurong")
    assert cmd.descriptor.date_time == DateTime("01-09-2023 10:00")


@pytest.mark.parametrize(
    "text",
    [
        "edit_transaction n/Lunch",
        "edit_transaction 0 n/Lunch",
        "edit_transaction -1 n/Lunch",
        "edit_transaction a n/x",
        "edit_transaction " + "9" * 5000 + " n/Lunch",
    ],
)
def test_edit_bad_index(text):
    with pytest.raises(ParseError) as exc:
        parse_command(text)
    assert exc.value.message == invalid_format(EditTransactionCommand.MESSAGE_USAGE)


def test_edit_requires_a_field():
    with pytest.raises(ParseError) as exc:
        parse_command("edit_transaction 1")
    assert exc.value.message == EditTransactionCommand.MESSAGE_NOT_EDITED


def test_edit_invalid_field():
    with pytest.raises(ParseError) as exc:
        parse_command("edit_transaction 1 a/abc")
    assert exc.value.message == f"{Amount.MESSAGE_CONSTRAINTS}\n{EditTransactionCommand.MESSAGE_USAGE}"


# ---- delete_transaction ---------------------------------------------------------


def test_delete():
    assert parse_command("delete_transaction 3") == DeleteTransactionCommand(2)
    assert parse_command("delete_transaction    1   ") == DeleteTransactionCommand(0)


@pytest.mark.parametrize("args", ["", "0", "-2", "1.5", "one", "1 2", "１", "1" * 5000])
def test_delete_invalid_index(args):
    with pytest.raises(ParseError) as exc:
        parse_command(f"delete_transaction {args}")
    assert exc.value.message == invalid_format(DeleteTransactionCommand.MESSAGE_USAGE)


def test_parse_index_message():
    with pytest.raises(ParseError) as exc:
        parse_index("0")
    assert exc.value.message == MESSAGE_INVALID_INDEX
    assert parse_index(" 10 ") == 9


def test_parse_index_rejects_overlong_digit_strings():
    assert parse_index("0000000001") == 0
    for text in ("12345678901", "1" * 5000):
        with pytest.raises(ParseError) as exc:
            parse_index(text)
        assert exc.value.message == MESSAGE_INVALID_INDEX


# ---- find_transaction -----------------------------------------------------------


def test_find_collects_keywords():
    cmd = parse_command("find_transaction n/lunch n/dinner c/Food l/clementi")
    assert cmd == FindTransactionCommand(
        TransactionContainsKeywordsPredicate(
            names=("lunch", "dinner"), categories=("Food",), locations=("clementi",)
        )
    )


@pytest.mark.parametrize("text", ["find_transaction", "find_transaction lunch", "find_transaction n/"])
def test_find_invalid(text):
    with pytest.raises(ParseError) as exc:
        parse_command(text)
    assert exc.value.message == invalid_format(FindTransactionCommand.MESSAGE_USAGE)


def test_find_invalid_category():
    with pytest.raises(ParseError) as exc:
        parse_command("find_transaction c/no spaces")
    assert exc.value.message.startswith(Category.MESSAGE_CONSTRAINTS)
