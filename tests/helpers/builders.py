"""Transaction builders and a small set of typical transactions for tests."""

from __future__ import annotations

from unicash.models import Amount, Categories, Category, DateTime, Location, Name, Transaction, Type
from unicash.unicash import UniCash


def make_transaction(
    name: str = "Lunch",
    type_: str = "expense",
    amount: str = "12.50",
    date_time: str = "14-08-2023 12:30",
    location: str = "Clementi",
    categories: tuple[str, ...] = ("Food",),
) -> Transaction:
    return Transaction(
        name=Name(name),
        type=Type(type_),
        amount=Amount(amount),
        date_time=DateTime(date_time),
        location=Location(location),
        categories=Categories(Category(c) for c in categories),
    )


def command_text_for(transaction: Transaction) -> str:
    """The ``add_transaction`` line that would recreate ``transaction``."""

    parts = [
        "add_transaction",
        f"n/{transaction.name}",
        f"t/{transaction.type.original}",
        f"a/{transaction.amount}",
        f"d/{transaction.date_time.original}",
        f"l/{transaction.location}",
    ]
    parts += [f"c/{c}" for c in transaction.categories]
    return " ".join(parts)


LUNCH = make_transaction()
GROCERIES = make_transaction(
    name="Buying groceries",
    amount="20.00",
    date_time="20-08-2023 18:00",
    location="NTUC",
    categories=("Food", "Household"),
)
SALARY = make_transaction(
    name="Part-time pay",
    type_="income",
    amount="100.00",
    date_time="01-08-2023 09:00",
    location="NUS",
    categories=("Work",),
)
BUS = make_transaction(
    name="Bus fare",
    amount="1.80",
    date_time="02-09-2023 08:15",
    location="-",
    categories=(),
)


def typical_unicash() -> UniCash:
    unicash = UniCash()
    for t in (LUNCH, GROCERIES, SALARY, BUS):
        unicash.add_transaction(t)
    return unicash
