"""Value objects and the ``Transaction`` entity.

Each value object is a frozen dataclass that validates in ``__post_init__``;
construction is the only validation point, so an instance that exists is
always valid. Alongside the raising constructor every value object offers a
``check(raw)`` classmethod returning a :class:`FieldCheck`, which lets the
parser handle the failure path explicitly instead of catching exceptions.
"""

from __future__ import annotations

import enum
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field, replace
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, NamedTuple, Self

from .errors import ValidationError

# ---------------------------------------------------------------------------
# Result-style factory return
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class FieldCheck[T]:
    """Outcome of validating one raw field value.

    Exactly one of ``value`` / ``reason`` is set.
    """

    value: T | None = None
    reason: str | None = None

    @property
    def ok(self) -> bool:
        return self.reason is None


def _check[T](factory: type[T], raw: Any) -> FieldCheck[T]:
    try:
        return FieldCheck(value=factory(raw))
    except ValidationError as e:
        return FieldCheck(reason=e.message)


# ---------------------------------------------------------------------------
# Scalar value objects
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Name:
    MESSAGE_CONSTRAINTS = (
        "Names should start with a letter or digit, contain only alphanumeric "
        "characters, spaces and - ( ) & . , ' / and be at most 500 characters long."
    )
    MAX_LENGTH = 500
    _PATTERN = re.compile(r"[A-Za-z0-9][A-Za-z0-9 \-()&.,'/]*")

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.is_valid(self.value):
            raise ValidationError(self.MESSAGE_CONSTRAINTS)

    @classmethod
    def is_valid(cls, test: str) -> bool:
        return len(test) <= cls.MAX_LENGTH and cls._PATTERN.fullmatch(test) is not None

    @classmethod
    def check(cls, raw: Any) -> FieldCheck[Name]:
        return _check(cls, raw)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Amount:
    """Non-negative money amount with at most two decimal places."""

    MESSAGE_CONSTRAINTS = (
        "Amounts must be a non-negative number with at most 2 decimal places, "
        "optionally prefixed with $, and below 10^15."
    )
    MAX_INTEGER_DIGITS = 15
    _PATTERN = re.compile(r"\$?(\d+(\.\d{1,2})?|\.\d{1,2})")
    _CENT = Decimal("0.01")
    _LIMIT = Decimal(10) ** MAX_INTEGER_DIGITS

    value: Decimal

    def __post_init__(self) -> None:
        parsed = self._coerce(self.value)
        if parsed is None:
            raise ValidationError(self.MESSAGE_CONSTRAINTS)
        object.__setattr__(self, "value", parsed.quantize(self._CENT, rounding=ROUND_HALF_UP))

    @classmethod
    def _coerce(cls, raw: Any) -> Decimal | None:
        if isinstance(raw, bool):
            return None
        if isinstance(raw, Decimal):
            d = raw
        elif isinstance(raw, int):
            d = Decimal(raw)
        elif isinstance(raw, str):
            s = raw.strip()
            if not cls._PATTERN.fullmatch(s):
                return None
            try:
                d = Decimal(s.lstrip("$"))
            except InvalidOperation:
                return None
        else:
            return None
        # Beyond the limit quantizing to cents exceeds the decimal context precision.
        if not d.is_finite() or d < 0 or d >= cls._LIMIT:
            return None
        # More than two fraction digits is a format violation, not a rounding case.
        if d != d.quantize(cls._CENT, rounding=ROUND_HALF_UP):
            return None
        return d

    @classmethod
    def is_valid(cls, test: Any) -> bool:
        return cls._coerce(test) is not None

    @classmethod
    def check(cls, raw: Any) -> FieldCheck[Amount]:
        return _check(cls, raw)

    def __str__(self) -> str:
        return f"{self.value:.2f}"


class TransactionType(enum.Enum):
    EXPENSE = "expense"
    INCOME = "income"


_TYPE_SYNONYMS: dict[str, TransactionType] = {
    "expense": TransactionType.EXPENSE,
    "expenses": TransactionType.EXPENSE,
    "exp": TransactionType.EXPENSE,
    "income": TransactionType.INCOME,
    "inc": TransactionType.INCOME,
}


@dataclass(frozen=True, slots=True)
class Type:
    """Transaction type parsed case-insensitively from a few synonyms.

    ``original`` keeps the text as the user typed it; equality only looks at
    the resolved ``kind``.
    """

    MESSAGE_CONSTRAINTS = (
        "Transaction type must be one of: expense (expenses, exp) or income (inc). "
        "Case does not matter."
    )

    original: str
    kind: TransactionType = field(init=False, compare=True)

    def __post_init__(self) -> None:
        if not isinstance(self.original, str):
            raise ValidationError(self.MESSAGE_CONSTRAINTS)
        kind = _TYPE_SYNONYMS.get(self.original.strip().lower())
        if kind is None:
            raise ValidationError(self.MESSAGE_CONSTRAINTS)
        object.__setattr__(self, "kind", kind)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Type):
            return NotImplemented
        return self.kind is other.kind

    def __hash__(self) -> int:
        return hash(self.kind)

    @classmethod
    def is_valid(cls, test: str) -> bool:
        return test.strip().lower() in _TYPE_SYNONYMS

    @classmethod
    def check(cls, raw: Any) -> FieldCheck[Type]:
        return _check(cls, raw)

    @property
    def is_expense(self) -> bool:
        return self.kind is TransactionType.EXPENSE

    def __str__(self) -> str:
        return self.kind.value


@dataclass(frozen=True, slots=True)
class Category:
    MESSAGE_CONSTRAINTS = "Category names should be alphanumeric and up to 15 characters long."
    _PATTERN = re.compile(r"[A-Za-z0-9]{1,15}")

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.is_valid(self.value):
            raise ValidationError(self.MESSAGE_CONSTRAINTS)

    @classmethod
    def is_valid(cls, test: str) -> bool:
        return cls._PATTERN.fullmatch(test) is not None

    @classmethod
    def check(cls, raw: Any) -> FieldCheck[Category]:
        return _check(cls, raw)

    def __str__(self) -> str:
        return self.value


class Categories:
    """Ordered set of categories attached to one transaction.

    Duplicates collapse onto their first occurrence. Display order follows
    insertion; equality and hashing ignore order.
    """

    MAX_SIZE = 5
    MESSAGE_CONSTRAINTS = f"A transaction can have at most {MAX_SIZE} categories."

    __slots__ = ("_items",)

    def __init__(self, categories: Iterable[Category] = ()) -> None:
        items = tuple(dict.fromkeys(categories))
        if len(items) > self.MAX_SIZE:
            raise ValidationError(self.MESSAGE_CONSTRAINTS)
        self._items: tuple[Category, ...] = items

    @classmethod
    def of(cls, *names: str) -> Self:
        return cls(Category(n) for n in names)

    def __iter__(self) -> Iterator[Category]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __bool__(self) -> bool:
        return bool(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Categories):
            return NotImplemented
        return frozenset(self._items) == frozenset(other._items)

    def __hash__(self) -> int:
        return hash(frozenset(self._items))

    def __repr__(self) -> str:
        return f"Categories({[c.value for c in self._items]!r})"

    def __str__(self) -> str:
        return ", ".join(c.value for c in self._items)


class YearMonth(NamedTuple):
    """Aggregation bucket: calendar year and month, ignoring day/time."""

    year: int
    month: int

    def __str__(self) -> str:
        return datetime(self.year, self.month, 1).strftime("%Y %b")


# First entry is the canonical output format.
DATETIME_FORMATS: tuple[str, ...] = (
    "%d-%m-%Y %H:%M",
    "%Y-%m-%d %H:%M",
    "%d %b %Y %H:%M",
)


@dataclass(frozen=True, slots=True)
class DateTime:
    """Calendar date plus time-of-day at minute precision.

    ``original`` keeps the accepted text so the value round-trips through the
    command language unchanged. Equality compares the instant only.
    """

    MESSAGE_CONSTRAINTS = (
        "DateTime must be in one of the formats dd-MM-yyyy HH:mm, yyyy-MM-dd HH:mm "
        "or dd MMM yyyy HH:mm (e.g. 14-08-2023 18:30)."
    )

    original: str
    value: datetime = field(init=False)

    def __post_init__(self) -> None:
        parsed = self._parse(self.original) if isinstance(self.original, str) else None
        if parsed is None:
            raise ValidationError(self.MESSAGE_CONSTRAINTS)
        object.__setattr__(self, "original", self.original.strip())
        object.__setattr__(self, "value", parsed)

    @staticmethod
    def _parse(text: str) -> datetime | None:
        s = " ".join(text.split())
        for fmt in DATETIME_FORMATS:
            try:
                return datetime.strptime(s, fmt)
            except ValueError:
                continue
        return None

    @classmethod
    def from_datetime(cls, moment: datetime) -> DateTime:
        return cls(moment.strftime(DATETIME_FORMATS[0]))

    @classmethod
    def now(cls) -> DateTime:
        return cls.from_datetime(datetime.now())

    @classmethod
    def is_valid(cls, test: str) -> bool:
        return cls._parse(test) is not None

    @classmethod
    def check(cls, raw: Any) -> FieldCheck[DateTime]:
        return _check(cls, raw)

    @property
    def year_month(self) -> YearMonth:
        return YearMonth(self.value.year, self.value.month)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __str__(self) -> str:
        return self.value.strftime(DATETIME_FORMATS[0])


@dataclass(frozen=True, slots=True)
class Location:
    MESSAGE_CONSTRAINTS = (
        "Locations can take any characters, must not start with whitespace and "
        "can be at most 500 characters long."
    )
    MAX_LENGTH = 500
    EMPTY = "-"

    value: str = EMPTY

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.is_valid(self.value):
            raise ValidationError(self.MESSAGE_CONSTRAINTS)
        if self.value == "":
            object.__setattr__(self, "value", self.EMPTY)

    @classmethod
    def is_valid(cls, test: str) -> bool:
        if test == "":
            return True
        return len(test) <= cls.MAX_LENGTH and not test[0].isspace() and "\n" not in test

    @classmethod
    def check(cls, raw: Any) -> FieldCheck[Location]:
        return _check(cls, raw)

    @property
    def is_empty(self) -> bool:
        return self.value == self.EMPTY

    def __str__(self) -> str:
        return self.value


# ---------------------------------------------------------------------------
# Transaction entity
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Transaction:
    """One financial record. Never mutated; edits build a new instance."""

    name: Name
    type: Type
    amount: Amount
    date_time: DateTime
    location: Location = field(default_factory=Location)
    categories: Categories = field(default_factory=Categories)

    @property
    def is_expense(self) -> bool:
        return self.type.is_expense

    def with_changes(self, **changes: Any) -> Transaction:
        """Return a copy with the supplied fields overlaid (``None`` values ignored)."""

        return replace(self, **{k: v for k, v in changes.items() if v is not None})

    def __str__(self) -> str:
        parts = [
            f"Name: {self.name}",
            f"Type: {self.type}",
            f"Amount: ${self.amount}",
            f"Date: {self.date_time}",
            f"Location: {self.location}",
        ]
        if self.categories:
            parts.append(f"Categories: {self.categories}")
        return "; ".join(parts)


__all__ = [
    "DATETIME_FORMATS",
    "Amount",
    "Categories",
    "Category",
    "DateTime",
    "FieldCheck",
    "Location",
    "Name",
    "Transaction",
    "TransactionType",
    "Type",
    "YearMonth",
]
