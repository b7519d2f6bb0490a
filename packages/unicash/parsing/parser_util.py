"""Field-level parsing helpers shared by the command parsers.

Each helper goes through the value object's ``check`` factory and converts a
failed :class:`~unicash.models.FieldCheck` into a :class:`ParseError` carrying
the field's constraint message.
"""

from __future__ import annotations

from collections.abc import Iterable

from ..errors import ParseError, ValidationError
from ..models import Amount, Categories, Category, DateTime, FieldCheck, Location, Name, Type

MESSAGE_INVALID_INDEX = "Index is not a non-zero unsigned integer."
# Checked before int(), which refuses very long digit strings.
_MAX_INDEX_DIGITS = 10


def _unwrap[T](result: FieldCheck[T]) -> T:
    if not result.ok or result.value is None:
        raise ParseError(result.reason or "Invalid value.")
    return result.value


def parse_index(one_based_index: str) -> int:
    """Parse a 1-based index and return it zero-based."""

    trimmed = one_based_index.strip()
    if (
        not trimmed.isascii()
        or not trimmed.isdigit()
        or len(trimmed) > _MAX_INDEX_DIGITS
        or int(trimmed) == 0
    ):
        raise ParseError(MESSAGE_INVALID_INDEX)
    return int(trimmed) - 1


def parse_name(name: str) -> Name:
    return _unwrap(Name.check(name.strip()))


def parse_type(type_: str) -> Type:
    return _unwrap(Type.check(type_.strip()))


def parse_amount(amount: str) -> Amount:
    return _unwrap(Amount.check(amount.strip()))


def parse_date_time(date_time: str) -> DateTime:
    return _unwrap(DateTime.check(date_time.strip()))


def parse_location(location: str) -> Location:
    return _unwrap(Location.check(location.strip()))


def parse_category(category: str) -> Category:
    return _unwrap(Category.check(category.strip()))


def parse_categories(categories: Iterable[str]) -> Categories:
    """Build the category set; an empty ``c/`` clears it when it is the only one."""

    values = list(categories)
    if values == [""]:
        return Categories()
    parsed = [parse_category(c) for c in values]
    try:
        return Categories(parsed)
    except ValidationError as e:
        raise ParseError(e.message) from e


__all__ = [
    "MESSAGE_INVALID_INDEX",
    "parse_amount",
    "parse_categories",
    "parse_category",
    "parse_date_time",
    "parse_index",
    "parse_location",
    "parse_name",
    "parse_type",
]
