"""Argument prefixes understood by the command language."""

from __future__ import annotations

from typing import NamedTuple


class Prefix(NamedTuple):
    token: str

    def __str__(self) -> str:
        return self.token


PREFIX_NAME = Prefix("n/")
PREFIX_TYPE = Prefix("t/")
PREFIX_AMOUNT = Prefix("a/")
PREFIX_CATEGORY = Prefix("c/")
PREFIX_DATETIME = Prefix("d/")
PREFIX_LOCATION = Prefix("l/")

ALL_PREFIXES: tuple[Prefix, ...] = (
    PREFIX_NAME,
    PREFIX_TYPE,
    PREFIX_AMOUNT,
    PREFIX_CATEGORY,
    PREFIX_DATETIME,
    PREFIX_LOCATION,
)
