"""Command protocol and result type."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from typing import ClassVar

from ..model import ModelManager
from ..models import YearMonth


@dataclass(frozen=True, slots=True)
class ExpenseSummary:
    """Expense totals produced by the ``summary`` command."""

    per_category: dict[str, Decimal]
    per_year_month: dict[YearMonth, Decimal]


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Outcome of a successful command, shown to the user."""

    feedback: str
    show_help: bool = False
    exit: bool = False
    summary: ExpenseSummary | None = None


class Command(ABC):
    """A single operation against the model.

    Subclasses validate everything during construction/parsing and in the
    first lines of ``execute`` so a raised error always leaves the model
    unchanged.
    """

    COMMAND_WORD: ClassVar[str]
    MESSAGE_USAGE: ClassVar[str]

    @abstractmethod
    def execute(self, model: ModelManager) -> CommandResult: ...

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return vars(self) == vars(other)

    def __hash__(self) -> int:
        return hash(type(self))

    def __repr__(self) -> str:
        fields = ", ".join(f"{k}={v!r}" for k, v in vars(self).items())
        return f"{type(self).__name__}({fields})"


__all__ = ["Command", "CommandResult", "ExpenseSummary"]
