"""Public interface for the ``unicash`` package.

Re-exports the model, the value objects, the parser entry point and the
error taxonomy. No runtime logic lives here.
"""

from .commands import CommandResult
from .errors import (
    CommandError,
    DuplicateTransactionError,
    IndexOutOfBoundsError,
    ParseError,
    StorageError,
    TransactionNotFoundError,
    UniCashError,
    ValidationError,
)
from .logic import LogicManager
from .model import ModelManager
from .models import (
    Amount,
    Categories,
    Category,
    DateTime,
    Location,
    Name,
    Transaction,
    TransactionType,
    Type,
    YearMonth,
)
from .parsing import parse_command
from .unicash import UniCash

__all__ = [
    # Entry points
    "LogicManager",
    "ModelManager",
    "UniCash",
    "parse_command",
    "CommandResult",
    # Value objects
    "Amount",
    "Categories",
    "Category",
    "DateTime",
    "Location",
    "Name",
    "Transaction",
    "TransactionType",
    "Type",
    "YearMonth",
    # Errors
    "CommandError",
    "DuplicateTransactionError",
    "IndexOutOfBoundsError",
    "ParseError",
    "StorageError",
    "TransactionNotFoundError",
    "UniCashError",
    "ValidationError",
]
