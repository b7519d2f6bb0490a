"""JSON persistence for the dataset and the user preferences.

On-disk shapes are pydantic models. Loading rebuilds every value object, so
an invalid file surfaces as :class:`~unicash.errors.StorageError` here and the
model never has to re-validate what it is handed.

Atomicity: writes target ``<file>.tmp`` first and then ``os.replace`` into
place; the last write wins.
"""

from __future__ import annotations

import json
import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from .errors import DuplicateTransactionError, StorageError, ValidationError
from .logging_setup import get_logger
from .models import Amount, Categories, Category, DateTime, Location, Name, Transaction, Type
from .prefs import UserPrefs
from .unicash import UniCash

_logger = get_logger("unicash.storage")


class JsonAdaptedTransaction(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str
    type: str
    amount: str
    date_time: str
    location: str = Location.EMPTY
    categories: list[str] = []

    @classmethod
    def from_model(cls, transaction: Transaction) -> JsonAdaptedTransaction:
        return cls(
            name=transaction.name.value,
            type=transaction.type.original,
            amount=str(transaction.amount),
            date_time=transaction.date_time.original,
            location=transaction.location.value,
            categories=[c.value for c in transaction.categories],
        )

    def to_model(self) -> Transaction:
        """Rebuild the domain transaction; raises ``ValidationError`` on bad fields."""

        return Transaction(
            name=Name(self.name),
            type=Type(self.type),
            amount=Amount(self.amount),
            date_time=DateTime(self.date_time),
            location=Location(self.location),
            categories=Categories(Category(c) for c in self.categories),
        )


class JsonSerializableUniCash(BaseModel):
    model_config = ConfigDict(extra="forbid")

    transactions: list[JsonAdaptedTransaction] = []

    @classmethod
    def from_model(cls, unicash: UniCash) -> JsonSerializableUniCash:
        return cls(transactions=[JsonAdaptedTransaction.from_model(t) for t in unicash.transaction_list])

    def to_model(self) -> UniCash:
        unicash = UniCash()
        unicash.set_transactions(t.to_model() for t in self.transactions)
        return unicash


def _write_atomic(path: Path, payload: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_name(path.name + ".tmp")
    try:
        tmp.write_text(payload, encoding="utf-8")
        os.replace(tmp, path)
    except OSError as e:
        raise StorageError(f"Could not save data to file {path}: {e}") from e


def _read_text(path: Path) -> str | None:
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None
    except OSError as e:
        raise StorageError(f"Could not read data file {path}: {e}") from e


class JsonUniCashStorage:
    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def read_unicash(self) -> UniCash | None:
        """Return the stored dataset, or ``None`` when the file does not exist."""

        raw = _read_text(self.path)
        if raw is None:
            _logger.info("data file %s not found", self.path)
            return None
        try:
            data = JsonSerializableUniCash.model_validate_json(raw)
            unicash = data.to_model()
        except PydanticValidationError as e:
            raise StorageError(f"Data file {self.path} is not in the correct format: {e}") from e
        except (ValidationError, DuplicateTransactionError) as e:
            raise StorageError(f"Data file {self.path} contains invalid data: {e.message}") from e
        _logger.debug("loaded %d transactions from %s", len(unicash.transaction_list), self.path)
        return unicash

    def save_unicash(self, unicash: UniCash) -> None:
        payload = JsonSerializableUniCash.from_model(unicash).model_dump_json(indent=2)
        _write_atomic(self.path, payload)


class JsonUserPrefsStorage:
    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def read_user_prefs(self) -> UserPrefs | None:
        raw = _read_text(self.path)
        if raw is None:
            return None
        try:
            return UserPrefs.model_validate_json(raw)
        except PydanticValidationError as e:
            raise StorageError(f"Preferences file {self.path} is not in the correct format: {e}") from e

    def save_user_prefs(self, prefs: UserPrefs) -> None:
        _write_atomic(self.path, json.dumps(prefs.model_dump(mode="json"), indent=2))


__all__ = [
    "JsonAdaptedTransaction",
    "JsonSerializableUniCash",
    "JsonUniCashStorage",
    "JsonUserPrefsStorage",
]
