"""Glue between the command language, the model and storage."""

from __future__ import annotations

from pathlib import Path

from .commands import CommandResult
from .errors import UniCashError
from .logging_setup import get_logger
from .model import FilteredTransactions, ModelManager
from .parsing import parse_command
from .prefs import GuiSettings
from .storage import JsonUniCashStorage

_logger = get_logger("unicash.logic")


class LogicManager:
    """Parse, execute, then persist the dataset.

    Errors are not caught here; the caller that dispatches user input turns
    them into a message. A failing command never reaches the save step.
    """

    def __init__(self, model: ModelManager, storage: JsonUniCashStorage) -> None:
        self.model = model
        self.storage = storage

    def execute(self, command_text: str) -> CommandResult:
        _logger.debug("user command: %s", command_text)
        try:
            command = parse_command(command_text)
            result = command.execute(self.model)
        except UniCashError as e:
            _logger.info("command failed: %s", e.message.splitlines()[0] if e.message else e)
            raise
        self.storage.save_unicash(self.model.unicash)
        return result

    @property
    def filtered_transactions(self) -> FilteredTransactions:
        return self.model.filtered_transactions

    @property
    def unicash_file_path(self) -> Path:
        return self.model.unicash_file_path

    @property
    def gui_settings(self) -> GuiSettings:
        return self.model.gui_settings


__all__ = ["LogicManager"]
