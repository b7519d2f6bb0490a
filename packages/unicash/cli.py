"""CLI for ``unicash``.

Typer-based console interface with two subcommands:

- ``repl``: interactive prompt (prompt_toolkit) that executes one command
  line at a time until ``exit`` or Ctrl-D.
- ``run TEXT``: execute a single command line and exit.

Environment variables (``UNICASH_*``, see :mod:`unicash.config`) may be
provided through a local ``.env`` which is loaded with ``python-dotenv``
before anything else runs. This module is the one place where
:class:`~unicash.errors.UniCashError` is caught and shown to the user.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Annotated

import typer
from dotenv import load_dotenv
from prompt_toolkit import PromptSession

from .commands import CommandResult
from .config import Config, load_config
from .errors import StorageError, UniCashError
from .logging_setup import configure_logging, get_logger
from .logic import LogicManager
from .model import ModelManager
from .storage import JsonUniCashStorage, JsonUserPrefsStorage
from .term_ui import prompt_command, render_transactions

_logger = get_logger("unicash.cli")

type Echo = Callable[..., None]


def build_logic(config: Config) -> LogicManager:
    """Load preferences and data, falling back to empty state when missing.

    A data file that cannot be parsed is reported and the session starts
    with an empty dataset; the broken file is only overwritten by the next
    successful command.
    """

    prefs_storage = JsonUserPrefsStorage(config.prefs_path)
    try:
        prefs = prefs_storage.read_user_prefs()
    except StorageError as e:
        _logger.warning("%s; using default preferences", e.message)
        prefs = None
    model = ModelManager(user_prefs=prefs)
    if prefs is None:
        prefs_storage.save_user_prefs(model.user_prefs)
    if config.data_path is not None:
        model.set_unicash_file_path(config.data_path)

    storage = JsonUniCashStorage(model.unicash_file_path)
    try:
        loaded = storage.read_unicash()
    except StorageError as e:
        _logger.warning("%s; starting with an empty dataset", e.message)
        loaded = None
    if loaded is not None:
        model.set_unicash(loaded)
    return LogicManager(model, storage)


def _show(result: CommandResult, logic: LogicManager, echo: Echo) -> None:
    echo(result.feedback)
    if result.exit or result.show_help or result.summary is not None:
        return
    echo(render_transactions(logic.filtered_transactions))


def run_repl(
    logic: LogicManager,
    *,
    session: PromptSession | None = None,
    echo: Echo = typer.echo,
) -> int:
    """Read-eval-print loop. Returns the process exit code."""

    echo("Welcome to UniCash! Type 'help' to see the available commands.")
    while True:
        try:
            text = prompt_command(session=session)
        except (EOFError, KeyboardInterrupt):
            break
        if not text:
            continue
        try:
            result = logic.execute(text)
        except UniCashError as e:
            echo(e.message, err=True)
            continue
        _show(result, logic, echo)
        if result.exit:
            break
    return 0


# ---- Typer-based console interface -------------------------------------------


app = typer.Typer(
    no_args_is_help=True,
    add_completion=False,
    help="UniCash: track expenses and income from the terminal.",
)


@app.command("repl")
def repl_cmd() -> None:
    """Start the interactive prompt."""

    logic = build_logic(load_config())
    raise typer.Exit(run_repl(logic))


@app.command("run")
def run_cmd(
    command_text: Annotated[str, typer.Argument(help="A full command line, e.g. \"summary\".")],
) -> None:
    """Execute one command line against the stored data."""

    logic = build_logic(load_config())
    try:
        result = logic.execute(command_text)
    except UniCashError as e:
        typer.echo(e.message, err=True)
        raise typer.Exit(1) from None
    _show(result, logic, typer.echo)


@app.callback()
def _root() -> None:
    """Load ``.env`` (without overriding the environment) and configure logging."""

    load_dotenv(dotenv_path=Path.cwd() / ".env", override=False)
    configure_logging(load_config())


if __name__ == "__main__":  # pragma: no cover
    app()
