import contextlib
import json
import os
from pathlib import Path

from prompt_toolkit import PromptSession
from prompt_toolkit.input import create_pipe_input
from prompt_toolkit.output import DummyOutput
from typer.testing import CliRunner

from unicash.cli import app, build_logic, run_repl
from unicash.config import load_config
from unicash.storage import JsonUniCashStorage
from tests.helpers.builders import LUNCH, command_text_for

runner = CliRunner()


def _data_path() -> Path:
    return Path(os.environ["UNICASH_DATA_PATH"])


@contextlib.contextmanager
def pipe_session():
    with create_pipe_input() as pipe:
        yield pipe, PromptSession(input=pipe, output=DummyOutput())


def test_run_add_then_summary():
    result = runner.invoke(app, ["run", command_text_for(LUNCH)])
    assert result.exit_code == 0, result.output
    assert "New transaction added" in result.output
    assert "1. Lunch" in result.output

    stored = JsonUniCashStorage(_data_path()).read_unicash()
    assert list(stored.transaction_list) == [LUNCH]

    result = runner.invoke(app, ["run", "summary"])
    assert result.exit_code == 0
    assert "Food: $12.50" in result.output


def test_run_error_exits_non_zero():
    result = runner.invoke(app, ["run", "delete_transaction 1"])
    assert result.exit_code == 1
    assert "invalid" in result.output.lower()


def test_run_unknown_command():
    result = runner.invoke(app, ["run", "frobnicate"])
    assert result.exit_code == 1
    assert "Unknown command" in result.output


def test_build_logic_creates_prefs_and_honours_data_override(tmp_path: Path):
    logic = build_logic(load_config())
    assert Path(os.environ["UNICASH_PREFS_PATH"]).exists()
    assert logic.unicash_file_path == _data_path()


def test_build_logic_starts_empty_on_corrupt_data():
    path = _data_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("{broken", encoding="utf-8")
    logic = build_logic(load_config())
    assert list(logic.filtered_transactions) == []


def test_repl_executes_until_exit():
    logic = build_logic(load_config())
    out: list[str] = []

    def _echo(message="", err=False):
        out.append(("ERR " if err else "") + str(message))

    with pipe_session() as (pipe, sess):
        pipe.send_text(command_text_for(LUNCH) + "\r")
        pipe.send_text("\r")  # blank line is ignored
        pipe.send_text("delete_transaction 5\r")
        pipe.send_text("exit\r")
        code = run_repl(logic, session=sess, echo=_echo)

    assert code == 0
    assert any(line.startswith("New transaction added") for line in out)
    assert "ERR The transaction index provided is invalid." in out
    assert out[-1] == "Exiting UniCash as requested ..."
    data = json.loads(_data_path().read_text(encoding="utf-8"))
    assert len(data["transactions"]) == 1


def test_repl_stops_on_eof():
    logic = build_logic(load_config())
    with pipe_session() as (pipe, sess):
        pipe.send_text("\x04")
        assert run_repl(logic, session=sess, echo=lambda *a, **k: None) == 0


def test_run_oversized_fields_report_errors():
    result = runner.invoke(app, ["run", "add_transaction n/Yacht t/expense a/" + "9" * 40])
    assert result.exit_code == 1
    assert "Amounts must be" in result.output

    result = runner.invoke(app, ["run", "delete_transaction " + "1" * 5000])
    assert result.exit_code == 1
    assert "Invalid command format!" in result.output


def test_build_logic_starts_empty_on_oversized_stored_amount():
    path = _data_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    row = {"name": "Yacht", "type": "expense", "amount": "9" * 40, "date_time": "01-01-2024 10:00"}
    path.write_text(json.dumps({"transactions": [row]}), encoding="utf-8")
    logic = build_logic(load_config())
    assert list(logic.filtered_transactions) == []
