import json
from pathlib import Path

import pytest

from unicash.errors import StorageError
from unicash.prefs import GuiSettings, UserPrefs
from unicash.storage import JsonUniCashStorage, JsonUserPrefsStorage
from unicash.unicash import UniCash
from tests.helpers.builders import LUNCH, typical_unicash


def test_missing_file_reads_as_none(tmp_path: Path):
    assert JsonUniCashStorage(tmp_path / "absent.json").read_unicash() is None
    assert JsonUserPrefsStorage(tmp_path / "absent.json").read_user_prefs() is None


def test_save_then_read(tmp_path: Path):
    storage = JsonUniCashStorage(tmp_path / "nested" / "unicash.json")
    original = typical_unicash()
    storage.save_unicash(original)

    loaded = storage.read_unicash()
    assert loaded == original
    assert not (tmp_path / "nested" / "unicash.json.tmp").exists()


def test_last_write_wins(tmp_path: Path):
    storage = JsonUniCashStorage(tmp_path / "unicash.json")
    storage.save_unicash(typical_unicash())
    storage.save_unicash(UniCash())
    assert storage.read_unicash() == UniCash()


def test_on_disk_shape(tmp_path: Path):
    path = tmp_path / "unicash.json"
    unicash = UniCash()
    unicash.add_transaction(LUNCH)
    JsonUniCashStorage(path).save_unicash(unicash)

    data = json.loads(path.read_text(encoding="utf-8"))
    assert data == {
        "transactions": [
            {
                "name": "Lunch",
                "type": "expense",
                "amount": "12.50",
                "date_time": "14-08-2023 12:30",
                "location": "Clementi",
                "categories": ["Food"],
            }
        ]
    }


@pytest.mark.parametrize(
    "content",
    [
        "not json",
        '{"transactions": [{"name": "x"}]}',
        '{"transactions": [{"name": "Bad!", "type": "expense", "amount": "1", "date_time": "01-01-2024 10:00"}]}',
        '{"transactions": [{"name": "A", "type": "expense", "amount": "' + "9" * 40 + '", "date_time": "01-01-2024 10:00"}]}',
    ],
)
def test_invalid_content_raises_storage_error(tmp_path: Path, content: str):
    path = tmp_path / "unicash.json"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(StorageError):
        JsonUniCashStorage(path).read_unicash()


def test_duplicate_transactions_in_file_raise_storage_error(tmp_path: Path):
    path = tmp_path / "unicash.json"
    row = {"name": "A", "type": "expense", "amount": "1.00", "date_time": "01-01-2024 10:00"}
    path.write_text(json.dumps({"transactions": [row, row]}), encoding="utf-8")
    with pytest.raises(StorageError):
        JsonUniCashStorage(path).read_unicash()


def test_user_prefs_round_trip(tmp_path: Path):
    storage = JsonUserPrefsStorage(tmp_path / "prefs.json")
    prefs = UserPrefs(
        gui_settings=GuiSettings(window_width=800, window_height=500, window_x=10, window_y=20),
        unicash_file_path=Path("elsewhere") / "data.json",
    )
    storage.save_user_prefs(prefs)
    assert storage.read_user_prefs() == prefs


def test_user_prefs_invalid(tmp_path: Path):
    path = tmp_path / "prefs.json"
    path.write_text('{"unknown": 1}', encoding="utf-8")
    with pytest.raises(StorageError):
        JsonUserPrefsStorage(path).read_user_prefs()
