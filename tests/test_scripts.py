from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

# Garante que o pacote inventory e os scripts sejam importáveis durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
for path in (ROOT, ROOT / "scripts"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

import add_item  # noqa: E402
import list_items  # noqa: E402


def test_add_item_creates_file_on_first_run(tmp_path, capsys):
    target = tmp_path / "inventory.json"
    rc = add_item.main(["--id", "6", "--name", "Mouse", "--quantity", "12", "--date", "2024-05-01T10:00:00", "--file", str(target)])
    assert rc == 0
    assert json.loads(target.read_text(encoding="utf-8")) == [
        {"id": 6, "name": "Mouse", "quantity": 12, "dateAdded": "2024-05-01T10:00:00"}
    ]
    assert "OK: item added" in capsys.readouterr().out


def test_add_item_appends_and_warns_on_duplicate_id(tmp_path, capsys):
    target = tmp_path / "inventory.json"
    add_item.main(["--id", "1", "--name", "Laptop", "--quantity", "5", "--file", str(target)])
    add_item.main(["--id", "1", "--name", "Laptop", "--quantity", "2", "--file", str(target)])
    data = json.loads(target.read_text(encoding="utf-8"))
    assert [row["quantity"] for row in data] == [5, 2]
    assert "already exists" in capsys.readouterr().out


def test_add_item_refuses_to_overwrite_unreadable_file(tmp_path):
    target = tmp_path / "inventory.json"
    target.write_text("garbage", encoding="utf-8")
    with pytest.raises(SystemExit, match="Could not read"):
        add_item.main(["--id", "1", "--name", "Laptop", "--quantity", "5", "--file", str(target)])
    assert target.read_text(encoding="utf-8") == "garbage"


def test_add_item_rejects_bad_date(tmp_path):
    with pytest.raises(SystemExit, match="Invalid date"):
        add_item.main(["--id", "1", "--name", "Laptop", "--quantity", "5", "--date", "soon", "--file", str(tmp_path / "x.json")])


def test_list_items_prints_inventory(tmp_path, capsys):
    target = tmp_path / "inventory.json"
    add_item.main(["--id", "1", "--name", "Laptop", "--quantity", "5", "--date", "2024-05-01T10:00:00", "--file", str(target)])
    capsys.readouterr()
    assert list_items.main(["--file", str(target)]) == 0
    assert "ID: 1, Name: Laptop, Quantity: 5, Date Added: 2024-05-01 10:00:00" in capsys.readouterr().out


def test_list_items_without_file(tmp_path, capsys):
    assert list_items.main(["--file", str(tmp_path / "none.json")]) == 0
    assert "No inventory" in capsys.readouterr().out


def test_list_items_reports_malformed_file(tmp_path, capsys):
    target = tmp_path / "inventory.json"
    target.write_text("{}", encoding="utf-8")
    assert list_items.main(["--file", str(target)]) == 1
    assert "Error:" in capsys.readouterr().err
