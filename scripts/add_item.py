#!/usr/bin/env python3
"""
Append one item to the persisted inventory (JSON file).

Uso:
  python scripts/add_item.py --id 6 --name Mouse --quantity 12 [--date 2024-05-01T10:00:00] [--file inventory.json]
"""
from __future__ import annotations

from datetime import datetime
from pathlib import Path
import argparse
import sys

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from inventory.core.logging_config import configure_logging  # noqa: E402
from inventory.domain.items import InventoryItem  # noqa: E402
from inventory.repositories.json_storage import inventory_storage  # noqa: E402
from inventory.services.inventory_logger import InventoryLogger  # noqa: E402


def parse_date(value: str | None) -> datetime:
    if not value:
        return datetime.now()
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        raise SystemExit(f"Invalid date (use ISO 8601): {value}")


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Add an item to the inventory file")
    ap.add_argument("--id", type=int, required=True, help="item id (duplicates are allowed)")
    ap.add_argument("--name", required=True, help="item name")
    ap.add_argument("--quantity", type=int, required=True, help="quantity on hand")
    ap.add_argument("--date", help="date added, ISO 8601 (default: now)")
    ap.add_argument("--file", help="inventory file (default: INVENTORY_FILE or inventory.json)")
    args = ap.parse_args(argv)

    name = (args.name or "").strip()
    if not name:
        raise SystemExit("Invalid name")
    item = InventoryItem(args.id, name, args.quantity, parse_date(args.date))

    inventory = InventoryLogger(inventory_storage(args.file))
    loaded = inventory.load_from_file()
    if not loaded.ok:
        raise SystemExit(f"Could not read {loaded.location}: {loaded.reason}")
    if any(existing.id == item.id for existing in inventory.get_all()):
        print(f"Warning: ID {item.id} already exists; adding anyway")
    inventory.add(item)
    saved = inventory.save_to_file()
    if not saved.ok:
        raise SystemExit(f"Could not save {saved.location}: {saved.reason}")
    print("OK: item added")
    print(f"  ID: {item.id}")
    print(f"  Name: {item.name}")
    print(f"  Quantity: {item.quantity}")
    print(f"  Total: {saved.count} item(s)")
    return 0


if __name__ == "__main__":
    configure_logging()
    raise SystemExit(main())
