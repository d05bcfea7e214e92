#!/usr/bin/env python3
"""
Print the persisted inventory.

Uso:
  python scripts/list_items.py [--file inventory.json]
"""
from __future__ import annotations

from pathlib import Path
import argparse
import sys

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from inventory.app import InventoryApp  # noqa: E402
from inventory.core.logging_config import configure_logging  # noqa: E402
from inventory.services.inventory_logger import LoadStatus  # noqa: E402


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="List the items stored in the inventory file")
    ap.add_argument("--file", help="inventory file (default: INVENTORY_FILE or inventory.json)")
    args = ap.parse_args(argv)

    app = InventoryApp(args.file)
    result = app.load_data()
    if result.status is LoadStatus.FAILED:
        sys.stderr.write(f"Error: {result.reason}\n")
        return 1
    if result.status is LoadStatus.NOT_FOUND:
        print(f"No inventory at {result.location}")
        return 0
    app.print_all_items()
    return 0


if __name__ == "__main__":
    configure_logging()
    raise SystemExit(main())
