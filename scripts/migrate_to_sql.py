"""One-off migration script: JSON inventory file -> SQL (DATABASE_URL)."""
from __future__ import annotations

from pathlib import Path
import argparse
import sys

# Garantir que o pacote inventory seja importável quando rodado diretamente
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from inventory.core.logging_config import configure_logging  # noqa: E402
from inventory.repositories.errors import StorageError  # noqa: E402
from inventory.repositories.json_storage import inventory_storage  # noqa: E402
from inventory.repositories.sql_repository import SQLInventoryRepository  # noqa: E402


def migrate(file_path: str | None = None) -> int:
    """Copy every item from the JSON file into the SQL table; returns the item count."""
    source = inventory_storage(file_path)
    items = source.load()
    if items is None:
        raise SystemExit(f"File not found: {source.location}")
    SQLInventoryRepository().save(items)
    return len(items)


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Migrate the JSON inventory into DATABASE_URL")
    ap.add_argument("--file", help="inventory file (default: INVENTORY_FILE or inventory.json)")
    args = ap.parse_args(argv)
    try:
        count = migrate(args.file)
    except (StorageError, RuntimeError) as exc:
        sys.stderr.write(f"Error: {exc}\n")
        return 1
    print(f"{count} item(s) migrated to SQL successfully.")
    return 0


if __name__ == "__main__":
    configure_logging()
    raise SystemExit(main())
