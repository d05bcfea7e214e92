"""
Inventory demo application: seed, save, reload in a new session, print.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional, TextIO
import os
import sys

from inventory.domain.items import InventoryItem
from inventory.repositories.json_storage import inventory_storage
from inventory.services.inventory_logger import InventoryLogger, LoadResult, SaveResult

SAMPLE_ITEMS = (
    (1, "Laptop", 5),
    (2, "Printer", 3),
    (3, "Router", 7),
    (4, "Monitor", 4),
    (5, "Keyboard", 10),
)


def format_item(item: InventoryItem) -> str:
    return f"ID: {item.id}, Name: {item.name}, Quantity: {item.quantity}, Date Added: {item.date_added}"


class InventoryApp:
    def __init__(self, file_path: Optional[str | os.PathLike[str]] = None):
        self.logger: InventoryLogger[InventoryItem] = InventoryLogger(inventory_storage(file_path))

    def seed_sample_data(self, now: Optional[datetime] = None) -> None:
        for item_id, name, quantity in SAMPLE_ITEMS:
            self.logger.add(InventoryItem(item_id, name, quantity, now or datetime.now()))

    def save_data(self) -> SaveResult:
        return self.logger.save_to_file()

    def load_data(self) -> LoadResult:
        return self.logger.load_from_file()

    def print_all_items(self, stream: Optional[TextIO] = None) -> None:
        out = stream or sys.stdout
        out.write("\nInventory Items:\n")
        for item in self.logger.get_all():
            out.write(format_item(item) + "\n")


def run_demo(file_path: Optional[str | os.PathLike[str]] = None, stream: Optional[TextIO] = None) -> int:
    """First session seeds and saves; a second app on the same file loads and prints."""
    out = stream or sys.stdout
    app = InventoryApp(file_path)
    app.seed_sample_data()
    saved = app.save_data()

    out.write("\nSimulating new session...\n")
    new_app = InventoryApp(file_path)
    loaded = new_app.load_data()
    new_app.print_all_items(out)
    return 0 if (saved.ok and loaded.ok) else 1
