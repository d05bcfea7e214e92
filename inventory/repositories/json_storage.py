"""
JSON file persistence adapter.

The whole ordered sequence is written as one JSON array; load() returns it
back with the original types. Writes go to a temporary file next to the
destination and are moved into place with os.replace, so a failed save leaves
the previous file untouched.
"""

from __future__ import annotations

from pathlib import Path
from typing import Generic, Sequence
import json
import logging
import os
import shutil
import tempfile

from inventory.core.config import get_settings
from inventory.domain.items import INVENTORY_ITEM_CODEC, ItemCodec, RecordError, T
from .errors import EncodingError, MalformedDataError, StorageIOError

logger = logging.getLogger(__name__)


class JsonStorage(Generic[T]):
    """Save/load a list of items to a single JSON file."""

    def __init__(self, path: str | os.PathLike[str], codec: ItemCodec[T]):
        self.path = Path(path)
        self.codec = codec

    @property
    def location(self) -> str:
        return str(self.path)

    # -------------------------- save --------------------------
    def dumps(self, items: Sequence[T]) -> str:
        try:
            records = [self.codec.to_record(item) for item in items]
            return json.dumps(records, ensure_ascii=False, indent=2)
        except (RecordError, TypeError, ValueError) as exc:
            raise EncodingError(f"Could not encode inventory: {exc}", self.location) from exc

    def save(self, items: Sequence[T]) -> None:
        payload = self.dumps(items)
        directory = self.path.parent
        try:
            fd, tmp_name = tempfile.mkstemp(prefix=f".{self.path.name}.", suffix=".tmp", dir=directory)
        except OSError as exc:
            raise StorageIOError(f"Cannot write to {directory}: {exc.strerror or exc}", self.location) from exc
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            if self.path.exists():
                shutil.copymode(self.path, tmp_name)
            os.replace(tmp_name, self.path)
        except OSError as exc:
            try:
                os.unlink(tmp_name)
            except FileNotFoundError:
                pass
            raise StorageIOError(f"Cannot write {self.path}: {exc.strerror or exc}", self.location) from exc
        logger.debug("Wrote %d item(s) to %s", len(items), self.path)

    # -------------------------- load --------------------------
    def loads(self, text: str) -> list[T]:
        try:
            data = json.loads(text)
        except (ValueError, RecursionError) as exc:
            # JSONDecodeError, oversized int literals and deep nesting all land here
            raise MalformedDataError(f"Invalid JSON in {self.path}: {exc}", self.location) from exc
        if not isinstance(data, list):
            raise MalformedDataError(
                f"Expected a JSON array in {self.path}, got {type(data).__name__}", self.location
            )
        items: list[T] = []
        for index, record in enumerate(data):
            try:
                items.append(self.codec.from_record(record))
            except RecordError as exc:
                raise MalformedDataError(f"Entry {index} in {self.path}: {exc}", self.location) from exc
        return items

    def load(self) -> list[T] | None:
        """Return the persisted items, or None when nothing was saved yet."""
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except UnicodeDecodeError as exc:
            raise MalformedDataError(f"{self.path} is not UTF-8 text: {exc}", self.location) from exc
        except OSError as exc:
            raise StorageIOError(f"Cannot read {self.path}: {exc.strerror or exc}", self.location) from exc
        return self.loads(text)


def inventory_storage(path: str | os.PathLike[str] | None = None) -> JsonStorage:
    """JsonStorage for InventoryItem, defaulting to the configured INVENTORY_FILE."""
    if path is None:
        path = get_settings().inventory_file
    return JsonStorage(path, INVENTORY_ITEM_CODEC)
