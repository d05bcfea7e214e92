"""
Inventory logger: one record store bound to one persistence adapter.

Storage failures never escape from here. save_to_file()/load_from_file() turn
them into result objects carrying the reason, and log the outcome.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, Protocol, Sequence
import logging

from inventory.domain.items import T
from inventory.domain.store import RecordStore
from inventory.repositories.errors import StorageError

logger = logging.getLogger(__name__)


class ItemStorage(Protocol[T]):
    """Contract shared by JsonStorage and SQLInventoryRepository."""

    @property
    def location(self) -> str: ...

    def save(self, items: Sequence[T]) -> None: ...

    def load(self) -> Optional[list[T]]: ...


class LoadStatus(str, Enum):
    LOADED = "loaded"
    NOT_FOUND = "not_found"
    FAILED = "failed"


@dataclass
class SaveResult:
    ok: bool
    location: str
    count: int = 0
    reason: Optional[str] = None


@dataclass
class LoadResult:
    status: LoadStatus
    location: str
    count: int = 0
    reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        """True unless the load failed; an absent file is an expected first-run outcome."""
        return self.status is not LoadStatus.FAILED


class InventoryLogger(Generic[T]):
    """Holds items in memory and saves/restores them through storage."""

    def __init__(self, storage: ItemStorage[T]) -> None:
        self.storage = storage
        self.store: RecordStore[T] = RecordStore()

    def add(self, item: T) -> None:
        self.store.add(item)

    def get_all(self) -> tuple[T, ...]:
        return self.store.get_all()

    def save_to_file(self) -> SaveResult:
        items = self.store.get_all()
        location = self.storage.location
        try:
            self.storage.save(items)
        except StorageError as exc:
            logger.error("Error saving inventory to %s: %s", location, exc.reason)
            return SaveResult(ok=False, location=location, reason=exc.reason)
        logger.info("Inventory saved to %s (%d item(s)).", location, len(items))
        return SaveResult(ok=True, location=location, count=len(items))

    def load_from_file(self) -> LoadResult:
        """Replace the in-memory items with the persisted ones; never merges."""
        location = self.storage.location
        try:
            items = self.storage.load()
        except StorageError as exc:
            logger.error("Error loading inventory from %s: %s", location, exc.reason)
            return LoadResult(LoadStatus.FAILED, location, reason=exc.reason)
        if items is None:
            logger.info("File %s not found. No data loaded.", location)
            return LoadResult(LoadStatus.NOT_FOUND, location)
        self.store.replace(items)
        logger.info("Inventory loaded from %s (%d item(s)).", location, len(items))
        return LoadResult(LoadStatus.LOADED, location, count=len(items))
