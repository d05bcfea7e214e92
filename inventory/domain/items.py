"""Inventory item type and its JSON record mapping."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping, Protocol, TypeVar


class HasId(Protocol):
    """Anything exposing an integer identifier can live in a RecordStore."""

    @property
    def id(self) -> int: ...


T = TypeVar("T", bound=HasId)


@dataclass(frozen=True)
class InventoryItem:
    id: int
    name: str
    quantity: int  # negative values are accepted as-is
    date_added: datetime


class ItemCodec(Protocol[T]):
    """Maps an item type to/from a plain JSON object."""

    def to_record(self, item: T) -> dict[str, Any]: ...

    def from_record(self, record: Mapping[str, Any]) -> T: ...


class RecordError(ValueError):
    """Raised by codecs when a record (or an item) does not have the expected shape."""


def _require_int(record: Mapping[str, Any], key: str) -> int:
    value = record.get(key)
    # bool is an int subclass; true/false in the file is still malformed
    if isinstance(value, bool) or not isinstance(value, int):
        raise RecordError(f"'{key}' must be an integer, got {value!r}")
    return value


def check_item(item: InventoryItem) -> None:
    """Reject items that from_record would not read back, so a save never writes them."""
    for key in ("id", "quantity"):
        value = getattr(item, key)
        if isinstance(value, bool) or not isinstance(value, int):
            raise RecordError(f"item {item.id!r}: '{key}' must be an integer, got {value!r}")
    if not isinstance(item.name, str):
        raise RecordError(f"item {item.id!r}: 'name' must be a string, got {item.name!r}")
    if not isinstance(item.date_added, datetime):
        raise RecordError(f"item {item.id!r}: date_added must be a datetime")


class InventoryItemCodec:
    """JSON mapping for InventoryItem: id, name, quantity, dateAdded (ISO 8601)."""

    fields = ("id", "name", "quantity", "dateAdded")

    def to_record(self, item: InventoryItem) -> dict[str, Any]:
        check_item(item)
        return {
            "id": item.id,
            "name": item.name,
            "quantity": item.quantity,
            "dateAdded": item.date_added.isoformat(),
        }

    def from_record(self, record: Mapping[str, Any]) -> InventoryItem:
        if not isinstance(record, Mapping):
            raise RecordError(f"expected an object, got {type(record).__name__}")
        missing = [key for key in self.fields if key not in record]
        if missing:
            raise RecordError(f"missing field(s): {', '.join(missing)}")
        name = record["name"]
        if not isinstance(name, str):
            raise RecordError(f"'name' must be a string, got {name!r}")
        raw_date = record["dateAdded"]
        if not isinstance(raw_date, str):
            raise RecordError(f"'dateAdded' must be an ISO 8601 string, got {raw_date!r}")
        try:
            date_added = datetime.fromisoformat(raw_date)
        except ValueError as exc:
            raise RecordError(f"'dateAdded' is not a valid timestamp: {raw_date!r}") from exc
        return InventoryItem(
            id=_require_int(record, "id"),
            name=name,
            quantity=_require_int(record, "quantity"),
            date_added=date_added,
        )


INVENTORY_ITEM_CODEC = InventoryItemCodec()
