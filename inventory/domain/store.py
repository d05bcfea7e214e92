"""In-memory ordered record store."""
from __future__ import annotations

from typing import Generic, Iterable, Iterator

from .items import T


class RecordStore(Generic[T]):
    """
    Ordered, append-only collection of identifier-bearing items.

    Duplicate ids are accepted; the store never reorders or validates items.
    get_all() hands out a tuple snapshot, so callers cannot alias the internal list.
    """

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: list[T] = list(items)

    def add(self, item: T) -> None:
        self._items.append(item)

    def get_all(self) -> tuple[T, ...]:
        return tuple(self._items)

    def replace(self, items: Iterable[T]) -> None:
        self._items = list(items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self.get_all())
