"""Recoverable storage failures raised by the persistence adapters."""
from __future__ import annotations


class StorageError(Exception):
    """Base class for save/load failures. Never fatal; callers decide how to report it."""

    def __init__(self, reason: str, location: str | None = None):
        super().__init__(reason)
        self.reason = reason
        self.location = location


class StorageIOError(StorageError):
    """Location unreadable/unwritable (permission, missing parent, disk, database)."""


class MalformedDataError(StorageError):
    """Persisted content does not match the expected structure."""


class EncodingError(StorageError):
    """An in-memory item could not be encoded; nothing was written."""
