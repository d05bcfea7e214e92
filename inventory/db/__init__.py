"""Database helpers for the optional SQL backend (engine, sessions, schema)."""

from .session import Base, get_engine, get_session
from .models import InventoryItemRow

__all__ = ["Base", "InventoryItemRow", "get_engine", "get_session"]
