"""SQLAlchemy models mirroring the JSON inventory file."""
from __future__ import annotations

from sqlalchemy import Column, Integer, String, Text

from .session import Base


class InventoryItemRow(Base):
    __tablename__ = "inventory_items"

    # position keeps file order and lets two rows share an item_id
    position = Column(Integer, primary_key=True, autoincrement=False)
    item_id = Column(Integer, nullable=False, index=True)
    name = Column(Text, nullable=False)
    quantity = Column(Integer, nullable=False)
    # ISO 8601, keeps the original offset on every backend
    date_added = Column(String(64), nullable=False)
