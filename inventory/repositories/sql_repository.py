"""SQL persistence adapter for InventoryItem, backed by SQLAlchemy."""
from __future__ import annotations

from datetime import datetime
from typing import Sequence
import logging

from sqlalchemy import delete, inspect, select
from sqlalchemy.exc import SQLAlchemyError

from inventory.db.create_tables import create_all
from inventory.db.models import InventoryItemRow
from inventory.db.session import get_engine, get_session
from inventory.domain.items import InventoryItem, RecordError, check_item
from .errors import EncodingError, MalformedDataError, StorageIOError

logger = logging.getLogger(__name__)


def _item_to_row(position: int, item: InventoryItem) -> InventoryItemRow:
    try:
        check_item(item)
    except RecordError as exc:
        raise EncodingError(f"Could not encode inventory: {exc}") from exc
    return InventoryItemRow(
        position=position,
        item_id=item.id,
        name=item.name,
        quantity=item.quantity,
        date_added=item.date_added.isoformat(),
    )


def _row_to_item(row: InventoryItemRow) -> InventoryItem:
    try:
        date_added = datetime.fromisoformat(row.date_added)
    except (TypeError, ValueError) as exc:
        raise MalformedDataError(f"Row {row.position}: invalid date_added {row.date_added!r}") from exc
    return InventoryItem(id=row.item_id, name=row.name, quantity=row.quantity, date_added=date_added)


class SQLInventoryRepository:
    """Same save()/load() contract as JsonStorage, one row per item.

    Construction resolves the engine, so a missing DATABASE_URL fails here (RuntimeError)
    rather than in save()/load().
    """

    def __init__(self) -> None:
        self.engine = get_engine()

    @property
    def location(self) -> str:
        return f"{InventoryItemRow.__tablename__}@{self.engine.url.render_as_string(hide_password=True)}"

    def table_exists(self) -> bool:
        return inspect(self.engine).has_table(InventoryItemRow.__tablename__)

    def save(self, items: Sequence[InventoryItem]) -> None:
        """Replace every stored row with items, in one transaction."""
        rows = [_item_to_row(position, item) for position, item in enumerate(items)]
        try:
            if not self.table_exists():
                create_all(self.engine)
            with get_session() as session:
                with session.begin():
                    session.execute(delete(InventoryItemRow))
                    session.add_all(rows)
        except SQLAlchemyError as exc:
            raise StorageIOError(f"Could not save inventory: {exc}", self.location) from exc
        logger.debug("Stored %d item(s) in %s", len(rows), InventoryItemRow.__tablename__)

    def load(self) -> list[InventoryItem] | None:
        """Return stored items in saved order, or None when the table was never created."""
        try:
            if not self.table_exists():
                return None
            with get_session() as session:
                stmt = select(InventoryItemRow).order_by(InventoryItemRow.position)
                rows = session.execute(stmt).scalars().all()
                return [_row_to_item(row) for row in rows]
        except SQLAlchemyError as exc:
            raise StorageIOError(f"Could not load inventory: {exc}", self.location) from exc
