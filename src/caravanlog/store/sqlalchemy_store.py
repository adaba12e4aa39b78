"""SQLAlchemy implementation of the entry store over in-memory SQLite."""

import logging
from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from caravanlog.domain.entities import Entry
from caravanlog.store.base import EntryStore
from caravanlog.store.mappers import apply_entry_to_row, entry_to_domain
from caravanlog.store.models import EntryRow, create_session_factory

logger = logging.getLogger(__name__)


class SQLAlchemyEntryStore(EntryStore):
    """SQLAlchemy-based implementation of EntryStore.

    Listing order is kept in the ``position`` column: a new row takes a
    position below every existing one, an updated row keeps its own.
    """

    def __init__(self):
        self.session_factory = create_session_factory()
        self._session: Optional[Session] = None

    def _get_session(self) -> Session:
        """Get current session, creating one if needed."""
        if self._session is None:
            self._session = self.session_factory()
        return self._session

    def _get_row(self, entry_id: str) -> Optional[EntryRow]:
        session = self._get_session()
        return session.query(EntryRow).filter(EntryRow.id == entry_id).first()

    def upsert(self, entry: Entry) -> None:
        session = self._get_session()
        row = self._get_row(entry.id)
        if row is None:
            lowest = session.query(func.min(EntryRow.position)).scalar()
            position = 0 if lowest is None else lowest - 1
            row = apply_entry_to_row(entry, EntryRow(position=position))
            session.add(row)
            logger.debug("Inserted entry %s at position %d", entry.id, position)
        else:
            apply_entry_to_row(entry, row)
            logger.debug("Replaced entry %s at position %d", entry.id, row.position)
        session.commit()

    def delete(self, entry_id: str) -> None:
        session = self._get_session()
        row = self._get_row(entry_id)
        if row is None:
            logger.debug("Delete of unknown entry %s ignored", entry_id)
            return
        session.delete(row)
        session.commit()
        logger.debug("Deleted entry %s", entry_id)

    def list(self) -> list[Entry]:
        session = self._get_session()
        rows = session.query(EntryRow).order_by(EntryRow.position).all()
        return [entry_to_domain(row) for row in rows]

    def get(self, entry_id: str) -> Optional[Entry]:
        row = self._get_row(entry_id)
        if row is None:
            return None
        return entry_to_domain(row)

    def __len__(self) -> int:
        return self._get_session().query(EntryRow).count()

    def close(self) -> None:
        if self._session is not None:
            self._session.close()
            self._session = None
