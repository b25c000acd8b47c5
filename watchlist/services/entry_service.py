"""Entry store: owner-scoped CRUD and pagination for watchlist entries."""

import logging
from dataclasses import dataclass

from sqlalchemy import delete, func, select, update
from sqlalchemy.orm import Session

from watchlist.exceptions import NotFoundError
from watchlist.models.entry import Entry
from watchlist.schemas.entry import EntryCreate, EntryUpdate

logger = logging.getLogger(__name__)


@dataclass
class EntryPage:
    """One window of a user's entries."""

    items: list[Entry]
    total: int
    page: int
    limit: int

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    @property
    def has_more(self) -> bool:
        return self.offset + self.limit < self.total


class EntryService:
    """Service for watchlist entries.

    Every operation is scoped to ``owner_id``: an entry owned by someone else
    is reported as not found.
    """

    def __init__(self, db: Session):
        self.db = db

    def list(self, owner_id: int, page: int = 1, limit: int = 10) -> EntryPage:
        """Return a page of the owner's entries, newest first."""
        offset = (page - 1) * limit
        items = self.db.scalars(
            select(Entry)
            .where(Entry.user_id == owner_id)
            .order_by(Entry.created_at.desc(), Entry.id.desc())
            .offset(offset)
            .limit(limit)
        ).all()
        total = self.db.scalar(
            select(func.count()).select_from(Entry).where(Entry.user_id == owner_id)
        )
        return EntryPage(items=list(items), total=total or 0, page=page, limit=limit)

    def get(self, owner_id: int, entry_id: int) -> Entry:
        entry = self.db.scalars(
            select(Entry).where(Entry.id == entry_id, Entry.user_id == owner_id)
        ).first()
        if entry is None:
            raise NotFoundError("Entry")
        return entry

    def create(self, owner_id: int, data: EntryCreate) -> Entry:
        entry = Entry(**data.model_dump(mode="json"), user_id=owner_id)
        self.db.add(entry)
        self.db.commit()
        self.db.refresh(entry)
        logger.info(f"User {owner_id} created entry {entry.id}")
        return entry

    def update(self, owner_id: int, entry_id: int, data: EntryUpdate) -> Entry:
        """Apply only the fields present in ``data``."""
        values = data.model_dump(mode="json", exclude_unset=True)
        if not values:
            return self.get(owner_id, entry_id)

        result = self.db.execute(
            update(Entry)
            .where(Entry.id == entry_id, Entry.user_id == owner_id)
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            self.db.rollback()
            raise NotFoundError("Entry")
        self.db.commit()
        logger.info(f"User {owner_id} updated entry {entry_id}: {sorted(values)}")
        return self.get(owner_id, entry_id)

    def delete(self, owner_id: int, entry_id: int) -> None:
        result = self.db.execute(
            delete(Entry)
            .where(Entry.id == entry_id, Entry.user_id == owner_id)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            self.db.rollback()
            raise NotFoundError("Entry")
        self.db.commit()
        logger.info(f"User {owner_id} deleted entry {entry_id}")
