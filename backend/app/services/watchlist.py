"""Watchlist Repository — a subject's want/watching/watched list.

Invariants:
    - Listing is always the caller's own entries, newest first
    - Status is the only updatable field; update and delete are scoped by (id AND owner)
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import ResourceKind, Subject, WatchStatus
from app.models.watchlist_entry import WatchlistEntry
from app.schemas.watchlist import WatchlistCreate
from app.services.ownership import delete_owned, update_owned

logger = logging.getLogger(__name__)


class WatchlistRepository:
    """Watchlist persistence scoped to one request session."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def add(self, subject: Subject, body: WatchlistCreate) -> WatchlistEntry:
        entry = WatchlistEntry(
            user_id=subject,
            tmdb_id=body.tmdb_id,
            type=body.type.value,
            status=body.status.value,
        )
        self.db.add(entry)
        await self.db.commit()
        logger.info(
            f"Watchlist entry {entry.id} added",
            extra={"subject": subject, "resource": ResourceKind.WATCHLIST_ENTRY.value, "record_id": entry.id},
        )
        return entry

    async def list_for_owner(self, subject: Subject) -> list[WatchlistEntry]:
        result = await self.db.execute(
            select(WatchlistEntry)
            .where(WatchlistEntry.user_id == subject)
            .order_by(WatchlistEntry.added_at.desc(), WatchlistEntry.id.desc()),
        )
        return list(result.scalars().all())

    async def update_status(
        self, entry_id: int, subject: Subject, status: WatchStatus,
    ) -> WatchlistEntry:
        entry = await update_owned(
            self.db, WatchlistEntry, ResourceKind.WATCHLIST_ENTRY, entry_id, subject,
            {"status": status.value},
        )
        await self.db.commit()
        logger.info(
            f"Watchlist entry {entry_id} marked {status.value}",
            extra={"subject": subject, "resource": ResourceKind.WATCHLIST_ENTRY.value, "record_id": entry_id},
        )
        return entry

    async def delete(self, entry_id: int, subject: Subject) -> None:
        await delete_owned(
            self.db, WatchlistEntry, ResourceKind.WATCHLIST_ENTRY, entry_id, subject,
        )
        await self.db.commit()
        logger.info(
            f"Watchlist entry {entry_id} deleted",
            extra={"subject": subject, "resource": ResourceKind.WATCHLIST_ENTRY.value, "record_id": entry_id},
        )
