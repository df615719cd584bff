"""Favorite Repository — a subject's bookmarked catalog items.

Invariants:
    - One favorite per (subject, tmdb_id, type): re-adding returns the existing record
    - Deletion is scoped by (id AND owner) in one statement
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import ResourceKind, Subject
from app.models.favorite import Favorite
from app.schemas.favorites import FavoriteCreate
from app.services.ownership import delete_owned

logger = logging.getLogger(__name__)


class FavoriteRepository:
    """Favorite persistence scoped to one request session."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _find(self, subject: Subject, body: FavoriteCreate) -> Favorite | None:
        result = await self.db.execute(
            select(Favorite).where(
                Favorite.user_id == subject,
                Favorite.tmdb_id == body.tmdb_id,
                Favorite.type == body.type.value,
            ),
        )
        return result.scalar_one_or_none()

    async def add(self, subject: Subject, body: FavoriteCreate) -> tuple[Favorite, bool]:
        """Favorite a catalog item. Returns (favorite, created)."""
        existing = await self._find(subject, body)
        if existing is not None:
            return existing, False

        favorite = Favorite(user_id=subject, tmdb_id=body.tmdb_id, type=body.type.value)
        self.db.add(favorite)
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            existing = await self._find(subject, body)
            if existing is None:
                raise
            return existing, False
        logger.info(
            f"Favorite {favorite.id} added",
            extra={"subject": subject, "resource": ResourceKind.FAVORITE.value, "record_id": favorite.id},
        )
        return favorite, True

    async def list_for_owner(self, owner: str) -> list[Favorite]:
        result = await self.db.execute(
            select(Favorite)
            .where(Favorite.user_id == owner)
            .order_by(Favorite.added_at.desc(), Favorite.id.desc()),
        )
        return list(result.scalars().all())

    async def delete(self, favorite_id: int, subject: Subject) -> None:
        await delete_owned(self.db, Favorite, ResourceKind.FAVORITE, favorite_id, subject)
        await self.db.commit()
        logger.info(
            f"Favorite {favorite_id} deleted",
            extra={"subject": subject, "resource": ResourceKind.FAVORITE.value, "record_id": favorite_id},
        )
