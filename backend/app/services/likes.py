"""Likes — idempotent like/unlike plus the count+liked aggregate.

Invariants:
    - At most one Like per (review, subject): re-liking returns the existing like
    - Unliking something not liked is a successful no-op (the subject is the key,
      so there is no foreign owner to refuse)
    - status() count is exact and liked reflects only the calling subject

Design Decisions:
    - Lookup before insert handles the common case; IntegrityError on commit covers
      two concurrent likes racing past the lookup
"""

import logging

from sqlalchemy import delete, exists, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import ResourceKind, Subject
from app.models.like import Like
from app.schemas.likes import LikeStatus
from app.services.reviews import ensure_review_exists

logger = logging.getLogger(__name__)


class LikeRepository:
    """Like persistence and aggregation scoped to one request session."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def status(self, review_id: int, subject: Subject) -> LikeStatus:
        count = await self.db.execute(
            select(func.count())
            .select_from(Like)
            .where(Like.review_id == review_id),
        )
        mine = await self.db.execute(
            select(
                exists().where(
                    Like.review_id == review_id, Like.user_id == subject,
                ),
            ),
        )
        return LikeStatus(count=count.scalar_one(), liked=bool(mine.scalar()))

    async def add(self, review_id: int, subject: Subject) -> tuple[Like, bool]:
        """Like a review. Returns (like, created)."""
        await ensure_review_exists(self.db, review_id)
        existing = await self.db.get(Like, (review_id, subject))
        if existing is not None:
            return existing, False

        like = Like(review_id=review_id, user_id=subject)
        self.db.add(like)
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            existing = await self.db.get(Like, (review_id, subject))
            if existing is None:
                raise
            return existing, False
        logger.info(
            f"Review {review_id} liked",
            extra={"subject": subject, "resource": ResourceKind.LIKE.value, "record_id": review_id},
        )
        return like, True

    async def remove(self, review_id: int, subject: Subject) -> None:
        result = await self.db.execute(
            delete(Like)
            .where(Like.review_id == review_id, Like.user_id == subject)
            .execution_options(synchronize_session=False),
        )
        await self.db.commit()
        logger.info(
            f"Review {review_id} unliked ({result.rowcount} removed)",
            extra={"subject": subject, "resource": ResourceKind.LIKE.value, "record_id": review_id},
        )
