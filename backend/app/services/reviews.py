"""Review Repository — create/list/update/delete reviews of catalog items.

Invariants:
    - Owner is always the verified subject passed in, never taken from the payload
    - list_for_item returns only the exact (tmdb_id, type) pair, newest first
    - Deleting a review deletes its comments and likes in the same transaction

Design Decisions:
    - Ties on created_at broken by id (insertion order) so ordering is total
"""

import logging

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import MediaKind, ResourceKind, Subject
from app.core.errors import RecordNotFoundError
from app.models.comment import Comment
from app.models.like import Like
from app.models.review import Review
from app.schemas.reviews import ReviewCreate, ReviewUpdate
from app.services.ownership import delete_owned, update_owned

logger = logging.getLogger(__name__)


async def ensure_review_exists(db: AsyncSession, review_id: int) -> None:
    """Raise RecordNotFoundError unless the review exists."""
    result = await db.execute(select(Review.id).where(Review.id == review_id))
    if result.scalar_one_or_none() is None:
        raise RecordNotFoundError(ResourceKind.REVIEW.value, review_id)


class ReviewRepository:
    """Review persistence scoped to one request session."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, subject: Subject, body: ReviewCreate) -> Review:
        review = Review(
            user_id=subject,
            tmdb_id=body.tmdb_id,
            type=body.type.value,
            rating=body.rating,
            review_text=body.review_text,
        )
        self.db.add(review)
        await self.db.commit()
        logger.info(
            f"Review {review.id} created",
            extra={"subject": subject, "resource": ResourceKind.REVIEW.value, "record_id": review.id},
        )
        return review

    async def list_for_item(self, tmdb_id: int, kind: MediaKind) -> list[Review]:
        result = await self.db.execute(
            select(Review)
            .where(Review.tmdb_id == tmdb_id, Review.type == kind.value)
            .order_by(Review.created_at.desc(), Review.id.desc()),
        )
        return list(result.scalars().all())

    async def update(
        self, review_id: int, subject: Subject, body: ReviewUpdate,
    ) -> Review:
        review = await update_owned(
            self.db, Review, ResourceKind.REVIEW, review_id, subject, body.changes(),
        )
        await self.db.commit()
        logger.info(
            f"Review {review_id} updated",
            extra={"subject": subject, "resource": ResourceKind.REVIEW.value, "record_id": review_id},
        )
        return review

    async def delete(self, review_id: int, subject: Subject) -> None:
        await delete_owned(self.db, Review, ResourceKind.REVIEW, review_id, subject)
        await self.db.execute(
            delete(Comment)
            .where(Comment.review_id == review_id)
            .execution_options(synchronize_session=False),
        )
        await self.db.execute(
            delete(Like)
            .where(Like.review_id == review_id)
            .execution_options(synchronize_session=False),
        )
        await self.db.commit()
        logger.info(
            f"Review {review_id} deleted with its comments and likes",
            extra={"subject": subject, "resource": ResourceKind.REVIEW.value, "record_id": review_id},
        )
