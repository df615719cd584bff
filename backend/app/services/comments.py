"""Comment Repository — threaded replies on reviews.

Invariants:
    - A comment can only be created under an existing review
    - list_for_review is chronological (oldest first), the reverse of review listing
    - Only comment_text is updatable, and only by the comment's owner
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import ResourceKind, Subject
from app.models.comment import Comment
from app.schemas.comments import CommentCreate, CommentUpdate
from app.services.ownership import delete_owned, update_owned
from app.services.reviews import ensure_review_exists

logger = logging.getLogger(__name__)


class CommentRepository:
    """Comment persistence scoped to one request session."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, subject: Subject, body: CommentCreate) -> Comment:
        await ensure_review_exists(self.db, body.review_id)
        comment = Comment(
            review_id=body.review_id,
            user_id=subject,
            comment_text=body.comment_text,
        )
        self.db.add(comment)
        await self.db.commit()
        logger.info(
            f"Comment {comment.id} created on review {body.review_id}",
            extra={"subject": subject, "resource": ResourceKind.COMMENT.value, "record_id": comment.id},
        )
        return comment

    async def list_for_review(self, review_id: int) -> list[Comment]:
        result = await self.db.execute(
            select(Comment)
            .where(Comment.review_id == review_id)
            .order_by(Comment.created_at.asc(), Comment.id.asc()),
        )
        return list(result.scalars().all())

    async def update(
        self, comment_id: int, subject: Subject, body: CommentUpdate,
    ) -> Comment:
        comment = await update_owned(
            self.db, Comment, ResourceKind.COMMENT, comment_id, subject,
            {"comment_text": body.comment_text},
        )
        await self.db.commit()
        logger.info(
            f"Comment {comment_id} updated",
            extra={"subject": subject, "resource": ResourceKind.COMMENT.value, "record_id": comment_id},
        )
        return comment

    async def delete(self, comment_id: int, subject: Subject) -> None:
        await delete_owned(self.db, Comment, ResourceKind.COMMENT, comment_id, subject)
        await self.db.commit()
        logger.info(
            f"Comment {comment_id} deleted",
            extra={"subject": subject, "resource": ResourceKind.COMMENT.value, "record_id": comment_id},
        )
