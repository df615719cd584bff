"""Comment Routes — review threads, listed oldest first.

Invariants:
    - POST/PUT/DELETE require a verified subject
    - PUT/DELETE by a non-owner → 403; unknown id → 500
"""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependencies import get_db, require_subject
from app.core.domain_types import Subject
from app.schemas.comments import CommentCreate, CommentResponse, CommentUpdate
from app.services.comments import CommentRepository

router = APIRouter(prefix="/api/v1/comments", tags=["comments"])


@router.post(
    "", response_model=CommentResponse, status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    body: CommentCreate,
    subject: Subject = Depends(require_subject),
    db: AsyncSession = Depends(get_db),
):
    return await CommentRepository(db).create(subject, body)


@router.get("", response_model=list[CommentResponse])
async def list_comments(
    review_id: int = Query(..., gt=0),
    db: AsyncSession = Depends(get_db),
):
    return await CommentRepository(db).list_for_review(review_id)


@router.put("/{comment_id}", response_model=CommentResponse)
async def update_comment(
    comment_id: int,
    body: CommentUpdate,
    subject: Subject = Depends(require_subject),
    db: AsyncSession = Depends(get_db),
):
    return await CommentRepository(db).update(comment_id, subject, body)


@router.delete("/{comment_id}")
async def delete_comment(
    comment_id: int,
    subject: Subject = Depends(require_subject),
    db: AsyncSession = Depends(get_db),
):
    await CommentRepository(db).delete(comment_id, subject)
    return {"success": True}
