"""Review Routes — public listing, authenticated owner-only mutations.

Invariants:
    - POST/PUT/DELETE require a verified subject (401 otherwise, before any store access)
    - PUT/DELETE by a non-owner → 403; unknown id → 500 (RecordNotFoundError)
    - GET lists one catalog item's reviews, newest first
"""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependencies import get_db, require_subject
from app.core.domain_types import MediaKind, Subject
from app.schemas.reviews import ReviewCreate, ReviewResponse, ReviewUpdate
from app.services.reviews import ReviewRepository

router = APIRouter(prefix="/api/v1/reviews", tags=["reviews"])


@router.post(
    "", response_model=ReviewResponse, status_code=status.HTTP_201_CREATED,
)
async def create_review(
    body: ReviewCreate,
    subject: Subject = Depends(require_subject),
    db: AsyncSession = Depends(get_db),
):
    return await ReviewRepository(db).create(subject, body)


@router.get("", response_model=list[ReviewResponse])
async def list_reviews(
    tmdb_id: int = Query(..., gt=0),
    media_type: MediaKind = Query(..., alias="type"),
    db: AsyncSession = Depends(get_db),
):
    return await ReviewRepository(db).list_for_item(tmdb_id, media_type)


@router.put("/{review_id}", response_model=ReviewResponse)
async def update_review(
    review_id: int,
    body: ReviewUpdate,
    subject: Subject = Depends(require_subject),
    db: AsyncSession = Depends(get_db),
):
    return await ReviewRepository(db).update(review_id, subject, body)


@router.delete("/{review_id}")
async def delete_review(
    review_id: int,
    subject: Subject = Depends(require_subject),
    db: AsyncSession = Depends(get_db),
):
    await ReviewRepository(db).delete(review_id, subject)
    return {"success": True}
