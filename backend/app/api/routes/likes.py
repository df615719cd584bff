"""Like Routes — aggregate status, idempotent like and unlike.

Invariants:
    - Every likes route requires a verified subject (liked is per-subject)
    - POST answers 201 for a new like, 200 when the like already existed
    - DELETE is idempotent and always answers {"success": true}
"""

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependencies import get_db, require_subject
from app.core.domain_types import Subject
from app.schemas.likes import LikeCreate, LikeResponse, LikeStatus
from app.services.likes import LikeRepository

router = APIRouter(prefix="/api/v1/likes", tags=["likes"])


@router.get("", response_model=LikeStatus)
async def like_status(
    review_id: int = Query(..., gt=0),
    subject: Subject = Depends(require_subject),
    db: AsyncSession = Depends(get_db),
):
    return await LikeRepository(db).status(review_id, subject)


@router.post(
    "", response_model=LikeResponse, status_code=status.HTTP_201_CREATED,
)
async def create_like(
    body: LikeCreate,
    response: Response,
    subject: Subject = Depends(require_subject),
    db: AsyncSession = Depends(get_db),
):
    like, created = await LikeRepository(db).add(body.review_id, subject)
    if not created:
        response.status_code = status.HTTP_200_OK
    return like


@router.delete("")
async def delete_like(
    review_id: int = Query(..., gt=0),
    subject: Subject = Depends(require_subject),
    db: AsyncSession = Depends(get_db),
):
    await LikeRepository(db).remove(review_id, subject)
    return {"success": True}
