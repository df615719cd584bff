"""Favorite Routes.

Invariants:
    - GET with ?user_id is a public listing of that user's favorites
    - GET without user_id lists the caller's own favorites (credential required)
    - POST answers 201 for a new favorite, 200 when it already existed
    - DELETE by a non-owner → 403; unknown id → 500
"""

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependencies import get_db, optional_subject, require_subject
from app.core.domain_types import Subject
from app.core.errors import UnauthorizedError
from app.schemas.favorites import FavoriteCreate, FavoriteResponse
from app.services.favorites import FavoriteRepository

router = APIRouter(prefix="/api/v1/favorites", tags=["favorites"])


@router.post(
    "", response_model=FavoriteResponse, status_code=status.HTTP_201_CREATED,
)
async def add_favorite(
    body: FavoriteCreate,
    response: Response,
    subject: Subject = Depends(require_subject),
    db: AsyncSession = Depends(get_db),
):
    favorite, created = await FavoriteRepository(db).add(subject, body)
    if not created:
        response.status_code = status.HTTP_200_OK
    return favorite


@router.get("", response_model=list[FavoriteResponse])
async def list_favorites(
    user_id: str | None = Query(None, min_length=1, max_length=128),
    subject: Subject | None = Depends(optional_subject),
    db: AsyncSession = Depends(get_db),
):
    owner = user_id or subject
    if owner is None:
        raise UnauthorizedError("favorites listing without user_id or credential")
    return await FavoriteRepository(db).list_for_owner(owner)


@router.delete("/{favorite_id}")
async def delete_favorite(
    favorite_id: int,
    subject: Subject = Depends(require_subject),
    db: AsyncSession = Depends(get_db),
):
    await FavoriteRepository(db).delete(favorite_id, subject)
    return {"success": True}
