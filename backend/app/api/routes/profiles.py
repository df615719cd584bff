"""Profile Routes — public bio read, owner-only bio write via /me."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependencies import get_db, require_subject
from app.core.domain_types import Subject
from app.schemas.profiles import ProfileResponse, ProfileUpdate
from app.services.profiles import ProfileRepository

router = APIRouter(prefix="/api/v1/profiles", tags=["profiles"])


@router.put("/me", response_model=ProfileResponse)
async def update_my_profile(
    body: ProfileUpdate,
    subject: Subject = Depends(require_subject),
    db: AsyncSession = Depends(get_db),
):
    return await ProfileRepository(db).save_bio(subject, body.bio)


@router.get("/{user_id}", response_model=ProfileResponse)
async def get_profile(user_id: str, db: AsyncSession = Depends(get_db)):
    return await ProfileRepository(db).get(user_id)
