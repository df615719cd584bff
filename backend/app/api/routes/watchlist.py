"""Watchlist Routes — every route is private to the calling subject.

Invariants:
    - PUT accepts status only; an out-of-set status is a 400
    - PUT/DELETE on another subject's entry → 403; unknown id → 500
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependencies import get_db, require_subject
from app.core.domain_types import Subject
from app.schemas.watchlist import WatchlistCreate, WatchlistResponse, WatchlistUpdate
from app.services.watchlist import WatchlistRepository

router = APIRouter(prefix="/api/v1/watchlist", tags=["watchlist"])


@router.post(
    "", response_model=WatchlistResponse, status_code=status.HTTP_201_CREATED,
)
async def add_to_watchlist(
    body: WatchlistCreate,
    subject: Subject = Depends(require_subject),
    db: AsyncSession = Depends(get_db),
):
    return await WatchlistRepository(db).add(subject, body)


@router.get("", response_model=list[WatchlistResponse])
async def list_watchlist(
    subject: Subject = Depends(require_subject),
    db: AsyncSession = Depends(get_db),
):
    return await WatchlistRepository(db).list_for_owner(subject)


@router.put("/{entry_id}", response_model=WatchlistResponse)
async def update_watchlist_entry(
    entry_id: int,
    body: WatchlistUpdate,
    subject: Subject = Depends(require_subject),
    db: AsyncSession = Depends(get_db),
):
    return await WatchlistRepository(db).update_status(entry_id, subject, body.status)


@router.delete("/{entry_id}")
async def delete_watchlist_entry(
    entry_id: int,
    subject: Subject = Depends(require_subject),
    db: AsyncSession = Depends(get_db),
):
    await WatchlistRepository(db).delete(entry_id, subject)
    return {"success": True}
