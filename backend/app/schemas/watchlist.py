"""Watchlist Schemas — status is validated against WatchStatus on create and update.

Invariants:
    - status outside {want, watching, watched} is a 400, never stored
    - Update carries status only
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from app.core.domain_types import MediaKind, WatchStatus


class WatchlistCreate(BaseModel):
    tmdb_id: int = Field(gt=0)
    type: MediaKind
    status: WatchStatus = WatchStatus.WANT


class WatchlistUpdate(BaseModel):
    status: WatchStatus


class WatchlistResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: str
    tmdb_id: int
    type: MediaKind
    status: WatchStatus
    added_at: datetime
