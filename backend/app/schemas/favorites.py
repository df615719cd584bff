"""Favorite Schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from app.core.domain_types import MediaKind


class FavoriteCreate(BaseModel):
    tmdb_id: int = Field(gt=0)
    type: MediaKind


class FavoriteResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: str
    tmdb_id: int
    type: MediaKind
    added_at: datetime
