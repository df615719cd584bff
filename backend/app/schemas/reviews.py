"""Review Schemas — Pydantic models with field-level validation for API boundaries.

Invariants:
    - ReviewCreate never carries an owner: unknown fields (user_id) are ignored
    - rating is an integer 1–10 inclusive; review_text is 1-5000 chars after stripping
    - ReviewUpdate requires at least one of rating / review_text

Design Decisions:
    - strict int for rating: 7.5 or "7" is rejected rather than coerced
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from app.core.domain_types import MediaKind, RATING_MAX, RATING_MIN
from app.schemas.text import strip_required_text


class ReviewCreate(BaseModel):
    """Review submission — owner comes from the bearer credential."""
    tmdb_id: int = Field(gt=0)
    type: MediaKind
    rating: int = Field(ge=RATING_MIN, le=RATING_MAX, strict=True)
    review_text: str = Field(min_length=1, max_length=5000)

    @field_validator("review_text")
    @classmethod
    def strip_review_text(cls, v: str) -> str:
        return strip_required_text(v)


class ReviewUpdate(BaseModel):
    """Partial review update — owner and catalog reference are not updatable."""
    rating: int | None = Field(None, ge=RATING_MIN, le=RATING_MAX, strict=True)
    review_text: str | None = Field(None, min_length=1, max_length=5000)

    @field_validator("review_text")
    @classmethod
    def strip_review_text(cls, v: str | None) -> str | None:
        return strip_required_text(v) if v is not None else v

    @model_validator(mode="after")
    def require_a_field(self):
        if self.rating is None and self.review_text is None:
            raise ValueError("update requires rating or review_text")
        return self

    def changes(self) -> dict:
        return self.model_dump(exclude_none=True)


class ReviewResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: str
    tmdb_id: int
    type: MediaKind
    rating: int
    review_text: str
    created_at: datetime
