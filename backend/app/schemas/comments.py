"""Comment Schemas — thread replies attached to a review.

Invariants:
    - comment_text: 1-2000 chars, stripped, non-empty
    - Only comment_text is updatable
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.schemas.text import strip_required_text


class CommentCreate(BaseModel):
    review_id: int = Field(gt=0)
    comment_text: str = Field(min_length=1, max_length=2000)

    @field_validator("comment_text")
    @classmethod
    def strip_comment_text(cls, v: str) -> str:
        return strip_required_text(v)


class CommentUpdate(BaseModel):
    comment_text: str = Field(min_length=1, max_length=2000)

    @field_validator("comment_text")
    @classmethod
    def strip_comment_text(cls, v: str) -> str:
        return strip_required_text(v)


class CommentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    review_id: int
    user_id: str
    comment_text: str
    created_at: datetime
