"""Like Schemas — toggle payload and the aggregate status view."""

from pydantic import BaseModel, ConfigDict, Field


class LikeCreate(BaseModel):
    review_id: int = Field(gt=0)


class LikeResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    review_id: int
    user_id: str


class LikeStatus(BaseModel):
    """Aggregate like view: exact count plus whether the caller liked it."""
    count: int = Field(ge=0)
    liked: bool
