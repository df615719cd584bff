"""Profile Schemas."""

from pydantic import BaseModel, ConfigDict, Field


class ProfileUpdate(BaseModel):
    bio: str = Field(max_length=1000)


class ProfileResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    user_id: str
    bio: str = ""
