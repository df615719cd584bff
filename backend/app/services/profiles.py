"""Profile Repository — per-subject bio, keyed by the subject itself."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import ResourceKind, Subject
from app.models.profile import Profile

logger = logging.getLogger(__name__)


class ProfileRepository:

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, user_id: str) -> Profile:
        """Absent profiles read as an empty bio."""
        profile = await self.db.get(Profile, user_id)
        return profile or Profile(user_id=user_id, bio="")

    async def save_bio(self, subject: Subject, bio: str) -> Profile:
        profile = await self.db.get(Profile, subject)
        if profile is None:
            profile = Profile(user_id=subject, bio=bio)
            self.db.add(profile)
        else:
            profile.bio = bio
        await self.db.commit()
        logger.info(
            "Profile bio saved",
            extra={"subject": subject, "resource": ResourceKind.PROFILE.value, "record_id": subject},
        )
        return profile
