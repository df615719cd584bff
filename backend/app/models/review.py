"""Review ORM — a subject's rating and write-up of one catalog item.

Invariants:
    - user_id is the verified subject at creation time and never changes
    - (tmdb_id, type) reference the external catalog and never change
    - rating is an integer 1–10 (validated at the schema boundary)

Design Decisions:
    - Integer autoincrement id: record ids are part of public URLs
    - Comments and likes cascade on delete (FK ondelete + explicit delete in services/reviews.py)
"""

from datetime import datetime, timezone

from sqlalchemy import String, Text, Integer, DateTime, Index
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class Review(Base):
    """Review entity — owned by exactly one subject."""
    __tablename__ = "reviews"
    __table_args__ = (
        Index("ix_reviews_item", "tmdb_id", "type"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(String(128), nullable=False, index=True)
    tmdb_id: Mapped[int] = mapped_column(Integer, nullable=False)
    type: Mapped[str] = mapped_column(String(10), nullable=False)
    rating: Mapped[int] = mapped_column(Integer, nullable=False)
    review_text: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
