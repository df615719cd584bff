"""Like ORM — existence of (review, subject) means the subject liked the review.

Invariants:
    - (review_id, user_id) is the primary key: a subject likes a review at most once
    - No independent id — the pair is the identity
"""

from sqlalchemy import String, Integer, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class Like(Base):
    __tablename__ = "likes"

    review_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("reviews.id", ondelete="CASCADE"), primary_key=True,
    )
    user_id: Mapped[str] = mapped_column(String(128), primary_key=True)
