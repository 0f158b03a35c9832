"""
IdeaBoard Backend: Like SQLAlchemy Model
==========================================

What:  ORM model representing the `likes` table.
Who:   Used by LikeRepository.

A like is an anonymous, timestamped endorsement of exactly one idea. The
`idea_id` foreign key is not exposed by the API. Creating a like does not
check that the idea exists; whether a dangling id is rejected depends on the
database enforcing the constraint. Deleting an idea removes its likes
(ON DELETE CASCADE).

Composite index (idea_id, created_at DESC) serves "likes of an idea,
newest first".
"""

import uuid
from datetime import datetime

from sqlalchemy import ForeignKey, Index, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from ideaboard.database import Base
from ideaboard.models.types import UTCDateTime, utcnow


class Like(Base):
    """One like on one idea."""

    __tablename__ = "likes"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime,
        nullable=False,
        default=utcnow,
    )

    idea_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("ideas.id", ondelete="CASCADE"),
        nullable=False,
    )

    __table_args__ = (
        Index("idx_likes_idea_id_created_at", idea_id, created_at.desc()),
    )

    def __repr__(self) -> str:
        return f"<Like(id={self.id}, idea_id={self.idea_id})>"
