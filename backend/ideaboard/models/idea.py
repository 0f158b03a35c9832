"""
IdeaBoard Backend: Idea SQLAlchemy Model
==========================================

What:  ORM model representing the `ideas` table.
Who:   Used by IdeaRepository for inserts/selects/deletes and by Alembic.

Table Design:
    - id: UUID generated in Python at creation time, never changed afterwards
    - created_at: UTC timestamp (see models/types.py)
    - message: the idea text (required by the API, enforced in IdeaService)
    - image: optional image reference, empty string when absent

    The list of likes is NOT a column or relationship here. Likes are fetched
    separately and attached to the response at read time.

    Index on created_at DESC serves "newest ideas first".
"""

import uuid
from datetime import datetime

from sqlalchemy import Index, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from ideaboard.database import Base
from ideaboard.models.types import UTCDateTime, utcnow


class Idea(Base):
    """A short message with an optional image reference."""

    __tablename__ = "ideas"

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

    message: Mapped[str] = mapped_column(Text, nullable=False)

    image: Mapped[str] = mapped_column(Text, nullable=False, default="")

    __table_args__ = (
        Index("idx_ideas_created_at", created_at.desc()),
    )

    def __repr__(self) -> str:
        return f"<Idea(id={self.id}, created_at='{self.created_at}')>"
