"""
IdeaBoard Backend: Idea Repository
====================================

Statements against the `ideas` table.

Query plans:
    select_by_id: WHERE id = :id                      → primary key lookup
    select_all:   ORDER BY created_at DESC LIMIT :n   → idx_ideas_created_at
"""

import uuid
from typing import List, Optional

from sqlalchemy import delete, desc, select
from sqlalchemy.exc import SQLAlchemyError

from ideaboard.models.idea import Idea
from ideaboard.repositories.base import Repository


class IdeaRepository(Repository):
    table = "ideas"

    async def insert(self, idea: Idea) -> Idea:
        """Persists a new idea row and commits."""
        try:
            self.session.add(idea)
            await self.session.commit()
        except SQLAlchemyError as exc:
            await self._fail("insert", exc)
        return idea

    async def select_by_id(self, idea_id: uuid.UUID) -> Optional[Idea]:
        try:
            result = await self.session.execute(select(Idea).where(Idea.id == idea_id))
            return result.scalar_one_or_none()
        except SQLAlchemyError as exc:
            await self._fail("select_by_id", exc)

    async def select_all(self, limit: int) -> List[Idea]:
        """Newest ideas first, at most `limit` of them."""
        try:
            result = await self.session.execute(
                select(Idea).order_by(desc(Idea.created_at)).limit(limit)
            )
            return list(result.scalars().all())
        except SQLAlchemyError as exc:
            await self._fail("select_all", exc)

    async def delete_by_id(self, idea_id: uuid.UUID) -> None:
        """Deletes the row if present. Deleting an absent id is not an error."""
        try:
            await self.session.execute(delete(Idea).where(Idea.id == idea_id))
            await self.session.commit()
        except SQLAlchemyError as exc:
            await self._fail("delete_by_id", exc)
