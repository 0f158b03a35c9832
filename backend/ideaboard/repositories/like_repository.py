"""
IdeaBoard Backend: Like Repository
====================================

Statements against the `likes` table. Every listing is ordered by
created_at DESC, so the first element is always the most recent like.
"""

import uuid
from typing import List, Optional

from sqlalchemy import delete, desc, select
from sqlalchemy.exc import SQLAlchemyError

from ideaboard.models.like import Like
from ideaboard.repositories.base import Repository


class LikeRepository(Repository):
    table = "likes"

    async def insert(self, like: Like) -> Like:
        """Persists a like against `like.idea_id` and commits."""
        try:
            self.session.add(like)
            await self.session.commit()
        except SQLAlchemyError as exc:
            await self._fail("insert", exc)
        return like

    async def select_by_id(self, like_id: uuid.UUID) -> Optional[Like]:
        try:
            result = await self.session.execute(select(Like).where(Like.id == like_id))
            return result.scalar_one_or_none()
        except SQLAlchemyError as exc:
            await self._fail("select_by_id", exc)

    async def select_all(self, limit: int) -> List[Like]:
        try:
            result = await self.session.execute(
                select(Like).order_by(desc(Like.created_at)).limit(limit)
            )
            return list(result.scalars().all())
        except SQLAlchemyError as exc:
            await self._fail("select_all", exc)

    async def select_by_idea_id(self, idea_id: uuid.UUID) -> List[Like]:
        """All likes of one idea, newest first."""
        try:
            result = await self.session.execute(
                select(Like)
                .where(Like.idea_id == idea_id)
                .order_by(desc(Like.created_at))
            )
            return list(result.scalars().all())
        except SQLAlchemyError as exc:
            await self._fail("select_by_idea_id", exc)

    async def delete_by_id(self, like_id: uuid.UUID) -> None:
        try:
            await self.session.execute(delete(Like).where(Like.id == like_id))
            await self.session.commit()
        except SQLAlchemyError as exc:
            await self._fail("delete_by_id", exc)
