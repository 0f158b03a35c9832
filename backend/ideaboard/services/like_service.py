"""
IdeaBoard Backend: Like Service
=================================

What:  Business rules for likes, always scoped to one idea.
Who:   Called by the likes routes and, for like attachment, the ideas routes.

Error policy:
    list_likes   → storage failure degrades to an empty list (never raises)
    create_like  → storage failure propagates as DatabaseError
    delete_like  → storage failure on the delete propagates as DatabaseError

delete_like removes the most recently created like of the idea. Clients
cannot choose which like goes away; "minus one" always takes the newest.
"""

import logging
import uuid
from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from ideaboard.exceptions import DatabaseError
from ideaboard.models.like import Like
from ideaboard.models.types import utcnow
from ideaboard.repositories.like_repository import LikeRepository
from ideaboard.schemas.like import LikeResponse

logger = logging.getLogger(__name__)


class LikeService:
    """Stateless; receives the request's session on every call."""

    async def list_likes(self, db: AsyncSession, idea_id: uuid.UUID) -> List[LikeResponse]:
        """
        Likes of `idea_id`, newest first.

        Returns an empty list when the likes cannot be read, so listing
        endpoints and like attachment never fail because of likes.
        """
        try:
            likes = await LikeRepository(db).select_by_idea_id(idea_id)
        except DatabaseError as e:
            logger.warning("Could not list likes of idea %s, returning none: %s", idea_id, e.context)
            return []
        return [LikeResponse.model_validate(like) for like in likes]

    async def create_like(self, db: AsyncSession, idea_id: uuid.UUID) -> LikeResponse:
        """
        Adds one like to `idea_id` and returns it.

        The idea is not looked up first. A like for an unknown idea is either
        stored as is or rejected by the foreign key, depending on the database.

        Raises:
            DatabaseError: the insert failed
        """
        like = Like(id=uuid.uuid4(), created_at=utcnow(), idea_id=idea_id)
        await LikeRepository(db).insert(like)
        logger.info("Like %s added to idea %s", like.id, idea_id)
        return LikeResponse.model_validate(like)

    async def delete_like(self, db: AsyncSession, idea_id: uuid.UUID) -> None:
        """
        Removes the most recent like of `idea_id`; a no-op when it has none.

        Raises:
            DatabaseError: the delete statement failed
        """
        likes = await self.list_likes(db, idea_id)
        if not likes:
            logger.debug("Idea %s has no likes to remove", idea_id)
            return

        newest = likes[0]
        await LikeRepository(db).delete_by_id(newest.id)
        logger.info("Like %s removed from idea %s", newest.id, idea_id)


like_service = LikeService()
