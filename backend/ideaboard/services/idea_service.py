"""
IdeaBoard Backend: Idea Service
=================================

What:  Business rules for ideas: list, find, create, delete, and the pure
       composition step that attaches a like list to an idea value.
Who:   Called by the ideas routes.

Error policy:
    list_ideas  → storage failure degrades to an empty list (never raises)
    find_idea   → NotFoundError when absent; DatabaseError on storage failure
    create_idea → ValidationError without a message; DatabaseError on failure
    delete_idea → absent ids are fine; DatabaseError on storage failure

Ideas returned from here carry an empty `likes` list. Attaching likes is a
separate read (one likes query per idea) done through compose_with_likes, not
a SQL join, so an idea deleted in between simply comes back without likes.
"""

import logging
import uuid
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from ideaboard.exceptions import DatabaseError, NotFoundError, ValidationError
from ideaboard.models.idea import Idea
from ideaboard.models.types import utcnow
from ideaboard.repositories.idea_repository import IdeaRepository
from ideaboard.schemas.idea import IdeaCreate, IdeaResponse
from ideaboard.schemas.like import LikeResponse

logger = logging.getLogger(__name__)


class IdeaService:
    """Stateless; receives the request's session on every call."""

    async def list_ideas(self, db: AsyncSession, limit: int) -> List[IdeaResponse]:
        """
        Up to `limit` ideas, newest first, with empty like lists.

        Returns an empty list when the ideas cannot be read.
        """
        try:
            ideas = await IdeaRepository(db).select_all(limit)
        except DatabaseError as e:
            logger.warning("Could not list ideas, returning none: %s", e.context)
            return []
        return [IdeaResponse.model_validate(idea) for idea in ideas]

    async def find_idea(self, db: AsyncSession, idea_id: uuid.UUID) -> IdeaResponse:
        """
        Raises:
            NotFoundError: no idea has this id
            DatabaseError: the lookup itself failed
        """
        idea = await IdeaRepository(db).select_by_id(idea_id)
        if idea is None:
            raise NotFoundError(resource="idea", resource_id=str(idea_id))
        return IdeaResponse.model_validate(idea)

    async def create_idea(self, db: AsyncSession, idea_in: Optional[IdeaCreate]) -> IdeaResponse:
        """
        Stores a new idea with a server-generated id and timestamp.

        Raises:
            ValidationError: the body is missing or has no message
            DatabaseError: the insert failed
        """
        if idea_in is None or not idea_in.message:
            raise ValidationError(
                message="An idea requires a non-empty message",
                field="message",
            )

        idea = Idea(
            id=uuid.uuid4(),
            created_at=utcnow(),
            message=idea_in.message,
            image=idea_in.image or "",
        )
        await IdeaRepository(db).insert(idea)
        logger.info("Idea %s created", idea.id)
        return IdeaResponse.model_validate(idea)

    async def delete_idea(self, db: AsyncSession, idea_id: uuid.UUID) -> None:
        """
        Deletes the idea (and, through the foreign key, its likes).

        Succeeds whether or not the idea existed, so repeating it is harmless.

        Raises:
            DatabaseError: the delete statement failed
        """
        await IdeaRepository(db).delete_by_id(idea_id)
        logger.info("Idea %s deleted", idea_id)

    @staticmethod
    def compose_with_likes(idea: IdeaResponse, likes: List[LikeResponse]) -> IdeaResponse:
        """Returns a copy of `idea` whose likes are `likes`. `idea` is left unchanged."""
        return idea.model_copy(update={"likes": list(likes)})


idea_service = IdeaService()
