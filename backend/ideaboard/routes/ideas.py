"""
IdeaBoard Backend: Ideas Route Handlers
=========================================

What:  GET/POST /ideas and GET/DELETE /ideas/{idea_id}.
How:   Delegates to IdeaService, then attaches likes to every idea it returns
       with one LikeService.list_likes call per idea (in list order).

Status codes:
    GET    /ideas        200 always (empty results when ideas cannot be read)
    POST   /ideas        201, or 400 validation_error without a message
    GET    /ideas/{id}   200, or 204 No Content when the idea does not exist
    DELETE /ideas/{id}   204 always
"""

import logging
from typing import List, Optional, Union
from uuid import UUID

from fastapi import APIRouter, Body, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from ideaboard.config import settings
from ideaboard.database import get_db_session
from ideaboard.exceptions import DatabaseError, NotFoundError
from ideaboard.routes.responses import no_content
from ideaboard.schemas.common import ErrorResponse
from ideaboard.schemas.idea import IdeaCreate, IdeaListResponse, IdeaResponse
from ideaboard.services.idea_service import idea_service
from ideaboard.services.like_service import like_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/ideas", tags=["Ideas"])


async def attach_likes(db: AsyncSession, ideas: List[IdeaResponse]) -> List[IdeaResponse]:
    """Fetches the likes of each idea and returns the ideas with likes attached."""
    composed = []
    for idea in ideas:
        likes = await like_service.list_likes(db, idea.id)
        composed.append(idea_service.compose_with_likes(idea, likes))
    return composed


@router.get(
    "",
    response_model=IdeaListResponse,
    summary="List the most recent ideas with their likes",
)
async def list_ideas(db: AsyncSession = Depends(get_db_session)) -> IdeaListResponse:
    ideas = await idea_service.list_ideas(db, limit=settings.ideas_list_limit)
    return IdeaListResponse(results=await attach_likes(db, ideas))


@router.post(
    "",
    status_code=201,
    response_model=IdeaResponse,
    responses={
        201: {"description": "Idea created", "model": IdeaResponse},
        400: {"description": "Missing message", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Create an idea",
)
async def create_idea(
    idea_in: Optional[IdeaCreate] = Body(default=None),
    db: AsyncSession = Depends(get_db_session),
) -> IdeaResponse:
    """
    Creates an idea. The server generates `id` and `created_at`; `image`
    defaults to an empty string and `likes` is always empty.

    A missing or empty message raises ValidationError (400). A storage failure
    raises DatabaseError, answered by the global handler with a 500.
    """
    return await idea_service.create_idea(db, idea_in)


@router.get(
    "/{idea_id}",
    response_model=IdeaResponse,
    responses={
        200: {"description": "The idea with its likes", "model": IdeaResponse},
        204: {"description": "No idea with this id"},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Get one idea with its likes",
)
async def get_idea(
    idea_id: UUID,
    db: AsyncSession = Depends(get_db_session),
) -> Union[IdeaResponse, Response]:
    """Unknown ids answer 204 No Content rather than 404."""
    try:
        idea = await idea_service.find_idea(db, idea_id)
    except NotFoundError:
        return no_content()

    likes = await like_service.list_likes(db, idea.id)
    return idea_service.compose_with_likes(idea, likes)


@router.delete(
    "/{idea_id}",
    status_code=204,
    response_class=Response,
    summary="Delete an idea",
)
async def delete_idea(
    idea_id: UUID,
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    """Always 204, whether or not the idea existed or the delete went through."""
    try:
        await idea_service.delete_idea(db, idea_id)
    except DatabaseError as e:
        logger.error("Delete of idea %s failed, answering 204 anyway: %s", idea_id, e.context)
    return no_content()
