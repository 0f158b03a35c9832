"""
IdeaBoard Backend: Likes Route Handlers
=========================================

What:  The likes sub-resource of an idea, /ideas/{idea_id}/likes.

Status codes:
    GET    200 with the likes, newest first (empty results on storage failure)
    POST   200 with the created like, or 204 when it could not be stored
    DELETE 204 always; removes the idea's most recent like if it has any
"""

import logging
from typing import Union
from uuid import UUID

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from ideaboard.database import get_db_session
from ideaboard.exceptions import DatabaseError
from ideaboard.routes.responses import no_content
from ideaboard.schemas.like import LikeListResponse, LikeResponse
from ideaboard.services.like_service import like_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/ideas/{idea_id}/likes", tags=["Likes"])


@router.get("", response_model=LikeListResponse, summary="List the likes of an idea")
async def list_likes(
    idea_id: UUID,
    db: AsyncSession = Depends(get_db_session),
) -> LikeListResponse:
    return LikeListResponse(results=await like_service.list_likes(db, idea_id))


@router.post(
    "",
    response_model=LikeResponse,
    responses={
        200: {"description": "Like added", "model": LikeResponse},
        204: {"description": "The like could not be stored"},
    },
    summary="Add one like to an idea",
)
async def plus_one(
    idea_id: UUID,
    db: AsyncSession = Depends(get_db_session),
) -> Union[LikeResponse, Response]:
    try:
        return await like_service.create_like(db, idea_id)
    except DatabaseError as e:
        logger.warning("Like for idea %s not stored: %s", idea_id, e.context)
        return no_content()


@router.delete(
    "",
    status_code=204,
    response_class=Response,
    summary="Remove the most recent like of an idea",
)
async def minus_one(
    idea_id: UUID,
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    # Clients cannot pick a like: the newest one is removed
    try:
        await like_service.delete_like(db, idea_id)
    except DatabaseError as e:
        logger.error("Removing a like from idea %s failed, answering 204 anyway: %s", idea_id, e.context)
    return no_content()
