"""
IdeaBoard Backend: Idea Schemas
=================================

What:  Pydantic models defining the API contract for ideas.
How:   FastAPI validates request bodies against IdeaCreate and serializes
       IdeaResponse / IdeaListResponse on the way out.

IdeaResponse doubles as the in-memory idea value the services hand around.
Its `likes` list is empty until IdeaService.compose_with_likes attaches the
likes fetched for it.
"""

import uuid
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from ideaboard.schemas.like import LikeResponse


class IdeaCreate(BaseModel):
    """
    Request body of POST /ideas.

    Both fields are optional at the schema level so that a missing message
    reaches IdeaService and is reported as a 400 validation_error rather than
    FastAPI's generic 422.
    """
    message: Optional[str] = Field(default=None, description="The idea text (required, non-empty)")
    image: Optional[str] = Field(default=None, description="Image reference; defaults to empty string")


class IdeaResponse(BaseModel):
    """Full representation of an idea with its likes, newest like first."""
    id: uuid.UUID = Field(description="Unique idea identifier (UUID)")
    created_at: datetime = Field(description="When the idea was created (UTC ISO 8601)")
    message: str = Field(description="The idea text")
    image: str = Field(default="", description="Image reference, empty when none was given")
    likes: List[LikeResponse] = Field(default_factory=list, description="Likes on this idea")

    model_config = {"from_attributes": True}


class IdeaListResponse(BaseModel):
    """Returned by GET /ideas, newest idea first."""
    results: List[IdeaResponse] = Field(default_factory=list)
