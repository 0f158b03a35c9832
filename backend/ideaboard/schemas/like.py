"""
IdeaBoard Backend: Like Schemas
=================================

Wire format of a like: `{id, created_at}`. The owning idea id is deliberately
not part of the serialized form.
"""

import uuid
from datetime import datetime
from typing import List

from pydantic import BaseModel, Field


class LikeResponse(BaseModel):
    """One like, as returned by the likes endpoints and embedded in ideas."""
    id: uuid.UUID = Field(description="Unique like identifier (UUID)")
    created_at: datetime = Field(description="When the like was created (UTC ISO 8601)")

    model_config = {"from_attributes": True}


class LikeListResponse(BaseModel):
    """Returned by GET /ideas/{id}/likes, newest like first."""
    results: List[LikeResponse] = Field(default_factory=list)
