# Repositories package init
"""
IdeaBoard Backend: Repositories (Persistence Layer)
=====================================================

What:  The only code that issues SQL. One repository per table, each bound to
       the request's AsyncSession.
How:   Writes commit immediately (no transaction spans two repository calls).
       Any SQLAlchemyError is rolled back and re-raised as DatabaseError, so
       services never see driver exceptions.
"""

from ideaboard.repositories.idea_repository import IdeaRepository
from ideaboard.repositories.like_repository import LikeRepository

__all__ = ["IdeaRepository", "LikeRepository"]
