"""Shared plumbing for the table repositories."""

import logging
from typing import NoReturn

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ideaboard.exceptions import DatabaseError

logger = logging.getLogger(__name__)


class Repository:
    """Base class holding the session and the error translation."""

    table: str = ""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def _fail(self, operation: str, exc: SQLAlchemyError) -> NoReturn:
        """Rolls the session back and raises DatabaseError in place of `exc`."""
        logger.error("%s.%s failed: %s", self.table, operation, exc)
        try:
            await self.session.rollback()
        except SQLAlchemyError as rollback_exc:
            logger.error("Rollback after %s.%s failed: %s", self.table, operation, rollback_exc)
        raise DatabaseError(
            context={
                "table": self.table,
                "operation": operation,
                "error_type": type(exc).__name__,
            },
        ) from exc
