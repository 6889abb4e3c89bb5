"""Transaction helpers shared by services."""

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel

from src.lovgol.core.exceptions import ConflictError, InternalError
from src.lovgol.core.logging import get_logger

logger = get_logger(__name__)


class BaseService:
    """Owns commit/rollback for one request-scoped session."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def commit(
        self,
        *refresh: SQLModel,
        action: str,
        conflict_detail: str | None = None,
    ) -> None:
        """Commit the unit of work and refresh ``refresh`` entities.

        Raises:
            ConflictError: On an integrity violation when ``conflict_detail`` is given.
            InternalError: On any other database failure.
        """
        try:
            await self.session.commit()
            for entity in refresh:
                await self.session.refresh(entity)
        except IntegrityError as e:
            await self.session.rollback()
            if conflict_detail is not None:
                logger.info("Integrity conflict", action=action, error=str(e.orig))
                raise ConflictError(conflict_detail) from e
            logger.error("Integrity error", action=action, error=str(e.orig))
            raise InternalError(f"Failed to {action}") from e
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error("Database error", action=action, error=str(e))
            raise InternalError(f"Failed to {action}") from e
