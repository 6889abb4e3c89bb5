"""Base repository with common CRUD operations."""

from typing import Any, Generic, TypeVar
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel, select

from src.lovgol.models.base import utc_now

ModelType = TypeVar("ModelType", bound=SQLModel)


class BaseRepository(Generic[ModelType]):
    """Base repository providing common database operations.

    Repositories handle data access only. Transaction control (commit)
    should be done in the service layer.
    """

    model: type[ModelType]

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, id: UUID) -> ModelType | None:
        """Get a record by its primary key."""
        result = await self.session.execute(
            select(self.model).where(self.model.id == id)  # type: ignore[attr-defined]
        )
        return result.scalar_one_or_none()

    async def list_ordered(self, order_field: Any, query: Any = None) -> list[ModelType]:
        """Return every row of ``query`` (default: whole table), ``order_field`` descending."""
        if query is None:
            query = select(self.model)
        result = await self.session.execute(query.order_by(order_field.desc()))
        return list(result.scalars().all())

    def add(self, entity: ModelType) -> None:
        """Add entity to session (no flush/commit)."""
        self.session.add(entity)

    async def delete(self, entity: ModelType) -> None:
        """Mark entity for deletion (no commit)."""
        await self.session.delete(entity)

    def apply_changes(self, entity: ModelType, changes: dict[str, Any]) -> ModelType:
        """Copy supplied fields onto the entity and bump ``updated_at`` when present."""
        for field, value in changes.items():
            setattr(entity, field, value)
        if hasattr(entity, "updated_at"):
            entity.updated_at = utc_now()  # type: ignore[attr-defined]
        self.session.add(entity)
        return entity
