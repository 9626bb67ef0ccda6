"""Base repositories with common data access operations."""

from typing import Any, Generic, TypeVar
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel, select


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

    def add(self, entity: ModelType) -> None:
        """Add entity to session (no flush/commit)."""
        self.session.add(entity)


class SoftDeleteRepository(BaseRepository[ModelType]):
    """Repository for models carrying a `deleted_at` column.

    Every query built through `live()` excludes soft-deleted rows. The filter
    is applied per query rather than globally, so callers that need deleted
    rows can still build their own select.
    """

    def live(self) -> Any:
        """Select statement restricted to rows that are not soft-deleted."""
        return select(self.model).where(
            self.model.deleted_at.is_(None)  # type: ignore[attr-defined]
        )

    async def get_by_id(self, id: UUID) -> ModelType | None:
        """Get a live record by its primary key."""
        result = await self.session.execute(
            self.live().where(self.model.id == id)  # type: ignore[attr-defined]
        )
        return result.scalar_one_or_none()
