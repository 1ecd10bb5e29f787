"""Base repository: generic lookups by primary key and create."""

from collections.abc import Iterable
from typing import Any, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from realm_admin.infrastructure.persistence.database import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Base repository with get_by_id, get_many_by_ids and create.

    Subclasses map ORM rows to application DTOs at their public surface.
    """

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    async def _get_row(self, entity_id: str) -> ModelType | None:
        """Return a single record by primary key, or None."""
        model: Any = self.model
        result = await self.db.execute(select(self.model).where(model.id == entity_id))
        return result.scalar_one_or_none()

    async def _get_rows(self, entity_ids: Iterable[str]) -> list[ModelType]:
        """Return all records whose primary key is in entity_ids (one query)."""
        ids = list(dict.fromkeys(entity_ids))
        if not ids:
            return []
        model: Any = self.model
        result = await self.db.execute(select(self.model).where(model.id.in_(ids)))
        return list(result.scalars().all())

    async def _create_row(self, obj: ModelType) -> ModelType:
        """Persist a new record and refresh server defaults."""
        self.db.add(obj)
        await self.db.flush()
        await self.db.refresh(obj)
        return obj
