"""Base repository: generic read and create operations."""

from typing import Any, Generic, TypeVar

from sqlalchemy import inspect as sa_inspect, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.persistence.database import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Base repository with get_by_id, get_all and create.

    get_all orders by primary key so listings follow the store's
    insertion order.
    """

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    async def get_by_id(self, entity_id: Any) -> ModelType | None:
        """Return a single record by primary key, or None."""
        return await self.db.get(self.model, entity_id)

    async def get_all(self) -> list[ModelType]:
        """Return all records in primary-key order."""
        pk_columns = sa_inspect(self.model).primary_key
        result = await self.db.execute(select(self.model).order_by(*pk_columns))
        return list(result.scalars().all())

    async def create(self, obj: ModelType) -> ModelType:
        """Persist a new record; the store-generated key is loaded on return."""
        self.db.add(obj)
        await self.db.flush()
        await self.db.refresh(obj)
        return obj
