from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from sqlalchemy import exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities import AggregateRoot
from src.infrastructure.persistence.database import Base

ModelType = TypeVar("ModelType", bound=Base)
EntityType = TypeVar("EntityType", bound=AggregateRoot)


class BaseRepository(ABC, Generic[EntityType, ModelType]):
    """
    Base repository implementing common aggregate persistence (LSP).

    Works on domain aggregates and maps them to ORM rows through
    _to_entity / _to_model / _apply_changes. Nothing is committed here:
    the unit of work owns the transaction.
    """

    def __init__(self, db: AsyncSession, model: type[ModelType]):
        self.db = db
        self.model = model

    async def _get_model(self, id: Any) -> ModelType | None:
        # Cast to Any for SQLAlchemy dynamic attribute access
        model: Any = self.model
        result = await self.db.execute(select(self.model).where(model.id == id))
        return result.scalar_one_or_none()

    async def get_by_id(self, id: Any) -> EntityType | None:
        """Get a single aggregate by ID"""
        row = await self._get_model(id)
        return self._to_entity(row) if row is not None else None

    async def add(self, entity: EntityType) -> None:
        """Stage a new aggregate for insertion"""
        self.db.add(self._to_model(entity))
        await self.db.flush()

    async def update(self, entity: EntityType) -> None:
        """Copy an edited aggregate onto its stored row"""
        row = await self._get_model(entity.id)
        if row is None:
            raise LookupError(f"{type(entity).__name__} '{entity.id}' does not exist")
        self._apply_changes(row, entity)
        await self.db.flush()

    async def remove(self, entity: EntityType) -> None:
        """Delete an aggregate's row if present"""
        row = await self._get_model(entity.id)
        if row is not None:
            await self.db.delete(row)
            await self.db.flush()

    async def exists(self, id: Any) -> bool:
        model: Any = self.model
        result = await self.db.execute(select(exists().where(model.id == id)))
        return bool(result.scalar())

    @abstractmethod
    def _to_entity(self, row: ModelType) -> EntityType:
        """Rebuild the aggregate from a stored row"""

    @abstractmethod
    def _to_model(self, entity: EntityType) -> ModelType:
        """Build a new row from an aggregate"""

    @abstractmethod
    def _apply_changes(self, row: ModelType, entity: EntityType) -> None:
        """Copy mutable aggregate state onto an existing row"""
