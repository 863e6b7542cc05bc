"""
Generic CRUD helpers shared by the model-specific CRUD classes.

Helpers never commit: services own the transaction boundary.

Dependencies: sqlalchemy
System role: Foundation for all database CRUD operations
"""

from typing import Any, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from news_rag.boundary.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseCRUD(Generic[ModelT]):
    """Create and existence checks for one mapped model."""

    def __init__(self, model: type[ModelT]) -> None:
        self.model = model

    async def create(self, session: AsyncSession, **values: Any) -> ModelT:
        """
        Add a row and flush it.

        The flush assigns server and client defaults (ids, timestamps),
        which are then loaded back onto the returned instance.

        Args:
            session: Async database session
            **values: Column values

        Returns:
            The persisted, refreshed instance
        """
        instance = self.model(**values)
        session.add(instance)
        await session.flush()
        await session.refresh(instance)
        return instance

    async def exists(self, session: AsyncSession, id: Any) -> bool:
        """Whether a row with this primary key is present."""
        result = await session.execute(select(self.model.id).where(self.model.id == id).limit(1))
        return result.first() is not None
