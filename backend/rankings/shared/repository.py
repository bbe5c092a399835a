"""
Base repository for registry tables.

Feature repositories subclass it with their model and add the queries
specific to that table:

    class PersonRepository(BaseRepository[Person]):
        def __init__(self, db: AsyncSession):
            super().__init__(db, Person)

Writes only flush. The service running a correction decides when the
session commits, so identity rows, result snapshots and the linked account
land in the same transaction.
"""

from typing import TypeVar, Generic, Type
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

T = TypeVar("T")


class BaseRepository(Generic[T]):
    """Lookup and flush-only write helpers shared by feature repositories."""

    def __init__(self, db: AsyncSession, model: Type[T]):
        self.db = db
        self.model = model

    async def get_by_id(self, id: str | int) -> T | None:
        """
        Get a row by primary key.

        Countries and competitions use their natural string ids
        ("New Zealand", "WC2017"); other tables use integers or uuids.
        """
        result = await self.db.execute(
            select(self.model).where(self.model.id == id)
        )
        return result.scalar_one_or_none()

    async def get_by(self, **filters) -> T | None:
        """
        Get the single row matching all column filters.

        Args:
            **filters: Column name-value pairs, e.g. wca_id="2009ZEMD01", sub_id=1

        Returns:
            Matching row or None

        Raises:
            MultipleResultsFound: The filters do not identify one row
        """
        query = select(self.model).filter_by(**filters)
        result = await self.db.execute(query)
        return result.scalar_one_or_none()

    async def create(self, **values) -> T:
        """Add a row and flush it so generated ids and defaults are loaded."""
        entity = self.model(**values)
        self.db.add(entity)
        await self.db.flush()
        await self.db.refresh(entity)
        return entity

    async def update(self, entity: T, **values) -> T:
        """Set column values on a loaded row and flush them."""
        for column, value in values.items():
            setattr(entity, column, value)
        await self.db.flush()
        await self.db.refresh(entity)
        return entity
