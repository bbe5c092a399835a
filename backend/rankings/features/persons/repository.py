"""
Person repository.

Data access layer for competitor identity rows.
"""

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from rankings.shared.repository import BaseRepository
from .models import Person, CURRENT_SUB_ID


class PersonRepository(BaseRepository[Person]):
    """Repository for Person operations."""

    def __init__(self, db: AsyncSession):
        super().__init__(db, Person)

    async def get_current(self, wca_id: str) -> Person | None:
        """
        Get the current identity (sub id 1) of a competitor.

        Args:
            wca_id: Competitor's WCA ID

        Returns:
            Current person row, None if the WCA ID is unknown
        """
        return await self.get_by(wca_id=wca_id, sub_id=CURRENT_SUB_ID)

    async def history(self, wca_id: str) -> list[Person]:
        """
        Get the historical identities of a competitor.

        Returns:
            Rows with sub id > 1, oldest correction first
        """
        result = await self.db.execute(
            select(Person)
            .where(Person.wca_id == wca_id)
            .where(Person.sub_id > CURRENT_SUB_ID)
            .order_by(Person.sub_id)
        )
        return list(result.scalars().all())

    async def historical_country_ids(self, wca_id: str) -> set[str]:
        """Get countries the competitor represented under historical identities."""
        result = await self.db.execute(
            select(Person.country_id)
            .where(Person.wca_id == wca_id)
            .where(Person.sub_id > CURRENT_SUB_ID)
            .distinct()
        )
        return set(result.scalars().all())

    async def max_sub_id(self, wca_id: str) -> int:
        """Get the highest sub id in use for a competitor (0 if none)."""
        result = await self.db.execute(
            select(func.max(Person.sub_id)).where(Person.wca_id == wca_id)
        )
        return result.scalar() or 0

    async def create_snapshot(self, person: Person, sub_id: int) -> Person:
        """
        Store a copy of an identity under a new sub id.

        Args:
            person: Identity whose current values are preserved
            sub_id: Sub id of the new historical row

        Returns:
            Created historical row
        """
        return await self.create(
            wca_id=person.wca_id,
            sub_id=sub_id,
            name=person.name,
            country_id=person.country_id,
            gender=person.gender,
            dob=person.dob,
        )
