"""
Country repository.

Data access layer for Country lookups.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from rankings.shared.repository import BaseRepository
from .models import Country


class CountryRepository(BaseRepository[Country]):
    """Repository for Country operations."""

    def __init__(self, db: AsyncSession):
        super().__init__(db, Country)

    async def ids_in_continent(self, continent_id: str) -> list[str]:
        """
        Get ids of all countries on a continent.

        Args:
            continent_id: Continent id, e.g. "_Europe"

        Returns:
            Country ids in alphabetical order
        """
        result = await self.db.execute(
            select(Country.id)
            .where(Country.continent_id == continent_id)
            .order_by(Country.id)
        )
        return list(result.scalars().all())
