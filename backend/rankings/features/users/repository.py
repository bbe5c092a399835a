"""
User repository.

Data access layer for User accounts.
"""

from datetime import date

from sqlalchemy.ext.asyncio import AsyncSession

from rankings.shared.repository import BaseRepository
from .models import User


class UserRepository(BaseRepository[User]):
    """Repository for User operations."""

    def __init__(self, db: AsyncSession):
        super().__init__(db, User)

    async def get_by_wca_id(self, wca_id: str) -> User | None:
        """
        Get the account linked to a competitor.

        Args:
            wca_id: Competitor's WCA ID

        Returns:
            User if the competitor has an account, None otherwise
        """
        return await self.get_by(wca_id=wca_id)

    async def mirror_person(
        self,
        user: User,
        name: str,
        country_iso2: str,
        dob: date | None,
    ) -> User:
        """
        Copy the competitor's current identity onto the account.

        Args:
            user: Linked account
            name: Current competitor name
            country_iso2: ISO code of the current country
            dob: Current date of birth

        Returns:
            Updated user
        """
        return await self.update(user, name=name, country_iso2=country_iso2, dob=dob)
