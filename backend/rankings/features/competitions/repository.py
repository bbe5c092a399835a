"""
Competition repositories.

Data access layer for competitions, their championships, delegates and
media.
"""

from datetime import datetime

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from rankings.shared.constants import MediumType, MediumStatus
from rankings.shared.exceptions import ValidationError
from rankings.shared.repository import BaseRepository
from rankings.features.users.models import User
from .models import Competition, Championship, CompetitionDelegate, CompetitionMedium


class CompetitionRepository(BaseRepository[Competition]):
    """Repository for Competition operations."""

    def __init__(self, db: AsyncSession):
        super().__init__(db, Competition)

    async def get_many_by_start_date(self, competition_ids: list[str]) -> list[Competition]:
        """
        Load competitions ordered by start date (oldest first).

        Args:
            competition_ids: Competition ids to load

        Returns:
            Competitions sorted by start date, then id
        """
        if not competition_ids:
            return []
        result = await self.db.execute(
            select(Competition)
            .where(Competition.id.in_(competition_ids))
            .order_by(Competition.start_date, Competition.id)
        )
        return list(result.scalars().all())

    async def add_championship(self, competition: Competition, championship_type: str) -> Championship:
        """Flag a competition as a championship of the given type."""
        championship = Championship(
            competition_id=competition.id,
            championship_type=championship_type,
        )
        self.db.add(championship)
        await self.db.flush()
        return championship

    async def add_delegate(self, competition: Competition, delegate: User) -> CompetitionDelegate:
        """Append a delegate to the competition's delegate list."""
        link = CompetitionDelegate(competition_id=competition.id, delegate_id=delegate.id)
        self.db.add(link)
        await self.db.flush()
        return link

    async def delegates_for(self, competition_id: str) -> list[User]:
        """
        Get delegates of a competition.

        Args:
            competition_id: Competition id

        Returns:
            Delegates in the order they were assigned
        """
        result = await self.db.execute(
            select(User)
            .join(CompetitionDelegate, CompetitionDelegate.delegate_id == User.id)
            .where(CompetitionDelegate.competition_id == competition_id)
            .order_by(CompetitionDelegate.id)
        )
        return list(result.scalars().all())


class CompetitionMediumRepository(BaseRepository[CompetitionMedium]):
    """Repository for CompetitionMedium operations."""

    def __init__(self, db: AsyncSession):
        super().__init__(db, CompetitionMedium)

    async def submit(
        self,
        competition: Competition,
        medium_type: str,
        text: str,
        uri: str,
        submitter_name: str | None = None,
        submitter_email: str | None = None,
    ) -> CompetitionMedium:
        """
        Submit a media item for moderation.

        Args:
            competition: Competition the item belongs to
            medium_type: One of the MediumType values
            text: Link text
            uri: Link target

        Returns:
            Created pending medium

        Raises:
            ValidationError: Unknown medium type
        """
        try:
            MediumType(medium_type)
        except ValueError:
            raise ValidationError.on_field("type", f"'{medium_type}' is not a valid type") from None
        return await self.create(
            competition_id=competition.id,
            type=medium_type,
            status=MediumStatus.PENDING.value,
            text=text,
            uri=uri,
            submitter_name=submitter_name,
            submitter_email=submitter_email,
        )

    async def accept(self, medium: CompetitionMedium) -> CompetitionMedium:
        """Mark a pending medium as accepted."""
        return await self.update(
            medium,
            status=MediumStatus.ACCEPTED.value,
            decided_at=datetime.utcnow(),
        )

    async def list_for_competition(
        self,
        competition_id: str,
        status: MediumStatus | None = None,
    ) -> list[CompetitionMedium]:
        """Get media of a competition, optionally filtered by status."""
        query = (
            select(CompetitionMedium)
            .where(CompetitionMedium.competition_id == competition_id)
            .order_by(CompetitionMedium.id)
        )
        if status is not None:
            query = query.where(CompetitionMedium.status == status.value)
        result = await self.db.execute(query)
        return list(result.scalars().all())
