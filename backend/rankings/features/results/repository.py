"""
Result repository.

Data access layer for historical results. All podium queries only consider
final rounds with a successful best time.
"""

from sqlalchemy import select, update, exists, and_
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import aliased

from rankings.shared.constants import FINAL_ROUND_TYPE_IDS, PODIUM_POSITIONS
from rankings.shared.repository import BaseRepository
from rankings.features.competitions.models import Competition, Championship
from .models import Result


def _succeeded_final():
    return and_(
        Result.round_type_id.in_(FINAL_ROUND_TYPE_IDS),
        Result.best > 0,
    )


class ResultRepository(BaseRepository[Result]):
    """Repository for Result operations."""

    def __init__(self, db: AsyncSession):
        super().__init__(db, Result)

    async def for_person(self, wca_id: str) -> list[Result]:
        """Get all results of a competitor in insertion order."""
        result = await self.db.execute(
            select(Result).where(Result.person_id == wca_id).order_by(Result.id)
        )
        return list(result.scalars().all())

    async def competition_ids_for(self, wca_id: str) -> list[str]:
        """
        Get ids of competitions a competitor has results in.

        Args:
            wca_id: Competitor's WCA ID

        Returns:
            Distinct competition ids (unordered)
        """
        result = await self.db.execute(
            select(Result.competition_id)
            .where(Result.person_id == wca_id)
            .distinct()
        )
        return list(result.scalars().all())

    async def rename_snapshot(
        self,
        wca_id: str,
        old_name: str,
        old_country_id: str,
        new_name: str,
        new_country_id: str,
    ) -> int:
        """
        Rewrite the identity snapshot of results recorded under one identity.

        Only rows whose snapshot matches ``old_name`` and ``old_country_id``
        are touched, so results recorded under historical identities keep
        their attribution.

        Returns:
            Number of results updated
        """
        result = await self.db.execute(
            update(Result)
            .where(Result.person_id == wca_id)
            .where(Result.person_name == old_name)
            .where(Result.country_id == old_country_id)
            .values(person_name=new_name, country_id=new_country_id)
            .execution_options(synchronize_session="fetch")
        )
        await self.db.flush()
        return result.rowcount

    async def world_podiums(self, wca_id: str, championship_type: str) -> list[Result]:
        """
        Get podium results of a competitor at championships of one type.

        Args:
            wca_id: Competitor's WCA ID
            championship_type: e.g. "world"

        Returns:
            Results ordered by competition start date (newest first), then event
        """
        result = await self.db.execute(
            select(Result)
            .join(Competition, Competition.id == Result.competition_id)
            .join(Championship, Championship.competition_id == Result.competition_id)
            .where(Result.person_id == wca_id)
            .where(Championship.championship_type == championship_type)
            .where(Result.pos.between(PODIUM_POSITIONS.start, PODIUM_POSITIONS.stop - 1))
            .where(_succeeded_final())
            .order_by(Competition.start_date.desc(), Result.event_id)
        )
        return list(result.scalars().all())

    async def championship_finals_with(
        self,
        wca_id: str,
        championship_type: str,
        country_ids: list[str] | None = None,
    ) -> list[tuple[Result, Competition]]:
        """
        Get every successful final result of the championship events a
        competitor took part in.

        Args:
            wca_id: Competitor whose events are looked up
            championship_type: Championship type of the competitions
            country_ids: Restrict to results recorded for these countries
                (None = any country)

        Returns:
            (result, competition) pairs ordered by competition start date
            (newest first), competition, event and position
        """
        mine = aliased(Result)
        participated = exists().where(
            mine.person_id == wca_id,
            mine.competition_id == Result.competition_id,
            mine.event_id == Result.event_id,
            mine.round_type_id == Result.round_type_id,
        )
        query = (
            select(Result, Competition)
            .join(Competition, Competition.id == Result.competition_id)
            .join(Championship, Championship.competition_id == Result.competition_id)
            .where(Championship.championship_type == championship_type)
            .where(_succeeded_final())
            .where(participated)
            .order_by(
                Competition.start_date.desc(),
                Competition.id,
                Result.event_id,
                Result.pos,
                Result.id,
            )
        )
        if country_ids is not None:
            query = query.where(Result.country_id.in_(country_ids))
        result = await self.db.execute(query)
        return [(row[0], row[1]) for row in result.all()]
