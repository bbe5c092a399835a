"""
PersonService: competitor identity corrections and result-history aggregates.

Two ways to change who a competitor is:

- correct_identity: fixes a data-entry mistake. The current row is
  overwritten and results recorded under the current identity are rewritten.
- split_identity: records a real-world change (e.g. a competitor moved
  countries). The old identity is kept as a historical row and results keep
  their original attribution.

Both run as one transaction together with the linked user account update.
"""

import logging
from contextlib import asynccontextmanager
from datetime import date
from typing import AsyncIterator

from sqlalchemy.ext.asyncio import AsyncSession

from rankings.shared.constants import ChampionshipScope, WORLD_CHAMPIONSHIP_TYPE
from rankings.shared.exceptions import (
    ValidationError,
    PersonNotFoundError,
    IdentityIntegrityError,
)
from rankings.features.competitions.repository import CompetitionRepository
from rankings.features.countries.models import Country
from rankings.features.countries.repository import CountryRepository
from rankings.features.results.models import Result
from rankings.features.results.repository import ResultRepository
from rankings.features.users.models import User
from rankings.features.users.repository import UserRepository
from .models import Person
from .podiums import PodiumResult, rerank_podiums
from .repository import PersonRepository

logger = logging.getLogger(__name__)


COUNTRY_REPRESENTED_BEFORE = (
    "Cannot change the country to a country the person has already represented in the past."
)
NAME_OR_COUNTRY_MUST_DIFFER = "The name or the country must be different to update the person."
UNKNOWN_COUNTRY = "Unknown country."
NAME_BLANK = "Name can't be blank."
NOT_CURRENT_IDENTITY = "Only the current identity of a person can be updated."


class PersonService:
    """Identity corrections and read-only aggregates for one competitor."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.persons = PersonRepository(db)
        self.results = ResultRepository(db)
        self.users = UserRepository(db)
        self.countries = CountryRepository(db)
        self.competitions = CompetitionRepository(db)

    # =========================================================================
    # Lookups
    # =========================================================================

    async def get_person(self, wca_id: str) -> Person:
        """Get the current identity of a competitor.

        Raises:
            PersonNotFoundError: Unknown WCA ID
        """
        person = await self.persons.get_current(wca_id)
        if person is None:
            raise PersonNotFoundError(wca_id)
        return person

    async def history(self, person: Person) -> list[Person]:
        """Historical identities of a competitor, oldest correction first."""
        return await self.persons.history(person.wca_id)

    # =========================================================================
    # Corrections
    # =========================================================================

    async def correct_identity(
        self,
        person: Person,
        name: str | None = None,
        country_id: str | None = None,
        dob: date | None = None,
    ) -> Person:
        """Fix the current identity in place.

        Results recorded under the current identity (same name and country
        snapshot) get the new name/country. Results recorded under a
        historical identity are left alone.

        Raises:
            ValidationError: Blank name, unknown country, or a country the
                competitor already represented under a historical identity.
        """
        self._ensure_current(person)
        new_name = self._clean_name(name, person.name)
        new_country_id = country_id if country_id is not None else person.country_id
        new_dob = dob if dob is not None else person.dob

        country = await self._validated_country(new_country_id)
        if new_country_id != person.country_id:
            represented = await self.persons.historical_country_ids(person.wca_id)
            if new_country_id in represented:
                raise ValidationError.on_field("country_id", COUNTRY_REPRESENTED_BEFORE)

        old_name, old_country_id = person.name, person.country_id
        async with self._transaction():
            await self.persons.update(person, name=new_name, country_id=new_country_id, dob=new_dob)
            if (old_name, old_country_id) != (new_name, new_country_id):
                updated = await self.results.rename_snapshot(
                    person.wca_id, old_name, old_country_id, new_name, new_country_id,
                )
                logger.info(f"Rewrote {updated} result snapshots for {person.wca_id}")
            await self._mirror_to_user(person, country)

        logger.info(
            f"Corrected {person.wca_id}: name={old_name!r}->{new_name!r}, "
            f"country={old_country_id!r}->{new_country_id!r}"
        )
        return person

    async def split_identity(
        self,
        person: Person,
        name: str | None = None,
        country_id: str | None = None,
        dob: date | None = None,
    ) -> Person:
        """Record a real-world identity change, preserving the old identity.

        The old name/country are stored as a new historical row at the next
        sub id; the current row takes the new values. Results are not touched.

        Returns:
            The created historical row

        Raises:
            ValidationError: Neither name nor country differs from the current
                values, or the country is unknown.
        """
        self._ensure_current(person)
        name_changed = name is not None and name.strip() != person.name
        country_changed = country_id is not None and country_id != person.country_id
        if not (name_changed or country_changed):
            raise ValidationError.on_base(NAME_OR_COUNTRY_MUST_DIFFER)

        new_name = self._clean_name(name, person.name)
        new_country_id = country_id if country_id is not None else person.country_id
        new_dob = dob if dob is not None else person.dob
        country = await self._validated_country(new_country_id)

        next_sub_id = await self.persons.max_sub_id(person.wca_id) + 1
        async with self._transaction():
            snapshot = await self.persons.create_snapshot(person, next_sub_id)
            await self.persons.update(person, name=new_name, country_id=new_country_id, dob=new_dob)
            await self._mirror_to_user(person, country)

        logger.info(
            f"Split {person.wca_id}: kept {snapshot.name!r}/{snapshot.country_id!r} "
            f"as sub id {next_sub_id}"
        )
        return snapshot

    # =========================================================================
    # Aggregates
    # =========================================================================

    async def likely_officiants(self, person: Person) -> list[User]:
        """Delegates the competitor has most likely met.

        Walks the competitor's competitions from oldest to newest and collects
        their delegates, each delegate listed once at its first appearance.
        """
        competition_ids = await self.results.competition_ids_for(person.wca_id)
        competitions = await self.competitions.get_many_by_start_date(competition_ids)

        seen: set[str] = set()
        delegates: list[User] = []
        for competition in competitions:
            for delegate in await self.competitions.delegates_for(competition.id):
                if delegate.id not in seen:
                    seen.add(delegate.id)
                    delegates.append(delegate)
        return delegates

    async def world_championship_podiums(self, person: Person) -> list[Result]:
        """Top-3 finals at World Championships, newest first, then by event."""
        return await self.results.world_podiums(person.wca_id, WORLD_CHAMPIONSHIP_TYPE)

    async def championship_podiums(self, person: Person) -> dict[ChampionshipScope, list[PodiumResult]]:
        """Champion titles per scope.

        Only competitors eligible for a scope's title (any country for world,
        countries of the continent for continental, the competitor's country
        for national) take part in the re-ranking; everyone else is skipped,
        as are DNF/DNS results.
        """
        country = await self.countries.get_by_id(person.country_id)
        if country is None:
            raise IdentityIntegrityError(f"Country {person.country_id!r} of {person.wca_id} is missing")

        scopes = {
            ChampionshipScope.WORLD: (WORLD_CHAMPIONSHIP_TYPE, None),
            ChampionshipScope.CONTINENTAL: (
                country.continent_id,
                await self.countries.ids_in_continent(country.continent_id),
            ),
            ChampionshipScope.NATIONAL: (country.iso2, [country.id]),
        }

        podiums: dict[ChampionshipScope, list[PodiumResult]] = {}
        for scope, (championship_type, country_ids) in scopes.items():
            rows = await self.results.championship_finals_with(
                person.wca_id, championship_type, country_ids,
            )
            podiums[scope] = rerank_podiums(rows, person.wca_id)
        return podiums

    # =========================================================================
    # Internals
    # =========================================================================

    @asynccontextmanager
    async def _transaction(self) -> AsyncIterator[None]:
        """Commit everything done inside the block, or nothing."""
        try:
            yield
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise

    @staticmethod
    def _ensure_current(person: Person) -> None:
        if not person.is_current:
            raise ValidationError.on_base(NOT_CURRENT_IDENTITY)

    @staticmethod
    def _clean_name(name: str | None, current: str) -> str:
        if name is None:
            return current
        name = name.strip()
        if not name:
            raise ValidationError.on_field("name", NAME_BLANK)
        return name

    async def _validated_country(self, country_id: str) -> Country:
        country = await self.countries.get_by_id(country_id)
        if country is None:
            raise ValidationError.on_field("country_id", UNKNOWN_COUNTRY)
        return country

    async def _mirror_to_user(self, person: Person, country: Country) -> None:
        user = await self.users.get_by_wca_id(person.wca_id)
        if user is None:
            logger.debug(f"{person.wca_id} has no user account, nothing to mirror")
            return
        await self.users.mirror_person(user, person.name, country.iso2, person.dob)
