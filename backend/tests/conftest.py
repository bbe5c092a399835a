"""Shared test fixtures and factories."""

import itertools
from collections.abc import AsyncGenerator
from datetime import date, timedelta
from pathlib import Path

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from rankings.models import load_all_models
from rankings.features.competitions.models import Competition
from rankings.features.competitions.repository import CompetitionRepository
from rankings.features.countries.models import Continent, Country
from rankings.features.persons.models import Person
from rankings.features.results.models import Result
from rankings.features.users.models import User
from rankings.shared.constants import DelegateStatus


# =============================================================================
# Database Fixtures
# =============================================================================


@pytest.fixture
async def engine(tmp_path: Path) -> AsyncGenerator[AsyncEngine, None]:
    """Create a temporary test database with all tables."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(load_all_models().create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Get a database session for testing."""
    async with session_factory() as session:
        yield session


# =============================================================================
# Factories
# =============================================================================

# (continent id, continent name, [(country id, iso2), ...])
GEOGRAPHY = [
    ("_Oceania", "Oceania", [("Australia", "AU"), ("New Zealand", "NZ")]),
    ("_Europe", "Europe", [("France", "FR"), ("Germany", "DE")]),
    ("_North America", "North America", [("USA", "US"), ("Canada", "CA")]),
]


class RegistryFactory:
    """Creates committed registry rows with sensible defaults."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self._seq = itertools.count(1)

    async def _save(self, *entities):
        self.db.add_all(entities)
        await self.db.commit()
        return entities[0]

    async def seed_geography(self) -> None:
        for continent_id, continent_name, countries in GEOGRAPHY:
            self.db.add(Continent(id=continent_id, name=continent_name))
            for country_id, iso2 in countries:
                self.db.add(Country(id=country_id, name=country_id, iso2=iso2, continent_id=continent_id))
        await self.db.commit()

    async def person(
        self,
        name: str | None = None,
        country_id: str = "USA",
        wca_id: str | None = None,
        sub_id: int = 1,
        gender: str = "m",
        dob: date | None = date(1990, 1, 1),
    ) -> Person:
        n = next(self._seq)
        return await self._save(Person(
            wca_id=wca_id or f"2016TEST{n:02d}",
            sub_id=sub_id,
            name=name or f"Competitor {n}",
            country_id=country_id,
            gender=gender,
            dob=dob,
        ))

    async def user(self, person: Person | None = None, **kwargs) -> User:
        n = next(self._seq)
        fields = {
            "email": f"user{n}@example.com",
            "name": person.name if person else f"User {n}",
            "wca_id": person.wca_id if person else None,
        }
        fields.update(kwargs)
        return await self._save(User(**fields))

    async def delegate(self, name: str | None = None) -> User:
        n = next(self._seq)
        return await self.user(
            name=name or f"Delegate {n}",
            delegate_status=DelegateStatus.DELEGATE.value,
        )

    async def competition(
        self,
        starts: date | None = None,
        delegates: list[User] | None = None,
        championship_types: list[str] | tuple[str, ...] = (),
        country_id: str = "USA",
    ) -> Competition:
        n = next(self._seq)
        starts = starts or date.today() - timedelta(days=365)
        competition = await self._save(Competition(
            id=f"TestComp{n:04d}",
            name=f"Test Competition {n}",
            country_id=country_id,
            start_date=starts,
            end_date=starts + timedelta(days=1),
        ))
        if delegates is None:
            delegates = [await self.delegate()]
        competitions = CompetitionRepository(self.db)
        for delegate in delegates:
            await competitions.add_delegate(competition, delegate)
        for championship_type in championship_types:
            await competitions.add_championship(competition, championship_type)
        await self.db.commit()
        return competition

    async def result(
        self,
        person: Person,
        competition: Competition,
        pos: int = 1,
        event_id: str = "333",
        best: int = 1000,
        average: int = 1200,
        round_type_id: str = "f",
    ) -> Result:
        return await self._save(Result(
            person_id=person.wca_id,
            person_name=person.name,
            country_id=person.country_id,
            competition_id=competition.id,
            event_id=event_id,
            round_type_id=round_type_id,
            pos=pos,
            best=best,
            average=average,
        ))

    async def person_who_has_competed_once(self, **kwargs) -> Person:
        person = await self.person(**kwargs)
        competition = await self.competition(starts=date.today() - timedelta(days=10))
        await self.result(person, competition)
        return person


@pytest.fixture
async def factory(db_session: AsyncSession) -> RegistryFactory:
    """Factory bound to the test session, with countries seeded."""
    factory = RegistryFactory(db_session)
    await factory.seed_geography()
    return factory
