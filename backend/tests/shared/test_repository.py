"""
Tests for BaseRepository.
"""

import pytest
from sqlalchemy.exc import MultipleResultsFound

from rankings.features.countries.models import Country
from rankings.shared.repository import BaseRepository


@pytest.fixture
def countries(db_session):
    return BaseRepository(db_session, Country)


class TestBaseRepository:
    """Tests for the shared lookup and write helpers."""

    async def test_get_by_natural_id(self, factory, countries):
        country = await countries.get_by_id("New Zealand")

        assert country.iso2 == "NZ"
        assert await countries.get_by_id("Atlantis") is None

    async def test_get_by_filters(self, factory, countries):
        country = await countries.get_by(iso2="DE", continent_id="_Europe")

        assert country.id == "Germany"
        assert await countries.get_by(iso2="DE", continent_id="_Oceania") is None

    async def test_get_by_ambiguous_filters(self, factory, countries):
        with pytest.raises(MultipleResultsFound):
            await countries.get_by(continent_id="_Europe")

    async def test_writes_are_not_committed(self, factory, countries, db_session):
        """create/update flush only; the caller decides whether to commit."""
        country = await countries.create(id="Fiji", name="Fiji", iso2="FJ", continent_id="_Oceania")
        await countries.update(country, name="Republic of Fiji")

        assert (await countries.get_by(iso2="FJ")).name == "Republic of Fiji"

        await db_session.rollback()

        assert await countries.get_by(iso2="FJ") is None
