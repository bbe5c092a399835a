"""
Tests for PersonService identity corrections.

Covers fixing the current identity in place and splitting off a historical
identity under a new sub id.
"""

from datetime import date

import pytest

from rankings.features.persons import PersonService
from rankings.features.persons.service import (
    COUNTRY_REPRESENTED_BEFORE,
    NAME_OR_COUNTRY_MUST_DIFFER,
)
from rankings.shared.exceptions import ValidationError


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
async def person(factory):
    return await factory.person_who_has_competed_once(name="Feliks Zemdegs", country_id="Australia")


@pytest.fixture
async def user(factory, person):
    return await factory.user(person=person, country_iso2="AU")


@pytest.fixture
def service(db_session):
    return PersonService(db_session)


async def _snapshots(service, person):
    wca_id = person.wca_id
    service.db.expire_all()
    results = await service.results.for_person(wca_id)
    return (
        sorted({r.person_name for r in results}),
        sorted({r.country_id for r in results}),
    )


# =============================================================================
# Fixing the person
# =============================================================================

class TestCorrectIdentity:
    """Tests for correct_identity."""

    async def test_fails_for_country_of_historical_identity(self, factory, service, person, user):
        """A country already represented under a higher sub id is rejected."""
        await factory.person(wca_id=person.wca_id, sub_id=2, name=person.name, country_id="New Zealand")

        with pytest.raises(ValidationError) as exc_info:
            await service.correct_identity(person, country_id="New Zealand")

        assert exc_info.value.errors == {"country_id": [COUNTRY_REPRESENTED_BEFORE]}
        current = await service.get_person(person.wca_id)
        assert current.country_id == "Australia"

    async def test_keeping_the_same_country_is_allowed(self, factory, service, person, user):
        """Only a country change is checked against the history."""
        await factory.person(wca_id=person.wca_id, sub_id=2, name="Old Name", country_id="Australia")

        await service.correct_identity(person, name="Feliks S. Zemdegs")

        assert person.name == "Feliks S. Zemdegs"

    async def test_updates_results_snapshot(self, service, person, user):
        """Results recorded under the current identity get the new values."""
        await service.correct_identity(person, name="New Name", country_id="New Zealand")

        names, countries = await _snapshots(service, person)
        assert names == ["New Name"]
        assert countries == ["New Zealand"]

    async def test_leaves_results_of_historical_identity(self, factory, service, person, user):
        """Results recorded under an older identity keep their snapshot."""
        await factory.person_who_has_competed_once(
            wca_id=person.wca_id, sub_id=2, name="Old Name", country_id="France",
        )

        await service.correct_identity(person, name="New Name", country_id="New Zealand")

        names, countries = await _snapshots(service, person)
        assert names == ["New Name", "Old Name"]
        assert countries == ["France", "New Zealand"]

    async def test_updates_the_associated_user(self, service, person, user):
        """The linked account mirrors name, ISO country code and dob."""
        await service.correct_identity(
            person, name="New Name", country_id="New Zealand", dob=date(1990, 10, 10),
        )

        await service.db.refresh(user)
        assert user.name == "New Name"
        assert user.country_iso2 == "NZ"
        assert user.dob == date(1990, 10, 10)

    async def test_person_without_account(self, factory, service):
        """Competitors without a user account can still be corrected."""
        person = await factory.person_who_has_competed_once(name="No Account", country_id="USA")

        await service.correct_identity(person, name="Has No Account")

        names, _ = await _snapshots(service, person)
        assert names == ["Has No Account"]

    async def test_unknown_country(self, service, person, user):
        with pytest.raises(ValidationError) as exc_info:
            await service.correct_identity(person, country_id="Atlantis")

        assert "country_id" in exc_info.value.errors

    async def test_blank_name(self, service, person, user):
        with pytest.raises(ValidationError) as exc_info:
            await service.correct_identity(person, name="   ")

        assert "name" in exc_info.value.errors

    async def test_is_all_or_nothing(self, service, person, user, monkeypatch):
        """A failure after the person row was written rolls everything back."""
        async def broken_mirror(*args, **kwargs):
            raise RuntimeError("user store unavailable")

        monkeypatch.setattr(service.users, "mirror_person", broken_mirror)
        wca_id = person.wca_id

        with pytest.raises(RuntimeError):
            await service.correct_identity(person, name="New Name", country_id="New Zealand")

        current = await service.get_person(wca_id)
        assert (current.name, current.country_id) == ("Feliks Zemdegs", "Australia")
        names, countries = await _snapshots(service, person)
        assert names == ["Feliks Zemdegs"]
        assert countries == ["Australia"]


# =============================================================================
# Updating the person using sub id
# =============================================================================

class TestSplitIdentity:
    """Tests for split_identity."""

    async def test_fails_if_name_and_country_unchanged(self, service, person, user):
        with pytest.raises(ValidationError) as exc_info:
            await service.split_identity(person, name="Feliks Zemdegs")

        assert exc_info.value.errors == {"base": [NAME_OR_COUNTRY_MUST_DIFFER]}

    async def test_fails_if_name_and_country_not_passed(self, service, person, user):
        with pytest.raises(ValidationError) as exc_info:
            await service.split_identity(person, dob=date(1990, 10, 10))

        assert exc_info.value.errors == {"base": [NAME_OR_COUNTRY_MUST_DIFFER]}
        assert await service.persons.max_sub_id(person.wca_id) == 1

    async def test_does_not_update_results(self, service, person, user):
        await service.split_identity(person, name="New Name", country_id="New Zealand")

        names, countries = await _snapshots(service, person)
        assert names == ["Feliks Zemdegs"]
        assert countries == ["Australia"]

    async def test_creates_historical_row_with_old_data(self, service, person, user):
        """The old identity is stored at sub id 2; sub id 1 holds the new one."""
        snapshot = await service.split_identity(person, name="New Name", country_id="New Zealand")

        assert (snapshot.wca_id, snapshot.sub_id) == (person.wca_id, 2)
        assert (snapshot.name, snapshot.country_id) == ("Feliks Zemdegs", "Australia")

        current = await service.get_person(person.wca_id)
        assert (current.name, current.country_id) == ("New Name", "New Zealand")

    async def test_sub_id_is_one_above_the_highest(self, factory, service, person, user):
        await factory.person(wca_id=person.wca_id, sub_id=2, name="Older", country_id="France")
        await factory.person(wca_id=person.wca_id, sub_id=3, name="Oldest", country_id="Germany")

        snapshot = await service.split_identity(person, country_id="New Zealand")

        assert snapshot.sub_id == 4
        history = await service.history(person)
        assert [p.sub_id for p in history] == [2, 3, 4]

    async def test_updates_the_associated_user(self, service, person, user):
        await service.split_identity(
            person, name="New Name", country_id="New Zealand", dob=date(1990, 10, 10),
        )

        await service.db.refresh(user)
        assert user.name == "New Name"
        assert user.country_iso2 == "NZ"
        assert user.dob == date(1990, 10, 10)

    async def test_only_current_identity_can_be_split(self, factory, service, person):
        old = await factory.person(wca_id=person.wca_id, sub_id=2, name="Old", country_id="France")

        with pytest.raises(ValidationError):
            await service.split_identity(old, name="Other")


# =============================================================================
# Combined scenarios
# =============================================================================

class TestSplitThenFix:
    """A fix after a split never reaches results of the older identity."""

    async def test_updating_country_then_fixing_name(self, service, person, user):
        await service.split_identity(person, country_id="New Zealand")
        await service.correct_identity(person, name="Felix Zemdegs")

        names, countries = await _snapshots(service, person)
        assert names == ["Feliks Zemdegs"]
        assert countries == ["Australia"]

    async def test_updating_name_then_fixing_country(self, service, person, user):
        await service.split_identity(person, name="Felix Zemdegs")
        await service.correct_identity(person, country_id="New Zealand")

        names, countries = await _snapshots(service, person)
        assert names == ["Feliks Zemdegs"]
        assert countries == ["Australia"]
