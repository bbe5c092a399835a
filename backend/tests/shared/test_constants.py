"""
Tests for shared constants.
"""

from rankings.shared.constants import SolveTime, ChampionshipScope
from rankings.shared.exceptions import ValidationError


class TestSolveTime:
    """Tests for solve time sentinels."""

    def test_positive_time_succeeded(self):
        assert SolveTime.succeeded(1234)

    def test_sentinels_did_not_succeed(self):
        for value in (SolveTime.DNF_VALUE, SolveTime.DNS_VALUE, SolveTime.SKIPPED_VALUE, None):
            assert not SolveTime.succeeded(value)


class TestChampionshipScope:
    def test_scopes_compare_equal_to_their_names(self):
        assert ChampionshipScope.NATIONAL == "national"
        assert {ChampionshipScope.NATIONAL: []}["national"] == []


class TestValidationError:
    """Tests for ValidationError message layout."""

    def test_field_error(self):
        error = ValidationError.on_field("country_id", "Unknown country.")

        assert error.errors == {"country_id": ["Unknown country."]}
        assert str(error) == "country_id: Unknown country."

    def test_base_error(self):
        assert ValidationError.on_base("Nope.").errors == {"base": ["Nope."]}
