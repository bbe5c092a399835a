"""
Geography reference data.

Usage:
    from rankings.features.countries import Country, CountryRepository
"""

from .models import Continent, Country
from .repository import CountryRepository

__all__ = [
    "Continent",
    "Country",
    "CountryRepository",
]
