"""
Geography reference tables.

Models:
- Continent: e.g. "_Europe"
- Country: e.g. "New Zealand" with ISO code "NZ"
"""

from sqlalchemy import Column, String, ForeignKey

from rankings.models.base import Base


class Continent(Base):
    """Continent used for continental championships."""

    __tablename__ = "continents"

    id = Column(String(50), primary_key=True)  # "_Oceania"
    name = Column(String(50), nullable=False)

    def __repr__(self):
        return f"<Continent {self.id}>"


class Country(Base):
    """
    Country a competitor represents.

    Persons and results reference countries by ``id`` (the English name);
    user accounts store the ISO 3166-1 alpha-2 code instead.
    """

    __tablename__ = "countries"

    id = Column(String(50), primary_key=True)  # "New Zealand"
    name = Column(String(50), nullable=False)
    iso2 = Column(String(2), unique=True, nullable=False)  # "NZ"
    continent_id = Column(String(50), ForeignKey("continents.id"), nullable=False, index=True)

    def __repr__(self):
        return f"<Country {self.id} ({self.iso2})>"
